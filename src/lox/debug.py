"""--debug token table dump to stderr."""

from __future__ import annotations

import sys
from typing import TextIO

from lox.tokens import Token


def dump_tokens(tokens: list[Token], *, file: TextIO = sys.stderr) -> None:
    """Print an aligned line/type/lexeme/literal table to *file*."""
    if not tokens:
        return
    type_width = max(len(t.type.name) for t in tokens)
    line_width = len(str(tokens[-1].line))
    for tok in tokens:
        literal = "" if tok.literal is None else repr(tok.literal)
        row = f"{tok.line:>{line_width}}  {tok.type.name:<{type_width}}  {tok.lexeme!r}"
        if literal:
            row += f"  {literal}"
        file.write(row + "\n")
