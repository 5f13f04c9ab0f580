"""Lox scanner: source text in, classified tokens out."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from lox.errors import ErrorReporter
    from lox.tokens import Token

__version__ = "0.1.0"


def tokenize(source: str, reporter: ErrorReporter | None = None) -> list[Token]:
    """Scan Lox source and return its tokens, ending with EOF."""
    from lox.scanner import scan

    return scan(source, reporter)
