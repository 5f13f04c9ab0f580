"""Token types, data structures, and character classification helpers."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum, auto
from types import MappingProxyType


class TokenType(Enum):
    # Single-character
    LEFT_PAREN = auto()  # (
    RIGHT_PAREN = auto()  # )
    LEFT_BRACE = auto()  # {
    RIGHT_BRACE = auto()  # }
    COMMA = auto()  # ,
    DOT = auto()  # .
    MINUS = auto()  # -
    PLUS = auto()  # +
    SEMICOLON = auto()  # ;
    SLASH = auto()  # /
    STAR = auto()  # *

    # One or two characters
    BANG = auto()  # !
    BANG_EQUAL = auto()  # !=
    EQUAL = auto()  # =
    EQUAL_EQUAL = auto()  # ==
    GREATER = auto()  # >
    GREATER_EQUAL = auto()  # >=
    LESS = auto()  # <
    LESS_EQUAL = auto()  # <=

    # Literals
    IDENTIFIER = auto()
    STRING = auto()  # literal is the text between the quotes
    NUMBER = auto()  # literal is a float

    # Keywords
    AND = auto()
    CLASS = auto()
    ELSE = auto()
    FALSE = auto()
    FUN = auto()
    FOR = auto()
    IF = auto()
    NIL = auto()
    OR = auto()
    PRINT = auto()
    RETURN = auto()
    SUPER = auto()
    THIS = auto()
    TRUE = auto()
    VAR = auto()
    WHILE = auto()

    EOF = auto()


LiteralValue = float | str | None


@dataclass(frozen=True, slots=True)
class Token:
    """A single scanner token: its kind, source text, decoded value, and line."""

    type: TokenType
    lexeme: str
    literal: LiteralValue
    line: int

    def __str__(self) -> str:
        literal = "-" if self.literal is None else self.literal
        return f"{self.type.name} {self.lexeme} {literal}"

    def to_dict(self) -> dict[str, object]:
        literal = self.literal
        # JSON has no spelling for inf; overlong digit runs overflow to it
        if isinstance(literal, float) and not math.isfinite(literal):
            literal = str(literal)
        return {
            "type": self.type.name,
            "lexeme": self.lexeme,
            "literal": literal,
            "line": self.line,
        }


# Single-character lexemes that never start a longer token
SINGLE_CHAR_TOKENS = MappingProxyType(
    {
        "(": TokenType.LEFT_PAREN,
        ")": TokenType.RIGHT_PAREN,
        "{": TokenType.LEFT_BRACE,
        "}": TokenType.RIGHT_BRACE,
        ",": TokenType.COMMA,
        ".": TokenType.DOT,
        "-": TokenType.MINUS,
        "+": TokenType.PLUS,
        ";": TokenType.SEMICOLON,
    }
)

# First character -> (single form, form with a trailing '=')
ONE_OR_TWO_CHAR_TOKENS = MappingProxyType(
    {
        "!": (TokenType.BANG, TokenType.BANG_EQUAL),
        "=": (TokenType.EQUAL, TokenType.EQUAL_EQUAL),
        "<": (TokenType.LESS, TokenType.LESS_EQUAL),
        ">": (TokenType.GREATER, TokenType.GREATER_EQUAL),
    }
)

KEYWORDS = MappingProxyType(
    {
        "and": TokenType.AND,
        "class": TokenType.CLASS,
        "else": TokenType.ELSE,
        "false": TokenType.FALSE,
        "for": TokenType.FOR,
        "fun": TokenType.FUN,
        "if": TokenType.IF,
        "nil": TokenType.NIL,
        "or": TokenType.OR,
        "print": TokenType.PRINT,
        "return": TokenType.RETURN,
        "super": TokenType.SUPER,
        "this": TokenType.THIS,
        "true": TokenType.TRUE,
        "var": TokenType.VAR,
        "while": TokenType.WHILE,
    }
)


def is_digit(ch: str) -> bool:
    """Return True if ch is an ASCII decimal digit."""
    return "0" <= ch <= "9"


def is_alpha(ch: str) -> bool:
    """Return True if ch can start an identifier (ASCII letter or underscore)."""
    return "a" <= ch <= "z" or "A" <= ch <= "Z" or ch == "_"


def is_alpha_numeric(ch: str) -> bool:
    """Return True if ch can continue an identifier."""
    return is_alpha(ch) or is_digit(ch)
