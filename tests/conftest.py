"""Shared test fixtures and helpers."""

from __future__ import annotations

import pytest

from lox.errors import DiagnosticCollector
from lox.scanner import scan
from lox.tokens import Token, TokenType


@pytest.fixture
def lex():
    """Return a helper that scans source and returns tokens (excluding EOF)."""

    def _lex(source: str) -> list[Token]:
        tokens = scan(source)
        # Strip trailing EOF for convenience
        return [t for t in tokens if t.type != TokenType.EOF]

    return _lex


@pytest.fixture
def lex_with_errors():
    """Return a helper that scans source and returns (tokens without EOF, collector)."""

    def _lex(source: str) -> tuple[list[Token], DiagnosticCollector]:
        collector = DiagnosticCollector()
        tokens = scan(source, collector)
        return [t for t in tokens if t.type != TokenType.EOF], collector

    return _lex


def assert_types(tokens: list[Token], expected: list[TokenType]) -> None:
    """Assert that the token types match the expected list."""
    actual = [t.type for t in tokens]
    assert actual == expected, f"Expected {expected}, got {actual}"


def assert_lexemes(tokens: list[Token], expected: list[str]) -> None:
    """Assert that the token lexemes match the expected list."""
    actual = [t.lexeme for t in tokens]
    assert actual == expected, f"Expected {expected}, got {actual}"


def find_tokens(tokens: list[Token], tt: TokenType) -> list[Token]:
    """Return all tokens of the given type."""
    return [t for t in tokens if t.type == tt]
