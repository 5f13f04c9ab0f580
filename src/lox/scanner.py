"""Lox scanner: converts source text into a flat token list."""

from __future__ import annotations

from lox.errors import DiagnosticCollector, ErrorReporter
from lox.tokens import (
    KEYWORDS,
    ONE_OR_TWO_CHAR_TOKENS,
    SINGLE_CHAR_TOKENS,
    LiteralValue,
    Token,
    TokenType,
    is_alpha,
    is_alpha_numeric,
    is_digit,
)


class Scanner:
    """Tokenize Lox source text into a list of Token objects.

    Lexical errors are handed to *reporter* and scanning carries on, so the
    returned list is always complete and always ends with an EOF token.
    """

    def __init__(self, source: str, reporter: ErrorReporter | None = None) -> None:
        self._source = source
        self.reporter: ErrorReporter = reporter if reporter is not None else DiagnosticCollector()
        self._tokens: list[Token] = []
        self._start = 0
        self._current = 0
        self._line = 1
        self._start_line = 1

    def scan_tokens(self) -> list[Token]:
        """Scan the full source and return the token list."""
        while not self._is_at_end():
            self._start = self._current
            self._start_line = self._line
            self._scan_token()

        self._tokens.append(Token(TokenType.EOF, "", None, self._line))
        return self._tokens

    # ------------------------------------------------------------------
    # Cursor helpers
    # ------------------------------------------------------------------

    def _is_at_end(self) -> bool:
        return self._current >= len(self._source)

    def _peek(self) -> str:
        if self._is_at_end():
            return ""
        return self._source[self._current]

    def _peek_next(self) -> str:
        idx = self._current + 1
        if idx < len(self._source):
            return self._source[idx]
        return ""

    def _advance(self) -> str:
        ch = self._source[self._current]
        self._current += 1
        if ch == "\n":
            self._line += 1
        return ch

    def _match(self, expected: str) -> bool:
        """Consume the next character only if it is *expected*."""
        if self._peek() != expected:
            return False
        self._current += 1
        return True

    def _lexeme(self) -> str:
        return self._source[self._start : self._current]

    def _add_token(self, tt: TokenType, literal: LiteralValue = None) -> None:
        self._tokens.append(Token(tt, self._lexeme(), literal, self._start_line))

    def _error(self, line: int, message: str) -> None:
        self.reporter.report(line, "", message)

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------

    def _scan_token(self) -> None:
        ch = self._advance()

        tt = SINGLE_CHAR_TOKENS.get(ch)
        if tt is not None:
            self._add_token(tt)
            return

        pair = ONE_OR_TWO_CHAR_TOKENS.get(ch)
        if pair is not None:
            single, double = pair
            self._add_token(double if self._match("=") else single)
            return

        if ch == "*":
            # A stray closer; the '/' is left to be scanned on its own
            if self._peek() == "/":
                self._error(self._line, "No beginning for block comment.")
            else:
                self._add_token(TokenType.STAR)
            return

        if ch == "/":
            if self._match("/"):
                self._line_comment()
            elif self._match("*"):
                self._block_comment()
            else:
                self._add_token(TokenType.SLASH)
            return

        if ch in " \r\t\n":
            return

        if ch == '"':
            self._string()
            return

        if is_digit(ch):
            self._number()
            return

        if is_alpha(ch):
            self._identifier()
            return

        self._error(self._line, "Unexpected character.")

    # ------------------------------------------------------------------
    # Comments
    # ------------------------------------------------------------------

    def _line_comment(self) -> None:
        while self._peek() != "\n" and not self._is_at_end():
            self._advance()

    def _block_comment(self) -> None:
        """Skip a nestable /* ... */ comment; the opening pair is consumed."""
        depth = 1
        while depth > 0:
            if self._is_at_end():
                self._error(self._start_line, "Unterminated block comment.")
                return
            ch = self._peek()
            nxt = self._peek_next()
            if ch == "*" and nxt == "/":
                self._advance()
                self._advance()
                depth -= 1
            elif ch == "/" and nxt == "*":
                self._advance()
                self._advance()
                depth += 1
            else:
                self._advance()

    # ------------------------------------------------------------------
    # Literals
    # ------------------------------------------------------------------

    def _string(self) -> None:
        while self._peek() != '"' and not self._is_at_end():
            self._advance()

        if self._is_at_end():
            self._error(self._line, "Unterminated string.")
            return

        self._advance()  # closing quote
        self._add_token(TokenType.STRING, self._source[self._start + 1 : self._current - 1])

    def _number(self) -> None:
        # The first digit is already consumed; keep reading from _current
        while is_digit(self._peek()):
            self._advance()

        if self._peek() == "." and is_digit(self._peek_next()):
            self._advance()
            while is_digit(self._peek()):
                self._advance()

        self._add_token(TokenType.NUMBER, float(self._lexeme()))

    def _identifier(self) -> None:
        while is_alpha_numeric(self._peek()):
            self._advance()

        self._add_token(KEYWORDS.get(self._lexeme(), TokenType.IDENTIFIER))


def scan(source: str, reporter: ErrorReporter | None = None) -> list[Token]:
    """Convenience function: scan source text and return the token list."""
    return Scanner(source, reporter).scan_tokens()
