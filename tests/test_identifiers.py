"""Test identifier and keyword scanning, character classes, and boundaries."""

import pytest

from lox.tokens import KEYWORDS, TokenType, is_alpha, is_alpha_numeric, is_digit

from tests.conftest import assert_lexemes, assert_types


class TestCharacterClasses:
    def test_digits(self):
        for ch in "0123456789":
            assert is_digit(ch)
        assert not is_digit("a")
        assert not is_digit("")

    def test_alpha(self):
        for ch in "azAZ_":
            assert is_alpha(ch), f"Expected '{ch}' to be alpha"
        for ch in "09.-$ ":
            assert not is_alpha(ch), f"Expected '{ch}' to NOT be alpha"

    def test_non_ascii_letters_rejected(self):
        assert not is_alpha("é")
        assert not is_digit("٣")

    def test_alpha_numeric(self):
        assert is_alpha_numeric("x")
        assert is_alpha_numeric("7")
        assert is_alpha_numeric("_")
        assert not is_alpha_numeric("-")


class TestKeywordTable:
    def test_sixteen_keywords(self):
        assert len(KEYWORDS) == 16

    def test_read_only(self):
        with pytest.raises(TypeError):
            KEYWORDS["let"] = TokenType.VAR  # type: ignore[index]


class TestIdentifierScanning:
    def test_simple_word(self, lex):
        tokens = lex("hello")
        assert_types(tokens, [TokenType.IDENTIFIER])
        assert_lexemes(tokens, ["hello"])
        assert tokens[0].literal is None

    def test_underscores_and_digits(self, lex):
        tokens = lex("_foo_1 bar2")
        assert_lexemes(tokens, ["_foo_1", "bar2"])

    def test_leading_digit_splits(self, lex):
        tokens = lex("1abc")
        assert_types(tokens, [TokenType.NUMBER, TokenType.IDENTIFIER])
        assert_lexemes(tokens, ["1", "abc"])

    def test_stops_at_punctuation(self, lex):
        tokens = lex("foo.bar()")
        assert_types(
            tokens,
            [
                TokenType.IDENTIFIER,
                TokenType.DOT,
                TokenType.IDENTIFIER,
                TokenType.LEFT_PAREN,
                TokenType.RIGHT_PAREN,
            ],
        )

    @pytest.mark.parametrize("word", sorted(KEYWORDS))
    def test_keyword(self, lex, word):
        tokens = lex(word)
        assert_types(tokens, [KEYWORDS[word]])
        assert tokens[0].literal is None

    def test_keyword_prefix_is_identifier(self, lex):
        tokens = lex("classy orchid variable")
        assert_types(tokens, [TokenType.IDENTIFIER] * 3)

    def test_keywords_case_sensitive(self, lex):
        tokens = lex("Print VAR")
        assert_types(tokens, [TokenType.IDENTIFIER, TokenType.IDENTIFIER])
