"""Unit tests for monkey.lexer — on-demand tokenization of Monkey source text."""
from __future__ import annotations

import pytest

from monkey.grammar.tokens import Token, TokenType
from monkey.lexer.lexer import Lexer, tokenize


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def types_of(tokens: list[Token]) -> list[TokenType]:
    """Return just the token types, excluding EOF."""
    return [t.type for t in tokens if t.type != TokenType.EOF]


# ---------------------------------------------------------------------------
# Empty and whitespace-only inputs
# ---------------------------------------------------------------------------


class TestEmptyInputs:
    def test_empty_string_produces_only_eof(self) -> None:
        tokens = tokenize("")
        assert len(tokens) == 1
        assert tokens[0].type is TokenType.EOF

    def test_whitespace_only_produces_only_eof(self) -> None:
        assert types_of(tokenize("  \t\r\n  ")) == []

    def test_eof_repeats_after_exhaustion(self) -> None:
        lexer = Lexer("x")
        assert lexer.next_token() == Token(TokenType.IDENT, "x")
        for _ in range(3):
            assert lexer.next_token().type is TokenType.EOF


# ---------------------------------------------------------------------------
# Keywords and identifiers
# ---------------------------------------------------------------------------


@pytest.mark.parametrize("source, expected_type", [
    ("let", TokenType.LET),
    ("return", TokenType.RETURN),
    ("true", TokenType.TRUE),
    ("false", TokenType.FALSE),
    ("foobar", TokenType.IDENT),
    ("_x9", TokenType.IDENT),
    ("letter", TokenType.IDENT),
])
def test_word_classification(source: str, expected_type: TokenType) -> None:
    tokens = tokenize(source)
    assert tokens[0].type is expected_type
    assert tokens[0].literal == source


# ---------------------------------------------------------------------------
# Operators and punctuation
# ---------------------------------------------------------------------------


@pytest.mark.parametrize("source, expected_type", [
    ("=", TokenType.ASSIGN),
    ("!", TokenType.BANG),
    ("-", TokenType.MINUS),
    ("+", TokenType.PLUS),
    ("/", TokenType.SLASH),
    ("*", TokenType.ASTERISK),
    ("<", TokenType.LT),
    (">", TokenType.GT),
    ("==", TokenType.EQ),
    ("!=", TokenType.NOT_EQ),
    ("(", TokenType.LPAREN),
    (")", TokenType.RPAREN),
    (";", TokenType.SEMICOLON),
])
def test_symbol_tokens(source: str, expected_type: TokenType) -> None:
    tokens = tokenize(source)
    assert types_of(tokens) == [expected_type]
    assert tokens[0].literal == source


def test_double_equals_is_one_token() -> None:
    assert types_of(tokenize("a == b")) == [TokenType.IDENT, TokenType.EQ, TokenType.IDENT]


def test_bang_then_assign_is_not_equal() -> None:
    assert types_of(tokenize("!=")) == [TokenType.NOT_EQ]
    assert types_of(tokenize("! =")) == [TokenType.BANG, TokenType.ASSIGN]


# ---------------------------------------------------------------------------
# Integers
# ---------------------------------------------------------------------------


class TestIntegers:
    def test_integer_keeps_raw_text(self) -> None:
        tokens = tokenize("007")
        assert tokens[0] == Token(TokenType.INT, "007")

    def test_minus_is_separate_token(self) -> None:
        assert types_of(tokenize("-5")) == [TokenType.MINUS, TokenType.INT]

    def test_huge_integer_is_still_one_token(self) -> None:
        tokens = tokenize("99999999999999999999")
        assert tokens[0] == Token(TokenType.INT, "99999999999999999999")

    def test_digits_then_letters_split(self) -> None:
        assert types_of(tokenize("5x")) == [TokenType.INT, TokenType.IDENT]


# ---------------------------------------------------------------------------
# Illegal characters
# ---------------------------------------------------------------------------


class TestIllegal:
    @pytest.mark.parametrize("ch", ["@", "#", "$", "{", "é"])
    def test_unknown_character_is_illegal_token(self, ch: str) -> None:
        tokens = tokenize(ch)
        assert tokens[0] == Token(TokenType.ILLEGAL, ch)

    def test_lexing_continues_after_illegal(self) -> None:
        assert types_of(tokenize("a @ b")) == [TokenType.IDENT, TokenType.ILLEGAL, TokenType.IDENT]


# ---------------------------------------------------------------------------
# Full statements and positions
# ---------------------------------------------------------------------------


def test_let_statement_token_stream() -> None:
    tokens = tokenize("let five = 5;")
    assert tokens == [
        Token(TokenType.LET, "let"),
        Token(TokenType.IDENT, "five"),
        Token(TokenType.ASSIGN, "="),
        Token(TokenType.INT, "5"),
        Token(TokenType.SEMICOLON, ";"),
        Token(TokenType.EOF, ""),
    ]


def test_expression_token_stream() -> None:
    assert types_of(tokenize("!-/*5; 5 < 10 > 5;")) == [
        TokenType.BANG, TokenType.MINUS, TokenType.SLASH, TokenType.ASTERISK,
        TokenType.INT, TokenType.SEMICOLON,
        TokenType.INT, TokenType.LT, TokenType.INT, TokenType.GT, TokenType.INT,
        TokenType.SEMICOLON,
    ]


def test_positions_are_recorded() -> None:
    tokens = tokenize("let x = 5;\n  x == 10")
    positions = [(t.line, t.col) for t in tokens]
    assert positions[:5] == [(1, 1), (1, 5), (1, 7), (1, 9), (1, 10)]
    assert positions[5:] == [(2, 3), (2, 5), (2, 8), (2, 10)]


def test_lexer_iteration_stops_after_eof() -> None:
    tokens = list(Lexer("a b"))
    assert [t.type for t in tokens] == [TokenType.IDENT, TokenType.IDENT, TokenType.EOF]
