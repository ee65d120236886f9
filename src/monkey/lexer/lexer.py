"""Monkey Lexer: converts raw source text into a stream of tokens.

The lexer is a single-pass character scanner driven on demand: each
call to ``next_token()`` scans exactly one token from the source.  Once
the input is exhausted it keeps returning the ``EOF`` token, so callers
can pull past the end without special casing.

The lexer never raises.  A character that cannot begin any token is
emitted as an ``ILLEGAL`` token carrying that character; reporting it is
left to the parser.

Integers are runs of ASCII digits kept as raw text (numeric conversion
happens in the parser; ``-`` is always a separate operator token).

Identifiers follow the pattern ``[A-Za-z_][A-Za-z0-9_]*`` and are
checked against the keyword table; matching identifiers are emitted
as their corresponding keyword token type.
"""
from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Final

from monkey.grammar.tokens import Token, TokenType, lookup_ident

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

_WHITESPACE: Final[frozenset[str]] = frozenset({" ", "\t", "\r", "\n"})

_SINGLE: Final[dict[str, TokenType]] = {
    "=": TokenType.ASSIGN,
    "!": TokenType.BANG,
    "-": TokenType.MINUS,
    "+": TokenType.PLUS,
    "/": TokenType.SLASH,
    "*": TokenType.ASTERISK,
    "<": TokenType.LT,
    ">": TokenType.GT,
    "(": TokenType.LPAREN,
    ")": TokenType.RPAREN,
    ";": TokenType.SEMICOLON,
}

_DOUBLE: Final[dict[str, TokenType]] = {
    "==": TokenType.EQ,
    "!=": TokenType.NOT_EQ,
}


def _is_ident_start(ch: str) -> bool:
    return ch == "_" or ("a" <= ch <= "z") or ("A" <= ch <= "Z")


def _is_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


class Lexer:
    """On-demand Monkey lexer.

    Parameters
    ----------
    source:
        The complete Monkey source text to scan.
    """

    __slots__ = ("_source", "_pos", "_line", "_col")

    def __init__(self, source: str) -> None:
        self._source: str = source
        self._pos: int = 0
        self._line: int = 1
        self._col: int = 1

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def next_token(self) -> Token:
        """Scan and return the next token.

        Returns
        -------
        Token
            The next token in the source.  After the end of input has been
            reached every call returns an ``EOF`` token.
        """
        self._skip_whitespace()
        line, col = self._line, self._col
        ch = self._current()

        if ch == "":
            return Token(TokenType.EOF, "", line, col)

        pair = ch + self._peek()
        if pair in _DOUBLE:
            self._advance()
            self._advance()
            return Token(_DOUBLE[pair], pair, line, col)

        if ch in _SINGLE:
            self._advance()
            return Token(_SINGLE[ch], ch, line, col)

        if _is_ident_start(ch):
            word = self._read_while(lambda c: _is_ident_start(c) or _is_digit(c))
            return Token(lookup_ident(word), word, line, col)

        if _is_digit(ch):
            digits = self._read_while(_is_digit)
            return Token(TokenType.INT, digits, line, col)

        self._advance()
        return Token(TokenType.ILLEGAL, ch, line, col)

    def __iter__(self) -> Iterator[Token]:
        """Yield tokens up to and including the first ``EOF``."""
        while True:
            token = self.next_token()
            yield token
            if token.type is TokenType.EOF:
                return

    # ------------------------------------------------------------------
    # Internal scanner
    # ------------------------------------------------------------------

    def _current(self) -> str:
        """Return the character at the current position without advancing."""
        return self._source[self._pos] if self._pos < len(self._source) else ""

    def _peek(self, offset: int = 1) -> str:
        """Return the character at ``pos + offset`` without advancing."""
        idx = self._pos + offset
        return self._source[idx] if idx < len(self._source) else ""

    def _advance(self) -> str:
        """Consume and return the current character, updating line/col."""
        ch = self._source[self._pos]
        self._pos += 1
        if ch == "\n":
            self._line += 1
            self._col = 1
        else:
            self._col += 1
        return ch

    def _skip_whitespace(self) -> None:
        while self._pos < len(self._source) and self._current() in _WHITESPACE:
            self._advance()

    def _read_while(self, accept: Callable[[str], bool]) -> str:
        start = self._pos
        while self._pos < len(self._source) and accept(self._current()):
            self._advance()
        return self._source[start : self._pos]


# ---------------------------------------------------------------------------
# Module-level convenience function
# ---------------------------------------------------------------------------


def tokenize(source: str) -> list[Token]:
    """Tokenize a Monkey source string and return the complete token list.

    Parameters
    ----------
    source:
        Monkey source text.

    Returns
    -------
    list[Token]
        All tokens in source order, terminated by a single ``EOF``.

    Example
    -------
    ::

        from monkey.lexer import tokenize
        tokens = tokenize("let x = 5;")
    """
    return list(Lexer(source))
