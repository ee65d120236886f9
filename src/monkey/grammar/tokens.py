"""Token definitions for the Monkey expression language.

Defines the complete token vocabulary produced by the lexer.  Every
keyword, operator, punctuation mark, and literal kind is represented as
a member of the ``TokenType`` enum, and every scanned token is
represented by a ``Token`` dataclass that carries its type and raw
text.  Source positions are recorded for diagnostics but do not take
part in token equality.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto


class TokenType(Enum):
    """Exhaustive enumeration of all Monkey token types."""

    # -----------------------------------------------------------------
    # Literals and identifiers
    # -----------------------------------------------------------------
    IDENT = auto()
    INT = auto()

    # -----------------------------------------------------------------
    # Keywords
    # -----------------------------------------------------------------
    LET = auto()
    RETURN = auto()
    TRUE = auto()
    FALSE = auto()

    # -----------------------------------------------------------------
    # Operators
    # -----------------------------------------------------------------
    ASSIGN = auto()    # =
    BANG = auto()      # !
    MINUS = auto()     # -
    PLUS = auto()      # +
    SLASH = auto()     # /
    ASTERISK = auto()  # *
    EQ = auto()        # ==
    NOT_EQ = auto()    # !=
    LT = auto()        # <
    GT = auto()        # >

    # -----------------------------------------------------------------
    # Punctuation
    # -----------------------------------------------------------------
    LPAREN = auto()
    RPAREN = auto()
    SEMICOLON = auto()

    # -----------------------------------------------------------------
    # Structure
    # -----------------------------------------------------------------
    ILLEGAL = auto()
    EOF = auto()

    def describe(self) -> str:
        """Return the display form used in diagnostics, e.g. ``'='`` or ``IDENT``."""
        symbol = SYMBOLS.get(self)
        return f"'{symbol}'" if symbol is not None else self.name


# Fixed source text of every symbol and keyword token.
SYMBOLS: dict[TokenType, str] = {
    TokenType.LET: "let",
    TokenType.RETURN: "return",
    TokenType.TRUE: "true",
    TokenType.FALSE: "false",
    TokenType.ASSIGN: "=",
    TokenType.BANG: "!",
    TokenType.MINUS: "-",
    TokenType.PLUS: "+",
    TokenType.SLASH: "/",
    TokenType.ASTERISK: "*",
    TokenType.EQ: "==",
    TokenType.NOT_EQ: "!=",
    TokenType.LT: "<",
    TokenType.GT: ">",
    TokenType.LPAREN: "(",
    TokenType.RPAREN: ")",
    TokenType.SEMICOLON: ";",
}

# Mapping from literal keyword text to its TokenType.
KEYWORDS: dict[str, TokenType] = {
    "let": TokenType.LET,
    "return": TokenType.RETURN,
    "true": TokenType.TRUE,
    "false": TokenType.FALSE,
}


def lookup_ident(word: str) -> TokenType:
    """Classify a scanned word as a keyword or a plain identifier."""
    return KEYWORDS.get(word, TokenType.IDENT)


@dataclass(frozen=True, slots=True)
class Token:
    """A single scanned token.

    Two tokens are equal when their ``type`` and ``literal`` match;
    the position fields are informational only.

    Parameters
    ----------
    type:
        The ``TokenType`` variant for this token.
    literal:
        The raw text as it appeared in the source.  Empty for ``EOF``.
    line:
        1-based line number of the first character (0 when unknown).
    col:
        1-based column number of the first character (0 when unknown).
    """

    type: TokenType
    literal: str = ""
    line: int = field(default=0, compare=False)
    col: int = field(default=0, compare=False)

    def __repr__(self) -> str:
        return f"Token({self.type.name}, {self.literal!r}, {self.line}:{self.col})"

    def __str__(self) -> str:
        if self.type in (TokenType.IDENT, TokenType.INT, TokenType.ILLEGAL):
            return f"{self.type.name}({self.literal!r})"
        return self.type.describe()

    @classmethod
    def of(cls, token_type: TokenType) -> "Token":
        """Build a fixed-text token (keyword, symbol, or ``EOF``) without position."""
        return cls(type=token_type, literal=SYMBOLS.get(token_type, ""))

    @property
    def is_keyword(self) -> bool:
        """Return True if this token is a reserved word."""
        return self.type in KEYWORDS.values()
