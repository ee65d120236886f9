"""Monkey grammar module.

Exports token definitions, formal grammar constants, and the operator
precedence table.
"""
from __future__ import annotations

from monkey.grammar.grammar import (
    FULL_GRAMMAR,
    GRAMMAR_EXPRESSION,
    GRAMMAR_PROGRAM,
    GRAMMAR_STATEMENTS,
    PRECEDENCES,
    Precedence,
    precedence_of,
)
from monkey.grammar.tokens import KEYWORDS, SYMBOLS, Token, TokenType, lookup_ident

__all__ = [
    # Token types
    "TokenType",
    "Token",
    "KEYWORDS",
    "SYMBOLS",
    "lookup_ident",
    # Grammar constants
    "FULL_GRAMMAR",
    "GRAMMAR_PROGRAM",
    "GRAMMAR_STATEMENTS",
    "GRAMMAR_EXPRESSION",
    # Precedence
    "Precedence",
    "PRECEDENCES",
    "precedence_of",
]
