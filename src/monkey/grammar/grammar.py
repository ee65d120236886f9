"""Formal grammar rules and operator precedence for Monkey.

This module documents the Monkey grammar as EBNF-style string constants
and holds the binding-power table the parser climbs over.  The grammar
is implemented by a hand-written precedence-climbing parser (see
``monkey.parser``); these constants serve as reference documentation
and are printed by the ``grammar`` CLI command.

Grammar notation used here:
    ``::=``     production rule
    ``|``       alternation
    ``( )``     grouping
    ``[ ]``     optional (zero or one)
    ``{ }``     zero or more repetitions
    ``INT``     terminal: run of decimal digits
    ``IDENT``   terminal: identifier (letter/underscore followed by word chars)
"""
from __future__ import annotations

from enum import IntEnum

from monkey.grammar.tokens import TokenType

# ---------------------------------------------------------------------------
# Statements
# ---------------------------------------------------------------------------

GRAMMAR_PROGRAM = """
program ::= { statement } EOF

statement ::= let_statement
            | return_statement
            | expression_statement
"""

GRAMMAR_STATEMENTS = """
let_statement        ::= 'let' IDENT '=' { any_token } ';'
return_statement     ::= 'return' { any_token } ';'
expression_statement ::= expression [ ';' ]
"""

# ---------------------------------------------------------------------------
# Expressions
# ---------------------------------------------------------------------------

GRAMMAR_EXPRESSION = """
expression ::= prefix_expr { infix_op expression }

prefix_expr ::= IDENT
              | INT
              | 'true' | 'false'
              | ( '!' | '-' ) prefix_expr
              | '(' expression ')'

infix_op ::= '==' | '!='
           | '<'  | '>'
           | '+'  | '-'
           | '*'  | '/'
"""

FULL_GRAMMAR = "\n".join([
    "# Program",
    GRAMMAR_PROGRAM,
    "# Statements",
    GRAMMAR_STATEMENTS,
    "# Expressions",
    GRAMMAR_EXPRESSION,
])


class Precedence(IntEnum):
    """Operator binding strength, weakest first.

    ``CALL`` is reserved; no production currently binds at that level.
    """

    LOWEST = 0
    EQUALS = 1
    LESS_GREATER = 2
    SUM = 3
    PRODUCT = 4
    PREFIX = 5
    CALL = 6


# Binding strength of every token that can appear in infix position.
PRECEDENCES: dict[TokenType, Precedence] = {
    TokenType.EQ: Precedence.EQUALS,
    TokenType.NOT_EQ: Precedence.EQUALS,
    TokenType.LT: Precedence.LESS_GREATER,
    TokenType.GT: Precedence.LESS_GREATER,
    TokenType.PLUS: Precedence.SUM,
    TokenType.MINUS: Precedence.SUM,
    TokenType.ASTERISK: Precedence.PRODUCT,
    TokenType.SLASH: Precedence.PRODUCT,
}


def precedence_of(token_type: TokenType) -> Precedence:
    """Return the infix binding strength of ``token_type`` (``LOWEST`` if none)."""
    return PRECEDENCES.get(token_type, Precedence.LOWEST)
