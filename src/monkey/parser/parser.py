"""Monkey precedence-climbing parser.

Converts the token stream of a ``Lexer`` into a ``Program`` AST.

The parser keeps a two-token lookahead window (``current`` and ``peek``)
over its token source and pulls one new token each time the window
slides.  Statements are parsed one at a time by a driver loop; each
expression is parsed by precedence climbing over the table in
``monkey.grammar.grammar``:

    == != < > + - * /   (weakest → strongest), prefix ! - bind tightest

Operators of equal strength associate to the left.

Error recovery
--------------
The parser never raises for malformed input.  A problem is recorded as
a ``ParseError`` on the diagnostics list, the statement being parsed is
dropped, and the driver loop continues with the next token.  A single
unparsable sub-expression voids the whole statement; no partial tree is
ever returned.  Callers must inspect ``errors`` after ``parse()``
because an empty program does not imply a clean parse.

Expressions nest through Python recursion.  A statement nested deeper
than the recursion limit allows is recorded as ``NESTING_TOO_DEEP`` and
skipped up to its ``;``.
"""
from __future__ import annotations

import logging
import re
from typing import Final, Protocol

from monkey.ast.nodes import (
    INT64_MAX,
    INT64_MIN,
    BooleanLiteral,
    Expression,
    ExpressionStatement,
    Identifier,
    InfixExpression,
    InfixOperator,
    IntegerLiteral,
    LetStatement,
    PrefixExpression,
    PrefixOperator,
    Program,
    ReturnStatement,
    Statement,
)
from monkey.grammar.grammar import Precedence, precedence_of
from monkey.grammar.tokens import Token, TokenType
from monkey.lexer.lexer import Lexer
from monkey.parser.errors import ParseError, ParseErrorCollection, ParseErrorKind

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Operator tables
# ---------------------------------------------------------------------------

_PREFIX_OPS: Final[dict[TokenType, PrefixOperator]] = {
    TokenType.MINUS: PrefixOperator.NEGATE,
    TokenType.BANG: PrefixOperator.NOT,
}

_INFIX_OPS: Final[dict[TokenType, InfixOperator]] = {
    TokenType.PLUS: InfixOperator.ADD,
    TokenType.MINUS: InfixOperator.SUBTRACT,
    TokenType.ASTERISK: InfixOperator.MULTIPLY,
    TokenType.SLASH: InfixOperator.DIVIDE,
    TokenType.EQ: InfixOperator.EQUALS,
    TokenType.NOT_EQ: InfixOperator.NOT_EQUALS,
    TokenType.LT: InfixOperator.LESS_THAN,
    TokenType.GT: InfixOperator.GREATER_THAN,
}

_INTEGER_TEXT: Final[re.Pattern[str]] = re.compile(r"[+-]?[0-9]+")


class TokenSource(Protocol):
    """Anything the parser can pull tokens from.

    ``next_token`` must keep returning an ``EOF`` token once the input is
    exhausted.
    """

    def next_token(self) -> Token: ...


class Parser:
    """Single-use parser over one token source.

    Parameters
    ----------
    lexer:
        The token source, usually a ``Lexer``.  The parser has exclusive
        use of it for the duration of the parse.
    report_invalid_integers:
        When ``True``, integer text that does not fit a signed 64-bit
        integer is recorded as an ``INVALID_INTEGER`` diagnostic.  By
        default such literals silently void their statement.
    """

    def __init__(self, lexer: TokenSource, *, report_invalid_integers: bool = False) -> None:
        self._lexer = lexer
        self._report_invalid_integers = report_invalid_integers
        self._errors: list[ParseError] = []
        self._consumed = False
        self._current: Token = lexer.next_token()
        self._peek: Token = lexer.next_token()

    # ------------------------------------------------------------------
    # Diagnostics accessors
    # ------------------------------------------------------------------

    @property
    def error_count(self) -> int:
        """Number of diagnostics recorded so far."""
        return len(self._errors)

    @property
    def errors(self) -> list[str]:
        """A copy of every diagnostic message, in the order recorded."""
        return [err.message for err in self._errors]

    @property
    def diagnostics(self) -> list[ParseError]:
        """A copy of every diagnostic record, in the order recorded."""
        return list(self._errors)

    # ------------------------------------------------------------------
    # Lookahead window
    # ------------------------------------------------------------------

    def _advance(self) -> None:
        """Slide the window: peek becomes current and a new peek is pulled."""
        self._current = self._peek
        self._peek = self._lexer.next_token()

    def _current_is(self, token_type: TokenType) -> bool:
        return self._current.type is token_type

    def _peek_is(self, token_type: TokenType) -> bool:
        return self._peek.type is token_type

    def _expect_peek(self, token_type: TokenType) -> bool:
        """Advance if peek is ``token_type``; otherwise record an error and stay put."""
        if self._peek_is(token_type):
            self._advance()
            return True
        self._record_error(
            ParseErrorKind.STRUCTURAL_MISMATCH,
            f"expected next token to be {token_type.describe()}, got {self._peek} instead",
            self._peek,
        )
        return False

    def _record_error(self, kind: ParseErrorKind, message: str, token: Token | None) -> None:
        logger.debug("parse error (%s): %s", kind.name, message)
        self._errors.append(ParseError(kind=kind, message=message, token=token))

    # ------------------------------------------------------------------
    # Top-level parse
    # ------------------------------------------------------------------

    def parse(self) -> Program:
        """Parse the whole token stream and return the ``Program``.

        Statements that fail to parse are omitted; see ``errors``.

        Raises
        ------
        RuntimeError
            If this parser has already been run.
        """
        if self._consumed:
            raise RuntimeError("Parser instances are single-use; create a new Parser")
        self._consumed = True

        statements: list[Statement] = []
        while not self._current_is(TokenType.EOF):
            start = self._current
            try:
                stmt = self._parse_statement()
            except RecursionError:
                self._record_error(
                    ParseErrorKind.NESTING_TOO_DEEP, "expression nested too deeply", start
                )
                self._skip_to_semicolon()
                stmt = None
            if stmt is not None:
                statements.append(stmt)
            else:
                logger.debug("dropped statement starting at %r", start)
            self._advance()

        logger.debug(
            "parsed %d statement(s) with %d error(s)", len(statements), len(self._errors)
        )
        return Program(statements=tuple(statements))

    # ------------------------------------------------------------------
    # Statements
    # ------------------------------------------------------------------

    def _parse_statement(self) -> Statement | None:
        if self._current_is(TokenType.LET):
            return self._parse_let_statement()
        if self._current_is(TokenType.RETURN):
            return self._parse_return_statement()
        return self._parse_expression_statement()

    def _parse_let_statement(self) -> LetStatement | None:
        """Parse ``let IDENT = ... ;``; the bound value is skipped, not built."""
        if not self._expect_peek(TokenType.IDENT):
            return None
        name = Identifier(name=self._current.literal)
        if not self._expect_peek(TokenType.ASSIGN):
            return None
        self._skip_to_semicolon()
        return LetStatement(name=name)

    def _parse_return_statement(self) -> ReturnStatement:
        """Parse ``return ... ;``; the returned value is skipped, not built."""
        self._advance()
        self._skip_to_semicolon()
        return ReturnStatement()

    def _skip_to_semicolon(self) -> None:
        # Stops at EOF as well so an unterminated statement cannot spin forever.
        while not self._current_is(TokenType.SEMICOLON) and not self._current_is(TokenType.EOF):
            self._advance()

    def _parse_expression_statement(self) -> ExpressionStatement | None:
        expression = self._parse_expression(Precedence.LOWEST)
        if expression is None:
            return None
        if self._peek_is(TokenType.SEMICOLON):
            self._advance()
        return ExpressionStatement(expression=expression)

    # ------------------------------------------------------------------
    # Expressions
    # ------------------------------------------------------------------

    def _parse_expression(self, precedence: Precedence) -> Expression | None:
        """Parse an expression whose operators all bind tighter than ``precedence``."""
        left = self._parse_prefix()

        while not self._peek_is(TokenType.SEMICOLON) and precedence < precedence_of(self._peek.type):
            if self._peek.type not in _INFIX_OPS:
                return left
            self._advance()
            if left is None:
                return None
            left = self._parse_infix_expression(left)

        return left

    def _parse_prefix(self) -> Expression | None:
        """Dispatch on the current token to the rule that can start an expression."""
        token_type = self._current.type
        if token_type is TokenType.IDENT:
            return Identifier(name=self._current.literal)
        if token_type is TokenType.INT:
            return self._parse_integer_literal()
        if token_type is TokenType.TRUE or token_type is TokenType.FALSE:
            return BooleanLiteral(value=token_type is TokenType.TRUE)
        if token_type in _PREFIX_OPS:
            return self._parse_prefix_expression()
        if token_type is TokenType.LPAREN:
            return self._parse_grouped_expression()

        self._record_error(
            ParseErrorKind.NO_PREFIX_RULE,
            f"no prefix parse function for {self._current} found",
            self._current,
        )
        return None

    def _parse_integer_literal(self) -> IntegerLiteral | None:
        text = self._current.literal
        value: int | None = None
        if _INTEGER_TEXT.fullmatch(text):
            value = int(text)
        if value is None or not INT64_MIN <= value <= INT64_MAX:
            if self._report_invalid_integers:
                self._record_error(
                    ParseErrorKind.INVALID_INTEGER,
                    f"could not parse {text!r} as integer",
                    self._current,
                )
            return None
        return IntegerLiteral(value=value)

    def _parse_prefix_expression(self) -> PrefixExpression | None:
        operator = _PREFIX_OPS[self._current.type]
        self._advance()
        operand = self._parse_expression(Precedence.PREFIX)
        if operand is None:
            return None
        return PrefixExpression(operator=operator, operand=operand)

    def _parse_infix_expression(self, left: Expression) -> InfixExpression | None:
        operator = _INFIX_OPS[self._current.type]
        precedence = precedence_of(self._current.type)
        self._advance()
        right = self._parse_expression(precedence)
        if right is None:
            return None
        return InfixExpression(operator=operator, left=left, right=right)

    def _parse_grouped_expression(self) -> Expression | None:
        self._advance()
        expression = self._parse_expression(Precedence.LOWEST)
        if not self._expect_peek(TokenType.RPAREN):
            return None
        return expression


# ---------------------------------------------------------------------------
# Module-level convenience functions
# ---------------------------------------------------------------------------


def parse_with_errors(
    source: str, *, report_invalid_integers: bool = False
) -> tuple[Program, list[ParseError]]:
    """Parse Monkey source text, returning the program and its diagnostics.

    Never raises for malformed input.

    Parameters
    ----------
    source:
        Complete Monkey source text.
    report_invalid_integers:
        Forwarded to ``Parser``.

    Returns
    -------
    tuple[Program, list[ParseError]]
        The statements that parsed, and every recorded diagnostic.
    """
    parser = Parser(Lexer(source), report_invalid_integers=report_invalid_integers)
    program = parser.parse()
    return program, parser.diagnostics


def parse(source: str, *, report_invalid_integers: bool = False) -> Program:
    """Parse Monkey source text and return the ``Program``.

    Parameters
    ----------
    source:
        Complete Monkey source text.
    report_invalid_integers:
        Forwarded to ``Parser``.

    Returns
    -------
    Program
        The parsed program.

    Raises
    ------
    ParseErrorCollection
        If any diagnostics were recorded.

    Example
    -------
    ::

        from monkey.parser import parse
        program = parse("let x = 5; x * 2")
    """
    program, errors = parse_with_errors(source, report_invalid_integers=report_invalid_integers)
    if errors:
        raise ParseErrorCollection(errors=errors)
    return program
