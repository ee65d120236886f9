"""AST node definitions for the Monkey expression language.

Every node produced by the parser is a frozen dataclass so that AST
trees are immutable and hashable.  Trees are built bottom-up: a node is
constructed only once all of its children exist, and every child is
owned by exactly one parent.

The ``Expression`` and ``Statement`` unions cover all node variants;
downstream code should dispatch with ``isinstance`` checks.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union

# Signed 64-bit range accepted for integer literals.
INT64_MIN: int = -(2**63)
INT64_MAX: int = 2**63 - 1


# ---------------------------------------------------------------------------
# Operators
# ---------------------------------------------------------------------------


class PrefixOperator(Enum):
    """Unary operators; the value is the source symbol."""

    NEGATE = "-"
    NOT = "!"

    @property
    def symbol(self) -> str:
        return self.value


class InfixOperator(Enum):
    """Binary operators; the value is the source symbol."""

    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "*"
    DIVIDE = "/"
    EQUALS = "=="
    NOT_EQUALS = "!="
    LESS_THAN = "<"
    GREATER_THAN = ">"

    @property
    def symbol(self) -> str:
        return self.value


# ---------------------------------------------------------------------------
# Expressions
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class Identifier:
    """A bare identifier reference, e.g. ``foobar``."""

    name: str

    @property
    def token_literal(self) -> str:
        return self.name


@dataclass(frozen=True, slots=True)
class IntegerLiteral:
    """A signed 64-bit integer literal."""

    value: int

    def __post_init__(self) -> None:
        if not INT64_MIN <= self.value <= INT64_MAX:
            raise ValueError(f"integer literal {self.value} is outside the signed 64-bit range")

    @property
    def token_literal(self) -> str:
        return str(self.value)


@dataclass(frozen=True, slots=True)
class BooleanLiteral:
    """A boolean literal (``true`` or ``false``)."""

    value: bool

    @property
    def token_literal(self) -> str:
        return "true" if self.value else "false"


# Forward reference: PrefixExpression and InfixExpression are recursive.
Expression = Union[
    "Identifier",
    "IntegerLiteral",
    "BooleanLiteral",
    "PrefixExpression",
    "InfixExpression",
]


@dataclass(frozen=True, slots=True)
class PrefixExpression:
    """A unary operator applied to one operand, e.g. ``-a`` or ``!ok``."""

    operator: PrefixOperator
    operand: "Expression"

    @property
    def token_literal(self) -> str:
        return self.operator.symbol


@dataclass(frozen=True, slots=True)
class InfixExpression:
    """A binary operator expression, e.g. ``a + b``."""

    operator: InfixOperator
    left: "Expression"
    right: "Expression"

    @property
    def token_literal(self) -> str:
        return self.operator.symbol


# ---------------------------------------------------------------------------
# Statements
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class LetStatement:
    """A ``let`` binding.

    Only the bound name is kept; the right-hand side is consumed by the
    parser without being built into a tree.
    """

    name: Identifier

    @property
    def token_literal(self) -> str:
        return "let"


@dataclass(frozen=True, slots=True)
class ReturnStatement:
    """A ``return`` statement.  The returned value is not retained."""

    @property
    def token_literal(self) -> str:
        return "return"


@dataclass(frozen=True, slots=True)
class ExpressionStatement:
    """A bare expression used as a statement."""

    expression: "Expression"

    @property
    def token_literal(self) -> str:
        return _leftmost(self.expression).token_literal


Statement = Union[LetStatement, ReturnStatement, ExpressionStatement]


# ---------------------------------------------------------------------------
# Root
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class Program:
    """Root node: the ordered statements of one source text."""

    statements: tuple[Statement, ...] = ()

    def __len__(self) -> int:
        return len(self.statements)

    @property
    def token_literal(self) -> str:
        """Return the literal of the first statement, or ``""`` when empty."""
        if not self.statements:
            return ""
        return self.statements[0].token_literal


def _leftmost(expr: "Expression") -> "Expression":
    """Return the node whose token starts ``expr`` in source order."""
    while isinstance(expr, InfixExpression):
        expr = expr.left
    return expr
