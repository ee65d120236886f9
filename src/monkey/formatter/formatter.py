"""Monkey canonical formatter: AST → fully parenthesized text.

The ``MonkeyFormatter`` renders a ``Program`` so that the grouping the
parser chose is visible in the output:

- every infix expression is rendered as ``(left op right)``
- every prefix expression is rendered as ``(op operand)`` with no space
- statements are concatenated with no separator

``let`` and ``return`` statements keep no value in the AST, so they
render as ``let <name>;`` and ``return;``.

Usage
-----
::

    from monkey.formatter import MonkeyFormatter
    from monkey.parser import parse

    program = parse("a + b * c")
    MonkeyFormatter().format(program)   # "(a + (b * c))"
"""
from __future__ import annotations

from monkey.ast.nodes import (
    BooleanLiteral,
    Expression,
    ExpressionStatement,
    Identifier,
    InfixExpression,
    IntegerLiteral,
    LetStatement,
    PrefixExpression,
    Program,
    ReturnStatement,
    Statement,
)


class MonkeyFormatter:
    """Produces canonical text from a ``Program`` AST."""

    def format(self, program: Program) -> str:
        """Render ``program`` as a canonical string.

        Parameters
        ----------
        program:
            The parsed program to format.

        Returns
        -------
        str
            The concatenated renderings of every statement.
        """
        return "".join(self.format_statement(stmt) for stmt in program.statements)

    def format_statement(self, stmt: Statement) -> str:
        if isinstance(stmt, ExpressionStatement):
            return self.format_expression(stmt.expression)
        if isinstance(stmt, LetStatement):
            return f"let {stmt.name.name};"
        if isinstance(stmt, ReturnStatement):
            return "return;"
        raise TypeError(f"Cannot format statement type: {type(stmt).__name__}")

    def format_expression(self, expr: Expression) -> str:
        """Render an expression node with explicit grouping."""
        if isinstance(expr, Identifier):
            return expr.name
        if isinstance(expr, IntegerLiteral):
            return str(expr.value)
        if isinstance(expr, BooleanLiteral):
            return "true" if expr.value else "false"
        if isinstance(expr, PrefixExpression):
            return f"({expr.operator.symbol}{self.format_expression(expr.operand)})"
        if isinstance(expr, InfixExpression):
            left = self.format_expression(expr.left)
            right = self.format_expression(expr.right)
            return f"({left} {expr.operator.symbol} {right})"
        raise TypeError(f"Cannot format expression type: {type(expr).__name__}")


def format_program(program: Program) -> str:
    """Convenience function: format a ``Program`` to canonical text.

    Parameters
    ----------
    program:
        The parsed program to format.

    Returns
    -------
    str
        Canonical text, e.g. ``"(3 + 4)((-5) * 5)"``.
    """
    return MonkeyFormatter().format(program)


def format_expression(expr: Expression) -> str:
    """Convenience function: format a single expression."""
    return MonkeyFormatter().format_expression(expr)
