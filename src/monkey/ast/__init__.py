"""Monkey AST module.

Exports all AST node types and the serializer for converting AST trees
to and from JSON/YAML.
"""
from __future__ import annotations

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
from monkey.ast.serializer import AstSerializer

__all__ = [
    # Root and statements
    "Program",
    "Statement",
    "LetStatement",
    "ReturnStatement",
    "ExpressionStatement",
    # Enums
    "PrefixOperator",
    "InfixOperator",
    # Expression types
    "Expression",
    "Identifier",
    "IntegerLiteral",
    "BooleanLiteral",
    "PrefixExpression",
    "InfixExpression",
    "INT64_MIN",
    "INT64_MAX",
    # Serializer
    "AstSerializer",
]
