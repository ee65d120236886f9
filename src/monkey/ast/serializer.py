"""AST serialization and deserialization for Monkey programs.

Provides round-trip serialization of ``Program`` trees to and from JSON
and YAML.  The serialized form is a plain dict/list structure that maps
naturally to both formats.

Usage
-----
::

    from monkey.ast.serializer import AstSerializer

    serializer = AstSerializer()
    data = serializer.to_dict(program)
    json_text = serializer.to_json(program)
    program2 = serializer.from_json(json_text)
    assert program == program2
"""
from __future__ import annotations

import json
from typing import TypeVar

import yaml

from monkey.ast.nodes import (
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

_OperatorT = TypeVar("_OperatorT", PrefixOperator, InfixOperator)


def _operator(enum_cls: type[_OperatorT], name: object) -> _OperatorT:
    """Look up an operator by member name, raising ValueError if unknown."""
    try:
        return enum_cls[str(name)]
    except KeyError:
        raise ValueError(f"Unknown operator: {name!r}") from None


class AstSerializer:
    """Converts between ``Program`` AST objects and plain Python dicts.

    The serialized representation uses ``"kind"`` discriminator fields on
    union types so that deserialization is unambiguous.  Operators are
    stored by enum member name (``"ADD"``, ``"NEGATE"``).
    """

    # ------------------------------------------------------------------
    # Serialization (AST → dict)
    # ------------------------------------------------------------------

    def to_dict(self, program: Program) -> dict[str, object]:
        """Serialize a ``Program`` to a JSON-compatible dict."""
        return {
            "kind": "Program",
            "statements": [self._statement_to_dict(s) for s in program.statements],
        }

    def _statement_to_dict(self, stmt: Statement) -> dict[str, object]:
        if isinstance(stmt, LetStatement):
            return {"kind": "LetStatement", "name": stmt.name.name}
        if isinstance(stmt, ReturnStatement):
            return {"kind": "ReturnStatement"}
        if isinstance(stmt, ExpressionStatement):
            return {
                "kind": "ExpressionStatement",
                "expression": self._expr_to_dict(stmt.expression),
            }
        raise ValueError(f"Cannot serialize statement type: {type(stmt).__name__}")

    def _expr_to_dict(self, expr: Expression) -> dict[str, object]:
        if isinstance(expr, Identifier):
            return {"kind": "Identifier", "name": expr.name}
        if isinstance(expr, IntegerLiteral):
            return {"kind": "IntegerLiteral", "value": expr.value}
        if isinstance(expr, BooleanLiteral):
            return {"kind": "BooleanLiteral", "value": expr.value}
        if isinstance(expr, PrefixExpression):
            return {
                "kind": "PrefixExpression",
                "operator": expr.operator.name,
                "operand": self._expr_to_dict(expr.operand),
            }
        if isinstance(expr, InfixExpression):
            return {
                "kind": "InfixExpression",
                "operator": expr.operator.name,
                "left": self._expr_to_dict(expr.left),
                "right": self._expr_to_dict(expr.right),
            }
        raise ValueError(f"Cannot serialize expression type: {type(expr).__name__}")

    # ------------------------------------------------------------------
    # Deserialization (dict → AST)
    # ------------------------------------------------------------------

    def from_dict(self, data: dict[str, object]) -> Program:
        """Deserialize a ``Program`` from a dict produced by ``to_dict``."""
        if data.get("kind") != "Program":
            raise ValueError(f"Expected kind 'Program', got {data.get('kind')!r}")
        statements = data.get("statements", [])
        return Program(
            statements=tuple(self._statement_from_dict(s) for s in statements)  # type: ignore[union-attr]
        )

    def _statement_from_dict(self, d: dict[str, object]) -> Statement:
        kind = d.get("kind")
        if kind == "LetStatement":
            return LetStatement(name=Identifier(name=str(d["name"])))
        if kind == "ReturnStatement":
            return ReturnStatement()
        if kind == "ExpressionStatement":
            return ExpressionStatement(expression=self._expr_from_dict(d["expression"]))  # type: ignore[arg-type]
        raise ValueError(f"Unknown statement kind: {kind!r}")

    def _expr_from_dict(self, d: dict[str, object]) -> Expression:
        kind = d.get("kind")
        if kind == "Identifier":
            return Identifier(name=str(d["name"]))
        if kind == "IntegerLiteral":
            return IntegerLiteral(value=int(d["value"]))  # type: ignore[call-overload]
        if kind == "BooleanLiteral":
            return BooleanLiteral(value=bool(d["value"]))
        if kind == "PrefixExpression":
            return PrefixExpression(
                operator=_operator(PrefixOperator, d["operator"]),
                operand=self._expr_from_dict(d["operand"]),  # type: ignore[arg-type]
            )
        if kind == "InfixExpression":
            return InfixExpression(
                operator=_operator(InfixOperator, d["operator"]),
                left=self._expr_from_dict(d["left"]),  # type: ignore[arg-type]
                right=self._expr_from_dict(d["right"]),  # type: ignore[arg-type]
            )
        raise ValueError(f"Unknown expression kind: {kind!r}")

    # ------------------------------------------------------------------
    # JSON helpers
    # ------------------------------------------------------------------

    def to_json(self, program: Program, indent: int = 2) -> str:
        """Serialize a ``Program`` to a JSON string."""
        return json.dumps(self.to_dict(program), indent=indent, ensure_ascii=False)

    def from_json(self, text: str) -> Program:
        """Deserialize a ``Program`` from a JSON string."""
        data: dict[str, object] = json.loads(text)
        return self.from_dict(data)

    # ------------------------------------------------------------------
    # YAML helpers
    # ------------------------------------------------------------------

    def to_yaml(self, program: Program) -> str:
        """Serialize a ``Program`` to a YAML string."""
        return yaml.dump(self.to_dict(program), default_flow_style=False, sort_keys=False)

    def from_yaml(self, text: str) -> Program:
        """Deserialize a ``Program`` from a YAML string."""
        data: dict[str, object] = yaml.safe_load(text)
        return self.from_dict(data)
