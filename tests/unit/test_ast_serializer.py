"""Unit tests for monkey.ast.serializer — AstSerializer dict/JSON/YAML paths."""
from __future__ import annotations

import json

import pytest
import yaml

from monkey.ast.nodes import (
    BooleanLiteral,
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
)
from monkey.ast.serializer import AstSerializer
from monkey.parser.parser import parse


@pytest.fixture()
def serializer() -> AstSerializer:
    return AstSerializer()


@pytest.fixture()
def program() -> Program:
    return parse("let x = 5; return x; -a * (b + 3) != true;")


class TestToDict:
    def test_program_kind(self, serializer: AstSerializer, program: Program) -> None:
        data = serializer.to_dict(program)
        assert data["kind"] == "Program"
        assert len(data["statements"]) == 3  # type: ignore[arg-type]

    def test_statement_shapes(self, serializer: AstSerializer, program: Program) -> None:
        statements = serializer.to_dict(program)["statements"]
        assert statements[0] == {"kind": "LetStatement", "name": "x"}  # type: ignore[index]
        assert statements[1] == {"kind": "ReturnStatement"}  # type: ignore[index]

    def test_expression_shape(self, serializer: AstSerializer) -> None:
        prog = Program(statements=(
            ExpressionStatement(
                expression=PrefixExpression(operator=PrefixOperator.NEGATE, operand=IntegerLiteral(value=5))
            ),
        ))
        assert serializer.to_dict(prog)["statements"] == [{
            "kind": "ExpressionStatement",
            "expression": {
                "kind": "PrefixExpression",
                "operator": "NEGATE",
                "operand": {"kind": "IntegerLiteral", "value": 5},
            },
        }]

    def test_unknown_expression_type_rejected(self, serializer: AstSerializer) -> None:
        prog = Program(statements=(ExpressionStatement(expression="oops"),))  # type: ignore[arg-type]
        with pytest.raises(ValueError):
            serializer.to_dict(prog)


class TestRoundTrip:
    def test_dict_round_trip(self, serializer: AstSerializer, program: Program) -> None:
        assert serializer.from_dict(serializer.to_dict(program)) == program

    def test_json_round_trip(self, serializer: AstSerializer, program: Program) -> None:
        text = serializer.to_json(program)
        assert json.loads(text)["kind"] == "Program"
        assert serializer.from_json(text) == program

    def test_yaml_round_trip(self, serializer: AstSerializer, program: Program) -> None:
        text = serializer.to_yaml(program)
        assert yaml.safe_load(text)["kind"] == "Program"
        assert serializer.from_yaml(text) == program

    def test_nested_infix_round_trip(self, serializer: AstSerializer) -> None:
        expr = InfixExpression(
            operator=InfixOperator.EQUALS,
            left=InfixExpression(
                operator=InfixOperator.LESS_THAN, left=Identifier(name="a"), right=IntegerLiteral(value=-1)
            ),
            right=BooleanLiteral(value=False),
        )
        prog = Program(statements=(ExpressionStatement(expression=expr), ReturnStatement()))
        assert serializer.from_json(serializer.to_json(prog)) == prog

    def test_let_round_trip(self, serializer: AstSerializer) -> None:
        prog = Program(statements=(LetStatement(name=Identifier(name="foobar")),))
        assert serializer.from_yaml(serializer.to_yaml(prog)) == prog


class TestFromDictErrors:
    def test_wrong_root_kind(self, serializer: AstSerializer) -> None:
        with pytest.raises(ValueError):
            serializer.from_dict({"kind": "Statement"})

    def test_unknown_statement_kind(self, serializer: AstSerializer) -> None:
        with pytest.raises(ValueError):
            serializer.from_dict({"kind": "Program", "statements": [{"kind": "IfStatement"}]})

    def test_unknown_expression_kind(self, serializer: AstSerializer) -> None:
        data = {
            "kind": "Program",
            "statements": [{"kind": "ExpressionStatement", "expression": {"kind": "CallExpression"}}],
        }
        with pytest.raises(ValueError):
            serializer.from_dict(data)

    def test_unknown_prefix_operator_name(self, serializer: AstSerializer) -> None:
        data = {
            "kind": "Program",
            "statements": [{
                "kind": "ExpressionStatement",
                "expression": {
                    "kind": "PrefixExpression",
                    "operator": "PLUS",
                    "operand": {"kind": "Identifier", "name": "a"},
                },
            }],
        }
        with pytest.raises(ValueError, match="Unknown operator: .PLUS."):
            serializer.from_dict(data)

    def test_unknown_infix_operator_name(self, serializer: AstSerializer) -> None:
        data = {
            "kind": "Program",
            "statements": [{
                "kind": "ExpressionStatement",
                "expression": {
                    "kind": "InfixExpression",
                    "operator": "BOGUS",
                    "left": {"kind": "IntegerLiteral", "value": 1},
                    "right": {"kind": "IntegerLiteral", "value": 2},
                },
            }],
        }
        with pytest.raises(ValueError, match="Unknown operator: 'BOGUS'"):
            serializer.from_json(json.dumps(data))
