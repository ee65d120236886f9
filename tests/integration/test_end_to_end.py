"""End-to-end tests: source text → tokens → AST → canonical text and JSON."""
from __future__ import annotations

import pytest

from monkey.ast.nodes import (
    BooleanLiteral,
    ExpressionStatement,
    Identifier,
    LetStatement,
    ReturnStatement,
)
from monkey.ast.serializer import AstSerializer
from monkey.formatter.formatter import format_program
from monkey.lexer.lexer import Lexer
from monkey.parser.parser import Parser

_MIXED_PROGRAM = """
let five = 5;
let ten = 10;
return five;

five * (ten - 1) > 40 == true;
!false != -five < ten
"""


def test_mixed_program_pipeline() -> None:
    parser = Parser(Lexer(_MIXED_PROGRAM))
    program = parser.parse()

    assert parser.errors == []
    assert [type(s) for s in program.statements] == [
        LetStatement,
        LetStatement,
        ReturnStatement,
        ExpressionStatement,
        ExpressionStatement,
    ]
    assert format_program(program) == (
        "let five;let ten;return;"
        "(((five * (ten - 1)) > 40) == true)"
        "((!false) != ((-five) < ten))"
    )

    serializer = AstSerializer()
    assert serializer.from_json(serializer.to_json(program)) == program


@pytest.mark.parametrize("source, expected", [
    ("a + b * c", "(a + (b * c))"),
    ("a + b - c", "((a + b) - c)"),
    ("-a * b", "((-a) * b)"),
    ("(5 + 5) * 2", "((5 + 5) * 2)"),
    ("2 / (5 + 5)", "(2 / (5 + 5))"),
    ("3 + 4; -5 * 5", "(3 + 4)((-5) * 5)"),
])
def test_canonical_forms(source: str, expected: str) -> None:
    parser = Parser(Lexer(source))
    assert format_program(parser.parse()) == expected
    assert parser.error_count == 0


@pytest.mark.parametrize("source, expected", [("true", True), ("false", False)])
def test_boolean_program(source: str, expected: bool) -> None:
    program = Parser(Lexer(source)).parse()
    assert program.statements == (ExpressionStatement(expression=BooleanLiteral(value=expected)),)


def test_recovery_keeps_good_statements() -> None:
    source = "let = 1;\nlet ok = 2;\n(1 + 2\n3 * 4;"
    parser = Parser(Lexer(source))
    program = parser.parse()

    assert parser.error_count >= 2
    assert LetStatement(name=Identifier(name="ok")) in program.statements
    assert format_program(program).endswith("(3 * 4)")
