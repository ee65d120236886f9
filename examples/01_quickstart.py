#!/usr/bin/env python3
"""Example: Quickstart — monkey-syntax

Minimal working example: tokenize Monkey source, parse it into an AST,
inspect diagnostics, and print the fully parenthesized canonical form.

Usage:
    python examples/01_quickstart.py

Requirements:
    pip install monkey-syntax
"""
from __future__ import annotations

import monkey
from monkey.ast import AstSerializer

MONKEY_SOURCE = """
let five = 5;
let ten = 10;
five + ten * 2 == 25;
-(five - ten) > 0
"""

BROKEN_SOURCE = "let x 5; let = 10; (1 + 2"


def main() -> None:
    print(f"monkey-syntax version: {monkey.__version__}")

    # Step 1: Look at the token stream
    tokens = monkey.tokenize(MONKEY_SOURCE)
    print(f"Tokens: {len(tokens)} (last is {tokens[-1].type.name})")

    # Step 2: Parse into an AST
    program = monkey.parse(MONKEY_SOURCE)
    print(f"Parsed {len(program.statements)} statement(s)")

    # Step 3: Canonical form shows how operators were grouped
    print(f"Canonical: {monkey.format(program)}")

    # Step 4: Malformed input is recorded, not raised
    partial, errors = monkey.parse_with_errors(BROKEN_SOURCE)
    print(f"Broken source: {len(partial.statements)} statement(s), {len(errors)} error(s)")
    for error in errors:
        print(f"  {error}")

    # Step 5: Export the AST
    print(AstSerializer().to_json(program))


if __name__ == "__main__":
    main()
