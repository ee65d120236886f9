"""monkey-syntax — lexer, precedence-climbing parser, and AST tools for Monkey.

Public API
----------
The stable public surface is everything exported from this module.
Anything inside submodules not re-exported here is considered private
and may change without notice.

Example
-------
::

    import monkey

    # Parse Monkey source into an AST (raises on syntax errors)
    program = monkey.parse("let x = 5; x + 2 * 3")

    # Parse without raising; inspect diagnostics yourself
    program, errors = monkey.parse_with_errors("let x 5;")

    # Render with explicit grouping
    monkey.format(program)      # "let x;(x + (2 * 3))"

    # Inspect the token stream
    tokens = monkey.tokenize("a == b")

    monkey.__version__
    '0.1.0'
"""
from __future__ import annotations

from typing import TYPE_CHECKING

__version__: str = "0.1.0"

if TYPE_CHECKING:
    from monkey.ast.nodes import Program
    from monkey.grammar.tokens import Token
    from monkey.parser.errors import ParseError


def parse(source: str, report_invalid_integers: bool = False) -> "Program":
    """Parse Monkey source text into a ``Program`` AST.

    Parameters
    ----------
    source:
        Complete Monkey source text.
    report_invalid_integers:
        When ``True``, out-of-range integer literals are reported as
        diagnostics instead of silently dropping their statement.

    Returns
    -------
    Program
        The parsed program.

    Raises
    ------
    monkey.parser.ParseErrorCollection
        If the source contains syntactic errors.
    """
    from monkey.parser.parser import parse as _parse

    return _parse(source, report_invalid_integers=report_invalid_integers)


def parse_with_errors(
    source: str, report_invalid_integers: bool = False
) -> tuple["Program", list["ParseError"]]:
    """Parse Monkey source text without raising.

    Returns
    -------
    tuple[Program, list[ParseError]]
        The statements that parsed, and every recorded diagnostic.
    """
    from monkey.parser.parser import parse_with_errors as _parse_with_errors

    return _parse_with_errors(source, report_invalid_integers=report_invalid_integers)


def tokenize(source: str) -> list["Token"]:
    """Tokenize Monkey source text.

    Returns
    -------
    list[Token]
        Every token in source order, terminated by ``EOF``.
    """
    from monkey.lexer.lexer import tokenize as _tokenize

    return _tokenize(source)


def format(program: "Program") -> str:  # noqa: A001
    """Format a ``Program`` as fully parenthesized canonical text.

    Returns
    -------
    str
        e.g. ``"(a + (b * c))"`` for the program ``a + b * c``.
    """
    from monkey.formatter.formatter import format_program

    return format_program(program)


__all__ = [
    "__version__",
    "parse",
    "parse_with_errors",
    "tokenize",
    "format",
]
