"""Monkey Parser module.

Exports the ``Parser`` class, the ``parse`` and ``parse_with_errors``
convenience functions, and parse error types.
"""
from __future__ import annotations

from monkey.parser.errors import ParseError, ParseErrorCollection, ParseErrorKind
from monkey.parser.parser import Parser, TokenSource, parse, parse_with_errors

__all__ = [
    "Parser",
    "TokenSource",
    "parse",
    "parse_with_errors",
    "ParseError",
    "ParseErrorCollection",
    "ParseErrorKind",
]
