"""Monkey Lexer module.

Exports the ``Lexer`` class and the ``tokenize`` convenience function.
"""
from __future__ import annotations

from monkey.lexer.lexer import Lexer, tokenize

__all__ = ["Lexer", "tokenize"]
