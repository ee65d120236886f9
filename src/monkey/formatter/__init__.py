"""Monkey Formatter module.

Exports the ``MonkeyFormatter`` class and the ``format_program`` and
``format_expression`` convenience functions.
"""
from __future__ import annotations

from monkey.formatter.formatter import MonkeyFormatter, format_expression, format_program

__all__ = ["MonkeyFormatter", "format_program", "format_expression"]
