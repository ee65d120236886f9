"""Parse error types for the Monkey parser.

The parser never stops at the first problem.  Each recoverable problem
is recorded as a ``ParseError`` on the parser's diagnostics list and the
statement being parsed is dropped.  ``ParseErrorCollection`` bundles the
errors of one run for callers that want to fail loudly.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto

from monkey.grammar.tokens import Token


class ParseErrorKind(Enum):
    """What kind of problem a diagnostic describes.

    STRUCTURAL_MISMATCH
        An expected token was not found at a checkpoint: missing
        identifier after ``let``, missing ``=``, or missing ``)``.
    NO_PREFIX_RULE
        The current token cannot begin an expression.
    INVALID_INTEGER
        Integer text does not fit a signed 64-bit integer.  Only recorded
        when the parser is created with ``report_invalid_integers=True``.
    NESTING_TOO_DEEP
        A statement nests expressions deeper than the interpreter's
        recursion limit allows.
    """

    STRUCTURAL_MISMATCH = auto()
    NO_PREFIX_RULE = auto()
    INVALID_INTEGER = auto()
    NESTING_TOO_DEEP = auto()


@dataclass(frozen=True)
class ParseError(Exception):
    """A single parse diagnostic.

    Parameters
    ----------
    kind:
        Classification of the problem.
    message:
        Human-readable description of the problem.
    token:
        The offending token, if available.
    """

    kind: ParseErrorKind
    message: str
    token: Token | None = None

    def __str__(self) -> str:
        if self.token is not None and self.token.line:
            return f"{self.token.line}:{self.token.col}: {self.message}"
        return self.message

    # dataclass(frozen=True) doesn't call Exception.__init__ automatically
    def __post_init__(self) -> None:
        object.__setattr__(self, "args", (self.message,))


@dataclass
class ParseErrorCollection(Exception):
    """Aggregates the ``ParseError`` instances from a single parse run.

    Parameters
    ----------
    errors:
        Ordered list of errors encountered during parsing.
    """

    errors: list[ParseError] = field(default_factory=list)

    @property
    def has_errors(self) -> bool:
        """Return True if any errors were recorded."""
        return bool(self.errors)

    @property
    def messages(self) -> list[str]:
        """Return the plain message text of every error, in order."""
        return [err.message for err in self.errors]

    def __len__(self) -> int:
        return len(self.errors)

    def __str__(self) -> str:
        if not self.errors:
            return "ParseErrorCollection (no errors)"
        lines = [f"ParseErrorCollection ({len(self.errors)} error(s)):"]
        for err in self.errors:
            lines.append(f"  {err}")
        return "\n".join(lines)
