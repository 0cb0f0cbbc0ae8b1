"""Exception hierarchy for parsing, registry construction and reduction."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from skic.common.span import Span

if TYPE_CHECKING:
    from skic.core.ast import Term


class SkiError(Exception):
    """Base class for every error raised by the engine."""


@dataclass
class SurfaceError(SkiError):
    message: str
    span: Span
    source: str | None = None

    def __str__(self) -> str:
        if self.source is None:
            return f"{self.message} @ {self.span.start}:{self.span.end}"
        snippet = self.span.extract(self.source)
        return f"{self.message} @ {self.span.start}:{self.span.end}: {snippet!r}"


class UnbalancedParens(SurfaceError):
    """A ``)`` without a matching ``(``, or a ``(`` that is never closed."""


class EmptyTerm(SurfaceError):
    """The input (or a parenthesised group) contains no term at all."""


class RegistryError(SkiError):
    """Misuse of the combinator registry, detected at registration time."""


@dataclass
class InvalidTemplate(RegistryError):
    name: str
    message: str

    def __str__(self) -> str:
        return f"Invalid template for combinator {self.name!r}: {self.message}"


@dataclass
class DuplicateCombinator(RegistryError):
    name: str

    def __str__(self) -> str:
        return f"Combinator {self.name!r} is already registered"


class ReductionError(SkiError):
    """Failure while driving a term towards normal form."""


@dataclass
class ReductionBudgetExceeded(ReductionError):
    """
    The caller's step or time bound ran out before a normal form was reached.

    ``term`` is the last term computed, so callers can inspect partial progress.
    """

    term: Term
    steps: int
    reason: str = "step budget"

    def __str__(self) -> str:
        return f"Reduction stopped after {self.steps} steps: {self.reason} exhausted"


@dataclass
class NoRedexError(ReductionError):
    term: Term

    def __str__(self) -> str:
        return f"Term has no weak redex: {self.term!r}"


__all__ = [
    "SkiError",
    "SurfaceError",
    "UnbalancedParens",
    "EmptyTerm",
    "RegistryError",
    "InvalidTemplate",
    "DuplicateCombinator",
    "ReductionError",
    "ReductionBudgetExceeded",
    "NoRedexError",
]
