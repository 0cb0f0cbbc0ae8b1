"""Driving a term to weak normal form under a caller-supplied budget."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable, Iterator

from skic.errors import ReductionBudgetExceeded

from ..ast import Term
from ..pretty import pretty
from ..registry import BASIS, Registry
from .redex import find_weak_redex
from .step import contract

logger = logging.getLogger(__name__)

Trace = Callable[[str], None]


def iter_reduction(term: Term, registry: Registry = BASIS) -> Iterator[Term]:
    """
    Yield ``term`` followed by every term produced by successive weak steps.

    The iterator is exhausted once a normal form has been yielded and never
    ends for terms without one, so callers bound it themselves.
    """

    current = term
    yield current
    redex = find_weak_redex(current, registry)
    while redex is not None:
        current = contract(redex)
        yield current
        redex = find_weak_redex(current, registry)


def reduce_to_normal_form(
    term: Term,
    registry: Registry = BASIS,
    *,
    max_steps: int | None = None,
    timeout: float | None = None,
    trace: Trace | None = None,
) -> Term:
    """
    Reduce ``term`` until it has no weak redex and return the normal form.

    ``trace`` receives the rendering of the input before the first step and
    of every intermediate term after each step. When ``max_steps`` steps have
    been taken, or ``timeout`` seconds have elapsed, with a redex still left,
    ``ReductionBudgetExceeded`` is raised carrying the last term reached.
    """

    if max_steps is not None and max_steps < 0:
        raise ValueError("max_steps must be non-negative")
    deadline = None if timeout is None else time.monotonic() + timeout

    current = term
    steps = 0
    if trace is not None:
        trace(pretty(current))
    while True:
        redex = find_weak_redex(current, registry)
        if redex is None:
            break
        if max_steps is not None and steps >= max_steps:
            logger.warning("step budget of %d exhausted", max_steps)
            raise ReductionBudgetExceeded(current, steps)
        if deadline is not None and time.monotonic() >= deadline:
            logger.warning("time budget of %ss exhausted after %d steps", timeout, steps)
            raise ReductionBudgetExceeded(current, steps, "time budget")
        current = contract(redex)
        steps += 1
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("step %d: %s -> %s", steps, redex.head.name, pretty(current))
        if trace is not None:
            trace(pretty(current))
    logger.debug("normal form reached after %d steps", steps)
    return current


__all__ = ["Trace", "iter_reduction", "reduce_to_normal_form"]
