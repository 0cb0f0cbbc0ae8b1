"""Instantiating combinator templates against actual arguments."""

from __future__ import annotations

from collections.abc import Sequence

from ..ast import App, Term
from ..registry import Combinator, Slot


def combine(template: Sequence[Slot], args: Sequence[Term]) -> tuple[Term, ...]:
    """
    Substitute ``args`` into ``template`` and return the resulting spine.

    Index slots become the corresponding argument and nested slots become
    sub-applications built the same way. Whatever lands in head position is
    spliced into the result when it is an application, so ``combine((0, 1),
    (f a, b))`` gives ``(f, a, b)`` rather than ``((f a), b)``.
    """

    items: list[Term] = []
    for position, slot in enumerate(template):
        if isinstance(slot, tuple):
            sub = combine(slot, args)
            if position == 0:
                items.extend(sub)
            else:
                items.append(App.of(*sub))
            continue
        actual = args[slot]
        if position == 0 and isinstance(actual, App):
            items.extend(actual.children)
        else:
            items.append(actual)
    return tuple(items)


def instantiate(combinator: Combinator, args: Sequence[Term]) -> Term:
    """Contract ``combinator`` applied to exactly ``combinator.arity`` args."""

    if len(args) != combinator.arity:
        raise ValueError(
            f"Expected {combinator.arity} arguments, got {len(args)}"
        )
    return App.of(*combine(combinator.template, args))


__all__ = ["combine", "instantiate"]
