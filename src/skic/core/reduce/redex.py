"""Locating weak redexes along a term's spine."""

from __future__ import annotations

from dataclasses import dataclass

from ..ast import App, Atom, Term
from ..registry import BASIS, Combinator, Registry


@dataclass(frozen=True)
class Redex:
    """
    A contractible position found by walking a flattened spine.

    - prefix: atoms passed over before the redex (free variables and
      combinators short of arguments), kept unchanged in front of the result
    - head, args: the combinator and everything that follows it on the spine
    """

    prefix: tuple[Atom, ...]
    head: Atom
    args: tuple[Term, ...]
    combinator: Combinator


def find_weak_redex(term: Term, registry: Registry = BASIS) -> Redex | None:
    """
    Return the first weak redex along the spine of ``term``, or ``None``.

    Applications in head position are merged into the spine. When the head
    is a combinator with enough arguments the redex is found; otherwise the
    head is set aside and the remainder of the spine is searched as a term of
    its own, so ``x I y`` contracts ``I y``. Free variables never contract.
    """

    prefix: list[Atom] = []
    # Spine items still to visit, the next head on top.
    pending: list[Term] = [term]
    while pending:
        head = pending.pop()
        if isinstance(head, App):
            pending.extend(reversed(head.children))
            continue
        assert isinstance(head, Atom)
        combinator = registry.lookup(head.name)
        if combinator is not None and len(pending) >= combinator.arity:
            return Redex(tuple(prefix), head, tuple(reversed(pending)), combinator)
        prefix.append(head)
    return None


def has_weak_redex(term: Term, registry: Registry = BASIS) -> bool:
    return find_weak_redex(term, registry) is not None


__all__ = ["Redex", "find_weak_redex", "has_weak_redex"]
