"""Single-step weak reduction."""

from __future__ import annotations

from skic.errors import NoRedexError

from ..ast import App, Term
from ..registry import BASIS, Registry
from .redex import Redex, find_weak_redex
from .subst import combine


def contract(redex: Redex) -> Term:
    """Contract ``redex``, keeping the atoms in front of it unchanged."""

    arity = redex.combinator.arity
    body = combine(redex.combinator.template, redex.args[:arity])
    return App.of(*redex.prefix, *body, *redex.args[arity:])


def weak_step(term: Term, registry: Registry = BASIS) -> Term:
    """
    Perform exactly one weak contraction at the first redex on the spine.

    Arguments beyond the combinator's arity are re-applied unchanged after the
    instantiated body. Raises ``NoRedexError`` when ``term`` is already in
    normal form.
    """

    redex = find_weak_redex(term, registry)
    if redex is None:
        raise NoRedexError(term)
    return contract(redex)


__all__ = ["contract", "weak_step"]
