"""Weak reduction split by stage (redex search, substitution, stepping, driving)."""

from .normalize import iter_reduction, reduce_to_normal_form
from .redex import find_weak_redex, has_weak_redex
from .step import contract, weak_step
from .subst import combine, instantiate

__all__ = [
    "combine",
    "contract",
    "find_weak_redex",
    "has_weak_redex",
    "instantiate",
    "iter_reduction",
    "reduce_to_normal_form",
    "weak_step",
]
