"""Term representation for untyped combinatory logic."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(frozen=True)
class Term:
    """Base class for combinatory logic terms."""

    def is_atom(self) -> bool:
        return False

    def is_empty(self) -> bool:
        """
        Return ``True`` for an application with no children.

        Empty applications only exist transiently while a term is being built;
        no parse or reduction ever hands one back to a caller.
        """
        return False


@dataclass(frozen=True)
class Atom(Term):
    """A combinator name or a free variable."""

    name: str

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("Atom names must be non-empty")

    def is_atom(self) -> bool:
        return True

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class App(Term):
    """
    Left-associative application ``f a1 ... an``.

    ``children[0]`` is the function position and the remaining children are
    its arguments, applied in order.
    """

    children: tuple[Term, ...]

    def __post_init__(self) -> None:
        if not isinstance(self.children, tuple):
            object.__setattr__(self, "children", tuple(self.children))

    def is_empty(self) -> bool:
        return not self.children

    @staticmethod
    def of(*children: Term) -> Term:
        """Build an application, collapsing a single child to itself."""

        if len(children) == 1:
            return children[0]
        if not children:
            raise ValueError("Cannot build an application without children")
        return App(children)

    @property
    def head(self) -> Term:
        return self.children[0]

    @property
    def args(self) -> tuple[Term, ...]:
        return self.children[1:]


def mk_app(items: Iterable[Term]) -> Term:
    """Apply a sequence of terms left to right (``App.of`` over an iterable)."""

    return App.of(*items)


def spine(term: Term) -> tuple[Term, tuple[Term, ...]]:
    """
    Flatten the leftmost spine of ``term`` into ``(head, args)``.

    Applications sitting in head position are merged, so ``((f a) b) c``
    yields ``(f, (a, b, c))``. The returned head is never a non-empty
    application; it is an ``Atom`` or, for a transient empty application,
    the empty ``App`` itself.
    """

    head = term
    pending: list[tuple[Term, ...]] = []
    while isinstance(head, App) and head.children:
        pending.append(head.args)
        head = head.head
    args: list[Term] = []
    while pending:
        args.extend(pending.pop())
    return head, tuple(args)


__all__ = ["Term", "Atom", "App", "mk_app", "spine"]
