"""Combinator definitions and the immutable registry that names them."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Union

from skic.errors import DuplicateCombinator, InvalidTemplate

logger = logging.getLogger(__name__)

# An argument index, or a nested sub-application of slots.
Slot = Union[int, tuple["Slot", ...]]
SlotLike = Union[int, Sequence["SlotLike"]]


@dataclass(frozen=True)
class Combinator:
    """
    A named rewrite rule ``X a0 ... a(n-1) -> template``.

    - arity: number of arguments consumed by one contraction
    - template: body of the contraction; ints refer to argument positions and
      nested tuples are sub-applications
    """

    arity: int
    template: tuple[Slot, ...]

    def indices(self) -> list[int]:
        """Every argument index mentioned by the template, depth first."""

        found: list[int] = []
        stack: list[Slot] = [self.template]
        while stack:
            slot = stack.pop()
            if isinstance(slot, tuple):
                stack.extend(reversed(slot))
            else:
                found.append(slot)
        return found


def _freeze_template(name: str, template: SlotLike) -> tuple[Slot, ...]:
    def freeze(slot: SlotLike) -> Slot:
        # bool is an int subclass but never a meaningful index
        if isinstance(slot, bool):
            raise InvalidTemplate(name, f"slot {slot!r} is not an argument index")
        if isinstance(slot, int):
            return slot
        if isinstance(slot, (str, bytes)) or not isinstance(slot, Sequence):
            raise InvalidTemplate(name, f"slot {slot!r} is not an argument index")
        if not slot:
            raise InvalidTemplate(name, "templates cannot contain an empty group")
        return tuple(freeze(item) for item in slot)

    frozen = freeze(template)
    if not isinstance(frozen, tuple):
        raise InvalidTemplate(name, "template must be a sequence of slots")
    return frozen


def make_combinator(name: str, arity: int, template: SlotLike) -> Combinator:
    """Validate ``template`` against ``arity`` and build a ``Combinator``."""

    if isinstance(arity, bool) or not isinstance(arity, int) or arity < 0:
        raise InvalidTemplate(
            name, f"arity must be a non-negative integer, got {arity!r}"
        )
    combinator = Combinator(arity, _freeze_template(name, template))
    for index in combinator.indices():
        if not 0 <= index < arity:
            raise InvalidTemplate(
                name, f"argument index {index} out of range for arity {arity}"
            )
    return combinator


def _check_name(name: str) -> None:
    if not isinstance(name, str) or not name:
        raise ValueError(f"Combinator names must be non-empty strings, got {name!r}")
    if any(ch in "()" or ch.isspace() for ch in name):
        raise ValueError(f"Combinator name {name!r} contains reserved characters")


@dataclass(frozen=True)
class Registry:
    """
    Read-only table of combinators keyed by name.

    ``register`` never mutates the receiver; it returns an extended copy.
    """

    entries: MappingProxyType[str, Combinator] = field(
        default_factory=lambda: MappingProxyType({})
    )

    @classmethod
    def from_mapping(
        cls, definitions: Mapping[str, tuple[int, SlotLike]]
    ) -> Registry:
        """Build a registry from ``{name: (arity, template)}`` data."""

        registry = cls()
        for name, (arity, template) in definitions.items():
            registry = registry.register(name, arity, template)
        return registry

    def lookup(self, name: str) -> Combinator | None:
        return self.entries.get(name)

    def register(self, name: str, arity: int, template: SlotLike) -> Registry:
        _check_name(name)
        if name in self.entries:
            raise DuplicateCombinator(name)
        combinator = make_combinator(name, arity, template)
        logger.debug(
            "registered combinator %s (arity %d, template %r)",
            name,
            arity,
            combinator.template,
        )
        entries = dict(self.entries)
        entries[name] = combinator
        return replace(self, entries=MappingProxyType(entries))

    def merge(self, other: Registry) -> Registry:
        """Register every entry of ``other``; names must not overlap."""

        registry = self
        for name, combinator in other.entries.items():
            registry = registry.register(name, combinator.arity, combinator.template)
        return registry

    def names(self) -> tuple[str, ...]:
        return tuple(sorted(self.entries))

    def __contains__(self, name: object) -> bool:
        return name in self.entries

    def __len__(self) -> int:
        return len(self.entries)


BASIS = Registry.from_mapping(
    {
        "I": (1, [0]),  # I x -> x
        "K": (2, [0]),  # K x y -> x
        "S": (3, [0, 2, [1, 2]]),  # S x y z -> x z (y z)
    }
)

EXTENDED = BASIS.merge(
    Registry.from_mapping(
        {
            "B": (3, [0, [1, 2]]),  # B x y z -> x (y z)
            "C": (3, [0, 2, 1]),  # C x y z -> x z y
            "W": (2, [0, 1, 1]),  # W x y -> x y y
        }
    )
)


__all__ = [
    "Slot",
    "Combinator",
    "make_combinator",
    "Registry",
    "BASIS",
    "EXTENDED",
]
