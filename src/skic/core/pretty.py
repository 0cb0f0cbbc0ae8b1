"""Pretty-printing for combinatory logic terms."""

from __future__ import annotations

from .ast import App, Atom, Term

_CLOSE = ")"


def pretty(term: Term) -> str:
    """
    Render ``term`` in minimally parenthesised juxtaposition notation.

    Atoms print as their name. An application prints its children side by
    side, wrapping a child in parentheses only when that child is itself an
    application. The outermost term is never wrapped, so ``pretty`` inverts
    ``parse_term`` on every parsed or reduced term.
    """

    parts: list[str] = []
    # Work stack of terms still to print, interleaved with closing parens.
    stack: list[Term | str] = [term]
    outermost = True
    while stack:
        item = stack.pop()
        if isinstance(item, str):
            parts.append(item)
            continue
        match item:
            case Atom(name):
                parts.append(name)
            case App(children):
                if not outermost:
                    parts.append("(")
                    stack.append(_CLOSE)
                stack.extend(reversed(children))
            case _:
                raise TypeError(f"Cannot pretty-print unknown term: {item!r}")
        outermost = False
    return "".join(parts)


__all__ = ["pretty"]
