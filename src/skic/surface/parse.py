"""Parser for bracketed juxtaposition notation, e.g. ``S(KI)(SKK)x``."""

from __future__ import annotations

from typing import cast

import ply.lex as lex  # type: ignore[import-untyped]
import ply.yacc as yacc  # type: ignore[import-untyped]

from skic.common.span import Span
from skic.core.ast import App, Atom, Term
from skic.core.registry import Slot
from skic.errors import EmptyTerm, SurfaceError, UnbalancedParens

_SOURCE: str = ""
_LEXER: lex.Lexer | None = None

tokens = (
    "ATOM",
    "LPAREN",
    "RPAREN",
)

# Every other character is an atom of its own.
t_ATOM = r"[^()\s]"

t_ignore = " \t"


def t_whitespace(t: lex.LexToken) -> None:
    r"\s+"


def t_LPAREN(t: lex.LexToken) -> lex.LexToken:
    r"\("
    t.lexer.open_parens.append(t.lexpos)
    return t


def t_RPAREN(t: lex.LexToken) -> lex.LexToken:
    r"\)"
    if not t.lexer.open_parens:
        span = Span.at(t.lexpos)
        raise UnbalancedParens("Unmatched ')'", span, _SOURCE)
    t.lexer.open_parens.pop()
    return t


def t_error(t: lex.LexToken) -> None:
    span = Span.at(t.lexpos)
    raise SurfaceError(f"Unexpected character {t.value[0]!r}", span, _SOURCE)


def p_term(p: yacc.YaccProduction) -> None:
    "term : items"
    items = p[1]
    p[0] = App.of(*items) if items else None


def p_items_more(p: yacc.YaccProduction) -> None:
    "items : items item"
    p[0] = p[1] + (p[2],)


def p_items_empty(p: yacc.YaccProduction) -> None:
    "items :"
    p[0] = ()


def p_item_atom(p: yacc.YaccProduction) -> None:
    "item : ATOM"
    p[0] = Atom(p[1])


def p_item_group(p: yacc.YaccProduction) -> None:
    "item : LPAREN term RPAREN"
    if p[2] is None:
        span = Span(p.lexpos(1), p.lexpos(3) + 1)
        raise EmptyTerm("Empty parentheses", span, _SOURCE)
    p[0] = p[2]


def p_error(p: lex.LexToken | None) -> None:
    if p is None:
        if _LEXER is not None and _LEXER.open_parens:
            start = _LEXER.open_parens[-1]
            raise UnbalancedParens("Unclosed '('", Span.at(start), _SOURCE)
        span = Span(len(_SOURCE), len(_SOURCE))
        raise SurfaceError("Unexpected end of input", span, _SOURCE)
    span = Span.at(p.lexpos)
    raise SurfaceError("Unexpected token", span, _SOURCE)


_PARSER = None


def parse_term(source: str) -> Term:
    """
    Parse ``source`` into a ``Term``.

    Each non-parenthesis, non-whitespace character is one atom. Juxtaposed
    items form one application and a lone item stands for itself, so
    ``"(x)"`` and ``"x"`` both parse to ``Atom("x")``.
    """

    global _SOURCE, _LEXER, _PARSER
    _SOURCE = source
    lexer = lex.lex()
    lexer.open_parens = []
    _LEXER = lexer
    if _PARSER is None:
        _PARSER = yacc.yacc(start="term", debug=False, write_tables=False)
    term = cast(Term | None, _PARSER.parse(source, lexer=lexer))
    if term is None:
        span = Span(0, len(source))
        raise EmptyTerm("Empty term", span, source)
    return term


def parse_template(source: str) -> tuple[Slot, ...]:
    """
    Parse a combinator template written with digit atoms, e.g. ``"02(12)"``.

    Digits are argument indices; parenthesised groups are sub-applications.
    """

    term = parse_term(source)

    def to_slot(t: Term) -> Slot:
        match t:
            case Atom(name) if name.isdigit():
                return int(name)
            case Atom(name):
                raise SurfaceError(
                    f"Expected an argument index, got {name!r}",
                    Span(0, len(source)),
                    source,
                )
            case App(children):
                return tuple(to_slot(child) for child in children)
        raise TypeError(f"Unexpected term in template: {t!r}")

    if isinstance(term, Atom):
        return (to_slot(term),)
    return cast(tuple[Slot, ...], to_slot(term))


__all__ = ["parse_term", "parse_template"]
