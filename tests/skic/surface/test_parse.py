import pytest

from skic.common.span import Span
from skic.core.ast import App, Atom
from skic.core.pretty import pretty
from skic.errors import EmptyTerm, SurfaceError, UnbalancedParens
from skic.surface.parse import parse_template, parse_term

S, K, I = Atom("S"), Atom("K"), Atom("I")
a, b, c, x = Atom("a"), Atom("b"), Atom("c"), Atom("x")


def test_juxtaposition_forms_one_application() -> None:
    assert parse_term("SKKx") == App((S, K, K, x))


def test_single_item_collapses() -> None:
    assert parse_term("x") == x
    assert parse_term("(x)") == x
    assert parse_term("((x))") == x
    assert parse_term("(SK)") == App((S, K))


def test_groups_nest() -> None:
    assert parse_term("S(Ka)b") == App((S, App((K, a)), b))
    assert parse_term("(ab)c") == App((App((a, b)), c))


def test_whitespace_is_skipped() -> None:
    assert parse_term(" S K\tK\nx ") == parse_term("SKKx")
    assert parse_term("S (K a) b") == parse_term("S(Ka)b")


def test_stray_close_paren() -> None:
    with pytest.raises(UnbalancedParens, match="Unmatched") as info:
        parse_term("x)y")
    assert info.value.span == Span(1, 2)
    assert str(info.value) == "Unmatched ')' @ 1:2: ')'"


def test_unclosed_open_paren_reports_innermost() -> None:
    with pytest.raises(UnbalancedParens, match="Unclosed") as info:
        parse_term("(x")
    assert info.value.span == Span(0, 1)

    with pytest.raises(UnbalancedParens) as info:
        parse_term("(x(y")
    assert info.value.span == Span(2, 3)

    with pytest.raises(UnbalancedParens) as info:
        parse_term("((x)")
    assert info.value.span == Span(0, 1)


def test_empty_input_is_rejected() -> None:
    with pytest.raises(EmptyTerm, match="Empty term"):
        parse_term("")
    with pytest.raises(EmptyTerm, match="Empty term"):
        parse_term("   ")


def test_empty_parens_are_rejected() -> None:
    with pytest.raises(EmptyTerm, match="Empty parentheses") as info:
        parse_term("a()")
    assert info.value.span == Span(1, 3)
    with pytest.raises(EmptyTerm):
        parse_term("()")


def test_parse_errors_are_surface_errors() -> None:
    assert issubclass(UnbalancedParens, SurfaceError)
    assert issubclass(EmptyTerm, SurfaceError)


def test_parser_recovers_after_an_error() -> None:
    with pytest.raises(UnbalancedParens):
        parse_term("(S")
    assert parse_term("SK") == App((S, K))


def test_deep_nesting() -> None:
    depth = 2000
    assert parse_term("(" * depth + "x" + ")" * depth) == x
    source = "a(" * depth + "ab" + ")" * depth
    assert pretty(parse_term(source)) == source


def test_parse_template() -> None:
    assert parse_template("02(12)") == (0, 2, (1, 2))
    assert parse_template("0 2 (1 2)") == (0, 2, (1, 2))
    assert parse_template("0") == (0,)
    assert parse_template("(10)") == (1, 0)


def test_parse_template_rejects_letters() -> None:
    with pytest.raises(SurfaceError, match="Expected an argument index"):
        parse_template("0x")


def test_span_helpers() -> None:
    assert Span.at(3) == Span(3, 4)
    assert Span(1, 3).extract("a()b") == "()"


def test_every_kind_of_whitespace_is_skipped() -> None:
    assert parse_term("S\x0bK\x0cx\u00a0") == parse_term("SKx")
    assert parse_term("\u2003S\r\nK") == App((S, K))
