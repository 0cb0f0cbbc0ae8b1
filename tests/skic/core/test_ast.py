import pytest

from skic.core.ast import App, Atom, mk_app, spine


def test_atoms_and_applications_compare_structurally() -> None:
    assert Atom("x") == Atom("x")
    assert Atom("x") != Atom("y")
    assert App([Atom("a"), Atom("b")]) == App((Atom("a"), Atom("b")))
    assert App((App((Atom("a"), Atom("b"))), Atom("c"))) != App(
        (Atom("a"), Atom("b"), Atom("c"))
    )


def test_is_atom_and_is_empty() -> None:
    assert Atom("S").is_atom()
    assert not Atom("S").is_empty()
    app = App((Atom("S"), Atom("K")))
    assert not app.is_atom()
    assert not app.is_empty()
    assert App(()).is_empty()


def test_atom_requires_a_name() -> None:
    with pytest.raises(ValueError, match="non-empty"):
        Atom("")


def test_of_collapses_singletons() -> None:
    x = Atom("x")
    assert App.of(x) is x
    assert App.of(x, Atom("y")) == App((x, Atom("y")))
    assert mk_app(iter([x, Atom("y")])) == App((x, Atom("y")))
    with pytest.raises(ValueError):
        App.of()


def test_head_and_args() -> None:
    app = App((Atom("f"), Atom("a"), Atom("b")))
    assert app.head == Atom("f")
    assert app.args == (Atom("a"), Atom("b"))


def test_spine_merges_nested_heads() -> None:
    f, a, b, c = Atom("f"), Atom("a"), Atom("b"), Atom("c")
    nested = App((App((App((f, a)), b)), c))
    assert spine(nested) == (f, (a, b, c))
    assert spine(App((f, App((a, b)), c))) == (f, (App((a, b)), c))
    assert spine(f) == (f, ())


def test_spine_of_long_left_nested_term() -> None:
    term = Atom("f")
    for _ in range(5000):
        term = App((term, Atom("a")))
    head, args = spine(term)
    assert head == Atom("f")
    assert len(args) == 5000
