import pytest

from qgrammar.grammar import (
    STRING_LIMIT,
    Element,
    Grammar,
    Production,
    State,
    Symbol,
    same_rule,
)


def _rule(*symbols):
    return Production(elements=[Element(s) for s in symbols])


def test_symbol_without_productions_is_terminal():
    a = Symbol("a")
    assert a.is_terminal()
    a.productions.append(_rule(Symbol("b")))
    assert not a.is_terminal()


def test_same_rule_identical_sequences():
    a, b = Symbol("a"), Symbol("b")
    assert same_rule(_rule(a, b), _rule(a, b))


def test_same_rule_differs_in_order_or_length():
    a, b = Symbol("a"), Symbol("b")
    assert not same_rule(_rule(a, b), _rule(b, a))
    assert not same_rule(_rule(a), _rule(a, b))
    assert not same_rule(_rule(a, b), _rule(a))


def test_same_rule_compares_identity_not_name():
    assert not same_rule(_rule(Symbol("x")), _rule(Symbol("x")))


def test_same_rule_empty_rules_match():
    assert same_rule(Production(), Production())


def test_define_and_lookup_preserve_order():
    g = Grammar()
    first = g.define("<a>", 3)
    second = g.define("b", 4)
    assert g.symbols == [first, second]
    assert g.lookup("b") is second
    assert first.line == 3
    assert g.lookup("missing") is None


def test_error_records_and_reports_with_line(capsys):
    g = Grammar()
    g.error("BOOM", 7)
    assert g.errors == [("BOOM", 7)]
    assert capsys.readouterr().err == " >>BOOM on line 7<<\n"


def test_error_without_line(capsys):
    g = Grammar()
    g.error("DISTINGUISHED SYMBOL NOT GIVEN", -1)
    assert capsys.readouterr().err == " >>DISTINGUISHED SYMBOL NOT GIVEN<<\n"


def test_string_pool_overflow_reported():
    g = Grammar()
    g.define("x" * (STRING_LIMIT - 1))
    assert g.errors == []
    g.define("y")
    assert g.errors.count(("STRING POOL OVERVLOW", -1)) == 2


def test_reachability_marks_only_reachable():
    g = Grammar()
    a, b, c = g.define("a"), g.define("b"), g.define("c")
    a.productions.append(_rule(b))
    c.productions.append(_rule(a))
    g.head = a
    g.touch_reachable()
    assert a.state is State.TOUCHED
    assert b.state is State.TOUCHED
    assert c.state is State.UNTOUCHED


def test_reachability_handles_cycles():
    g = Grammar()
    a, b = g.define("a"), g.define("b")
    a.productions.append(_rule(b))
    b.productions.append(_rule(a, b))
    g.reach_setup()
    g.reach_touch(b)
    assert [s.state for s in g.symbols] == [State.TOUCHED, State.TOUCHED]


def test_touch_reachable_without_head_touches_nothing():
    g = Grammar()
    g.define("a").state = State.TOUCHED
    g.touch_reachable()
    assert all(s.state is State.UNTOUCHED for s in g.symbols)


@pytest.mark.parametrize("count", [1, 5, 20])
def test_long_chain_is_fully_reached(count):
    g = Grammar()
    chain = [g.define(f"s{i}") for i in range(count)]
    for left, right in zip(chain, chain[1:]):
        left.productions.append(_rule(right))
    g.head = chain[0]
    g.touch_reachable()
    assert all(s.state is State.TOUCHED for s in chain)