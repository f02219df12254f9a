from qgrammar.reader import read_grammar
from qgrammar.squeeze import squeeze
from qgrammar.writer import format_grammar


def rules(grammar, name):
    return [
        [e.symbol.name for e in p.elements]
        for p in grammar.lookup(name).productions
    ]


def test_documented_example():
    grammar = read_grammar(
        "> <a>\n<a> ::= <b>\n     |  x <e>\n     |  x <e>\n<b> ::= y <c>\n"
    )
    squeeze(grammar)
    assert rules(grammar, "<a>") == [["y", "<c>"], ["x", "<e>"]]


def test_duplicates_removed_keeping_first():
    grammar = read_grammar("> <a>\n<a> ::= x | y | x | y | z\n")
    squeeze(grammar)
    assert rules(grammar, "<a>") == [["x"], ["y"], ["z"]]


def test_chained_inlining():
    grammar = read_grammar("> <a>\n<a> ::= <b>\n<b> ::= <c> z\n<c> ::= w\n")
    squeeze(grammar)
    assert rules(grammar, "<a>") == [["w", "z"]]


def test_multi_rule_symbols_are_kept():
    grammar = read_grammar("> <a>\n<a> ::= <b> x\n<b> ::= y | z\n")
    squeeze(grammar)
    assert rules(grammar, "<a>") == [["<b>", "x"]]
    assert rules(grammar, "<b>") == [["y"], ["z"]]


def test_squeeze_is_idempotent():
    grammar = read_grammar("> <a>\n<a> ::= <b> | <b>\n<b> ::= p <c>\n<c> ::= q | r\n")
    squeeze(grammar)
    once = format_grammar(grammar)
    squeeze(grammar)
    assert format_grammar(grammar) == once


def test_no_rule_repeated_after_squeeze():
    grammar = read_grammar("> <s>\n<s> ::= <t> | <u>\n<t> ::= a\n<u> ::= a\n")
    squeeze(grammar)
    body = rules(grammar, "<s>")
    assert body == [["a"]]