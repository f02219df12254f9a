from qgrammar.deebnf import deebnf
from qgrammar.reader import read_grammar
from qgrammar.writer import format_grammar


def convert(*lines):
    grammar = read_grammar("\n".join(lines) + "\n")
    deebnf(grammar)
    return grammar


def bodies(grammar, name):
    symbol = grammar.lookup(name)
    return [[e.symbol.name for e in p.elements] for p in symbol.productions]


def messages(grammar):
    return [message for message, _ in grammar.errors]


def test_optional_part_becomes_new_symbol():
    g = convert("> <a>", "/ <empty>", "<a> ::= <b> [ <c> ] <d>")
    assert bodies(g, "<a>") == [["<b>", "<a-a>", "<d>"]]
    assert bodies(g, "<a-a>") == [["<empty>"], ["<c>"]]
    assert g.errors == []


def test_bracket_symbols_are_removed():
    g = convert("> <a>", "/ <empty>", "<a> ::= <b> [ <c> ] { <d> } ( <e> )")
    for name in "()[]{}":
        assert g.lookup(name) is None
    names = {
        e.symbol.name
        for s in g.symbols
        for p in s.productions
        for e in p.elements
    }
    assert names.isdisjoint(set("()[]{}"))


def test_documented_example():
    g = convert(
        "> <a>",
        "/ <empty>",
        "<a> ::= <b> [ <c> ] <d> { <e> | <f> } <g>",
    )
    assert bodies(g, "<a>") == [["<b>", "<a-a>", "<d>", "<a-b>", "<g>"]]
    assert bodies(g, "<a-a>") == [["<empty>"], ["<c>"]]
    assert bodies(g, "<a-b>") == [
        ["<empty>"],
        ["<e>", "<a-b>"],
        ["<f>", "<a-b>"],
    ]


def test_parentheses_group_alternatives_without_empty_rule():
    g = convert("> <a>", "/ <empty>", "<a> ::= ( x | y ) z")
    assert bodies(g, "<a>") == [["<a-a>", "z"]]
    assert bodies(g, "<a-a>") == [["x"], ["y"]]


def test_plain_and_quoted_names_get_suffix():
    plain = convert("> a", "/ <empty>", "a ::= [ x ] y")
    assert bodies(plain, "a") == [["a-a", "y"]]
    quoted = convert("> 'a'", "/ <empty>", "'a' ::= [ x ] y")
    assert bodies(quoted, "'a'") == [["'a-a'", "y"]]


def test_invented_name_avoids_existing_symbol():
    g = convert("> <a>", "/ <empty>", "<a> ::= <a-a> [ x ]")
    assert bodies(g, "<a>") == [["<a-a>", "<a-b>"]]
    assert bodies(g, "<a-b>") == [["<empty>"], ["x"]]
    assert g.lookup("<a-a>").is_terminal()


def test_nested_brackets():
    g = convert("> <a>", "/ <empty>", "<a> ::= [ x [ y ] ]")
    assert bodies(g, "<a>") == [["<a-a>"]]
    assert bodies(g, "<a-a>") == [["<empty>"], ["x", "<a-a-a>"]]
    assert bodies(g, "<a-a-a>") == [["<empty>"], ["y"]]


def test_unexpected_closer_is_dropped():
    g = convert("> <a>", "/ <empty>", "<a> ::= x ] y")
    assert "UNEXPECTED ]" in messages(g)
    assert bodies(g, "<a>") == [["x", "y"]]


def test_empty_brackets_get_empty_element():
    g = convert("> <a>", "/ <empty>", "<a> ::= [ ] x")
    assert "EMPTY BRACKETED RULE" in messages(g)
    assert all(body == ["<empty>"] for body in bodies(g, "<a-a>"))
    assert bodies(g, "<a>") == [["<a-a>", "x"]]


def test_optional_without_empty_symbol_is_reported():
    g = convert("> <a>", "<a> ::= [ x ]")
    assert "EMPTY SYMBOL MUST BE DEFINED" in messages(g)
    assert bodies(g, "<a-a>") == [["x"]]


def test_bracket_defined_as_nonterminal_is_reported():
    g = convert("> <a>", "/ <empty>", "<a> ::= x", "[ ::= q")
    assert "BRACE SHOULD BE NONTERMINAL" in messages(g)
    assert g.lookup("[") is None


def test_written_result_reads_back_the_same():
    g = convert(
        "> <a>",
        "/ <empty>",
        "<a> ::= <b> [ <c> ] <d> { <e> | <f> } <g>",
    )
    again = read_grammar(format_grammar(g))
    assert again.errors == []
    for name in ("<a>", "<a-a>", "<a-b>"):
        assert bodies(again, name) == bodies(g, name)