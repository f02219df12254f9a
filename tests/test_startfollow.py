from qgrammar.reader import read_grammar
from qgrammar.startfollow import start_follow
from qgrammar.writer import format_grammar

EXPR = (
    "> <e>\n"
    "<e> ::= <t> '+' <e> | <t>\n"
    "<t> ::= 'x' | '(' <e> ')'\n"
)


def names(symbols):
    return {s.name for s in symbols}


def test_start_sets():
    grammar = read_grammar(EXPR)
    start_follow(grammar)
    assert names(grammar.lookup("<e>").starter) == {"'x'", "'('"}
    assert names(grammar.lookup("<t>").starter) == {"'x'", "'('"}


def test_terminal_is_its_own_start_set():
    grammar = read_grammar(EXPR)
    start_follow(grammar)
    plus = grammar.lookup("'+'")
    assert plus.starter == [plus]


def test_follow_sets():
    grammar = read_grammar(EXPR)
    start_follow(grammar)
    assert names(grammar.lookup("<e>").follows) == {"')'"}
    assert names(grammar.lookup("<t>").follows) == {"'+'", "')'"}


def test_sets_have_no_duplicates():
    grammar = read_grammar(EXPR)
    start_follow(grammar)
    for symbol in grammar.symbols:
        assert len(symbol.starter) == len(set(map(id, symbol.starter)))
        assert len(symbol.follows) == len(set(map(id, symbol.follows)))


def test_unreachable_symbols_get_no_sets():
    grammar = read_grammar("> <a>\n<a> ::= x\n<u> ::= q <a>\n")
    start_follow(grammar)
    assert grammar.lookup("<u>").starter == []
    assert grammar.lookup("q").starter == []
    assert names(grammar.lookup("<a>").starter) == {"x"}


def test_sets_appear_in_written_grammar():
    grammar = read_grammar(EXPR)
    start_follow(grammar)
    text = format_grammar(grammar)
    assert "# start set:" in text
    assert "# follow set:" in text