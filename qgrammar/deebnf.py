"""Rewriting Wirth-style EBNF brackets into plain BNF rules.

``( ... )`` groups alternatives, ``[ ... ]`` marks an optional part and
``{ ... }`` a repeated one. Each bracketed part moves into a new nonterminal
named after the symbol whose rule holds it, with a suffix such as ``-a``.
Optional parts gain an empty alternative. Repeated parts also refer back to
themselves. The reader takes the bracket characters as terminals, and this
module removes them from the grammar.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Callable, Iterator
from itertools import count
from string import ascii_lowercase

from .grammar import Element, Grammar, Production, State, Symbol

_QUOTE_PAIRS = (("<", ">"), ('"', '"'), ("'", "'"))


def _suffix(number: int) -> str:
    """Letters naming an invented symbol, least significant letter first."""
    letters = []
    while True:
        number, digit = divmod(number, 26)
        letters.append(ascii_lowercase[digit])
        if number == 0:
            return "".join(letters)


def _name_parts(name: str) -> tuple[str, str]:
    """Split a name into the prefix an extension follows and the closing quote."""
    if name and (name[0], name[-1]) in _QUOTE_PAIRS:
        return name[:-1] + "-", name[-1]
    return name + "-", ""


def _find_closer(
    elements: list[Element], opener: Symbol, closer: Symbol | None, nest: int
) -> tuple[int | None, int]:
    """Find the closer that balances the opener, carrying the nesting depth."""
    for position, element in enumerate(elements):
        if element.symbol is closer:
            if nest == 0:
                return position, nest
            nest -= 1
        elif element.symbol is opener:
            nest += 1
    return None, nest


class _Rewriter:
    def __init__(self, grammar: Grammar) -> None:
        self.grammar = grammar
        self.lparen = self._take_meta("(")
        self.rparen = self._take_meta(")")
        self.lsquare = self._take_meta("[")
        self.rsquare = self._take_meta("]")
        self.lcurly = self._take_meta("{")
        self.rcurly = self._take_meta("}")
        self._closers = (
            (self.rparen, ")"),
            (self.rsquare, "]"),
            (self.rcurly, "}"),
        )
        self._openers: tuple[
            tuple[Symbol | None, Symbol | None, Callable[[Symbol], None] | None], ...
        ] = (
            (self.lparen, self.rparen, None),
            (self.lsquare, self.rsquare, self._add_empty_rule),
            (self.lcurly, self.rcurly, self._make_iterative),
        )

    def _take_meta(self, name: str) -> Symbol | None:
        """Remove a bracket symbol from the symbol list and return it."""
        symbol = self.grammar.lookup(name)
        if symbol is None:
            return None
        if not symbol.is_terminal():
            self.grammar.error(
                "BRACE SHOULD BE NONTERMINAL", symbol.productions[0].line
            )
        self.grammar.symbols.remove(symbol)
        return symbol

    def _invent(self, owner: Symbol, numbers: Iterator[int], line: int) -> Symbol:
        prefix, quote = _name_parts(owner.name)
        while True:
            name = prefix + _suffix(next(numbers)) + quote
            if self.grammar.lookup(name) is None:
                return self.grammar.define(name, line)

    def _fill_empty_body(self, rule: Production, line: int) -> None:
        self.grammar.error("EMPTY BRACKETED RULE", line)
        if self.grammar.empty is not None:
            rule.elements = [Element(self.grammar.empty, rule.line)]

    def _missing(self, closer: Symbol | None) -> str:
        if closer is self.rparen:
            return "MISSING )"
        if closer is self.rsquare:
            return "MISSING ]"
        return "MISSING }"

    def _extract(
        self,
        owner: Symbol,
        index: int,
        element: Element,
        tail: list[Element],
        closer: Symbol | None,
        numbers: Iterator[int],
    ) -> tuple[Symbol, list[Element]]:
        """Move a bracketed body into a new symbol; return it and what follows the body.

        The element holding the opening bracket is changed to refer to the new
        symbol. Alternatives inside the brackets are taken from the rules of
        the owner that follow the current one.
        """
        opener = element.symbol
        new = self._invent(owner, numbers, element.line)
        element.symbol = new

        rule = Production(elements=tail, line=element.line, state=State.UNTOUCHED)
        new.productions.append(rule)
        rules = owner.productions

        nest = 0
        while True:
            found, nest = _find_closer(rule.elements, opener, closer, nest)
            if found is not None:
                break
            if not rule.elements:
                self._fill_empty_body(rule, rule.line)
            if index + 1 >= len(rules):
                break
            rule = rules.pop(index + 1)
            new.productions.append(rule)

        if found is None:
            self.grammar.error(self._missing(closer), rule.line)
            return new, []

        rest = rule.elements[found + 1 :]
        closing_line = rule.elements[found].line
        rule.elements = rule.elements[:found]
        if not rule.elements:
            self._fill_empty_body(rule, closing_line)
        return new, rest

    def _add_empty_rule(self, symbol: Symbol) -> None:
        line = symbol.productions[0].line
        if self.grammar.empty is None:
            self.grammar.error("EMPTY SYMBOL MUST BE DEFINED", line)
            return
        symbol.productions.insert(
            0,
            Production(
                elements=[Element(self.grammar.empty, line)],
                line=line,
                state=State.UNTOUCHED,
            ),
        )

    def _make_iterative(self, symbol: Symbol) -> None:
        for production in symbol.productions:
            line = (
                production.elements[-1].line if production.elements else production.line
            )
            production.elements.append(Element(symbol, line))
        self._add_empty_rule(symbol)

    def _closing_text(self, symbol: Symbol) -> str | None:
        return next(
            (text for closer, text in self._closers if closer is not None and symbol is closer),
            None,
        )

    def _opening(self, symbol: Symbol):
        return next(
            (entry for entry in self._openers if entry[0] is not None and symbol is entry[0]),
            None,
        )

    def process(self, symbol: Symbol) -> None:
        numbers = count()
        rules = symbol.productions
        index = 0
        # Rules may be taken out of the list while it is walked.
        while index < len(rules):
            production = rules[index]
            remaining = deque(production.elements)
            kept: list[Element] = []
            while remaining:
                element = remaining.popleft()
                closing = self._closing_text(element.symbol)
                if closing is not None:
                    self.grammar.error(f"UNEXPECTED {closing}", element.line)
                    continue
                kept.append(element)
                opening = self._opening(element.symbol)
                if opening is None:
                    continue
                _, closer, finish = opening
                new, rest = self._extract(
                    symbol, index, element, list(remaining), closer, numbers
                )
                remaining = deque(rest)
                self.process(new)
                if finish is not None:
                    finish(new)
            production.elements = kept
            index += 1
        symbol.state = State.TOUCHED

    def run(self) -> None:
        symbols = self.grammar.symbols
        for symbol in symbols:
            symbol.state = State.UNTOUCHED
        # Invented symbols are appended while this loop runs and are seen by it.
        for symbol in symbols:
            if symbol.state is State.UNTOUCHED:
                self.process(symbol)


def deebnf(grammar: Grammar) -> None:
    """Replace ``( )``, ``[ ]`` and ``{ }`` groups with new nonterminals, in place."""
    _Rewriter(grammar).run()