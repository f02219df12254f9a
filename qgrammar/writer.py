"""Writing grammars back out as text, with column-aware line wrapping.

The distinguished symbol comes first (``> sym``), then the empty symbol
(``/ sym``) if any, then every rule reachable from the distinguished symbol
in depth-first order. Alternatives are written under the ``::=`` with a
vertical bar. Start and follow sets, when computed, follow each rule group as
comments. Reached terminals, unused rules and unused terminals are listed last.
"""

from __future__ import annotations

import io
from typing import Iterator, TextIO

from .grammar import COMMENT, RULE_SYMBOL, Grammar, State, Symbol

LINE_WIDTH = 80


class OutputWriter:
    """Writes characters to a stream while tracking the current column."""

    def __init__(self, stream: TextIO) -> None:
        self.stream = stream
        self.column = 0

    def newline(self) -> None:
        """End the current line."""
        self.stream.write("\n")
        self.column = 0

    def char(self, ch: str) -> None:
        """Write a single character."""
        self.stream.write(ch)
        self.column += 1

    def string(self, text: str) -> None:
        """Write a string that holds no newline."""
        self.stream.write(text)
        self.column += len(text)

    def spaces(self, column: int) -> None:
        """Write spaces until the given column is reached."""
        if self.column < column:
            self.string(" " * (column - self.column))

    def space_symbol(self, symbol: Symbol, column: int, ch: str) -> None:
        """Write a space before a symbol, or wrap to a new line if it will not fit.

        A wrapped line starts with ``ch`` (when the indent is past the first
        column) and is padded with spaces up to ``column``.
        """
        if self.column + 1 + len(symbol.name) > LINE_WIDTH:
            self.newline()
            if column > 1:
                self.char(ch)
            self.spaces(column)
        else:
            self.char(" ")

    def symbol(self, symbol: Symbol) -> None:
        """Write a symbol's name."""
        self.string(symbol.name)


class _GrammarPrinter:
    def __init__(self, grammar: Grammar, out: OutputWriter) -> None:
        self.grammar = grammar
        self.out = out
        self.bar_col = 0
        self.cont_col = 0

    def _production(self, production) -> None:
        for element in production.elements:
            self.out.space_symbol(element.symbol, self.cont_col, " ")
            self.out.symbol(element.symbol)

    def _symbol_set(self, title: str, symbols: list[Symbol]) -> None:
        out = self.out
        out.newline()
        out.char(COMMENT)
        out.string(title)
        self.cont_col = out.column + 1
        for symbol in symbols:
            out.space_symbol(symbol, self.cont_col, COMMENT)
            out.symbol(symbol)

    def production_group(self, symbol: Symbol) -> None:
        out = self.out
        out.newline()
        out.symbol(symbol)
        out.char(" ")
        self.bar_col = out.column + 1
        out.string(RULE_SYMBOL)
        self.cont_col = out.column + 1

        first, *rest = symbol.productions
        self._production(first)
        for production in rest:
            out.newline()
            out.spaces(self.bar_col)
            out.string("| ")
            self._production(production)

        if symbol.starter:
            self._symbol_set(" start set:  ", symbol.starter)
        if symbol.follows:
            self._symbol_set(" follow set: ", symbol.follows)
        if symbol.starter or symbol.follows:
            out.newline()

    @staticmethod
    def _referenced(symbol: Symbol) -> Iterator[Symbol]:
        for production in symbol.productions:
            for element in production.elements:
                yield element.symbol

    def _visit(self, symbol: Symbol) -> None:
        if not symbol.is_terminal():
            self.production_group(symbol)
        symbol.state = State.TOUCHED

    def reachable(self, root: Symbol) -> None:
        """Write reachable rule groups in depth-first order."""
        self._visit(root)
        stack = [self._referenced(root)]
        while stack:
            for target in stack[-1]:
                if target.state is State.UNTOUCHED:
                    self._visit(target)
                    stack.append(self._referenced(target))
                    break
            else:
                stack.pop()

    def _header(self, title: str, remember_indent: bool) -> None:
        out = self.out
        out.newline()
        out.newline()
        out.char(COMMENT)
        out.string(title)
        if remember_indent:
            self.cont_col = out.column + 1

    def write(self) -> None:
        grammar, out = self.grammar, self.out

        if grammar.head is not None:
            out.string("> ")
            out.symbol(grammar.head)
        else:
            out.char(COMMENT)
            out.string(" no distinguished symbol!")

        if grammar.empty is not None:
            out.newline()
            out.string("/ ")
            out.symbol(grammar.empty)

        for symbol in grammar.symbols:
            symbol.state = State.UNTOUCHED
        if grammar.head is not None:
            out.newline()
            self.reachable(grammar.head)

        reached_terminals = [
            s for s in grammar.symbols if s.is_terminal() and s.state is State.TOUCHED
        ]
        if reached_terminals:
            self._header(" terminals:  ", True)
            for symbol in reached_terminals:
                out.space_symbol(symbol, self.cont_col, COMMENT)
                out.symbol(symbol)

        unused_rules = [
            s
            for s in grammar.symbols
            if not s.is_terminal() and s.state is State.UNTOUCHED
        ]
        if unused_rules:
            self._header(" unused productions", False)
            for symbol in unused_rules:
                self.production_group(symbol)

        unused_terminals = [
            s for s in grammar.symbols if s.is_terminal() and s.state is State.UNTOUCHED
        ]
        if unused_terminals:
            self._header(" unused terminals: ", True)
            for symbol in unused_terminals:
                out.space_symbol(symbol, self.cont_col, COMMENT)
                out.symbol(symbol)

        out.newline()


def write_grammar(grammar: Grammar, stream: TextIO) -> None:
    """Write the grammar to a text stream; symbol states are left marked."""
    _GrammarPrinter(grammar, OutputWriter(stream)).write()


def format_grammar(grammar: Grammar) -> str:
    """Return the text that write_grammar would produce."""
    buffer = io.StringIO()
    write_grammar(grammar, buffer)
    return buffer.getvalue()