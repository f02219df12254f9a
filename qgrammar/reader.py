"""Reading grammars written in BNF-like notation.

Rules look like ``<a> ::= <b> 'c' d`` (``:``, ``=`` and ``:=`` also work),
alternatives are separated with ``|``, indented lines continue a rule,
``> sym`` names the distinguished symbol, ``/ sym`` names the empty symbol,
and lines starting with ``#`` are comments.
"""

from __future__ import annotations

from typing import TextIO

from .grammar import COMMENT, SYMBOL_LENGTH, Element, Grammar, Production, Symbol

_BLANKS = (" ", "\t")


def _is_alnum(ch: str | None) -> bool:
    return ch is not None and ch.isascii() and ch.isalnum()


class _Scanner:
    """Character scanner that builds a grammar from text."""

    def __init__(self, text: str) -> None:
        self._chars = iter(text)
        self.grammar = Grammar()
        self.line = 1
        self.ch: str | None = None
        self.end_list = False
        self.end_rule = False
        self._advance()

    def _advance(self) -> None:
        self.ch = next(self._chars, None)

    def _newline(self) -> None:
        self.line += 1
        self._advance()

    def _skip_line(self) -> None:
        while self.ch not in ("\n", None):
            self._advance()
        if self.ch == "\n":
            self._newline()

    def _skip_white(self) -> None:
        while self.ch in _BLANKS:
            self._advance()

    def _nonblank(self) -> None:
        """Scan to a nonblank character, noting ends of alternatives and rules."""
        while self.ch in ("|", " ", "\t", "\n", None):
            if self.ch == "|":
                self.end_list = True
                self._advance()
                return
            if self.ch is None:
                self.end_rule = True
                self.end_list = True
                return
            if self.ch == "\n":
                self._newline()
                if self.ch not in _BLANKS:
                    self.end_rule = True
                    self.end_list = True
                    return
            else:
                self._advance()

    def _extend(self, chars: list[str], ch: str) -> None:
        if len(chars) >= SYMBOL_LENGTH:
            self.grammar.error("SYMBOL TOO LONG", self.line)
        else:
            chars.append(ch)

    def _symbol(self) -> Symbol:
        """Read one symbol; must be called with the current character nonblank."""
        chars = [self.ch] if self.ch is not None else []

        if self.ch == "<":
            self._advance()
            if _is_alnum(self.ch):
                while True:
                    self._extend(chars, self.ch)
                    if self.ch == ">":
                        break
                    self._advance()
                    if self.ch in ("\n", None):
                        break
                if self.ch == ">":
                    self._advance()
                else:
                    self.grammar.error("MISSING CLOSING > MARK", self.line)
                    self._extend(chars, ">")
            else:
                while True:
                    if self.ch is not None:
                        self._extend(chars, self.ch)
                    self._advance()
                    if self.ch in (" ", "\t", "\n", None):
                        break

        elif self.ch in ('"', "'"):
            quote = self.ch
            self._advance()
            while self.ch not in (quote, "\n", None):
                self._extend(chars, self.ch)
                self._advance()
            if self.ch == quote:
                self._extend(chars, quote)
                self._advance()
            else:
                self.grammar.error("MISSING CLOSING QUOTE", self.line)
                self._extend(chars, quote)

        else:
            self._advance()
            while self.ch not in (" ", "\t", "\n", None):
                self._extend(chars, self.ch)
                self._advance()

        name = "".join(chars)
        found = self.grammar.lookup(name)
        return found if found is not None else self.grammar.define(name, self.line)

    def _symbol_list(self) -> list[Element]:
        elements = []
        while True:
            self._nonblank()
            if self.end_list:
                self.end_list = False
                return elements
            line = self.line
            elements.append(Element(self._symbol(), line))

    def _productions(self) -> list[Production]:
        productions = []
        while True:
            production = Production(line=self.line)
            self._nonblank()
            if not self.end_list:
                production.elements = self._symbol_list()
            else:
                self.grammar.error("EMPTY PRODUCTION RULE", production.line)
                if self.grammar.empty is not None:
                    production.elements = [Element(self.grammar.empty, self.line)]
                self.end_list = False
            productions.append(production)
            if self.end_rule:
                break
        self.end_rule = False
        self.end_list = False
        return productions

    def _rule_operator(self) -> bool:
        """Consume ``::=``, ``:=``, ``:`` or ``=``; tell whether one was there."""
        if self.ch == ":":
            self._advance()
            if self.ch == ":":
                self._advance()
                if self.ch == "=":
                    self._advance()
            elif self.ch == "=":
                self._advance()
            return True
        if self.ch == "=":
            self._advance()
            return True
        return False

    def _marker_symbol(self, missing: str) -> Symbol | None:
        self._advance()
        self._skip_white()
        if self.ch in ("\n", None):
            self.grammar.error(missing, self.line)
            return None
        return self._symbol()

    def read(self) -> Grammar:
        grammar = self.grammar
        while self.ch is not None:
            while self.ch == "\n":
                self._newline()

            if self.ch == ">":
                if grammar.head is not None:
                    grammar.error("EXTRA DISTINGUISHED SYMBOL", self.line)
                else:
                    grammar.head = self._marker_symbol("NO DISTINGUISHED SYMBOL")
                self._skip_line()

            elif self.ch == "/":
                if grammar.empty is not None:
                    grammar.error("EXTRA EMPTY SYMBOL", self.line)
                    self._skip_line()
                else:
                    grammar.empty = self._marker_symbol("NO EMPTY SYMBOL")
                self._skip_line()

            elif self.ch == COMMENT:
                self._skip_line()

            elif self.ch is not None:
                symbol = self._symbol()
                self._skip_white()
                if self._rule_operator():
                    symbol.productions.extend(self._productions())
                else:
                    grammar.error("MISSING ::= OR EQUIVALENT", self.line)
                    self._skip_line()

        if grammar.head is None:
            grammar.error("DISTINGUISHED SYMBOL NOT GIVEN", -1)
        elif grammar.head.is_terminal():
            grammar.error("DISTINGUISHED SYMBOL IS TERMINAL", grammar.head.line)
        if grammar.empty is not None and not grammar.empty.is_terminal():
            grammar.error(
                "EMPTY SYMBOL IS NONTERMINAL", grammar.empty.productions[0].line
            )
        return grammar


def read_grammar(text: str) -> Grammar:
    """Parse grammar text; problems are recorded in the grammar's errors."""
    return _Scanner(text).read()


def read_grammar_file(stream: TextIO) -> Grammar:
    """Parse a grammar from an open text stream."""
    return read_grammar(stream.read())