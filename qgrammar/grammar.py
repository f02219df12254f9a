"""Grammar data model: symbols, production rules, rule comparison and reachability."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from enum import Enum, auto

STRING_LIMIT = 10000
"""Capacity of the symbol-name pool, counting one extra unit per name."""

SYMBOL_LENGTH = 50
"""Maximum number of characters in any symbol name."""

COMMENT = "#"
RULE_SYMBOL = "::="


class State(Enum):
    """Markings used on symbols and production rules by the grammar tools."""

    IS_EMPTY = auto()
    CAN_BE_EMPTY = auto()
    TOUCHED = auto()
    UNTOUCHED = auto()


@dataclass(eq=False)
class Element:
    """One occurrence of a symbol in the body of a production rule."""

    symbol: Symbol
    line: int = -1


@dataclass(eq=False)
class Production:
    """A production rule: the sequence of elements on its right-hand side."""

    elements: list[Element] = field(default_factory=list)
    line: int = -1
    state: State = State.UNTOUCHED
    starter: list[Symbol] = field(default_factory=list, repr=False)
    ender: list[Symbol] = field(default_factory=list, repr=False)


@dataclass(eq=False)
class Symbol:
    """A terminal or nonterminal symbol; nonterminals own production rules."""

    name: str
    line: int = -1
    productions: list[Production] = field(default_factory=list, repr=False)
    state: State = State.UNTOUCHED
    starter: list[Symbol] = field(default_factory=list, repr=False)
    follows: list[Symbol] = field(default_factory=list, repr=False)

    def is_terminal(self) -> bool:
        """A symbol is terminal when no production rule reduces to it."""
        return not self.productions


def same_rule(p: Production, q: Production) -> bool:
    """Tell whether two rules reference the same symbols in the same order."""
    return len(p.elements) == len(q.elements) and all(
        a.symbol is b.symbol for a, b in zip(p.elements, q.elements)
    )


class Grammar:
    """A whole grammar: the ordered symbol list, head and empty symbols, diagnostics."""

    def __init__(self) -> None:
        self.symbols: list[Symbol] = []
        self.head: Symbol | None = None
        self.empty: Symbol | None = None
        self.errors: list[tuple[str, int]] = []
        self._pool_used = 0

    def lookup(self, name: str) -> Symbol | None:
        """Return the symbol with this name, or None if there is none."""
        return next((s for s in self.symbols if s.name == name), None)

    def define(self, name: str, line: int = -1) -> Symbol:
        """Append a new symbol with this name; it must not already exist."""
        symbol = Symbol(name=name, line=line)
        self.symbols.append(symbol)

        needed = len(name) + 1
        overflow = max(0, needed - (STRING_LIMIT - self._pool_used))
        for _ in range(overflow):
            self.error("STRING POOL OVERVLOW", line)
        self._pool_used += needed - overflow
        return symbol

    def error(self, message: str, line: int = -1) -> None:
        """Record a diagnostic and report it on standard error.

        A line number of zero or less means no line can be attributed.
        """
        self.errors.append((message, line))
        where = f" on line {line}" if line > 0 else ""
        sys.stderr.write(f" >>{message}{where}<<\n")

    def reach_setup(self) -> None:
        """Mark every symbol as not yet reached."""
        for symbol in self.symbols:
            symbol.state = State.UNTOUCHED

    def reach_touch(self, symbol: Symbol) -> None:
        """Mark the symbol and every untouched symbol reachable from it as touched."""
        symbol.state = State.TOUCHED
        pending = [symbol]
        while pending:
            current = pending.pop()
            for production in current.productions:
                for element in production.elements:
                    target = element.symbol
                    if target.state is State.UNTOUCHED:
                        target.state = State.TOUCHED
                        pending.append(target)

    def touch_reachable(self) -> None:
        """Mark exactly the symbols reachable from the head symbol as touched."""
        self.reach_setup()
        if self.head is not None:
            self.reach_touch(self.head)