"""Start and follow sets for the reachable symbols of a grammar."""

from __future__ import annotations

from .grammar import Grammar, Production, State, Symbol


def _add_all(target: list[Symbol], source: list[Symbol]) -> bool:
    """Append each symbol of source missing from target; tell whether any was added."""
    added = False
    for symbol in list(source):
        if symbol not in target:
            target.append(symbol)
            added = True
    return added


def _reachable(grammar: Grammar) -> list[Symbol]:
    return [s for s in grammar.symbols if s.state is State.TOUCHED]


def _compute_starts(symbols: list[Symbol]) -> None:
    changed = True
    while changed:
        changed = False
        for symbol in symbols:
            if symbol.is_terminal():
                changed = _add_all(symbol.starter, [symbol]) or changed
            else:
                for production in symbol.productions:
                    if production.elements:
                        first = production.elements[0].symbol
                        changed = _add_all(symbol.starter, first.starter) or changed


def _follow_within(production: Production) -> None:
    for before, after in zip(production.elements, production.elements[1:]):
        _add_all(before.symbol.follows, after.symbol.starter)


def _compute_follows(symbols: list[Symbol]) -> None:
    for symbol in symbols:
        for production in symbol.productions:
            _follow_within(production)

    changed = True
    while changed:
        changed = False
        for symbol in symbols:
            for production in symbol.productions:
                if production.elements:
                    last = production.elements[-1].symbol
                    changed = _add_all(last.follows, symbol.follows) or changed


def start_follow(grammar: Grammar) -> None:
    """Fill in start and follow sets of every symbol reachable from the head."""
    grammar.touch_reachable()
    symbols = _reachable(grammar)
    _compute_starts(symbols)
    _compute_follows(symbols)