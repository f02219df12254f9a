"""Shrinking a grammar by removing duplicate rules and inlining single-rule symbols.

Rules identical to an earlier rule of the same symbol are dropped, and every
reference to a nonterminal that has exactly one rule is replaced by the body
of that rule. This repeats until nothing changes.
"""

from __future__ import annotations

from .grammar import Element, Grammar, same_rule


def _squeeze_rules(grammar: Grammar) -> bool:
    changed = False
    for symbol in grammar.symbols:
        kept = []
        for production in symbol.productions:
            if any(same_rule(k, production) for k in kept):
                changed = True
            else:
                kept.append(production)
        symbol.productions[:] = kept
    return changed


def _squeeze_symbols(grammar: Grammar) -> bool:
    changed = False
    for symbol in grammar.symbols:
        for production in symbol.productions:
            elements = []
            for element in production.elements:
                elements.append(element)
                rules = element.symbol.productions
                if len(rules) != 1 or not rules[0].elements:
                    continue
                first, *rest = rules[0].elements
                element.symbol = first.symbol
                elements.extend(Element(e.symbol, element.line) for e in rest)
                changed = True
            production.elements = elements
    return changed


def squeeze(grammar: Grammar) -> None:
    """Remove redundant rules and inline single-rule symbols until stable."""
    while True:
        changed = _squeeze_rules(grammar)
        changed = _squeeze_symbols(grammar) or changed
        if not changed:
            break