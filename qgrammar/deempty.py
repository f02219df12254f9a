"""Removing the empty symbol from a grammar.

Rules such as ``<a> ::= <b> <empty> <c>`` with ``<b> ::= <d> | <empty>``
become ``<a> ::= <b> <c> | <c>`` and ``<b> ::= <d>``: every rule that might
derive nothing is rewritten into the alternatives that derive something.
"""

from __future__ import annotations

from .grammar import Element, Grammar, Production, State, Symbol, same_rule

IS_EMPTY = State.IS_EMPTY
CAN_BE_EMPTY = State.CAN_BE_EMPTY
NONEMPTY = State.TOUCHED


def _check_empty(grammar: Grammar, symbol: Symbol) -> bool:
    """Update what is known about the emptiness of a nonterminal and its rules."""
    changed = False
    any_empty = any_can_be = any_nonempty = False

    for production in symbol.productions:
        state = production.state
        for element in production.elements:
            element_state = element.symbol.state
            if element_state is NONEMPTY:
                state = NONEMPTY
            elif element_state is CAN_BE_EMPTY and state is IS_EMPTY:
                state = CAN_BE_EMPTY

        if production.state is not state:
            production.state = state
            changed = True

        if state is IS_EMPTY:
            any_empty = True
        elif state is CAN_BE_EMPTY:
            any_can_be = True
        else:
            any_nonempty = True

    if (any_empty and any_nonempty) or any_can_be:
        conclusion = CAN_BE_EMPTY
    elif any_empty:
        conclusion = IS_EMPTY
    elif any_nonempty:
        conclusion = NONEMPTY
    else:
        grammar.error("ASSERTION FAILURE IN CHECKEMPTY", -1)
        return changed

    if symbol.state is not conclusion:
        symbol.state = conclusion
        changed = True
    return changed


def _duplicate_without(symbol: Symbol, index: int, skipped: Element) -> None:
    """Insert after rule ``index`` a copy lacking ``skipped``, unless empty or redundant."""
    production = symbol.productions[index]
    copy = Production(
        elements=[Element(e.symbol, e.line) for e in production.elements if e is not skipped],
        line=production.line,
        state=production.state,
    )
    if copy.elements and not any(same_rule(copy, rule) for rule in symbol.productions):
        symbol.productions.insert(index + 1, copy)


def _clean_empty(symbol: Symbol) -> None:
    """Rewrite the rules of a nonterminal so that none refers to a possibly empty symbol."""
    if symbol.state is IS_EMPTY:
        return
    rules = symbol.productions
    index = 0
    # Rules are removed and inserted while the list is walked.
    while index < len(rules):
        production = rules[index]
        if production.state is IS_EMPTY:
            del rules[index]
            continue
        elements = production.elements
        position = 0
        while position < len(elements):
            element = elements[position]
            if element.symbol.state is IS_EMPTY:
                del elements[position]
                continue
            if element.symbol.state is CAN_BE_EMPTY:
                _duplicate_without(symbol, index, element)
            position += 1
        index += 1


def deempty(grammar: Grammar) -> None:
    """Eliminate references to the empty symbol, in place.

    When the distinguished symbol can derive nothing, an empty alternative is
    put back at the front of its rules and the empty symbol is kept; when it
    can derive only nothing, both it and the empty symbol are dropped.
    """
    empty = grammar.empty
    if empty is None:
        grammar.error("EMPTY SYMBOL MUST BE DEFINED", -1)
        return

    for symbol in grammar.symbols:
        if symbol.is_terminal():
            symbol.state = NONEMPTY
        else:
            symbol.state = IS_EMPTY
            for production in symbol.productions:
                production.state = IS_EMPTY
    empty.state = IS_EMPTY

    changed = True
    while changed:
        changed = False
        for symbol in grammar.symbols:
            if not symbol.is_terminal():
                changed = _check_empty(grammar, symbol) or changed

    for symbol in grammar.symbols:
        if not symbol.is_terminal():
            _clean_empty(symbol)

    head = grammar.head
    if head is None:
        return
    if head.state is IS_EMPTY:
        grammar.head = None
        grammar.empty = None
    elif head.state is CAN_BE_EMPTY:
        head.productions.insert(0, Production(elements=[Element(empty)]))
    else:
        grammar.empty = None