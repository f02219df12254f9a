"""Counting symbols and rules of a grammar, including unreachable ones."""

from __future__ import annotations

from dataclasses import dataclass

from .grammar import Grammar, State


@dataclass(frozen=True)
class GrammarStats:
    """Counts of symbols and rules, and of those not reachable from the head."""

    symbols: int
    terminals: int
    rules: int
    extraneous_symbols: int
    extraneous_rules: int


def gram_stats(grammar: Grammar) -> GrammarStats:
    """Compute statistics; marks reachable symbols as touched."""
    symbols = grammar.symbols
    grammar.touch_reachable()
    untouched = [s for s in symbols if s.state is State.UNTOUCHED]
    return GrammarStats(
        symbols=len(symbols),
        terminals=sum(1 for s in symbols if s.is_terminal()),
        rules=sum(len(s.productions) for s in symbols),
        extraneous_symbols=len(untouched),
        extraneous_rules=sum(len(s.productions) for s in untouched),
    )


def format_stats(stats: GrammarStats) -> str:
    """Render statistics as report lines; extraneous counts appear only if nonzero."""
    lines = [
        f" -- Total symbols:        {stats.symbols}",
        f" --   Terminal symbols:   {stats.terminals}",
    ]
    if stats.extraneous_symbols:
        lines.append(f" --   Extraneous symbols: {stats.extraneous_symbols}")
    lines.append(f" -- Production rules:     {stats.rules}")
    if stats.extraneous_rules:
        lines.append(f" --   Extraneous rules:   {stats.extraneous_rules}")
    return "\n".join(lines) + "\n"