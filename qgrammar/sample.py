"""Generating a random sentence from a grammar."""

from __future__ import annotations

import io
import random
from typing import TextIO

from .grammar import Grammar
from .writer import OutputWriter


def sample(grammar: Grammar, stream: TextIO, rng: random.Random | None = None) -> None:
    """Write one random derivation from the head symbol, followed by a newline.

    Each nonterminal picks one of its rules uniformly; the empty symbol is
    never written when it appears in a rule.
    """
    if rng is None:
        rng = random.Random()
    out = OutputWriter(stream)
    pending = [] if grammar.head is None else [grammar.head]
    while pending:
        symbol = pending.pop()
        if symbol.is_terminal():
            out.space_symbol(symbol, 1, " ")
            out.symbol(symbol)
        else:
            production = rng.choice(symbol.productions)
            pending.extend(
                e.symbol
                for e in reversed(production.elements)
                if e.symbol is not grammar.empty
            )
    out.newline()


def sample_text(grammar: Grammar, rng: random.Random | None = None) -> str:
    """Return one random derivation as text."""
    buffer = io.StringIO()
    sample(grammar, buffer, rng)
    return buffer.getvalue()