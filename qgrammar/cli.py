"""Command entry points: each reads a grammar from standard input and reports on standard output."""

from __future__ import annotations

import argparse
import random
import sys
from collections.abc import Callable, Sequence

from .deebnf import deebnf
from .deempty import deempty
from .grammar import Grammar
from .reader import read_grammar_file
from .sample import sample
from .squeeze import squeeze
from .startfollow import start_follow
from .stats import format_stats, gram_stats
from .writer import write_grammar


def _read(prog: str, description: str, argv: Sequence[str] | None) -> Grammar:
    parser = argparse.ArgumentParser(
        prog=prog,
        description=description + " The grammar is read from standard input.",
    )
    parser.parse_args(argv)
    return read_grammar_file(sys.stdin)


def _transform_and_write(
    prog: str,
    description: str,
    argv: Sequence[str] | None,
    transform: Callable[[Grammar], None] | None = None,
) -> int:
    grammar = _read(prog, description, argv)
    if transform is not None:
        transform(grammar)
    write_grammar(grammar, sys.stdout)
    return 0


def copy_main(argv: Sequence[str] | None = None) -> int:
    """Copy a grammar, normalising its layout."""
    return _transform_and_write("gcopy", "Copy a grammar.", argv)


def deebnf_main(argv: Sequence[str] | None = None) -> int:
    """Convert a grammar from EBNF to BNF."""
    return _transform_and_write(
        "gdeebnf", "Convert a grammar from EBNF to BNF.", argv, deebnf
    )


def deempty_main(argv: Sequence[str] | None = None) -> int:
    """Remove the empty symbol from a grammar."""
    return _transform_and_write(
        "gdeempty", "Remove empty symbols from a grammar.", argv, deempty
    )


def squeeze_main(argv: Sequence[str] | None = None) -> int:
    """Squeeze redundant rules and symbols out of a grammar."""
    return _transform_and_write(
        "gsqueeze", "Squeeze redundant rules and symbols out of a grammar.", argv, squeeze
    )


def startfollow_main(argv: Sequence[str] | None = None) -> int:
    """Write a grammar annotated with start and follow sets."""
    return _transform_and_write(
        "gstartfollow",
        "Compute start and follow sets for a grammar.",
        argv,
        start_follow,
    )


def sample_main(argv: Sequence[str] | None = None) -> int:
    """Write one random sentence generated by a grammar."""
    grammar = _read("gsample", "Sample the strings of a grammar.", argv)
    sample(grammar, sys.stdout, random.Random())
    return 0


def stats_main(argv: Sequence[str] | None = None) -> int:
    """Write statistics about a grammar."""
    grammar = _read("gstats", "Compute statistics about a grammar.", argv)
    sys.stdout.write(format_stats(gram_stats(grammar)))
    return 0