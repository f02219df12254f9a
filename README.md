# qgrammar

A small toolkit for context-free grammars written in BNF or Wirth-style EBNF.
It reads a grammar, can rewrite it (remove EBNF brackets, eliminate the empty
symbol, squeeze out redundant rules and symbols), computes start and follow
sets, counts symbols and rules, generates random sentences, and writes the
grammar back out in a column-aligned form wrapped at 80 columns.

The package also holds a data model for cQASM quantum-assembly programs and a
semantic checker for it.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Grammar format

```
# a comment
> <program>
/ <empty>

<program> ::= <statement> <more>
<more>    ::= ';' <statement> <more>
           |  <empty>
<statement> = 'x' | 'y'
```

- `> <symbol>` names the distinguished (start) symbol.
- `/ <symbol>` names the symbol that stands for the empty string, if any.
- A rule is a symbol followed by `::=`, `:=`, `:` or `=`, then its right-hand
  side. Alternatives are separated with `|`.
- A line that starts with a space or tab continues the previous rule.
- Symbols may be written as `<name>`, `'text'`, `"text"` or bare words
  separated by blanks; a symbol is at most 50 characters long. A symbol is a
  nonterminal if it appears on the left of some rule; every other symbol is a
  terminal.
- Lines starting with `#` are comments.
- For EBNF, the bare words `(`, `)`, `[`, `]`, `{` and `}` group, mark optional
  and mark repeated parts.

Problems found in the input (a missing closing quote or `>`, a missing `::=`,
no start symbol, an empty rule and so on) do not stop reading. Each one is
written to standard error as ` >>MESSAGE on line N<<` and kept, as a
`(message, line)` pair, in the grammar's `errors` list.

## Command-line tools

Every command reads a grammar from standard input and writes to standard
output. None of them takes options besides `--help`.

| Command        | What it does                                              |
|----------------|-----------------------------------------------------------|
| `gcopy`        | Reads the grammar and writes it back out.                 |
| `gdeebnf`      | Replaces `( )`, `[ ]` and `{ }` with plain BNF rules.     |
| `gdeempty`     | Eliminates references to the empty symbol.                |
| `gsqueeze`     | Removes duplicate rules and inlines single-rule symbols.  |
| `gstartfollow` | Writes the grammar annotated with start and follow sets.  |
| `gstats`       | Prints counts of symbols, terminals and rules.            |
| `gsample`      | Prints one random sentence derived from the grammar.      |

For example:

```
gdeebnf < language.ebnf | gdeempty | gsqueeze > language.bnf
gstats < language.bnf
```

The written grammar lists the start symbol and the empty symbol first, then
every rule reachable from the start symbol in depth-first order, then the
terminals in use, and finally any unused productions and unused terminals.
`gstats` also reports extraneous (unreachable) symbols and rules when there
are any.

## Library use

```python
import random

from qgrammar.reader import read_grammar
from qgrammar.deebnf import deebnf
from qgrammar.deempty import deempty
from qgrammar.squeeze import squeeze
from qgrammar.startfollow import start_follow
from qgrammar.stats import gram_stats, format_stats
from qgrammar.sample import sample_text
from qgrammar.writer import format_grammar

grammar = read_grammar("""
> <list>
/ <empty>
<list> ::= 'a' { ',' 'a' }
""")

deebnf(grammar)
deempty(grammar)
squeeze(grammar)
start_follow(grammar)

print(format_grammar(grammar))
print(format_stats(gram_stats(grammar)))
print(sample_text(grammar, random.Random(1)))
```

- `qgrammar.reader`: `read_grammar(text)` and `read_grammar_file(stream)`.
- `qgrammar.grammar`: the data model. A `Grammar` holds its `Symbol` objects in
  definition order, plus `head`, `empty` and `errors`; each nonterminal holds a
  list of `Production` rules made of `Element` references to symbols.
  `same_rule(p, q)` compares two rules; `Grammar.touch_reachable()` marks the
  symbols reachable from the head.
- `qgrammar.writer`: `write_grammar(grammar, stream)`, `format_grammar(grammar)`
  and the column-tracking `OutputWriter`.
- `qgrammar.deebnf.deebnf`, `qgrammar.deempty.deempty`,
  `qgrammar.squeeze.squeeze` and `qgrammar.startfollow.start_follow` change
  the grammar in place. Symbols invented by `deebnf` are named after the rule
  that held the brackets, with a suffix such as `-a` (`<list-a>`).
- `qgrammar.stats`: `gram_stats(grammar)` returns a `GrammarStats`;
  `format_stats(stats)` renders it.
- `qgrammar.sample`: `sample(grammar, stream, rng)` and
  `sample_text(grammar, rng)`, where `rng` is a `random.Random` (a fresh,
  unseeded one when omitted).

## cQASM checking

`qgrammar.qasm_ast` has `NumericalIdentifiers`, `Qubits`, `Bits`, `Operation`
(built with class methods such as `Operation.single`, `Operation.rotation`,
`Operation.two_qubit` and `Operation.toffoli`) and the `QasmError` exception.
`qgrammar.qasm_circuit` has `OperationsCluster`, `SubCircuit`, `SubCircuits`
(which starts with a `default` subcircuit) and `QasmRepresentation`, holding
the qubit register size, named mappings and the error model.

`qgrammar.semantic.QasmSemanticChecker(representation)` checks a
representation as it is built and raises `QasmError` naming the offending
line when a subcircuit's iteration count is below one, a qubit index lies
outside the qubit register, or the qubit lists of a multi-qubit gate differ
in length. `check()` runs the same checks again and returns 0 on success.

## What it does not do

There is no reader for cQASM program text: a `QasmRepresentation` has to be
built in code before it can be checked, and there is no command for checking
cQASM files. `gsample` has no option to fix its random seed; use
`sample_text` with a seeded `random.Random` for repeatable output.