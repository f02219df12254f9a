"""Semantic checks on a parsed quantum assembly program."""

from __future__ import annotations

from .qasm_ast import TWO_QUBIT_KINDS, Operation, QasmError, Qubits
from .qasm_circuit import QasmRepresentation

_UNCHECKED_KINDS = frozenset({"wait", "display", "display_binary", "not", "load_state"})


class QasmSemanticChecker:
    """Checks a program on construction; raises QasmError when it is invalid."""

    def __init__(self, representation: QasmRepresentation) -> None:
        self.representation = representation
        self.max_num_qubits = representation.num_qubits
        self.parse_result = self.check()

    def check(self) -> int:
        """Check iteration counts and qubit indices; return 0 or raise QasmError."""
        for subcircuit in self.representation.subcircuits:
            if subcircuit.number_iterations < 1:
                raise QasmError(
                    "Iteration count invalid for subcircuit "
                    f"{subcircuit.name} on Line: {subcircuit.line_number}"
                )
            for cluster in subcircuit.clusters:
                for operation in cluster.operations:
                    self._check_operation(operation, cluster.line_number)
        return 0

    def _check_operation(self, op: Operation, line: int) -> None:
        kind = op.kind
        if kind == "measure_parity":
            for qubits in op.measure_parity_qubits:
                self._check_qubit_list(qubits, line)
        elif kind == "u":
            self._check_qubit_list(op.qubits, line)
        elif kind in TWO_QUBIT_KINDS:
            self._check_pairs(op, line, 2)
        elif kind == "toffoli":
            self._check_pairs(op, line, 3)
        elif kind == "measure_all" or kind in _UNCHECKED_KINDS:
            return
        elif kind == "reset-averaging":
            if not op.all_qubits_bits:
                self._check_qubit_list(op.qubits, line)
        else:
            try:
                self._check_qubit_list(op.qubits, line)
            except QasmError as exc:
                raise QasmError(f"Operation invalid. Line: {line}") from exc

    def _check_qubit_list(self, qubits: Qubits, line: int) -> None:
        indices = qubits.selected.indices
        if indices and indices[-1] >= self.max_num_qubits:
            raise QasmError(
                f"Qubit indices exceed the number in qubit register. Line: {line}"
            )

    def _check_pairs(self, op: Operation, line: int, count: int) -> None:
        pairs = [op.qubits_involved(number) for number in range(1, count + 1)]
        for qubits in pairs:
            self._check_qubit_list(qubits, line)
        for first, second in zip(pairs, pairs[1:]):
            if len(first.selected.indices) != len(second.selected.indices):
                raise QasmError(f"Mismatch in the qubit pair sizes. Line: {line}")