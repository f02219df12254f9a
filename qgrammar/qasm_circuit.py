"""Containers of a parsed quantum assembly program: clusters, subcircuits, the whole program."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator

from .qasm_ast import NumericalIdentifiers, Operation, QasmError


def _number(value: float) -> str:
    return f"{value:g}"


@dataclass
class OperationsCluster:
    """Operations written on one line; several of them make the cluster parallel."""

    operations: list[Operation] = field(default_factory=list)
    line_number: int = 0
    is_parallel: bool = False

    def add_operation(self, operation: Operation) -> None:
        """Append an operation without changing whether the cluster is parallel."""
        self.operations.append(operation)

    def add_parallel_operation(self, operation: Operation) -> None:
        """Append an operation and mark the cluster as parallel."""
        self.operations.append(operation)
        self.is_parallel = True

    def last_operation(self) -> Operation:
        """The most recently added operation."""
        return self.operations[-1]

    def describe(self) -> str:
        body = "".join(op.describe() for op in self.operations)
        if self.is_parallel:
            return "Parallel operations cluster: \n" + body + "End Parallel operations \n\n"
        return "Serial operation: \n" + body + "End Serial operation \n\n"


@dataclass
class SubCircuit:
    """A named subcircuit with its iteration count and operation clusters."""

    name: str
    rank: int
    line_number: int
    number_iterations: int = 1
    clusters: list[OperationsCluster] = field(default_factory=list)

    def add_operations_cluster(self, cluster: OperationsCluster) -> None:
        """Append a cluster of operations."""
        self.clusters.append(cluster)

    def last_operations_cluster(self) -> OperationsCluster:
        """The most recently added cluster."""
        return self.clusters[-1]

    def describe(self) -> str:
        parts = [
            f"Subcircuit Name = {self.name} , Rank = {self.rank}\n",
            f"{self.name} has {self.number_iterations} iterations.\n",
            "Contains these operations clusters:\n",
        ]
        parts.extend(cluster.describe() for cluster in self.clusters)
        parts.append(f"End of subcircuit {self.name}\n\n")
        return "".join(parts)


class SubCircuits:
    """All subcircuits of a program, starting with an implicit ``default`` one."""

    def __init__(self) -> None:
        self.subcircuits: list[SubCircuit] = [SubCircuit("default", 0, 1)]

    def add_subcircuit(self, subcircuit: SubCircuit) -> None:
        """Append a subcircuit."""
        self.subcircuits.append(subcircuit)

    def last_subcircuit(self) -> SubCircuit:
        """The most recently added subcircuit."""
        return self.subcircuits[-1]

    def clear(self) -> None:
        """Remove every subcircuit, the default one included."""
        self.subcircuits.clear()

    def __len__(self) -> int:
        return len(self.subcircuits)

    def __iter__(self) -> Iterator[SubCircuit]:
        return iter(self.subcircuits)


class QasmRepresentation:
    """Everything a program declares: register size, version, subcircuits, mappings, error model."""

    def __init__(self) -> None:
        self.num_qubits = 0
        self.version_number = 0.0
        self.subcircuits = SubCircuits()
        self._mappings: dict[str, tuple[NumericalIdentifiers, bool]] = {}
        self.error_model_type = "None"
        self.error_model_parameters: list[float] = [0.0]

    def add_mapping(self, name: str, indices: NumericalIdentifiers, is_qubit: bool) -> None:
        """Bind a case-insensitive name to qubit or bit indices."""
        self._mappings[name.lower()] = (indices.copy(), is_qubit)

    def get_mapped_indices(self, name: str, is_qubit: bool, line: int) -> NumericalIdentifiers:
        """Indices bound to a name of the requested kind; QasmError if there is none."""
        key = name.lower()
        found = self._mappings.get(key)
        if found is None or found[1] != is_qubit:
            raise QasmError(f"Could not get wanted mapping {key}: Line {line}")
        return found[0]

    def set_error_model(self, model_type: str, params: list[float]) -> None:
        """Set the error model and its numeric parameters."""
        self.error_model_type = model_type
        self.error_model_parameters = [float(p) for p in params]

    def describe_mappings(self) -> str:
        parts = []
        for name in sorted(self._mappings):
            indices, is_qubit = self._mappings[name]
            parts.append(f"{name}: " + indices.describe() + f"{int(is_qubit)}\n")
        parts.append(self.describe_error_model())
        return "".join(parts)

    def describe_error_model(self) -> str:
        params = "".join(f"{_number(p)}\n" for p in self.error_model_parameters)
        return (
            f"Current error model: {self.error_model_type}\nError Probability = " + params
        )