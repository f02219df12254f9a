"""Building blocks of a parsed quantum assembly program: index lists, qubits, bits, operations."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field

NO_ANGLE = sys.float_info.max
"""Rotation angle of an operation that has none."""

TWO_QUBIT_KINDS = frozenset({"cnot", "cz", "swap", "cr", "crk"})


class QasmError(RuntimeError):
    """Raised when a program or a query on it is invalid."""


@dataclass
class NumericalIdentifiers:
    """A list of qubit or bit indices."""

    indices: list[int] = field(default_factory=list)

    def add(self, index: int) -> None:
        """Append a single index."""
        self.indices.append(int(index))

    def add_range(self, index_min: int, index_max: int) -> None:
        """Append every index from index_min to index_max inclusive."""
        self.indices.extend(range(index_min, index_max + 1))

    def remove_duplicates(self) -> None:
        """Sort the indices and drop repeated ones."""
        self.indices = sorted(set(self.indices))

    def clear(self) -> None:
        """Remove all indices."""
        self.indices.clear()

    def copy(self) -> NumericalIdentifiers:
        return NumericalIdentifiers(list(self.indices))

    def describe(self) -> str:
        return "Indices: " + "".join(f"{i} " for i in self.indices) + "\n"


@dataclass
class Qubits:
    """The qubits taking part in an operation."""

    selected: NumericalIdentifiers = field(default_factory=NumericalIdentifiers)

    def __post_init__(self) -> None:
        self.selected = self.selected.copy()

    def describe(self) -> str:
        return "Selected Qubits - " + self.selected.describe()


@dataclass
class Bits:
    """The classical bits taking part in an operation."""

    selected: NumericalIdentifiers = field(default_factory=NumericalIdentifiers)

    def __post_init__(self) -> None:
        self.selected = self.selected.copy()

    def describe(self) -> str:
        return "Selected Bits - " + self.selected.describe()


def _angle(value: float) -> str:
    return f"{value:g}"


@dataclass
class Operation:
    """One gate or command; which fields matter depends on its kind."""

    kind: str
    qubits: Qubits = field(default_factory=Qubits)
    bits: Bits = field(default_factory=Bits)
    rotation_angle: float = NO_ANGLE
    bit_controlled: bool = False
    all_qubits_bits: bool = False
    wait_time: int = 0
    state_filename: str = ""
    measure_parity_qubits: tuple[Qubits, Qubits] = field(
        default_factory=lambda: (Qubits(), Qubits())
    )
    measure_parity_axes: tuple[str, str] = ("", "")
    two_qubit_pairs: tuple[Qubits, Qubits] = field(
        default_factory=lambda: (Qubits(), Qubits())
    )
    toffoli_qubits: tuple[Qubits, Qubits, Qubits] = field(
        default_factory=lambda: (Qubits(), Qubits(), Qubits())
    )
    u_matrix_elements: list[float] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.kind = self.kind.lower()

    @classmethod
    def single(cls, kind: str, qubits: Qubits) -> Operation:
        """A single-qubit operation, or reset-averaging on given qubits."""
        return cls(kind, qubits=qubits)

    @classmethod
    def rotation(cls, kind: str, qubits: Qubits, angle: float) -> Operation:
        """A single-qubit rotation."""
        return cls(kind, qubits=qubits, rotation_angle=angle)

    @classmethod
    def measure_parity(
        cls, kind: str, qubits1: Qubits, axis1: str, qubits2: Qubits, axis2: str
    ) -> Operation:
        """A parity measurement of two qubit lists along two axes."""
        return cls(
            kind,
            measure_parity_qubits=(qubits1, qubits2),
            measure_parity_axes=(axis1.lower(), axis2.lower()),
        )

    @classmethod
    def measure_all(cls, kind: str) -> Operation:
        """An operation on all qubits and bits."""
        return cls(kind, all_qubits_bits=True)

    @classmethod
    def wait(cls, kind: str, wait_time: int) -> Operation:
        """A wait command."""
        return cls(kind, wait_time=wait_time)

    @classmethod
    def display(cls, kind: str, bits: Bits) -> Operation:
        """A display command on the given bits."""
        return cls(kind, bits=bits)

    @classmethod
    def two_qubit(
        cls, kind: str, qubits1: Qubits, qubits2: Qubits, angle: float = NO_ANGLE
    ) -> Operation:
        """A two-qubit gate, optionally with a rotation."""
        return cls(kind, two_qubit_pairs=(qubits1, qubits2), rotation_angle=angle)

    @classmethod
    def toffoli(cls, kind: str, qubits1: Qubits, qubits2: Qubits, qubits3: Qubits) -> Operation:
        """A three-qubit Toffoli gate."""
        return cls(kind, toffoli_qubits=(qubits1, qubits2, qubits3))

    @classmethod
    def load_state(cls, kind: str, filename: str) -> Operation:
        """A load_state command; the quoted filename keeps its case."""
        return cls(kind, state_filename=filename[1:-1])

    def qubits_involved(self, pair_index: int | None = None) -> Qubits:
        """The operation's qubits, or one numbered qubit list of a multi-qubit gate."""
        if pair_index is None:
            return self.qubits
        if self.kind == "toffoli":
            pairs: tuple[Qubits, ...] = self.toffoli_qubits
        elif self.kind in TWO_QUBIT_KINDS:
            pairs = self.two_qubit_pairs
        else:
            pairs = ()
        if 1 <= pair_index <= len(pairs):
            return pairs[pair_index - 1]
        raise QasmError(f"Accessing qubit pair {pair_index} on operation {self.kind}")

    def set_control_bits(self, bits: Bits) -> None:
        """Make the operation conditional on the given bits."""
        self.bits = bits
        self.bit_controlled = True

    @property
    def control_bits(self) -> Bits:
        return self.bits

    @property
    def display_bits(self) -> Bits:
        return self.bits

    def describe(self) -> str:
        parts = [f"Operation {self.kind}: "]
        kind = self.kind
        if kind in ("rx", "ry", "rz"):
            parts.append(self.qubits.describe())
            parts.append(f"Rotations = {_angle(self.rotation_angle)}\n")
        elif kind == "measure_parity":
            parts.append("\n")
            for qubits, axis in zip(self.measure_parity_qubits, self.measure_parity_axes):
                parts.append(qubits.describe())
                parts.append(f"With axis {axis}\n")
        elif kind in ("cnot", "cz", "swap", "cr"):
            parts.append("\n")
            for number, qubits in enumerate(self.two_qubit_pairs, start=1):
                parts.append(f"Qubit Pair {number}: " + qubits.describe())
            if kind == "cr":
                parts.append(f"Rotation = {_angle(self.rotation_angle)}\n")
        elif kind == "toffoli":
            parts.append("\n")
            for number, qubits in enumerate(self.toffoli_qubits, start=1):
                parts.append(f"Qubit Pair {number}: " + qubits.describe())
        elif kind == "wait":
            parts.append("\n")
            parts.append(f"Wait time (integer) = {self.wait_time}\n")
        elif kind in ("display", "display_binary"):
            parts.append("Display bits: " + self.bits.describe())
        else:
            parts.append(self.qubits.describe())

        if self.bit_controlled:
            parts.append("Bit controlled with bits: " + self.bits.describe())
        return "".join(parts)