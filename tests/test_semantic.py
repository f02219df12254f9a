import pytest

from qgrammar.qasm_ast import Bits, NumericalIdentifiers, Operation, QasmError, Qubits
from qgrammar.qasm_circuit import OperationsCluster, QasmRepresentation, SubCircuit
from qgrammar.semantic import QasmSemanticChecker


def _qubits(*indices):
    return Qubits(NumericalIdentifiers(list(indices)))


def _program(num_qubits, *lines):
    rep = QasmRepresentation()
    rep.num_qubits = num_qubits
    sub = rep.subcircuits.last_subcircuit()
    for line, op in lines:
        sub.add_operations_cluster(OperationsCluster([op], line_number=line))
    return rep


def _valid_program():
    return _program(
        2,
        (3, Operation.single("h", _qubits(0))),
        (4, Operation.two_qubit("cnot", _qubits(0), _qubits(1))),
        (5, Operation.measure_all("measure_all")),
    )


def _invalid_program():
    return _program(
        2,
        (3, Operation.single("h", _qubits(0))),
        (6, Operation.two_qubit("cnot", _qubits(0), _qubits(5))),
    )


def test_reentrant_valid_program_checks_twice():
    rep = _valid_program()
    first = QasmSemanticChecker(rep)
    assert first.parse_result == 0
    second = QasmSemanticChecker(rep)
    assert second.parse_result == 0


def test_reentrant_invalid_program_raises_twice():
    rep = _invalid_program()
    message = "Qubit indices exceed the number in qubit register. Line: 6"
    with pytest.raises(QasmError) as first:
        QasmSemanticChecker(rep)
    assert str(first.value) == message
    with pytest.raises(QasmError) as second:
        QasmSemanticChecker(rep)
    assert str(second.value) == message


def test_single_qubit_out_of_range_reports_operation_invalid():
    rep = _program(1, (3, Operation.single("x", _qubits(1))))
    with pytest.raises(QasmError) as info:
        QasmSemanticChecker(rep)
    assert str(info.value) == "Operation invalid. Line: 3"


def test_two_qubit_size_mismatch():
    rep = _program(4, (2, Operation.two_qubit("cz", _qubits(0, 1), _qubits(2))))
    with pytest.raises(QasmError) as info:
        QasmSemanticChecker(rep)
    assert str(info.value) == "Mismatch in the qubit pair sizes. Line: 2"


def test_toffoli_checks_all_three_lists():
    good = _program(3, (2, Operation.toffoli("toffoli", _qubits(0), _qubits(1), _qubits(2))))
    assert QasmSemanticChecker(good).parse_result == 0

    bad = _program(
        4, (7, Operation.toffoli("toffoli", _qubits(0), _qubits(1), _qubits(2, 3)))
    )
    with pytest.raises(QasmError, match="Mismatch in the qubit pair sizes. Line: 7"):
        QasmSemanticChecker(bad)


def test_measure_parity_index_check():
    op = Operation.measure_parity("measure_parity", _qubits(0), "x", _qubits(3), "z")
    with pytest.raises(QasmError, match="Qubit indices exceed the number in qubit register. Line: 8"):
        QasmSemanticChecker(_program(2, (8, op)))


def test_reset_averaging_on_all_skips_index_check():
    rep = _program(1, (2, Operation.measure_all("reset-averaging")))
    assert QasmSemanticChecker(rep).parse_result == 0


def test_reset_averaging_on_qubits_checks_indices():
    rep = _program(1, (4, Operation.single("reset-averaging", _qubits(2))))
    with pytest.raises(QasmError, match="Qubit indices exceed the number in qubit register. Line: 4"):
        QasmSemanticChecker(rep)


def test_unchecked_commands_pass():
    rep = _program(
        1,
        (2, Operation.wait("wait", 3)),
        (3, Operation.display("display", Bits(NumericalIdentifiers([9])))),
        (4, Operation.load_state("load_state", '"State.txt"')),
    )
    assert QasmSemanticChecker(rep).parse_result == 0


def test_invalid_iteration_count():
    rep = _valid_program()
    sub = SubCircuit("loop", 1, 12)
    sub.number_iterations = 0
    rep.subcircuits.add_subcircuit(sub)
    with pytest.raises(QasmError) as info:
        QasmSemanticChecker(rep)
    assert str(info.value) == "Iteration count invalid for subcircuit loop on Line: 12"


def test_check_can_be_called_again():
    rep = _valid_program()
    checker = QasmSemanticChecker(rep)
    assert checker.check() == 0
    assert checker.max_num_qubits == 2