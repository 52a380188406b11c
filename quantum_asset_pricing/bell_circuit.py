"""
Circuit descriptions for the CHSH and portfolio experiments.

Circuits built here are handed to a sampler as-is. They are never transpiled
or simulated locally.
"""

from typing import Sequence, Tuple

import numpy as np
from qiskit import QuantumCircuit


# Measurement settings (A, B) for the four CHSH correlators
CHSH_SETTINGS: Tuple[Tuple[float, float], ...] = (
    (0.0, np.pi / 8),
    (0.0, -np.pi / 8),
    (np.pi / 4, np.pi / 8),
    (np.pi / 4, -np.pi / 8),
)

PORTFOLIO_ANGLES: Tuple[float, ...] = (np.pi / 8, -np.pi / 8, np.pi / 4, np.pi / 2)


def build_bell_circuit(angle_a: float, angle_b: float, name: str = "chsh") -> QuantumCircuit:
    """
    Build a Bell pair measured along rotated axes.

    Args:
        angle_a: Rotation applied to qubit 0 before measurement
        angle_b: Rotation applied to qubit 1 before measurement
        name: Circuit name

    Returns:
        Two-qubit circuit with both qubits measured
    """
    qc = QuantumCircuit(2, 2, name=name, metadata={"angles": [angle_a, angle_b]})
    qc.h(0)
    qc.cx(0, 1)
    qc.ry(angle_a, 0)
    qc.ry(angle_b, 1)
    qc.measure([0, 1], [0, 1])
    return qc


def build_portfolio_circuit(angles: Sequence[float], name: str = "portfolio") -> QuantumCircuit:
    """
    Build a rotation chain with one qubit per portfolio angle.

    The first two qubits are measured, giving the 2-bit outcome labels the
    return/risk tables are keyed by.

    Args:
        angles: One rotation angle per asset
        name: Circuit name

    Returns:
        Circuit with len(angles) qubits and 2 classical bits

    Raises:
        ValueError: If fewer than two angles are given
    """
    if len(angles) < 2:
        raise ValueError(f"Portfolio circuit needs at least 2 angles, got {len(angles)}")

    qc = QuantumCircuit(len(angles), 2, name=name, metadata={"angles": list(angles)})
    for qubit, angle in enumerate(angles):
        qc.ry(angle, qubit)
    for qubit in range(len(angles) - 1):
        qc.cx(qubit, qubit + 1)
    qc.measure([0, 1], [0, 1])
    return qc


def validate_circuit(circuit: QuantumCircuit) -> bool:
    """
    Validate that every classical bit receives a measurement.

    Args:
        circuit: Circuit to validate

    Returns:
        True if circuit is valid

    Raises:
        ValueError: If circuit is invalid
    """
    if circuit.num_clbits == 0:
        raise ValueError(f"Circuit {circuit.name!r} has no classical bits")

    measured_clbits = set()
    for instruction in circuit.data:
        if instruction.operation.name == "measure":
            measured_clbits.add(circuit.find_bit(instruction.clbits[0]).index)

    if len(measured_clbits) != circuit.num_clbits:
        raise ValueError(
            f"Not all classical bits are measured: {len(measured_clbits)} of "
            f"{circuit.num_clbits}"
        )

    return True
