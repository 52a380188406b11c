"""
Mocked sampler standing in for quantum hardware.

The sampler validates and logs each circuit it is given, then returns the
same hand-written counts regardless of what the circuit does.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Mapping

from qiskit import QuantumCircuit

from quantum_asset_pricing.bell_circuit import validate_circuit
from quantum_asset_pricing.outcomes import OutcomeDistribution


logger = logging.getLogger(__name__)


CHSH_MOCK_COUNTS: Dict[str, int] = {"00": 500, "01": 250, "10": 250, "11": 500}

PORTFOLIO_MOCK_COUNTS: Dict[str, int] = {"00": 600, "01": 200, "10": 150, "11": 74}


class SamplerError(Exception):
    """Sampler execution error."""

    pass


@dataclass
class SamplerResult:
    """Container for sampled measurement counts."""

    distribution: OutcomeDistribution
    shots: int
    circuit_name: str
    backend_name: str = "mock_sampler"

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "counts": self.distribution.to_dict(),
            "shots": self.shots,
            "circuit_name": self.circuit_name,
            "backend_name": self.backend_name,
        }


class MockSampler:
    """Returns fixed counts for any circuit."""

    def __init__(self, counts: Mapping[str, int]):
        """
        Initialize sampler with the counts every run returns.

        Args:
            counts: Outcome label -> count
        """
        self.distribution = OutcomeDistribution.from_counts(counts)

    def run(self, circuit: QuantumCircuit, shots: int) -> SamplerResult:
        """
        Sample a circuit.

        Args:
            circuit: Circuit to sample; only its name and metadata are read
            shots: Number of shots requested

        Returns:
            SamplerResult with the fixed counts

        Raises:
            SamplerError: If shots is not positive or the circuit is invalid
        """
        if shots <= 0:
            raise SamplerError(f"shots must be positive, got {shots}")

        try:
            validate_circuit(circuit)
        except ValueError as e:
            raise SamplerError(f"Invalid circuit: {e}")

        angles = (circuit.metadata or {}).get("angles")
        logger.info(f"Simulating {circuit.name} with angles {angles} and {shots} shots")

        return SamplerResult(
            distribution=self.distribution,
            shots=shots,
            circuit_name=circuit.name,
        )
