"""
CHSH Bell inequality run against a sampler, reported as an S-value checked
against the classical bound.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Sequence, Tuple

from quantum_asset_pricing.aggregator import expectation, s_value
from quantum_asset_pricing.bell_circuit import CHSH_SETTINGS, build_bell_circuit
from quantum_asset_pricing.mock_backend import MockSampler


logger = logging.getLogger(__name__)


@dataclass
class ChshReport:
    """Expectation per setting plus the aggregate S-value."""

    settings: List[Tuple[float, float]]
    expectations: List[float]
    s_value: float
    classical_bound: float

    @property
    def exceeds_classical_bound(self) -> bool:
        return self.s_value > self.classical_bound

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "settings": [list(pair) for pair in self.settings],
            "expectations": self.expectations,
            "s_value": self.s_value,
            "classical_bound": self.classical_bound,
            "exceeds_classical_bound": self.exceeds_classical_bound,
        }


def run_chsh_experiment(
    sampler: MockSampler,
    shots: int,
    settings: Sequence[Tuple[float, float]] = CHSH_SETTINGS,
    classical_bound: float = 2.0,
) -> ChshReport:
    """
    Sample one Bell circuit per setting and sum the expectations.

    Args:
        sampler: Sampler that runs each circuit
        shots: Shots per circuit
        settings: (A, B) measurement angle pairs
        classical_bound: S-value limit for classical correlations

    Returns:
        ChshReport for the run
    """
    expectations = []
    for i, (angle_a, angle_b) in enumerate(settings):
        circuit = build_bell_circuit(angle_a, angle_b, name=f"chsh_{i}")
        result = sampler.run(circuit, shots=shots)
        value = expectation(result.distribution, result.shots)
        logger.debug(f"Setting {i} ({angle_a}, {angle_b}): E = {value}")
        expectations.append(value)

    s = s_value(expectations)
    logger.info(f"CHSH S-value {s:.6f} against classical bound {classical_bound}")

    return ChshReport(
        settings=[tuple(pair) for pair in settings],
        expectations=expectations,
        s_value=s,
        classical_bound=classical_bound,
    )
