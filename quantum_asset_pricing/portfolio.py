"""
Portfolio simulation: angles become weights, sampled outcomes become an
expected return and risk.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Sequence

from quantum_asset_pricing.aggregator import normalize_weights, portfolio_performance
from quantum_asset_pricing.bell_circuit import PORTFOLIO_ANGLES, build_portfolio_circuit
from quantum_asset_pricing.mock_backend import MockSampler
from quantum_asset_pricing.outcomes import DEFAULT_RETURN_RISK, ReturnRiskTable


logger = logging.getLogger(__name__)


@dataclass
class PortfolioReport:
    """Weights and performance of a simulated portfolio."""

    angles: List[float]
    weights: List[float]
    expected_return: float
    risk: float

    @property
    def total_weight(self) -> float:
        return sum(self.weights)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "angles": self.angles,
            "weights": self.weights,
            "expected_return": self.expected_return,
            "risk": self.risk,
            "total_weight": self.total_weight,
        }


def run_portfolio_simulation(
    sampler: MockSampler,
    shots: int,
    angles: Sequence[float] = PORTFOLIO_ANGLES,
    table: ReturnRiskTable = DEFAULT_RETURN_RISK,
) -> PortfolioReport:
    """
    Derive weights from the angles and score the sampled outcomes.

    Args:
        sampler: Sampler that runs the portfolio circuit
        shots: Shots for the circuit
        angles: One angle per asset
        table: Return and risk per outcome label

    Returns:
        PortfolioReport for the run
    """
    weights = normalize_weights(angles)
    logger.debug(f"Weights from angles {list(angles)}: {weights}")

    circuit = build_portfolio_circuit(angles)
    result = sampler.run(circuit, shots=shots)
    expected_return, risk = portfolio_performance(result.distribution, result.shots, table)
    logger.info(f"Portfolio expected return {expected_return:.6f}, risk {risk:.6f}")

    return PortfolioReport(
        angles=[float(a) for a in angles],
        weights=weights,
        expected_return=expected_return,
        risk=risk,
    )
