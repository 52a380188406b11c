"""
Probability-weighted aggregation over measurement outcome distributions.

Every function here is pure: the same distribution, shot count and tables
always produce the same result.
"""

import logging
import math
from typing import Iterable, List, Sequence, Tuple

import numpy as np

from quantum_asset_pricing.outcomes import (
    DEFAULT_PARITY,
    OutcomeDistribution,
    ParityTable,
    ReturnRiskTable,
)


logger = logging.getLogger(__name__)


class AggregationError(Exception):
    """Invalid input to an aggregation."""

    pass


def _check_shots(shots: int) -> None:
    if shots <= 0:
        raise AggregationError(f"shots must be positive, got {shots}")


def probability_mass(distribution: OutcomeDistribution, shots: int) -> float:
    """
    Total probability implied by the counts.

    Args:
        distribution: Observed outcome counts
        shots: Number of trials used as the probability denominator

    Returns:
        Sum of count / shots over all outcomes
    """
    _check_shots(shots)
    return distribution.total() / shots


def _warn_on_mass(distribution: OutcomeDistribution, shots: int) -> None:
    mass = probability_mass(distribution, shots)
    if not math.isclose(mass, 1.0):
        logger.warning(
            f"Counts sum to {distribution.total()} for {shots} shots "
            f"(probability mass {mass:.6f})"
        )


def expectation(
    distribution: OutcomeDistribution,
    shots: int,
    parity_table: ParityTable = DEFAULT_PARITY,
) -> float:
    """
    Parity-signed expectation value of a two-qubit measurement.

    Args:
        distribution: Observed outcome counts
        shots: Number of trials used as the probability denominator
        parity_table: Sign for each outcome label

    Returns:
        Sum of sign(label) * count / shots

    Raises:
        AggregationError: If shots is not positive
    """
    _check_shots(shots)
    _warn_on_mass(distribution, shots)

    value = 0.0
    for label, count in distribution.items():
        value += parity_table.sign(label) * (count / shots)
    return value


def s_value(expectations: Iterable[float]) -> float:
    """Plain sum of expectation values."""
    total = 0.0
    for value in expectations:
        total += value
    return total


def normalize_weights(angles: Sequence[float]) -> List[float]:
    """
    Turn angles into portfolio weights proportional to their magnitude.

    Args:
        angles: Rotation angles, any sign

    Returns:
        Non-negative weights summing to 1

    Raises:
        AggregationError: If the angles are empty, all zero or not finite
    """
    magnitudes = np.abs(np.asarray(angles, dtype=float))
    if not np.all(np.isfinite(magnitudes)):
        raise AggregationError(f"Cannot normalize weights: non-finite angle in {list(angles)}")
    total = magnitudes.sum()
    if magnitudes.size == 0 or total == 0.0:
        raise AggregationError("Cannot normalize weights: angle magnitudes sum to zero")
    return (magnitudes / total).tolist()


def portfolio_performance(
    distribution: OutcomeDistribution,
    shots: int,
    table: ReturnRiskTable,
) -> Tuple[float, float]:
    """
    Expected return and risk weighted by outcome probability.

    Args:
        distribution: Observed outcome counts
        shots: Number of trials used as the probability denominator
        table: Return and risk for each outcome label

    Returns:
        Tuple of (expected return, risk)

    Raises:
        AggregationError: If shots is not positive or a label has no
            return or risk entry
    """
    _check_shots(shots)
    _warn_on_mass(distribution, shots)

    expected_return = 0.0
    risk = 0.0
    for label, count in distribution.items():
        if label not in table.returns:
            raise AggregationError(f"No return entry for outcome {label!r}")
        if label not in table.risks:
            raise AggregationError(f"No risk entry for outcome {label!r}")

        probability = count / shots
        expected_return += probability * table.returns[label]
        risk += probability * table.risks[label]

    return expected_return, risk
