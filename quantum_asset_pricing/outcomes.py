"""Outcome counts and the lookup tables they are scored against."""

from dataclasses import dataclass, field
from typing import Dict, Iterable, Mapping, Tuple


@dataclass(frozen=True)
class OutcomeDistribution:
    """Observed counts per measurement outcome label."""

    counts: Tuple[Tuple[str, int], ...]

    def __post_init__(self):
        for label, count in self.counts:
            if isinstance(count, bool) or not isinstance(count, int):
                raise ValueError(f"Outcome {label!r} has non-integer count {count!r}")
            if count < 0:
                raise ValueError(f"Outcome {label!r} has negative count {count}")

    @classmethod
    def from_counts(cls, counts: Mapping[str, int]) -> "OutcomeDistribution":
        """Build from a label -> count mapping, keeping insertion order."""
        return cls(counts=tuple((label, count) for label, count in counts.items()))

    def items(self) -> Iterable[Tuple[str, int]]:
        return iter(self.counts)

    def labels(self) -> Tuple[str, ...]:
        return tuple(label for label, _ in self.counts)

    def total(self) -> int:
        return sum(count for _, count in self.counts)

    def to_dict(self) -> Dict[str, int]:
        """Convert to dictionary."""
        return dict(self.counts)


@dataclass(frozen=True)
class ParityTable:
    """Sign assigned to each outcome label; unlisted labels get ``default``."""

    signs: Mapping[str, int] = field(default_factory=dict)
    default: int = -1

    def sign(self, label: str) -> int:
        return self.signs.get(label, self.default)


@dataclass(frozen=True)
class ReturnRiskTable:
    """Per-outcome return and risk lookups."""

    returns: Mapping[str, float]
    risks: Mapping[str, float]


# Even-parity outcomes of a two-qubit Z⊗Z measurement
DEFAULT_PARITY = ParityTable(signs={"00": 1, "11": 1}, default=-1)

DEFAULT_RETURN_RISK = ReturnRiskTable(
    returns={"00": 0.05, "01": 0.02, "10": 0.03, "11": 0.07},
    risks={"00": 0.01, "01": 0.02, "10": 0.015, "11": 0.03},
)
