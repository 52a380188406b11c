"""
Tests for the mocked sampler.
"""

import logging

import pytest
from qiskit import QuantumCircuit

from quantum_asset_pricing.bell_circuit import build_bell_circuit, build_portfolio_circuit
from quantum_asset_pricing.mock_backend import (
    CHSH_MOCK_COUNTS,
    PORTFOLIO_MOCK_COUNTS,
    MockSampler,
    SamplerError,
    SamplerResult,
)


class TestMockSampler:
    """Test fixed-count sampling."""

    @pytest.fixture
    def sampler(self):
        return MockSampler(CHSH_MOCK_COUNTS)

    def test_run_returns_fixed_counts(self, sampler):
        result = sampler.run(build_bell_circuit(0.0, 0.1, name="chsh_0"), shots=1024)

        assert isinstance(result, SamplerResult)
        assert result.distribution.to_dict() == CHSH_MOCK_COUNTS
        assert result.shots == 1024
        assert result.circuit_name == "chsh_0"
        assert result.backend_name == "mock_sampler"

    def test_counts_ignore_circuit(self, sampler):
        """Different angles give identical counts."""
        first = sampler.run(build_bell_circuit(0.0, 0.1), shots=1024)
        second = sampler.run(build_bell_circuit(1.0, -2.0), shots=1024)

        assert first.distribution == second.distribution

    def test_portfolio_counts(self):
        sampler = MockSampler(PORTFOLIO_MOCK_COUNTS)
        result = sampler.run(build_portfolio_circuit([0.1, 0.2, 0.3]), shots=1024)

        assert result.distribution.to_dict() == {"00": 600, "01": 200, "10": 150, "11": 74}

    @pytest.mark.parametrize("shots", [0, -1])
    def test_rejects_bad_shots(self, sampler, shots):
        with pytest.raises(SamplerError, match="shots must be positive"):
            sampler.run(build_bell_circuit(0.0, 0.0), shots=shots)

    def test_rejects_unmeasured_circuit(self, sampler):
        with pytest.raises(SamplerError, match="Invalid circuit"):
            sampler.run(QuantumCircuit(2, 2), shots=10)

    def test_logs_angles_and_shots(self, sampler, caplog):
        with caplog.at_level(logging.INFO, logger="quantum_asset_pricing.mock_backend"):
            sampler.run(build_bell_circuit(0.0, 0.5, name="chsh_1"), shots=256)

        assert "Simulating chsh_1 with angles [0.0, 0.5] and 256 shots" in caplog.text

    def test_result_to_dict(self, sampler):
        result = sampler.run(build_bell_circuit(0.0, 0.0, name="chsh_2"), shots=8)

        assert result.to_dict() == {
            "counts": CHSH_MOCK_COUNTS,
            "shots": 8,
            "circuit_name": "chsh_2",
            "backend_name": "mock_sampler",
        }
