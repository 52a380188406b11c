"""
Tests for configuration management.
"""

import os
import tempfile
from pathlib import Path
from unittest.mock import patch

import pytest

from quantum_asset_pricing import config as config_module
from quantum_asset_pricing.config import (
    Config,
    ConfigError,
    get_config,
    get_experiment_parameters,
    load_config,
    set_config,
    validate_config,
)


class TestConfig:
    """Test configuration loading."""

    def test_load_config_defaults(self):
        """Test that an empty environment gives the demo defaults."""
        with patch.dict(os.environ, {}, clear=True):
            config = load_config()
            assert config.shots == 1024
            assert config.classical_bound == 2.0
            assert config.log_file is None
            assert config.debug is False

    def test_load_config_with_optional_settings(self):
        """Test configuration loading with every setting present."""
        env_vars = {
            "SHOTS": "2048",
            "CLASSICAL_BOUND": "2.5",
            "LOG_FILE": "logs/demo.log",
            "DEBUG": "true",
        }
        with patch.dict(os.environ, env_vars, clear=True):
            config = load_config()
            assert config.shots == 2048
            assert config.classical_bound == 2.5
            assert config.log_file == Path("logs/demo.log")
            assert config.debug is True

    def test_load_config_from_env_file(self):
        """Test loading configuration from .env file."""
        with tempfile.NamedTemporaryFile(mode="w", suffix=".env", delete=False) as f:
            f.write("SHOTS=512\n")
            f.write("DEBUG=true\n")
            env_file = f.name

        try:
            with patch.dict(os.environ, {}, clear=True):
                config = load_config(env_file)
                assert config.shots == 512
                assert config.debug is True
        finally:
            os.unlink(env_file)

    def test_load_config_bad_shots(self):
        """Test that a non-integer SHOTS raises ConfigError."""
        with patch.dict(os.environ, {"SHOTS": "many"}, clear=True):
            with pytest.raises(ConfigError, match="SHOTS must be an integer"):
                load_config()

    def test_load_config_bad_bound(self):
        """Test that a non-numeric CLASSICAL_BOUND raises ConfigError."""
        with patch.dict(os.environ, {"CLASSICAL_BOUND": "two"}, clear=True):
            with pytest.raises(ConfigError, match="CLASSICAL_BOUND must be a number"):
                load_config()


class TestValidateConfig:
    """Test configuration validation."""

    @pytest.mark.parametrize("shots", [0, -1])
    def test_validate_config_shots(self, shots):
        """Test that non-positive shots are rejected."""
        with pytest.raises(ConfigError, match="SHOTS must be at least 1"):
            validate_config(Config(shots=shots))

    def test_validate_config_bound(self):
        """Test that a non-positive classical bound is rejected."""
        with pytest.raises(ConfigError, match="CLASSICAL_BOUND must be positive"):
            validate_config(Config(classical_bound=0.0))

    def test_validate_config_creates_log_dir(self, tmp_path):
        """Test that validation creates the log file's directory."""
        log_dir = tmp_path / "logs"
        config = Config(log_file=log_dir / "demo.log")

        assert not log_dir.exists()
        validate_config(config)
        assert log_dir.exists()


class TestGetExperimentParameters:
    """Test experiment parameter extraction."""

    def test_get_experiment_parameters(self):
        """Test getting experiment parameters from config."""
        params = get_experiment_parameters(Config(shots=100, classical_bound=2.2))

        assert params == {"shots": 100, "classical_bound": 2.2}


class TestDefaultConfig:
    """Test the process-wide configuration accessors."""

    @pytest.fixture(autouse=True)
    def reset_default(self):
        config_module._default_config = None
        yield
        config_module._default_config = None

    def test_get_config_loads_once(self):
        """Test that get_config caches the loaded configuration."""
        with patch.dict(os.environ, {"SHOTS": "64"}, clear=True):
            first = get_config()
            second = get_config()

        assert first is second
        assert first.shots == 64

    def test_set_config_validates(self):
        """Test that set_config rejects invalid configuration."""
        with pytest.raises(ConfigError):
            set_config(Config(shots=0))

        custom = Config(shots=8)
        set_config(custom)
        assert get_config() is custom
