"""
Configuration management for the quantum asset pricing demo.

Handles environment variables and application settings.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv


@dataclass
class Config:
    """Application configuration."""

    # Sampling settings
    shots: int = 1024

    # CHSH classical limit for the S-value
    classical_bound: float = 2.0

    # Logging settings
    log_file: Optional[Path] = None
    debug: bool = False


class ConfigError(Exception):
    """Configuration error."""
    pass


def load_config(env_file: Optional[str] = None) -> Config:
    """
    Load configuration from environment variables.

    Args:
        env_file: Optional path to .env file

    Returns:
        Config object with parsed settings

    Raises:
        ConfigError: If an environment variable cannot be parsed
    """
    # Load environment variables from .env file
    if env_file:
        load_dotenv(env_file)
    else:
        load_dotenv()

    try:
        shots = int(os.getenv("SHOTS", "1024"))
    except ValueError:
        raise ConfigError(f"SHOTS must be an integer, got {os.getenv('SHOTS')!r}")

    try:
        classical_bound = float(os.getenv("CLASSICAL_BOUND", "2.0"))
    except ValueError:
        raise ConfigError(
            f"CLASSICAL_BOUND must be a number, got {os.getenv('CLASSICAL_BOUND')!r}"
        )

    log_file_str = os.getenv("LOG_FILE")
    log_file = Path(log_file_str) if log_file_str else None

    debug = os.getenv("DEBUG", "false").lower() == "true"

    return Config(
        shots=shots,
        classical_bound=classical_bound,
        log_file=log_file,
        debug=debug,
    )


def validate_config(config: Config) -> None:
    """
    Validate configuration values.

    Args:
        config: Configuration object to validate

    Raises:
        ConfigError: If configuration is invalid
    """
    if config.shots < 1:
        raise ConfigError(f"SHOTS must be at least 1, got {config.shots}")

    if config.classical_bound <= 0:
        raise ConfigError(
            f"CLASSICAL_BOUND must be positive, got {config.classical_bound}"
        )

    # Ensure log directory exists
    if config.log_file is not None:
        config.log_file.parent.mkdir(parents=True, exist_ok=True)


def get_experiment_parameters(config: Config) -> dict:
    """
    Get experiment parameters from configuration.

    Args:
        config: Configuration object

    Returns:
        Dictionary with experiment parameters
    """
    return {
        "shots": config.shots,
        "classical_bound": config.classical_bound,
    }


# Default configuration instance
_default_config: Optional[Config] = None


def get_config() -> Config:
    """
    Get the default configuration instance.

    Returns:
        Default Config object

    Raises:
        ConfigError: If the environment holds invalid settings
    """
    global _default_config
    if _default_config is None:
        _default_config = load_config()
        validate_config(_default_config)
    return _default_config


def set_config(config: Config) -> None:
    """
    Set the default configuration instance.

    Args:
        config: Configuration object to set as default
    """
    global _default_config
    validate_config(config)
    _default_config = config
