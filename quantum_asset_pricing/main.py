"""
Main application for the quantum asset pricing demo.

This module provides the CLI interface and runs the CHSH and portfolio
experiments against mocked samplers, printing their results.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional, Tuple

from quantum_asset_pricing.config import (
    Config,
    get_experiment_parameters,
    load_config,
    validate_config,
)
from quantum_asset_pricing.chsh import ChshReport, run_chsh_experiment
from quantum_asset_pricing.mock_backend import (
    CHSH_MOCK_COUNTS,
    PORTFOLIO_MOCK_COUNTS,
    MockSampler,
)
from quantum_asset_pricing.portfolio import PortfolioReport, run_portfolio_simulation


# Configure logging
def setup_logging(verbose: bool = False, log_file: Optional[Path] = None):
    """
    Configure logging for the application.

    Args:
        verbose: Enable verbose logging
        log_file: Optional file to copy log records to
    """
    level = logging.DEBUG if verbose else logging.INFO

    handlers = [logging.StreamHandler(sys.stderr)]
    if log_file is not None:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=handlers,
    )

    # Reduce noise from external libraries
    logging.getLogger("qiskit").setLevel(logging.WARNING)


class QuantumPricingDemo:
    """Runs both experiments and formats their results."""

    def __init__(self, config: Config):
        """
        Initialize the demo.

        Args:
            config: Application configuration
        """
        self.config = config
        self.logger = logging.getLogger(__name__)
        self.chsh_sampler = MockSampler(CHSH_MOCK_COUNTS)
        self.portfolio_sampler = MockSampler(PORTFOLIO_MOCK_COUNTS)

    def run(self) -> Tuple[ChshReport, PortfolioReport]:
        """
        Run the CHSH experiment followed by the portfolio simulation.

        Returns:
            Tuple of (ChshReport, PortfolioReport)
        """
        params = get_experiment_parameters(self.config)

        self.logger.info("Running CHSH experiment")
        chsh = run_chsh_experiment(
            self.chsh_sampler,
            shots=params["shots"],
            classical_bound=params["classical_bound"],
        )

        self.logger.info("Running portfolio simulation")
        portfolio = run_portfolio_simulation(
            self.portfolio_sampler,
            shots=params["shots"],
        )

        return chsh, portfolio


def format_report(chsh: ChshReport, portfolio: PortfolioReport) -> List[str]:
    """
    Render both reports as output lines.

    Args:
        chsh: CHSH experiment report
        portfolio: Portfolio simulation report

    Returns:
        Lines in display order
    """
    lines = []
    for (angle_a, angle_b), value in zip(chsh.settings, chsh.expectations):
        lines.append(f"CHSH Expectation for angles ({angle_a}, {angle_b}): {value:.6f}")

    lines.append(f"CHSH S-Value: {chsh.s_value:.6f}")
    if chsh.exceeds_classical_bound:
        lines.append("Quantum advantage demonstrated! S-value exceeds classical limit.")
    else:
        lines.append("No quantum advantage. Classical limit not exceeded.")

    weights = ", ".join(f"{w:.6f}" for w in portfolio.weights)
    lines.append(f"Portfolio Weights: [{weights}]")
    lines.append("Portfolio Performance:")
    lines.append(f"Expected Return: {portfolio.expected_return:.6f}")
    lines.append(f"Risk: {portfolio.risk:.6f}")
    lines.append(f"Total Weight: {portfolio.total_weight:.6f} (should be 1.0)")
    return lines


def create_parser() -> argparse.ArgumentParser:
    """
    Create command-line argument parser.

    Returns:
        Configured argument parser
    """
    parser = argparse.ArgumentParser(
        description="Run the quantum-inspired CHSH and portfolio demo",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Run the demo with default settings
  python -m quantum_asset_pricing.main

  # Show debug logging
  python -m quantum_asset_pricing.main --verbose
        """,
    )

    parser.add_argument(
        "--shots",
        type=int,
        help="Shots per sampled circuit (default: 1024)",
    )

    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )

    parser.add_argument(
        "--config-file",
        type=Path,
        help="Path to configuration file",
    )

    return parser


def main(argv: Optional[List[str]] = None):
    """Main entry point for the application."""
    parser = create_parser()
    args = parser.parse_args(argv)

    try:
        # Load configuration
        config = load_config(env_file=args.config_file)

        # Override with command-line arguments
        if args.shots is not None:
            config.shots = args.shots
        if args.verbose:
            config.debug = True

        # Validate configuration
        validate_config(config)

    except Exception as e:
        setup_logging(args.verbose)
        logging.getLogger(__name__).error(f"Invalid configuration: {e}")
        return 1

    # Setup logging
    setup_logging(config.debug, config.log_file)
    logger = logging.getLogger(__name__)

    try:
        demo = QuantumPricingDemo(config)
        chsh, portfolio = demo.run()

        for line in format_report(chsh, portfolio):
            print(line)

        return 0

    except KeyboardInterrupt:
        logger.info("Demo cancelled by user")
        return 130

    except Exception as e:
        logger.error(f"Error running demo: {e}", exc_info=config.debug)
        return 1


if __name__ == "__main__":
    sys.exit(main())
