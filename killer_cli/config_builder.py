"""
Configuration builder for the CLI.

Converts command-line arguments to CageConfig.
"""

from argparse import Namespace

from killer_core.config import CageConfig


def build_cage_config(args: Namespace) -> CageConfig:
    """
    Build CageConfig from parsed arguments.

    Args:
        args: Parsed command-line arguments

    Returns:
        Validated CageConfig

    Raises:
        InvalidCageError: If the cell count does not fit the digit range
    """
    return CageConfig(
        cell_count=args.cell_count,
        max_cell_value=args.max_cell_value,
    )


def format_config_summary(config: CageConfig) -> str:
    """Format configuration as a one-line summary."""
    return (
        f"{config.cell_count} cell(s), digits 1-{config.max_cell_value}"
    )
