"""
Killer Cage Core Package

Digit combinations for killer sudoku cages
"""

from .config import CageConfig, DEFAULT_MAX_CELL_VALUE
from .combinations import (
    Combination,
    KillerCage,
    minimum,
    maximum,
    enumerate_combinations,
)
from .results import CageResults
from .exceptions import (
    KillerCageError,
    ConfigurationError,
    InvalidCageError,
)

__version__ = "0.1.0"

__all__ = [
    # Config
    "CageConfig",
    "DEFAULT_MAX_CELL_VALUE",
    # Core
    "Combination",
    "KillerCage",
    "minimum",
    "maximum",
    "enumerate_combinations",
    "CageResults",
    # Exceptions
    "KillerCageError",
    "ConfigurationError",
    "InvalidCageError",
]
