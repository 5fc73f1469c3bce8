"""
Configuration classes for the killer cage generator
"""

from dataclasses import dataclass
from typing import Tuple

from .exceptions import InvalidCageError


DEFAULT_MAX_CELL_VALUE = 9


@dataclass(frozen=True)
class CageConfig:
    """A single killer cage (immutable)"""

    cell_count: int                                  # cells in the cage
    max_cell_value: int = DEFAULT_MAX_CELL_VALUE     # 9 for a standard grid

    def __post_init__(self) -> None:
        """Validation"""
        # every cell needs its own digit
        if self.max_cell_value < 1 or not (1 <= self.cell_count <= self.max_cell_value):
            raise InvalidCageError(self.cell_count, self.max_cell_value)

    @property
    def digits(self) -> Tuple[int, ...]:
        """Candidate digits (1..max_cell_value)"""
        return tuple(range(1, self.max_cell_value + 1))
