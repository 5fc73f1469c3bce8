"""
Combination generator for killer cages

Enumerates sets of distinct digits that fill a cage and add up to its total.
"""

import logging
from dataclasses import dataclass, field
from typing import Iterator, List, Tuple

from .config import CageConfig, DEFAULT_MAX_CELL_VALUE


logger = logging.getLogger(__name__)

Combination = Tuple[int, ...]


@dataclass(frozen=True)
class KillerCage:
    """Digit combinations for one cage, each kept in ascending order"""

    cell_count: int
    max_cell_value: int = DEFAULT_MAX_CELL_VALUE

    # validated settings (initialised in post_init)
    config: CageConfig = field(init=False, repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "config", CageConfig(self.cell_count, self.max_cell_value)
        )

    @classmethod
    def from_config(cls, config: CageConfig) -> "KillerCage":
        return cls(config.cell_count, config.max_cell_value)

    def minimum_sum(self) -> int:
        """
        Smallest possible total of the cage.

        This is the triangular number for cell_count, e.g. 1 + 2 + 3 = 6.
        """
        return self.cell_count * (self.cell_count + 1) // 2

    def maximum_sum(self) -> int:
        """
        Largest possible total of the cage.

        Formed by counting down from max_cell_value, e.g. 9 + 8 + 7 = 24.
        """
        return self.minimum_sum() + self.cell_count * (self.max_cell_value - self.cell_count)

    def max_positional_value(self, index: int) -> int:
        """
        Largest value the cell at ``index`` may hold in an ascending combination

        With 3 cells and max 9, index 1 can be at most 8 because index 2
        still needs a larger digit.
        """
        return self.max_cell_value - (self.cell_count - 1 - index)

    def find_combinations(self, total: int) -> List[Combination]:
        """
        All combinations of distinct digits summing to ``total``

        Args:
            total: Cage total

        Returns:
            Combinations in ascending lexicographic order (empty if none)
        """
        combinations = list(self.iter_combinations(total))
        logger.debug(
            "cage %d/%d total %d: %d combination(s)",
            self.cell_count, self.max_cell_value, total, len(combinations),
        )
        return combinations

    def iter_combinations(self, total: int) -> Iterator[Combination]:
        """Generator form of find_combinations"""
        if not (self.minimum_sum() <= total <= self.maximum_sum()):
            return

        # candidates[i] is the next value to try for cell i;
        # len(candidates) == len(prefix) + 1 while searching
        prefix: List[int] = []
        candidates = [1]
        remaining = total

        while candidates:
            depth = len(prefix)
            value = candidates[-1]
            cells_left = self.cell_count - depth

            if (
                value > self.max_positional_value(depth)
                or self._lowest_completion(value, cells_left) > remaining
            ):
                # exhausted this cell, backtrack to the previous one
                candidates.pop()
                if prefix:
                    remaining += prefix.pop()
                continue

            candidates[-1] = value + 1
            if self._highest_completion(value, cells_left) < remaining:
                continue

            if cells_left == 1:
                # both bounds collapse to value, so value == remaining
                yield tuple(prefix) + (value,)
                continue

            prefix.append(value)
            remaining -= value
            candidates.append(value + 1)

    def _lowest_completion(self, value: int, cells_left: int) -> int:
        """Sum of value, value+1, ... over the remaining cells"""
        return cells_left * value + cells_left * (cells_left - 1) // 2

    def _highest_completion(self, value: int, cells_left: int) -> int:
        """Sum of value followed by the largest digits still available"""
        return (
            value
            + (cells_left - 1) * self.max_cell_value
            - (cells_left - 1) * (cells_left - 2) // 2
        )


def minimum(cell_count: int, max_cell_value: int = DEFAULT_MAX_CELL_VALUE) -> int:
    """Minimum possible sum for a cage of ``cell_count`` cells"""
    return KillerCage(cell_count, max_cell_value).minimum_sum()


def maximum(cell_count: int, max_cell_value: int = DEFAULT_MAX_CELL_VALUE) -> int:
    """Maximum possible sum for a cage of ``cell_count`` cells"""
    return KillerCage(cell_count, max_cell_value).maximum_sum()


def enumerate_combinations(
    cell_count: int, max_cell_value: int, total: int
) -> List[Combination]:
    """All combinations for a cage, see KillerCage.find_combinations"""
    return KillerCage(cell_count, max_cell_value).find_combinations(total)
