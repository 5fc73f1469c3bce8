"""
Result data structures for the killer cage generator

Collects the combinations for one cage total and derives digit statistics
"""

from dataclasses import dataclass
from typing import Dict, List, Tuple
import numpy as np
import pandas as pd
from numpy.typing import NDArray

from .config import CageConfig
from .combinations import Combination, KillerCage


@dataclass
class CageResults:
    """All combinations for one cage total"""

    config: CageConfig
    total: int
    combinations: List[Combination]

    @classmethod
    def from_cage(cls, cage: KillerCage, total: int) -> "CageResults":
        return cls(
            config=cage.config,
            total=total,
            combinations=cage.find_combinations(total),
        )

    @property
    def n_combinations(self) -> int:
        """Number of combinations"""
        return len(self.combinations)

    @property
    def is_empty(self) -> bool:
        return not self.combinations

    def membership_matrix(self) -> NDArray[np.bool_]:
        """
        Digit membership per combination

        Returns:
            Boolean array (shape: (n_combinations, max_cell_value)), where
            [i, d - 1] is True when digit d appears in combination i
        """
        matrix = np.zeros(
            (self.n_combinations, self.config.max_cell_value), dtype=np.bool_
        )
        if self.combinations:
            values = np.array(self.combinations, dtype=np.int64)
            rows = np.repeat(np.arange(self.n_combinations), self.config.cell_count)
            matrix[rows, values.ravel() - 1] = True
        return matrix

    def digit_counts(self) -> Dict[int, int]:
        """Number of combinations each digit appears in"""
        counts = self.membership_matrix().sum(axis=0)
        return {digit: int(counts[digit - 1]) for digit in self.config.digits}

    def required_digits(self) -> Tuple[int, ...]:
        """
        Digits present in every combination

        Empty when there are no combinations.
        """
        if self.is_empty:
            return ()
        hits = np.flatnonzero(self.membership_matrix().all(axis=0))
        return tuple(int(i) + 1 for i in hits)

    def excluded_digits(self) -> Tuple[int, ...]:
        """
        Digits present in no combination

        Every digit when there are no combinations.
        """
        hits = np.flatnonzero(~self.membership_matrix().any(axis=0))
        return tuple(int(i) + 1 for i in hits)

    def to_dataframe(self) -> pd.DataFrame:
        """
        Combinations as a DataFrame

        Returns:
            One row per combination, columns cell_1..cell_n and sum
        """
        columns = [f"cell_{i + 1}" for i in range(self.config.cell_count)]
        df = pd.DataFrame(self.combinations, columns=columns, dtype="int64")
        df["sum"] = df[columns].sum(axis=1).astype("int64")
        return df

    def to_csv(self, path: str, index: bool = False) -> None:
        """
        Write the combinations as CSV

        Args:
            path: Output file path
            index: Whether to write the DataFrame index
        """
        self.to_dataframe().to_csv(path, index=index)

    def get_summary_text(self) -> str:
        """Human-readable summary of the digit analysis"""

        def fmt(digits: Tuple[int, ...]) -> str:
            return ", ".join(str(d) for d in digits) if digits else "-"

        counts = self.digit_counts()
        lines = [
            f"Cage: {self.config.cell_count} cells, total {self.total}, "
            f"digits 1-{self.config.max_cell_value}",
            f"Combinations: {self.n_combinations}",
            f"Required digits: {fmt(self.required_digits())}",
            f"Excluded digits: {fmt(self.excluded_digits())}",
            "Digit usage: " + " ".join(
                f"{digit}:{count}" for digit, count in counts.items()
            ),
        ]
        return "\n".join(lines)
