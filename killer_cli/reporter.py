"""
Reporter for displaying and exporting cage combinations.
"""

from pathlib import Path
from typing import Sequence

from killer_core.combinations import KillerCage
from killer_core.results import CageResults


NO_SOLUTIONS = "No solutions found."
THIN_SEPARATOR = "-" * 40


def format_combination(combination: Sequence[int]) -> str:
    """Format a combination as a list, e.g. [1, 9]."""
    return str(list(combination))


def print_bounds(cage: KillerCage, minimum: bool, maximum: bool) -> None:
    """Print the requested sum bounds."""
    if minimum:
        print(f"Minimum sum: {cage.minimum_sum()}")
    if maximum:
        print(f"Maximum sum: {cage.maximum_sum()}")


def print_combinations(results: CageResults) -> None:
    """Print one combination per line."""
    if results.is_empty:
        print(NO_SOLUTIONS)
        return

    for combination in results.combinations:
        print(format_combination(combination))


def print_digit_analysis(results: CageResults) -> None:
    """Print required/excluded digits."""
    print(THIN_SEPARATOR)
    print(results.get_summary_text())


def export_to_csv(results: CageResults, output_path: str) -> None:
    """
    Export combinations to CSV file.

    Args:
        results: Combinations for one cage total
        output_path: Path to output CSV file
    """
    path = Path(output_path)
    results.to_csv(str(path))
    print(f"\nResults exported to: {path.absolute()}")
