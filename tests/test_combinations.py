"""
Tests for KillerCage
"""

import dataclasses
from itertools import combinations

import pytest

from killer_core.combinations import (
    KillerCage,
    enumerate_combinations,
    maximum,
    minimum,
)
from killer_core.exceptions import InvalidCageError


class TestBounds:
    """Minimum/maximum sums"""

    @pytest.mark.parametrize(
        "cell_count, expected",
        [(1, 1), (2, 3), (3, 6), (4, 10), (5, 15), (6, 21), (7, 28), (8, 36), (9, 45)],
    )
    def test_minimum(self, cell_count: int, expected: int) -> None:
        """Minimum is the triangular number"""
        assert minimum(cell_count, 9) == expected

    @pytest.mark.parametrize(
        "max_cell_value, cell_count, expected",
        [
            (9, 1, 9),
            (9, 2, 17),
            (9, 3, 24),
            (9, 4, 30),
            (9, 5, 35),
            (9, 6, 39),
            (9, 7, 42),
            (9, 8, 44),
            (9, 9, 45),
            (13, 1, 13),
            (13, 2, 25),
            (13, 3, 36),
            (1, 1, 1),
        ],
    )
    def test_maximum(self, max_cell_value: int, cell_count: int, expected: int) -> None:
        """Maximum counts down from max_cell_value"""
        assert maximum(cell_count, max_cell_value) == expected

    def test_default_max_cell_value(self) -> None:
        assert minimum(3) == 6
        assert maximum(3) == 24

    @pytest.mark.parametrize("cell_count, max_cell_value", [(10, 9), (9, 3), (0, 9), (-1, 9)])
    def test_invalid_cage(self, cell_count: int, max_cell_value: int) -> None:
        """Cages that cannot hold distinct digits are rejected"""
        with pytest.raises(InvalidCageError, match="cell_count must be between"):
            minimum(cell_count, max_cell_value)
        with pytest.raises(InvalidCageError):
            maximum(cell_count, max_cell_value)
        with pytest.raises(InvalidCageError):
            enumerate_combinations(cell_count, max_cell_value, 10)


class TestMaxPositionalValue:

    @pytest.mark.parametrize(
        "max_cell_value, cell_count, index, expected",
        [
            (9, 3, 2, 9),
            (9, 3, 1, 8),
            (9, 3, 0, 7),
            (9, 2, 1, 9),
            (9, 2, 0, 8),
            (9, 8, 7, 9),
            (9, 8, 5, 7),
            (9, 8, 1, 3),
            (9, 8, 0, 2),
            (12, 3, 2, 12),
            (12, 3, 1, 11),
            (12, 3, 0, 10),
        ],
    )
    def test_values(
        self, max_cell_value: int, cell_count: int, index: int, expected: int
    ) -> None:
        cage = KillerCage(cell_count, max_cell_value)
        assert cage.max_positional_value(index) == expected


class TestFindCombinations:
    """Combination enumeration"""

    def test_two_cells_ten(self) -> None:
        """2 cells summing to 10"""
        assert enumerate_combinations(2, 9, 10) == [(1, 9), (2, 8), (3, 7), (4, 6)]

    @pytest.mark.parametrize("total", [1, 2, 3, 5, 9])
    def test_single_cell(self, total: int) -> None:
        assert KillerCage(1).find_combinations(total) == [(total,)]

    @pytest.mark.parametrize(
        "total, expected",
        [
            (3, [(1, 2)]),
            (4, [(1, 3)]),
            (5, [(1, 4), (2, 3)]),
            (6, [(1, 5), (2, 4)]),
            (17, [(8, 9)]),
        ],
    )
    def test_two_cells(self, total: int, expected: list) -> None:
        assert KillerCage(2).find_combinations(total) == expected

    @pytest.mark.parametrize(
        "total, expected",
        [
            (3, [(1, 2)]),
            (5, [(1, 4), (2, 3)]),
            (6, [(2, 4)]),
            (7, [(3, 4)]),
        ],
    )
    def test_alternate_max_cell_value(self, total: int, expected: list) -> None:
        assert KillerCage(2, max_cell_value=4).find_combinations(total) == expected

    @pytest.mark.parametrize(
        "cell_count, max_cell_value, total",
        [(1, 9, 0), (1, 9, 10), (2, 9, 1), (2, 9, 2), (2, 9, 20), (2, 4, 8), (3, 9, -4)],
    )
    def test_unsatisfiable_total_is_empty(
        self, cell_count: int, max_cell_value: int, total: int
    ) -> None:
        """No match is an empty result, not an error"""
        assert enumerate_combinations(cell_count, max_cell_value, total) == []

    def test_full_cage(self) -> None:
        """All nine digits fill a nine-cell cage"""
        assert KillerCage(9).find_combinations(45) == [tuple(range(1, 10))]

    def test_known_unique_cages(self) -> None:
        assert KillerCage(3).find_combinations(7) == [(1, 2, 4)]
        assert KillerCage(3).find_combinations(23) == [(6, 8, 9)]
        assert KillerCage(4).find_combinations(11) == [(1, 2, 3, 5)]
        assert KillerCage(5).find_combinations(34) == [(4, 6, 7, 8, 9)]

    def test_iter_matches_list(self) -> None:
        cage = KillerCage(4)
        assert list(cage.iter_combinations(20)) == cage.find_combinations(20)

    @pytest.mark.parametrize("max_cell_value", [4, 6, 9])
    def test_agrees_with_brute_force(self, max_cell_value: int) -> None:
        """Pruned search finds exactly what brute force finds"""
        digits = range(1, max_cell_value + 1)
        for cell_count in range(1, max_cell_value + 1):
            cage = KillerCage(cell_count, max_cell_value)
            for total in range(cage.minimum_sum() - 1, cage.maximum_sum() + 2):
                expected = [c for c in combinations(digits, cell_count) if sum(c) == total]
                assert cage.find_combinations(total) == expected

    def test_combinations_are_distinct_and_sum_to_total(self) -> None:
        for cell_count in range(1, 10):
            cage = KillerCage(cell_count)
            for total in range(cage.minimum_sum(), cage.maximum_sum() + 1):
                found = cage.find_combinations(total)
                assert found, f"{cell_count} cells, total {total}"
                for combo in found:
                    assert len(combo) == cell_count
                    assert len(set(combo)) == cell_count
                    assert sum(combo) == total
                    assert list(combo) == sorted(combo)
                    assert all(1 <= v <= 9 for v in combo)

    def test_deep_cage(self) -> None:
        """Cages far larger than a sudoku grid are searched without recursion"""
        cage = KillerCage(1200, 1200)
        assert cage.find_combinations(cage.maximum_sum()) == [tuple(range(1, 1201))]

    def test_deep_cage_with_spare_digit(self) -> None:
        cage = KillerCage(1200, 1201)
        found = cage.find_combinations(cage.minimum_sum() + 1)
        assert found == [tuple(range(1, 1200)) + (1201,)]


class TestKillerCage:

    def test_frozen(self) -> None:
        """Cells cannot be changed after validation"""
        cage = KillerCage(3)
        with pytest.raises(dataclasses.FrozenInstanceError):
            cage.cell_count = 12  # type: ignore[misc]
        assert cage.config.cell_count == 3

    def test_from_config(self) -> None:
        cage = KillerCage(4, 6)
        assert KillerCage.from_config(cage.config) == cage
