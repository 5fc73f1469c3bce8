"""
Exception classes for the killer cage generator
"""


class KillerCageError(Exception):
    """Base exception for cage combination errors."""
    pass


class ConfigurationError(KillerCageError):
    """Invalid cage parameters."""
    pass


class InvalidCageError(ConfigurationError):
    """The cell count cannot be filled with distinct digits."""
    def __init__(self, cell_count: int, max_cell_value: int) -> None:
        self.cell_count = cell_count
        self.max_cell_value = max_cell_value
        super().__init__(
            "cell_count must be between 1 and max_cell_value: "
            f"got cell_count={cell_count}, max_cell_value={max_cell_value}"
        )
