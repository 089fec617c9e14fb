"""Exceptions for papergrid."""

# ---------------------------------------------------------------------------
# Base Exception
# ---------------------------------------------------------------------------


class PapergridError(Exception):
    """Root of every error papergrid raises on purpose."""

    pass


# ---------------------------------------------------------------------------
# Category Exceptions
# ---------------------------------------------------------------------------


class LayoutError(PapergridError):
    """
    Base exception for layout errors.

    These indicate caller misuse or a broken internal invariant, never a
    recoverable runtime condition. Rendering aborts without returning
    partial output.
    """

    pass


# ---------------------------------------------------------------------------
# Layout Exceptions
# ---------------------------------------------------------------------------


class CellIndexError(LayoutError, IndexError):
    """Raised when a cell is addressed outside of the grid shape."""

    def __init__(self, row: int, column: int, shape: tuple[int, int]) -> None:
        self.row = row
        self.column = column
        self.shape = shape
        super().__init__(
            f"Cell ({row}, {column}) is out of range for a {shape[0]}x{shape[1]} grid"
        )


class AxisIndexError(LayoutError, IndexError):
    """Raised when a whole row or column is addressed outside of the grid shape."""

    def __init__(self, axis: str, index: int, shape: tuple[int, int]) -> None:
        self.axis = axis
        self.index = index
        self.shape = shape
        super().__init__(
            f"{axis.capitalize()} {index} is out of range for a {shape[0]}x{shape[1]} grid"
        )


class LineCountMismatchError(LayoutError):
    """
    Raised when formatted cells of one row disagree on their line count.

    Horizontal composition pairs the k-th line of every cell, so all cells
    of a row must produce the same number of lines.
    """

    def __init__(self, expected: int, actual: int) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Cannot concatenate cells with {expected} and {actual} lines. "
            "Empty cells next to non-empty cells produce an extra blank line; "
            "give them content."
        )


# ---------------------------------------------------------------------------
# Manifest Exceptions
# ---------------------------------------------------------------------------


class ManifestError(PapergridError, ValueError):
    """Raised when a grid manifest is malformed."""

    def __init__(self, field: str, reason: str) -> None:
        self.field = field
        self.reason = reason
        super().__init__(f"Invalid manifest field '{field}': {reason}")
