"""Composition of formatted cells into rows and rows into a block."""

from __future__ import annotations

from .cell import content_lines
from .exceptions import LineCountMismatchError


def concat_lines(left: str, right: str) -> str:
    """Glue two multi-line strings side by side, line by line.

    Raises:
        LineCountMismatchError: If the strings have different line counts
    """
    left_lines = content_lines(left)
    right_lines = content_lines(right)
    if len(left_lines) != len(right_lines):
        raise LineCountMismatchError(len(left_lines), len(right_lines))
    return "\n".join(a + b for a, b in zip(left_lines, right_lines))


def concat_row(cells: list[str]) -> str:
    """Merge the formatted cells of one row, in column order."""
    if not cells:
        return ""
    row = cells[0]
    for cell in cells[1:]:
        row = concat_lines(row, cell)
    return row


def join_rows(rows: list[str]) -> str:
    """Stack composed rows, each followed by a line break."""
    return "".join(f"{row}\n" for row in rows)
