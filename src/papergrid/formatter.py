"""
Cell formatting.

This module turns one Cell plus a RenderPlan into a finished, bordered,
multi-line string, independent of the rest of the grid.
"""

from __future__ import annotations

from .cell import Cell, content_lines
from .models import Alignment, RenderPlan


def align(text: str, alignment: Alignment, width: int) -> str:
    """Pad text with spaces to width.

    Centered text gets the odd space on the right. Text wider than width
    is returned unchanged.
    """
    padding = max(width - len(text), 0)
    if alignment is Alignment.LEFT:
        return text + " " * padding
    if alignment is Alignment.RIGHT:
        return " " * padding + text
    left = padding // 2
    return " " * left + text + " " * (padding - left)


class CellFormatter:
    """Render a Cell according to a RenderPlan.

    Example:
        >>> cell = Cell().set_content("hello")
        >>> print(CellFormatter(RenderPlan.boxed()).format(cell))
        +-----+
        |hello|
        +-----+
    """

    def __init__(self, plan: RenderPlan | None = None) -> None:
        """Initialize the formatter.

        Args:
            plan: Edges, corners and target size to render with.
                  Defaults to a plan that draws no border at all.
        """
        self._plan = plan if plan is not None else RenderPlan()

    @property
    def plan(self) -> RenderPlan:
        return self._plan

    def format(self, cell: Cell) -> str:
        """Render the cell.

        Args:
            cell: Cell to render

        Returns:
            Lines of the bordered cell joined with line breaks, without a
            trailing line break
        """
        plan = self._plan
        border = cell.border
        ident = cell.ident

        width = plan.width if plan.width else cell.weight()

        content = cell.content
        count_lines = len(content_lines(content))
        if count_lines < plan.height:
            # One break more than the deficit: the first one ends the last
            # content line. Empty content therefore gains a surplus line.
            content += "\n" * (plan.height - count_lines + 1)

        rows = [""] * ident.top + content_lines(content) + [""] * ident.bottom

        left = (border.left if plan.left else "") + " " * ident.left
        right = " " * ident.right + (border.right if plan.right else "")
        lines = [left + align(row, cell.alignment, width) + right for row in rows]

        lhs = border.corner if plan.left_connection else ""
        rhs = border.corner if plan.right_connection else ""
        weight = width + ident.left + ident.right

        if plan.top:
            lines.insert(0, lhs + border.top * weight + rhs)
        if plan.bottom:
            lines.append(lhs + border.bottom * weight + rhs)

        return "\n".join(lines)
