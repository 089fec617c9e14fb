"""Core models for papergrid."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum


class Alignment(Enum):
    """Horizontal alignment of text within a column."""

    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


@dataclass(frozen=True)
class Border:
    """
    Border glyphs of a cell.

    Each glyph is conceptually one character but any string is accepted.
    Edges repeat their glyph across the cell width; an empty glyph draws
    a borderless edge.

    Attributes:
        top: Repeated along the top edge
        bottom: Repeated along the bottom edge
        left: Drawn at the start of every content line
        right: Drawn at the end of every content line
        corner: Drawn where an edge meets a neighbouring edge
    """

    top: str = "-"
    bottom: str = "-"
    left: str = "|"
    right: str = "|"
    corner: str = "+"


@dataclass(frozen=True)
class Ident:
    """
    Blank space inserted inside a cell border.

    Attributes:
        top: Blank lines above the content
        bottom: Blank lines below the content
        left: Spaces before every content line
        right: Spaces after every content line
    """

    top: int = 0
    bottom: int = 0
    left: int = 0
    right: int = 0

    def __post_init__(self) -> None:
        for side in ("top", "bottom", "left", "right"):
            if getattr(self, side) < 0:
                raise ValueError(f"{side} ident must be non-negative")


DEFAULT_ALIGNMENT = Alignment.CENTER
DEFAULT_BORDER = Border()
DEFAULT_IDENT = Ident()


@dataclass(frozen=True)
class RenderPlan:
    """
    Per-cell rendering configuration.

    Says which border edges and corner connections are drawn and which
    width/height the cell is stretched to. A width or height of 0 means
    "derive from content".
    """

    top: bool = False
    bottom: bool = False
    left: bool = False
    right: bool = False
    left_connection: bool = False
    right_connection: bool = False
    width: int = 0
    height: int = 0

    @classmethod
    def boxed(cls, width: int = 0, height: int = 0) -> RenderPlan:
        """Create a plan with every edge and both corner connections drawn."""
        return cls(
            top=True,
            bottom=True,
            left=True,
            right=True,
            left_connection=True,
            right_connection=True,
            width=width,
            height=height,
        )

    @classmethod
    def for_position(cls, row: int, column: int, width: int, height: int) -> RenderPlan:
        """
        Create the plan of the cell at (row, column) of a grid.

        Cells share borders with their neighbours: only the first row draws
        a top edge and only the first column draws a left edge and left
        corner.
        """
        plan = cls.boxed(width=width, height=height)
        if column != 0:
            plan = plan.without_left().without_left_connection()
        if row != 0:
            plan = plan.without_top()
        return plan

    def without_top(self) -> RenderPlan:
        return replace(self, top=False)

    def without_left(self) -> RenderPlan:
        return replace(self, left=False)

    def without_left_connection(self) -> RenderPlan:
        return replace(self, left_connection=False)

    def with_size(self, width: int, height: int) -> RenderPlan:
        return replace(self, width=width, height=height)
