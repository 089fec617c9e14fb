"""A single grid cell."""

from __future__ import annotations

from dataclasses import replace

from .models import DEFAULT_ALIGNMENT, DEFAULT_BORDER, DEFAULT_IDENT, Alignment, Border, Ident


def content_lines(text: str) -> list[str]:
    r"""
    Split text into lines.

    Only ``\n`` breaks a line, and a ``\r\n`` pair counts as one break. An
    empty string has no lines and a trailing line break does not start a
    new one. Other control characters stay part of their line.
    """
    lines = text.split("\n")
    last = lines.pop()
    lines = [line[:-1] if line.endswith("\r") else line for line in lines]
    if last:
        lines.append(last)
    return lines


class Cell:
    """
    Content, alignment, border glyphs and padding of one grid slot.

    Setters mutate the cell in place and return it, so calls chain:

        grid.cell(0, 0).set_content("total").set_alignment(Alignment.RIGHT)
    """

    def __init__(self) -> None:
        self._content = ""
        self._alignment = DEFAULT_ALIGNMENT
        self._border = DEFAULT_BORDER
        self._ident = DEFAULT_IDENT

    def __repr__(self) -> str:
        return f"Cell(content={self._content!r}, alignment={self._alignment})"

    @property
    def content(self) -> str:
        return self._content

    @property
    def alignment(self) -> Alignment:
        return self._alignment

    @property
    def border(self) -> Border:
        return self._border

    @property
    def ident(self) -> Ident:
        return self._ident

    def set_content(self, text: str) -> Cell:
        self._content = text
        return self

    def set_alignment(self, alignment: Alignment) -> Cell:
        self._alignment = alignment
        return self

    def set_corner(self, glyph: str) -> Cell:
        self._border = replace(self._border, corner=glyph)
        return self

    def set_top_border(self, glyph: str) -> Cell:
        self._border = replace(self._border, top=glyph)
        return self

    def set_bottom_border(self, glyph: str) -> Cell:
        self._border = replace(self._border, bottom=glyph)
        return self

    def set_left_border(self, glyph: str) -> Cell:
        self._border = replace(self._border, left=glyph)
        return self

    def set_right_border(self, glyph: str) -> Cell:
        self._border = replace(self._border, right=glyph)
        return self

    def set_vertical_ident(self, size: int) -> Cell:
        """Set the blank lines above and below the content."""
        self._ident = replace(self._ident, top=size, bottom=size)
        return self

    def set_horizontal_ident(self, size: int) -> Cell:
        """Set the spaces before and after every content line."""
        self._ident = replace(self._ident, left=size, right=size)
        return self

    def height(self) -> int:
        """Number of content lines."""
        return len(content_lines(self._content))

    def weight(self) -> int:
        """Widest content line, in characters."""
        return max((len(line) for line in content_lines(self._content)), default=0)
