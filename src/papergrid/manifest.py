"""YAML manifest parsing for declarative grids."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .cell import Cell
from .exceptions import ManifestError
from .grid import Grid
from .models import DEFAULT_ALIGNMENT, DEFAULT_BORDER, Alignment

DEFAULT_FILL = " "
"""Content substituted for empty and missing cells."""

_GLYPH_KEYS = ("top", "bottom", "left", "right", "corner")


def _parse_alignment(value: Any, field_name: str) -> Alignment:
    try:
        return Alignment(value)
    except ValueError:
        choices = ", ".join(a.value for a in Alignment)
        raise ManifestError(field_name, f"expected one of {choices}, got {value!r}") from None


def _parse_ident(value: Any, field_name: str) -> int:
    if not isinstance(value, int) or isinstance(value, bool) or value < 0:
        raise ManifestError(field_name, f"expected a non-negative integer, got {value!r}")
    return value


def _parse_glyph(value: Any, field_name: str) -> str:
    if not isinstance(value, str):
        raise ManifestError(field_name, f"expected a string, got {value!r}")
    return value


@dataclass(frozen=True)
class CellDecl:
    """A single cell declaration; unset fields fall back to the defaults."""

    content: str = ""
    alignment: Alignment | None = None
    vertical_ident: int | None = None
    horizontal_ident: int | None = None
    glyphs: dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, d: dict[str, Any], path: str) -> CellDecl:
        unknown = set(d) - {"content", "alignment", "vertical_ident", "horizontal_ident"}
        unknown -= set(_GLYPH_KEYS)
        if unknown:
            names = ", ".join(sorted(map(str, unknown)))
            raise ManifestError(path, f"unknown keys: {names}")

        content = d.get("content", "")
        if content is None:
            content = ""
        return cls(
            content=str(content),
            alignment=(
                _parse_alignment(d["alignment"], f"{path}.alignment")
                if "alignment" in d
                else None
            ),
            vertical_ident=(
                _parse_ident(d["vertical_ident"], f"{path}.vertical_ident")
                if "vertical_ident" in d
                else None
            ),
            horizontal_ident=(
                _parse_ident(d["horizontal_ident"], f"{path}.horizontal_ident")
                if "horizontal_ident" in d
                else None
            ),
            glyphs={
                key: _parse_glyph(d[key], f"{path}.{key}") for key in _GLYPH_KEYS if key in d
            },
        )

    @classmethod
    def from_entry(cls, entry: Any, path: str) -> CellDecl:
        """Parse a cell entry, which is either plain content or a mapping."""
        if isinstance(entry, dict):
            return cls.from_dict(entry, path)
        if isinstance(entry, list):
            raise ManifestError(path, "expected a string or a mapping, got a list")
        return cls(content="" if entry is None else str(entry))


@dataclass(frozen=True)
class GridManifest:
    """Parsed manifest describing a grid and its cell defaults."""

    rows: list[list[CellDecl]]
    columns: int
    defaults: CellDecl = field(default_factory=CellDecl)
    fill: str = DEFAULT_FILL

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> GridManifest:
        raw_rows = d.get("rows")
        if not isinstance(raw_rows, list):
            raise ManifestError("rows", "'rows' is required and must be a list")

        rows: list[list[CellDecl]] = []
        for i, raw_row in enumerate(raw_rows):
            if not isinstance(raw_row, list):
                raise ManifestError(f"rows[{i}]", "expected a list of cells")
            rows.append(
                [CellDecl.from_entry(entry, f"rows[{i}][{j}]") for j, entry in enumerate(raw_row)]
            )

        widest = max((len(row) for row in rows), default=0)
        columns = d.get("columns", widest)
        if not isinstance(columns, int) or isinstance(columns, bool) or columns < widest:
            raise ManifestError(
                "columns", f"expected an integer of at least {widest}, got {columns!r}"
            )

        raw_defaults = d.get("defaults", {})
        if not isinstance(raw_defaults, dict):
            raise ManifestError("defaults", "expected a mapping")
        if "content" in raw_defaults:
            raise ManifestError("defaults", "content cannot have a default, use 'fill'")
        defaults = CellDecl.from_dict(raw_defaults, "defaults")

        fill = d.get("fill", DEFAULT_FILL)
        if not isinstance(fill, str):
            raise ManifestError("fill", f"expected a string, got {fill!r}")

        return cls(rows=rows, columns=columns, defaults=defaults, fill=fill)

    def build(self) -> Grid:
        """Create a Grid populated from this manifest."""
        grid = Grid(len(self.rows), self.columns)
        for i in range(grid.count_rows()):
            for j in range(grid.count_columns()):
                decl = self.rows[i][j] if j < len(self.rows[i]) else CellDecl()
                self._apply(grid.cell(i, j), decl)
        return grid

    def _apply(self, cell: Cell, decl: CellDecl) -> None:
        defaults = self.defaults
        glyphs = {**defaults.glyphs, **decl.glyphs}

        cell.set_content(decl.content or self.fill)
        cell.set_alignment(decl.alignment or defaults.alignment or DEFAULT_ALIGNMENT)
        cell.set_corner(glyphs.get("corner", DEFAULT_BORDER.corner))
        cell.set_top_border(glyphs.get("top", DEFAULT_BORDER.top))
        cell.set_bottom_border(glyphs.get("bottom", DEFAULT_BORDER.bottom))
        cell.set_left_border(glyphs.get("left", DEFAULT_BORDER.left))
        cell.set_right_border(glyphs.get("right", DEFAULT_BORDER.right))

        vertical = decl.vertical_ident
        if vertical is None:
            vertical = defaults.vertical_ident or 0
        horizontal = decl.horizontal_ident
        if horizontal is None:
            horizontal = defaults.horizontal_ident or 0
        cell.set_vertical_ident(vertical).set_horizontal_ident(horizontal)
