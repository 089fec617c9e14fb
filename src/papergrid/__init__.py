"""
papergrid: Bordered text grids for monospaced output.

This library lays out a fixed-shape grid of text cells and renders it as a
single block of text with borders:
- Per-cell content, alignment, border glyphs and padding
- Row heights and column widths reconciled across the grid
- Shared borders between neighbouring cells
- Declarative grids from YAML manifests

Example:
    from papergrid import Alignment, Grid

    grid = Grid(1, 2)
    grid.cell(0, 0).set_content("hello")
    grid.cell(0, 1).set_content("world").set_alignment(Alignment.RIGHT)
    print(grid, end="")

    +-----+-----+
    |hello|world|
    +-----+-----+
"""

from importlib.metadata import PackageNotFoundError, version

from .cell import Cell
from .exceptions import (
    AxisIndexError,
    CellIndexError,
    LayoutError,
    LineCountMismatchError,
    ManifestError,
    PapergridError,
)
from .formatter import CellFormatter
from .grid import Grid
from .manifest import GridManifest
from .models import Alignment, Border, Ident, RenderPlan

try:
    __version__ = version("papergrid")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"

__all__ = [
    # Version
    "__version__",
    # Main classes
    "Grid",
    "Cell",
    "CellFormatter",
    "GridManifest",
    # Models
    "Alignment",
    "Border",
    "Ident",
    "RenderPlan",
    # Exceptions
    "PapergridError",
    "LayoutError",
    "CellIndexError",
    "AxisIndexError",
    "LineCountMismatchError",
    "ManifestError",
]
