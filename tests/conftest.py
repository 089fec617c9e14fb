"""Pytest fixtures for papergrid tests."""

import pytest

from papergrid import Grid


@pytest.fixture
def quadratic_grid() -> Grid:
    """A 2x2 grid whose cells name their own position."""
    grid = Grid(2, 2)
    grid.cell(0, 0).set_content("0-0")
    grid.cell(0, 1).set_content("0-1")
    grid.cell(1, 0).set_content("1-0")
    grid.cell(1, 1).set_content("1-1")
    return grid


@pytest.fixture
def multiline_grid() -> Grid:
    """A 2x2 grid mixing single- and multi-line cells."""
    grid = Grid(2, 2)
    grid.cell(0, 0).set_content("left\ncell")
    grid.cell(0, 1).set_content("right one")
    grid.cell(1, 0).set_content("the second column got the beginning here")
    grid.cell(1, 1).set_content("and here\nwe\nsee\na\nlong\nstring")
    return grid
