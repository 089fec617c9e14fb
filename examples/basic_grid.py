#!/usr/bin/env python3
"""
Basic Grid Example

Demonstrates the core papergrid API.

Run this example:
    python examples/basic_grid.py
"""

from papergrid import Alignment, Grid, LayoutError


def main() -> None:
    """Render a small price list."""
    print("=== Price List ===\n")

    items = [("apples", "3", "1.20"), ("pears", "12", "0.45"), ("figs", "1", "12.00")]

    grid = Grid(len(items) + 1, 3)
    for j, header in enumerate(("item", "qty", "price")):
        grid.cell(0, j).set_content(header).set_horizontal_ident(1)

    for i, row in enumerate(items, start=1):
        grid.cell(i, 0).set_content(row[0]).set_alignment(Alignment.LEFT)
        for j, value in enumerate(row[1:], start=1):
            grid.cell(i, j).set_content(value).set_alignment(Alignment.RIGHT)
        for j in range(3):
            grid.cell(i, j).set_horizontal_ident(1)

    print(grid, end="")

    print("\n=== Multi-line Cells ===\n")

    notes = Grid(1, 2)
    notes.cell(0, 0).set_content("shipping\nnotes")
    notes.cell(0, 1).set_content("leave at the door").set_corner("*")
    print(notes, end="")

    print("\n=== Empty Cells ===\n")

    broken = Grid(1, 2)
    broken.cell(0, 0).set_content("only one cell has content")
    try:
        broken.render()
    except LayoutError as e:
        print(f"Render failed: {e}")


if __name__ == "__main__":
    main()
