#!/usr/bin/env python3
# maze_grid.py - Rectangular wall/passage grid and cell coordinates

from dataclasses import dataclass
from typing import List, Optional

import numpy as np

from maze_config import DIRECTIONS, PASSAGE, WALL


@dataclass(frozen=True, order=True, slots=True)
class Cell:
    """A grid coordinate; ordered by x, then y"""
    x: int
    y: int

    def offset(self, dx: int, dy: int) -> 'Cell':
        return Cell(self.x + dx, self.y + dy)

    def midpoint(self, other: 'Cell') -> 'Cell':
        """Cell halfway between two cells two steps apart"""
        return Cell((self.x + other.x) // 2, (self.y + other.y) // 2)


class Grid:
    """
    Maze cells stored as an occupancy grid (1=wall, 0=passage).

    The array is indexed [y, x]; width and height never change once the
    grid exists.
    """

    def __init__(self, width: int, height: int):
        if width <= 0 or height <= 0:
            raise ValueError(f"Grid must be non-empty, got {width}x{height}")
        self.cells = np.full((height, width), WALL, dtype=np.int8)

    @classmethod
    def from_rows(cls, rows: List[List[int]]) -> 'Grid':
        """Build a grid from equally long rows of PASSAGE/WALL values"""
        if not rows or not rows[0]:
            raise ValueError("Grid must be non-empty")
        width = len(rows[0])
        if any(len(row) != width for row in rows):
            raise ValueError("All rows must have the same length")
        grid = cls(width, len(rows))
        grid.cells[:, :] = np.array(rows, dtype=np.int8)
        return grid

    @property
    def width(self) -> int:
        return self.cells.shape[1]

    @property
    def height(self) -> int:
        return self.cells.shape[0]

    def is_valid(self, cell: Cell) -> bool:
        """Check that a cell lies inside the grid"""
        return 0 <= cell.x < self.width and 0 <= cell.y < self.height

    def is_border(self, cell: Cell) -> bool:
        return (cell.x in (0, self.width - 1)) or (cell.y in (0, self.height - 1))

    def is_passage(self, cell: Cell) -> bool:
        return bool(self.cells[cell.y, cell.x] == PASSAGE)

    def set_passage(self, cell: Cell):
        self.cells[cell.y, cell.x] = PASSAGE

    def set_wall(self, cell: Cell):
        self.cells[cell.y, cell.x] = WALL

    def neighbors_at_distance(self, cell: Cell, distance: int, want_passage: bool) -> List[Cell]:
        """
        Axis-aligned cells `distance` steps away that are inside the grid and
        are passages (want_passage=True) or walls (want_passage=False).
        Results follow the DIRECTIONS order.
        """
        neighbors = []
        for dx, dy in DIRECTIONS:
            n = cell.offset(dx * distance, dy * distance)
            if self.is_valid(n) and self.is_passage(n) == want_passage:
                neighbors.append(n)
        return neighbors

    def rows_with_passage(self, x: int) -> List[int]:
        """Row indices, top to bottom, whose cell in column x is a passage"""
        return [int(y) for y in np.flatnonzero(self.cells[:, x] == PASSAGE)]

    def first_row_with_passage(self, x: int) -> Optional[int]:
        rows = self.rows_with_passage(x)
        return rows[0] if rows else None

    def passages(self) -> List[Cell]:
        ys, xs = np.nonzero(self.cells == PASSAGE)
        return [Cell(int(x), int(y)) for y, x in zip(ys, xs)]

    def rows(self) -> List[List[int]]:
        return self.cells.tolist()

    def copy(self) -> 'Grid':
        return Grid.from_rows(self.rows())

    def __eq__(self, other):
        if not isinstance(other, Grid):
            return NotImplemented
        return self.cells.shape == other.cells.shape and bool(np.array_equal(self.cells, other.cells))

    def __repr__(self):
        return f"Grid({self.width}x{self.height})"
