#!/usr/bin/env python3
# maze_generator.py - Randomized frontier growth (Prim-style) maze generation

import random
from typing import List, Optional, Set, Tuple

from maze_config import MIN_DIMENSION
from maze_errors import InvalidDimension
from maze_grid import Cell, Grid


class MazeGenerator:
    """
    Carves a perfect maze into an all-wall square grid.

    Carving works on a 2-cell stride from a random seed cell, so corridors
    stay one cell wide with one-cell walls between them. The border is left
    solid except for one entrance on the left edge and one exit on the right.

    rng: any object with randint(a, b) and choice(seq); random.Random() by
    default.
    """

    def __init__(self, rng=None):
        self.rng = rng if rng is not None else random.Random()
        self.grid = None
        self.seed_cell = None
        self.entrance = None
        self.exit = None
        # (frontier cell, passage it was joined to) for every interior carve
        self.carved_edges: List[Tuple[Cell, Cell]] = []

    def generate(self, dimension: int) -> Grid:
        """Generate a new dimension x dimension maze"""
        if isinstance(dimension, bool) or not isinstance(dimension, int):
            raise InvalidDimension(f"Maze size must be an integer, got {dimension!r}")
        if dimension < MIN_DIMENSION:
            raise InvalidDimension(f"Maze size must be at least {MIN_DIMENSION}, got {dimension}")

        self.grid = Grid(dimension, dimension)
        self.carved_edges = []
        self._carve()
        self._open_entrance()
        self._open_exit()
        return self.grid

    def _carve(self):
        grid = self.grid
        frontier: Set[Cell] = set()
        processed: Set[Cell] = set()

        self.seed_cell = Cell(self.rng.randint(1, grid.width - 2),
                              self.rng.randint(1, grid.height - 2))
        grid.set_passage(self.seed_cell)
        frontier.update(grid.neighbors_at_distance(self.seed_cell, 2, want_passage=False))

        while frontier:
            cell = self.rng.choice(sorted(frontier))
            frontier.remove(cell)

            candidates = grid.neighbors_at_distance(cell, 2, want_passage=True)
            if candidates:
                self.connect(cell, self.rng.choice(candidates))

            # a cell with at most one passage neighbor only gets one chance
            if len(candidates) < 2:
                if cell in processed:
                    continue
                processed.add(cell)

            frontier.update(grid.neighbors_at_distance(cell, 2, want_passage=False))

    def connect(self, cell: Cell, passage: Cell):
        """Open the wall between cell and passage, and cell itself unless it is on the border"""
        self.grid.set_passage(cell.midpoint(passage))
        if not self.grid.is_border(cell):
            self.grid.set_passage(cell)
            self.carved_edges.append((cell, passage))

    def _open_entrance(self):
        # first row (top-down) with a passage next to the left border
        row = self.grid.first_row_with_passage(1)
        self.entrance = Cell(0, row)
        self.grid.set_passage(self.entrance)

    def _open_exit(self):
        last = self.grid.width - 1
        row = self.rng.choice(self.grid.rows_with_passage(last - 1))
        self.exit = Cell(last, row)
        self.grid.set_passage(self.exit)


def generate_maze(dimension: int, rng=None, seed: Optional[int] = None) -> Grid:
    """
    Generate a perfect dimension x dimension maze.

    Pass rng to control every random choice, or seed for a reproducible
    random.Random source.
    """
    if rng is None and seed is not None:
        rng = random.Random(seed)
    return MazeGenerator(rng).generate(dimension)
