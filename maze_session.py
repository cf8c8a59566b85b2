#!/usr/bin/env python3
# maze_session.py - Holds the current maze and its last solution

from typing import List, Optional

from maze_errors import NoMazeError
from maze_file import load_maze, save_maze
from maze_generator import generate_maze
from maze_grid import Cell, Grid
from maze_render import render_maze
from maze_solver import solve_maze


class MazeSession:
    """
    The one maze the user is working with.

    generate() and load() replace the grid only when they succeed, so a
    failed call keeps the previous maze and solution.
    """

    def __init__(self):
        self.grid: Optional[Grid] = None
        self.solution_path: List[Cell] = []

    @property
    def has_maze(self) -> bool:
        return self.grid is not None

    def _require_maze(self) -> Grid:
        if self.grid is None:
            raise NoMazeError("Generate or load a maze first")
        return self.grid

    def generate(self, dimension: int, rng=None, seed: Optional[int] = None) -> Grid:
        grid = generate_maze(dimension, rng=rng, seed=seed)
        self.grid = grid
        self.solution_path = []
        return grid

    def load(self, filename) -> Grid:
        grid = load_maze(filename)
        self.grid = grid
        self.solution_path = []
        return grid

    def save(self, filename):
        save_maze(self._require_maze(), filename)

    def solve(self) -> List[Cell]:
        """Find the escape; the path is kept for draw(show_solution=True)"""
        grid = self._require_maze()
        self.solution_path = []  # a failed solve leaves no stale path
        self.solution_path = solve_maze(grid)
        return self.solution_path

    def draw(self, show_solution: bool = False) -> str:
        grid = self._require_maze()
        return render_maze(grid, self.solution_path if show_solution else None)
