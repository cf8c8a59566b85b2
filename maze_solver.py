#!/usr/bin/env python3
# maze_solver.py - Backtracking path search from the entrance to the exit column

from typing import List

from maze_errors import NoPathFound
from maze_grid import Cell, Grid


class MazeSolver:
    def __init__(self, grid: Grid):
        self.grid = grid
        self.path: List[Cell] = []  # current trail from the entrance
        self.visited_cells = set()

    def find_entrance(self) -> Cell:
        """Entrance is the topmost passage on the left border"""
        row = self.grid.first_row_with_passage(0)
        if row is None:
            raise NoPathFound("The maze has no entrance on its left border")
        return Cell(0, row)

    def solve(self) -> List[Cell]:
        """
        Depth-first search that keeps the trail it is walking as the path.

        The last cell on the path is extended with its first unvisited
        passage neighbor; a dead end is popped off (backtrack). Reaching the
        right border column finishes the search.
        """
        self.visited_cells = set()
        self.path = [self.find_entrance()]
        exit_x = self.grid.width - 1

        while self.path:
            node = self.path[-1]
            self.visited_cells.add(node)
            if node.x == exit_x:
                return list(self.path)

            for n in self.grid.neighbors_at_distance(node, 1, want_passage=True):
                if n not in self.visited_cells:
                    self.path.append(n)
                    break
            else:
                self.path.pop()  # dead end

        raise NoPathFound("There is no path from the entrance to the exit")


def solve_maze(grid: Grid) -> List[Cell]:
    """Find a path through the maze, entrance first and exit last"""
    return MazeSolver(grid).solve()
