#!/usr/bin/env python3
# maze_render.py - Draw a maze as block characters

from typing import Iterable, Optional

from maze_config import PASSAGE, PASSAGE_GLYPH, PATH_GLYPH, WALL_GLYPH
from maze_grid import Cell, Grid


def render_maze(grid: Grid, path: Optional[Iterable[Cell]] = None) -> str:
    """Two characters per cell, one line per row; cells on path are drawn as '//'"""
    on_path = set(path) if path else set()
    lines = []
    for y, row in enumerate(grid.rows()):
        line = ''
        for x, cell in enumerate(row):
            if Cell(x, y) in on_path:
                line += PATH_GLYPH
            elif cell == PASSAGE:
                line += PASSAGE_GLYPH
            else:
                line += WALL_GLYPH
        lines.append(line)
    return '\n'.join(lines)


def print_maze(grid: Grid, path: Optional[Iterable[Cell]] = None):
    print(render_maze(grid, path))
