#!/usr/bin/env python3
# maze_file.py - Save and load mazes as text grids

# File format: one line per row, cells separated by a single space,
# 'p' for a passage and 'w' for a wall, e.g.
#   w w w
#   p p p
#   w w w

from maze_config import CELL_CODES, CODE_FOR
from maze_errors import InvalidFormat, MazeFileNotFound, MazeIOError
from maze_grid import Grid


def maze_to_text(grid: Grid) -> str:
    """Encode a grid, every row terminated by a newline"""
    return ''.join(' '.join(CODE_FOR[cell] for cell in row) + '\n' for row in grid.rows())


def maze_from_text(text: str) -> Grid:
    """Decode a grid; the first character of each token is its cell code"""
    lines = text.rstrip().splitlines()
    if not lines:
        raise InvalidFormat("The maze file is empty")

    rows = []
    for line_no, line in enumerate(lines, start=1):
        row = []
        for token in line.rstrip().split(' '):
            if not token:
                raise InvalidFormat(f"Line {line_no}: cells must be separated by a single space")
            code = token[0]
            if code not in CELL_CODES:
                raise InvalidFormat(f"Line {line_no}: unknown cell code {code!r}")
            row.append(CELL_CODES[code])
        rows.append(row)

    width = len(rows[0])
    for line_no, row in enumerate(rows, start=1):
        if len(row) != width:
            raise InvalidFormat(f"Line {line_no}: expected {width} cells, found {len(row)}")

    return Grid.from_rows(rows)


def save_maze(grid: Grid, filename):
    """Save a maze to a text file"""
    try:
        with open(filename, 'w', encoding='utf-8') as f:
            f.write(maze_to_text(grid))
    except OSError as e:
        raise MazeIOError(f"Cannot save the maze to {filename}: {e}") from e
    print(f"Maze saved to {filename}")


def load_maze(filename) -> Grid:
    """Load a maze from a text file; connectivity is not checked"""
    try:
        with open(filename, 'r', encoding='utf-8') as f:
            text = f.read()
    except FileNotFoundError as e:
        raise MazeFileNotFound(f"The file {filename} does not exist") from e
    except UnicodeDecodeError as e:
        raise InvalidFormat("Cannot load the maze. It has an invalid format") from e
    except OSError as e:
        raise MazeIOError(f"Cannot read the maze from {filename}: {e}") from e

    try:
        return maze_from_text(text)
    except InvalidFormat as e:
        raise InvalidFormat(f"Cannot load the maze. It has an invalid format ({e})") from e
