#!/usr/bin/env python3
# maze_config.py - Maze cell codes, glyphs and grid constants

# Cell values stored in the grid (occupancy convention: 1=wall, 0=free)
PASSAGE = 0
WALL    = 1

# Single-character codes used in maze files
PASSAGE_CODE = 'p'
WALL_CODE    = 'w'
CELL_CODES   = {PASSAGE_CODE: PASSAGE, WALL_CODE: WALL}
CODE_FOR     = {PASSAGE: PASSAGE_CODE, WALL: WALL_CODE}

# Two characters per cell when drawing
WALL_GLYPH    = '██'
PASSAGE_GLYPH = '  '
PATH_GLYPH    = '//'

# Direction vectors in screen coordinates (y grows downwards)
# East(0), South(1), West(2), North(3) - also the neighbor search order
DIRECTIONS = [(1, 0), (0, 1), (-1, 0), (0, -1)]

MIN_DIMENSION     = 3    # smallest size with an interior cell to seed from
DEFAULT_DIMENSION = 15
