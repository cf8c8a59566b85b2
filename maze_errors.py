#!/usr/bin/env python3
# maze_errors.py - Errors raised by the maze core


class MazeError(Exception):
    """Base class for every failure of a maze operation"""


class InvalidDimension(MazeError, ValueError):
    """Requested maze size is too small to carve"""


class MazeFileNotFound(MazeError, FileNotFoundError):
    """Maze file does not exist"""


class InvalidFormat(MazeError, ValueError):
    """Maze file content is not a valid grid"""


class MazeIOError(MazeError, OSError):
    """Reading or writing a maze file failed"""


class NoPathFound(MazeError):
    """Backtracking ran out of cells before reaching the exit column"""


class NoMazeError(MazeError):
    """An operation needs a maze but none was generated or loaded"""
