"""Maze wall matrices and the plain-text maze file format."""

from __future__ import annotations

import os
import re
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Union

MAX_SIZE = 50

Grid = tuple[tuple[int, ...], ...]
PathLike = Union[str, "os.PathLike[str]"]

_HEADER = re.compile(r"\s*([+-]?\d+)(?!\d)\s*([+-]?\d+)")
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class MazeFormatError(ValueError):
    """Raised when maze text does not follow the maze file format."""


@dataclass(frozen=True)
class Maze:
    """A rectangular maze described by its right-hand and bottom walls.

    ``right_walls[r][c]`` is 1 when cell (r, c) has a wall on its right,
    ``bottom_walls[r][c]`` is 1 when it has a wall below it.
    """

    right_walls: Grid
    bottom_walls: Grid

    def __post_init__(self) -> None:
        right = tuple(tuple(int(v) for v in row) for row in self.right_walls)
        bottom = tuple(tuple(int(v) for v in row) for row in self.bottom_walls)
        if not right or not right[0]:
            raise ValueError("a maze needs at least one cell")
        width = len(right[0])
        if (
            len(bottom) != len(right)
            or any(len(row) != width for row in right)
            or any(len(row) != width for row in bottom)
        ):
            raise ValueError("wall matrices must be rectangular and of equal shape")
        object.__setattr__(self, "right_walls", right)
        object.__setattr__(self, "bottom_walls", bottom)

    @property
    def rows(self) -> int:
        return len(self.right_walls)

    @property
    def columns(self) -> int:
        return len(self.right_walls[0])


def _atoi(token: str) -> int:
    match = _LEADING_INT.match(token)
    return int(match.group(1)) if match else 0


def _read_matrix(lines: Iterator[str], rows: int, columns: int, name: str) -> Grid:
    matrix = []
    for row_index in range(rows):
        line = next(lines, None)
        if line is None:
            raise MazeFormatError(f"{name} matrix has only {row_index} of {rows} rows")
        tokens = [token for token in line.split(" ") if token]
        if len(tokens) < columns:
            raise MazeFormatError(f"{name} matrix row {row_index} is too short")
        values = tuple(_atoi(token) for token in tokens[:columns])
        if any(value not in (0, 1) for value in values):
            raise MazeFormatError(f"{name} matrix row {row_index} holds a value other than 0 or 1")
        matrix.append(values)
    return tuple(matrix)


def parse_maze(text: str) -> Maze:
    """Parse maze text: a "rows columns" line, the right-wall matrix,
    one separating line and the bottom-wall matrix."""
    lines = iter(text.splitlines())
    header = next(lines, None)
    if header is None:
        raise MazeFormatError("missing header line")
    match = _HEADER.match(header)
    if match is None:
        raise MazeFormatError("header line must hold the number of rows and columns")
    rows, columns = int(match.group(1)), int(match.group(2))
    if not (0 < rows <= MAX_SIZE and 0 < columns <= MAX_SIZE):
        raise MazeFormatError(f"rows and columns must be between 1 and {MAX_SIZE}")
    right = _read_matrix(lines, rows, columns, "right wall")
    if next(lines, None) is None:
        raise MazeFormatError("missing line between the wall matrices")
    bottom = _read_matrix(lines, rows, columns, "bottom wall")
    return Maze(right, bottom)


def load_maze(path: PathLike) -> Maze:
    """Read and parse a maze file."""
    with open(path, encoding="utf-8") as handle:
        return parse_maze(handle.read())


def format_maze(maze: Maze) -> str:
    """Render a maze in the maze file format."""
    lines = [f"{maze.rows} {maze.columns}"]
    lines.extend("".join(f"{value} " for value in row) for row in maze.right_walls)
    lines.append("")
    lines.extend("".join(f"{value} " for value in row) for row in maze.bottom_walls)
    return "\n".join(lines) + "\n"


def save_maze(maze: Maze, path: PathLike) -> None:
    """Write a maze to a file in the maze file format."""
    with open(path, "w", encoding="utf-8") as handle:
        handle.write(format_maze(maze))