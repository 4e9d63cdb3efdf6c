"""Random maze generation with Eller's algorithm."""

from __future__ import annotations

import random
from typing import Optional

from mazeweaver.mazefile import Maze, PathLike, save_maze


class EllerGenerator:
    """Builds a maze row by row, tracking which cells share a set."""

    def __init__(self, rows: int, columns: int, rng: Optional[random.Random] = None) -> None:
        if rows < 1 or columns < 1:
            raise ValueError("a maze needs at least one row and one column")
        self.rows = rows
        self.columns = columns
        self.rng = rng if rng is not None else random.Random()
        self._reset()

    def _reset(self) -> None:
        self.sets = [[0] * self.columns for _ in range(self.rows)]
        self.right_walls = [[0] * self.columns for _ in range(self.rows)]
        self.bottom_walls = [[0] * self.columns for _ in range(self.rows)]
        self._counter = 0

    def _coin(self) -> bool:
        return self.rng.randrange(2) == 0

    def _merge(self, y: int, col: int, next_col: int) -> None:
        row = self.sets[y]
        old, new = row[next_col], row[col]
        row[:] = [new if value == old else value for value in row]

    def _number_row(self, y: int) -> None:
        row = self.sets[y]
        for j, value in enumerate(row):
            if value == 0:
                self._counter += 1
                row[j] = self._counter

    def _join_row(self, y: int) -> None:
        row = self.sets[y]
        walls = self.right_walls[y]
        for i in range(self.columns - 1):
            if row[i] == row[i + 1]:
                walls[i] = 1
            if self._coin():
                self._merge(y, i, i + 1)
            else:
                walls[i] = 1
            if i < self.columns - 2 and row[i + 1] == row[i + 2]:
                walls[i + 1] = 1

    def _carry_down(self, y: int) -> None:
        if y >= self.rows - 1:
            return
        row, below = self.sets[y], self.sets[y + 1]
        for i, value in enumerate(row):
            run = 1 + sum(1 for other in row[i + 1:] if other == value)
            if value in below:
                continue
            if run > 1:
                for _ in range(run):
                    if self._coin():
                        k = i + self.rng.randrange(run)
                        below[k] = row[k]
            else:
                below[i] = value

    def _place_walls(self, y: int) -> None:
        row = self.sets[y]
        has_below = y < self.rows - 1
        below = self.sets[y + 1] if has_below else None
        for i in range(self.columns):
            if i == self.columns - 1:
                self.right_walls[y][i] = 1
            if below is not None and below[i] == row[i] and below[i] != 0:
                self.bottom_walls[y][i] = 0
            else:
                self.bottom_walls[y][i] = 1
            if (
                below is not None
                and i < self.columns - 1
                and below[i] == below[i + 1]
                and below[i] != 0
            ):
                self.right_walls[y + 1][i] = 1

    def _close_last_row(self, y: int) -> None:
        row = self.sets[y]
        walls = self.right_walls[y]
        for i in range(self.columns - 1):
            if row[i] != row[i + 1] and walls[i] == 1:
                walls[i] = 0
            self._merge(y, i, i + 1)

    def fill_row(self, y: int) -> None:
        """Carve row ``y`` and seed the sets of the row below it."""
        if not 0 <= y < self.rows:
            raise IndexError(f"row {y} is outside the maze")
        self._number_row(y)
        self._join_row(y)
        self._carry_down(y)
        self._place_walls(y)
        if y == self.rows - 1:
            self._close_last_row(y)

    def generate(self) -> Maze:
        """Build a whole new maze."""
        self._reset()
        for y in range(self.rows):
            self.fill_row(y)
        return Maze(self.right_walls, self.bottom_walls)


def generate_maze(rows: int, columns: int, rng: Optional[random.Random] = None) -> Maze:
    """Generate a random maze of the given size."""
    return EllerGenerator(rows, columns, rng).generate()


def generate_maze_file(
    path: PathLike, rows: int, columns: int, rng: Optional[random.Random] = None
) -> Maze:
    """Generate a random maze, write it to ``path`` and return it."""
    maze = generate_maze(rows, columns, rng)
    save_maze(maze, path)
    return maze