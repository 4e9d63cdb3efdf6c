"""Drawing mazes as grids of box-drawing characters, scaling them and
marking a solution path on them."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Optional

from mazeweaver.mazefile import Maze
from mazeweaver.solver import Point

CharGrid = list[list[str]]

HORIZONTAL = "─"
VERTICAL = "|"
BORDER = "│"
DOT = "."
PATH_VERTICAL = "▮"
PATH_HORIZONTAL = "▬"

# Each junction is keyed by the walls around it:
# left = 1, up = 10, right = 100, down = 1000.
_JUNCTIONS = {
    1: "╴",
    10: "╵",
    11: "┘",
    100: "╶",
    101: "─",
    110: "└",
    111: "┴",
    1000: "╷",
    1001: "┐",
    1010: "|",
    1011: "┤",
    1100: "┌",
    1101: "┬",
    1110: "├",
    1111: "┼",
}


def empty_grid(rows: int, columns: int) -> CharGrid:
    """Draw the outer box of a maze with dots at every inner wall crossing."""
    if rows < 1 or columns < 1:
        raise ValueError("a maze needs at least one row and one column")
    width = 2 * columns + 1
    height = 2 * rows + 1
    top = ["┌"] + [HORIZONTAL] * (width - 2) + ["┐"]
    bottom = ["└"] + [HORIZONTAL] * (width - 2) + ["┘"]
    cell_row = [BORDER] + [" "] * (width - 2) + [BORDER]
    wall_row = [VERTICAL] + [" " if j % 2 else DOT for j in range(1, width - 1)] + [VERTICAL]
    middle = [list(cell_row if r % 2 else wall_row) for r in range(1, height - 1)]
    return [top, *middle, bottom]


def draw_walls(grid: CharGrid, maze: Maze) -> None:
    """Put the maze's right and bottom walls into ``grid`` in place."""
    for r, (right_row, bottom_row) in enumerate(zip(maze.right_walls, maze.bottom_walls)):
        for c, (right, below) in enumerate(zip(right_row, bottom_row)):
            if right == 1:
                grid[2 * r + 1][2 * c + 2] = VERTICAL
            if below == 1:
                grid[2 * r + 2][2 * c + 1] = HORIZONTAL


def improve_walls(grid: CharGrid, rows: int, columns: int) -> None:
    """Replace inner wall crossings by the matching box-drawing junctions,
    then fix up the perimeter."""
    for i in range(2, 2 * rows - 1, 2):
        for j in range(2, 2 * columns - 1, 2):
            key = 0
            if grid[i][j - 1] == HORIZONTAL:
                key += 1
            if grid[i][j + 1] == HORIZONTAL:
                key += 100
            if grid[i - 1][j] == VERTICAL:
                key += 10
            if grid[i + 1][j] == VERTICAL:
                key += 1000
            junction = _JUNCTIONS.get(key)
            if junction is not None:
                grid[i][j] = junction
    improve_perimeter(grid, rows, columns)


def improve_perimeter(grid: CharGrid, rows: int, columns: int) -> None:
    """Join inner walls to the outer border with T-junctions."""
    last_row = 2 * rows
    last_col = 2 * columns
    for i in range(2, last_col + 1, 2):
        if grid[1][i] == VERTICAL:
            grid[0][i] = "┬"
        if grid[last_row - 1][i] == VERTICAL:
            grid[last_row][i] = "┴"
    for i in range(2, last_row + 1, 2):
        if grid[i][1] == HORIZONTAL:
            grid[i][0] = "├"
        if grid[i][last_col - 1] == HORIZONTAL:
            grid[i][last_col] = "┤"


def scale_grid(
    grid: CharGrid, rows: int, columns: int, row_scale: int, column_scale: int
) -> CharGrid:
    """Return a copy of ``grid`` with every cell row repeated ``row_scale``
    times and every cell column ``column_scale`` times; wall lines are kept single."""
    if row_scale < 1 or column_scale < 1:
        raise ValueError("scales must be at least 1")
    column_repeats = [1 if j % 2 == 0 else column_scale for j in range(2 * columns + 1)]
    scaled: CharGrid = []
    for i, line in enumerate(grid[: 2 * rows + 1]):
        wide = [ch for ch, times in zip(line, column_repeats) for _ in range(times)]
        scaled.extend(list(wide) for _ in range(1 if i % 2 == 0 else row_scale))
    return scaled


def calculate_scale(
    rows: int, columns: int, width: int, height: int, move_rows: int, move_columns: int
) -> tuple[int, int]:
    """Find the largest (row_scale, column_scale) that lets the maze fill
    the space left of ``width`` x ``height`` after the given offsets."""
    if rows < 1 or columns < 1:
        raise ValueError("a maze needs at least one row and one column")
    height_avail = height - move_rows - (2 * rows + 1)
    width_avail = width - move_columns - (2 * columns + 1)
    scale_rows = 1 if height_avail else 0
    scale_columns = 1 if width_avail else 0
    while height_avail > 0 or width_avail > 0:
        height_avail -= rows
        if height_avail > 0:
            scale_rows += 1
        width_avail -= columns
        if width_avail > 0:
            scale_columns += 1
    if scale_rows < 1 or scale_columns < 1:
        raise ValueError("the maze does not fit into the available space")
    return scale_rows, scale_columns


def draw_solution(
    scaled: CharGrid,
    path: Optional[Sequence[Point]],
    row_scale: int,
    column_scale: int,
) -> CharGrid:
    """Return a copy of the scaled grid with ``path`` drawn on it.

    ``path`` runs from the finish back to the start, as the solver returns it.
    """
    solved = [list(line) for line in scaled]
    if not path:
        return solved
    points = [Point(*p) for p in reversed(path)]
    start = points[0]
    row = row_scale // 2 + 1 + start.y * (row_scale + 1)
    col = column_scale // 2 + 1 + start.x * (column_scale + 1)
    for here, there in zip(points, points[1:]):
        dx, dy = there.x - here.x, there.y - here.y
        if dx == 0:
            for _ in range(row_scale + 1):
                solved[row][col] = PATH_VERTICAL
                row += dy
        else:
            for _ in range(column_scale + 1):
                solved[row][col] = PATH_HORIZONTAL
                col += dx
    return solved


@dataclass
class Labyrinth:
    """A maze together with its drawing at scale 1 and at the current scale."""

    maze: Maze
    row_scale: int = 1
    column_scale: int = 1
    grid: CharGrid = field(init=False, repr=False)
    scaled: CharGrid = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.grid = empty_grid(self.maze.rows, self.maze.columns)
        draw_walls(self.grid, self.maze)
        improve_walls(self.grid, self.maze.rows, self.maze.columns)
        self.rescale(self.row_scale, self.column_scale)

    @property
    def rows(self) -> int:
        return self.maze.rows

    @property
    def columns(self) -> int:
        return self.maze.columns

    @property
    def current_rows(self) -> int:
        return len(self.scaled)

    @property
    def current_columns(self) -> int:
        return len(self.scaled[0])

    def rescale(self, row_scale: int, column_scale: int) -> None:
        """Redraw the scaled grid at new scales."""
        self.scaled = scale_grid(self.grid, self.rows, self.columns, row_scale, column_scale)
        self.row_scale = row_scale
        self.column_scale = column_scale

    def solved(self, path: Optional[Sequence[Point]]) -> CharGrid:
        """The scaled grid with ``path`` drawn on it."""
        return draw_solution(self.scaled, path, self.row_scale, self.column_scale)


def render_maze(maze: Maze, row_scale: int = 1, column_scale: int = 1) -> Labyrinth:
    """Draw ``maze`` at the given scales."""
    return Labyrinth(maze, row_scale, column_scale)