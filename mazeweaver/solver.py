"""Shortest paths through a maze by breadth-first (wave) search."""

from __future__ import annotations

from collections import deque
from collections.abc import Container, Sequence
from typing import NamedTuple, Optional

from mazeweaver.mazefile import Maze

Walls = Sequence[Sequence[int]]

_STEPS = ((1, 0), (-1, 0), (0, 1), (0, -1))


class Point(NamedTuple):
    """A cell position: ``x`` is the column, ``y`` the row."""

    x: int
    y: int


def can_move(
    current: Point,
    dx: int,
    dy: int,
    right_walls: Walls,
    bottom_walls: Walls,
    visited: Container[Point],
) -> bool:
    """Tell whether the step (dx, dy) from ``current`` reaches a new, open cell."""
    rows, columns = len(right_walls), len(right_walls[0])
    target = Point(current.x + dx, current.y + dy)
    if not (0 <= target.x < columns and 0 <= target.y < rows) or target in visited:
        return False
    x, y = current
    if dx == 1 and right_walls[y][x] == 1:
        return False
    if dx == -1 and x > 0 and right_walls[y][x - 1] == 1:
        return False
    if dy == 1 and bottom_walls[y][x] == 1:
        return False
    if dy == -1 and y > 0 and bottom_walls[y - 1][x] == 1:
        return False
    return True


def find_path(
    right_walls: Walls, bottom_walls: Walls, start: Point, finish: Point
) -> Optional[list[Point]]:
    """Return the shortest path from ``finish`` back to ``start``, both included,
    or None when ``finish`` cannot be reached."""
    start, finish = Point(*start), Point(*finish)
    parents: dict[Point, Optional[Point]] = {start: None}
    queue = deque([start])
    while queue:
        current = queue.popleft()
        if current == finish:
            path = []
            node: Optional[Point] = finish
            while node is not None:
                path.append(node)
                node = parents[node]
            return path
        for dx, dy in _STEPS:
            if can_move(current, dx, dy, right_walls, bottom_walls, parents):
                step = Point(current.x + dx, current.y + dy)
                parents[step] = current
                queue.append(step)
    return None


def solve_maze(maze: Maze, start: Point, finish: Point) -> Optional[list[Point]]:
    """Find the shortest path through ``maze``, listed from finish to start."""
    for point in (Point(*start), Point(*finish)):
        if not (0 <= point.x < maze.columns and 0 <= point.y < maze.rows):
            raise ValueError(f"{point} lies outside the maze")
    return find_path(maze.right_walls, maze.bottom_walls, start, finish)