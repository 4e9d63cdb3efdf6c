import random

import pytest

from mazeweaver.generator import EllerGenerator
from mazeweaver.mazefile import Maze
from mazeweaver.solver import Point, can_move, find_path, solve_maze

RIGHT = [[0, 0, 0, 1], [0, 1, 1, 1], [1, 1, 0, 1], [0, 0, 0, 1]]
BOTTOM = [[1, 1, 0, 0], [1, 0, 0, 0], [0, 0, 1, 0], [1, 1, 1, 1]]
EXPECTED = [(3, 3), (3, 2), (3, 1), (3, 0), (2, 0), (1, 0), (0, 0)]


def test_wave_path_from_source_case():
    path = solve_maze(Maze(RIGHT, BOTTOM), Point(0, 0), Point(3, 3))
    assert path == EXPECTED
    assert len(path) == 7


def test_find_path_on_raw_walls():
    assert find_path(RIGHT, BOTTOM, Point(0, 0), Point(3, 3)) == EXPECTED


def test_path_to_itself():
    assert find_path(RIGHT, BOTTOM, Point(2, 2), Point(2, 2)) == [Point(2, 2)]


def test_unreachable_cell():
    maze = Maze([[1, 1]], [[1, 1]])
    assert solve_maze(maze, Point(0, 0), Point(1, 0)) is None


def test_reverse_path_mirrors_forward_path():
    maze = Maze(RIGHT, BOTTOM)
    forward = solve_maze(maze, Point(0, 0), Point(3, 3))
    backward = solve_maze(maze, Point(3, 3), Point(0, 0))
    assert len(backward) == len(forward)
    assert backward[0] == Point(0, 0)
    assert backward[-1] == Point(3, 3)


@pytest.mark.parametrize("start, finish", [((4, 0), (0, 0)), ((0, 0), (0, 4)), ((-1, 0), (0, 0))])
def test_points_outside_maze(start, finish):
    with pytest.raises(ValueError):
        solve_maze(Maze(RIGHT, BOTTOM), Point(*start), Point(*finish))


@pytest.mark.parametrize(
    "current, dx, dy, allowed",
    [
        (Point(0, 0), 1, 0, True),
        (Point(0, 0), 0, 1, False),
        (Point(0, 0), -1, 0, False),
        (Point(0, 0), 0, -1, False),
        (Point(3, 0), 1, 0, False),
        (Point(2, 1), 1, 0, False),
        (Point(3, 1), -1, 0, False),
        (Point(2, 1), 0, 1, True),
        (Point(2, 3), 0, -1, False),
        (Point(3, 1), 0, -1, True),
    ],
)
def test_can_move(current, dx, dy, allowed):
    assert can_move(current, dx, dy, RIGHT, BOTTOM, set()) is allowed


def test_can_move_refuses_visited_cells():
    assert can_move(Point(0, 0), 1, 0, RIGHT, BOTTOM, {Point(1, 0)}) is False


@pytest.mark.parametrize("seed", [0, 1, 2, 3])
def test_paths_in_generated_mazes_are_steps_through_open_walls(seed):
    maze = EllerGenerator(8, 8, random.Random(seed)).generate()
    path = solve_maze(maze, Point(0, 7), Point(7, 7))
    assert path is not None
    assert path[0] == Point(7, 7)
    assert path[-1] == Point(0, 7)
    for here, there in zip(path[1:], path):
        dx, dy = there.x - here.x, there.y - here.y
        assert abs(dx) + abs(dy) == 1
        assert can_move(here, dx, dy, maze.right_walls, maze.bottom_walls, set())