import pytest

from mazeweaver.mazefile import (
    MAX_SIZE,
    Maze,
    MazeFormatError,
    format_maze,
    load_maze,
    parse_maze,
    save_maze,
)

RIGHT = ((0, 0, 0, 1), (0, 1, 1, 1), (1, 1, 0, 1), (0, 0, 0, 1))
BOTTOM = ((1, 1, 0, 0), (1, 0, 0, 0), (0, 0, 1, 0), (1, 1, 1, 1))
SAMPLE = (
    "4 4\n"
    "0 0 0 1 \n0 1 1 1 \n1 1 0 1 \n0 0 0 1 \n"
    "\n"
    "1 1 0 0 \n1 0 0 0 \n0 0 1 0 \n1 1 1 1 \n"
)


def test_parse_sample():
    maze = parse_maze(SAMPLE)
    assert maze.rows == 4
    assert maze.columns == 4
    assert maze.right_walls == RIGHT
    assert maze.bottom_walls == BOTTOM


def test_format_matches_file_layout():
    assert format_maze(Maze(RIGHT, BOTTOM)) == SAMPLE


def test_format_parse_round_trip():
    maze = Maze([[1, 0, 1]], [[1, 1, 1]])
    assert parse_maze(format_maze(maze)) == maze


def test_save_and_load_round_trip(tmp_path):
    path = tmp_path / "maze.txt"
    maze = Maze(RIGHT, BOTTOM)
    save_maze(maze, path)
    assert load_maze(path) == maze
    assert path.read_text(encoding="utf-8") == SAMPLE


def test_load_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_maze(tmp_path / "absent.txt")


def test_extra_tokens_are_ignored():
    maze = parse_maze("1 1\n0 1\n\n1\n")
    assert maze.right_walls == ((0,),)
    assert maze.bottom_walls == ((1,),)


def test_maximum_size_is_accepted():
    maze = Maze([[0]] * MAX_SIZE, [[1]] * MAX_SIZE)
    assert parse_maze(format_maze(maze)).rows == MAX_SIZE


@pytest.mark.parametrize(
    "text",
    [
        "",
        "abc\n",
        "4\n",
        "0 4\n",
        "4 0\n",
        "-1 2\n",
        f"{MAX_SIZE + 1} 1\n",
        f"1 {MAX_SIZE + 1}\n",
        "1 2\n0 2\n\n1 1\n",
        "1 2\n0\n\n1 1\n",
        "2 1\n0\n",
        "1 1\n0\n",
        "1 1\n0\n\n",
        "2 1\n0\n1\n\n1\n",
    ],
)
def test_invalid_text_raises(text):
    with pytest.raises(MazeFormatError):
        parse_maze(text)


def test_format_error_is_value_error():
    with pytest.raises(ValueError):
        parse_maze("x y\n")


@pytest.mark.parametrize(
    "right, bottom",
    [
        ([], []),
        ([[]], [[]]),
        ([[0, 1], [0]], [[0, 1], [0, 1]]),
        ([[0, 1]], [[0, 1], [0, 1]]),
        ([[0, 1]], [[0]]),
    ],
)
def test_maze_shape_is_checked(right, bottom):
    with pytest.raises(ValueError):
        Maze(right, bottom)