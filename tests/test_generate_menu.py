import random
from collections import deque

import pytest

from mazeweaver.generate_menu import (
    DEFAULT_FILENAME,
    ERROR_LINES,
    generate_labyrinth_file,
    generate_menu,
)
from mazeweaver.load_menu import LoadError
from mazeweaver.mazefile import load_maze
from mazeweaver.screen import KEY_DOWN, KEY_ENTER, KEY_ESCAPE, Screen


class FakeWindow:
    def __init__(self, height, width, keys=()):
        self.height = height
        self.width = width
        self.keys = deque(keys)
        self.writes = []

    def getmaxyx(self):
        return self.height, self.width

    def addstr(self, row, col, text):
        self.writes.append((row, col, text))

    def getch(self):
        if not self.keys:
            raise RuntimeError("no more keys")
        return self.keys.popleft()

    def refresh(self):
        pass

    def erase(self):
        pass


def typed(text):
    return [ord(ch) for ch in text]


def test_generate_file_round_trip(tmp_path):
    path = tmp_path / "gen.txt"
    labyrinth = generate_labyrinth_file(path, 5, 5, 200, 60, random.Random(1))
    assert load_maze(path) == labyrinth.maze
    assert (labyrinth.rows, labyrinth.columns) == (5, 5)


def test_generate_file_is_deterministic_for_seed(tmp_path):
    first = generate_labyrinth_file(tmp_path / "a.txt", 7, 4, 200, 60, random.Random(9))
    second = generate_labyrinth_file(tmp_path / "b.txt", 7, 4, 200, 60, random.Random(9))
    assert first.maze == second.maze


def test_generate_file_zero_rows(tmp_path):
    with pytest.raises(LoadError):
        generate_labyrinth_file(tmp_path / "z.txt", 0, 5, 200, 60, random.Random(1))


def test_generate_file_too_many_rows(tmp_path):
    with pytest.raises(LoadError):
        generate_labyrinth_file(tmp_path / "big.txt", 60, 5, 500, 500, random.Random(1))


def test_generate_file_terminal_too_small(tmp_path):
    with pytest.raises(LoadError):
        generate_labyrinth_file(tmp_path / "s.txt", 10, 10, 40, 10, random.Random(1))


def test_generate_menu_builds_maze(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    keys = [
        KEY_ENTER, *typed("4"), KEY_ENTER,
        KEY_DOWN, KEY_ENTER, *typed("6"), KEY_ENTER,
        KEY_DOWN, KEY_ENTER,
        KEY_ESCAPE,
    ]
    window = FakeWindow(60, 200, keys)
    labyrinth = generate_menu(Screen(window), 200, 60)
    assert labyrinth is not None
    assert (labyrinth.rows, labyrinth.columns) == (4, 6)
    assert load_maze(tmp_path / DEFAULT_FILENAME) == labyrinth.maze
    assert (2, 30, "".join(labyrinth.scaled[0])) in window.writes
    assert not window.keys


def test_generate_menu_empty_input_reports_error(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    keys = [KEY_DOWN, KEY_DOWN, KEY_ENTER, ord("x"), KEY_ESCAPE]
    window = FakeWindow(60, 200, keys)
    assert generate_menu(Screen(window), 200, 60) is None
    assert (30, 100, ERROR_LINES[0]) in window.writes
    assert not window.keys


def test_generate_menu_return_option():
    keys = [KEY_DOWN, KEY_DOWN, KEY_DOWN, KEY_ENTER, ord("q")]
    window = FakeWindow(60, 200, keys)
    assert generate_menu(Screen(window), 200, 60) is None
    assert list(window.keys) == [ord("q")]