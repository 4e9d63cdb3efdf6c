"""Generating a random maze file and the menu around it."""

from __future__ import annotations

import random
import re
from typing import Optional

from mazeweaver.generator import generate_maze_file
from mazeweaver.load_menu import LoadError, load_labyrinth
from mazeweaver.mazefile import PathLike
from mazeweaver.render import Labyrinth
from mazeweaver.screen import (
    KEY_DOWN,
    KEY_ENTER,
    KEY_ESCAPE,
    KEY_UP,
    LAB_HEIGHT_POS,
    LAB_WIDTH_POS,
    MENU_WIDTH,
    Screen,
)
from mazeweaver.solve_menu import solve_submenu

GENERATE_OPTIONS = ("rows", "columns", "GENERATE", "Return", "Solve")
_ROWS = 0
_COLUMNS = 1
_GENERATE = 2
_RETURN = 3
_SOLVE = 4
_INPUT_SHIFT = 10

DEFAULT_FILENAME = "my_maze.txt"
ERROR_LINES = ("Wrong input data or terminal size", "Press any key if you wanna do it again")

SOLVE_MENU_ROW = 8
SOLVE_MENU_COL = 4

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _atoi(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def generate_labyrinth_file(
    path: PathLike,
    rows: int,
    columns: int,
    width: int,
    height: int,
    rng: Optional[random.Random] = None,
) -> Labyrinth:
    """Generate a maze into ``path`` and load it fitted to the terminal."""
    try:
        generate_maze_file(path, rows, columns, rng)
    except (OSError, ValueError) as exc:
        raise LoadError(str(exc)) from exc
    return load_labyrinth(path, width, height, LAB_HEIGHT_POS, LAB_WIDTH_POS)


def generate_menu(screen: Screen, width: int, height: int) -> Optional[Labyrinth]:
    """Run the generate menu until the user leaves it; return the last labyrinth."""
    screen.window.erase()
    rng = random.Random()
    labyrinth: Optional[Labyrinth] = None
    row_text = ""
    column_text = ""
    state = _ROWS
    while True:
        screen.draw_box()
        screen.draw_menu(GENERATE_OPTIONS, state, 1, 2, 2)
        screen.window.refresh()
        key = screen.window.getch()
        if key == KEY_UP:
            state = max(0, state - 1)
        elif key == KEY_DOWN:
            state = min(len(GENERATE_OPTIONS) - 1, state + 1)
        elif key == KEY_ESCAPE:
            break
        elif key == KEY_ENTER:
            if state == _ROWS:
                row_text = screen.edit_line(2, 2, row_text, numeric=True, shift=_INPUT_SHIFT)
            elif state == _COLUMNS:
                column_text = screen.edit_line(
                    3, 2, column_text, numeric=True, shift=_INPUT_SHIFT
                )
            elif state == _GENERATE:
                screen.clear_field(width, height, MENU_WIDTH)
                try:
                    labyrinth = generate_labyrinth_file(
                        DEFAULT_FILENAME, _atoi(row_text), _atoi(column_text), width, height, rng
                    )
                except LoadError:
                    labyrinth = None
                    screen.clear_field(width, height, MENU_WIDTH)
                    screen.window.refresh()
                    screen.message(height // 2, width // 2, ERROR_LINES)
                    screen.window.getch()
                    screen.clear_field(width, height, MENU_WIDTH)
                    screen.window.refresh()
                else:
                    screen.print_grid(labyrinth.scaled, LAB_HEIGHT_POS, LAB_WIDTH_POS)
            elif state == _RETURN:
                break
            elif state == _SOLVE:
                solve_submenu(
                    screen, labyrinth, LAB_HEIGHT_POS, LAB_WIDTH_POS, SOLVE_MENU_ROW, SOLVE_MENU_COL
                )
    screen.window.refresh()
    return labyrinth