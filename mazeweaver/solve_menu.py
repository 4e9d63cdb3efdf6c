"""The menu that reads start and finish cells and draws the solved maze."""

from __future__ import annotations

import re
from typing import Optional

from mazeweaver.render import CharGrid, Labyrinth
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
from mazeweaver.solver import Point, solve_maze

SOLVE_OPTIONS = ("row begin", "row end", "col begin", "col end", "SOLVE", "Return")
_SOLVE = 4
_RETURN = 5
_INPUT_SHIFT = 12
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class SolveError(ValueError):
    """Raised when a maze cannot be solved for the given cells."""


def _atoi(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def solve_labyrinth(
    labyrinth: Optional[Labyrinth], b_row: int, b_col: int, e_row: int, e_col: int
) -> CharGrid:
    """Solve between two zero-based cells and return the scaled grid with the path."""
    if labyrinth is None:
        raise SolveError("no labyrinth is loaded")
    rows, columns = labyrinth.rows, labyrinth.columns
    if not (
        0 <= b_row < rows and 0 <= e_row < rows and 0 <= b_col < columns and 0 <= e_col < columns
    ):
        raise SolveError("start or finish lies outside the labyrinth")
    path = solve_maze(labyrinth.maze, Point(b_col, b_row), Point(e_col, e_row))
    if path is None:
        raise SolveError("the finish cannot be reached from the start")
    return labyrinth.solved(path)


def solve_from_input(
    labyrinth: Optional[Labyrinth],
    begin_row: str,
    end_row: str,
    begin_column: str,
    end_column: str,
) -> CharGrid:
    """Solve between two one-based cells typed by the user."""
    if labyrinth is None:
        raise SolveError("no labyrinth is loaded")
    b_row, e_row = _atoi(begin_row), _atoi(end_row)
    b_col, e_col = _atoi(begin_column), _atoi(end_column)
    if min(b_row, b_col, e_row, e_col) < 0 or max(b_row, e_row) > labyrinth.rows or max(
        b_col, e_col
    ) > labyrinth.columns:
        raise SolveError("start or finish lies outside the labyrinth")
    return solve_labyrinth(labyrinth, b_row - 1, b_col - 1, e_row - 1, e_col - 1)


def solve_submenu(
    screen: Screen,
    labyrinth: Optional[Labyrinth],
    lab_row: int = LAB_HEIGHT_POS,
    lab_col: int = LAB_WIDTH_POS,
    menu_row: int = 8,
    menu_col: int = 4,
) -> Optional[CharGrid]:
    """Run the solve menu until the user leaves it; return the last solved grid."""
    fields = ["", "", "", ""]  # row begin, row end, col begin, col end
    state = 0
    size = len(SOLVE_OPTIONS)
    solved: Optional[CharGrid] = None
    while True:
        screen.draw_menu(SOLVE_OPTIONS, state, 1, menu_row, menu_col)
        key = screen.window.getch()
        if key == KEY_UP:
            state = max(0, state - 1)
        elif key == KEY_DOWN:
            state = min(size - 1, state + 1)
        elif key == KEY_ESCAPE:
            break
        elif key == KEY_ENTER:
            if state < _SOLVE:
                fields[state] = screen.edit_line(
                    menu_row + state, menu_col, fields[state], numeric=True, shift=_INPUT_SHIFT
                )
            elif state == _SOLVE:
                try:
                    solved = solve_from_input(labyrinth, *fields)
                except SolveError:
                    height, width = screen.size()
                    screen.clear_field(width, height, MENU_WIDTH)
                else:
                    screen.print_grid(solved, lab_row, lab_col)
                screen.window.refresh()
            elif state == _RETURN:
                break
    screen.clear_menu(size, 1, menu_row, menu_col)
    screen.window.refresh()
    return solved