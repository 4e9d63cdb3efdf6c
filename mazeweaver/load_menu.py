"""Loading a maze file, fitting it to the terminal and the menu around it."""

from __future__ import annotations

from typing import Optional

from mazeweaver.mazefile import PathLike, load_maze
from mazeweaver.render import Labyrinth, calculate_scale, render_maze
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

LOAD_OPTIONS = ("Input filename", "Return to main menu", "Solve labyrinth")
_INPUT_FILENAME = 0
_RETURN = 1
_SOLVE_LABYRINTH = 2

ERROR_LINES = ("Wrong filename or terminal size", "Press any key if you wanna do it again")

SOLVE_MENU_ROW = 8
SOLVE_MENU_COL = 4


class LoadError(Exception):
    """Raised when a maze cannot be loaded or does not fit the terminal."""


def load_labyrinth(
    path: PathLike,
    width: int,
    height: int,
    move_rows: int = LAB_HEIGHT_POS,
    move_columns: int = LAB_WIDTH_POS,
) -> Labyrinth:
    """Load a maze file and draw it scaled as large as the terminal allows."""
    try:
        maze = load_maze(path)
        row_scale, column_scale = calculate_scale(
            maze.rows, maze.columns, width, height, move_rows, move_columns
        )
    except (OSError, ValueError) as exc:
        raise LoadError(str(exc)) from exc
    labyrinth = render_maze(maze, row_scale, column_scale)
    if width <= labyrinth.current_columns + MENU_WIDTH or height <= labyrinth.current_rows + 2:
        raise LoadError("the labyrinth does not fit into the terminal")
    return labyrinth


def _report_error(screen: Screen, width: int, height: int, lines) -> None:
    screen.message(height // 2, width // 2, lines)
    screen.window.getch()
    screen.clear_field(width, height, MENU_WIDTH)


def load_menu(screen: Screen, width: int, height: int) -> Optional[Labyrinth]:
    """Run the load menu until the user leaves it; return the loaded labyrinth."""
    screen.window.erase()
    labyrinth: Optional[Labyrinth] = None
    filename = ""
    state = _INPUT_FILENAME
    while True:
        screen.draw_box()
        screen.draw_menu(LOAD_OPTIONS, state, 2, 2, 2)
        key = screen.window.getch()
        if key == KEY_UP:
            state = max(0, state - 1)
        elif key == KEY_DOWN:
            state = min(len(LOAD_OPTIONS) - 1, state + 1)
        elif key == KEY_ESCAPE:
            break
        elif key == KEY_ENTER:
            if state == _INPUT_FILENAME:
                filename = screen.edit_line(3, 2, filename, numeric=False, shift=1)
                if filename:
                    labyrinth = None
                    screen.clear_field(width, height, MENU_WIDTH)
                    try:
                        labyrinth = load_labyrinth(
                            filename, width, height, LAB_HEIGHT_POS, LAB_WIDTH_POS
                        )
                    except LoadError:
                        _report_error(screen, width, height, ERROR_LINES)
                    else:
                        screen.print_grid(labyrinth.scaled, LAB_HEIGHT_POS, LAB_WIDTH_POS)
            elif state == _RETURN:
                break
            elif state == _SOLVE_LABYRINTH:
                solve_submenu(
                    screen, labyrinth, LAB_HEIGHT_POS, LAB_WIDTH_POS, SOLVE_MENU_ROW, SOLVE_MENU_COL
                )
        screen.window.refresh()
    return labyrinth