"""A thin drawing layer over a curses window: boxes, menus and line editing."""

from __future__ import annotations

import curses
from collections.abc import Sequence

KEY_UP = curses.KEY_UP
KEY_DOWN = curses.KEY_DOWN
KEY_ENTER = ord("\n")
KEY_ESCAPE = 27
_BACKSPACE_KEYS = frozenset({8, 127, curses.KEY_BACKSPACE})
_DIGITS = frozenset("0123456789")
MAX_NUMBER_LENGTH = 3

MENU_WIDTH = 30
LAB_HEIGHT_POS = 2
LAB_WIDTH_POS = 30


class Screen:
    """Draws menus and mazes on a curses-like window."""

    def __init__(self, window) -> None:
        self.window = window

    def _put(self, row: int, col: int, text: str) -> None:
        # Writing into the bottom-right cell makes curses report an error
        # after the text has been drawn; that is harmless here.
        try:
            self.window.addstr(row, col, text)
        except curses.error:
            pass

    def size(self) -> tuple[int, int]:
        """The window size as (height, width)."""
        height, width = self.window.getmaxyx()
        return height, width

    def draw_box(self) -> None:
        """Draw a frame of '-' and '|' around the whole window."""
        height, width = self.size()
        self._put(0, 0, "-" * width)
        for row in range(1, height - 1):
            self._put(row, 0, "|")
            self._put(row, width - 1, "|")
        self._put(height - 1, 0, "-" * width)

    def draw_menu(
        self, options: Sequence[str], state: int, gap: int, menu_row: int, menu_col: int
    ) -> None:
        """Draw menu options one under another, marking the selected one with '*'."""
        for index, option in enumerate(options):
            row = menu_row + index * gap
            self._put(row, menu_col, "*" if index == state else " ")
            self._put(row, menu_col + 2, option)

    def clear_menu(self, size: int, gap: int, menu_row: int, menu_col: int) -> None:
        """Blank out a menu of ``size`` options drawn by :meth:`draw_menu`."""
        blank = " " * max(0, 20 - menu_col)
        for index in range(size):
            row = menu_row + index * gap
            self._put(row, menu_col, " ")
            if blank:
                self._put(row, menu_col + 2, blank)

    def clear_field(self, width: int, height: int, menu_width: int) -> None:
        """Blank the maze field to the right of the menu."""
        blank = " " * max(0, width - menu_width)
        if not blank:
            return
        for row in range(2, height - 1):
            self._put(row, menu_width, blank)

    def print_grid(self, grid: Sequence[Sequence[str]], move_rows: int, move_columns: int) -> None:
        """Draw a character grid with its top-left corner at the given offset."""
        for index, line in enumerate(grid):
            self._put(move_rows + index, move_columns, "".join(line))

    def message(self, row: int, col: int, lines: Sequence[str]) -> None:
        """Write lines of text one under another."""
        for index, line in enumerate(lines):
            self._put(row + index, col, line)

    def edit_line(
        self,
        menu_row: int,
        menu_col: int,
        text: str = "",
        numeric: bool = False,
        shift: int = 1,
    ) -> str:
        """Let the user edit ``text`` in place and return the result.

        Enter or Escape finish editing. In numeric mode only digits are
        accepted, at most three of them.
        """
        marker = menu_col + shift
        self._put(menu_row, marker, ">")
        self._put(menu_row, marker + 1, "[]")
        cursor = marker + 2
        if text:
            self._put(menu_row, cursor, text)
            cursor += len(text)
            self._put(menu_row, cursor, "]")
        chars = list(text)
        while True:
            key = self.window.getch()
            if key in (KEY_ENTER, KEY_ESCAPE):
                break
            if key in _BACKSPACE_KEYS:
                if chars:
                    chars.pop()
                    self._put(menu_row, cursor, " ")
                    cursor -= 1
                    self._put(menu_row, cursor, "]")
                    self.window.refresh()
                continue
            if not 0 <= key <= 0x10FFFF:
                continue
            char = chr(key)
            if numeric:
                accepted = char in _DIGITS and len(chars) < MAX_NUMBER_LENGTH
            else:
                accepted = char.isprintable()
            if accepted:
                self._put(menu_row, cursor, char)
                cursor += 1
                self._put(menu_row, cursor, "]")
                chars.append(char)
                self.window.refresh()
        self._put(menu_row, marker, " ")
        return "".join(chars)