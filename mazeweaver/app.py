"""The main menu and the command that starts the terminal interface."""

from __future__ import annotations

import argparse
import curses
import locale
from enum import IntEnum
from typing import Optional, Sequence

from mazeweaver.generate_menu import generate_menu
from mazeweaver.load_menu import load_menu
from mazeweaver.screen import KEY_DOWN, KEY_ENTER, KEY_ESCAPE, KEY_UP, Screen

MAIN_OPTIONS = ("Load Labyrinth", "Generate Labyrinth", "Load Cave", "Exit")
MIN_WIDTH = 30
MIN_HEIGHT = 12
TOO_SMALL = "Terminal size is too small"


class MainMenu(IntEnum):
    LOAD_LABYRINTH = 0
    GENERATE_LABYRINTH = 1
    LOAD_CAVE = 2
    EXIT = 3


def program_work(screen: Screen) -> None:
    """Run the main menu until the user exits."""
    height, width = screen.size()
    if width < MIN_WIDTH or height < MIN_HEIGHT:
        screen.message(1, 1, [TOO_SMALL])
        screen.window.refresh()
        screen.window.getch()
        return
    state = MainMenu.LOAD_LABYRINTH
    while True:
        screen.window.erase()
        screen.window.refresh()
        screen.draw_box()
        height, width = screen.size()
        screen.draw_menu(MAIN_OPTIONS, state, 2, 2, 2)
        key = screen.window.getch()
        if key == KEY_UP:
            state = MainMenu(max(0, state - 1))
        elif key == KEY_DOWN:
            state = MainMenu(min(len(MAIN_OPTIONS) - 1, state + 1))
        elif key == KEY_ESCAPE:
            return
        elif key == KEY_ENTER:
            if state == MainMenu.LOAD_LABYRINTH:
                load_menu(screen, width, height)
            elif state == MainMenu.GENERATE_LABYRINTH:
                generate_menu(screen, width, height)
            elif state == MainMenu.EXIT:
                return
        screen.window.refresh()


def _run(window) -> None:
    try:
        curses.curs_set(0)
    except curses.error:
        pass
    window.keypad(True)
    program_work(Screen(window))


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Start the terminal maze interface."""
    parser = argparse.ArgumentParser(
        prog="mazeweaver", description="Generate, load and solve mazes in the terminal."
    )
    parser.parse_args(argv)
    try:
        locale.setlocale(locale.LC_ALL, "")
    except locale.Error:
        pass
    curses.wrapper(_run)
    return 0