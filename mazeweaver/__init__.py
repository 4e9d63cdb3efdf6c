"""Generate, load, render and solve rectangular mazes, with a curses interface."""

__version__ = "0.1.0"