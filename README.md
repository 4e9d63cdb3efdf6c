# mazeweaver

A terminal program for perfect mazes. It generates them with Eller's algorithm,
loads them from plain text files, draws them with box-drawing characters scaled
to fill the terminal, and marks the shortest route between two cells.

It needs a terminal that Python's `curses` module supports.

## Running

    pip install .
    mazeweaver

The main menu lists **Load Labyrinth**, **Generate Labyrinth**, **Load Cave**
and **Exit**. Move with the arrow keys, confirm with Enter, go back with Esc.
The terminal must be at least 30 columns wide and 12 rows high.

- **Load Labyrinth**: choose "Input filename", type a file name and press Enter.
  The maze is drawn at the largest scale that fits the window. If the file
  cannot be read, is not a valid maze file, or the maze does not fit, a message
  is shown; press any key to go on.
- **Generate Labyrinth**: enter the number of rows and columns (digits only,
  at most three) and choose GENERATE. The maze is written to `my_maze.txt` in
  the current directory and then loaded and shown as above, so it is shown only
  if it has at most 50 rows and 50 columns and fits the window.
- **Solve** (in both menus): enter "row begin", "row end", "col begin" and
  "col end", counting from 1, and choose SOLVE. The path is drawn over the
  maze. If a cell lies outside the maze, or no maze is loaded, the maze field
  is cleared instead.

## What it does not do

**Load Cave** appears in the main menu but does nothing: the package has no
cave support of any kind. Generated mazes are always saved as `my_maze.txt`;
there is no way to choose another file name from the interface.

## Maze file format

The first line holds the number of rows and columns, each from 1 to 50. Then
come the right-wall matrix, one separating line, and the bottom-wall matrix;
every value is `0` or `1`:

    4 4
    0 0 0 1
    0 1 1 1
    1 1 0 1
    0 0 0 1

    1 1 0 0
    1 0 0 0
    0 0 1 0
    1 1 1 1

`right_walls[r][c]` is 1 when cell (r, c) has a wall on its right;
`bottom_walls[r][c]` is 1 when it has a wall below it. Text that breaks these
rules raises `mazeweaver.mazefile.MazeFormatError`.

## Using it as a library

```python
import random
from mazeweaver.generator import generate_maze
from mazeweaver.mazefile import format_maze
from mazeweaver.render import render_maze
from mazeweaver.solver import Point, solve_maze

maze = generate_maze(10, 10, random.Random(1))
print(format_maze(maze))
path = solve_maze(maze, Point(0, 0), Point(9, 9))
labyrinth = render_maze(maze, 1, 1)
for row in labyrinth.solved(path):
    print("".join(row))
```

- `mazeweaver.mazefile`: `Maze`, `parse_maze`, `load_maze`, `format_maze`,
  `save_maze`.
- `mazeweaver.generator`: `EllerGenerator`, `generate_maze`,
  `generate_maze_file`. Pass a `random.Random` for repeatable mazes.
- `mazeweaver.solver`: `Point(x, y)` (x is the column, y the row),
  `find_path`, `solve_maze`. The path runs from the finish back to the start;
  it is `None` when the finish cannot be reached, and `solve_maze` raises
  `ValueError` for a cell outside the maze.
- `mazeweaver.render`: `render_maze` returns a `Labyrinth` holding the drawing
  at scale 1 (`grid`) and at the current scale (`scaled`); `rescale` changes
  the scale and `solved` returns the scaled drawing with a path on it.
  `calculate_scale` finds the largest scale that fits a given space.

## Tests

    pip install .[test]
    pytest