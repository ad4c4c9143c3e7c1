# minesweeper

The classic mine-clearing puzzle, played in a terminal window.

## Installation

```
pip install .
```

The game uses the standard `curses` module. Python includes it on Linux and
macOS. The package imports `curses` when it loads, so it does not run on
platforms that lack it.

## Playing

```
minesweeper
```

You can also start it with `python -m minesweeper.app`.

By default the board is 9 × 9 with 10 mines. You can set the size and the mine
count yourself:

```
minesweeper --rows 12 --cols 20 --mines 35
```

You can also choose a preset difficulty with `-d` / `--difficulty`. A preset
replaces `--rows`, `--cols` and `--mines`:

| Level | Board   | Mines |
|-------|---------|-------|
| 1     | 9 × 9   | 10    |
| 2     | 16 × 16 | 40    |
| 3     | 16 × 30 | 99    |

```
minesweeper --difficulty 2
```

The command prints an error and exits with status 1 in two cases: when there
are more mines than cells, and when the board does not fit in the terminal.

### Controls

| Key               | Action                                   |
|-------------------|------------------------------------------|
| Arrow keys / WASD | Move the cursor (it wraps at the edges)  |
| Space             | Reveal a cell                            |
| F                 | Flag a cell, or remove a flag            |
| Q                 | Quit                                     |

- **Mine counter:** shown above the top-left corner of the board. Placing a
  flag lowers it by one, and removing a flag raises it by one.
- **Timer:** shown above the top-right corner of the board, as `MM:SS`.
- **Revealing cells:** when a revealed cell has no neighbouring mines, the
  cells around it open as well.
- **End of the game:** you lose if you reveal a mine. You win once every safe
  cell is open. The whole board is then shown, and you press Space or Q to
  leave.
- **Ctrl-C:** stops the game loop after the next key press.

## Using the library

You can use the game logic in `minesweeper.board.Board` without the terminal
interface:

```python
import random

from minesweeper.board import Board
from minesweeper.ui import render_board

board = Board(9, 9, 10, random.Random(1))
board.init(10)

if board.click_cell(4, 4) == -1:
    print("boom")

print(render_board(board, colors=False))
print("won" if board.check_if_won() else "still playing")
```

Other parts of the library:

- **`Board.place_mine(row, col)`:** places mines at chosen cells, instead of
  the random placement that `init` does.
- **`Board.flag_cell(row, col)`:** toggles a flag. It returns the change to
  apply to the mine counter.
- **`minesweeper.ui.CLI(stream, colors)`:** writes the plain-text board and the
  end message to any text stream.
- **`minesweeper.app.apply_key(board, cursor, key)`:** applies one key press to
  a board and a `Cursor`. It returns a `KeyResult`, so you can drive a game
  from your own input loop.
- **`minesweeper.app.board_dimensions(rows, cols, mines, difficulty)`:**
  resolves a difficulty preset.
- **`minesweeper.timer.Timer`:** counts whole seconds.
- **`minesweeper.timer.format_elapsed`:** formats a number of seconds as
  `MM:SS`.

## Limitations

The `minesweeper` command always uses the full-screen curses view. The
plain-text `CLI` view is only available from code; no command-line option
selects it. The game does not keep scores or best times.