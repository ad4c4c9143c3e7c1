"""The minesweeper board: cells, mine placement, flagging and opening."""

from __future__ import annotations

import random
from dataclasses import dataclass
from enum import Enum
from typing import Iterator

MINE = -1


class CellState(Enum):
    """Visibility of a cell."""

    UNOPENED = "unopened"
    OPENED = "opened"
    FLAGGED = "flagged"


@dataclass
class Cell:
    """One square of the board.

    ``mine_state`` is -1 for a mine, otherwise the number of adjacent mines.
    """

    state: CellState = CellState.UNOPENED
    mine_state: int = 0
    highlighted: bool = False

    @property
    def is_mine(self) -> bool:
        return self.mine_state == MINE


class Board:
    """A grid of cells with a running mine counter."""

    def __init__(
        self, rows: int, cols: int, mines: int, rng: random.Random | None = None
    ) -> None:
        self._rows = rows
        self._cols = cols
        self._mines = mines
        self._rng = rng if rng is not None else random.Random()
        self._grid = [[Cell() for _ in range(cols)] for _ in range(rows)]

    def copy(self) -> Board:
        """Return a board of the same size and mine count with a fresh grid."""
        return Board(self._rows, self._cols, self._mines, self._rng)

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cols(self) -> int:
        return self._cols

    @property
    def mines(self) -> int:
        return self._mines

    def cell(self, row: int, col: int) -> Cell:
        """Return the cell at ``(row, col)``."""
        if not (0 <= row < self._rows and 0 <= col < self._cols):
            raise IndexError(f"cell ({row}, {col}) is outside the board")
        return self._grid[row][col]

    def iter_rows(self) -> Iterator[tuple[Cell, ...]]:
        """Yield each row of cells, top to bottom."""
        for row in self._grid:
            yield tuple(row)

    def _neighbours(self, row: int, col: int, *, include_self: bool = False):
        for dr in (-1, 0, 1):
            for dc in (-1, 0, 1):
                if dr == 0 and dc == 0 and not include_self:
                    continue
                r, c = row + dr, col + dc
                if 0 <= r < self._rows and 0 <= c < self._cols:
                    yield r, c

    def flag_cell(self, row: int, col: int) -> int:
        """Toggle a flag; return the change to apply to the mine counter."""
        cell = self.cell(row, col)
        if cell.state is CellState.OPENED:
            return 0
        if cell.state is CellState.FLAGGED:
            cell.state = CellState.UNOPENED
            return 1
        cell.state = CellState.FLAGGED
        return -1

    def highlight_cell(self, row: int, col: int) -> None:
        cell = self.cell(row, col)
        cell.highlighted = not cell.highlighted

    def click_cell(self, row: int, col: int) -> int:
        """Open a cell and return its mine state (-1 means a mine)."""
        cell = self.cell(row, col)
        if cell.state is CellState.UNOPENED:
            cell.state = CellState.OPENED
            if not cell.is_mine:
                self._open_adjacent(row, col)
        return cell.mine_state

    def _open_adjacent(self, row: int, col: int) -> None:
        pending = [(row, col)]
        while pending:
            r, c = pending.pop()
            for nr, nc in self._neighbours(r, c):
                neighbour = self._grid[nr][nc]
                if neighbour.state is CellState.UNOPENED and not neighbour.is_mine:
                    neighbour.state = CellState.OPENED
                    if neighbour.mine_state == 0:
                        pending.append((nr, nc))

    def place_mine(self, row: int, col: int) -> None:
        """Put a mine on a cell and update the counts around it."""
        cell = self.cell(row, col)
        if cell.is_mine:
            raise ValueError(f"cell ({row}, {col}) already holds a mine")
        cell.mine_state = MINE
        for r, c in self._neighbours(row, col):
            neighbour = self._grid[r][c]
            if not neighbour.is_mine:
                neighbour.mine_state += 1

    def init(self, mines: int | None = None) -> None:
        """Scatter the mines at random, optionally resetting their number."""
        if mines is not None:
            self._mines = mines
        if self._rows * self._cols < self._mines:
            raise ValueError("Error: board too small or too many mines")
        for _ in range(self._mines):
            while True:
                row = self._rng.randint(0, self._rows - 1)
                col = self._rng.randint(0, self._cols - 1)
                if not self._grid[row][col].is_mine:
                    break
            self.place_mine(row, col)

    def reveal_all(self) -> None:
        for row in self._grid:
            for cell in row:
                cell.state = CellState.OPENED
                cell.highlighted = False

    def check_if_won(self) -> bool:
        """True when every cell without a mine is open."""
        return all(
            cell.is_mine or cell.state is CellState.OPENED
            for row in self._grid
            for cell in row
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return (self._rows, self._cols, self._mines) == (
            other._rows,
            other._cols,
            other._mines,
        )

    __hash__ = None  # type: ignore[assignment]

    def update_mine_count(self, n: int) -> None:
        self._mines += n

    def set_mine_count(self, n: int) -> None:
        self._mines = n