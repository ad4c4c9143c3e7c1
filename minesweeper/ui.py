"""Screen front ends: a curses full-screen view and a plain text view."""

from __future__ import annotations

import curses
import sys
from abc import ABC, abstractmethod
from enum import IntEnum
from typing import TextIO

from .board import Board, Cell, CellState

_RESET = "\033[0m"
_RED = "\033[91m"
_GREEN = "\033[92m"
_REVERSE = "\033[7m"


class ColorPair(IntEnum):
    """Colour pair numbers registered with curses (they start at 1)."""

    HIGHLIGHT = 1
    BLUE = 2
    RED = 3
    GREEN = 4
    YELLOW = 5


def cell_char(cell: Cell) -> str:
    """The character that shows a cell on screen."""
    if cell.state is CellState.UNOPENED:
        return " "
    if cell.state is CellState.FLAGGED:
        return "F"
    if cell.is_mine:
        return "X"
    return str(cell.mine_state)


def render_board(board: Board, colors: bool = True) -> str:
    """Render the board as framed text with ANSI escapes."""
    border = "+" + "--" * board.cols + "-+\n"
    parts = [border]
    for row in board.iter_rows():
        parts.append("|")
        for cell in row:
            if colors:
                if cell.state is CellState.OPENED and cell.is_mine:
                    parts.append(_RED)
                elif cell.state is CellState.FLAGGED:
                    parts.append(_GREEN)
            if cell.highlighted:
                parts.append(_REVERSE)
            parts.append(f" {cell_char(cell)}{_RESET}")
        parts.append(" |\n")
    parts.append(border)
    return "".join(parts)


def render_end_screen(game_lost: bool) -> str:
    """The closing message shown by the text view."""
    color = _RED if game_lost else _GREEN
    outcome = "lost" if game_lost else "won"
    return f"{color}you {outcome}{_RESET}\n"


class UI(ABC):
    """What the game loop needs from a front end."""

    @abstractmethod
    def init(self) -> None: ...

    @abstractmethod
    def close(self) -> None: ...

    @abstractmethod
    def draw(self, board: Board) -> None: ...

    @abstractmethod
    def draw_end_screen(self, game_lost: bool) -> None: ...

    @abstractmethod
    def get_key(self) -> int: ...


def _quietly(func, *args) -> None:
    try:
        func(*args)
    except curses.error:
        pass


def _pair(pair: ColorPair) -> int:
    return curses.color_pair(int(pair))


class TUI(UI):
    """Full-screen curses view with the board centred on the terminal."""

    def __init__(self, game_win_h: int, game_win_v: int) -> None:
        self.game_win_h = game_win_h
        self.game_win_v = game_win_v
        self._stdscr = None
        self._win = None
        self._game_win = None

    @property
    def win(self):
        return self._win

    @property
    def game_win(self):
        return self._game_win

    def _game_origin(self) -> tuple[int, int]:
        return (
            curses.LINES // 2 - self.game_win_h // 2,
            curses.COLS // 2 - self.game_win_v // 2,
        )

    def _draw_frame(self, pair: ColorPair) -> None:
        attr = _pair(pair)
        self._game_win.attron(attr)
        _quietly(self._game_win.box)
        self._game_win.attroff(attr)

    def init(self) -> None:
        self._stdscr = curses.initscr()
        self._win = curses.newwin(0, 0, 0, 0)
        self._stdscr.clear()
        curses.noecho()
        curses.cbreak()
        _quietly(curses.curs_set, 0)
        self._stdscr.keypad(True)
        _quietly(curses.start_color)
        _quietly(curses.init_pair, ColorPair.HIGHLIGHT, curses.COLOR_YELLOW, curses.COLOR_BLUE)
        _quietly(curses.init_pair, ColorPair.BLUE, curses.COLOR_BLUE, curses.COLOR_BLACK)
        _quietly(curses.init_pair, ColorPair.RED, curses.COLOR_RED, curses.COLOR_BLACK)
        _quietly(curses.init_pair, ColorPair.GREEN, curses.COLOR_GREEN, curses.COLOR_BLACK)
        _quietly(curses.init_pair, ColorPair.YELLOW, curses.COLOR_YELLOW, curses.COLOR_BLACK)

        if self.game_win_h > curses.LINES or self.game_win_v > curses.COLS:
            raise ValueError("Error: board too big")

        self._game_win = curses.newwin(
            self.game_win_h, self.game_win_v, *self._game_origin()
        )
        self._win.keypad(True)
        self._game_win.keypad(True)
        self._draw_frame(ColorPair.BLUE)

    def close(self) -> None:
        if self._stdscr is None:
            return
        _quietly(curses.curs_set, 1)
        _quietly(curses.endwin)
        self._stdscr = None

    def on_resize(self) -> None:
        _quietly(curses.update_lines_cols)
        self._stdscr.clear()
        self._win.clear()
        self._game_win.clear()
        _quietly(self._game_win.mvwin, *self._game_origin())
        self._draw_frame(ColorPair.BLUE)

    def draw(self, board: Board) -> None:
        self._draw_board(board)
        self._draw_mine_count(board)

    def _draw_board(self, board: Board) -> None:
        for r, row in enumerate(board.iter_rows()):
            for c, cell in enumerate(row):
                attr = curses.A_NORMAL
                if cell.state is CellState.OPENED and cell.is_mine:
                    attr = _pair(ColorPair.RED)
                elif cell.state is CellState.FLAGGED:
                    attr = _pair(ColorPair.GREEN)
                if cell.highlighted:
                    attr = curses.A_BOLD | _pair(ColorPair.HIGHLIGHT)
                _quietly(self._game_win.addstr, 1 + r, 1 + c * 3, f" {cell_char(cell)} ", attr)

    def _draw_mine_count(self, board: Board) -> None:
        y = curses.LINES // 2 - self.game_win_h // 2 - 1
        x = curses.COLS // 2 - self.game_win_v // 2
        attr = _pair(ColorPair.YELLOW)
        _quietly(self._win.addstr, y, x, "   ", attr)
        _quietly(self._win.addstr, y, x, str(board.mines), attr)

    def draw_end_screen(self, game_lost: bool) -> None:
        y = curses.LINES // 2 + self.game_win_h // 2 + 1
        x = curses.COLS // 2 - self.game_win_v // 2
        pair = ColorPair.RED if game_lost else ColorPair.GREEN
        _quietly(self._win.move, y, x)
        _quietly(self._win.clrtoeol)
        text = "you lost" if game_lost else "you won"
        _quietly(self._win.addstr, y, x, text, curses.A_BOLD | _pair(pair))
        self._draw_frame(pair)

    def refresh(self) -> None:
        self._win.refresh()
        self._game_win.refresh()

    def get_key(self) -> int:
        return self._win.getch()


class CLI(UI):
    """Plain text view that prints the board to a stream."""

    def __init__(self, stream: TextIO | None = None, colors: bool = True) -> None:
        self._stream = stream
        self.colors = colors

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    def init(self) -> None:
        pass

    def close(self) -> None:
        pass

    def on_resize(self) -> None:
        pass

    def draw(self, board: Board) -> None:
        self.stream.write(render_board(board, self.colors))
        self.stream.flush()

    def draw_end_screen(self, game_lost: bool) -> None:
        self.stream.write(render_end_screen(game_lost))
        self.stream.flush()

    def refresh(self) -> None:
        pass

    def get_key(self) -> int:
        """Read one character from standard input; -1 at end of input."""
        ch = sys.stdin.read(1)
        return ord(ch) if ch else -1