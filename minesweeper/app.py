"""Command line entry point and the game loop."""

from __future__ import annotations

import argparse
import curses
import signal
import sys
import threading
from dataclasses import dataclass
from enum import Enum

from .board import Board
from .timer import Timer, draw_timer
from .ui import TUI

_PRESETS = {
    1: (9, 9, 10),
    2: (16, 16, 40),
    3: (16, 30, 99),
}

_EPILOG = (
    "Controls:\n"
    "  Arrow keys / WASD   move the cursor\n"
    "  Space               reveal a cell\n"
    "  F                   flag a cell\n"
    "  Q                   quit"
)

_UP = {curses.KEY_UP, ord("w"), ord("W")}
_DOWN = {curses.KEY_DOWN, ord("s"), ord("S")}
_LEFT = {curses.KEY_LEFT, ord("a"), ord("A")}
_RIGHT = {curses.KEY_RIGHT, ord("d"), ord("D")}
_FLAG = {ord("f"), ord("F")}
_QUIT = {ord("q"), ord("Q")}
_CLICK = ord(" ")
_END_KEYS = {_CLICK} | _QUIT


@dataclass
class Cursor:
    """Cursor position: ``x`` is the row, ``y`` the column."""

    x: int = 0
    y: int = 0


class KeyResult(Enum):
    """What a key press asks of the game loop."""

    CONTINUE = "continue"
    GAME_OVER = "game_over"
    QUIT = "quit"
    RESIZE = "resize"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="minesweeper",
        description="Play minesweeper",
        epilog=_EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("-r", "--rows", type=int, default=9, metavar="ROWS", help="board height")
    parser.add_argument("-c", "--cols", type=int, default=9, metavar="COLS", help="set board width")
    parser.add_argument("-m", "--mines", type=int, default=10, metavar="MINES", help="set mine count")
    parser.add_argument(
        "-d",
        "--difficulty",
        type=int,
        choices=(1, 2, 3),
        default=None,
        metavar="D",
        help="set difficulty level (1-3), overrides other options",
    )
    return parser


def board_dimensions(
    rows: int, cols: int, mines: int, difficulty: int | None = None
) -> tuple[int, int, int]:
    """Return (rows, cols, mines), replaced by a preset when a difficulty is given."""
    if difficulty is None:
        return rows, cols, mines
    try:
        return _PRESETS[difficulty]
    except KeyError:
        raise ValueError(f"unknown difficulty level: {difficulty}") from None


def apply_key(board: Board, cursor: Cursor, key: int) -> KeyResult:
    """Apply one key press to the board and cursor."""
    if key in _UP:
        cursor.x = cursor.x - 1 if cursor.x > 0 else board.rows - 1
    elif key in _DOWN:
        cursor.x = cursor.x + 1 if cursor.x < board.rows - 1 else 0
    elif key in _LEFT:
        cursor.y = cursor.y - 1 if cursor.y > 0 else board.cols - 1
    elif key in _RIGHT:
        cursor.y = cursor.y + 1 if cursor.y < board.cols - 1 else 0
    elif key in _FLAG:
        board.update_mine_count(board.flag_cell(cursor.x, cursor.y))
    elif key == _CLICK:
        if board.click_cell(cursor.x, cursor.y) == -1:
            return KeyResult.GAME_OVER
    elif key in _QUIT:
        return KeyResult.QUIT
    elif key == curses.KEY_RESIZE:
        return KeyResult.RESIZE
    return KeyResult.CONTINUE


def _play(ui, board: Board, running: threading.Event, lock, timer: Timer) -> bool | None:
    """Run the game loop; True if lost, False if won, None if quit."""
    cursor = Cursor()
    game_over = False
    while running.is_set():
        board.highlight_cell(cursor.x, cursor.y)
        with lock:
            ui.draw(board)
            ui.refresh()
        board.highlight_cell(cursor.x, cursor.y)

        result = apply_key(board, cursor, ui.get_key())
        if result is KeyResult.GAME_OVER:
            game_over = True
        elif result is KeyResult.QUIT:
            running.clear()
        elif result is KeyResult.RESIZE:
            ui.on_resize()

        if game_over or board.check_if_won():
            timer.stop()
            running.clear()
            board.reveal_all()
            board.set_mine_count(0)
            with lock:
                ui.draw(board)
                ui.draw_end_screen(game_over)
                ui.refresh()
            while ui.get_key() not in _END_KEYS:
                pass
            return game_over
    return None


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    rows, cols, mines = board_dimensions(args.rows, args.cols, args.mines, args.difficulty)

    running = threading.Event()
    running.set()
    signal.signal(signal.SIGINT, lambda signum, frame: running.clear())

    game_win_h = rows + 2
    game_win_v = cols * 3 + 2
    ui = TUI(game_win_h, game_win_v)
    board = Board(rows, cols, mines)

    try:
        ui.init()
        board.init()
    except (ValueError, curses.error) as err:
        ui.close()
        print(err, file=sys.stderr)
        return 1

    lock = threading.Lock()
    timer = Timer()
    timer_thread = threading.Thread(
        target=draw_timer,
        args=(timer, running, lock, ui.win, game_win_h, game_win_v),
        daemon=True,
    )
    timer_thread.start()
    timer.start()
    try:
        _play(ui, board, running, lock, timer)
    finally:
        running.clear()
        timer_thread.join()
        ui.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())