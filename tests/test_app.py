import curses
import threading

import pytest

from minesweeper.app import (
    Cursor,
    KeyResult,
    _play,
    apply_key,
    board_dimensions,
    build_parser,
    main,
)
from minesweeper.board import CellState, Board
from minesweeper.timer import Timer
from minesweeper.ui import UI


class FakeUI(UI):
    def __init__(self, keys):
        self.keys = iter(keys)
        self.end = []
        self.draws = 0
        self.resized = 0

    def init(self):
        pass

    def close(self):
        pass

    def draw(self, board):
        self.draws += 1

    def draw_end_screen(self, game_lost):
        self.end.append(game_lost)

    def get_key(self):
        return next(self.keys)

    def refresh(self):
        pass

    def on_resize(self):
        self.resized += 1


def test_parser_defaults():
    args = build_parser().parse_args([])
    assert (args.rows, args.cols, args.mines, args.difficulty) == (9, 9, 10, None)


def test_parser_reads_options():
    args = build_parser().parse_args(["-r", "5", "--cols", "7", "-m", "3", "-d", "2"])
    assert (args.rows, args.cols, args.mines, args.difficulty) == (5, 7, 3, 2)


@pytest.mark.parametrize("argv", [["-d", "4"], ["-r", "x"], ["--mines"]])
def test_main_rejects_bad_arguments(argv):
    with pytest.raises(SystemExit) as info:
        main(argv)
    assert info.value.code != 0


def test_board_dimensions_presets():
    assert board_dimensions(5, 5, 1, 1) == (9, 9, 10)
    assert board_dimensions(5, 5, 1, 2) == (16, 16, 40)
    assert board_dimensions(5, 5, 1, 3) == (16, 30, 99)


def test_board_dimensions_without_difficulty():
    assert board_dimensions(5, 6, 2, None) == (5, 6, 2)


def test_board_dimensions_unknown_level():
    with pytest.raises(ValueError):
        board_dimensions(5, 5, 1, 7)


def test_cursor_wraps_around():
    board = Board(3, 4, 0)
    cursor = Cursor()
    assert apply_key(board, cursor, curses.KEY_UP) is KeyResult.CONTINUE
    assert cursor.x == board.rows - 1
    apply_key(board, cursor, ord("s"))
    assert cursor.x == 0
    apply_key(board, cursor, ord("a"))
    assert cursor.y == board.cols - 1
    apply_key(board, cursor, curses.KEY_RIGHT)
    assert cursor.y == 0
    apply_key(board, cursor, ord("D"))
    apply_key(board, cursor, ord("S"))
    assert (cursor.x, cursor.y) == (1, 1)


def test_flag_updates_mine_count():
    board = Board(2, 2, 10)
    cursor = Cursor()
    apply_key(board, cursor, ord("f"))
    assert board.cell(0, 0).state is CellState.FLAGGED
    assert board.mines == 9
    apply_key(board, cursor, ord("F"))
    assert board.cell(0, 0).state is CellState.UNOPENED
    assert board.mines == 10


def test_click_on_mine_ends_game():
    board = Board(2, 2, 1)
    board.place_mine(1, 1)
    assert apply_key(board, Cursor(1, 1), ord(" ")) is KeyResult.GAME_OVER
    assert apply_key(board, Cursor(0, 0), ord(" ")) is KeyResult.CONTINUE
    assert board.cell(0, 0).state is CellState.OPENED


@pytest.mark.parametrize(
    "key, expected",
    [
        (ord("q"), KeyResult.QUIT),
        (ord("Q"), KeyResult.QUIT),
        (curses.KEY_RESIZE, KeyResult.RESIZE),
        (ord("z"), KeyResult.CONTINUE),
    ],
)
def test_other_keys(key, expected):
    board = Board(2, 2, 0)
    cursor = Cursor()
    assert apply_key(board, cursor, key) is expected
    assert (cursor.x, cursor.y) == (0, 0)


def _run(board, keys):
    ui = FakeUI(keys)
    running = threading.Event()
    running.set()
    timer = Timer()
    timer.start()
    result = _play(ui, board, running, threading.Lock(), timer)
    return result, ui, running, timer


def test_play_won():
    board = Board(1, 2, 1)
    board.place_mine(0, 1)
    result, ui, running, timer = _run(board, [ord(" "), ord("x"), ord(" ")])
    assert result is False
    assert ui.end == [False]
    assert not running.is_set()
    assert not timer.running
    assert board.mines == 0
    assert all(cell.state is CellState.OPENED for row in board.iter_rows() for cell in row)


def test_play_lost():
    board = Board(1, 2, 1)
    board.place_mine(0, 0)
    result, ui, _, _ = _run(board, [ord(" "), ord("q")])
    assert result is True
    assert ui.end == [True]


def test_play_quit_and_resize():
    board = Board(2, 2, 1)
    board.place_mine(0, 0)
    result, ui, running, timer = _run(board, [curses.KEY_RESIZE, ord("q")])
    assert result is None
    assert ui.resized == 1
    assert ui.end == []
    assert not running.is_set()
    assert timer.running