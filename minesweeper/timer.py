"""Game timer and the loop that draws it on screen."""

from __future__ import annotations

import time
from typing import Callable

_YELLOW_PAIR = 5


class Timer:
    """Counts whole seconds since it was started."""

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._clock = clock
        self._start = 0.0
        self._running = False

    def start(self) -> None:
        self._start = self._clock()
        self._running = True

    def stop(self) -> None:
        self._running = False

    @property
    def running(self) -> bool:
        return self._running

    @property
    def elapsed(self) -> int:
        """Whole seconds since start, or 0 when stopped."""
        if not self._running:
            return 0
        return int(self._clock() - self._start)


def format_elapsed(seconds: int) -> str:
    """Format seconds as MM:SS."""
    minutes, secs = divmod(seconds, 60)
    return f"{minutes:02d}:{secs:02d}"


def _yellow_attr() -> int:
    try:
        import curses

        return curses.color_pair(_YELLOW_PAIR)
    except Exception:
        return 0


def draw_timer(timer, running, lock, win, game_win_h: int, game_win_v: int) -> None:
    """Redraw the timer above the board once a second while ``running`` is set."""
    while running.is_set():
        with lock:
            lines, cols = win.getmaxyx()
            y = lines // 2 - game_win_h // 2 - 1
            x = cols // 2 + game_win_v // 2 - 4
            attr = _yellow_attr()
            win.move(y, x)
            win.clrtoeol()
            win.attron(attr)
            win.addstr(y, x, format_elapsed(timer.elapsed))
            win.attroff(attr)
            win.refresh()
        time.sleep(1)