"""Terminal minesweeper: board logic, a game timer, text and curses views, and the game command."""

__version__ = "0.1.0"
__all__ = ["__version__"]