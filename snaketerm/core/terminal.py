# snaketerm/core/terminal.py

"""
Terminal surface management for snaketerm.

The terminal is process-wide state: curses mode is entered once before
the game loop starts and must be left on every exit path, including
errors raised while drawing or polling. `terminal_session` is the only
place that switches modes.
"""

import curses
import logging
import signal
import sys
from contextlib import contextmanager

from ..exceptions import TerminalError, TerminalTooSmallError
from .renderer import build_palette
from .settings import GameSettings

logger = logging.getLogger("snaketerm")

# ANSI sequences written after curses has released the terminal
CLEAR_SCREEN = "\033[2J"
CURSOR_HOME = "\033[H"

_exit_requested = False  # Set by the SIGINT handler when Ctrl+C is pressed.

def handle_exit(sig, frame):
    """Set exit flag on Ctrl+C instead of raising KeyboardInterrupt."""
    global _exit_requested
    _exit_requested = True

def exit_requested() -> bool:
    return _exit_requested

def configure_terminal(screen):
    """Unbuffered, unechoed input with arrow keys decoded and the cursor hidden."""
    curses.noecho()
    curses.cbreak()
    screen.keypad(True)
    curses.curs_set(0)
    if curses.has_colors():
        curses.start_color()
        curses.use_default_colors()

def check_terminal_size(screen, settings: GameSettings):
    """
    Make sure the window can hold a frame.

    One row is needed beyond the frame itself for the row break after the
    bottom border.
    """
    rows, cols = screen.getmaxyx()
    required = (settings.frame_rows + 1, settings.frame_cols)
    if rows < required[0] or cols < required[1]:
        raise TerminalTooSmallError(required, (rows, cols))

def restore_terminal(screen):
    """Clear the window, leave curses mode and home the cursor."""
    if screen is None:
        return
    try:
        try:
            screen.erase()
            screen.refresh()
        except curses.error as e:
            logger.debug(f"Final screen clear failed: {e}")
        try:
            screen.keypad(False)
            curses.echo()
            curses.nocbreak()
        except curses.error as e:
            logger.debug(f"Restoring input modes failed: {e}")
    finally:
        # endwin also puts back the tty modes saved by initscr
        try:
            curses.endwin()
        finally:
            sys.stdout.write(CLEAR_SCREEN + CURSOR_HOME)
            sys.stdout.flush()

@contextmanager
def terminal_session(settings: GameSettings):
    """
    Acquire the terminal for one game.

    Yields `(screen, palette)`. Any `curses.error` raised inside the block
    is re-raised as TerminalError after the terminal has been restored.
    """
    global _exit_requested
    _exit_requested = False
    previous_handler = signal.signal(signal.SIGINT, handle_exit)
    screen = None
    try:
        try:
            screen = curses.initscr()
            configure_terminal(screen)
            check_terminal_size(screen, settings)
            palette = build_palette(settings)
        except curses.error as e:
            raise TerminalError("Could not initialize the terminal", e) from e

        logger.debug("Terminal session started")
        try:
            yield screen, palette
        except curses.error as e:
            raise TerminalError(cause=e) from e
    finally:
        try:
            restore_terminal(screen)
        finally:
            signal.signal(signal.SIGINT, previous_handler)
            logger.debug("Terminal session ended")
