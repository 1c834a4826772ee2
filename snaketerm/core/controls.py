# snaketerm/core/controls.py

"""
Input sampler: one bounded keyboard poll per tick.

Only the first pending key is read on each call; anything typed faster
than the tick rate waits for the next tick.
"""

import curses
import logging

from .models import Direction, Game

logger = logging.getLogger("snaketerm")

KEY_DIRECTIONS = {
    curses.KEY_UP: Direction.UP,
    curses.KEY_DOWN: Direction.DOWN,
    curses.KEY_LEFT: Direction.LEFT,
    curses.KEY_RIGHT: Direction.RIGHT,
}

def apply_key(game: Game, key: int) -> Game:
    """Apply a single key code to the game."""
    if key == ord(game.settings.quit_key):
        logger.debug("Quit key pressed")
        game.game_over = True
        return game

    new_dir = KEY_DIRECTIONS.get(key)
    if new_dir is not None and new_dir != game.direction.opposite:
        game.direction = new_dir
    return game

def sample(game: Game, screen, timeout_ms: int) -> Game:
    """Wait up to `timeout_ms` for one key and apply it."""
    screen.timeout(timeout_ms)
    key = screen.getch()
    if key == -1:
        return game
    return apply_key(game, key)
