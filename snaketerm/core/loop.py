# snaketerm/core/loop.py

"""
Main loop driver.

Each tick samples input (the bounded wait doubles as the minimum frame
pacing), advances the game, renders it, then sleeps whatever remains of
the frame budget. A slow frame is never made up for by a faster one.
"""

import logging
import time
from typing import Callable, Optional

from .controls import sample
from .engine import advance
from .models import Game, new_game
from .renderer import Palette, render
from .settings import DEFAULT_SETTINGS, GameSettings
from .terminal import exit_requested, terminal_session

logger = logging.getLogger("snaketerm")

def run_game(
    screen,
    palette: Palette,
    settings: Optional[GameSettings] = None,
    game: Optional[Game] = None,
    clock: Callable[[], float] = time.monotonic,
    sleep: Callable[[float], None] = time.sleep,
    stop_requested: Callable[[], bool] = exit_requested,
) -> Game:
    """Run ticks until the game is over; return the final state."""
    settings = settings or DEFAULT_SETTINGS
    if game is None:
        game = new_game(settings)

    while True:
        if game.game_over or stop_requested():
            break

        start_time = clock()

        sample(game, screen, settings.input_timeout_ms)
        advance(game)
        render(game, screen, palette)

        remaining = settings.tick_seconds - (clock() - start_time)
        if remaining > 0:
            sleep(remaining)

    logger.debug(f"Game stopped with snake length {len(game.snake)}")
    return game

def play_snake(settings: Optional[GameSettings] = None) -> Game:
    """
    Play one game of Snake in the current terminal.

    The terminal is restored before this returns or raises.
    """
    settings = settings or DEFAULT_SETTINGS
    with terminal_session(settings) as (screen, palette):
        return run_game(screen, palette, settings)
