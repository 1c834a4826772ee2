# snaketerm/__init__.py

"""
snaketerm: the classic Snake game in a terminal.

A fixed-size board, a snake steered with the arrow keys, food that makes it
grow, and a game that ends when the snake hits the wall or itself. Press
'q' to quit.

Public API:
- play_snake(): Play one game in the current terminal
- GameSettings: Startup configuration for the board
- new_game() / advance(): Build and step game state without a terminal
"""

import logging

from .core.engine import advance
from .core.loop import play_snake, run_game
from .core.models import Direction, Food, Game, Snake, new_game
from .core.settings import DEFAULT_SETTINGS, GameSettings, load_settings
from .exceptions import (
    ConfigurationError,
    SnaketermError,
    TerminalError,
    TerminalTooSmallError,
)

# Package-level logger; handlers are left to the application
logger = logging.getLogger("snaketerm")

__all__ = [
    "play_snake",
    "run_game",
    "advance",
    "new_game",
    "Direction",
    "Food",
    "Game",
    "Snake",
    "GameSettings",
    "DEFAULT_SETTINGS",
    "load_settings",
    "SnaketermError",
    "ConfigurationError",
    "TerminalError",
    "TerminalTooSmallError",
]
