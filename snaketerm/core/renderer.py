# snaketerm/core/renderer.py

"""
Full-frame renderer.

Every tick erases the window and redraws the whole board, border included.
Each glyph is written with its own attribute; the terminal is refreshed
once at the end of the frame.
"""

import curses
from enum import Enum
from typing import Dict

from .models import Game
from .settings import GameSettings

class Element(Enum):
    WALL = "wall"
    SNAKE = "snake"
    FOOD = "food"
    EMPTY = "empty"

GLYPHS = {
    Element.WALL: "#",
    Element.SNAKE: "O",
    Element.FOOD: "@",
    Element.EMPTY: " ",
}

# Color pair numbers
WALL_COLOR_PAIR = 1
SNAKE_COLOR_PAIR = 2
FOOD_COLOR_PAIR = 3

Palette = Dict[Element, int]

def _color(name: str) -> int:
    return getattr(curses, f"COLOR_{name.upper()}")

def build_palette(settings: GameSettings) -> Palette:
    """
    Initialize color pairs and return the attribute for each element.

    Must be called after curses has been initialized with default colors,
    so -1 is the terminal's own background. Terminals without
    color support get reverse and bold attributes instead.
    """
    if not curses.has_colors():
        return {
            Element.WALL: curses.A_NORMAL,
            Element.SNAKE: curses.A_REVERSE,
            Element.FOOD: curses.A_BOLD,
            Element.EMPTY: curses.A_NORMAL,
        }

    curses.init_pair(WALL_COLOR_PAIR, curses.COLOR_WHITE, -1)
    curses.init_pair(SNAKE_COLOR_PAIR, curses.COLOR_WHITE, _color(settings.snake_color))
    curses.init_pair(FOOD_COLOR_PAIR, curses.COLOR_BLACK, _color(settings.food_color))
    return {
        Element.WALL: curses.color_pair(WALL_COLOR_PAIR) | curses.A_BOLD,
        Element.SNAKE: curses.color_pair(SNAKE_COLOR_PAIR),
        Element.FOOD: curses.color_pair(FOOD_COLOR_PAIR),
        Element.EMPTY: curses.A_NORMAL,
    }

def element_at(game: Game, x: int, y: int, body=None) -> Element:
    """What occupies (x, y); border wins over snake, snake over food."""
    settings = game.settings
    if x == 0 or x == settings.width or y == 0 or y == settings.height:
        return Element.WALL
    if (x, y) in (body if body is not None else game.snake.body):
        return Element.SNAKE
    if (x, y) == game.food.position:
        return Element.FOOD
    return Element.EMPTY

def render(game: Game, screen, palette: Palette) -> None:
    """Repaint the whole board onto `screen`."""
    settings = game.settings
    body = set(game.snake.body)

    screen.erase()
    for y in range(settings.frame_rows):
        for x in range(settings.frame_cols):
            element = element_at(game, x, y, body)
            screen.addstr(y, x, GLYPHS[element], palette[element])
    screen.move(0, 0)
    screen.refresh()
