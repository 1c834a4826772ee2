# snaketerm/core/engine.py

"""
Update engine: advances a Game by exactly one tick.
"""

import logging
from typing import Optional, Tuple

from .models import Cell, Direction, Game

logger = logging.getLogger("snaketerm")

def next_head(head: Cell, direction: Direction, width: int, height: int) -> Optional[Cell]:
    """Return the cell one step from `head`, or None if it leaves the board."""
    dx, dy = direction.offset
    x, y = head[0] + dx, head[1] + dy
    if x < 0 or x >= width or y < 0 or y >= height:
        return None
    return (x, y)

def random_cell(game: Game) -> Tuple[int, int]:
    settings = game.settings
    return (game.rng.randrange(settings.width), game.rng.randrange(settings.height))

def relocate_food(game: Game) -> Cell:
    """
    Move the food to a uniformly random cell of the board.

    Snake cells are not excluded, so food may land under the body. The
    body is drawn over it until the snake moves away.
    """
    game.food.x, game.food.y = random_cell(game)
    logger.debug(f"Food relocated to {game.food.position}")
    return game.food.position

def advance(game: Game) -> Game:
    """
    Move the snake one cell in its current direction.

    Sets `game_over` and leaves everything else untouched when the new head
    would leave the board or land on the body. Otherwise the head is
    prepended; the tail is dropped unless the food was eaten, in which case
    the snake grows by one and the food moves.
    """
    settings = game.settings
    snake = game.snake

    new_head = next_head(snake.head, game.direction, settings.width, settings.height)
    if new_head is None:
        logger.debug(f"Game over: hit the wall moving {game.direction.name} from {snake.head}")
        game.game_over = True
        return game

    if snake.occupies(new_head):
        logger.debug(f"Game over: ran into itself at {new_head}")
        game.game_over = True
        return game

    snake.body.appendleft(new_head)

    if new_head == game.food.position:
        relocate_food(game)
    else:
        snake.body.pop()

    return game
