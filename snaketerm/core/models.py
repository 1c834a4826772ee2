# snaketerm/core/models.py

"""
Game state for snaketerm.

Plain data only: the update engine and the input sampler are the only
code that mutates a Game, and they live in their own modules.
"""

import random
from collections import deque
from dataclasses import dataclass, field
from enum import Enum
from typing import Deque, Optional, Tuple

from .settings import DEFAULT_SETTINGS, GameSettings

Cell = Tuple[int, int]

class Direction(Enum):
    """Heading of the snake, valued by its (dx, dy) unit offset."""
    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def offset(self) -> Cell:
        return self.value

    @property
    def opposite(self) -> 'Direction':
        dx, dy = self.value
        return Direction((-dx, -dy))

@dataclass
class Snake:
    """Ordered body cells, head at index 0 and tail at the end."""
    body: Deque[Cell] = field(default_factory=deque)

    @property
    def head(self) -> Cell:
        return self.body[0]

    @property
    def tail(self) -> Cell:
        return self.body[-1]

    def occupies(self, cell: Cell) -> bool:
        return cell in self.body

    def __len__(self) -> int:
        return len(self.body)

@dataclass
class Food:
    x: int
    y: int

    @property
    def position(self) -> Cell:
        return (self.x, self.y)

@dataclass
class Game:
    """Aggregate state owned by a single game loop."""
    snake: Snake
    food: Food
    direction: Direction = Direction.RIGHT
    game_over: bool = False
    settings: GameSettings = DEFAULT_SETTINGS
    rng: random.Random = field(default_factory=random.Random, repr=False)

def new_game(settings: Optional[GameSettings] = None, rng: Optional[random.Random] = None) -> Game:
    """Create the starting state: short snake near the top-left heading right."""
    settings = settings or DEFAULT_SETTINGS
    return Game(
        snake=Snake(deque(settings.start_snake)),
        food=Food(*settings.start_food),
        direction=Direction.RIGHT,
        game_over=False,
        settings=settings,
        rng=rng or random.Random(),
    )
