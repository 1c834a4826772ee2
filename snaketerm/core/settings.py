# snaketerm/core/settings.py

"""
Configuration settings for snaketerm using Pydantic models.

The playfield is fixed for the lifetime of a game: settings are built once
at startup, validated, and frozen. The defaults are the classic 40 x 20
board with a 100ms tick.
"""

from typing import Tuple
from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    field_validator,
    model_validator,
)

from ..exceptions import ConfigurationError

Cell = Tuple[int, int]

# The eight colors every curses terminal understands
COLOR_NAMES = ("black", "red", "green", "yellow", "blue", "magenta", "cyan", "white")

class GameSettings(BaseModel):
    """
    Fixed world parameters for one game.

    Coordinates are (x, y) with the origin in the top-left corner. Valid
    cells lie in [0, width) x [0, height); the border is drawn on row 0,
    row `height`, column 0 and column `width`.
    """
    model_config = ConfigDict(frozen=True)

    width: int = 40
    height: int = 20
    tick_ms: int = Field(default=100, gt=0)  # Frame budget per iteration
    input_timeout_ms: int = Field(default=100, ge=0)  # Bounded wait for a key
    snake_color: str = "cyan"
    food_color: str = "yellow"
    quit_key: str = "q"
    start_snake: Tuple[Cell, ...] = ((4, 2), (3, 2), (2, 2))  # Head first
    start_food: Cell = (10, 10)

    @field_validator('snake_color', 'food_color')
    @classmethod
    def validate_color(cls, v: str) -> str:
        """Normalize color names and reject anything curses cannot show."""
        name = v.strip().lower()
        if name not in COLOR_NAMES:
            raise ConfigurationError(
                f"Unknown color '{v}'; expected one of: {', '.join(COLOR_NAMES)}"
            )
        return name

    @field_validator('quit_key')
    @classmethod
    def validate_quit_key(cls, v: str) -> str:
        if len(v) != 1:
            raise ConfigurationError(f"quit_key must be a single character, got {v!r}")
        return v

    @model_validator(mode='after')
    def validate_geometry(self) -> 'GameSettings':
        """Ensure the starting snake and food fit inside the board."""
        if self.width <= 0 or self.height <= 0:
            raise ConfigurationError(
                f"Board dimensions must be positive, got {self.width} x {self.height}"
            )

        if not self.start_snake:
            raise ConfigurationError("start_snake must contain at least one cell")

        for cell in self.start_snake + (self.start_food,):
            if not self.contains(cell):
                raise ConfigurationError(
                    f"Starting cell {cell} lies outside the {self.width} x {self.height} board"
                )

        # The snake starts moving right, so it must run leftwards from the head
        head_y = self.start_snake[0][1]
        for (x, y), (next_x, next_y) in zip(self.start_snake, self.start_snake[1:]):
            if y != head_y or next_y != head_y or next_x != x - 1:
                raise ConfigurationError(
                    "start_snake must be a contiguous horizontal line with the head on the right"
                )
        return self

    def contains(self, cell: Cell) -> bool:
        """Whether `cell` lies in [0, width) x [0, height)."""
        x, y = cell
        return 0 <= x < self.width and 0 <= y < self.height

    @property
    def tick_seconds(self) -> float:
        return self.tick_ms / 1000

    @property
    def input_timeout_seconds(self) -> float:
        return self.input_timeout_ms / 1000

    @property
    def frame_rows(self) -> int:
        """Rows in one frame, border included."""
        return self.height + 1

    @property
    def frame_cols(self) -> int:
        """Columns in one frame, border included."""
        return self.width + 1

DEFAULT_SETTINGS = GameSettings()

def load_settings(**overrides) -> GameSettings:
    """
    Build settings from keyword overrides.

    Pydantic type and range errors are reported as ConfigurationError so
    callers only need to handle one exception type.
    """
    if not overrides:
        return DEFAULT_SETTINGS
    try:
        return GameSettings(**overrides)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid game settings: {e}") from e
