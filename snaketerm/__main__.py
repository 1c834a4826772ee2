# snaketerm/__main__.py

"""Entry point for `python -m snaketerm` and the `snaketerm` command."""

import logging
import sys

from rich.console import Console
from rich.text import Text

from .core.loop import play_snake
from .exceptions import SnaketermError

logger = logging.getLogger("snaketerm")

def main() -> int:
    try:
        play_snake()
    except SnaketermError as e:
        logger.debug("Game aborted", exc_info=True)
        Console(stderr=True, highlight=False).print(
            Text.assemble(("Error in snake: ", "bold red"), str(e))
        )
        return 1
    return 0

if __name__ == "__main__":
    sys.exit(main())
