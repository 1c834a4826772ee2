# snaketerm/exceptions.py

"""
Custom exceptions for the snaketerm package.

These exceptions cover the two ways a game can fail: bad startup settings
and terminal I/O that could not be completed.
"""

class SnaketermError(Exception):
    """Base exception for all snaketerm errors."""

class ConfigurationError(SnaketermError):
    """Raised when game settings are invalid."""

class TerminalError(SnaketermError):
    """Raised when a draw call, mode switch or input poll fails."""
    def __init__(self, message: str = None, cause: Exception = None):
        msg = message or "Terminal I/O failed"
        if cause is not None:
            msg = f"{msg}: {cause}"
        super().__init__(msg)
        self.cause = cause

class TerminalTooSmallError(TerminalError):
    """Raised when the terminal window cannot hold the playfield."""
    def __init__(self, required: tuple, actual: tuple):
        super().__init__(
            f"Terminal too small: need {required[0]} rows x {required[1]} columns, "
            f"have {actual[0]} x {actual[1]}"
        )
        self.required = required
        self.actual = actual
