"""
Error types raised by the Minesweeper board engine.
"""


class MineBoardError(Exception):
    """Base class for all board engine errors."""


class InvalidConfiguration(MineBoardError, ValueError):
    """Board dimensions, mine count or layout cannot produce a board."""


class OutOfBounds(MineBoardError, IndexError):
    """Click coordinates fall outside the grid."""

    def __init__(self, x: object, y: object, width: int, height: int) -> None:
        super().__init__(
            f"Position ({x}, {y}) is outside the {width}x{height} board"
        )
        self.x = x
        self.y = y


class BoardInvariantError(MineBoardError, RuntimeError):
    """Internal state contradicts an engine invariant (a bug, not bad input)."""
