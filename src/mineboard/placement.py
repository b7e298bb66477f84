"""
Mine placement strategies.

A board commits its mine layout on the first click. The strategy decides
where mines go; the board keeps the clicked cell clear regardless of what
the strategy returns.
"""
import logging
import numbers
from abc import ABC, abstractmethod
from typing import Callable, FrozenSet, Iterable, Optional, Tuple, Union

import numpy as np

from .cell import Position
from .errors import InvalidConfiguration

logger = logging.getLogger(__name__)

MINE_MARKERS = frozenset({"x", "X"})

RandomSource = Union[None, int, np.random.Generator]


# ============================================================================
# Base Placement Interface
# ============================================================================

class MinePlacement(ABC):
    """
    Abstract base class for mine placement strategies.

    Implementations return a boolean mask of shape (height, width) where
    True marks a mine.
    """

    @abstractmethod
    def mine_mask(self, width: int, height: int, safe: Position) -> np.ndarray:
        """
        Build the mine layout for a board.

        Args:
            width: Number of columns.
            height: Number of rows.
            safe: (x, y) position of the first click.

        Returns:
            Boolean array indexed [y, x].
        """
        pass

    def validate(self, width: int, height: int) -> None:
        """Reject layouts that cannot fit a width x height board."""
        pass


# ============================================================================
# Random Placement
# ============================================================================

class RandomPlacement(MinePlacement):
    """
    Place a fixed number of mines uniformly at random.

    Every position except the first click is equally likely to hold a
    mine and no position is drawn twice.
    """

    def __init__(self, mine_count: int, rng: RandomSource = None) -> None:
        """
        Initialize the placement.

        Args:
            mine_count: Number of mines to place.
            rng: Seed or numpy Generator for reproducible layouts.
        """
        if isinstance(mine_count, bool) or not isinstance(
            mine_count, numbers.Integral
        ):
            raise InvalidConfiguration("Number of mines must be an integer")
        if mine_count < 0:
            raise InvalidConfiguration("Number of mines cannot be negative")
        self.mine_count = int(mine_count)
        self.rng = np.random.default_rng(rng)

    def validate(self, width: int, height: int) -> None:
        max_mines = width * height - 1
        if self.mine_count > max_mines:
            raise InvalidConfiguration(f"Too many mines (max {max_mines})")

    def mine_mask(self, width: int, height: int, safe: Position) -> np.ndarray:
        safe_x, safe_y = safe
        candidates = np.delete(np.arange(width * height), safe_y * width + safe_x)
        chosen = self.rng.choice(candidates, size=self.mine_count, replace=False)

        mask = np.zeros(width * height, dtype=bool)
        mask[chosen] = True
        return mask.reshape(height, width)


# ============================================================================
# Deterministic Placements
# ============================================================================

class FixedLayout(MinePlacement):
    """
    Pre-drawn mine positions, used for reproducible boards and tests.

    Attributes:
        mines: Set of (x, y) mine positions.
        width: Expected board width, or None if any width fits.
        height: Expected board height, or None if any height fits.
    """

    def __init__(
        self,
        mines: Iterable[Position],
        width: Optional[int] = None,
        height: Optional[int] = None,
    ) -> None:
        self.mines: FrozenSet[Position] = frozenset(
            (int(x), int(y)) for x, y in mines
        )
        self.width = width
        self.height = height

    @classmethod
    def from_text(cls, text: str) -> "FixedLayout":
        """
        Parse a text grid into a layout.

        Rows are separated by newlines and cells by whitespace. A cell
        marked ``x`` holds a mine; any other token is empty::

            _ _ _
            _ x _
            _ _ _
        """
        width, height, mines = parse_layout(text)
        return cls(mines, width=width, height=height)

    def validate(self, width: int, height: int) -> None:
        if self.width is not None and self.width != width:
            raise InvalidConfiguration(
                f"Layout is {self.width} wide, board is {width}"
            )
        if self.height is not None and self.height != height:
            raise InvalidConfiguration(
                f"Layout is {self.height} tall, board is {height}"
            )
        for x, y in self.mines:
            if not (0 <= x < width and 0 <= y < height):
                raise InvalidConfiguration(
                    f"Layout mine ({x}, {y}) is outside the {width}x{height} board"
                )

    def mine_mask(self, width: int, height: int, safe: Position) -> np.ndarray:
        mask = np.zeros((height, width), dtype=bool)
        for x, y in self.mines:
            mask[y, x] = True
        return mask


class PredicatePlacement(MinePlacement):
    """
    Mine presence decided per position by a callable.

    The predicate is queried exactly once per cell when the board
    initializes. It must be a pure function of (x, y) for the resulting
    layout to be reproducible.
    """

    def __init__(self, predicate: Callable[[int, int], bool]) -> None:
        self.predicate = predicate

    def mine_mask(self, width: int, height: int, safe: Position) -> np.ndarray:
        mask = np.zeros((height, width), dtype=bool)
        for y in range(height):
            for x in range(width):
                mask[y, x] = bool(self.predicate(x, y))
        return mask


# ============================================================================
# Layout Parsing
# ============================================================================

def parse_layout(text: str) -> Tuple[int, int, FrozenSet[Position]]:
    """
    Parse a whitespace-separated text grid.

    Args:
        text: Grid rows, one per line. Blank lines are ignored.

    Returns:
        Tuple of (width, height, mine positions).

    Raises:
        InvalidConfiguration: If the grid is empty or rows differ in length.
    """
    rows = [line.split() for line in text.strip().splitlines() if line.strip()]
    if not rows:
        raise InvalidConfiguration("Layout is empty")

    width = len(rows[0])
    for y, row in enumerate(rows):
        if len(row) != width:
            raise InvalidConfiguration(
                f"Layout row {y} has {len(row)} cells, expected {width}"
            )

    mines = frozenset(
        (x, y)
        for y, row in enumerate(rows)
        for x, token in enumerate(row)
        if token in MINE_MARKERS
    )
    logger.debug("Parsed %dx%d layout with %d mines", width, len(rows), len(mines))
    return width, len(rows), mines
