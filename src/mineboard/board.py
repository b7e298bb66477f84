"""
Board module for the Minesweeper engine.

Implements the game board with deferred mine placement, neighbor
counting, flood-fill reveal and win/lose detection.
"""
import logging
import numbers
from dataclasses import dataclass
from enum import Enum, auto
from typing import List, Optional, Union

import numpy as np

from .cell import Cell, ClickResult, Position, RevealEvent
from .errors import BoardInvariantError, InvalidConfiguration, OutOfBounds
from .placement import FixedLayout, MinePlacement, RandomPlacement, RandomSource

logger = logging.getLogger(__name__)


# ============================================================================
# Constants
# ============================================================================

# (dx, dy) offsets of the Moore neighborhood
NEIGHBOR_OFFSETS = tuple(
    (dx, dy)
    for dy in (-1, 0, 1)
    for dx in (-1, 0, 1)
    if (dx, dy) != (0, 0)
)


class GameState(Enum):
    """Possible states of the game."""

    PLAYING = auto()
    DEAD = auto()
    WIN = auto()


class BoardPhase(Enum):
    """Whether the mine layout has been committed yet."""

    UNINITIALIZED = auto()
    INITIALIZED = auto()


@dataclass
class BoardConfig:
    """
    Configuration for a randomly mined board.

    Attributes:
        width: Number of columns.
        height: Number of rows.
        num_mines: Total mines to place.
    """

    width: int = 9
    height: int = 9
    num_mines: int = 10

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        validate_dimensions(self.width, self.height)
        if not isinstance(self.num_mines, numbers.Integral):
            raise InvalidConfiguration("Number of mines must be an integer")
        if self.num_mines < 0:
            raise InvalidConfiguration("Number of mines cannot be negative")
        max_mines = self.width * self.height - 1
        if self.num_mines > max_mines:
            raise InvalidConfiguration(f"Too many mines (max {max_mines})")


def validate_dimensions(width: int, height: int) -> None:
    """Ensure board dimensions are positive integers."""
    for value in (width, height):
        if not isinstance(value, numbers.Integral):
            raise InvalidConfiguration("Board dimensions must be integers")
    if width < 1 or height < 1:
        raise InvalidConfiguration("Board dimensions must be positive")


def is_coordinate(value: object) -> bool:
    """Check that a value is an exact integer coordinate (bools excluded)."""
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)


def count_neighbor_mines(mask: np.ndarray) -> np.ndarray:
    """
    Count mined neighbors for every cell of a mine mask.

    Args:
        mask: Boolean array indexed [y, x].

    Returns:
        int8 array of the same shape holding per-cell neighbor counts.
    """
    height, width = mask.shape
    padded = np.pad(mask.astype(np.int8), 1)
    counts = np.zeros((height, width), dtype=np.int8)
    for dx, dy in NEIGHBOR_OFFSETS:
        counts += padded[1 + dy:1 + dy + height, 1 + dx:1 + dx + width]
    return counts


# ============================================================================
# Board Class
# ============================================================================

class MineBoard:
    """
    Minesweeper game board.

    Cells are stored densely, indexed ``y * width + x``, and only
    materialize on the first click, which also fixes the mine layout.
    """

    def __init__(
        self,
        width: int,
        height: int,
        mines: Union[int, MinePlacement] = 0,
        rng: RandomSource = None,
    ) -> None:
        """
        Create a board.

        Args:
            width: Number of columns.
            height: Number of rows.
            mines: Mine count for a random layout, or a placement strategy.
            rng: Seed or numpy Generator used by a random layout.

        Raises:
            InvalidConfiguration: If dimensions or mines cannot form a board.
        """
        if isinstance(mines, MinePlacement):
            validate_dimensions(width, height)
            mines.validate(width, height)
            self._placement = mines
        else:
            config = BoardConfig(width, height, mines)
            self._placement = RandomPlacement(config.num_mines, rng)

        self._width = int(width)
        self._height = int(height)
        self._mine_count: Optional[int] = None
        if isinstance(self._placement, RandomPlacement):
            self._mine_count = self._placement.mine_count

        self._cells: List[Cell] = []
        self._phase = BoardPhase.UNINITIALIZED
        self._state = GameState.PLAYING
        self._revealed_count = 0

    @classmethod
    def from_config(cls, config: BoardConfig, rng: RandomSource = None) -> "MineBoard":
        """Create a randomly mined board from a configuration."""
        return cls(config.width, config.height, config.num_mines, rng=rng)

    @classmethod
    def from_layout(cls, text: str) -> "MineBoard":
        """
        Create a board from a text grid (``x`` marks a mine).

        Dimensions are taken from the grid. The first click is still
        forced safe.
        """
        layout = FixedLayout.from_text(text)
        return cls(layout.width, layout.height, layout)

    # ========================================================================
    # Position Utilities (Low-level)
    # ========================================================================

    def _index(self, x: int, y: int) -> int:
        """Convert (x, y) to a dense storage index."""
        return y * self._width + x

    def _position(self, index: int) -> Position:
        """Convert a dense storage index back to (x, y)."""
        y, x = divmod(index, self._width)
        return x, y

    def _is_valid_position(self, x: int, y: int) -> bool:
        """Check if position is within board bounds."""
        return 0 <= x < self._width and 0 <= y < self._height

    def _check_position(self, x: int, y: int) -> None:
        """Raise OutOfBounds unless (x, y) is an integer grid position."""
        if not (
            is_coordinate(x)
            and is_coordinate(y)
            and self._is_valid_position(x, y)
        ):
            raise OutOfBounds(x, y, self._width, self._height)

    def _neighbor_indices(self, index: int) -> List[int]:
        """Storage indices of in-bounds neighbors of a cell."""
        x, y = self._position(index)
        neighbors = []
        for dx, dy in NEIGHBOR_OFFSETS:
            if self._is_valid_position(x + dx, y + dy):
                neighbors.append(self._index(x + dx, y + dy))
        return neighbors

    # ========================================================================
    # Initialization (Low-level)
    # ========================================================================

    def _initialize(self, safe: Position) -> None:
        """Commit the mine layout and neighbor counts around a safe click."""
        mask = np.array(
            self._placement.mine_mask(self._width, self._height, safe),
            dtype=bool,
        )
        if mask.shape != (self._height, self._width):
            raise BoardInvariantError(
                f"Placement returned shape {mask.shape}, "
                f"expected {(self._height, self._width)}"
            )
        safe_x, safe_y = safe
        mask[safe_y, safe_x] = False

        counts = count_neighbor_mines(mask)
        self._cells = [
            Cell(has_mine=bool(has_mine), neighbor_mine_count=int(count))
            for has_mine, count in zip(mask.ravel(), counts.ravel())
        ]
        self._mine_count = int(mask.sum())
        self._phase = BoardPhase.INITIALIZED
        logger.debug(
            "Initialized %dx%d board with %d mines, first click at %s",
            self._width, self._height, self._mine_count, safe,
        )

    # ========================================================================
    # Game Actions (Mid-level)
    # ========================================================================

    def click(self, x: int, y: int) -> ClickResult:
        """
        Reveal the cell at (x, y).

        The first click fixes the mine layout with (x, y) kept mine-free.
        A zero-count cell expands to its neighbors until numbered cells
        bound the region. Clicks on a finished board change nothing.

        Args:
            x: Column index.
            y: Row index.

        Returns:
            ClickResult with the game state and the reveal events.

        Raises:
            OutOfBounds: If (x, y) is not on the board.
        """
        self._check_position(x, y)
        x, y = int(x), int(y)

        if self._phase is BoardPhase.UNINITIALIZED:
            self._initialize((x, y))

        if self._state is not GameState.PLAYING:
            return ClickResult(self._state)

        index = self._index(x, y)
        cell = self._cells[index]
        if cell.has_mine:
            self._state = GameState.DEAD
            logger.info("Mine hit at (%d, %d)", x, y)
            return ClickResult(self._state)

        if cell.revealed:
            return ClickResult(self._state)

        reveals = []
        for visited in self._flood_fill(index):
            self._revealed_count += 1
            reveals.append(
                RevealEvent(
                    self._position(visited),
                    self._cells[visited].neighbor_mine_count,
                )
            )

        self._check_win_condition()
        return ClickResult(self._state, reveals)

    def _flood_fill(self, start: int) -> List[int]:
        """
        Reveal the region reachable from a safe cell.

        Returns:
            Storage indices of newly revealed cells in visit order.
        """
        if self._cells[start].has_mine:
            raise BoardInvariantError(
                f"Flood fill started on mine at {self._position(start)}"
            )
        if not self._cells[start].reveal():
            raise BoardInvariantError(
                f"Flood fill started on revealed cell {self._position(start)}"
            )

        # Cells are marked revealed when pushed so each is pushed once.
        visited = []
        stack = [start]
        while stack:
            current = stack.pop()
            visited.append(current)
            if self._cells[current].neighbor_mine_count > 0:
                continue
            for neighbor in self._neighbor_indices(current):
                cell = self._cells[neighbor]
                if cell.has_mine or cell.revealed:
                    continue
                cell.reveal()
                stack.append(neighbor)
        return visited

    def _check_win_condition(self) -> None:
        """Check if all non-mine cells are revealed."""
        safe_cells = self._width * self._height - self._mine_count
        if self._revealed_count == safe_cells:
            self._state = GameState.WIN
            logger.info("Board cleared after revealing %d cells", safe_cells)

    # ========================================================================
    # State Accessors (High-level)
    # ========================================================================

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def state(self) -> GameState:
        """Get current game state."""
        return self._state

    @property
    def phase(self) -> BoardPhase:
        return self._phase

    @property
    def mine_count(self) -> Optional[int]:
        """Mines on the board, or None while a deterministic layout is pending."""
        return self._mine_count

    @property
    def revealed_count(self) -> int:
        return self._revealed_count

    @property
    def safe_cells_remaining(self) -> Optional[int]:
        """Safe cells still hidden, or None while the mine count is unknown."""
        if self._mine_count is None:
            return None
        return self._width * self._height - self._mine_count - self._revealed_count

    @property
    def is_playing(self) -> bool:
        """Check if game is still in progress."""
        return self._state == GameState.PLAYING

    @property
    def is_won(self) -> bool:
        """Check if game was won."""
        return self._state == GameState.WIN

    @property
    def is_lost(self) -> bool:
        """Check if game was lost."""
        return self._state == GameState.DEAD

    def get_cell(self, x: int, y: int) -> Optional[Cell]:
        """Get cell at position, or None if invalid or not yet initialized."""
        if self._phase is BoardPhase.UNINITIALIZED:
            return None
        if not (is_coordinate(x) and is_coordinate(y)):
            return None
        if not self._is_valid_position(x, y):
            return None
        return self._cells[self._index(int(x), int(y))]

    def get_observation(self) -> np.ndarray:
        """
        Get board state as a numpy array indexed [y, x].

        Returns:
            2D int8 array where -1 = hidden and 0-8 = revealed count.
        """
        obs = np.full((self._height, self._width), -1, dtype=np.int8)
        for index, cell in enumerate(self._cells):
            x, y = self._position(index)
            obs[y, x] = cell.to_observation()
        return obs

    def get_valid_actions(self) -> List[Position]:
        """
        Get list of cells that can still be revealed.

        Returns:
            List of hidden (x, y) positions in row-major order.
        """
        if self._phase is BoardPhase.UNINITIALIZED:
            return [
                (x, y) for y in range(self._height) for x in range(self._width)
            ]
        return [
            self._position(index)
            for index, cell in enumerate(self._cells)
            if cell.is_hidden
        ]

    def __repr__(self) -> str:
        return (
            f"MineBoard(width={self._width}, height={self._height}, "
            f"mines={self._mine_count}, state={self._state.name})"
        )
