"""
Cell module for the Minesweeper board.

Represents individual grid positions (mine presence, neighbor count,
revealed flag) and the events a click reports back to the caller.
"""
from dataclasses import dataclass, field
from typing import List, Tuple, TYPE_CHECKING

if TYPE_CHECKING:
    from .board import GameState


Position = Tuple[int, int]


# ============================================================================
# Cell Data Class
# ============================================================================

@dataclass
class Cell:
    """
    Represents a single cell in the Minesweeper grid.

    Attributes:
        has_mine: Whether this cell contains a mine.
        neighbor_mine_count: Count of mines in neighboring cells (0-8).
        revealed: Whether the player has uncovered this cell.
    """

    has_mine: bool = False
    neighbor_mine_count: int = 0
    revealed: bool = False

    def reveal(self) -> bool:
        """
        Reveal this cell.

        Returns:
            True if the cell changed state, False if it was already revealed.
        """
        if self.revealed:
            return False
        self.revealed = True
        return True

    @property
    def is_hidden(self) -> bool:
        """Check if cell is hidden."""
        return not self.revealed

    def to_observation(self) -> int:
        """
        Convert cell to observation value.

        Returns:
            -1: Hidden cell
            0-8: Revealed cell with adjacent mine count
        """
        if not self.revealed:
            return -1
        return self.neighbor_mine_count


# ============================================================================
# Click Events
# ============================================================================

@dataclass(frozen=True)
class RevealEvent:
    """A cell uncovered by a click, in the order the flood fill visited it."""

    position: Position
    neighbor_mine_count: int


@dataclass(frozen=True)
class ClickResult:
    """Game state after a click plus the cells it revealed."""

    state: "GameState"
    reveals: List[RevealEvent] = field(default_factory=list)

    @property
    def positions(self) -> List[Position]:
        """Positions of revealed cells in visit order."""
        return [event.position for event in self.reveals]
