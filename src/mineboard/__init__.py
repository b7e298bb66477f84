"""
Minesweeper board engine.

Provides the game board with deferred mine placement, flood-fill reveal
and win/lose tracking, plus a Gymnasium environment around it.
"""
from .cell import Cell, ClickResult, Position, RevealEvent
from .errors import (
    BoardInvariantError,
    InvalidConfiguration,
    MineBoardError,
    OutOfBounds,
)
from .placement import (
    FixedLayout,
    MinePlacement,
    PredicatePlacement,
    RandomPlacement,
    parse_layout,
)
from .board import BoardConfig, BoardPhase, GameState, MineBoard
from .environment import MinesweeperEnv

__all__ = [
    "Cell",
    "ClickResult",
    "Position",
    "RevealEvent",
    "BoardInvariantError",
    "InvalidConfiguration",
    "MineBoardError",
    "OutOfBounds",
    "FixedLayout",
    "MinePlacement",
    "PredicatePlacement",
    "RandomPlacement",
    "parse_layout",
    "BoardConfig",
    "BoardPhase",
    "GameState",
    "MineBoard",
    "MinesweeperEnv",
]
