"""
Pytest configuration and shared fixtures.
"""
import pytest
import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from mineboard import BoardConfig, Cell, MineBoard


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def default_board() -> MineBoard:
    """Create a 9x9 board with 10 mines and a fixed seed."""
    return MineBoard(9, 9, 10, rng=1234)


@pytest.fixture
def empty_board() -> MineBoard:
    """Create a board with no mines for cascade testing."""
    return MineBoard(5, 5, 0)


@pytest.fixture
def two_mine_board() -> MineBoard:
    """5x5 board with mines at (1, 1) and (1, 3)."""
    return MineBoard.from_layout(
        """
        _ _ _ _ _
        _ x _ _ _
        _ _ _ _ _
        _ x _ _ _
        _ _ _ _ _
        """
    )


@pytest.fixture
def center_mine_board() -> MineBoard:
    """5x5 board with a single mine at (2, 2)."""
    return MineBoard.from_layout(
        """
        _ _ _ _ _
        _ _ _ _ _
        _ _ x _ _
        _ _ _ _ _
        _ _ _ _ _
        """
    )


@pytest.fixture
def strip_board() -> MineBoard:
    """5x1 board with a mine in the middle."""
    return MineBoard.from_layout("_ _ x _ _")


# ============================================================================
# Cell Fixtures
# ============================================================================

@pytest.fixture
def hidden_cell() -> Cell:
    """Create a hidden cell."""
    return Cell()


@pytest.fixture
def numbered_cell() -> Cell:
    """Create a revealed cell with adjacent mines."""
    cell = Cell(neighbor_mine_count=3)
    cell.reveal()
    return cell


# ============================================================================
# Configuration Fixtures
# ============================================================================

@pytest.fixture
def valid_config() -> BoardConfig:
    """Create a valid board configuration."""
    return BoardConfig(9, 9, 10)
