"""
Base agent interface for automated Minesweeper players.

Defines the abstract interface that all agents must implement.
"""
from abc import ABC, abstractmethod
from typing import Optional, Tuple

import numpy as np


# ============================================================================
# Base Agent Interface
# ============================================================================

class BaseAgent(ABC):
    """
    Abstract base class for Minesweeper agents.

    All agents must implement the select_action method to choose
    which cell to click based on the current observation.
    """

    def __init__(self, board_width: int, board_height: int) -> None:
        """
        Initialize the agent.

        Args:
            board_width: Number of columns in the board.
            board_height: Number of rows in the board.
        """
        self.board_width = board_width
        self.board_height = board_height
        self.total_cells = board_width * board_height

    @abstractmethod
    def select_action(
        self,
        observation: np.ndarray,
        valid_actions: Optional[np.ndarray] = None,
    ) -> int:
        """
        Select an action based on the current observation.

        Args:
            observation: 2D array of cell states indexed [y, x].
            valid_actions: Optional mask of valid actions.

        Returns:
            Action index (y * width + x).
        """
        pass

    def action_to_position(self, action: int) -> Tuple[int, int]:
        """Convert flat action index to (x, y) position."""
        y, x = divmod(int(action), self.board_width)
        return x, y

    def position_to_action(self, x: int, y: int) -> int:
        """Convert (x, y) position to flat action index."""
        return y * self.board_width + x

    def get_valid_actions_from_obs(self, observation: np.ndarray) -> np.ndarray:
        """
        Get valid actions mask from observation.

        Returns:
            Boolean mask where True = hidden cell.
        """
        return observation.flatten() == -1

    def reset(self) -> None:
        """Reset agent state for a new game."""
        pass
