"""
Gymnasium environment wrapper for the Minesweeper board.

Provides a standard RL interface that drives a MineBoard through clicks.
"""
from typing import Any, Dict, Optional, Tuple, SupportsFloat

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from .board import BoardConfig, GameState, MineBoard
from .cell import Position


# ============================================================================
# Minesweeper Environment
# ============================================================================

class MinesweeperEnv(gym.Env):
    """
    Gymnasium environment for Minesweeper.

    Observation:
        2D array indexed [y, x] where:
        - -1 = hidden cell
        - 0-8 = revealed cell with adjacent mine count

    Actions:
        Discrete action space of size width * height.
        Action i corresponds to cell (i % width, i // width).

    Rewards:
        - +1 for a click that reveals cells
        - +10 for winning the game
        - -10 for hitting a mine
        - -0.1 for clicking an already revealed cell
    """

    metadata = {"render_modes": ["human", "ansi"], "render_fps": 4}

    def __init__(
        self,
        config: Optional[BoardConfig] = None,
        render_mode: Optional[str] = None,
    ) -> None:
        """
        Initialize the Minesweeper environment.

        Args:
            config: Board configuration (default: 9x9 with 10 mines).
            render_mode: How to render the environment.
        """
        super().__init__()

        self.config = config or BoardConfig()
        self.board = MineBoard.from_config(self.config, rng=self.np_random)
        self.render_mode = render_mode

        self.observation_space = spaces.Box(
            low=-1,
            high=8,
            shape=(self.config.height, self.config.width),
            dtype=np.int8,
        )
        self.action_space = spaces.Discrete(
            self.config.height * self.config.width
        )

        self._steps = 0

    def reset(
        self,
        *,
        seed: Optional[int] = None,
        options: Optional[Dict[str, Any]] = None,
    ) -> Tuple[np.ndarray, Dict[str, Any]]:
        """
        Start a new game on a fresh board.

        Args:
            seed: Random seed for reproducible mine layouts.
            options: Additional options (unused).

        Returns:
            Tuple of (observation, info dict).
        """
        super().reset(seed=seed)
        self.board = MineBoard.from_config(self.config, rng=self.np_random)
        self._steps = 0

        return self.board.get_observation(), self._get_info()

    def step(
        self, action: int
    ) -> Tuple[np.ndarray, SupportsFloat, bool, bool, Dict[str, Any]]:
        """
        Click one cell.

        Args:
            action: Cell index (y * width + x).

        Returns:
            Tuple of (observation, reward, terminated, truncated, info).
        """
        x, y = self.action_to_position(action)
        self._steps += 1

        reward = self._calculate_reward(x, y)
        observation = self.board.get_observation()
        terminated = not self.board.is_playing

        return observation, reward, terminated, False, self._get_info()

    def action_to_position(self, action: int) -> Position:
        """Convert flat action index to (x, y) position."""
        y, x = divmod(int(action), self.config.width)
        return x, y

    def _calculate_reward(self, x: int, y: int) -> float:
        """Click (x, y) and score the outcome."""
        result = self.board.click(x, y)

        if result.state is GameState.WIN:
            return 10.0
        if result.state is GameState.DEAD:
            return -10.0
        if not result.reveals:
            return -0.1
        return 1.0

    def _get_info(self) -> Dict[str, Any]:
        """Get info dictionary for current state."""
        return {
            "steps": self._steps,
            "revealed": self.board.revealed_count,
            "total_safe": self.config.width * self.config.height - self.config.num_mines,
            "game_state": self.board.state.name,
            "valid_actions": len(self.board.get_valid_actions()),
        }

    def render(self) -> Optional[str]:
        """Render the current board state."""
        if self.render_mode == "ansi":
            return self._render_ansi()
        if self.render_mode == "human":
            print(self._render_ansi())
        return None

    def _render_ansi(self) -> str:
        """Render board as ASCII string."""
        lines = []
        for row in self.board.get_observation():
            lines.append(" ".join(
                "." if val == -1 else (" " if val == 0 else str(val))
                for val in row
            ))
        return "\n".join(lines)

    def get_action_mask(self) -> np.ndarray:
        """
        Get mask of valid actions.

        Returns:
            Boolean array where True = hidden cell.
        """
        mask = np.zeros(self.action_space.n, dtype=bool)
        for x, y in self.board.get_valid_actions():
            mask[y * self.config.width + x] = True
        return mask
