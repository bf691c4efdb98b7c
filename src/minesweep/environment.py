"""
Gymnasium environment wrapper for Minesweeper.

Exposes a GameSession through the standard RL interface so automated
players can drive the engine.
"""
from typing import Any, Dict, Optional, Tuple, SupportsFloat

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from .difficulty import Difficulty
from .session import GameSession


# ============================================================================
# Constants
# ============================================================================

REWARD_SAFE = 1.0
REWARD_WIN = 10.0
REWARD_MINE = -10.0
REWARD_INVALID = -0.1


# ============================================================================
# Minesweeper Environment
# ============================================================================

class MinesweeperEnv(gym.Env):
    """
    Gymnasium environment for Minesweeper.

    Observation:
        2D array where:
        - -1 = hidden cell
        - -2 = flagged cell
        - 0-8 = revealed cell with adjacent mine count
        - 9 = revealed mine

    Actions:
        Discrete action space of size width * height.
        Action i reveals the cell at (i // width, i % width).

    Rewards:
        - +1 for revealing a safe cell
        - +10 for winning the game
        - -10 for hitting a mine
        - -0.1 for invalid action (already revealed/flagged)
    """

    metadata = {"render_modes": []}

    def __init__(self, difficulty: Optional[Difficulty] = None) -> None:
        """
        Initialize the Minesweeper environment.

        Args:
            difficulty: Board parameters (default: 9x9 with 10 mines).
        """
        super().__init__()

        self.difficulty = difficulty or Difficulty()
        self.session = GameSession(self.difficulty)

        self.observation_space = spaces.Box(
            low=-2,
            high=9,
            shape=(self.difficulty.height, self.difficulty.width),
            dtype=np.int8,
        )
        self.action_space = spaces.Discrete(self.difficulty.cell_count)

        self._steps = 0

    def reset(
        self,
        *,
        seed: Optional[int] = None,
        options: Optional[Dict[str, Any]] = None,
    ) -> Tuple[np.ndarray, Dict[str, Any]]:
        """
        Start a new game.

        Args:
            seed: Random seed for reproducible mine layouts.
            options: Additional options (unused).

        Returns:
            Tuple of (observation, info dict).
        """
        super().reset(seed=seed)
        self.session = GameSession(self.difficulty, rng=self.np_random)
        self._steps = 0
        return self._get_observation(), self._get_info()

    def step(
        self, action: int
    ) -> Tuple[np.ndarray, SupportsFloat, bool, bool, Dict[str, Any]]:
        """
        Execute one action in the environment.

        Args:
            action: Cell index to reveal (row * width + col).

        Returns:
            Tuple of (observation, reward, terminated, truncated, info).
        """
        row, col = self._action_to_position(action)
        self._steps += 1

        reward = self._calculate_reward(row, col)
        terminated = self.session.is_over

        return self._get_observation(), reward, terminated, False, self._get_info()

    def _action_to_position(self, action: int) -> Tuple[int, int]:
        """Convert flat action index to (row, col) position."""
        row = int(action) // self.difficulty.width
        col = int(action) % self.difficulty.width
        return row, col

    def _calculate_reward(self, row: int, col: int) -> float:
        """Reveal a cell and score the result."""
        if not self.session.board.cell_at((row, col)).is_hidden:
            return REWARD_INVALID

        self.session.reveal((row, col))

        if self.session.is_won:
            return REWARD_WIN
        if self.session.is_lost:
            return REWARD_MINE
        return REWARD_SAFE

    def _get_observation(self) -> np.ndarray:
        return self.session.snapshot().to_observation()

    def _get_info(self) -> Dict[str, Any]:
        """Get info dictionary for current state."""
        return {
            "steps": self._steps,
            "revealed": self.session.board.safe_revealed,
            "total_safe": self.difficulty.safe_cell_count,
            "game_state": self.session.status.name,
            "valid_actions": int(self.get_action_mask().sum()),
        }

    def get_action_mask(self) -> np.ndarray:
        """
        Get mask of valid actions.

        Returns:
            Boolean array where True = hidden, unflagged cell.
        """
        mask = np.zeros(self.action_space.n, dtype=bool)
        board = self.session.board
        for row, col in board.iter_coords():
            if board.cell_at((row, col)).is_hidden:
                mask[row * self.difficulty.width + col] = True
        return mask
