"""
Random agent for Minesweeper.

Serves as a baseline by selecting random applicable actions.
"""
from typing import Optional

import numpy as np

from .base_agent import BaseAgent


# ============================================================================
# Random Agent
# ============================================================================

class RandomAgent(BaseAgent):
    """
    Agent that selects actions uniformly at random.

    By default it only reveals, since random flag toggles never make
    progress. With reveal_only off it also chords wherever a chord applies.
    """

    def __init__(
        self,
        board_height: int = 10,
        board_width: int = 10,
        seed: Optional[int] = None,
        reveal_only: bool = True,
    ) -> None:
        """
        Initialize the random agent.

        Args:
            board_height: Number of rows in the board.
            board_width: Number of columns in the board.
            seed: Random seed for reproducibility.
            reveal_only: Ignore flag and chord actions.
        """
        super().__init__(board_height, board_width)
        self.rng = np.random.default_rng(seed)
        self.reveal_only = reveal_only

    def select_action(
        self,
        observation: np.ndarray,
        valid_actions: Optional[np.ndarray] = None,
    ) -> int:
        """
        Select a random applicable action.

        Args:
            observation: 2D array of tile states.
            valid_actions: Optional mask of applicable actions.

        Returns:
            Random action index from the applicable actions.
        """
        if valid_actions is None:
            valid_actions = self.get_valid_actions_from_obs(observation)

        mask = np.array(valid_actions, dtype=bool)
        if self.reveal_only:
            mask[self.total_cells:] = False
        else:
            # Flag toggles are excluded; chords stay
            mask[self.total_cells:2 * self.total_cells] = False

        valid_indices = np.flatnonzero(mask)

        if len(valid_indices) == 0:
            # No valid actions, return any action (will be rejected)
            return 0

        return int(self.rng.choice(valid_indices))
