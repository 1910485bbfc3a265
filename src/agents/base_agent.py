"""
Base agent interface for Minesweeper.

Defines the abstract interface that all agents must implement.
"""
from abc import ABC, abstractmethod
from typing import Optional, Tuple

import numpy as np


# Action blocks of the environment: reveal, flag, chord
NUM_ACTION_KINDS = 3


# ============================================================================
# Base Agent Interface
# ============================================================================

class BaseAgent(ABC):
    """
    Abstract base class for Minesweeper agents.

    All agents must implement select_action to choose the next flat
    environment action based on the current observation.
    """

    def __init__(self, board_height: int, board_width: int) -> None:
        """
        Initialize the agent.

        Args:
            board_height: Number of rows in the board.
            board_width: Number of columns in the board.
        """
        self.board_height = board_height
        self.board_width = board_width
        self.total_cells = board_height * board_width

    @abstractmethod
    def select_action(
        self,
        observation: np.ndarray,
        valid_actions: Optional[np.ndarray] = None,
    ) -> int:
        """
        Select an action based on the current observation.

        Args:
            observation: 2D array of tile states.
            valid_actions: Optional mask of applicable actions.

        Returns:
            Flat action index (kind * total_cells + row * width + col).
        """
        pass

    def action_to_position(self, action: int) -> Tuple[int, int]:
        """Convert a flat action index to the targeted (row, col)."""
        tile = action % self.total_cells
        return tile // self.board_width, tile % self.board_width

    def position_to_action(self, row: int, col: int, kind: int = 0) -> int:
        """Convert (row, col) and an action kind to a flat action index."""
        return kind * self.total_cells + row * self.board_width + col

    def get_valid_actions_from_obs(self, observation: np.ndarray) -> np.ndarray:
        """
        Get a reveal-only action mask from an observation.

        Args:
            observation: 2D array of tile states.

        Returns:
            Boolean mask over all actions where True = hidden tile reveal.
        """
        mask = np.zeros(NUM_ACTION_KINDS * self.total_cells, dtype=bool)
        mask[:self.total_cells] = observation.flatten() == -1
        return mask

    def reset(self) -> None:
        """Reset agent state for new episode."""
        pass
