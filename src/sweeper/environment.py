"""
Gymnasium environment wrapper for the Minesweeper engine.

Translates flat integer actions into session actions, giving agents the
same reveal/flag/chord vocabulary a mouse-driven front end would use.
"""
import logging
import operator
from dataclasses import replace
from typing import Any, Dict, Optional, Tuple, SupportsFloat

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from .board import ActionResult, BoardConfig
from .render import render_text
from .session import Action, ActionKind, GameSession
from .state import GamePhase


logger = logging.getLogger(__name__)

# Action blocks, in order: action // (width * height) selects the kind
TILE_ACTIONS = (ActionKind.REVEAL, ActionKind.FLAG, ActionKind.CHORD)
REJECTED_REWARD = -0.1


# ============================================================================
# Minesweeper Environment
# ============================================================================

class MinesweeperEnv(gym.Env):
    """
    Gymnasium environment for Minesweeper.

    Observation:
        2D array where:
        - -1 = hidden tile
        - -2 = flagged tile
        - 0-8 = revealed tile with adjacent mine count
        - 9 = mine, only after the game is over

    Actions:
        Discrete action space of size 3 * width * height.
        Action a targets tile a % n with kind a // n, where kinds are
        reveal (0), flag (1) and chord (2).

    Rewards:
        - +1 for an accepted reveal or chord
        - +10 for winning the game
        - -10 for hitting a mine
        - 0 for toggling a flag
        - -0.1 for a rejected action, including one outside the action
          space, which leaves the game untouched
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
            config: Board configuration (default: 10x10 at 0.2 density).
            render_mode: How to render the environment.
        """
        super().__init__()

        self.config = config or BoardConfig()
        self.session = GameSession(self.config)
        self.render_mode = render_mode
        self.num_tiles = self.config.size

        self.observation_space = spaces.Box(
            low=-2,
            high=9,
            shape=(self.config.height, self.config.width),
            dtype=np.int8,
        )
        self.action_space = spaces.Discrete(len(TILE_ACTIONS) * self.num_tiles)

        self._steps = 0

    def reset(
        self,
        *,
        seed: Optional[int] = None,
        options: Optional[Dict[str, Any]] = None,
    ) -> Tuple[np.ndarray, Dict[str, Any]]:
        """
        Reset the environment and start a new game.

        Args:
            seed: Random seed for the next boards.
            options: Additional options (unused).

        Returns:
            Tuple of (observation, info dict).
        """
        super().reset(seed=seed)
        if seed is not None:
            self.session = GameSession(replace(self.config, seed=seed))
        self.session.reset()
        self.session.start()
        self._steps = 0

        return self.session.observation(), self._get_info()

    def step(
        self, action: int
    ) -> Tuple[np.ndarray, SupportsFloat, bool, bool, Dict[str, Any]]:
        """
        Execute one action in the environment.

        Args:
            action: Flat action index (kind * n + tile).

        Returns:
            Tuple of (observation, reward, terminated, truncated, info).
        """
        self._steps += 1
        if self.is_valid_action(action):
            reward = self._calculate_reward(self.decode_action(action))
        else:
            logger.warning("Rejected action %r outside the action space", action)
            reward = REJECTED_REWARD

        observation = self.session.observation()
        terminated = self.session.phase.is_terminal
        truncated = False

        return observation, reward, terminated, truncated, self._get_info()

    def is_valid_action(self, action: int) -> bool:
        """Check if action is an integer in [0, action_space.n)."""
        if isinstance(action, bool):
            return False
        try:
            flat = operator.index(action)
        except TypeError:
            return False
        return 0 <= flat < self.action_space.n

    def decode_action(self, action: int) -> Action:
        """
        Convert a flat action index to a session action.

        Raises:
            ValueError: If action lies outside the action space.
        """
        if not self.is_valid_action(action):
            raise ValueError(
                f"Action {action!r} outside [0, {self.action_space.n})"
            )
        kind_index, tile = divmod(operator.index(action), self.num_tiles)
        return Action(TILE_ACTIONS[kind_index], tile)

    def encode_action(self, kind: ActionKind, tile: int) -> int:
        """Convert an action kind and tile index to a flat action."""
        return TILE_ACTIONS.index(kind) * self.num_tiles + tile

    def _calculate_reward(self, action: Action) -> float:
        """Apply an action and score its outcome."""
        result = self.session.dispatch(action)

        if result == ActionResult.REJECTED:
            return REJECTED_REWARD
        if result == ActionResult.CLEARED:
            return 10.0
        if result == ActionResult.MINE_HIT:
            return -10.0
        if action.kind == ActionKind.FLAG:
            return 0.0
        return 1.0

    def _get_info(self) -> Dict[str, Any]:
        """Get info dictionary for current state."""
        snapshot = self.session.snapshot()
        revealed = sum(1 for tile in snapshot.tiles if tile.revealed)

        return {
            "steps": self._steps,
            "revealed": revealed,
            "total_safe": len(snapshot.tiles) - snapshot.total_mines,
            "game_state": self.session.phase.name,
            "remaining_mines": self.session.remaining_mines,
            "valid_actions": int(self.get_action_mask().sum()),
        }

    def render(self) -> Optional[str]:
        """Render the current board state."""
        if self.render_mode == "ansi":
            return render_text(self.session.snapshot())
        if self.render_mode == "human":
            print(render_text(self.session.snapshot()))
        return None

    def get_action_mask(self) -> np.ndarray:
        """
        Get mask of applicable actions.

        Returns:
            Boolean array where True = the action would be accepted.
        """
        mask = np.zeros(self.action_space.n, dtype=bool)
        if self.session.phase != GamePhase.RUNNING:
            return mask

        for tile_index, tile in enumerate(self.session.snapshot().tiles):
            if tile.hidden:
                mask[self.encode_action(ActionKind.REVEAL, tile_index)] = True
            if not tile.revealed:
                mask[self.encode_action(ActionKind.FLAG, tile_index)] = True
            elif self.session.board.can_chord(tile_index):
                mask[self.encode_action(ActionKind.CHORD, tile_index)] = True
        return mask

    def get_reveal_mask(self) -> np.ndarray:
        """Mask restricted to reveal actions, for reveal-only agents."""
        mask = self.get_action_mask()
        mask[self.num_tiles:] = False
        return mask
