"""
Game session module for the Minesweeper engine.

Composes a Board and a Stopwatch behind the phase state machine
(MENU -> RUNNING -> WIN/LOSE -> MENU). All player actions go through a
GameSession; actions issued in a phase that does not permit them are
rejected without changing anything.
"""
import logging
import random
import time
from dataclasses import dataclass
from datetime import timedelta
from enum import Enum, auto
from typing import Callable, Optional

import numpy as np

from .board import ActionResult, Board, BoardConfig
from .state import GamePhase, SessionSnapshot
from .stopwatch import Stopwatch


logger = logging.getLogger(__name__)


# ============================================================================
# Actions
# ============================================================================

class ActionKind(Enum):
    """Player actions understood by a session."""

    START = auto()
    RESET = auto()
    REVEAL = auto()
    FLAG = auto()
    CHORD = auto()

    @property
    def targets_tile(self) -> bool:
        """Check if the action needs a tile index."""
        return self in (ActionKind.REVEAL, ActionKind.FLAG, ActionKind.CHORD)


@dataclass(frozen=True)
class Action:
    """A single player action, optionally aimed at a tile."""

    kind: ActionKind
    index: Optional[int] = None


# ============================================================================
# Game Session
# ============================================================================

class GameSession:
    """
    Single entry point for all player actions.

    The session exclusively owns its board and stopwatch. Renderers should
    read state through snapshot() rather than the board itself.
    """

    def __init__(
        self,
        config: Optional[BoardConfig] = None,
        clock: Callable[[], float] = time.monotonic,
        board: Optional[Board] = None,
    ) -> None:
        """
        Create a session in the MENU phase.

        Args:
            config: Board configuration, ignored for the first board when
                board is given.
            clock: Monotonic clock for the stopwatch.
            board: Pre-built first board, e.g. a fixed mine layout.
        """
        if config is None:
            config = board.config if board is not None else BoardConfig()
        self.config = config
        self._rng = random.Random(config.seed)
        self._board = board if board is not None else self._new_board()
        self._stopwatch = Stopwatch(clock)
        self._phase = GamePhase.MENU

    def _new_board(self) -> Board:
        return Board(self.config, rng=self._rng)

    # ========================================================================
    # Phase Transitions
    # ========================================================================

    def start(self) -> bool:
        """Move from MENU to RUNNING and start the stopwatch."""
        if self._phase != GamePhase.MENU:
            return False
        self._stopwatch.start()
        self._set_phase(GamePhase.RUNNING)
        return True

    def reset(self) -> bool:
        """Regenerate the board, idle the stopwatch and return to MENU."""
        self._board = self._new_board()
        self._stopwatch.reset()
        self._set_phase(GamePhase.MENU)
        return True

    def _finish(self, phase: GamePhase) -> None:
        self._stopwatch.stop()
        self._set_phase(phase)
        logger.info(
            "Game over: %s after %s", phase.name, self._stopwatch.elapsed()
        )

    def _set_phase(self, phase: GamePhase) -> None:
        if phase != self._phase:
            logger.debug("Phase %s -> %s", self._phase.name, phase.name)
        self._phase = phase

    # ========================================================================
    # Tile Actions
    # ========================================================================

    def reveal(self, index: int) -> ActionResult:
        """Reveal one tile. Only valid while RUNNING."""
        if self._phase != GamePhase.RUNNING:
            return ActionResult.REJECTED
        return self._apply(self._board.reveal(index))

    def chord(self, index: int) -> ActionResult:
        """Reveal the unflagged neighbors of a satisfied number tile."""
        if self._phase != GamePhase.RUNNING:
            return ActionResult.REJECTED
        return self._apply(self._board.chord(index))

    def toggle_flag(self, index: int) -> bool:
        """Toggle a flag. Flagging never ends the game."""
        if self._phase != GamePhase.RUNNING:
            return False
        return self._board.toggle_flag(index)

    def _apply(self, result: ActionResult) -> ActionResult:
        if result == ActionResult.MINE_HIT:
            self._finish(GamePhase.LOSE)
        elif result == ActionResult.CLEARED:
            self._finish(GamePhase.WIN)
        return result

    def dispatch(self, action: Action) -> ActionResult:
        """
        Route an action to the matching method.

        Args:
            action: Action to apply.

        Returns:
            The board outcome for reveal and chord; ACCEPTED or REJECTED
            for the other actions.
        """
        if action.kind == ActionKind.START:
            return _as_result(self.start())
        if action.kind == ActionKind.RESET:
            return _as_result(self.reset())
        if action.index is None:
            return ActionResult.REJECTED
        if action.kind == ActionKind.REVEAL:
            return self.reveal(action.index)
        if action.kind == ActionKind.CHORD:
            return self.chord(action.index)
        return _as_result(self.toggle_flag(action.index))

    # ========================================================================
    # State Accessors
    # ========================================================================

    @property
    def phase(self) -> GamePhase:
        return self._phase

    @property
    def board(self) -> Board:
        """
        The current board.

        Its tiles are exposed as TileView copies, so reading it cannot
        change the game. Mutate it only through session actions.
        """
        return self._board

    @property
    def stopwatch(self) -> Stopwatch:
        return self._stopwatch

    @property
    def remaining_mines(self) -> int:
        return self._board.remaining_mines

    def elapsed(self) -> Optional[timedelta]:
        return self._stopwatch.elapsed()

    def snapshot(self) -> SessionSnapshot:
        """Capture the outbound state in one immutable value."""
        board = self._board
        return SessionSnapshot(
            phase=self._phase,
            width=board.width,
            height=board.height,
            tiles=board.tiles,
            total_mines=board.total_mines,
            remaining_mines=board.remaining_mines,
            elapsed=self._stopwatch.elapsed(),
        )

    def observation(self) -> np.ndarray:
        """Board observation, exposing mines once the game is over."""
        return self._board.get_observation(show_mines=self._phase.is_terminal)


def _as_result(applied: bool) -> ActionResult:
    return ActionResult.ACCEPTED if applied else ActionResult.REJECTED
