"""
Minesweeper engine module.

Provides the board simulation, stopwatch and game session state machine,
plus text rendering and a gymnasium environment on top of them.
"""
from .tile import Tile, observation_code
from .board import (
    ActionResult,
    Board,
    BoardConfig,
    TileIndexError,
    DEFAULT,
    BEGINNER,
    INTERMEDIATE,
    EXPERT,
)
from .stopwatch import Stopwatch, StopwatchState
from .state import GamePhase, SessionSnapshot, TileView
from .session import Action, ActionKind, GameSession
from .render import format_clock, render_text, status_line
from .commands import parse_command
from .environment import MinesweeperEnv

__all__ = [
    "Tile",
    "observation_code",
    "ActionResult",
    "Board",
    "BoardConfig",
    "TileIndexError",
    "DEFAULT",
    "BEGINNER",
    "INTERMEDIATE",
    "EXPERT",
    "Stopwatch",
    "StopwatchState",
    "GamePhase",
    "SessionSnapshot",
    "TileView",
    "Action",
    "ActionKind",
    "GameSession",
    "format_clock",
    "render_text",
    "status_line",
    "parse_command",
    "MinesweeperEnv",
]
