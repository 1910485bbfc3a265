"""
Outbound state types for the Minesweeper engine.

Immutable views handed to rendering and input collaborators so they never
touch the session's board directly.
"""
from dataclasses import dataclass
from datetime import timedelta
from enum import Enum, auto
from typing import Optional, Tuple


class GamePhase(Enum):
    """Coarse game state."""

    MENU = auto()
    RUNNING = auto()
    LOSE = auto()
    WIN = auto()

    @property
    def is_terminal(self) -> bool:
        """Check if the game is over."""
        return self in (GamePhase.LOSE, GamePhase.WIN)


@dataclass(frozen=True)
class TileView:
    """Read-only copy of one tile."""

    revealed: bool
    flagged: bool
    is_mine: bool
    adjacent_mine_count: int

    @property
    def hidden(self) -> bool:
        """Check if tile is neither revealed nor flagged."""
        return not (self.revealed or self.flagged)


@dataclass(frozen=True)
class SessionSnapshot:
    """
    Everything a renderer needs for one frame.

    Attributes:
        phase: Current game phase.
        width: Number of columns.
        height: Number of rows.
        tiles: Tile views in row-major order.
        total_mines: Mines placed on the board.
        remaining_mines: Mines minus flags.
        elapsed: Stopwatch reading, None before the game starts.
    """

    phase: GamePhase
    width: int
    height: int
    tiles: Tuple[TileView, ...]
    total_mines: int
    remaining_mines: int
    elapsed: Optional[timedelta]

    def tile_at(self, row: int, col: int) -> TileView:
        """Get the tile view at (row, col)."""
        return self.tiles[row * self.width + col]
