"""
Tile module for the Minesweeper engine.

A tile's content (mine flag and adjacency count) is fixed when the board is
generated. Only its revealed and flagged markers change during play, and the
Board decides when they may change.
"""
from dataclasses import dataclass
from typing import Union

from .state import TileView


# Observation codes shared by the board and the environment
HIDDEN_CODE = -1
FLAGGED_CODE = -2
MINE_CODE = 9


@dataclass
class Tile:
    """
    Mutable record for one grid tile.

    Attributes:
        is_mine: Whether this tile holds a mine.
        adjacent_mine_count: Mines among the neighboring tiles (0-8).
        revealed: Set once by a successful reveal, never cleared.
        flagged: Player marker; never set together with revealed.
    """

    is_mine: bool
    adjacent_mine_count: int = 0
    revealed: bool = False
    flagged: bool = False

    @property
    def hidden(self) -> bool:
        return not (self.revealed or self.flagged)

    def view(self) -> TileView:
        """Freeze the current state into a TileView."""
        return TileView(
            revealed=self.revealed,
            flagged=self.flagged,
            is_mine=self.is_mine,
            adjacent_mine_count=self.adjacent_mine_count,
        )


def observation_code(tile: Union[Tile, TileView], show_mine: bool = False) -> int:
    """
    Encode a tile as one integer of the board observation.

    Args:
        tile: Tile or tile view to encode.
        show_mine: Expose an unflagged mine (terminal phases only).

    Returns:
        9 for an exposed mine, -2 when flagged, -1 when hidden, otherwise
        the adjacency count.
    """
    if tile.flagged:
        return FLAGGED_CODE
    if tile.is_mine and show_mine:
        return MINE_CODE
    if not tile.revealed:
        return HIDDEN_CODE
    return tile.adjacent_mine_count
