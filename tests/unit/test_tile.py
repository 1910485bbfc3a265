"""
Unit tests for Tile and the observation encoding.
"""
from dataclasses import FrozenInstanceError

import pytest
from sweeper import Tile, TileView, observation_code


# ============================================================================
# Tile Record Tests
# ============================================================================

class TestTileRecord:
    """Test tile defaults and views."""

    def test_new_tile_is_hidden(self, hidden_tile: Tile) -> None:
        """A fresh tile is neither revealed nor flagged."""
        assert hidden_tile.hidden is True
        assert hidden_tile.revealed is False
        assert hidden_tile.flagged is False
        assert hidden_tile.adjacent_mine_count == 0

    def test_flagged_tile_is_not_hidden(self, hidden_tile: Tile) -> None:
        """Flagged tiles no longer count as hidden."""
        hidden_tile.flagged = True
        assert hidden_tile.hidden is False

    def test_view_copies_state(self) -> None:
        """A view carries every field of the tile."""
        tile = Tile(is_mine=False, adjacent_mine_count=3, revealed=True)
        assert tile.view() == TileView(
            revealed=True, flagged=False, is_mine=False, adjacent_mine_count=3
        )

    def test_view_is_detached(self, hidden_tile: Tile) -> None:
        """Later tile changes do not leak into an earlier view."""
        view = hidden_tile.view()
        hidden_tile.flagged = True
        assert view.flagged is False
        assert view.hidden is True

    def test_view_is_frozen(self, mine_tile: Tile) -> None:
        """Views cannot be written to."""
        view = mine_tile.view()
        with pytest.raises(FrozenInstanceError):
            view.revealed = True


# ============================================================================
# Observation Encoding Tests
# ============================================================================

class TestObservationCode:
    """Test per-tile observation values."""

    def test_hidden_tile_is_negative_one(self, hidden_tile: Tile) -> None:
        assert observation_code(hidden_tile) == -1

    def test_flagged_tile_is_negative_two(self, hidden_tile: Tile) -> None:
        hidden_tile.flagged = True
        assert observation_code(hidden_tile) == -2

    @pytest.mark.parametrize("count", range(0, 9))
    def test_revealed_tile_matches_adjacent_count(self, count: int) -> None:
        """Revealed tile returns its adjacent mine count."""
        tile = Tile(is_mine=False, adjacent_mine_count=count, revealed=True)
        assert observation_code(tile) == count

    def test_mine_hidden_without_show_mine(self, mine_tile: Tile) -> None:
        """A mine looks like any hidden tile while the game runs."""
        assert observation_code(mine_tile) == -1

    def test_mine_shown_with_show_mine(self, mine_tile: Tile) -> None:
        """A mine is exposed as 9 once mines are shown."""
        assert observation_code(mine_tile, show_mine=True) == 9

    def test_flagged_mine_stays_flagged(self, mine_tile: Tile) -> None:
        """A correctly flagged mine keeps its flag value."""
        mine_tile.flagged = True
        assert observation_code(mine_tile, show_mine=True) == -2

    def test_accepts_views(self, mine_tile: Tile) -> None:
        """Views encode the same way as tiles."""
        assert observation_code(mine_tile.view(), show_mine=True) == 9
