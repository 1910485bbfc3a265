"""
Unit tests for the demo replay loop.
"""
import sys
from pathlib import Path

import pytest
from sweeper import Board, GamePhase, GameSession
from agents import RandomAgent

sys.path.insert(0, str(Path(__file__).parent.parent.parent))

import demo


@pytest.fixture(autouse=True)
def instant_frames(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(demo.os, "system", lambda command: 0)
    monkeypatch.setattr(demo.time, "sleep", lambda seconds: None)


class TestPlayOne:
    """Test a single replayed game."""

    def test_mine_free_board_is_won(self, capsys: pytest.CaptureFixture) -> None:
        """Random reveals always clear a board with no mines."""
        session = GameSession(board=Board.from_mines(2, 2, set()))
        phase = demo.play_one(session, RandomAgent(2, 2, seed=0), "t", delay=0)
        assert phase == GamePhase.WIN
        assert "You Win" in capsys.readouterr().out

    def test_every_game_ends(self) -> None:
        """Each replay stops in a terminal phase."""
        outcomes = demo.demo(preset="beginner", games=2, delay=0, seed=3)
        assert sum(outcomes.values()) == 2
        assert set(outcomes) <= {GamePhase.WIN, GamePhase.LOSE}
