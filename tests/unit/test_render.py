"""
Unit tests for text rendering and command parsing.
"""
from datetime import timedelta

import pytest
from sweeper import (
    Action,
    ActionKind,
    Board,
    GameSession,
    format_clock,
    parse_command,
    render_text,
    status_line,
)


@pytest.fixture
def small_session(clock) -> GameSession:
    """Running session on a 2x2 board with a mine at index 3."""
    session = GameSession(board=Board.from_mines(2, 2, {3}), clock=clock)
    session.start()
    return session


# ============================================================================
# Clock Formatting Tests
# ============================================================================

class TestFormatClock:
    """Test stopwatch display formatting."""

    @pytest.mark.parametrize("seconds,expected", [
        (0, "0:00"),
        (9.9, "0:09"),
        (65.7, "1:05"),
        (3600, "60:00"),
    ])
    def test_minutes_and_seconds(self, seconds: float, expected: str) -> None:
        """Readings render as M:SS, truncating fractions."""
        assert format_clock(timedelta(seconds=seconds)) == expected

    def test_idle_clock(self) -> None:
        """No reading renders as a placeholder."""
        assert format_clock(None) == "-:--"


# ============================================================================
# Board Rendering Tests
# ============================================================================

class TestRenderText:
    """Test glyph selection and fog of war."""

    def test_running_hides_mines(self, small_session: GameSession) -> None:
        """Mines stay hidden while the game runs."""
        small_session.reveal(0)
        text = render_text(small_session.snapshot(), with_status=False)
        assert text == "1 .\n. ."

    def test_flag_glyph_while_running(self, small_session: GameSession) -> None:
        """Flags show as F during play."""
        small_session.toggle_flag(3)
        text = render_text(small_session.snapshot(), with_status=False)
        assert text == ". .\n. F"

    def test_win_shows_flagged_mine(self, small_session: GameSession) -> None:
        """A correctly flagged mine is drawn as @ after the game."""
        small_session.toggle_flag(3)
        for index in (0, 1, 2):
            small_session.reveal(index)
        text = render_text(small_session.snapshot(), with_status=False)
        assert text == "1 1\n1 @"

    def test_loss_shows_mines_and_wrong_flags(
        self, small_session: GameSession
    ) -> None:
        """After a loss unflagged mines are * and wrong flags stay F."""
        small_session.toggle_flag(0)
        small_session.reveal(3)
        text = render_text(small_session.snapshot(), with_status=False)
        assert text == "F .\n. *"

    def test_status_line(self, small_session: GameSession, clock) -> None:
        """Status line shows phase, mine count and time."""
        clock.advance(75)
        small_session.toggle_flag(0)
        small_session.toggle_flag(1)
        line = status_line(small_session.snapshot())
        assert line == "Running | Minecount: -1 | Time: 1:15"

    def test_render_includes_status(self, small_session: GameSession) -> None:
        """The status line comes first by default."""
        small_session.reveal(3)
        lines = render_text(small_session.snapshot()).splitlines()
        assert lines[0].startswith("You Lost")
        assert len(lines) == 3

    def test_menu_status(self, clock) -> None:
        """Menu sessions have no clock reading yet."""
        session = GameSession(board=Board.from_mines(2, 2, {3}), clock=clock)
        assert status_line(session.snapshot()) == "Menu | Minecount: 1 | Time: -:--"


# ============================================================================
# Command Parsing Tests
# ============================================================================

class TestParseCommand:
    """Test terminal command translation."""

    @pytest.mark.parametrize("text,kind", [
        ("s", ActionKind.START),
        ("start", ActionKind.START),
        ("n", ActionKind.RESET),
        ("RESET", ActionKind.RESET),
    ])
    def test_phase_commands(self, text: str, kind: ActionKind) -> None:
        """Commands without coordinates."""
        assert parse_command(text, 5) == Action(kind)

    @pytest.mark.parametrize("text,kind", [
        ("r 1 2", ActionKind.REVEAL),
        ("f 1 2", ActionKind.FLAG),
        ("chord 1 2", ActionKind.CHORD),
    ])
    def test_tile_commands_are_row_major(self, text: str, kind: ActionKind) -> None:
        """Row and column become row * width + col."""
        assert parse_command(text, 5) == Action(kind, 7)

    def test_off_grid_column_maps_to_invalid_index(self) -> None:
        """Columns past the width never alias onto the next row."""
        assert parse_command("r 0 5", 5) == Action(ActionKind.REVEAL, -1)

    @pytest.mark.parametrize("text", ["", "x", "r 1", "r a b", "s 1"])
    def test_bad_commands_raise(self, text: str) -> None:
        """Malformed input raises ValueError."""
        with pytest.raises(ValueError):
            parse_command(text, 5)
