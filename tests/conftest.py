"""
Pytest configuration and shared fixtures.
"""
import pytest
import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from sweeper import Board, BoardConfig, GameSession, Tile


# ============================================================================
# Clock Fixtures
# ============================================================================

class FakeClock:
    """Monotonic clock that only moves when told to."""

    def __init__(self, now: float = 0.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock() -> FakeClock:
    """A clock frozen at t=100s."""
    return FakeClock(100.0)


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def default_board() -> Board:
    """Create a seeded default 10x10 board at 0.2 density."""
    return Board(BoardConfig(seed=1234))


@pytest.fixture
def two_mine_board() -> Board:
    """3x3 board with mines at indices 0 and 4."""
    return Board.from_mines(3, 3, {0, 4})


@pytest.fixture
def corner_mine_board() -> Board:
    """4x4 board with a single mine in the top-left corner."""
    return Board.from_mines(4, 4, {0})


@pytest.fixture
def single_mine_board() -> Board:
    """2x2 board with a mine at index 3."""
    return Board.from_mines(2, 2, {3})


@pytest.fixture
def empty_board() -> Board:
    """3x3 board with no mines."""
    return Board.from_mines(3, 3, set())


# ============================================================================
# Session Fixtures
# ============================================================================

@pytest.fixture
def session(two_mine_board: Board, clock: FakeClock) -> GameSession:
    """Session in MENU over the 3x3 two-mine board."""
    return GameSession(board=two_mine_board, clock=clock)


@pytest.fixture
def running_session(session: GameSession) -> GameSession:
    """Session already started."""
    session.start()
    return session


# ============================================================================
# Tile Fixtures
# ============================================================================

@pytest.fixture
def hidden_tile() -> Tile:
    """Create a hidden safe tile."""
    return Tile(is_mine=False)


@pytest.fixture
def mine_tile() -> Tile:
    """Create a tile holding a mine."""
    return Tile(is_mine=True)
