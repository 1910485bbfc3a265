"""
Board module for the Minesweeper engine.

Implements the tile grid with Bernoulli mine placement, adjacency counts,
and the reveal, flag and chord mutations. Tiles are stored row-major:
index = row * width + col.
"""
import logging
import operator
import random
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Iterable, List, Optional, Sequence, Tuple

import numpy as np

from .state import TileView
from .tile import Tile, observation_code


logger = logging.getLogger(__name__)


# ============================================================================
# Constants
# ============================================================================

class ActionResult(Enum):
    """Outcome of a reveal or chord action."""

    REJECTED = auto()
    ACCEPTED = auto()
    MINE_HIT = auto()
    CLEARED = auto()


class TileIndexError(IndexError):
    """Raised for a tile index outside the grid when strict checking is on."""


@dataclass
class BoardConfig:
    """
    Configuration for a Minesweeper board.

    Attributes:
        width: Number of columns.
        height: Number of rows.
        mine_probability: Chance that any single tile holds a mine.
        seed: Seed for the random generator, None for a fresh one.
        strict_indices: Raise TileIndexError on out-of-range indices
            instead of rejecting the action.
    """

    width: int = 10
    height: int = 10
    mine_probability: float = 0.2
    seed: Optional[int] = None
    strict_indices: bool = False

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        if self.width < 1 or self.height < 1:
            raise ValueError("Board dimensions must be positive")
        if not 0.0 <= self.mine_probability <= 1.0:
            raise ValueError("Mine probability must lie in [0, 1]")

    @property
    def size(self) -> int:
        """Total number of tiles."""
        return self.width * self.height


# Preset boards, as size and mine density
DEFAULT = BoardConfig(10, 10, 0.2)
BEGINNER = BoardConfig(9, 9, 0.12)
INTERMEDIATE = BoardConfig(16, 16, 0.16)
EXPERT = BoardConfig(30, 16, 0.21)


def _as_index(value) -> Optional[int]:
    """Coerce an integer-like value (numpy ints included) to int."""
    if isinstance(value, bool):
        return None
    try:
        return operator.index(value)
    except TypeError:
        return None


# ============================================================================
# Board Class
# ============================================================================

@dataclass
class Board:
    """
    Minesweeper game board.

    Owns the tile grid and applies reveal, flag and chord actions. Revealing
    never flood-fills: each action touches at most the target tile and, for
    a chord, its direct neighbors. Callers read tiles as TileView copies, so
    every mutation goes through the methods below.
    """

    config: BoardConfig = field(default_factory=BoardConfig)
    rng: Optional[random.Random] = field(default=None, repr=False)
    _tiles: List[Tile] = field(default_factory=list, init=False, repr=False)
    _total_mines: int = field(default=0, init=False)
    _revealed_count: int = field(default=0, init=False)

    def __post_init__(self) -> None:
        """Sample a mine layout and build the grid."""
        if self.rng is None:
            self.rng = random.Random(self.config.seed)
        self._build(self._sample_layout())

    @classmethod
    def from_mines(
        cls,
        width: int,
        height: int,
        mine_indices: Iterable[int],
        strict_indices: bool = False,
    ) -> "Board":
        """
        Build a board with a fixed mine layout.

        Args:
            width: Number of columns.
            height: Number of rows.
            mine_indices: Row-major indices of the tiles holding mines.
            strict_indices: Passed through to the board configuration.

        Returns:
            Board with adjacency counts computed for the given layout.
        """
        size = width * height
        mines = set(mine_indices)
        for index in mines:
            if not 0 <= index < size:
                raise ValueError(f"Mine index {index} outside board of {size}")
        config = BoardConfig(
            width=width,
            height=height,
            mine_probability=len(mines) / size if size else 0.0,
            strict_indices=strict_indices,
        )
        return cls._with_layout(config, [index in mines for index in range(size)])

    @classmethod
    def _with_layout(cls, config: BoardConfig, layout: Sequence[bool]) -> "Board":
        board = cls(config)
        board._build(layout)
        return board

    # ========================================================================
    # Grid Generation (Low-level)
    # ========================================================================

    def _sample_layout(self) -> List[bool]:
        """Sample one Bernoulli trial per tile."""
        probability = self.config.mine_probability
        return [self.rng.random() < probability for _ in range(self.config.size)]

    def _build(self, layout: Sequence[bool]) -> None:
        """Create hidden tiles with adjacency fixed from the layout."""
        self._tiles = [
            Tile(
                is_mine=is_mine,
                adjacent_mine_count=sum(
                    1 for neighbor in self.neighbors(index) if layout[neighbor]
                ),
            )
            for index, is_mine in enumerate(layout)
        ]
        self._total_mines = sum(1 for is_mine in layout if is_mine)
        self._revealed_count = 0
        logger.debug(
            "Generated %dx%d board with %d mines",
            self.width, self.height, self._total_mines,
        )

    # ========================================================================
    # Index Utilities (Low-level)
    # ========================================================================

    def is_valid_index(self, index: int) -> bool:
        """Check if index is an integer within board bounds."""
        value = _as_index(index)
        return value is not None and 0 <= value < self.size

    def _resolve(self, index: int, action: str) -> Optional[int]:
        """
        Normalize an index, raising or logging when it is unusable.

        Returns:
            The index as a plain int, or None if the action must be rejected.
        """
        if self.is_valid_index(index):
            return operator.index(index)
        if self.config.strict_indices:
            raise TileIndexError(
                f"{action}: tile index {index!r} outside [0, {self.size})"
            )
        logger.warning("Rejected %s on out-of-range tile %r", action, index)
        return None

    def index_of(self, row: int, col: int) -> int:
        """Convert (row, col) to a row-major tile index."""
        return row * self.width + col

    def position(self, index: int) -> Tuple[int, int]:
        """Convert a row-major tile index to (row, col)."""
        return divmod(index, self.width)

    def neighbors(self, index: int) -> List[int]:
        """
        Get valid neighboring tile indices.

        Args:
            index: Index of the center tile.

        Returns:
            Up to 8 indices, clipped at the grid edges, in row-major order.
        """
        index = self._resolve(index, "neighbors")
        if index is None:
            return []
        row, col = self.position(index)
        result = []
        for delta_row in (-1, 0, 1):
            for delta_col in (-1, 0, 1):
                if delta_row == 0 and delta_col == 0:
                    continue
                new_row = row + delta_row
                new_col = col + delta_col
                if 0 <= new_row < self.height and 0 <= new_col < self.width:
                    result.append(self.index_of(new_row, new_col))
        return result

    # ========================================================================
    # Game Actions (Mid-level)
    # ========================================================================

    def reveal(self, index: int) -> ActionResult:
        """
        Reveal the tile at the given index.

        A mine is left unrevealed and reported as MINE_HIT. Neighbors are
        never revealed automatically, even around a zero.

        Args:
            index: Tile index to reveal.

        Returns:
            REJECTED if the tile is revealed, flagged or out of range,
            MINE_HIT for a mine, CLEARED if every safe tile is now
            revealed, ACCEPTED otherwise.
        """
        index = self._resolve(index, "reveal")
        if index is None:
            return ActionResult.REJECTED
        tile = self._tiles[index]
        if not tile.hidden:
            return ActionResult.REJECTED
        if tile.is_mine:
            return ActionResult.MINE_HIT
        self._uncover(tile)
        return self._progress()

    def toggle_flag(self, index: int) -> bool:
        """
        Toggle the flag on a tile.

        Returns:
            True if the flag was toggled, False for a revealed or
            out-of-range tile.
        """
        index = self._resolve(index, "toggle_flag")
        if index is None:
            return False
        tile = self._tiles[index]
        if tile.revealed:
            return False
        tile.flagged = not tile.flagged
        return True

    def chord(self, index: int) -> ActionResult:
        """
        Reveal all unflagged neighbors if the flag count matches.

        Applies only to a revealed safe tile whose flagged-neighbor count
        equals its adjacency count. Every unflagged neighbor is visited in a
        single pass; flagged neighbors are skipped without being inspected.

        Args:
            index: Index of the revealed center tile.

        Returns:
            REJECTED if the chord does not apply, MINE_HIT if any visited
            neighbor is a mine, otherwise CLEARED or ACCEPTED.
        """
        if not self.can_chord(index):
            return ActionResult.REJECTED

        mine_hit = False
        for neighbor_index in self.neighbors(index):
            neighbor = self._tiles[neighbor_index]
            if not neighbor.hidden:
                continue
            if neighbor.is_mine:
                mine_hit = True
                continue
            self._uncover(neighbor)

        if mine_hit:
            return ActionResult.MINE_HIT
        return self._progress()

    def can_chord(self, index: int) -> bool:
        """Check if chord action is valid."""
        index = self._resolve(index, "chord")
        if index is None:
            return False
        tile = self._tiles[index]
        if not tile.revealed or tile.is_mine:
            return False
        return self.count_adjacent_flags(index) == tile.adjacent_mine_count

    def count_adjacent_flags(self, index: int) -> int:
        """Count flagged tiles adjacent to index."""
        return sum(
            1 for neighbor in self.neighbors(index)
            if self._tiles[neighbor].flagged
        )

    def _uncover(self, tile: Tile) -> None:
        tile.revealed = True
        self._revealed_count += 1

    def _progress(self) -> ActionResult:
        """Report CLEARED once every safe tile is revealed."""
        if self.is_cleared:
            return ActionResult.CLEARED
        return ActionResult.ACCEPTED

    # ========================================================================
    # State Accessors (High-level)
    # ========================================================================

    @property
    def width(self) -> int:
        """Number of columns."""
        return self.config.width

    @property
    def height(self) -> int:
        """Number of rows."""
        return self.config.height

    @property
    def size(self) -> int:
        """Total number of tiles."""
        return self.config.size

    @property
    def total_mines(self) -> int:
        """Mines placed at generation."""
        return self._total_mines

    @property
    def tiles(self) -> Tuple[TileView, ...]:
        """Read-only views of all tiles in row-major order."""
        return tuple(tile.view() for tile in self._tiles)

    @property
    def flag_count(self) -> int:
        """Number of flagged tiles."""
        return sum(1 for tile in self._tiles if tile.flagged)

    @property
    def remaining_mines(self) -> int:
        """Mines minus flags; negative when over-flagged."""
        return self._total_mines - self.flag_count

    @property
    def is_cleared(self) -> bool:
        """Check if every non-mine tile is revealed."""
        return self._revealed_count == self.size - self._total_mines

    def get_tile(self, index: int) -> Optional[TileView]:
        """Get a view of the tile at index, or None if invalid."""
        if not self.is_valid_index(index):
            return None
        return self._tiles[operator.index(index)].view()

    def get_observation(self, show_mines: bool = False) -> np.ndarray:
        """
        Get board state as a numpy array.

        Args:
            show_mines: Expose unflagged mines as 9.

        Returns:
            2D int8 array of shape (height, width) where:
                -1 = hidden
                -2 = flagged
                0-8 = revealed with adjacent count
                9 = mine (only with show_mines)
        """
        obs = np.fromiter(
            (observation_code(tile, show_mines) for tile in self._tiles),
            dtype=np.int8,
            count=self.size,
        )
        return obs.reshape(self.height, self.width)

    def hidden_indices(self) -> List[int]:
        """Indices of tiles that are neither revealed nor flagged."""
        return [index for index, tile in enumerate(self._tiles) if tile.hidden]
