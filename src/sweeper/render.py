"""
Text rendering for the Minesweeper engine.

Turns a SessionSnapshot into terminal text. Mines are only drawn once the
game is over.
"""
from datetime import timedelta
from typing import List, Optional

from .state import GamePhase, SessionSnapshot, TileView


HIDDEN_GLYPH = "."
FLAG_GLYPH = "F"
MINE_GLYPH = "*"
FLAGGED_MINE_GLYPH = "@"


def tile_glyph(tile: TileView, game_over: bool) -> str:
    """Pick the character for one tile."""
    if tile.revealed:
        return str(tile.adjacent_mine_count)
    if tile.flagged:
        return FLAGGED_MINE_GLYPH if game_over and tile.is_mine else FLAG_GLYPH
    if game_over and tile.is_mine:
        return MINE_GLYPH
    return HIDDEN_GLYPH


def format_clock(elapsed: Optional[timedelta]) -> str:
    """Render a stopwatch reading as M:SS."""
    if elapsed is None:
        return "-:--"
    minutes, seconds = divmod(int(elapsed.total_seconds()), 60)
    return f"{minutes}:{seconds:02d}"


def status_line(snapshot: SessionSnapshot) -> str:
    """Phase, remaining mine count and clock on one line."""
    messages = {
        GamePhase.MENU: "Menu",
        GamePhase.RUNNING: "Running",
        GamePhase.LOSE: "You Lost",
        GamePhase.WIN: "You Win",
    }
    return (
        f"{messages[snapshot.phase]} | "
        f"Minecount: {snapshot.remaining_mines} | "
        f"Time: {format_clock(snapshot.elapsed)}"
    )


def render_text(snapshot: SessionSnapshot, with_status: bool = True) -> str:
    """
    Render the board grid as text.

    Args:
        snapshot: State to draw.
        with_status: Prepend the status line.

    Returns:
        One line per row, glyphs separated by spaces.
    """
    game_over = snapshot.phase.is_terminal
    lines: List[str] = []
    if with_status:
        lines.append(status_line(snapshot))
    for row in range(snapshot.height):
        lines.append(" ".join(
            tile_glyph(snapshot.tile_at(row, col), game_over)
            for col in range(snapshot.width)
        ))
    return "\n".join(lines)
