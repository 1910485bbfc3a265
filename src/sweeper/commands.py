"""
Text command parsing for terminal play.

Maps typed commands such as "r 2 3" onto session actions, the way a
graphical front end maps mouse buttons and tile coordinates.
"""
from typing import Dict

from .session import Action, ActionKind


COMMANDS: Dict[str, ActionKind] = {
    "s": ActionKind.START,
    "start": ActionKind.START,
    "n": ActionKind.RESET,
    "new": ActionKind.RESET,
    "reset": ActionKind.RESET,
    "r": ActionKind.REVEAL,
    "reveal": ActionKind.REVEAL,
    "f": ActionKind.FLAG,
    "flag": ActionKind.FLAG,
    "c": ActionKind.CHORD,
    "chord": ActionKind.CHORD,
}

HELP = (
    "Commands: s(tart) | r <row> <col> | f <row> <col> | c <row> <col> "
    "| n(ew game) | q(uit)"
)


def parse_command(text: str, width: int) -> Action:
    """
    Parse one line of input into an action.

    Args:
        text: Command line, e.g. "r 2 3".
        width: Board width, for converting (row, col) to a tile index.

    Returns:
        The parsed action. Row and column are not range checked here;
        the board rejects tiles outside the grid.

    Raises:
        ValueError: Unknown command or malformed coordinates.
    """
    parts = text.split()
    if not parts:
        raise ValueError("Empty command")

    kind = COMMANDS.get(parts[0].lower())
    if kind is None:
        raise ValueError(f"Unknown command: {parts[0]}")

    if not kind.targets_tile:
        if len(parts) != 1:
            raise ValueError(f"{parts[0]} takes no arguments")
        return Action(kind)

    if len(parts) != 3:
        raise ValueError(f"{parts[0]} needs <row> <col>")
    try:
        row, col = int(parts[1]), int(parts[2])
    except ValueError:
        raise ValueError(f"Bad coordinates: {parts[1]} {parts[2]}") from None
    if not 0 <= col < width or row < 0:
        # Off-grid, keep it out of the row-major arithmetic
        return Action(kind, -1)
    return Action(kind, row * width + col)
