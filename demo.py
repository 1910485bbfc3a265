#!/usr/bin/env python3
"""Replay random games on a GameSession, one frame per move."""
import argparse
import os
import sys
import time
from collections import Counter
from dataclasses import replace
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent / "src"))

from sweeper import (
    BEGINNER,
    DEFAULT,
    EXPERT,
    INTERMEDIATE,
    Action,
    ActionKind,
    GamePhase,
    GameSession,
    render_text,
    status_line,
)
from agents import RandomAgent


PRESETS = {
    "default": DEFAULT,
    "beginner": BEGINNER,
    "intermediate": INTERMEDIATE,
    "expert": EXPERT,
}


def show(session: GameSession, title: str, delay: float) -> None:
    """Redraw the terminal with the session's current frame."""
    os.system('cls' if os.name == 'nt' else 'clear')
    print(title)
    print(render_text(session.snapshot()))
    time.sleep(delay)


def play_one(session: GameSession, agent: RandomAgent, title: str,
             delay: float) -> GamePhase:
    """Start a fresh game and reveal random hidden tiles until it ends."""
    session.reset()
    session.start()
    agent.reset()
    show(session, title, delay)

    moves = 0
    while not session.phase.is_terminal:
        tile = agent.select_action(session.observation())
        session.dispatch(Action(ActionKind.REVEAL, tile))
        moves += 1
        row, col = agent.action_to_position(tile)
        show(session, f"{title} | move {moves} at ({row}, {col})", delay)

    print(status_line(session.snapshot()))
    return session.phase


def demo(preset: str = "default", games: int = 5, delay: float = 0.3,
         seed=None) -> Counter:
    """Play several games and tally the final phases."""
    config = PRESETS[preset]
    if seed is not None:
        config = replace(config, seed=seed)
    session = GameSession(config)
    agent = RandomAgent(config.height, config.width, seed=seed)

    outcomes = Counter()
    for game in range(games):
        title = f"Game {game + 1}/{games} on {preset}"
        outcomes[play_one(session, agent, title, delay)] += 1
        time.sleep(1.0)

    print(f"\nWins {outcomes[GamePhase.WIN]}, losses {outcomes[GamePhase.LOSE]}")
    return outcomes


if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    parser.add_argument("--preset", choices=sorted(PRESETS), default="default")
    parser.add_argument("--games", type=int, default=5, help="Number of games")
    parser.add_argument("--delay", type=float, default=0.3, help="Seconds per frame")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    args = parser.parse_args()

    demo(preset=args.preset, games=args.games, delay=args.delay, seed=args.seed)
