#!/usr/bin/env python3
"""
Minesweeper engine - Main entry point.

Usage:
    python main.py play [--width W] [--height H] [--density P] [--seed S]
    python main.py evaluate [--games N] [--chord]
"""
import argparse
import logging
import sys
from pathlib import Path

# Allow running from a checkout without installing
sys.path.insert(0, str(Path(__file__).parent / "src"))

from sweeper import (
    ActionResult,
    BoardConfig,
    GameSession,
    parse_command,
    render_text,
)
from sweeper.commands import HELP
from agents import Evaluator, RandomAgent


logger = logging.getLogger(__name__)


def build_config(args: argparse.Namespace) -> BoardConfig:
    """Create a board configuration, exiting with status 2 if it is invalid."""
    try:
        return BoardConfig(
            width=args.width,
            height=args.height,
            mine_probability=args.density,
            seed=args.seed,
        )
    except ValueError as error:
        logger.error("Invalid board configuration: %s", error)
        sys.exit(2)


def play(args: argparse.Namespace) -> None:
    """Play interactively in the terminal."""
    session = GameSession(build_config(args))
    print(HELP)

    while True:
        print()
        print(render_text(session.snapshot()))
        try:
            line = input("> ").strip()
        except EOFError:
            break

        if line.lower() in ("q", "quit"):
            break

        try:
            action = parse_command(line, session.board.width)
        except ValueError as error:
            print(error)
            continue

        result = session.dispatch(action)
        if result == ActionResult.REJECTED:
            print("Not applicable right now.")


def evaluate(args: argparse.Namespace) -> None:
    """Evaluate the random agent and print results."""
    config = build_config(args)
    agent = RandomAgent(config.height, config.width, seed=args.seed,
                        reveal_only=not args.chord)
    evaluator = Evaluator(config, num_episodes=args.games, seed=args.seed)

    print(f"Evaluating Random agent over {args.games} games...")
    results = evaluator.evaluate(agent)

    print("Results for Random:")
    print(f"  Win rate: {results['win_rate']:.1%}")
    print(f"  Avg reward: {results['avg_reward']:.2f}")
    print(f"  Avg steps: {results['avg_steps']:.1f}")
    print(f"  Avg revealed: {results['avg_revealed']:.1f} tiles")


def add_board_arguments(parser: argparse.ArgumentParser) -> None:
    """Board options shared by all commands."""
    parser.add_argument("--width", type=int, default=10, help="Columns")
    parser.add_argument("--height", type=int, default=10, help="Rows")
    parser.add_argument(
        "--density", type=float, default=0.2, help="Mine probability per tile"
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed")


def main() -> None:
    """Parse arguments and run the appropriate command."""
    parser = argparse.ArgumentParser(
        description="Minesweeper engine - play or evaluate agents"
    )
    parser.add_argument(
        "--verbose", action="store_true", help="Enable debug logging"
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    play_parser = subparsers.add_parser("play", help="Play in the terminal")
    add_board_arguments(play_parser)

    eval_parser = subparsers.add_parser(
        "evaluate", help="Evaluate the random agent"
    )
    add_board_arguments(eval_parser)
    eval_parser.add_argument(
        "--games", type=int, default=100, help="Number of games to play"
    )
    eval_parser.add_argument(
        "--chord", action="store_true", help="Let the agent chord as well"
    )

    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    if args.command == "play":
        play(args)
    elif args.command == "evaluate":
        evaluate(args)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
