#!/usr/bin/env python3
"""
Minesweeper - Main entry point.

Usage:
    python main.py play [--width W] [--height H] [--mines N] [--seed S]
    python main.py evaluate [--games N] [--seed S]
"""
import argparse
import logging

from minefield.field import (
    DEFAULT_HEIGHT,
    DEFAULT_MINES,
    DEFAULT_WIDTH,
    FieldConfig,
    InvalidConfiguration,
)
from minefield.frontend import ConfigMenu, GameSession
from minefield.agents import RandomAgent, Evaluator


def play(args: argparse.Namespace) -> None:
    """Play in the terminal, looping back to the menu after each game."""
    menu = ConfigMenu(args.width, args.height, args.mines)
    session = GameSession(menu, seed=args.seed)

    print("Menu keys: w/s select, a/d change, Enter starts, q quits")
    message = ""
    while session.running:
        print()
        print(session.frame())
        if message:
            print(message)
        try:
            line = input("> ")
        except EOFError:
            break
        message = session.command(line)

    print("Bye!")


def evaluate(args: argparse.Namespace) -> None:
    """Evaluate the random baseline and print results."""
    try:
        config = FieldConfig(args.width, args.height, args.mines)
    except InvalidConfiguration as exc:
        print(f"Invalid configuration: {exc}")
        return

    agent = RandomAgent(config.width, config.height, seed=args.seed)
    evaluator = Evaluator(config, num_episodes=args.games, seed=args.seed)

    print(
        f"\nEvaluating Random over {args.games} games on a "
        f"{config.width}x{config.height} field with {config.mine_count} mines..."
    )
    results = evaluator.evaluate(agent)

    print("Results for Random:")
    print(f"  Win rate: {results['win_rate']:.1%}")
    print(f"  Avg reward: {results['avg_reward']:.2f}")
    print(f"  Avg steps: {results['avg_steps']:.1f}")
    print(f"  Avg revealed: {results['avg_revealed']:.1f} cells")


def add_field_arguments(parser: argparse.ArgumentParser) -> None:
    """Add field size options to a sub-command parser."""
    parser.add_argument(
        "--width", type=int, default=DEFAULT_WIDTH, help="Number of columns"
    )
    parser.add_argument(
        "--height", type=int, default=DEFAULT_HEIGHT, help="Number of rows"
    )
    parser.add_argument(
        "--mines", type=int, default=DEFAULT_MINES, help="Number of mines"
    )
    parser.add_argument(
        "--seed", type=int, default=None, help="Seed for mine placement"
    )


def main() -> None:
    """Parse arguments and run the appropriate command."""
    parser = argparse.ArgumentParser(
        description="Minesweeper - play in the terminal or evaluate agents"
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity",
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # Play command
    play_parser = subparsers.add_parser("play", help="Play in the terminal")
    add_field_arguments(play_parser)

    # Evaluate command
    eval_parser = subparsers.add_parser(
        "evaluate", help="Evaluate the random agent"
    )
    add_field_arguments(eval_parser)
    eval_parser.add_argument(
        "--games", type=int, default=100, help="Number of games to play"
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )

    if args.command == "play":
        play(args)
    elif args.command == "evaluate":
        evaluate(args)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
