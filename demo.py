#!/usr/bin/env python3
"""Watch a scripted player go through the menu, games and result screens."""
import argparse
import os
import time

from minefield.field import DEFAULT_HEIGHT, DEFAULT_MINES, DEFAULT_WIDTH
from minefield.frontend import AutoPlayer, ConfigMenu, GameSession


def clear_screen():
    os.system('cls' if os.name == 'nt' else 'clear')


def demo(menu: ConfigMenu, games: int, delay: float, seed=None) -> AutoPlayer:
    """Run the session loop unattended, redrawing every frame."""
    session = GameSession(menu, seed=seed)
    player = AutoPlayer(session, seed=seed)

    for frame in player.play(games):
        clear_screen()
        print(f"=== Game {min(player.games_played + 1, games)}/{games} "
              f"| Wins: {player.wins} | Losses: {player.losses} ===\n")
        print(frame)
        time.sleep(delay)

    return player


if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    parser.add_argument("--delay", type=float, default=0.3, help="Delay between frames")
    parser.add_argument("--games", type=int, default=3, help="Number of games")
    parser.add_argument("--width", type=int, default=DEFAULT_WIDTH)
    parser.add_argument("--height", type=int, default=DEFAULT_HEIGHT)
    parser.add_argument("--mines", type=int, default=DEFAULT_MINES)
    parser.add_argument("--seed", type=int, default=None, help="Seed for mines and moves")
    args = parser.parse_args()

    player = demo(
        ConfigMenu(args.width, args.height, args.mines),
        games=args.games,
        delay=args.delay,
        seed=args.seed,
    )
    print(f"\n=== Final: {player.wins}/{player.games_played} wins ===")
