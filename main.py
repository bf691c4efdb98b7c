#!/usr/bin/env python3
"""
Minesweep - command-line driver for the game engine.

Usage:
    python main.py presets
    python main.py simulate [--difficulty NAME] [--games N] [--seed S]
"""
import argparse
import logging

import numpy as np

from src.minesweep.difficulty import PRESETS, difficulty_from_name
from src.minesweep.environment import MinesweeperEnv
from src.minesweep.scores import HighScoreTable, ScoreRecord


def presets(args: argparse.Namespace) -> None:
    """List the recognized difficulty presets."""
    print(f"{'Level':<14} {'Width':>6} {'Height':>7} {'Mines':>6}")
    print("-" * 36)
    for level, difficulty in PRESETS.items():
        print(
            f"{level.value:<14} {difficulty.width:>6} "
            f"{difficulty.height:>7} {difficulty.mine_count:>6}"
        )


def simulate(args: argparse.Namespace) -> None:
    """Play games with uniformly random reveals and report statistics."""
    difficulty = difficulty_from_name(args.difficulty)
    env = MinesweeperEnv(difficulty)
    rng = np.random.default_rng(args.seed)
    scores = HighScoreTable()

    print(f"Simulating {args.games} random games on {difficulty}...")

    wins = 0
    total_steps = 0
    total_revealed = 0

    for game in range(args.games):
        seed = None if args.seed is None else args.seed + game
        env.reset(seed=seed)
        done = False
        info = {}

        while not done:
            valid_indices = np.flatnonzero(env.get_action_mask())
            action = int(rng.choice(valid_indices))
            _, _, terminated, truncated, info = env.step(action)
            done = terminated or truncated

        total_steps += info["steps"]
        total_revealed += info["revealed"]
        if info["game_state"] == "WON":
            wins += 1
            # Simulated games have no clock, so rank wins by step count
            scores.insert(
                ScoreRecord(difficulty.identifier, info["steps"], f"game-{game + 1}")
            )

    print(f"  Win rate: {wins / args.games:.1%}")
    print(f"  Avg steps: {total_steps / args.games:.1f}")
    print(f"  Avg revealed: {total_revealed / args.games:.1f} cells")
    print(f"  Safe cells per board: {difficulty.safe_cell_count}")
    for rank, record in enumerate(scores.scores_for(difficulty), start=1):
        print(f"  Best #{rank}: {record.name} in {record.best_time:.0f} steps")


def main() -> None:
    """Parse arguments and run the appropriate command."""
    parser = argparse.ArgumentParser(
        description="Minesweep - Minesweeper game engine driver"
    )
    parser.add_argument(
        "--verbose", action="store_true", help="Log engine debug output"
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    subparsers.add_parser("presets", help="List difficulty presets")

    simulate_parser = subparsers.add_parser(
        "simulate", help="Play random games and report statistics"
    )
    simulate_parser.add_argument(
        "--difficulty", default="beginner", help="Preset name"
    )
    simulate_parser.add_argument(
        "--games", type=int, default=100, help="Number of games to play"
    )
    simulate_parser.add_argument(
        "--seed", type=int, default=None, help="Seed for reproducible runs"
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command == "presets":
        presets(args)
    elif args.command == "simulate":
        simulate(args)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
