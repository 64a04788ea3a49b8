#!/usr/bin/env python3
"""
Play seeded random-vs-random games and print the results.
"""

import argparse
import os
import sys

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from agents.arena import play_match
from schemas.game_config import GameConfig
from utils.logging_setup import setup_logging


def main(config: GameConfig, num_games: int):
    base_seed = config.seed if config.seed is not None else 0
    results = []
    for game_number in range(num_games):
        game_config = config.with_overrides(seed=base_seed + game_number * 10)
        result = play_match(game_config)
        winner = result.outcome.winner.label if result.outcome.winner else "draw"
        status = "complete" if result.completed else f"blocked ({result.blocked_player.label})"
        remaining = {player.label: count for player, count in result.outcome.remaining.items()}
        results.append((game_number, winner, result.moves_made, status))
        print(f"game={game_number} winner={winner} moves={result.moves_made} status={status} remaining={remaining}")
    print("Completed sample games:")
    for row in results:
        print(row)


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Run random self-play games")
    parser.add_argument("--config", type=str, default=None, help="YAML or JSON game config")
    parser.add_argument("--games", type=int, default=3, help="Number of games to play")
    parser.add_argument("--rows", type=int, default=None)
    parser.add_argument("--cols", type=int, default=None)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--log-level", type=str, default=None)
    args = parser.parse_args()

    config = GameConfig.from_file(args.config) if args.config else GameConfig()
    config = config.with_overrides(rows=args.rows, cols=args.cols, seed=args.seed, log_level=args.log_level)
    setup_logging(config.log_level)
    main(config, args.games)
