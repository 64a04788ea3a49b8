#!/usr/bin/env python3
"""
Play a game in the terminal, players taking turns at the keyboard.
"""

import argparse
import os
import sys

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from schemas.game_config import GameConfig
from territory.console import run_console_game
from territory.game import BlokusGame
from utils.logging_setup import setup_logging


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Play a territory placement game")
    parser.add_argument("--config", type=str, default=None, help="YAML or JSON game config")
    parser.add_argument("--rows", type=int, default=None)
    parser.add_argument("--cols", type=int, default=None)
    parser.add_argument("--players", type=int, default=None, help="Number of players (2-4)")
    parser.add_argument("--log-level", type=str, default=None, help="Overrides log_level from --config")
    parser.add_argument("--log-file", type=str, default=None)
    return parser.parse_args(argv)


def load_config(args: argparse.Namespace) -> GameConfig:
    """Build the game config from --config, then apply command-line overrides."""
    config = GameConfig.from_file(args.config) if args.config else GameConfig()
    return config.with_overrides(rows=args.rows, cols=args.cols,
                                 num_players=args.players, log_level=args.log_level)


if __name__ == "__main__":
    args = parse_args()
    config = load_config(args)
    setup_logging(config.log_level, args.log_file)

    try:
        run_console_game(BlokusGame(config))
    except (KeyboardInterrupt, EOFError):
        print("\nGame aborted.")
        sys.exit(1)
