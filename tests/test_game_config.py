"""
Tests for GameConfig loading and validation.
"""

import json
import logging
import os
import shutil
import tempfile
import unittest
from pathlib import Path

import yaml
from pydantic import ValidationError

from schemas.game_config import GameConfig
from schemas.move import MoveRequest


class TestGameConfig(unittest.TestCase):
    """Test the GameConfig schema."""

    def setUp(self):
        self.temp_dir = tempfile.mkdtemp()

    def tearDown(self):
        shutil.rmtree(self.temp_dir, ignore_errors=True)

    def test_defaults(self):
        config = GameConfig()
        self.assertEqual((config.rows, config.cols), (14, 14))
        self.assertEqual(config.num_players, 2)
        self.assertEqual(config.pieces, ["Tromino L", "Tromino I"])
        self.assertIsNone(config.seed)
        self.assertEqual(config.logging_level, logging.INFO)

    def test_invalid_values(self):
        for bad in ({"rows": 0}, {"cols": -3}, {"num_players": 1}, {"num_players": 5},
                    {"pieces": []}, {"pieces": ["Pentomino X"]}, {"log_level": "LOUD"}):
            with self.assertRaises(ValidationError, msg=str(bad)):
                GameConfig(**bad)

    def test_log_level_is_normalized(self):
        self.assertEqual(GameConfig(log_level="debug").log_level, "DEBUG")
        self.assertEqual(GameConfig(log_level="debug").logging_level, logging.DEBUG)

    def test_from_yaml_file(self):
        path = Path(self.temp_dir) / "game.yaml"
        with open(path, "w") as f:
            yaml.safe_dump({"rows": 10, "cols": 12, "seed": 3, "unknown_key": True}, f)

        config = GameConfig.from_file(path)
        self.assertEqual((config.rows, config.cols, config.seed), (10, 12, 3))

    def test_from_json_file(self):
        path = os.path.join(self.temp_dir, "game.json")
        with open(path, "w") as f:
            json.dump({"num_players": 4, "pieces": ["Tromino I"]}, f)

        config = GameConfig.from_file(path)
        self.assertEqual(config.num_players, 4)
        self.assertEqual(config.pieces, ["Tromino I"])

    def test_empty_yaml_file_gives_defaults(self):
        path = Path(self.temp_dir) / "empty.yml"
        path.write_text("")
        self.assertEqual(GameConfig.from_file(path), GameConfig())

    def test_missing_file(self):
        with self.assertRaises(FileNotFoundError):
            GameConfig.from_file(Path(self.temp_dir) / "missing.yaml")

    def test_unsupported_format(self):
        path = Path(self.temp_dir) / "game.toml"
        path.write_text("rows = 3")
        with self.assertRaises(ValueError):
            GameConfig.from_file(path)

    def test_with_overrides(self):
        config = GameConfig(rows=8).with_overrides(rows=None, cols=9, seed=11)
        self.assertEqual((config.rows, config.cols, config.seed), (8, 9, 11))
        with self.assertRaises(ValidationError):
            config.with_overrides(rows=0)


class TestMoveRequest(unittest.TestCase):
    """Test the move input schema."""

    def test_valid(self):
        request = MoveRequest(piece_index=1, anchor_row=2, anchor_col=3)
        self.assertEqual((request.piece_index, request.anchor_row, request.anchor_col), (1, 2, 3))

    def test_negative_values_rejected(self):
        with self.assertRaises(ValidationError):
            MoveRequest(piece_index=-1, anchor_row=0, anchor_col=0)
        with self.assertRaises(ValidationError):
            MoveRequest(piece_index=0, anchor_row=-1, anchor_col=0)


if __name__ == '__main__':
    unittest.main()
