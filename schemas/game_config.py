"""
Pydantic schema for game configuration.

Configuration can be built in code, or loaded from a YAML or JSON file.
"""

import json
import logging
from pathlib import Path
from typing import List, Optional

import yaml
from pydantic import BaseModel, Field, field_validator

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
DEFAULT_PIECES = ("Tromino L", "Tromino I")


class GameConfig(BaseModel):
    """Configuration for a territory game."""
    rows: int = Field(default=14, ge=1, le=100, description="Board height")
    cols: int = Field(default=14, ge=1, le=100, description="Board width")
    num_players: int = Field(default=2, ge=2, le=4, description="Number of players")
    pieces: List[str] = Field(
        default_factory=lambda: list(DEFAULT_PIECES),
        min_length=1,
        description="Catalog names of the pieces every player starts with",
    )
    seed: Optional[int] = Field(default=None, description="Seed for random agents")
    log_level: str = Field(default="INFO", description="Logging level name")

    class Config:
        json_schema_extra = {
            "example": {
                "rows": 14,
                "cols": 14,
                "num_players": 2,
                "pieces": ["Tromino L", "Tromino I"],
                "seed": 42,
                "log_level": "INFO"
            }
        }

    @field_validator("pieces")
    @classmethod
    def _known_pieces(cls, value: List[str]) -> List[str]:
        from territory.pieces import PieceGenerator

        unknown = [name for name in value if name not in PieceGenerator.SAMPLE_SHAPES]
        if unknown:
            raise ValueError(f"Unknown piece names: {unknown}")
        return value

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {LOG_LEVELS}")
        return level

    @property
    def logging_level(self) -> int:
        return getattr(logging, self.log_level)

    @classmethod
    def from_dict(cls, config_dict: dict) -> "GameConfig":
        """Create config from dictionary, ignoring unknown keys."""
        valid_keys = set(cls.model_fields)
        filtered_dict = {k: v for k, v in (config_dict or {}).items() if k in valid_keys}
        return cls(**filtered_dict)

    @classmethod
    def from_file(cls, config_path: Path) -> "GameConfig":
        """Load config from YAML or JSON file."""
        config_path = Path(config_path)

        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")

        with open(config_path, "r") as f:
            if config_path.suffix.lower() in [".yaml", ".yml"]:
                config_dict = yaml.safe_load(f)
            elif config_path.suffix.lower() == ".json":
                config_dict = json.load(f)
            else:
                raise ValueError(f"Unsupported config file format: {config_path.suffix}")

        return cls.from_dict(config_dict)

    def with_overrides(self, **overrides) -> "GameConfig":
        """Return a copy with the non-None overrides applied and re-validated."""
        values = self.model_dump()
        values.update({k: v for k, v in overrides.items() if v is not None})
        return GameConfig(**values)
