"""
Pydantic schemas for game configuration and player input.
"""

from .game_config import GameConfig
from .move import MoveRequest

__all__ = [
    "GameConfig",
    "MoveRequest",
]
