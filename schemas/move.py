"""
Pydantic schemas for player move input.
"""

from pydantic import BaseModel, Field


class MoveRequest(BaseModel):
    """A move as typed by a player, validated before it reaches the engine."""
    piece_index: int = Field(..., ge=0, description="0-based index into the player's pieces")
    anchor_row: int = Field(..., ge=0, description="Row position of the anchor")
    anchor_col: int = Field(..., ge=0, description="Column position of the anchor")

    class Config:
        json_schema_extra = {
            "example": {
                "piece_index": 0,
                "anchor_row": 0,
                "anchor_col": 0
            }
        }
