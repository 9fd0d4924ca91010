"""Validation schema for Nine Men's Morris rule configuration."""

from __future__ import annotations

from pathlib import Path
from typing import Union

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class RuleSet(BaseModel):
    model_config = ConfigDict(frozen=True)

    pieces_per_player: int = Field(9, ge=3, description="Pieces each side brings into the game.")
    flying_pieces: int = Field(
        3,
        ge=0,
        description="Pieces on board at which a side may fly to any empty point (0 disables flying).",
    )
    capture_limit: int = Field(7, ge=1, description="Lost pieces at which a side loses the game.")

    @field_validator("pieces_per_player")
    @classmethod
    def ensure_board_capacity(cls, value: int) -> int:
        # 24 points must hold every piece of both sides.
        if value * 2 > 24:
            raise ValueError("Both sides' pieces must fit on the 24-point board.")
        return value

    @model_validator(mode="after")
    def validate_thresholds(self) -> "RuleSet":
        if self.flying_pieces >= self.pieces_per_player:
            raise ValueError("Flying threshold must be below the number of pieces per player.")
        if self.capture_limit > self.pieces_per_player - 2:
            raise ValueError("Capture limit must leave the losing side with at least two pieces.")
        return self


DEFAULT_RULES = RuleSet()


def load_rules(path: Union[str, Path]) -> RuleSet:
    """Read a rule set from a JSON file."""
    return RuleSet.model_validate_json(Path(path).read_text(encoding="utf-8"))
