"""Pydantic schema for game configuration."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class GameConfig(BaseModel):
    """Validated game rules with defaults."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    early_five_count: int = Field(default=5, gt=0)
    empty_marker: str = Field(default="_", min_length=1)
    strict_ticket_shape: bool = False
