"""Configuration models for weighted_picker."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field, PositiveInt

from .constants import DEFAULT_MAX_REDRAWS


class PickerConfig(BaseModel):
    """Tunables shared by the samplers and the fluent builder."""

    max_redraws: PositiveInt = Field(
        default=DEFAULT_MAX_REDRAWS,
        description=(
            "Consecutive dead-zone hits tolerated before a point is drawn from the "
            "assigned span directly."
        ),
    )
    seed: Optional[int] = Field(
        default=None,
        description="Seed for the default random source when no generator is supplied.",
    )
    log_draws: bool = Field(
        default=False,
        description="Emit a debug log record for every drawn entry index.",
    )


__all__ = ["PickerConfig"]
