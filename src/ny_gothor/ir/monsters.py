"""Monster definitions -- templates for the things lurking in the dark."""

from __future__ import annotations

from pydantic import BaseModel, Field, model_validator


class StatRange(BaseModel):
    """Half-open range ``[low, high)`` a stat is rolled from per session."""

    low: int = Field(ge=0)
    high: int = Field(gt=0)

    @model_validator(mode="after")
    def _check_bounds(self) -> StatRange:
        if self.high <= self.low:
            raise ValueError(
                f"StatRange high ({self.high}) must exceed low ({self.low})"
            )
        return self


class MonsterDefinition(BaseModel):
    """Complete definition of a single monster."""

    id: str
    name: str
    health: int = Field(gt=0)
    damage: int = Field(ge=0)

    sanity_impact: StatRange = StatRange(low=0, high=20)
    attack_chance: StatRange = StatRange(low=0, high=80)
    dodge_chance: StatRange = StatRange(low=0, high=15)

    final: bool = False
    """The final monster only appears in the end room, never in the pool."""
