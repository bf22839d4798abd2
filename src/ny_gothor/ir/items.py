"""Item definitions -- the weapons scattered through the caverns."""

from __future__ import annotations

from pydantic import BaseModel, Field


class ItemDefinition(BaseModel):
    """Complete definition of a single weapon."""

    id: str
    """Stable identifier used for lookups (e.g. ``"knife"``)."""

    name: str
    """Display name, also what the player types to wield it."""

    damage: int = Field(ge=0)

    starter: bool = False
    """Starter items begin in the inventory and are never placed in rooms."""
