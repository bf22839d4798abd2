"""Entity models for the Ny'Gothor cave crawler.

All data classes use Pydantic v2 BaseModel for validation and
serialization.  State changes go through methods on the models so that
invariants (health never negative, death is terminal, the incantation is
spoken at most once) are enforced at the mutation boundary.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


# ---------------------------------------------------------------------------
# Item
# ---------------------------------------------------------------------------

class Item(BaseModel):
    """A weapon, either a catalog template or a live instance."""

    item_id: str
    """Stable identifier (e.g. ``"knife"``); names are for display only."""

    name: str
    damage: int = Field(ge=0)
    placed_in_world: bool = False
    """Claim flag on catalog entries: at most one live instance per item."""


# ---------------------------------------------------------------------------
# Monster
# ---------------------------------------------------------------------------

class Monster(BaseModel):
    """A monster instance.  Each room holds its own independent copy."""

    monster_id: str
    name: str
    max_health: int = Field(gt=0)
    health: int = Field(ge=0)
    damage_per_hit: int = Field(ge=0)
    sanity_impact: int = Field(ge=0)
    attack_chance: int = Field(ge=0, le=100)
    """Percent chance that an attack on the player lands."""

    dodge_chance: int = Field(ge=0, le=100)
    """Percent chance that the monster dodges a player attack."""

    is_dead: bool = False

    def take_damage(self, amount: int) -> int:
        """Apply *amount* damage, clamping health at 0.

        Returns the health actually lost.  Reaching 0 health marks the
        monster dead; a dead monster takes no further damage.
        """
        if amount < 0:
            raise ValueError(f"take_damage amount must be >= 0, got {amount}")
        if self.is_dead:
            return 0

        lost = min(self.health, amount)
        self.health -= lost
        if self.health <= 0:
            self.is_dead = True
        return lost


# ---------------------------------------------------------------------------
# Player
# ---------------------------------------------------------------------------

class Player(BaseModel):
    """The lost hiker.  Also carries the backtracking history."""

    health: int = Field(default=100, ge=0)
    sanity: int = Field(default=0, ge=0)
    """0 is sane; reaching the insanity threshold (100) is fatal."""

    is_dead: bool = False
    incantation_spoken: bool = False
    current_room_index: int = Field(default=0, ge=0)
    inventory: list[Item] = Field(default_factory=list)
    visited_rooms: list[int] = Field(default_factory=list)
    """Room indices left behind, most recent last."""

    # -- health / sanity -----------------------------------------------------

    def take_damage(self, amount: int) -> int:
        """Apply *amount* damage, clamping at 0 and marking death."""
        if amount < 0:
            raise ValueError(f"take_damage amount must be >= 0, got {amount}")
        lost = min(self.health, amount)
        self.health -= lost
        if self.health <= 0:
            self.is_dead = True
        return lost

    def add_sanity(self, amount: int) -> None:
        """Push the player *amount* points further towards insanity.

        No cap is enforced here; the session checks the threshold.
        """
        if amount < 0:
            raise ValueError(f"add_sanity amount must be >= 0, got {amount}")
        self.sanity += amount

    def kill(self) -> None:
        self.health = 0
        self.is_dead = True

    # -- story flags ---------------------------------------------------------

    def speak_incantation(self) -> bool:
        """Speak the altar incantation.

        Returns ``True`` if it was spoken now, ``False`` if it already had
        been.  The flag is never reset.
        """
        if self.incantation_spoken:
            return False
        self.incantation_spoken = True
        return True

    # -- inventory -----------------------------------------------------------

    def add_item(self, item: Item) -> None:
        self.inventory.append(item)

    def get_item(self, item_id: str) -> Item | None:
        """Return the owned item with *item_id*, or ``None``."""
        for item in self.inventory:
            if item.item_id == item_id:
                return item
        return None

    def find_item(self, name: str) -> Item | None:
        """Resolve a typed item *name* to an owned item (exact match)."""
        for item in self.inventory:
            if item.name == name:
                return item
        return None
