"""Content registry -- loads and serves item, monster and narrative
definitions for a Ny'Gothor session.

The catalog ships as JSON files in ``data/`` next to this module.  The
registry holds immutable definitions; every session asks it for fresh
live instances (items with clear claim flags, monsters with rolled stats)
so that no mutable state is shared between sessions.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from ny_gothor.ir.items import ItemDefinition
from ny_gothor.ir.monsters import MonsterDefinition, StatRange
from ny_gothor.ir.narrative import NarrativePools
from ny_gothor.sim.core.entities import Item, Monster
from ny_gothor.sim.core.rng import GameRNG

_DATA_DIR = Path(__file__).resolve().parent / "data"
_DEFAULT_ITEMS_PATH = _DATA_DIR / "items.json"
_DEFAULT_MONSTERS_PATH = _DATA_DIR / "monsters.json"
_DEFAULT_NARRATIVE_PATH = _DATA_DIR / "narrative.json"


def _read_json(path: str | Path) -> Any:
    with open(path, encoding="utf-8") as f:
        return json.load(f)


def _roll_stat(stat: StatRange, rng: GameRNG) -> int:
    return stat.low + rng.random_below(stat.high - stat.low)


def build_monster(defn: MonsterDefinition, rng: GameRNG) -> Monster:
    """Create a live monster from *defn*, rolling its per-session stats."""
    return Monster(
        monster_id=defn.id,
        name=defn.name,
        max_health=defn.health,
        health=defn.health,
        damage_per_hit=defn.damage,
        sanity_impact=_roll_stat(defn.sanity_impact, rng),
        attack_chance=_roll_stat(defn.attack_chance, rng),
        dodge_chance=_roll_stat(defn.dodge_chance, rng),
    )


class ContentRegistry:
    """Loads and serves item, monster and narrative definitions.

    Usage::

        registry = ContentRegistry()
        registry.load_defaults()

        catalog = registry.build_item_catalog()
        bestiary = registry.roll_bestiary(rng)
    """

    def __init__(self) -> None:
        self.items: dict[str, ItemDefinition] = {}
        self.monsters: dict[str, MonsterDefinition] = {}
        self.narrative: NarrativePools | None = None

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    def load_defaults(self) -> None:
        """Load the bundled items, monsters and narrative pools."""
        self.load_items()
        self.load_monsters()
        self.load_narrative()

    def load_items(self, path: str | Path | None = None) -> None:
        """Load item definitions from a JSON list.

        Parameters
        ----------
        path:
            Path to the JSON file.  Defaults to the bundled ``items.json``.
        """
        for raw in _read_json(path or _DEFAULT_ITEMS_PATH):
            defn = ItemDefinition.model_validate(raw)
            self.items[defn.id] = defn

    def load_monsters(self, path: str | Path | None = None) -> None:
        """Load monster definitions from a JSON list."""
        for raw in _read_json(path or _DEFAULT_MONSTERS_PATH):
            defn = MonsterDefinition.model_validate(raw)
            self.monsters[defn.id] = defn

    def load_narrative(self, path: str | Path | None = None) -> None:
        """Load the room / path description pools."""
        self.narrative = NarrativePools.model_validate(
            _read_json(path or _DEFAULT_NARRATIVE_PATH)
        )

    # ------------------------------------------------------------------
    # Item queries
    # ------------------------------------------------------------------

    def get_item(self, item_id: str) -> ItemDefinition | None:
        return self.items.get(item_id)

    def starter_items(self) -> list[Item]:
        """Fresh instances of every starter item (the initial inventory)."""
        return [
            Item(item_id=d.id, name=d.name, damage=d.damage)
            for d in self.items.values()
            if d.starter
        ]

    def build_item_catalog(self) -> list[Item]:
        """Fresh, unclaimed instances of every world (non-starter) item."""
        return [
            Item(item_id=d.id, name=d.name, damage=d.damage)
            for d in self.items.values()
            if not d.starter
        ]

    # ------------------------------------------------------------------
    # Monster queries
    # ------------------------------------------------------------------

    def get_monster(self, monster_id: str) -> MonsterDefinition | None:
        return self.monsters.get(monster_id)

    def roll_bestiary(self, rng: GameRNG) -> list[Monster]:
        """Roll one template per wandering monster for a new session.

        Rooms receive deep copies of these templates, so all copies of a
        monster in one session share its rolled chances but track health
        independently.
        """
        return [
            build_monster(d, rng)
            for d in self.monsters.values()
            if not d.final
        ]

    def build_final_monster(self, rng: GameRNG) -> Monster:
        """Create the monster that waits in the end room."""
        for defn in self.monsters.values():
            if defn.final:
                return build_monster(defn, rng)
        raise ValueError("No final monster defined in the monster catalog")

    # ------------------------------------------------------------------
    # Narrative
    # ------------------------------------------------------------------

    def get_narrative(self) -> NarrativePools:
        if self.narrative is None:
            raise ValueError("Narrative pools not loaded; call load_narrative()")
        return self.narrative
