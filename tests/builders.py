"""Small hand-built entities and caves for tests."""

from __future__ import annotations

from ny_gothor.sim.core.entities import Item, Monster, Player
from ny_gothor.sim.core.game_state import GameState, Room


def make_item(item_id: str = "hatchet", name: str = "Hatchet", damage: int = 30) -> Item:
    return Item(item_id=item_id, name=name, damage=damage)


def make_monster(
    monster_id: str = "ky_tagar",
    name: str = "Ky-Tagar",
    health: int = 100,
    damage: int = 20,
    sanity_impact: int = 10,
    attack_chance: int = 50,
    dodge_chance: int = 10,
) -> Monster:
    return Monster(
        monster_id=monster_id,
        name=name,
        max_health=health,
        health=health,
        damage_per_hit=damage,
        sanity_impact=sanity_impact,
        attack_chance=attack_chance,
        dodge_chance=dodge_chance,
    )


def make_state(links: dict[int, list[int]] | None = None, room_count: int = 5) -> GameState:
    """A small hand-built cave.

    Default layout: 0 -> 3, 4;  3 -> 1;  4 -> 2.  Rooms 1 and 2 are sinks.
    """
    links = links if links is not None else {0: [3, 4], 3: [1], 4: [2]}
    rooms = [
        Room(index=i, neighbor_indices=list(links.get(i, [])), room_text=f"Room {i}")
        for i in range(room_count)
    ]
    player = Player(inventory=[make_item()])
    return GameState(player=player, rooms=rooms, seed=7)
