"""Cave generator for Ny'Gothor runs.

Builds the room graph in three independent passes, each on its own
forked RNG stream:

- Topology: every room gets an out-degree and that many links.
    - Room 0 (start): always 2 links
    - Rooms 1 and 2 (altar, end): sinks, no outgoing links
    - Every other room: uniform 1-3 links
- Contents: every room except the start rolls for an item (50%) and a
  monster (20%).
- Text: fixed prose for the three special rooms, random picks from the
  description pools for the rest.

Constraints:
- A link target is never the room itself or a duplicate within the room.
- A room index is claimed as a link target at most once per cave (the
  claimed set is shared by all rooms).
- Each catalog item is placed in at most one room.

Bounded retries keep generation terminating as free indices run out.  An
exhausted link slot falls back to room 0 (a "loops to start" edge) and an
exhausted item roll leaves the room empty.  Neither is an error, so the
cave is not guaranteed to be connected.
"""

from __future__ import annotations

import logging
from collections.abc import Collection, Sequence

from ny_gothor.config import GameConfig
from ny_gothor.ir.narrative import NarrativePools
from ny_gothor.sim.core.entities import Item, Monster
from ny_gothor.sim.core.game_state import (
    ALTAR_ROOM,
    END_ROOM,
    SINK_ROOMS,
    START_ROOM,
    Room,
)
from ny_gothor.sim.core.rng import GameRNG

logger = logging.getLogger(__name__)

_START_DEGREE = 2
_MIN_DEGREE = 1
_MAX_DEGREE = 3


# ---------------------------------------------------------------------------
# Bounded-retry helpers
# ---------------------------------------------------------------------------

def roll_out_degree(index: int, rng: GameRNG) -> int:
    """Number of outgoing links room *index* should get."""
    if index in SINK_ROOMS:
        return 0
    if index == START_ROOM:
        return _START_DEGREE
    return rng.random_int(_MIN_DEGREE, _MAX_DEGREE)


def pick_link_target(
    source: int,
    room_count: int,
    linked: Collection[int],
    claimed: Collection[int],
    rng: GameRNG,
    max_attempts: int,
) -> int | None:
    """Draw a link target for room *source*.

    A candidate is valid if it is not *source*, not already in *linked*
    (this room's links) and not in *claimed* (targets used anywhere in
    the cave).  Returns ``None`` once *max_attempts* draws have all failed.
    """
    for _ in range(max_attempts):
        candidate = rng.random_below(room_count)
        if candidate != source and candidate not in linked and candidate not in claimed:
            return candidate
    return None


def claim_item(
    catalog: Sequence[Item],
    rng: GameRNG,
    max_attempts: int,
) -> int | None:
    """Draw the catalog index of an item that is not yet placed.

    Returns ``None`` if the catalog is empty or *max_attempts* draws all
    hit items that are already in the world.  The caller marks the claim.
    """
    if not catalog:
        return None
    for _ in range(max_attempts):
        idx = rng.random_below(len(catalog))
        if not catalog[idx].placed_in_world:
            return idx
    return None


# ---------------------------------------------------------------------------
# Generator
# ---------------------------------------------------------------------------

class CaveGenerator:
    """Generates the room graph and its contents for one session.

    Parameters
    ----------
    max_link_attempts:
        Random draws per outgoing link before falling back to room 0.
    max_item_attempts:
        Random draws per item roll before leaving the room itemless.
    item_chance, monster_chance:
        Percent chance per room of hosting an item / a monster.
    """

    def __init__(
        self,
        max_link_attempts: int = 10,
        max_item_attempts: int = 5,
        item_chance: int = 50,
        monster_chance: int = 20,
    ) -> None:
        self.max_link_attempts = max_link_attempts
        self.max_item_attempts = max_item_attempts
        self.item_chance = item_chance
        self.monster_chance = monster_chance

    @classmethod
    def from_config(cls, config: GameConfig) -> CaveGenerator:
        return cls(
            max_link_attempts=config.max_link_attempts,
            max_item_attempts=config.max_item_attempts,
            item_chance=config.item_chance,
            monster_chance=config.monster_chance,
        )

    def generate(
        self,
        room_count: int,
        catalog: Sequence[Item],
        bestiary: Sequence[Monster],
        narrative: NarrativePools,
        rng: GameRNG,
    ) -> list[Room]:
        """Generate a complete cave of *room_count* rooms.

        *catalog* items are claimed in place (``placed_in_world``), so pass
        the session's own catalog instances.
        """
        if room_count < 3:
            raise ValueError(f"room_count must be >= 3, got {room_count}")

        rooms = [Room(index=i) for i in range(room_count)]
        self.assign_links(rooms, rng.fork("topology"))
        self.assign_contents(rooms, catalog, bestiary, rng.fork("content"))
        self.assign_text(rooms, narrative, rng.fork("text"))
        return rooms

    # ------------------------------------------------------------------
    # Topology
    # ------------------------------------------------------------------

    def assign_links(self, rooms: list[Room], rng: GameRNG) -> None:
        """Give every room its outgoing links."""
        room_count = len(rooms)
        claimed: set[int] = set()

        for room in rooms:
            links: list[int] = []
            for _ in range(roll_out_degree(room.index, rng)):
                target = pick_link_target(
                    room.index, room_count, links, claimed, rng,
                    self.max_link_attempts,
                )
                if target is not None:
                    claimed.add(target)
                    links.append(target)
                    continue

                if room.index == START_ROOM:
                    # The start room cannot loop to itself; it is linked
                    # first, so a free index always exists.
                    target = self._first_free_target(room.index, room_count, links, claimed)
                    claimed.add(target)
                    links.append(target)
                elif START_ROOM in links:
                    logger.debug(
                        "Room %d: link slot exhausted and already leads to start, dropping",
                        room.index,
                    )
                else:
                    logger.debug("Room %d: link slot exhausted, looping to start", room.index)
                    links.append(START_ROOM)
                    room.loops_to_start = True

            room.neighbor_indices = links

    @staticmethod
    def _first_free_target(
        source: int,
        room_count: int,
        linked: Collection[int],
        claimed: Collection[int],
    ) -> int:
        for candidate in range(room_count):
            if candidate != source and candidate not in linked and candidate not in claimed:
                return candidate
        raise ValueError(f"No free link target left for room {source}")

    # ------------------------------------------------------------------
    # Contents
    # ------------------------------------------------------------------

    def assign_contents(
        self,
        rooms: list[Room],
        catalog: Sequence[Item],
        bestiary: Sequence[Monster],
        rng: GameRNG,
    ) -> None:
        """Place items and monsters.  The start room stays empty."""
        for room in rooms:
            if room.index == START_ROOM:
                continue

            if rng.roll_percent() < self.item_chance:
                idx = claim_item(catalog, rng, self.max_item_attempts)
                if idx is None:
                    logger.debug("Room %d: no unplaced item found, leaving empty", room.index)
                else:
                    catalog[idx].placed_in_world = True
                    room.item = catalog[idx].model_copy()

            if rng.roll_percent() < self.monster_chance:
                if not bestiary:
                    raise ValueError("Monster roll succeeded but the bestiary is empty")
                template = rng.random_choice(bestiary)
                room.monster = template.model_copy(deep=True)
                room.monster_present = True

    # ------------------------------------------------------------------
    # Text
    # ------------------------------------------------------------------

    def assign_text(
        self,
        rooms: list[Room],
        narrative: NarrativePools,
        rng: GameRNG,
    ) -> None:
        """Pick the prose shown inside and on the way to each room."""
        for room in rooms:
            if room.index == START_ROOM:
                room.room_text = narrative.start_room_text
                room.path_text = narrative.start_path_text
            elif room.index == ALTAR_ROOM:
                room.path_text = narrative.altar_path_text
            elif room.index == END_ROOM:
                room.path_text = narrative.end_path_text
            else:
                room.room_text = rng.random_choice(narrative.room_descriptions)
                room.path_text = rng.random_choice(narrative.path_descriptions)
