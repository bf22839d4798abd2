"""Cave and session state for Ny'Gothor.

Houses a single cavern (``Room``) and the full mutable state of a play
session (``GameState``).  ``GameState`` is the snapshot handed to the
persistence layer: it holds the player, the room graph and the item
catalog with its claim flags.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, model_validator

from ny_gothor.sim.core.entities import Item, Monster, Player

START_ROOM = 0
"""The cavern the player falls into."""

ALTAR_ROOM = 1
"""Holds the scroll with the incantation.  Never a link source."""

END_ROOM = 2
"""Ny'Gothor's chamber.  Never a link source."""

SINK_ROOMS = frozenset({ALTAR_ROOM, END_ROOM})


# ---------------------------------------------------------------------------
# Room
# ---------------------------------------------------------------------------

class Room(BaseModel):
    """A single cavern in the generated graph."""

    index: int = Field(ge=0)
    neighbor_indices: list[int] = Field(default_factory=list)
    """Indices this room leads to, in presentation order."""

    room_text: str = ""
    """Shown when the player is in this room."""

    path_text: str = ""
    """Shown when this room is offered as a path from a neighbour."""

    item: Item | None = None
    monster: Monster | None = None
    monster_present: bool = False

    loops_to_start: bool = False
    """``True`` if the link to room 0 was a generator fallback edge."""

    # -- queries -------------------------------------------------------------

    @property
    def is_sink(self) -> bool:
        return self.index in SINK_ROOMS

    @property
    def has_live_monster(self) -> bool:
        return (
            self.monster_present
            and self.monster is not None
            and not self.monster.is_dead
        )

    def leads_to(self, index: int) -> bool:
        return index in self.neighbor_indices

    # -- mutation ------------------------------------------------------------

    def take_item(self) -> Item | None:
        """Remove and return the room's item (``None`` if there is none)."""
        item = self.item
        self.item = None
        return item

    def clear_monster(self) -> None:
        """Forget the monster once it has been slain."""
        self.monster_present = False
        self.monster = None


# ---------------------------------------------------------------------------
# GameState
# ---------------------------------------------------------------------------

class GameState(BaseModel):
    """Top-level state for an entire play session."""

    player: Player
    rooms: list[Room] = Field(default_factory=list)
    items: list[Item] = Field(default_factory=list)
    """The world item catalog; ``placed_in_world`` marks claimed items."""

    seed: int | None = None
    """Master seed the session was generated from, if known."""

    @model_validator(mode="after")
    def _check_graph(self) -> GameState:
        count = len(self.rooms)
        for position, room in enumerate(self.rooms):
            if room.index != position:
                raise ValueError(f"Room at position {position} has index {room.index}")
            for target in room.neighbor_indices:
                if not 0 <= target < count or target == room.index:
                    raise ValueError(f"Room {room.index} links to invalid room {target}")
        player = self.player
        if player.current_room_index >= count:
            raise ValueError(
                f"Current room {player.current_room_index} is outside a {count}-room cave"
            )
        for index in player.visited_rooms:
            if not 0 <= index < count:
                raise ValueError(f"Visited room {index} is outside a {count}-room cave")
        return self

    # -- queries -------------------------------------------------------------

    @property
    def room_count(self) -> int:
        return len(self.rooms)

    @property
    def current_room(self) -> Room:
        return self.rooms[self.player.current_room_index]

    def room(self, index: int) -> Room:
        return self.rooms[index]

    def item_locations(self, item_id: str) -> list[str]:
        """Return every place an instance of *item_id* currently lives.

        Entries are ``"room:<index>"`` or ``"inventory"``.  Used to check
        the one-instance-per-item invariant.
        """
        locations: list[str] = []
        for room in self.rooms:
            if room.item is not None and room.item.item_id == item_id:
                locations.append(f"room:{room.index}")
        for item in self.player.inventory:
            if item.item_id == item_id:
                locations.append("inventory")
        return locations
