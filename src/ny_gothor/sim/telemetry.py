"""Telemetry data models for per-encounter and per-run statistics.

These lightweight dataclasses capture how a session went without storing
the entire game-state history:

- **EncounterTelemetry**: monster, outcome, rounds, damage both ways.
- **RunTelemetry**: seed, ordered encounters, rooms walked, final outcome.

Both classes are plain ``dataclass`` instances (not Pydantic models) to
keep collection cheap during batch runs.
"""

from __future__ import annotations

from dataclasses import dataclass, field

# Encounter results
WIN = "win"
LOSS = "loss"
FLED = "fled"
STALEMATE = "stalemate"
"""The round cap ended the encounter with both sides alive."""

# Run results
GOOD_ENDING = "good_ending"
BAD_ENDING = "bad_ending"
DEATH = "death"
INSANITY = "insanity"
QUIT = "quit"
ABANDONED = "abandoned"
"""The room-visit cap was reached (automated runs only)."""


@dataclass
class EncounterTelemetry:
    """Stats from a single encounter.

    Attributes
    ----------
    monster_id:
        Identifier of the monster fought.
    room_index:
        Room the encounter happened in.
    result:
        ``"win"``, ``"loss"``, ``"fled"`` or ``"stalemate"``.
    rounds:
        Number of player attacks made.
    player_health_start / player_health_end:
        Player health around the encounter.
    sanity_gained:
        Sanity added on first contact.
    damage_dealt / damage_taken:
        Health removed from the monster / from the player.
    weapons_used:
        ``item_id -> swing count``.
    """

    monster_id: str
    room_index: int
    result: str = LOSS
    rounds: int = 0
    player_health_start: int = 0
    player_health_end: int = 0
    sanity_gained: int = 0
    damage_dealt: int = 0
    damage_taken: int = 0
    weapons_used: dict[str, int] = field(default_factory=dict)


@dataclass
class RunTelemetry:
    """Stats from a full session.

    Attributes
    ----------
    seed:
        The master RNG seed of the session, if known.
    encounters:
        Ordered list of encounter telemetry.
    final_result:
        One of ``"good_ending"``, ``"bad_ending"``, ``"death"``,
        ``"insanity"``, ``"quit"`` or ``"abandoned"``.
    rooms_visited:
        Room index at each room visit, in order.
    items_collected:
        Item ids picked up, in order.
    """

    seed: int | None
    encounters: list[EncounterTelemetry] = field(default_factory=list)
    final_result: str = QUIT
    rooms_visited: list[int] = field(default_factory=list)
    items_collected: list[str] = field(default_factory=list)
    incantation_spoken: bool = False
    final_health: int = 0
    final_sanity: int = 0
    saves: list[str] = field(default_factory=list)

    @property
    def survived(self) -> bool:
        return self.final_result in (GOOD_ENDING, BAD_ENDING)
