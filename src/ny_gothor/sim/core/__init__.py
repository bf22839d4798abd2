"""Core simulation primitives for the Ny'Gothor cave crawler."""

from ny_gothor.sim.core.entities import Item, Monster, Player
from ny_gothor.sim.core.game_state import (
    ALTAR_ROOM,
    END_ROOM,
    SINK_ROOMS,
    START_ROOM,
    GameState,
    Room,
)
from ny_gothor.sim.core.rng import GameRNG

__all__ = [
    # rng
    "GameRNG",
    # entities
    "Item",
    "Monster",
    "Player",
    # game_state
    "Room",
    "GameState",
    "START_ROOM",
    "ALTAR_ROOM",
    "END_ROOM",
    "SINK_ROOMS",
]
