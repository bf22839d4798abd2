"""Dungeon module -- cave generation and session management."""

from ny_gothor.sim.dungeon.map_gen import (
    CaveGenerator,
    claim_item,
    pick_link_target,
    roll_out_degree,
)
from ny_gothor.sim.dungeon.run_manager import RunManager

__all__ = [
    "CaveGenerator",
    "RunManager",
    "claim_item",
    "pick_link_target",
    "roll_out_degree",
]
