"""Core game mechanics for the Ny'Gothor simulator.

Re-exports the primary functions from each mechanics module for convenience.

Usage::

    from ny_gothor.sim.mechanics import (
        move, return_to_previous,
        resolve_player_attack, resolve_monster_attack,
    )
"""

# -- navigation --------------------------------------------------------------
from .navigation import RETURN_CHOICE, move, return_to_previous

# -- combat ------------------------------------------------------------------
from .combat import AttackOutcome, resolve_monster_attack, resolve_player_attack

__all__ = [
    # navigation
    "RETURN_CHOICE",
    "move",
    "return_to_previous",
    # combat
    "AttackOutcome",
    "resolve_player_attack",
    "resolve_monster_attack",
]
