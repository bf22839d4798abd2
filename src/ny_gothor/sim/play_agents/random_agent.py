"""Random action agent -- picks paths and weapons uniformly at random.

The ``RandomAgent`` is the simplest possible play agent.  It is used as
the baseline for batch runs: it lets us verify that the full session loop
works end-to-end and gives a lower bound on how survivable a cave is.

Behaviour:
    - At each path prompt there is a 10 % chance it goes back; otherwise
      it follows a random link (and goes back from dead ends).
    - In combat it flees with a 10 % chance when allowed, otherwise it
      swings a random owned weapon.
    - It always picks items up and speaks the incantation half the time.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ny_gothor.sim.core.rng import GameRNG
from ny_gothor.sim.play_agents.base import PlayAgent
from ny_gothor.sim.play_agents.commands import CombatAction, PathAction, PathCommand

if TYPE_CHECKING:
    from ny_gothor.sim.core.entities import Item, Monster
    from ny_gothor.sim.core.game_state import GameState


class RandomAgent(PlayAgent):
    """Agent that wanders and fights at random.

    Parameters
    ----------
    rng:
        Seeded RNG for deterministic randomness.  If ``None``, a default
        ``GameRNG(seed=0)`` is created.
    return_chance:
        Probability (0.0 -- 1.0) of backtracking at a path prompt.
    flee_chance:
        Probability (0.0 -- 1.0) of fleeing at the start of a round.
    """

    def __init__(
        self,
        rng: GameRNG | None = None,
        return_chance: float = 0.10,
        flee_chance: float = 0.10,
    ) -> None:
        self._rng = rng or GameRNG(seed=0)
        self._return_chance = return_chance
        self._flee_chance = flee_chance

    # ------------------------------------------------------------------
    # PlayAgent interface
    # ------------------------------------------------------------------

    def choose_path(self, state: GameState) -> PathCommand:
        links = state.current_room.neighbor_indices
        if not links or self._rng.random_float() < self._return_chance:
            return PathCommand(PathAction.RETURN)
        return PathCommand.move(self._rng.random_choice(links))

    def choose_combat_action(
        self,
        state: GameState,
        monster: Monster,
        can_flee: bool,
    ) -> CombatAction:
        if can_flee and self._rng.random_float() < self._flee_chance:
            return CombatAction.FLEE
        return CombatAction.FIGHT

    def choose_weapon(self, state: GameState, monster: Monster) -> Item:
        return self._rng.random_choice(state.player.inventory)

    def confirm_pickup(self, state: GameState, item: Item) -> bool:
        return True

    def choose_incantation(self, state: GameState) -> bool:
        return self._rng.random_float() < 0.5
