"""Heuristic agent that plays with some knowledge of the cave.

The ``HeuristicAgent`` is a hand-crafted policy:

- **Paths**: visit the altar when it is in reach, only walk into the end
  room once the incantation has been spoken, prefer rooms it has not seen
  yet, and backtrack out of dead ends.
- **Combat**: always swing the hardest-hitting weapon; flee when one more
  hit could be fatal and the monster is still healthy.
- **Items / altar**: always take items and always speak the incantation.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ny_gothor.sim.core.game_state import ALTAR_ROOM, END_ROOM
from ny_gothor.sim.core.rng import GameRNG
from ny_gothor.sim.play_agents.base import PlayAgent
from ny_gothor.sim.play_agents.commands import CombatAction, PathAction, PathCommand

if TYPE_CHECKING:
    from ny_gothor.sim.core.entities import Item, Monster
    from ny_gothor.sim.core.game_state import GameState


class HeuristicAgent(PlayAgent):
    """Priority-based agent.

    Parameters
    ----------
    rng:
        Tie-breaking RNG.  If ``None``, a default ``GameRNG(seed=0)``.
    """

    def __init__(self, rng: GameRNG | None = None) -> None:
        self._rng = rng or GameRNG(seed=0)
        self._seen: set[int] = set()

    # ------------------------------------------------------------------
    # PlayAgent interface
    # ------------------------------------------------------------------

    def choose_path(self, state: GameState) -> PathCommand:
        self._seen.add(state.player.current_room_index)
        links = state.current_room.neighbor_indices
        spoken = state.player.incantation_spoken

        if spoken and END_ROOM in links:
            return PathCommand.move(END_ROOM)
        if not spoken and ALTAR_ROOM in links:
            return PathCommand.move(ALTAR_ROOM)

        safe = [i for i in links if i != END_ROOM]
        unseen = [i for i in safe if i not in self._seen]
        if unseen:
            return PathCommand.move(self._rng.random_choice(unseen))
        if safe and not state.player.visited_rooms:
            return PathCommand.move(self._rng.random_choice(safe))
        if state.player.visited_rooms:
            return PathCommand(PathAction.RETURN)
        # Stuck with only the end room ahead.
        return PathCommand.move(links[0]) if links else PathCommand(PathAction.QUIT)

    def choose_combat_action(
        self,
        state: GameState,
        monster: Monster,
        can_flee: bool,
    ) -> CombatAction:
        player = state.player
        in_danger = player.health <= monster.damage_per_hit
        monster_healthy = monster.health > self._best_weapon(state).damage
        if can_flee and in_danger and monster_healthy:
            return CombatAction.FLEE
        return CombatAction.FIGHT

    def choose_weapon(self, state: GameState, monster: Monster) -> Item:
        return self._best_weapon(state)

    def confirm_pickup(self, state: GameState, item: Item) -> bool:
        return True

    def choose_incantation(self, state: GameState) -> bool:
        return True

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _best_weapon(state: GameState) -> Item:
        return max(state.player.inventory, key=lambda item: item.damage)
