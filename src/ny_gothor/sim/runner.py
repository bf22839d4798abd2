"""Encounter runner -- ties the combat rules, the agent and telemetry together.

Provides **CombatSimulator**, which runs a single encounter between the
player and one monster to completion:

- First contact costs the player the monster's sanity impact.
- Each round the agent fights or flees.  The player always swings first;
  a monster killed by that swing does not strike back.
- The encounter ends on a kill (``"win"``), the player's death
  (``"loss"``), a flee (``"fled"``) or the round cap (``"stalemate"``).
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ny_gothor.narration.renderer import NullNarrator
from ny_gothor.sim.mechanics.combat import resolve_monster_attack, resolve_player_attack
from ny_gothor.sim.mechanics.navigation import return_to_previous
from ny_gothor.sim.play_agents.commands import CombatAction
from ny_gothor.sim.telemetry import FLED, LOSS, STALEMATE, WIN, EncounterTelemetry

if TYPE_CHECKING:
    from ny_gothor.narration.renderer import Narrator
    from ny_gothor.sim.core.entities import Monster
    from ny_gothor.sim.core.game_state import GameState, Room
    from ny_gothor.sim.core.rng import GameRNG
    from ny_gothor.sim.play_agents.base import PlayAgent

logger = logging.getLogger(__name__)

_MAX_ROUNDS = 500


class CombatSimulator:
    """Runs a single encounter to completion.

    Parameters
    ----------
    agent:
        Makes the fight / flee and weapon decisions.
    rng:
        Stream for hit and dodge rolls.
    narrator:
        Where encounter prose goes.  Defaults to a ``NullNarrator``.
    max_rounds:
        Safety cap on player attacks in one encounter.
    """

    def __init__(
        self,
        agent: PlayAgent,
        rng: GameRNG,
        narrator: Narrator | None = None,
        max_rounds: int = _MAX_ROUNDS,
    ) -> None:
        self.agent = agent
        self.rng = rng
        self.narrator = narrator or NullNarrator()
        self.max_rounds = max_rounds

    def run_encounter(
        self,
        state: GameState,
        monster: Monster,
        room: Room | None = None,
        can_flee: bool = True,
        final: bool = False,
    ) -> EncounterTelemetry:
        """Fight *monster* until one side dies, the player flees or the cap hits.

        Parameters
        ----------
        state:
            Session state; the player is ``state.player``.
        monster:
            The live monster instance.  Its health is mutated.
        room:
            The room the monster occupies.  Cleared on a kill.
        can_flee:
            ``False`` for encounters the player cannot run from.
        final:
            Selects the final-encounter wording.

        Returns
        -------
        EncounterTelemetry
        """
        player = state.player
        room_index = room.index if room is not None else player.current_room_index
        telemetry = EncounterTelemetry(
            monster_id=monster.monster_id,
            room_index=room_index,
            player_health_start=player.health,
            sanity_gained=monster.sanity_impact,
        )

        player.add_sanity(monster.sanity_impact)
        self.narrator.scene("encounter.txt.j2", monster=monster, final=final)

        while not monster.is_dead and not player.is_dead:
            if telemetry.rounds >= self.max_rounds:
                logger.warning(
                    "Encounter with %s in room %d hit the %d-round cap",
                    monster.monster_id, room_index, self.max_rounds,
                )
                telemetry.result = STALEMATE
                break

            self.narrator.scene("combat_status.txt.j2", monster=monster, player=player)
            action = self.agent.choose_combat_action(state, monster, can_flee)

            if action is CombatAction.FLEE and can_flee:
                if return_to_previous(player):
                    self.narrator.say("You flee back the way you came.")
                    telemetry.result = FLED
                    break
                # Empty history: the round is fought instead.
                self.narrator.say("There is nowhere to run.")

            weapon = self.agent.choose_weapon(state, monster)
            if player.get_item(weapon.item_id) is None:
                raise ValueError(f"Agent chose an item the player does not own: {weapon.item_id}")

            telemetry.rounds += 1
            telemetry.weapons_used[weapon.item_id] = (
                telemetry.weapons_used.get(weapon.item_id, 0) + 1
            )

            player_attack = resolve_player_attack(monster, weapon, self.rng)
            telemetry.damage_dealt += player_attack.damage

            monster_attack = None
            if not monster.is_dead:
                monster_attack = resolve_monster_attack(player, monster, self.rng)
                telemetry.damage_taken += monster_attack.damage

            self.narrator.scene(
                "combat_round.txt.j2",
                player_attack=player_attack,
                weapon=weapon,
                monster_attack=monster_attack,
            )

        if monster.is_dead:
            telemetry.result = WIN
            self.narrator.say(f"{monster.name} has been slain.")
            if room is not None:
                room.clear_monster()
        elif player.is_dead:
            telemetry.result = LOSS

        telemetry.player_health_end = player.health
        logger.debug(
            "Encounter %s in room %d: %s after %d rounds",
            monster.monster_id, room_index, telemetry.result, telemetry.rounds,
        )
        return telemetry
