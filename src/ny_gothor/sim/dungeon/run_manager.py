"""Run manager -- drives a full session through the cave.

Owns the room-visit loop: entering a room may start an encounter, the
insanity threshold is checked on arrival and after any fight, the altar
and end rooms run their scripted scenes, items are offered for pickup and
the agent then picks where to go next.  A run ends on death, insanity, one
of the two endings, or when the agent quits.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ny_gothor.config import GameConfig
from ny_gothor.narration.renderer import NullNarrator
from ny_gothor.sim.core.entities import Player
from ny_gothor.sim.core.game_state import ALTAR_ROOM, END_ROOM, START_ROOM, GameState
from ny_gothor.sim.dungeon.map_gen import CaveGenerator
from ny_gothor.sim.mechanics.navigation import move, return_to_previous
from ny_gothor.sim.persistence import SaveError
from ny_gothor.sim.play_agents.commands import PathAction
from ny_gothor.sim.runner import CombatSimulator
from ny_gothor.sim.telemetry import (
    ABANDONED,
    BAD_ENDING,
    DEATH,
    FLED,
    GOOD_ENDING,
    INSANITY,
    LOSS,
    QUIT,
    RunTelemetry,
)

if TYPE_CHECKING:
    from ny_gothor.narration.renderer import Narrator
    from ny_gothor.sim.content.registry import ContentRegistry
    from ny_gothor.sim.core.rng import GameRNG
    from ny_gothor.sim.persistence import SaveStore
    from ny_gothor.sim.play_agents.base import PlayAgent

logger = logging.getLogger(__name__)


class RunManager:
    """Drives a full session.

    Parameters
    ----------
    registry:
        The content registry with all game data loaded.
    agent:
        The play agent making decisions.
    rng:
        Master RNG for the session.  Forked for sub-systems.
    config:
        Session tunables.  Defaults to ``GameConfig()``.
    narrator:
        Where prose goes.  Defaults to a ``NullNarrator``.
    save_store:
        Backs the ``SAVE`` command.  Without one, saving is unavailable.
    max_room_visits:
        Optional cap on room visits, for automated runs whose agent might
        wander forever.  Hitting it ends the run as ``"abandoned"``.
    """

    def __init__(
        self,
        registry: ContentRegistry,
        agent: PlayAgent,
        rng: GameRNG,
        config: GameConfig | None = None,
        narrator: Narrator | None = None,
        save_store: SaveStore | None = None,
        max_room_visits: int | None = None,
    ) -> None:
        self.registry = registry
        self.agent = agent
        self.rng = rng
        self.config = config or GameConfig()
        self.narrator = narrator or NullNarrator()
        self.save_store = save_store
        self.max_room_visits = max_room_visits
        self.combat = CombatSimulator(
            agent,
            rng.fork("combat"),
            narrator=self.narrator,
            max_rounds=self.config.max_rounds,
        )

    # ------------------------------------------------------------------
    # Session setup
    # ------------------------------------------------------------------

    def new_game(self) -> GameState:
        """Build a fresh player, item catalog and cave."""
        catalog = self.registry.build_item_catalog()
        bestiary = self.registry.roll_bestiary(self.rng.fork("bestiary"))
        rooms = CaveGenerator.from_config(self.config).generate(
            self.config.room_count,
            catalog,
            bestiary,
            self.registry.get_narrative(),
            self.rng.fork("cave"),
        )
        player = Player(
            health=self.config.starting_health,
            current_room_index=START_ROOM,
            inventory=self.registry.starter_items(),
        )
        state = GameState(player=player, rooms=rooms, items=catalog, seed=self.rng.seed)
        logger.info("New game: seed=%s, %d rooms", self.rng.seed, len(rooms))
        return state

    def run(self) -> RunTelemetry:
        """Start a new game, show the introduction and play it out."""
        return self.play(self.new_game(), show_intro=True)

    # ------------------------------------------------------------------
    # Main loop
    # ------------------------------------------------------------------

    def play(self, state: GameState, show_intro: bool = False) -> RunTelemetry:
        """Play *state* until a terminal outcome, a quit or the visit cap."""
        telemetry = RunTelemetry(seed=state.seed)

        if show_intro:
            self.narrator.scene(
                "intro.txt.j2",
                path_count=len(state.room(START_ROOM).neighbor_indices),
            )

        result: str | None = None
        visits = 0
        while result is None:
            if self.max_room_visits is not None and visits >= self.max_room_visits:
                logger.info("Room-visit cap of %d reached", self.max_room_visits)
                result = ABANDONED
                break
            visits += 1
            result = self._visit_room(state, telemetry)

        player = state.player
        telemetry.final_result = result
        telemetry.incantation_spoken = player.incantation_spoken
        telemetry.final_health = player.health
        telemetry.final_sanity = player.sanity
        logger.info(
            "Run over: %s after %d room visits (health=%d, sanity=%d)",
            result, visits, player.health, player.sanity,
        )
        return telemetry

    def _visit_room(self, state: GameState, telemetry: RunTelemetry) -> str | None:
        """One room visit.  Returns a run result, or ``None`` to keep going."""
        player = state.player
        room = state.current_room
        telemetry.rooms_visited.append(room.index)
        logger.debug("Entering room %d", room.index)

        if self._is_insane(state):
            return self._die_of_insanity(state)

        self.narrator.rule()
        if room.room_text:
            self.narrator.say(room.room_text)

        if room.has_live_monster:
            encounter = self.combat.run_encounter(state, room.monster, room=room)
            telemetry.encounters.append(encounter)
            if encounter.result == LOSS:
                self.narrator.scene("death.txt.j2", cause="combat")
                return DEATH
            if encounter.result == FLED:
                return None
            if self._is_insane(state):
                return self._die_of_insanity(state)

        if room.index == ALTAR_ROOM:
            self._visit_altar(state, telemetry)
        elif room.index == END_ROOM:
            return self._final_encounter(state, telemetry)

        if room.item is not None:
            self._offer_item(state, telemetry)

        return self._navigate(state, telemetry)

    # ------------------------------------------------------------------
    # Insanity
    # ------------------------------------------------------------------

    def _is_insane(self, state: GameState) -> bool:
        return state.player.sanity >= self.config.insanity_threshold

    def _die_of_insanity(self, state: GameState) -> str:
        state.player.kill()
        self.narrator.scene("death.txt.j2", cause="insanity")
        return INSANITY

    # ------------------------------------------------------------------
    # Scripted rooms
    # ------------------------------------------------------------------

    def _visit_altar(self, state: GameState, telemetry: RunTelemetry) -> None:
        player = state.player
        self.narrator.scene("altar.txt.j2", already_spoken=player.incantation_spoken)
        if player.incantation_spoken:
            return

        spoken = self.agent.choose_incantation(state)
        if spoken:
            player.speak_incantation()
            logger.info("Incantation spoken")
        self.narrator.scene("altar_outcome.txt.j2", spoken=spoken)
        telemetry.incantation_spoken = player.incantation_spoken

    def _final_encounter(self, state: GameState, telemetry: RunTelemetry) -> str:
        player = state.player
        self.narrator.scene("final_room.txt.j2", incantation_spoken=player.incantation_spoken)

        if not player.incantation_spoken:
            player.kill()
            self.narrator.scene("death.txt.j2", cause="final")
            return DEATH

        monster = self.registry.build_final_monster(self.rng.fork("final"))
        encounter = self.combat.run_encounter(state, monster, can_flee=False, final=True)
        telemetry.encounters.append(encounter)

        if not monster.is_dead:
            # A stalemate in the final chamber still ends the run.
            player.kill()
            self.narrator.scene("death.txt.j2", cause="combat")
            return DEATH

        ending = "bad" if player.sanity > self.config.bad_ending_sanity else "good"
        self.narrator.scene("ending.txt.j2", ending=ending)
        return BAD_ENDING if ending == "bad" else GOOD_ENDING

    # ------------------------------------------------------------------
    # Items
    # ------------------------------------------------------------------

    def _offer_item(self, state: GameState, telemetry: RunTelemetry) -> None:
        room = state.current_room
        item = room.item
        self.narrator.say(f"You find a {item.name} (Damage: {item.damage}).")
        if not self.agent.confirm_pickup(state, item):
            return

        room.take_item()
        state.player.add_item(item)
        telemetry.items_collected.append(item.item_id)
        self.narrator.say(f"You pick up the {item.name}.")

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------

    def _navigate(self, state: GameState, telemetry: RunTelemetry) -> str | None:
        """Ask the agent where to go until it moves, goes back or quits."""
        player = state.player
        while True:
            command = self.agent.choose_path(state)

            if command.action is PathAction.QUIT:
                return QUIT

            if command.action is PathAction.SAVE:
                self._save(state, telemetry)
            elif command.action is PathAction.ITEMS:
                self.narrator.scene("inventory.txt.j2", items=player.inventory)
            elif command.action is PathAction.RETURN:
                if return_to_previous(player):
                    return None
                self.narrator.say("There is no way back from here.")
            elif command.target is not None and move(state, command.target):
                return None
            else:
                self.narrator.say("Input does not match available choices.")

    def _save(self, state: GameState, telemetry: RunTelemetry) -> None:
        if self.save_store is None:
            self.narrator.say("Saving is not available.")
            return

        name = self.agent.choose_save_name(state)
        try:
            self.save_store.save(state, name)
        except SaveError as e:
            logger.warning("Save failed: %s", e)
            self.narrator.say(f"Could not save the game: {e}")
            return

        telemetry.saves.append(name)
        self.narrator.say("Game saved.")
