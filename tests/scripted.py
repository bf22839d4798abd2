"""Deterministic stand-ins for the RNG and the player, shared by tests."""

from __future__ import annotations

from collections import deque
from typing import Iterable

from ny_gothor.sim.core.rng import GameRNG
from ny_gothor.sim.play_agents.base import PlayAgent
from ny_gothor.sim.play_agents.commands import CombatAction, PathAction, PathCommand


class ScriptedRNG(GameRNG):
    """A ``GameRNG`` whose percentile rolls come from a fixed list.

    When the list runs out, *default* is returned for every further roll.
    Forks share the same script so a session's combat stream is scripted
    too.
    """

    def __init__(self, rolls: Iterable[int] = (), default: int = 99, seed: int = 0) -> None:
        super().__init__(seed)
        self._rolls = deque(rolls)
        self._default = default

    def roll_percent(self) -> int:
        if self._rolls:
            return self._rolls.popleft()
        return self._default

    def fork(self, name: str) -> GameRNG:
        child = super().fork(name)
        scripted = ScriptedRNG(default=self._default, seed=child.seed)
        scripted._rolls = self._rolls
        return scripted


class ScriptedAgent(PlayAgent):
    """Replays queued decisions.

    ``paths`` holds ``PathCommand`` objects or plain ints (moves).  When the
    path queue is empty the agent quits.  Combat always fights with the
    hardest-hitting weapon unless ``combat`` says otherwise.
    """

    def __init__(
        self,
        paths: Iterable[PathCommand | int] = (),
        combat: Iterable[CombatAction] = (),
        pickups: Iterable[bool] = (),
        incantation: bool = True,
        save_name: str = "slot",
    ) -> None:
        self.paths = deque(paths)
        self.combat = deque(combat)
        self.pickups = deque(pickups)
        self.incantation = incantation
        self.save_name = save_name
        self.weapons_chosen: list[str] = []

    def choose_path(self, state):
        if not self.paths:
            return PathCommand(PathAction.QUIT)
        step = self.paths.popleft()
        if isinstance(step, int):
            return PathCommand.move(step)
        return step

    def choose_combat_action(self, state, monster, can_flee):
        if self.combat:
            return self.combat.popleft()
        return CombatAction.FIGHT

    def choose_weapon(self, state, monster):
        item = max(state.player.inventory, key=lambda i: i.damage)
        self.weapons_chosen.append(item.item_id)
        return item

    def confirm_pickup(self, state, item):
        if self.pickups:
            return self.pickups.popleft()
        return True

    def choose_incantation(self, state):
        return self.incantation

    def choose_save_name(self, state):
        return self.save_name
