"""Base class for agents that make a player's decisions.

All play agents must subclass ``PlayAgent`` and implement the abstract
methods.  The session and the combat simulator call these at decision
points; an agent may block (e.g. waiting on console input) but must
always return a well-formed decision.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ny_gothor.sim.core.entities import Item, Monster
    from ny_gothor.sim.core.game_state import GameState
    from ny_gothor.sim.play_agents.commands import CombatAction, PathCommand


class PlayAgent(ABC):
    """Base class for anything that plays the game."""

    @abstractmethod
    def choose_path(self, state: GameState) -> PathCommand:
        """Choose what to do at the end of a room visit.

        Parameters
        ----------
        state:
            The full session state; ``state.current_room`` lists the links.

        Returns
        -------
        PathCommand
            Move to a room index, go back, save, list items or quit.  A
            move to an index that is not a link is rejected by the session
            and the agent is asked again.
        """

    @abstractmethod
    def choose_combat_action(
        self,
        state: GameState,
        monster: Monster,
        can_flee: bool,
    ) -> CombatAction:
        """Choose to fight or flee at the start of a combat round.

        ``FLEE`` is ignored when *can_flee* is ``False``.
        """

    @abstractmethod
    def choose_weapon(self, state: GameState, monster: Monster) -> Item:
        """Choose an owned item to attack with.

        Must return an item from ``state.player.inventory``.
        """

    @abstractmethod
    def confirm_pickup(self, state: GameState, item: Item) -> bool:
        """Decide whether to pick up *item* from the current room."""

    @abstractmethod
    def choose_incantation(self, state: GameState) -> bool:
        """Decide whether to speak the scroll's text at the altar."""

    def choose_save_name(self, state: GameState) -> str:
        """Name for a save slot.  Only asked after a ``SAVE`` command."""
        return "autosave"
