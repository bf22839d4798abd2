"""Console agent -- a human at the keyboard.

Every prompt re-asks until the input is well formed, so the session only
ever receives valid decisions.  Input is read through an injectable
``input_fn`` and prompts go through the narrator, which keeps the agent
testable without a terminal.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from ny_gothor.sim.play_agents.base import PlayAgent
from ny_gothor.sim.play_agents.commands import (
    CombatAction,
    PathCommand,
    parse_choice_int,
    parse_path_command,
    parse_yes_no,
)

if TYPE_CHECKING:
    from ny_gothor.narration.renderer import Narrator
    from ny_gothor.sim.core.entities import Item, Monster
    from ny_gothor.sim.core.game_state import GameState

_FIGHT = 1
_FLEE = 2


class ConsoleAgent(PlayAgent):
    """Reads decisions from a line-based input.

    Parameters
    ----------
    narrator:
        Used for prompts and "invalid input" feedback.
    input_fn:
        Returns the next line of input (without newline).  Defaults to
        the builtin ``input``.
    """

    def __init__(
        self,
        narrator: Narrator,
        input_fn: Callable[[str], str] | None = None,
    ) -> None:
        self._narrator = narrator
        self._input = input_fn or input

    # ------------------------------------------------------------------
    # Low-level prompts
    # ------------------------------------------------------------------

    def ask(self, prompt: str = "") -> str:
        """Show *prompt* (if any) and read one line."""
        if prompt:
            self._narrator.say(prompt)
        return self._input("")

    def ask_int(self, prompt: str = "") -> int:
        """Read a well-formed non-negative integer, re-asking until valid."""
        value = parse_choice_int(self.ask(prompt).strip())
        while value is None:
            value = parse_choice_int(self.ask("Invalid input. Enter an integer.").strip())
        return value

    def choose_menu_option(self, count: int) -> int:
        """Read a 1-based menu option in ``[1, count]``."""
        while True:
            choice = self.ask_int()
            if 1 <= choice <= count:
                return choice
            self._narrator.say("Invalid choice.")

    # ------------------------------------------------------------------
    # PlayAgent interface
    # ------------------------------------------------------------------

    def choose_path(self, state: GameState) -> PathCommand:
        paths = [
            (index, state.room(index).path_text)
            for index in state.current_room.neighbor_indices
        ]
        self._narrator.scene("paths.txt.j2", paths=paths)

        command = parse_path_command(self.ask())
        while command is None:
            self._narrator.say("Input does not match available choices.")
            self._narrator.rule()
            command = parse_path_command(self.ask())
        return command

    def choose_combat_action(
        self,
        state: GameState,
        monster: Monster,
        can_flee: bool,
    ) -> CombatAction:
        while True:
            self._narrator.say(f"Fight: {_FIGHT}")
            if can_flee:
                self._narrator.say(f"Run: {_FLEE}")
            choice = self.ask_int()
            if choice == _FIGHT:
                return CombatAction.FIGHT
            if choice == _FLEE and can_flee:
                return CombatAction.FLEE
            self._narrator.say("Invalid input.")

    def choose_weapon(self, state: GameState, monster: Monster) -> Item:
        self._narrator.scene("inventory.txt.j2", items=state.player.inventory)
        item = state.player.find_item(self.ask("What will you use?").strip())
        while item is None:
            item = state.player.find_item(
                self.ask("Invalid input. Enter item name.").strip()
            )
        return item

    def confirm_pickup(self, state: GameState, item: Item) -> bool:
        # Anything but an explicit "y" leaves the item where it is.
        return parse_yes_no(self.ask(f"Do you pickup the {item.name}? (y/n)")) is True

    def choose_incantation(self, state: GameState) -> bool:
        answer = parse_yes_no(self.ask("Do you speak the text? (y/n)"))
        while answer is None:
            self._narrator.say("Invalid input. Enter y/n.")
            answer = parse_yes_no(self.ask("Do you speak the text? (y/n)"))
        return answer

    def choose_save_name(self, state: GameState) -> str:
        name = self.ask("Enter save name.").strip()
        while not name:
            name = self.ask("Enter save name.").strip()
        return name
