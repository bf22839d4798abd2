"""Player commands and the input-format rules that produce them.

Agents hand the session typed decisions.  Agents that read free text
(the console) use these parsers so that every front-end applies the same
format rules:

- Integers are digits only, non-empty, with no leading zero unless the
  whole input is ``"0"``.  Signs are rejected.
- Path input additionally accepts ``-1`` (go back) and the words
  ``SAVE``, ``ITEMS`` and ``QUIT`` (case-insensitive).
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from ny_gothor.sim.mechanics.navigation import RETURN_CHOICE


class PathAction(str, Enum):
    """What the player wants to do at the path prompt."""

    MOVE = "move"
    RETURN = "return"
    SAVE = "save"
    ITEMS = "items"
    QUIT = "quit"


class CombatAction(str, Enum):
    """What the player wants to do at the start of a combat round."""

    FIGHT = "fight"
    FLEE = "flee"


@dataclass(frozen=True)
class PathCommand:
    """A parsed path-prompt decision.  ``target`` is set for ``MOVE``."""

    action: PathAction
    target: int | None = None

    @classmethod
    def move(cls, target: int) -> PathCommand:
        return cls(PathAction.MOVE, target)


_KEYWORDS: dict[str, PathAction] = {
    "SAVE": PathAction.SAVE,
    "ITEMS": PathAction.ITEMS,
    "QUIT": PathAction.QUIT,
}


def is_choice_int(text: str | None) -> bool:
    """Return ``True`` if *text* is a well-formed non-negative integer."""
    if not text:
        return False
    if len(text) > 1 and text[0] == "0":
        return False
    return all("0" <= c <= "9" for c in text)


def parse_choice_int(text: str | None) -> int | None:
    """Parse a menu / room number, or ``None`` if the format is invalid."""
    if not is_choice_int(text):
        return None
    return int(text)


def parse_path_command(text: str | None) -> PathCommand | None:
    """Parse path-prompt input, or ``None`` if it matches nothing.

    Whether a parsed room number is actually reachable is for the
    navigation rules to decide.
    """
    if text is None:
        return None
    text = text.strip()

    keyword = _KEYWORDS.get(text.upper())
    if keyword is not None:
        return PathCommand(keyword)

    if text == str(RETURN_CHOICE):
        return PathCommand(PathAction.RETURN)

    target = parse_choice_int(text)
    if target is None:
        return None
    return PathCommand.move(target)


def parse_yes_no(text: str | None) -> bool | None:
    """``"y"`` -> ``True``, ``"n"`` -> ``False``, anything else ``None``."""
    if text is None:
        return None
    answer = text.strip().lower()
    if answer == "y":
        return True
    if answer == "n":
        return False
    return None
