"""Room navigation -- moving along links and backtracking."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ny_gothor.sim.core.entities import Player
    from ny_gothor.sim.core.game_state import GameState

RETURN_CHOICE = -1
"""Path choice meaning "go back to the last room"."""


def move(state: GameState, target: int) -> bool:
    """Follow a link from the current room to room *target*.

    Only indices listed in the current room's ``neighbor_indices`` are
    valid.  On success the current room is pushed onto the history before
    the player moves.  Returns ``False`` (and changes nothing) otherwise.
    """
    player = state.player
    if not state.current_room.leads_to(target):
        return False

    player.visited_rooms.append(player.current_room_index)
    player.current_room_index = target
    return True


def return_to_previous(player: Player) -> bool:
    """Step back to the most recently left room.

    Does nothing (returns ``False``) when the history is empty.  The
    history is popped only while more than one entry remains, so the
    oldest entry is sticky: backtracking with a single entry keeps
    returning to that room.
    """
    history = player.visited_rooms
    if not history:
        return False

    player.current_room_index = history[-1]
    if len(history) > 1:
        history.pop()
    return True
