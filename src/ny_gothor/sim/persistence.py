"""Save slots -- named JSON snapshots of a ``GameState``.

A save is the full session state (player, inventory, history, rooms and
item catalog) serialized with pydantic.  Each slot is one ``<name>.json``
file in the save directory.
"""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import ValidationError

from ny_gothor.sim.core.game_state import GameState

logger = logging.getLogger(__name__)

_SUFFIX = ".json"


class SaveError(Exception):
    """A save slot could not be written, found or read."""


def sanitize_save_name(name: str) -> str:
    """Reduce *name* to characters that are safe in a filename."""
    safe = "".join(c for c in name if c.isalnum() or c in " -_").strip()
    if not safe:
        raise SaveError(f"Invalid save name: {name!r}")
    return safe


class SaveStore:
    """Reads and writes save slots in one directory.

    The directory is created on the first save, not on construction, so
    listing a store that was never written to is not an error.
    """

    def __init__(self, save_dir: Path | str) -> None:
        self.save_dir = Path(save_dir)

    def path_for(self, name: str) -> Path:
        return self.save_dir / f"{sanitize_save_name(name)}{_SUFFIX}"

    def save(self, state: GameState, name: str) -> Path:
        """Write *state* to slot *name*, replacing any existing slot.

        Returns
        -------
        Path
            The file written.
        """
        path = self.path_for(name)
        try:
            self.save_dir.mkdir(parents=True, exist_ok=True)
            path.write_text(state.model_dump_json(indent=2), encoding="utf-8")
        except OSError as e:
            raise SaveError(f"Could not write save {path}: {e}") from e

        logger.info("Saved game to %s", path)
        return path

    def load(self, name: str) -> GameState:
        """Read slot *name* back into a ``GameState``."""
        path = self.path_for(name)
        try:
            raw = path.read_text(encoding="utf-8")
        except FileNotFoundError as e:
            raise SaveError(f"Save not found: {name}") from e
        except UnicodeDecodeError as e:
            raise SaveError(f"Save {name} is corrupt: not valid UTF-8") from e
        except OSError as e:
            raise SaveError(f"Could not read save {path}: {e}") from e

        try:
            state = GameState.model_validate_json(raw)
        except ValidationError as e:
            raise SaveError(f"Save {name} is corrupt: {e.error_count()} invalid field(s)") from e

        logger.info("Loaded game from %s", path)
        return state

    def list_saves(self) -> list[str]:
        """Slot names, most recently written first."""
        if not self.save_dir.is_dir():
            return []
        files = sorted(
            self.save_dir.glob(f"*{_SUFFIX}"),
            key=lambda p: p.stat().st_mtime,
            reverse=True,
        )
        return [p.stem for p in files]

    def delete(self, name: str) -> bool:
        """Remove slot *name*.  Returns ``False`` if it did not exist."""
        path = self.path_for(name)
        if not path.exists():
            return False
        path.unlink()
        logger.info("Deleted save %s", path)
        return True
