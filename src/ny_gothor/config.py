"""Game configuration.

A single frozen dataclass holds every tunable of a session.  Defaults
match the classic game; ``GameConfig.from_env`` applies environment
overrides and the CLI applies flag overrides on top via ``replace``.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field, replace
from pathlib import Path

SAVE_DIR_ENV = "NY_GOTHOR_SAVE_DIR"
TEXT_SPEED_ENV = "NY_GOTHOR_TEXT_SPEED"

_DEFAULT_SAVE_DIR = Path.home() / "Documents" / "Ny-Gothor Saves"


@dataclass(frozen=True)
class GameConfig:
    """Tunables for cave generation, combat and the console front-end."""

    room_count: int = 10
    max_link_attempts: int = 10
    """Random draws per outgoing link before falling back to room 0."""

    max_item_attempts: int = 5
    """Random draws per item roll before leaving the room empty."""

    item_chance: int = 50
    monster_chance: int = 20

    starting_health: int = 100
    insanity_threshold: int = 100
    bad_ending_sanity: int = 90
    """Sanity strictly above this after the final fight gives the bad ending."""

    max_rounds: int = 500
    """Safety cap on rounds in a single encounter."""

    save_dir: Path = field(default_factory=lambda: _DEFAULT_SAVE_DIR)
    text_speed_ms: int = 10
    """Per-character delay for console output; 0 prints instantly."""

    def __post_init__(self) -> None:
        if self.room_count < 3:
            raise ValueError(
                f"room_count must be >= 3 (start, altar, end), got {self.room_count}"
            )
        for name in ("item_chance", "monster_chance"):
            value = getattr(self, name)
            if not 0 <= value <= 100:
                raise ValueError(f"{name} must be in [0, 100], got {value}")
        if self.max_link_attempts < 1 or self.max_item_attempts < 1:
            raise ValueError("attempt bounds must be >= 1")

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None) -> GameConfig:
        """Build a config with overrides from the environment."""
        env = os.environ if environ is None else environ
        config = cls()

        save_dir = env.get(SAVE_DIR_ENV)
        if save_dir:
            config = replace(config, save_dir=Path(save_dir).expanduser())

        text_speed = env.get(TEXT_SPEED_ENV)
        if text_speed:
            try:
                config = replace(config, text_speed_ms=max(0, int(text_speed)))
            except ValueError:
                raise ValueError(
                    f"{TEXT_SPEED_ENV} must be an integer, got {text_speed!r}"
                ) from None

        return config
