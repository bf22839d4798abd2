"""Narrators -- turn game events into prose on some output.

Scenes are Jinja2 templates in ``templates/``.  The session decides *which*
scene to show and with what context; a narrator decides *how* the text
reaches the player.  ``ConsoleNarrator`` types it out character by
character, ``NullNarrator`` only records it (tests, batch runs).
"""

from __future__ import annotations

import sys
import time
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Callable, TextIO

from jinja2 import Environment, FileSystemLoader, StrictUndefined

_TEMPLATE_DIR = Path(__file__).parent / "templates"

RULE = "-" * 70


class Narrator(ABC):
    """Renders scenes and delivers lines of text to the player."""

    def __init__(self) -> None:
        self._jinja = Environment(
            loader=FileSystemLoader(str(_TEMPLATE_DIR)),
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
            undefined=StrictUndefined,
        )

    @abstractmethod
    def say(self, text: str, paced: bool = True) -> None:
        """Deliver one line of text."""

    def render(self, template: str, **context: Any) -> str:
        return self._jinja.get_template(template).render(**context)

    def scene(self, template: str, **context: Any) -> None:
        """Render *template* and deliver each non-blank line."""
        for line in self.render(template, **context).splitlines():
            if line.strip():
                self.say(line)

    def rule(self) -> None:
        self.say(RULE, paced=False)


class ConsoleNarrator(Narrator):
    """Types text out to a stream.

    Parameters
    ----------
    stream:
        Where to write.  Defaults to ``sys.stdout``.
    text_speed_ms:
        Delay per character; ``0`` writes whole lines at once.
    sleep:
        Injected for tests.
    """

    def __init__(
        self,
        stream: TextIO | None = None,
        text_speed_ms: int = 10,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        super().__init__()
        self._stream = stream or sys.stdout
        self._delay = max(0, text_speed_ms) / 1000
        self._sleep = sleep

    def say(self, text: str, paced: bool = True) -> None:
        if not paced or self._delay == 0:
            self._stream.write(text + "\n")
            self._stream.flush()
            return

        for char in text:
            self._stream.write(char)
            self._stream.flush()
            self._sleep(self._delay)
        self._stream.write("\n")
        self._stream.flush()


class NullNarrator(Narrator):
    """Collects lines instead of printing them."""

    def __init__(self) -> None:
        super().__init__()
        self.lines: list[str] = []

    def say(self, text: str, paced: bool = True) -> None:
        self.lines.append(text)

    @property
    def transcript(self) -> str:
        return "\n".join(self.lines)
