"""Text rendering for Ny'Gothor -- templated scenes and paced console output."""

from ny_gothor.narration.renderer import ConsoleNarrator, Narrator, NullNarrator

__all__ = ["Narrator", "ConsoleNarrator", "NullNarrator"]
