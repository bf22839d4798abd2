"""Content catalog -- item, monster and narrative definitions."""

from ny_gothor.sim.content.registry import ContentRegistry, build_monster

__all__ = ["ContentRegistry", "build_monster"]
