"""Play agent implementations.

Re-exports the base class, the command types and all concrete agents so
consumers can do::

    from ny_gothor.sim.play_agents import PlayAgent, RandomAgent
"""

from .base import PlayAgent
from .commands import (
    CombatAction,
    PathAction,
    PathCommand,
    parse_choice_int,
    parse_path_command,
    parse_yes_no,
)
from .console_agent import ConsoleAgent
from .heuristic_agent import HeuristicAgent
from .random_agent import RandomAgent

__all__ = [
    "PlayAgent",
    "RandomAgent",
    "HeuristicAgent",
    "ConsoleAgent",
    "CombatAction",
    "PathAction",
    "PathCommand",
    "parse_choice_int",
    "parse_path_command",
    "parse_yes_no",
]
