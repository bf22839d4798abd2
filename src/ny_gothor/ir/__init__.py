"""Content definitions for Ny'Gothor.

Items, monsters and narrative pools are described by Pydantic models that
load cleanly from the bundled JSON catalog.  Definitions are templates:
the registry turns them into live ``Item`` / ``Monster`` instances for a
session.
"""

from .items import ItemDefinition
from .monsters import MonsterDefinition, StatRange
from .narrative import NarrativePools

__all__ = [
    # items
    "ItemDefinition",
    # monsters
    "MonsterDefinition",
    "StatRange",
    # narrative
    "NarrativePools",
]
