"""Shared fixtures for the Ny'Gothor test suite."""

from __future__ import annotations

import pytest

from ny_gothor.narration.renderer import NullNarrator
from ny_gothor.sim.content.registry import ContentRegistry


@pytest.fixture(scope="session")
def registry() -> ContentRegistry:
    """Registry with the bundled catalog loaded once."""
    reg = ContentRegistry()
    reg.load_defaults()
    return reg


@pytest.fixture
def narrator() -> NullNarrator:
    return NullNarrator()
