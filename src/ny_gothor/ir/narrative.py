"""Narrative pools the generator draws room text from."""

from __future__ import annotations

from pydantic import BaseModel, Field


class NarrativePools(BaseModel):
    """Opaque prose the generator selects from; it never composes text."""

    start_room_text: str
    start_path_text: str
    altar_path_text: str
    end_path_text: str
    room_descriptions: list[str] = Field(min_length=1)
    path_descriptions: list[str] = Field(min_length=1)
