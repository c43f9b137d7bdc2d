from __future__ import annotations

from datetime import date
from typing import Any

from pydantic import BaseModel, Field

from ..places.models import Place


class ContextUpdate(BaseModel):
    """Partial update of the trip context; omitted fields are left alone."""

    trip_date: date | str | None = None
    starting_point: str | None = None
    starting_location: Any = None
    input_location: str | None = None
    latitude: float | None = Field(default=None, ge=-90.0, le=90.0)
    longitude: float | None = Field(default=None, ge=-180.0, le=180.0)


class KeywordFilterRequest(BaseModel):
    keyword: str = Field(..., min_length=1)


class SearchRequest(BaseModel):
    query: str = Field(..., max_length=1000)


class ToggleRequest(BaseModel):
    name: str = Field(..., min_length=1)


class ToggleResponse(BaseModel):
    name: str
    is_added: bool
    total_selected: int


class SelectionResponse(BaseModel):
    places: list[Place]
