from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class Place(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)

    name: str = Field(..., min_length=1, description="Unique within one result set")
    type: str | None = None
    category: str | None = None
    region: str = ""
    description: str = ""
    reason: str = ""
    image_url: str | None = Field(default=None, alias="imageUrl")

    def matches_keyword(self, keyword: str) -> bool:
        return self.type == keyword or self.category == keyword


class FilterKind(str, Enum):
    none = "none"
    keyword = "keyword"
    today = "today"


class FilterMode(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: FilterKind = FilterKind.none
    keyword: str | None = None

    @classmethod
    def off(cls) -> FilterMode:
        return cls()

    @classmethod
    def for_keyword(cls, keyword: str) -> FilterMode:
        return cls(kind=FilterKind.keyword, keyword=keyword)

    @classmethod
    def today_random(cls) -> FilterMode:
        return cls(kind=FilterKind.today)

    @property
    def is_active(self) -> bool:
        return self.kind is not FilterKind.none


# ── Wire shapes ─────────────────────────────────────────────────────────


class ListCandidatesRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    date: str | None = None
    starting_location: Any = Field(..., alias="startingLocation")


class SearchCandidatesRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    user_input: str = Field(..., alias="userInput")
    example_places: list[Place] = Field(default_factory=list, alias="examplePlaces")
