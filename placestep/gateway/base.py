from __future__ import annotations

from datetime import date
from typing import Any, Protocol

from ..places.models import Place


class RecommendationGateway(Protocol):
    """The two backend operations the place step depends on.

    A returned list is a success. Failures are raised as
    ``RecommendationServerError`` (the backend replied with an ``error``
    message) or ``RecommendationTransportError`` (the call itself failed).
    """

    async def list_candidates(
        self, trip_date: date | str | None, location: Any
    ) -> list[Place]: ...

    async def search_candidates(self, query: str, pool: list[Place]) -> list[Place]: ...
