from __future__ import annotations

import logging
from datetime import date
from typing import Any

import httpx
from pydantic import ValidationError

from ..errors import RecommendationServerError, RecommendationTransportError
from ..places.models import ListCandidatesRequest, Place, SearchCandidatesRequest
from .config import DEFAULT_GATEWAY_CONFIG, GatewayConfig

logger = logging.getLogger(__name__)


def _format_date(trip_date: date | str | None) -> str | None:
    if trip_date is None or trip_date == "":
        return None
    if isinstance(trip_date, date):
        return trip_date.isoformat()
    return str(trip_date)


def parse_results(payload: dict[str, Any]) -> list[Place]:
    """
    Turn a ``{"results": [...]}`` payload into an ordered list of places.

    Missing ``results`` means an empty list. Items that do not fit the
    Place schema are dropped, and a repeated name keeps its first
    occurrence so names stay unique within the result set.
    """
    raw = payload.get("results") or []
    if not isinstance(raw, list):
        raise RecommendationTransportError("Malformed response: 'results' is not a list")

    places: list[Place] = []
    seen: set[str] = set()
    for item in raw:
        try:
            place = Place.model_validate(item)
        except ValidationError:
            logger.warning("Dropping malformed place from response: %r", item)
            continue
        if place.name in seen:
            logger.warning("Dropping duplicate place %r from response", place.name)
            continue
        seen.add(place.name)
        places.append(place)
    return places


class HttpRecommendationGateway:
    """Recommendation gateway backed by the planner's HTTP API.

    Pass *client* to share a connection pool (its ``base_url`` is used);
    otherwise a short-lived client is opened per call.
    """

    def __init__(
        self,
        config: GatewayConfig = DEFAULT_GATEWAY_CONFIG,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._config = config
        self._client = client

    async def list_candidates(
        self, trip_date: date | str | None, location: Any
    ) -> list[Place]:
        body = ListCandidatesRequest(
            date=_format_date(trip_date),
            starting_location=location,
        ).model_dump(by_alias=True, mode="json")
        payload = await self._post(self._config.list_path, body)
        return parse_results(payload)

    async def search_candidates(self, query: str, pool: list[Place]) -> list[Place]:
        body = SearchCandidatesRequest(
            user_input=query,
            example_places=pool,
        ).model_dump(by_alias=True, mode="json")
        payload = await self._post(self._config.search_path, body)
        return parse_results(payload)

    async def _post(self, path: str, body: dict[str, Any]) -> dict[str, Any]:
        try:
            if self._client is not None:
                response = await self._client.post(path, json=body)
            else:
                async with httpx.AsyncClient(
                    base_url=self._config.base_url, timeout=self._config.timeout
                ) as client:
                    response = await client.post(path, json=body)
        except httpx.HTTPError as exc:
            raise RecommendationTransportError(f"POST {path} failed: {exc}") from exc
        except Exception as exc:
            logger.warning("Unexpected failure posting to %s", path, exc_info=True)
            raise RecommendationTransportError(f"POST {path} failed: {exc!r}") from exc

        try:
            payload = response.json()
        except ValueError:
            payload = None

        # Application errors arrive on 2xx and non-2xx responses alike
        if isinstance(payload, dict) and payload.get("error"):
            raise RecommendationServerError(str(payload["error"]))
        if response.is_error or not isinstance(payload, dict):
            raise RecommendationTransportError(
                f"POST {path} returned {response.status_code} without a usable body"
            )
        return payload
