"""
Result list controller.

Owns the fetched base list, the active filter mode and the displayed list,
and implements the transitions between them:

- initial load from the recommendation gateway,
- keyword filters and the random "today's pick", both with toggle semantics,
- natural-language search against the base list as candidate pool.

Keyword and today's-pick filters always derive from the base list, including
right after a search: search results are shown as-is and are not the input
of a later filter.

Completions are applied in arrival order, except that a completion whose
request has been superseded is dropped: an older load by a newer load, an
older search by a newer search or by any load issued after it. Nothing is
written after ``close()``.
"""
from __future__ import annotations

import logging
import random
import time
from collections.abc import Callable
from datetime import date
from typing import Any

from ..analytics.store import (
    INITIAL_LOAD,
    KEYWORD_FILTER,
    SEARCH,
    SEARCH_REJECTED,
    TODAY_PICK,
    record_event,
)
from ..errors import (
    QueryRejectedError,
    RecommendationServerError,
    RecommendationTransportError,
)
from ..gateway.base import RecommendationGateway
from ..moderation.text_filter import DEFAULT_TEXT_FILTER, TextFilter
from ..step.config import DEFAULT_STEP_CONFIG, StepConfig
from .models import FilterKind, FilterMode, Place

logger = logging.getLogger(__name__)

Notifier = Callable[[str], None]


def _ignore(message: str) -> None:
    logger.info("Notice with no listener: %s", message)


def _elapsed_ms(start: float) -> float:
    return round((time.time() - start) * 1000, 1)


class ResultListController:
    def __init__(
        self,
        gateway: RecommendationGateway,
        *,
        notify: Notifier | None = None,
        text_filter: TextFilter = DEFAULT_TEXT_FILTER,
        rng: random.Random | None = None,
        config: StepConfig = DEFAULT_STEP_CONFIG,
    ) -> None:
        self._gateway = gateway
        self._notify = notify or _ignore
        self._text_filter = text_filter
        self._rng = rng or random.Random()
        self._config = config

        self._base: list[Place] = []
        self._displayed: list[Place] = []
        self._filter = FilterMode.off()
        self.query = ""

        self._in_flight = 0
        self._generation = 0
        self._latest_load = 0
        self._latest_search = 0
        self._closed = False

    # ── State (read-only views) ─────────────────────────────────────────

    @property
    def base_list(self) -> list[Place]:
        return list(self._base)

    @property
    def displayed_list(self) -> list[Place]:
        return list(self._displayed)

    @property
    def active_filter(self) -> FilterMode:
        return self._filter

    @property
    def loading(self) -> bool:
        return self._in_flight > 0

    @property
    def closed(self) -> bool:
        return self._closed

    def find(self, name: str) -> Place | None:
        """Look a place up by name in the displayed list, then the base list."""
        for place in self._displayed:
            if place.name == name:
                return place
        for place in self._base:
            if place.name == name:
                return place
        return None

    def close(self) -> None:
        self._closed = True

    # ── Initial load ────────────────────────────────────────────────────

    async def initial_load(
        self,
        starting_location: Any,
        trip_date: date | str | None = None,
    ) -> None:
        if starting_location is None or self._closed:
            return

        token = self._issue()
        self._latest_load = token
        start = time.time()
        outcome = "ok"
        results: list[Place] = []

        self._in_flight += 1
        try:
            results = await self._gateway.list_candidates(trip_date, starting_location)
        except RecommendationServerError as exc:
            outcome = "server_error"
            if self._load_is_current(token):
                self._notify(exc.message)
        except RecommendationTransportError:
            outcome = "transport_error"
            logger.warning("Fetching the recommended place list failed", exc_info=True)
        finally:
            self._in_flight -= 1

        if outcome == "ok":
            if self._load_is_current(token):
                self._base = list(results)
                self._displayed = list(results)
                self._filter = FilterMode.off()
            else:
                outcome = "stale"
                logger.debug("Discarding superseded place list (request %d)", token)

        record_event(INITIAL_LOAD, {
            "outcome": outcome,
            "results_returned": len(results),
            "has_trip_date": trip_date is not None,
            "response_time_ms": _elapsed_ms(start),
        })

    # ── Client-side filters ─────────────────────────────────────────────

    def apply_keyword_filter(self, keyword: str) -> None:
        if self._closed:
            return
        mode = FilterMode.for_keyword(keyword)
        if self._filter == mode:
            self._clear_filter()
        else:
            self._filter = mode
            self._displayed = [p for p in self._base if p.matches_keyword(keyword)]

        record_event(KEYWORD_FILTER, {
            "keyword": keyword,
            "active": self._filter.is_active,
            "results_shown": len(self._displayed),
        })

    def apply_today_random(self) -> None:
        if self._closed:
            return
        if self._filter.kind is FilterKind.today:
            self._clear_filter()
        else:
            self._filter = FilterMode.today_random()
            size = min(self._config.today_pick_size, len(self._base))
            self._displayed = self._rng.sample(self._base, size)

        record_event(TODAY_PICK, {
            "active": self._filter.is_active,
            "results_shown": len(self._displayed),
        })

    def _clear_filter(self) -> None:
        self._filter = FilterMode.off()
        self._displayed = list(self._base)

    # ── Natural-language search ─────────────────────────────────────────

    async def search_by_query(self, query: str | None = None) -> None:
        if self._closed:
            return
        text = self.query if query is None else query

        try:
            self._text_filter.ensure_allowed(text, self._config.rejected_query_message)
        except QueryRejectedError as exc:
            self.query = ""
            self._notify(str(exc))
            record_event(SEARCH_REJECTED, {"query": text})
            return

        token = self._issue()
        self._latest_search = token
        start = time.time()
        outcome = "ok"
        results: list[Place] = []

        previous = self._displayed
        pending: list[Place] = []
        self._displayed = pending
        self._in_flight += 1
        try:
            results = await self._gateway.search_candidates(text, list(self._base))
        except RecommendationServerError as exc:
            outcome = "server_error"
            if self._search_is_current(token):
                self._restore(pending, previous)
                self._notify(exc.message)
        except RecommendationTransportError:
            outcome = "transport_error"
            logger.warning("Natural-language place search failed", exc_info=True)
            if self._search_is_current(token):
                self._restore(pending, previous)
                self._notify(self._config.search_failed_message)
        finally:
            self._in_flight -= 1

        if outcome == "ok":
            if self._search_is_current(token):
                self._displayed = list(results)
                self.query = ""
            else:
                outcome = "stale"
                logger.debug("Discarding superseded search results (request %d)", token)

        record_event(SEARCH, {
            "query": text,
            "outcome": outcome,
            "pool_size": len(self._base),
            "results_returned": len(results),
            "response_time_ms": _elapsed_ms(start),
        })

    def _restore(self, pending: list[Place], previous: list[Place]) -> None:
        # Only undo our own in-flight clear; a filter toggled meanwhile stays.
        if self._displayed is pending:
            self._displayed = previous

    # ── Request generations ─────────────────────────────────────────────

    def _issue(self) -> int:
        self._generation += 1
        return self._generation

    def _load_is_current(self, token: int) -> bool:
        return not self._closed and token == self._latest_load

    def _search_is_current(self, token: int) -> bool:
        # A load issued after the search replaced the pool it searched.
        return (
            not self._closed
            and token == self._latest_search
            and token > self._latest_load
        )
