from __future__ import annotations

from collections.abc import Callable
from datetime import date
from typing import Any

from pydantic import BaseModel, ConfigDict


class GeoPoint(BaseModel):
    model_config = ConfigDict(frozen=True)

    latitude: float
    longitude: float


class TripContext(BaseModel):
    """Immutable snapshot of what the earlier wizard steps produced."""

    model_config = ConfigDict(frozen=True)

    trip_date: date | str | None = None
    starting_point: str | None = None
    starting_location: Any = None
    input_location: str | None = None
    latitude: float | None = None
    longitude: float | None = None
    location: GeoPoint | None = None


# (field name, old value, new value)
ContextListener = Callable[[str, Any, Any], None]


class TripContextStore:
    """Read/write holder for the upstream trip inputs.

    No validation happens here; the date and location pickers own that.
    Listeners are told about every field whose value actually changed.
    """

    def __init__(self, context: TripContext | None = None) -> None:
        self._context = context or TripContext()
        self._listeners: list[ContextListener] = []

    # ── Reads ───────────────────────────────────────────────────────────

    def snapshot(self) -> TripContext:
        return self._context

    @property
    def trip_date(self) -> date | str | None:
        return self._context.trip_date

    @property
    def starting_point(self) -> str | None:
        return self._context.starting_point

    @property
    def starting_location(self) -> Any:
        return self._context.starting_location

    @property
    def input_location(self) -> str | None:
        return self._context.input_location

    @property
    def latitude(self) -> float | None:
        return self._context.latitude

    @property
    def longitude(self) -> float | None:
        return self._context.longitude

    @property
    def location(self) -> GeoPoint | None:
        return self._context.location

    # ── Writes ──────────────────────────────────────────────────────────

    def set_trip_date(self, value: date | str | None) -> None:
        self._set("trip_date", value)

    def set_starting_point(self, value: str | None) -> None:
        self._set("starting_point", value)

    def set_starting_location(self, value: Any) -> None:
        self._set("starting_location", value)

    def set_input_location(self, value: str | None) -> None:
        self._set("input_location", value)

    def set_location(self, latitude: float, longitude: float) -> None:
        self._set("location", GeoPoint(latitude=latitude, longitude=longitude))

    def set_latitude(self, latitude: float | None) -> None:
        self._set("latitude", latitude)

    def set_longitude(self, longitude: float | None) -> None:
        self._set("longitude", longitude)

    def _set(self, field: str, value: Any) -> None:
        old = getattr(self._context, field)
        if old == value:
            return
        self._context = self._context.model_copy(update={field: value})
        for listener in list(self._listeners):
            listener(field, old, value)

    # ── Subscriptions ───────────────────────────────────────────────────

    def subscribe(self, listener: ContextListener) -> Callable[[], None]:
        """Register *listener*; the returned callable unsubscribes it."""
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe
