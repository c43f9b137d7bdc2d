from __future__ import annotations

import logging
import random
from typing import Any

from ..gateway.base import RecommendationGateway
from ..moderation.text_filter import DEFAULT_TEXT_FILTER, TextFilter
from ..places.controller import ResultListController
from ..stores.selection import SelectionStore
from ..stores.trip_context import TripContextStore
from .config import DEFAULT_STEP_CONFIG, StepConfig

logger = logging.getLogger(__name__)

_UNLOADED = object()


class PlaceStep:
    """One mount of the place step.

    Wires the injected trip context and selection stores to a fresh result
    list controller, collects the notices meant for the user, and reloads
    the candidate list whenever the starting location changes.
    """

    def __init__(
        self,
        gateway: RecommendationGateway,
        context: TripContextStore | None = None,
        selection: SelectionStore | None = None,
        *,
        text_filter: TextFilter = DEFAULT_TEXT_FILTER,
        config: StepConfig = DEFAULT_STEP_CONFIG,
        rng: random.Random | None = None,
    ) -> None:
        self.context = context if context is not None else TripContextStore()
        self.selection = selection if selection is not None else SelectionStore()
        self.config = config
        self.notices: list[str] = []
        self.controller = ResultListController(
            gateway,
            notify=self.notices.append,
            text_filter=text_filter,
            rng=rng,
            config=config,
        )
        self._loaded_for: Any = _UNLOADED
        self._unsubscribe = self.context.subscribe(self._on_context_change)

    def _on_context_change(self, field: str, old: Any, new: Any) -> None:
        if field == "starting_location":
            logger.debug("Starting location changed from %r to %r", old, new)
            self._loaded_for = _UNLOADED

    @property
    def needs_load(self) -> bool:
        return (
            not self.controller.closed
            and self.context.starting_location is not None
            and self._loaded_for is _UNLOADED
        )

    async def ensure_loaded(self) -> None:
        """Run the initial load unless the current starting location already had one."""
        if not self.needs_load:
            return
        location = self.context.starting_location
        self._loaded_for = location
        await self.controller.initial_load(location, self.context.trip_date)

    async def reload(self) -> None:
        """User-initiated retry of the candidate fetch."""
        self._loaded_for = _UNLOADED
        await self.ensure_loaded()

    def drain_notices(self) -> list[str]:
        notices = list(self.notices)
        self.notices.clear()
        return notices

    def close(self) -> None:
        self._unsubscribe()
        self.controller.close()
