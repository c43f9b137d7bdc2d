from __future__ import annotations

import logging
import time
from collections import OrderedDict
from collections.abc import Callable

from .session import PlaceStep

logger = logging.getLogger(__name__)


class StepRegistry:
    """Mounted steps keyed by session id, bounded in size and idle time.

    Least-recently-used steps are unmounted once ``max_steps`` is exceeded,
    and any step untouched for ``idle_seconds`` is unmounted on the next
    access. Unmounting closes the step, so late completions are dropped.
    """

    def __init__(
        self,
        max_steps: int = 500,
        idle_seconds: float = 1800.0,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.max_steps = max_steps
        self.idle_seconds = idle_seconds
        self._clock = clock
        self._steps: OrderedDict[str, tuple[PlaceStep, float]] = OrderedDict()

    def get(self, step_id: str | None) -> PlaceStep | None:
        self._evict_idle()
        if not step_id or step_id not in self._steps:
            return None
        step, _ = self._steps[step_id]
        self._steps[step_id] = (step, self._clock())
        self._steps.move_to_end(step_id)
        return step

    def mount(self, step_id: str, step: PlaceStep) -> None:
        self._evict_idle()
        self._steps[step_id] = (step, self._clock())
        self._steps.move_to_end(step_id)
        while len(self._steps) > self.max_steps:
            old_id, (old_step, _) = self._steps.popitem(last=False)
            logger.info("Unmounting least recently used place step %s", old_id)
            old_step.close()

    def unmount(self, step_id: str | None) -> bool:
        entry = self._steps.pop(step_id, None) if step_id else None
        if entry is None:
            return False
        entry[0].close()
        return True

    def clear(self) -> None:
        for step, _ in self._steps.values():
            step.close()
        self._steps.clear()

    def _evict_idle(self) -> None:
        cutoff = self._clock() - self.idle_seconds
        # Entries are kept in access order, so idle ones sit at the front
        while self._steps:
            step_id, (step, last_seen) = next(iter(self._steps.items()))
            if last_seen > cutoff:
                break
            del self._steps[step_id]
            logger.info("Unmounting idle place step %s", step_id)
            step.close()

    def __contains__(self, step_id: object) -> bool:
        return step_id in self._steps

    def __len__(self) -> int:
        return len(self._steps)
