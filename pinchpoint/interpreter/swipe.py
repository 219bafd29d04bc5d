from __future__ import annotations

import logging
from collections import deque

from pinchpoint.core.config import SwipeTuning
from pinchpoint.core.types import EventType, InputEvent, SwipeDirection, SwipeEvent

log = logging.getLogger(__name__)


class SwipeDetector:
    """
    Sliding-window horizontal swipe detector over the free (un-engaged) pointer.

    Direction is raw screen motion. Mapping LEFT/RIGHT to next/previous is the
    consumer's business.
    """

    def __init__(self, tuning: SwipeTuning) -> None:
        self.tuning = tuning
        self.enabled = tuning.enabled
        self._window: deque[tuple[float, float, int]] = deque()
        self._last_fire_ms: int | None = None

    def __len__(self) -> int:
        return len(self._window)

    def set_enabled(self, enabled: bool) -> None:
        self.enabled = enabled
        if not enabled:
            self._window.clear()

    def reset(self) -> None:
        self._window.clear()
        self._last_fire_ms = None

    def on_frame(self, x: float, y: float, engaged: bool, t_ms: int) -> list[InputEvent]:
        # pinching and swiping never mix: anything collected so far is void
        if not self.enabled or engaged:
            self._window.clear()
            return []

        w = self._window
        w.append((x, y, t_ms))
        horizon = t_ms - self.tuning.time_window_ms
        while w and w[0][2] < horizon:
            w.popleft()

        direction = self._detect(t_ms)
        if direction is None:
            return []

        w.clear()
        self._last_fire_ms = t_ms
        log.debug("swipe %s", direction.value)
        return [InputEvent(t_ms=t_ms, type=EventType.SWIPE, swipe=SwipeEvent(direction=direction))]

    def _detect(self, t_ms: int) -> SwipeDirection | None:
        t = self.tuning
        w = self._window
        if len(w) < t.min_samples:
            return None
        if self._last_fire_ms is not None and t_ms - self._last_fire_ms < t.cooldown_ms:
            return None

        x0, y0, t0 = w[0]
        x1, y1, t1 = w[-1]
        dx = x1 - x0
        dy = y1 - y0
        if abs(dx) <= t.threshold_px or abs(dy) >= t.max_vertical_px:
            return None
        if t1 - t0 > t.time_window_ms:
            return None
        return SwipeDirection.RIGHT if dx > 0 else SwipeDirection.LEFT
