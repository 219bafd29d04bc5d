from __future__ import annotations

from collections import deque

from pinchpoint.core.config import StabilityTuning
from pinchpoint.core.types import GestureSymbol


class StabilityFilter:
    """
    Frame-count hysteresis over raw gesture symbols.

    Engage (or switch) only after `window` identical non-NONE frames;
    release as soon as the last `release_window` frames are NONE.
    """

    def __init__(self, tuning: StabilityTuning) -> None:
        self.tuning = tuning
        self._history: deque[GestureSymbol] = deque(maxlen=tuning.window)
        self.state: GestureSymbol = GestureSymbol.NONE

    def reset(self) -> None:
        self._history.clear()
        self.state = GestureSymbol.NONE

    @property
    def history(self) -> tuple[GestureSymbol, ...]:
        return tuple(self._history)

    def stabilize(self, raw: GestureSymbol) -> GestureSymbol:
        h = self._history
        h.append(raw)

        if raw is not GestureSymbol.NONE:
            if len(h) == self.tuning.window and all(g is raw for g in h):
                self.state = raw
        elif self.state is not GestureSymbol.NONE:
            n = self.tuning.release_window
            if len(h) >= n and all(g is GestureSymbol.NONE for g in list(h)[-n:]):
                self.state = GestureSymbol.NONE

        return self.state
