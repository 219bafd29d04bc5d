from __future__ import annotations

import logging
import math
from dataclasses import dataclass

from pinchpoint.core.config import ClickDragTuning
from pinchpoint.core.types import (
    EventType, GestureSymbol, InputEvent, Mode, ScrollEvent,
)

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class ClickMemory:
    """Last PRIMARY release, kept only to spot a double-click."""
    t_ms: int
    x: float
    y: float


class InteractionStateMachine:
    """
    IDLE -> ENGAGED(symbol) -> [DRAGGING] -> IDLE

    Fed one stabilized gesture + smoothed pointer per tick. Clicks are only
    decided on release, so nothing here is ever taken back.
    """

    def __init__(self, tuning: ClickDragTuning) -> None:
        self.tuning = tuning

        self.mode: Mode = Mode.IDLE
        self.symbol: GestureSymbol = GestureSymbol.NONE

        # anchors
        self._pinch_start: tuple[float, float] | None = None
        self._scroll_anchor: tuple[float, float] | None = None

        self.click_memory: ClickMemory | None = None

    @property
    def is_engaged(self) -> bool:
        return self.mode is not Mode.IDLE

    def reset(self) -> None:
        if self.mode is not Mode.IDLE:
            log.debug("reset while %s(%s)", self.mode.value, self.symbol.value)
        self.mode = Mode.IDLE
        self.symbol = GestureSymbol.NONE
        self._pinch_start = None
        self._scroll_anchor = None
        self.click_memory = None

    def on_frame(self, x: float, y: float, gesture: GestureSymbol, t_ms: int) -> list[InputEvent]:
        pinching = gesture is not GestureSymbol.NONE

        if pinching and self.mode is Mode.IDLE:
            return self._engage(x, y, gesture, t_ms)

        if pinching:
            return self._hold(x, y, t_ms)

        if self.mode is not Mode.IDLE:
            return self._release(x, y, t_ms)

        return []

    # ---------------------- transitions ----------------------

    def _engage(self, x: float, y: float, gesture: GestureSymbol, t_ms: int) -> list[InputEvent]:
        self.mode = Mode.ENGAGED
        # the engaging symbol decides the release action, even if the pinch morphs later
        self.symbol = gesture
        self._pinch_start = (x, y)
        self._scroll_anchor = (x, y)
        log.debug("engage %s at (%.0f, %.0f)", gesture.value, x, y)
        return [InputEvent.at(t_ms, EventType.POINTER_DOWN, x, y)]

    def _hold(self, x: float, y: float, t_ms: int) -> list[InputEvent]:
        out: list[InputEvent] = []

        # only the index pinch can turn into a drag
        if self.mode is Mode.ENGAGED and self.symbol is GestureSymbol.PRIMARY:
            sx, sy = self._pinch_start
            if math.hypot(x - sx, y - sy) > self.tuning.drag_threshold_px:
                self.mode = Mode.DRAGGING
                log.debug("drag begin at (%.0f, %.0f)", x, y)
                out.append(InputEvent.at(t_ms, EventType.DRAG_BEGIN, x, y))

        if self.mode is Mode.DRAGGING:
            # frame-to-frame delta; hand moving up gives a positive delta
            dy = self._scroll_anchor[1] - y
            self._scroll_anchor = (x, y)
            out.append(InputEvent(
                t_ms=t_ms, type=EventType.SCROLL,
                scroll=ScrollEvent(dy=dy * self.tuning.scroll_speed),
            ))

        return out

    def _release(self, x: float, y: float, t_ms: int) -> list[InputEvent]:
        prev_mode, prev_symbol = self.mode, self.symbol
        self.mode = Mode.IDLE
        self.symbol = GestureSymbol.NONE
        self._pinch_start = None
        self._scroll_anchor = None

        if prev_mode is Mode.DRAGGING:
            log.debug("drag end at (%.0f, %.0f)", x, y)
            return [InputEvent.at(t_ms, EventType.DRAG_END, x, y)]

        if prev_symbol is GestureSymbol.SECONDARY:
            log.debug("secondary click at (%.0f, %.0f)", x, y)
            return [InputEvent.at(t_ms, EventType.SECONDARY_CLICK, x, y)]

        return [self._primary_release(x, y, t_ms)]

    def _primary_release(self, x: float, y: float, t_ms: int) -> InputEvent:
        mem = self.click_memory
        if (
            mem is not None
            and t_ms - mem.t_ms < self.tuning.double_click_ms
            and math.hypot(x - mem.x, y - mem.y) < self.tuning.double_click_px
        ):
            self.click_memory = None
            log.debug("double click at (%.0f, %.0f)", x, y)
            return InputEvent.at(t_ms, EventType.DOUBLE_CLICK, x, y)

        self.click_memory = ClickMemory(t_ms=t_ms, x=x, y=y)
        log.debug("click at (%.0f, %.0f)", x, y)
        return InputEvent.at(t_ms, EventType.CLICK, x, y)
