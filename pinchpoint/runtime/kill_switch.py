from __future__ import annotations

import logging
from dataclasses import dataclass, field

from pinchpoint.core.config import SinkTuning
from pinchpoint.core.control import ControlState
from pinchpoint.core.types import EventType, InputEvent, SwipeDirection
from pinchpoint.injector.device import PointerDevice
from pinchpoint.interpreter.pipeline import Interpreter

log = logging.getLogger(__name__)

# swiping the hand left advances, like flicking a page
SWIPE_KEYS = {SwipeDirection.LEFT: "right", SwipeDirection.RIGHT: "left"}


@dataclass
class KillSwitch:
    """
    Central safety gate between the interpreter and the OS.
    If ControlState is OFF, we:
      - stop the interpreter session (all gesture state dropped)
      - release buttons
      - block all injection
    """
    state: ControlState
    interp: Interpreter
    device: PointerDevice
    sink: SinkTuning = field(default_factory=SinkTuning)

    _last_enabled: bool = True
    _last_slides: bool | None = None
    _last_move_ms: int | None = None
    _last_move_xy: tuple[int, int] | None = None
    _scroll_remainder: float = 0.0

    def guard(self, t_ms: int) -> None:
        enabled = self.state.is_enabled()
        slides = self.state.slides_enabled()

        if enabled != self._last_enabled:
            self._last_enabled = enabled
            if not enabled:
                # Transition -> OFF: hard stop
                self.interp.stop()
                self._release_all()
                log.info("OFF at %d", t_ms)
            else:
                self.interp.start(swipe=slides)
                self._last_slides = slides
                log.info("ON at %d", t_ms)
            return

        if enabled and slides != self._last_slides:
            # slides mode changes the swipe detector, so start a fresh session
            if self._last_slides is not None:
                self.interp.start(swipe=slides)
                log.info("slides %s", "on" if slides else "off")
            else:
                self.interp.swipe.set_enabled(slides)
            self._last_slides = slides

    def allow(self) -> bool:
        return self.state.is_enabled()

    def apply(self, ev: InputEvent) -> None:
        """
        Apply an InputEvent to the OS ONLY if enabled.
        """
        if not self.allow():
            return

        t = ev.type
        if t == EventType.MOVE:
            self._move(ev.t_ms, ev.move.x, ev.move.y)
        elif t == EventType.CLICK:
            self._jump(ev)
            self.device.click("left")
        elif t == EventType.DOUBLE_CLICK:
            self._jump(ev)
            self.device.double_click()
        elif t == EventType.SECONDARY_CLICK:
            self._jump(ev)
            self.device.click("right")
        elif t == EventType.SCROLL:
            self._scroll(ev.scroll.dy)
        elif t == EventType.SWIPE:
            key = SWIPE_KEYS[ev.swipe.direction]
            log.info("swipe %s -> %s", ev.swipe.direction.value, key)
            self.device.key_tap(key)
        elif t in (EventType.POINTER_DOWN, EventType.DRAG_BEGIN, EventType.DRAG_END):
            # drag is grab-to-scroll: nothing is held down at the OS level
            log.debug("%s at (%.0f, %.0f)", t.value, ev.pointer.x, ev.pointer.y)
            if t == EventType.DRAG_END:
                self._scroll_remainder = 0.0

    def _move(self, t_ms: int, x: float, y: float) -> None:
        xy = (int(round(x)), int(round(y)))
        if self._last_move_xy is not None:
            if t_ms - self._last_move_ms < self.sink.move_interval_ms:
                return
            ddx = abs(xy[0] - self._last_move_xy[0])
            ddy = abs(xy[1] - self._last_move_xy[1])
            if max(ddx, ddy) < self.sink.move_min_px:
                return
        self.device.move_to(*xy)
        self._last_move_ms = t_ms
        self._last_move_xy = xy

    def _jump(self, ev: InputEvent) -> None:
        # clicks always land exactly where the gesture happened
        xy = (int(round(ev.pointer.x)), int(round(ev.pointer.y)))
        self.device.move_to(*xy)
        self._last_move_ms = ev.t_ms
        self._last_move_xy = xy

    def _scroll(self, dy: float) -> None:
        # hand up (dy > 0) scrolls the content down, which is wheel down
        self._scroll_remainder += -dy / self.sink.scroll_px_per_tick
        ticks = int(self._scroll_remainder)
        if ticks:
            self._scroll_remainder -= ticks
            self.device.scroll(ticks)

    def _release_all(self) -> None:
        # Make absolutely sure nothing is stuck down.
        self.device.release_all()
        self._scroll_remainder = 0.0
        self._last_move_ms = None
        self._last_move_xy = None
