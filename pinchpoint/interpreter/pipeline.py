from __future__ import annotations

import logging
import time

from pinchpoint.core.config import DisplayGeometry, Preset
from pinchpoint.core.geometry import frame_is_valid
from pinchpoint.core.types import (
    INDEX_TIP,
    EventType, GestureSymbol, InputEvent, LandmarkFrame, MoveEvent,
)
from pinchpoint.interpreter.classifier import GestureClassifier
from pinchpoint.interpreter.hover import HoverTracker
from pinchpoint.interpreter.smoother import Smoother
from pinchpoint.interpreter.stability import StabilityFilter
from pinchpoint.interpreter.state_machine import InteractionStateMachine
from pinchpoint.interpreter.swipe import SwipeDetector

log = logging.getLogger(__name__)


class Interpreter:
    """
    Deterministic PinchPoint interpreter.
    Converts one LandmarkFrame (or None) per tick -> list[InputEvent].

    Tick order: classify -> stabilize -> smooth -> state machine -> swipe.
    A stopped interpreter accepts no ticks and holds no state.
    """

    def __init__(
        self,
        preset: Preset,
        display: DisplayGeometry = DisplayGeometry(),
        hover: HoverTracker | None = None,
    ) -> None:
        self.preset = preset
        self.display = display
        self.hover = hover

        self.classifier = GestureClassifier(preset.pinch)
        self.stability = StabilityFilter(preset.stability)
        self.smoother = Smoother(preset.smoothing, display)
        self.machine = InteractionStateMachine(preset.click_drag)
        self.swipe = SwipeDetector(preset.swipe)

        self.active = True
        self.gesture: GestureSymbol = GestureSymbol.NONE

    # ---------------------- session control ----------------------

    def start(self, swipe: bool | None = None) -> None:
        self.reset()
        if swipe is not None:
            self.swipe.set_enabled(swipe)
        self.active = True
        log.info("session started (swipe %s)", "on" if self.swipe.enabled else "off")

    def stop(self) -> None:
        self.active = False
        self.reset()
        log.info("session stopped")

    def reset(self) -> None:
        self.machine.reset()
        self.stability.reset()
        self.swipe.reset()
        self.smoother.reset()
        if self.hover is not None:
            self.hover.reset()
        self.gesture = GestureSymbol.NONE

    # ---------------------- tick ----------------------

    def process(self, frame: LandmarkFrame | None, t_ms: int | None = None) -> list[InputEvent]:
        if not self.active:
            return []
        if t_ms is None:
            t_ms = frame.t_ms if frame is not None else int(time.monotonic() * 1000)

        # missing or degenerate geometry is just "no hand" for this tick
        valid = frame_is_valid(frame)
        raw = self.classifier.classify(frame) if valid else GestureSymbol.NONE
        gesture = self.stability.stabilize(raw)
        self.gesture = gesture
        engaged = gesture is not GestureSymbol.NONE

        if valid:
            ix, iy = frame.tip(INDEX_TIP)
            pos = self.smoother.update(ix, iy, engaged)
        elif self.smoother.has_position:
            # hold the last pointer so a release still lands somewhere sensible
            pos = self.smoother.position()
        else:
            return []

        if self.hover is not None:
            self.hover.track(pos.x, pos.y)

        actions = self.machine.on_frame(pos.x, pos.y, gesture, t_ms)

        events = [InputEvent(
            t_ms=t_ms, type=EventType.MOVE,
            move=MoveEvent(x=pos.x, y=pos.y, mode=self.machine.mode, gesture=gesture),
        )]
        events.extend(actions)

        if valid or self.machine.is_engaged:
            events.extend(self.swipe.on_frame(pos.x, pos.y, self.machine.is_engaged, t_ms))

        if self.hover is not None:
            self._notify_hover(actions)

        return events

    def _notify_hover(self, actions: list[InputEvent]) -> None:
        for ev in actions:
            if ev.type is EventType.POINTER_DOWN:
                self.hover.press(ev.pointer.x, ev.pointer.y)
            elif ev.type is EventType.DRAG_END:
                self.hover.release(ev.pointer.x, ev.pointer.y)
