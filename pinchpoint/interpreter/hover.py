from __future__ import annotations

from typing import Callable, Hashable, Optional

# element under (x, y), or None over empty space
HitTest = Callable[[float, float], Optional[Hashable]]
# (element, kind, x, y) with kind in enter/leave/move/down/up
Dispatch = Callable[[Hashable, str, float, float], None]


class HoverTracker:
    """
    Simulated hover for an on-screen UI: follows the smoothed pointer every
    tick, independent of pinch state, and tells elements when the pointer
    enters, leaves, moves over, presses or releases on them.
    """

    def __init__(self, hit_test: HitTest, dispatch: Dispatch) -> None:
        self.hit_test = hit_test
        self.dispatch = dispatch
        self.current: Optional[Hashable] = None

    def track(self, x: float, y: float) -> None:
        el = self.hit_test(x, y)
        if el != self.current:
            if self.current is not None:
                self.dispatch(self.current, "leave", x, y)
            if el is not None:
                self.dispatch(el, "enter", x, y)
            self.current = el
        if el is not None:
            self.dispatch(el, "move", x, y)

    def press(self, x: float, y: float) -> None:
        if self.current is not None:
            self.dispatch(self.current, "down", x, y)

    def release(self, x: float, y: float) -> None:
        if self.current is not None:
            self.dispatch(self.current, "up", x, y)

    def reset(self) -> None:
        self.current = None
