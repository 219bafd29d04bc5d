from __future__ import annotations

import time
from dataclasses import dataclass

from evdev import AbsInfo, UInput, ecodes as e

from pinchpoint.core.config import DisplayGeometry

_BUTTONS = {"left": e.BTN_LEFT, "right": e.BTN_RIGHT}
_KEYS = {"left": e.KEY_LEFT, "right": e.KEY_RIGHT, "up": e.KEY_UP, "down": e.KEY_DOWN,
         "space": e.KEY_SPACE, "escape": e.KEY_ESC}


@dataclass
class UInputPointer:
    """
    Absolute pointer + arrow keys over Linux uinput.
    Keep it boring. The interpreter is the brain.
    """
    ui: UInput

    # gap between the two presses of a double click
    DOUBLE_GAP_S = 0.05

    @classmethod
    def create(cls, display: DisplayGeometry) -> "UInputPointer":
        caps = {
            e.EV_KEY: list(_BUTTONS.values()) + list(_KEYS.values()),
            e.EV_ABS: [
                (e.ABS_X, AbsInfo(value=0, min=0, max=display.width - 1, fuzz=0, flat=0, resolution=0)),
                (e.ABS_Y, AbsInfo(value=0, min=0, max=display.height - 1, fuzz=0, flat=0, resolution=0)),
            ],
            e.EV_REL: [e.REL_WHEEL],
        }
        ui = UInput(caps, name="PinchPoint Virtual Pointer")
        return cls(ui=ui)

    def move_to(self, x: int, y: int) -> None:
        self.ui.write(e.EV_ABS, e.ABS_X, int(x))
        self.ui.write(e.EV_ABS, e.ABS_Y, int(y))
        self.ui.syn()

    def _button(self, code: int, down: bool) -> None:
        self.ui.write(e.EV_KEY, code, 1 if down else 0)
        self.ui.syn()

    def click(self, button: str) -> None:
        code = _BUTTONS[button]
        self._button(code, True)
        self._button(code, False)

    def double_click(self) -> None:
        self.click("left")
        time.sleep(self.DOUBLE_GAP_S)
        self.click("left")

    def scroll(self, ticks: int) -> None:
        # positive = wheel up; direction mapping is done by the caller
        if ticks:
            self.ui.write(e.EV_REL, e.REL_WHEEL, int(ticks))
            self.ui.syn()

    def key_tap(self, key: str) -> None:
        code = _KEYS[key]
        self._button(code, True)
        self._button(code, False)

    def release_all(self) -> None:
        # Make absolutely sure nothing is stuck down.
        for code in _BUTTONS.values():
            self._button(code, False)

    def close(self) -> None:
        self.ui.close()
