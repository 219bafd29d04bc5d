from __future__ import annotations

import logging

from pynput import keyboard

from pinchpoint.core import ipc_state
from pinchpoint.core.control import ControlState

log = logging.getLogger(__name__)

# Ctrl+S arrives as the control character on some backends
_S_CHARS = {"s", "S", "\x13"}


def run_hotkeys(state: ControlState) -> None:
    """
    Global hotkeys (X11):
    - Ctrl+Alt+Space: Toggle ON/OFF
    - Ctrl+Alt+Esc:   Panic OFF
    - Ctrl+Alt+S:     Toggle slides mode (swipe = next/previous)
    """

    pressed = set()

    CTRL_KEYS = {keyboard.Key.ctrl, keyboard.Key.ctrl_l, keyboard.Key.ctrl_r}
    ALT_KEYS  = {keyboard.Key.alt, keyboard.Key.alt_l, keyboard.Key.alt_r, keyboard.Key.alt_gr}

    def is_ctrl():
        return any(k in pressed for k in CTRL_KEYS)

    def is_alt():
        return any(k in pressed for k in ALT_KEYS)

    def on_press(k):
        pressed.add(k)

        if is_ctrl() and is_alt():
            if k == keyboard.Key.space:
                enabled = state.toggle()
                ipc_state.set_enabled(enabled)
                print(f"[PinchPoint] {'ON' if enabled else 'OFF'} (Ctrl+Alt+Space)")
            elif k == keyboard.Key.esc:
                state.set_enabled(False)
                ipc_state.set_enabled(False)
                print("[PinchPoint] OFF (PANIC) (Ctrl+Alt+Esc)")
            elif getattr(k, "char", None) in _S_CHARS:
                slides = ipc_state.toggle_slides(state)
                print(f"[PinchPoint] slides {'ON' if slides else 'OFF'} (Ctrl+Alt+S)")

    def on_release(k):
        pressed.discard(k)

    log.debug("hotkey listener starting")
    with keyboard.Listener(on_press=on_press, on_release=on_release) as listener:
        listener.join()
