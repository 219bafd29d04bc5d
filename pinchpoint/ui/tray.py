from __future__ import annotations

import logging
import threading
import time

import pystray
from PIL import Image, ImageDraw

from pinchpoint.core import ipc_state
from pinchpoint.core.control import ControlState

log = logging.getLogger(__name__)


def make_icon(enabled: bool, slides: bool = False) -> Image.Image:
    # Minimal monochrome pinch icon: two dots meeting
    img = Image.new("RGBA", (64, 64), (0, 0, 0, 0))
    d = ImageDraw.Draw(img)

    d.ellipse((12, 12, 52, 52), outline=(255, 255, 255, 220), width=3)

    # dots close together = ON, apart = OFF
    alpha = 255 if enabled else 80
    gap = 2 if enabled else 10
    d.ellipse((32 - gap - 8, 28, 32 - gap, 36), fill=(255, 255, 255, alpha))
    d.ellipse((32 + gap, 28, 32 + gap + 8, 36), fill=(255, 255, 255, alpha))

    if slides:
        # small bar under the dots marks slides mode
        d.rectangle((24, 42, 40, 45), fill=(255, 255, 255, alpha))
    return img


def run_tray(state: ControlState, stop_flag: threading.Event) -> None:
    icon = pystray.Icon("PinchPoint")

    def update_icon():
        enabled = state.is_enabled()
        slides = state.slides_enabled()
        icon.icon = make_icon(enabled, slides)
        icon.title = f"PinchPoint ({'ON' if enabled else 'OFF'}{', slides' if slides else ''})"

    def _set(enabled: bool) -> None:
        state.set_enabled(enabled)
        ipc_state.set_enabled(enabled)
        update_icon()

    def on_toggle(_icon, _item):
        _set(not state.is_enabled())

    def on_off(_icon, _item):
        _set(False)

    def on_on(_icon, _item):
        _set(True)

    def on_slides(_icon, _item):
        ipc_state.toggle_slides(state)
        update_icon()

    def on_quit(_icon, _item):
        stop_flag.set()
        icon.stop()

    icon.menu = pystray.Menu(
        pystray.MenuItem("Toggle (ON/OFF)", on_toggle),
        pystray.MenuItem("Turn ON", on_on),
        pystray.MenuItem("Turn OFF", on_off),
        pystray.MenuItem("Slides mode", on_slides, checked=lambda _item: state.slides_enabled()),
        pystray.Menu.SEPARATOR,
        pystray.MenuItem("Quit", on_quit),
    )

    update_icon()

    # background updater keeps icon state fresh even if hotkeys toggle it
    def watcher():
        last = None
        while not stop_flag.is_set():
            cur = (state.is_enabled(), state.slides_enabled())
            if cur != last:
                update_icon()
                last = cur
            time.sleep(0.2)

    threading.Thread(target=watcher, daemon=True).start()
    try:
        icon.run()
    except Exception:
        # Tray backends can be fragile; hotkeys keep working without it.
        log.exception("tray backend crashed")
        stop_flag.set()
