from __future__ import annotations

import logging
import threading
import time

from pinchpoint.core import ipc_state
from pinchpoint.core.control import ControlState
from pinchpoint.ui.hotkeys import run_hotkeys

log = logging.getLogger(__name__)


def _load_tray():
    # pystray needs a display backend; hotkeys must not depend on it
    try:
        from pinchpoint.ui.tray import run_tray
    except ImportError as e:
        log.warning("tray unavailable: %s", e)
        return None
    return run_tray


def main() -> None:
    ipc_state.init_state()
    flags = ipc_state.read_state()
    state = ControlState(_enabled=True, _slides=flags["slides"])
    stop = threading.Event()

    # the daemon always starts ON
    ipc_state.set_enabled(True)

    # Hotkeys always-on (never dependent on tray)
    t_hotkeys = threading.Thread(target=run_hotkeys, args=(state,), daemon=True)
    t_hotkeys.start()

    print("[PinchPoint] Control daemon started.")
    print("  Hotkeys:")
    print("   - Ctrl+Alt+Space = Toggle ON/OFF")
    print("   - Ctrl+Alt+Esc   = PANIC OFF")
    print("   - Ctrl+Alt+S     = Slides mode")

    run_tray = _load_tray()
    if run_tray is None:
        print("  Tray: unavailable (missing backend). Hotkeys only.")
    else:
        print("  Tray: Toggle / ON / OFF / Slides / Quit")
        threading.Thread(target=run_tray, args=(state, stop), daemon=True).start()

    # Keep process alive until killed or Quit from the tray
    try:
        while not stop.is_set():
            time.sleep(0.5)
    except KeyboardInterrupt:
        stop.set()
    print("\n[PinchPoint] exiting")


if __name__ == "__main__":
    main()
