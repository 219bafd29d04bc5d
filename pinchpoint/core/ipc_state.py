"""
Control flags shared between the control daemon (hotkeys / tray) and the
runtime process, as a small JSON file in the temp dir.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path

from pinchpoint.core.control import ControlState

log = logging.getLogger(__name__)

STATE_PATH = Path(tempfile.gettempdir()) / "pinchpoint_state.json"

_DEFAULTS = {"enabled": True, "slides": False}


def read_state(path: Path = STATE_PATH) -> dict:
    try:
        data = json.loads(path.read_text())
    except FileNotFoundError:
        return dict(_DEFAULTS)
    except ValueError:
        log.warning("unreadable state file %s, using defaults", path)
        return dict(_DEFAULTS)
    return {k: bool(data.get(k, v)) for k, v in _DEFAULTS.items()}


def write_state(path: Path = STATE_PATH, **flags: bool) -> None:
    state = read_state(path)
    state.update({k: bool(v) for k, v in flags.items() if k in _DEFAULTS})
    # write-then-rename so readers never see half a file
    tmp = path.with_suffix(".tmp")
    tmp.write_text(json.dumps(state))
    os.replace(tmp, path)


def init_state(enabled: bool = True, slides: bool = False, path: Path = STATE_PATH) -> None:
    if not path.exists():
        write_state(path, enabled=enabled, slides=slides)


def set_enabled(enabled: bool, path: Path = STATE_PATH) -> None:
    write_state(path, enabled=enabled)


def set_slides(slides: bool, path: Path = STATE_PATH) -> None:
    write_state(path, slides=slides)


def sync_into(state: ControlState, path: Path = STATE_PATH) -> None:
    """Pull flags written by the daemon into the in-process control state."""
    flags = read_state(path)
    state.set_enabled(flags["enabled"])
    state.set_slides(flags["slides"])


def toggle_slides(state: ControlState, path: Path = STATE_PATH) -> bool:
    """
    Flip slides mode from the flag on disk, not the caller's cached copy:
    another process may have changed it since.
    """
    sync_into(state, path)
    slides = state.toggle_slides()
    set_slides(slides, path)
    return slides
