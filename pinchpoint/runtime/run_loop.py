from __future__ import annotations

import argparse
import logging
import math
import time
from dataclasses import dataclass
from pathlib import Path

from pinchpoint.core import ipc_state
from pinchpoint.core.config import DisplayGeometry, Preset, preset_by_name
from pinchpoint.core.control import ControlState
from pinchpoint.core.types import LANDMARK_COUNT, INDEX_TIP, MIDDLE_TIP, THUMB_TIP, LandmarkFrame
from pinchpoint.injector.device import LogPointer, PointerDevice
from pinchpoint.interpreter.pipeline import Interpreter
from pinchpoint.runtime.kill_switch import KillSwitch

log = logging.getLogger(__name__)


def synth_frame(t_ms: int, x: float, y: float, pinch_index: bool = False, pinch_middle: bool = False) -> LandmarkFrame:
    """
    A plausible right hand with the index tip at camera-space (x, y).
    Open fingers sit well outside the pinch zone.
    """
    pts = [(x, y + 0.25) for _ in range(LANDMARK_COUNT)]
    thumb = (x + (0.02 if pinch_index else 0.15), y)
    pts[INDEX_TIP] = (x, y)
    pts[THUMB_TIP] = thumb
    pts[MIDDLE_TIP] = (thumb[0], thumb[1] + (0.02 if pinch_middle else 0.15))
    return LandmarkFrame(t_ms=t_ms, points=tuple(pts))


@dataclass
class FakeSource:
    """
    Deterministic scripted hand to validate runtime wiring without a camera.
    6 s cycle: hover circle, index tap, grab-and-pull-up scroll, rest.
    """
    start_ms: int

    def frame(self, t_ms: int) -> LandmarkFrame:
        dt = ((t_ms - self.start_ms) / 1000.0) % 6.0

        if dt < 2.0:
            a = math.pi * dt
            return synth_frame(t_ms, 0.5 + 0.15 * math.cos(a), 0.5 + 0.15 * math.sin(a))
        if dt < 3.0:
            # ~250 ms pinch is comfortably inside the engage window
            return synth_frame(t_ms, 0.65, 0.5, pinch_index=dt < 2.25)
        if dt < 5.0:
            phase = (dt - 3.0) / 2.0
            return synth_frame(t_ms, 0.5, 0.7 - 0.4 * phase, pinch_index=phase < 0.9)
        return synth_frame(t_ms, 0.5, 0.5)


def open_device(display: DisplayGeometry, dry_run: bool) -> PointerDevice:
    if dry_run:
        log.info("dry run: events are logged, not injected")
        return LogPointer()
    # evdev is Linux-only; import on demand
    from pinchpoint.injector.uinput_pointer import UInputPointer
    return UInputPointer.create(display)


def resolve_preset(args: argparse.Namespace) -> Preset:
    preset = preset_by_name(args.preset)
    if args.slides:
        preset = preset.with_swipe(True)
    return preset


def open_control(preset: Preset, path: Path = ipc_state.STATE_PATH) -> ControlState:
    """
    Control flags for a new run. A preset with swipes on always wins over a
    slides=False left in the shared state file by an earlier run.
    """
    ipc_state.init_state(enabled=True, slides=preset.swipe.enabled, path=path)
    if preset.swipe.enabled:
        ipc_state.set_slides(True, path=path)
    state = ControlState()
    ipc_state.sync_into(state, path=path)
    return state


def step(ks: KillSwitch, frame: LandmarkFrame | None, t_ms: int) -> int:
    """One tick: control transitions, interpretation, injection."""
    ks.guard(t_ms=t_ms)
    events = ks.interp.process(frame, t_ms=t_ms)
    for ev in events:
        ks.apply(ev)
    return len(events)


def run(args: argparse.Namespace) -> None:
    preset = resolve_preset(args)
    display = DisplayGeometry.parse(args.screen)

    state = open_control(preset)

    interp = Interpreter(preset, display=display)
    device = open_device(display, args.dry_run)
    ks = KillSwitch(state=state, interp=interp, device=device, sink=preset.sink)

    src = FakeSource(start_ms=int(time.monotonic() * 1000))

    print("[PinchPoint] Runtime loop (FAKE SOURCE). Ctrl+C to exit.")
    print("Tip: run `pinchpoint daemon` in another terminal to toggle ON/OFF.")
    print("  - Ctrl+Alt+Space toggles")
    print("  - Ctrl+Alt+Esc PANIC OFF")

    try:
        while True:
            t_ms = int(time.monotonic() * 1000)
            # daemon may have toggled it
            ipc_state.sync_into(state)
            step(ks, src.frame(t_ms), t_ms)
            time.sleep(0.016)  # ~60Hz loop
    except KeyboardInterrupt:
        print("\n[PinchPoint] exiting")
    finally:
        # Always drop buttons on exit
        state.set_enabled(False)
        ks.guard(t_ms=int(time.monotonic() * 1000))
        device.close()
