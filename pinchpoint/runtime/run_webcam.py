from __future__ import annotations

import argparse
import time

import cv2

from pinchpoint.core import ipc_state
from pinchpoint.core.config import DisplayGeometry
from pinchpoint.core.control import ControlState
from pinchpoint.interpreter.pipeline import Interpreter
from pinchpoint.runtime.kill_switch import KillSwitch
from pinchpoint.runtime.run_loop import open_control, open_device, resolve_preset, step
from pinchpoint.sensor.webcam_mp import WebcamMPSrc

WINDOW = "PinchPoint (Webcam)"


def _hud(img, interp: Interpreter, state: ControlState) -> None:
    onoff = "ON" if state.is_enabled() else "OFF"
    slides = "  SLIDES" if state.slides_enabled() else ""
    text = f"{onoff}{slides}  {interp.machine.mode.value}  {interp.gesture.value}"
    cv2.rectangle(img, (10, 10), (520, 50), (0, 0, 0), -1)
    cv2.putText(img, text, (20, 40), cv2.FONT_HERSHEY_SIMPLEX, 0.9, (255, 255, 255), 2, cv2.LINE_AA)


def run(args: argparse.Namespace) -> None:
    preset = resolve_preset(args)
    display = DisplayGeometry.parse(args.screen)

    state = open_control(preset)

    interp = Interpreter(preset, display=display)
    src = WebcamMPSrc(cam_index=args.camera, pinch=preset.pinch.pinch)
    device = open_device(display, args.dry_run)
    ks = KillSwitch(state=state, interp=interp, device=device, sink=preset.sink)

    print("[PinchPoint] Webcam runtime. ESC to quit, 's' toggles slides.")
    try:
        while True:
            # sync ON/OFF + slides from daemon
            ipc_state.sync_into(state)

            frame, img = src.read()
            t_ms = frame.t_ms if frame is not None else int(time.monotonic() * 1000)
            step(ks, frame, t_ms)

            if img is not None and not args.no_preview:
                # mirror for display only; landmarks stay in camera space
                view = cv2.flip(img, 1)
                _hud(view, interp, state)
                cv2.imshow(WINDOW, view)
                key = cv2.waitKey(1) & 0xFF
                if key == 27:  # ESC
                    break
                if key in (ord('s'), ord('S')):
                    ipc_state.toggle_slides(state)
            elif img is None:
                time.sleep(0.05)
    except KeyboardInterrupt:
        print("\n[PinchPoint] exiting")
    finally:
        state.set_enabled(False)
        ks.guard(t_ms=int(time.monotonic() * 1000))
        src.close()
        device.close()
        cv2.destroyAllWindows()
