from __future__ import annotations

import argparse
import logging
import sys


def build_parser() -> argparse.ArgumentParser:
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--debug", action="store_true", help="verbose logging")

    session = argparse.ArgumentParser(add_help=False)
    session.add_argument("--preset", default="default", choices=["default", "slides"])
    session.add_argument("--slides", action="store_true", help="swipes page through slides")
    session.add_argument("--screen", default="1920x1080", help="display size as WxH")
    session.add_argument("--dry-run", action="store_true", help="log events instead of injecting them")

    ap = argparse.ArgumentParser(prog="pinchpoint", description="Hand pinches -> pointer events")
    sub = ap.add_subparsers(dest="command", required=True)

    cam = sub.add_parser("webcam", parents=[common, session], help="drive the pointer from a webcam")
    cam.add_argument("--camera", type=int, default=0)
    cam.add_argument("--no-preview", action="store_true")

    sub.add_parser("demo", parents=[common, session], help="scripted hand, no camera")
    sub.add_parser("daemon", parents=[common], help="hotkeys + tray control")
    return ap


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # heavy imports (cv2, mediapipe, evdev) only for the command that needs them
    if args.command == "webcam":
        from pinchpoint.runtime import run_webcam
        run_webcam.run(args)
    elif args.command == "demo":
        from pinchpoint.runtime import run_loop
        run_loop.run(args)
    else:
        from pinchpoint import control_daemon
        control_daemon.main()
    return 0


if __name__ == "__main__":
    sys.exit(main())
