from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Any, Optional, Tuple

import cv2
import mediapipe as mp

from pinchpoint.core.geometry import dist, to_frame
from pinchpoint.core.types import HAND_CONNECTIONS, INDEX_TIP, MIDDLE_TIP, THUMB_TIP, LandmarkFrame

log = logging.getLogger(__name__)

# BGR
_BONE = (229, 70, 79)
_JOINT = (229, 70, 79)
_TIP_COLORS = {THUMB_TIP: (21, 204, 250), INDEX_TIP: (94, 197, 34), MIDDLE_TIP: (22, 115, 249)}


def draw_overlay(img: Any, frame: LandmarkFrame, pinch: float = 0.04) -> None:
    """Hand skeleton, coloured tips and thumb->finger pinch guides."""
    h, w = img.shape[:2]

    def px(i: int) -> Tuple[int, int]:
        x, y = frame.tip(i)
        return int(x * w), int(y * h)

    for a, b in HAND_CONNECTIONS:
        cv2.line(img, px(a), px(b), _BONE, 2, cv2.LINE_AA)
    for i in range(len(frame.points)):
        color = _TIP_COLORS.get(i, _JOINT)
        cv2.circle(img, px(i), 6 if i in _TIP_COLORS else 4, color, -1, cv2.LINE_AA)

    thumb = frame.tip(THUMB_TIP)
    for finger in (INDEX_TIP, MIDDLE_TIP):
        d = dist(thumb, frame.tip(finger))
        if d < 2 * pinch:
            # thin = close, thick = pinched
            cv2.line(img, px(THUMB_TIP), px(finger), _TIP_COLORS[finger], 3 if d < pinch else 1, cv2.LINE_AA)


@dataclass
class WebcamMPSrc:
    """
    MediaPipe Hands over an OpenCV camera.

    Frames are NOT mirrored here: landmarks stay in camera space and the
    interpreter's smoother does the mirroring. The preview image is only
    flipped for display by the caller.
    """
    cam_index: int = 0
    width: int = 1280
    height: int = 720
    overlay: bool = True
    pinch: float = 0.04

    def __post_init__(self) -> None:
        self.cap = cv2.VideoCapture(self.cam_index)
        if not self.cap.isOpened():
            raise RuntimeError(f"cannot open camera {self.cam_index}")
        self.cap.set(cv2.CAP_PROP_FRAME_WIDTH, self.width)
        self.cap.set(cv2.CAP_PROP_FRAME_HEIGHT, self.height)

        self.mp_hands = mp.solutions.hands
        self.hands = self.mp_hands.Hands(
            static_image_mode=False,
            max_num_hands=1,
            model_complexity=1,
            min_detection_confidence=0.7,
            min_tracking_confidence=0.5,
        )

    def read(self) -> Tuple[Optional[LandmarkFrame], Optional[Any]]:
        """
        One camera frame -> (landmarks or None, preview image or None).
        A missing hand is (None, image); a failed camera read is (None, None).
        """
        ok, img = self.cap.read()
        if not ok:
            log.warning("camera %d read failed", self.cam_index)
            return None, None

        rgb = cv2.cvtColor(img, cv2.COLOR_BGR2RGB)
        res = self.hands.process(rgb)
        t_ms = int(time.monotonic() * 1000)

        if not res.multi_hand_landmarks:
            return None, img

        frame = to_frame(t_ms, res.multi_hand_landmarks[0].landmark)
        if self.overlay:
            draw_overlay(img, frame, self.pinch)
        return frame, img

    def close(self) -> None:
        self.hands.close()
        self.cap.release()
