from __future__ import annotations

import math
from typing import Any, Optional

from pinchpoint.core.types import LANDMARK_COUNT, LandmarkFrame, Point2


def dist(a: Point2, b: Point2) -> float:
    return math.hypot(a[0] - b[0], a[1] - b[1])


def frame_is_valid(frame: Optional[LandmarkFrame]) -> bool:
    """
    Reject frames the classifier must never see: missing, short,
    or holding NaN/inf coordinates. Points outside [0, 1] are kept; MediaPipe
    reports slightly off-frame joints for partially visible hands.
    """
    if frame is None:
        return False
    pts = frame.points
    if len(pts) != LANDMARK_COUNT:
        return False
    for p in pts:
        if len(p) < 2 or not (math.isfinite(p[0]) and math.isfinite(p[1])):
            return False
    return True


def to_frame(t_ms: int, landmarks: Any) -> LandmarkFrame:
    """Build a LandmarkFrame from anything with .x/.y landmark objects."""
    return LandmarkFrame(
        t_ms=t_ms,
        points=tuple((float(lm.x), float(lm.y)) for lm in landmarks),
    )
