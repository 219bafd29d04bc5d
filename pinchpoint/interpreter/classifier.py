from __future__ import annotations

from pinchpoint.core.config import PinchThresholds
from pinchpoint.core.geometry import dist
from pinchpoint.core.types import (
    INDEX_TIP, MIDDLE_TIP, THUMB_TIP,
    GestureSymbol, LandmarkFrame,
)


class GestureClassifier:
    """
    Per-frame pinch classifier. Stateless: the same geometry always yields
    the same symbol.

    PRIMARY   thumb + index pinch, middle clearly apart
    SECONDARY thumb + middle pinch, index clearly apart
    NONE      nothing, or a three-finger cluster too close to call
    """

    def __init__(self, thresholds: PinchThresholds) -> None:
        self.t = thresholds

    def distances(self, frame: LandmarkFrame) -> tuple[float, float]:
        thumb = frame.tip(THUMB_TIP)
        return dist(thumb, frame.tip(INDEX_TIP)), dist(thumb, frame.tip(MIDDLE_TIP))

    def classify(self, frame: LandmarkFrame) -> GestureSymbol:
        d_index, d_middle = self.distances(frame)
        return self.classify_distances(d_index, d_middle)

    def classify_distances(self, d_index: float, d_middle: float) -> GestureSymbol:
        t = self.t
        index_pinch = d_index < t.pinch
        middle_pinch = d_middle < t.pinch

        if index_pinch and not middle_pinch and d_middle > t.exclusion:
            return GestureSymbol.PRIMARY
        if middle_pinch and not index_pinch and d_index > t.exclusion:
            return GestureSymbol.SECONDARY
        if index_pinch and middle_pinch:
            # both closed: take the tighter pinch only when it clearly wins
            if abs(d_index - d_middle) > t.ambiguity_eps:
                return GestureSymbol.PRIMARY if d_index < d_middle else GestureSymbol.SECONDARY
        return GestureSymbol.NONE
