from __future__ import annotations

from pinchpoint.core.config import DisplayGeometry, PointerSmoothing
from pinchpoint.core.types import PointerPosition


class Smoother:
    """
    Exponential low-pass on the index fingertip.

    Input is raw camera-space (x, y) in [0, 1]; output is screen pixels.
    The horizontal axis is mirrored so moving the hand right moves the
    pointer right on a front-facing camera.
    """

    def __init__(self, params: PointerSmoothing, display: DisplayGeometry) -> None:
        self.params = params
        self.display = display
        self._x = 0.0
        self._y = 0.0
        self._initialized = False

    def reset(self) -> None:
        self._initialized = False

    @property
    def has_position(self) -> bool:
        return self._initialized

    def update(self, raw_x: float, raw_y: float, engaged: bool) -> PointerPosition:
        x = 1.0 - raw_x
        y = raw_y
        if not self._initialized:
            # seed from the first sample so the pointer does not sweep in from (0, 0)
            self._x, self._y = x, y
            self._initialized = True
        else:
            a = self.params.alpha_engaged if engaged else self.params.alpha_free
            self._x += (x - self._x) * a
            self._y += (y - self._y) * a
        return self.position()

    def position(self) -> PointerPosition:
        return PointerPosition(
            x=self._x * self.display.width,
            y=self._y * self.display.height,
        )
