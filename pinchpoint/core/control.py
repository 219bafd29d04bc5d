from __future__ import annotations

from dataclasses import dataclass, field
from threading import Lock


@dataclass
class ControlState:
    """
    Shared control plane.
    enabled=False means PinchPoint is OFF (session stopped, nothing injected).
    slides=True turns swipes into next/previous slide keys.
    """
    _enabled: bool = True
    _slides: bool = False
    _lock: Lock = field(default_factory=Lock, repr=False, compare=False)

    def is_enabled(self) -> bool:
        with self._lock:
            return self._enabled

    def set_enabled(self, value: bool) -> None:
        with self._lock:
            self._enabled = value

    def toggle(self) -> bool:
        with self._lock:
            self._enabled = not self._enabled
            return self._enabled

    def slides_enabled(self) -> bool:
        with self._lock:
            return self._slides

    def set_slides(self, value: bool) -> None:
        with self._lock:
            self._slides = value

    def toggle_slides(self) -> bool:
        with self._lock:
            self._slides = not self._slides
            return self._slides
