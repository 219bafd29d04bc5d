"""
PinchPoint: Defaults (Presets)

All knobs are plain numbers fixed for the lifetime of a session.
Distances marked `norm` are in normalized camera space, `px` in screen pixels.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum


class PresetName(str, Enum):
    DEFAULT = "Default"
    SLIDES = "Slides"


@dataclass(frozen=True)
class PointerSmoothing:
    alpha_free: float = 0.25       # free pointer, more responsive
    alpha_engaged: float = 0.10    # pinching, hold the target steady

    def __post_init__(self) -> None:
        for name in ("alpha_free", "alpha_engaged"):
            a = getattr(self, name)
            if not 0.0 < a <= 1.0:
                raise ValueError(f"{name} must be in (0, 1], got {a}")


@dataclass(frozen=True)
class PinchThresholds:
    pinch: float = 0.04            # norm, thumb-to-tip distance that counts as a pinch
    exclusion: float = 0.06        # norm, the other finger must be farther than this
    ambiguity_eps: float = 0.01    # norm, both pinching and closer than this -> NONE

    def __post_init__(self) -> None:
        if self.pinch <= 0.0 or self.exclusion <= 0.0 or self.ambiguity_eps < 0.0:
            raise ValueError("pinch thresholds must be positive")


@dataclass(frozen=True)
class StabilityTuning:
    window: int = 4                # agreeing frames to engage
    release_window: int = 2        # NONE frames to release

    def __post_init__(self) -> None:
        if self.window < 1 or self.release_window < 1:
            raise ValueError("stability windows must be >= 1")
        if self.release_window > self.window:
            raise ValueError("release_window cannot exceed window")


@dataclass(frozen=True)
class ClickDragTuning:
    drag_threshold_px: float = 40.0
    scroll_speed: float = 2.0
    double_click_ms: int = 400
    double_click_px: float = 30.0

    def __post_init__(self) -> None:
        if self.drag_threshold_px < 0 or self.double_click_ms < 0 or self.double_click_px < 0:
            raise ValueError("click/drag thresholds must be non-negative")


@dataclass(frozen=True)
class SwipeTuning:
    enabled: bool = False
    threshold_px: float = 150.0
    max_vertical_px: float = 80.0
    time_window_ms: int = 300
    cooldown_ms: int = 500
    min_samples: int = 5

    def __post_init__(self) -> None:
        if self.time_window_ms <= 0 or self.min_samples < 2:
            raise ValueError("swipe window must be positive and hold at least 2 samples")


@dataclass(frozen=True)
class SinkTuning:
    move_min_px: int = 2           # skip OS moves smaller than this
    move_interval_ms: int = 16     # ~60 moves/s max
    scroll_px_per_tick: float = 40.0


@dataclass(frozen=True)
class DisplayGeometry:
    width: int = 1920
    height: int = 1080

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"bad display size {self.width}x{self.height}")

    @classmethod
    def parse(cls, text: str) -> "DisplayGeometry":
        w, _, h = text.lower().partition("x")
        return cls(width=int(w), height=int(h))


@dataclass(frozen=True)
class Preset:
    name: PresetName
    smoothing: PointerSmoothing = PointerSmoothing()
    pinch: PinchThresholds = PinchThresholds()
    stability: StabilityTuning = StabilityTuning()
    click_drag: ClickDragTuning = ClickDragTuning()
    swipe: SwipeTuning = SwipeTuning()
    sink: SinkTuning = SinkTuning()

    def with_swipe(self, enabled: bool) -> "Preset":
        return replace(self, swipe=replace(self.swipe, enabled=enabled))


DEFAULT_PRESET = Preset(name=PresetName.DEFAULT)

# Presentation mode: swipes page through slides, everything else as default.
SLIDES_PRESET = Preset(
    name=PresetName.SLIDES,
    swipe=SwipeTuning(enabled=True),
)

PRESETS = {
    PresetName.DEFAULT: DEFAULT_PRESET,
    PresetName.SLIDES: SLIDES_PRESET,
}


def preset_by_name(name: str) -> Preset:
    for key, preset in PRESETS.items():
        if key.value.lower() == name.lower():
            return preset
    raise ValueError(f"unknown preset {name!r}")
