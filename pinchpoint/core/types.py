"""
PinchPoint: CORE CONTRACTS

Data passed between the landmark source, the interpreter and the event sink.
Every value here is immutable; components own their mutable state privately.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple


# ============================================================
# Landmark source → Interpreter
# ============================================================

Point2 = Tuple[float, float]

LANDMARK_COUNT = 21

# MediaPipe hand landmark indices
WRIST = 0
THUMB_TIP = 4
INDEX_TIP = 8
MIDDLE_TIP = 12
RING_TIP = 16
PINKY_TIP = 20

HAND_CONNECTIONS: Tuple[Tuple[int, int], ...] = (
    (0, 1), (1, 2), (2, 3), (3, 4),
    (0, 5), (5, 6), (6, 7), (7, 8),
    (0, 9), (9, 10), (10, 11), (11, 12),
    (0, 13), (13, 14), (14, 15), (15, 16),
    (0, 17), (17, 18), (18, 19), (19, 20),
    (5, 9), (9, 13), (13, 17),
)


@dataclass(frozen=True)
class LandmarkFrame:
    """
    One hand observation: 21 normalized (x, y) joints in [0, 1]^2.

    Coordinates are in camera space, NOT mirrored.
    """
    t_ms: int
    points: Tuple[Point2, ...]

    def tip(self, index: int) -> Point2:
        return self.points[index]


# ============================================================
# Interpreter internals
# ============================================================

class GestureSymbol(str, Enum):
    NONE = "NONE"
    PRIMARY = "PRIMARY"        # thumb + index
    SECONDARY = "SECONDARY"    # thumb + middle


class Mode(str, Enum):
    IDLE = "IDLE"
    ENGAGED = "ENGAGED"
    DRAGGING = "DRAGGING"


class SwipeDirection(str, Enum):
    LEFT = "LEFT"
    RIGHT = "RIGHT"


@dataclass(frozen=True)
class PointerPosition:
    """Smoothed pointer in screen pixels."""
    x: float
    y: float


# ============================================================
# Interpreter → Event sink
# ============================================================

class EventType(str, Enum):
    MOVE = "MOVE"
    POINTER_DOWN = "POINTER_DOWN"
    CLICK = "CLICK"
    DOUBLE_CLICK = "DOUBLE_CLICK"
    SECONDARY_CLICK = "SECONDARY_CLICK"
    DRAG_BEGIN = "DRAG_BEGIN"
    SCROLL = "SCROLL"
    DRAG_END = "DRAG_END"
    SWIPE = "SWIPE"


@dataclass(frozen=True)
class MoveEvent:
    x: float
    y: float
    mode: Mode
    gesture: GestureSymbol


@dataclass(frozen=True)
class PointerEvent:
    x: float
    y: float


@dataclass(frozen=True)
class ScrollEvent:
    dy: float


@dataclass(frozen=True)
class SwipeEvent:
    direction: SwipeDirection


_POINTER_TYPES = frozenset({
    EventType.POINTER_DOWN,
    EventType.CLICK,
    EventType.DOUBLE_CLICK,
    EventType.SECONDARY_CLICK,
    EventType.DRAG_BEGIN,
    EventType.DRAG_END,
})


@dataclass(frozen=True)
class InputEvent:
    """
    A single output event from the interpreter.

    Exactly ONE payload field is non-None depending on `type`.
    """
    t_ms: int
    type: EventType
    move: Optional[MoveEvent] = None
    pointer: Optional[PointerEvent] = None
    scroll: Optional[ScrollEvent] = None
    swipe: Optional[SwipeEvent] = None

    @classmethod
    def at(cls, t_ms: int, type: EventType, x: float, y: float) -> "InputEvent":
        assert type in _POINTER_TYPES, type
        return cls(t_ms=t_ms, type=type, pointer=PointerEvent(x=x, y=y))
