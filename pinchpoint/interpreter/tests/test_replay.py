import math

import pytest

from pinchpoint.core.config import DEFAULT_PRESET, SLIDES_PRESET, DisplayGeometry
from pinchpoint.core.types import EventType, GestureSymbol, LandmarkFrame, Mode, SwipeDirection
from pinchpoint.interpreter.hover import HoverTracker
from pinchpoint.interpreter.pipeline import Interpreter
from pinchpoint.interpreter.tests.hands import hand, of_type


def run(it, frames):
    per_frame = []
    for f in frames:
        per_frame.append(it.process(f))
    return per_frame


def test_pinch_tap_click():
    it = Interpreter(DEFAULT_PRESET)
    frames = [hand(33 * i, 0.02, 0.5) for i in range(4)]
    frames += [hand(33 * i, 0.5, 0.5) for i in range(4, 6)]
    per_frame = run(it, frames)

    downs = [i for i, evs in enumerate(per_frame) if of_type(evs, EventType.POINTER_DOWN)]
    clicks = [i for i, evs in enumerate(per_frame) if of_type(evs, EventType.CLICK)]
    assert downs == [3]
    # released on the second open frame, not later
    assert clicks == [5]

    down = of_type(per_frame[3], EventType.POINTER_DOWN)[0].pointer
    click = of_type(per_frame[5], EventType.CLICK)[0].pointer
    assert math.hypot(click.x - down.x, click.y - down.y) < 5


def test_every_tick_reports_pointer_with_mode():
    it = Interpreter(DEFAULT_PRESET)
    frames = [hand(33 * i, 0.02, 0.5) for i in range(5)]
    per_frame = run(it, frames)
    moves = [of_type(evs, EventType.MOVE) for evs in per_frame]
    assert all(len(m) == 1 for m in moves)
    assert moves[0][0].move.mode == Mode.IDLE
    assert moves[4][0].move.mode == Mode.ENGAGED
    assert moves[4][0].move.gesture == GestureSymbol.PRIMARY


def test_noise_frame_does_not_click():
    it = Interpreter(DEFAULT_PRESET)
    frames = [hand(0, 0.3, 0.3), hand(33, 0.02, 0.5), hand(66, 0.3, 0.3), hand(99, 0.3, 0.3)]
    events = [e for evs in run(it, frames) for e in evs]
    assert of_type(events, EventType.POINTER_DOWN) == []
    assert of_type(events, EventType.CLICK) == []


def test_middle_pinch_right_clicks():
    it = Interpreter(DEFAULT_PRESET)
    frames = [hand(33 * i, 0.5, 0.02) for i in range(5)]
    frames += [hand(33 * i, 0.5, 0.5) for i in range(5, 7)]
    events = [e for evs in run(it, frames) for e in evs]
    assert len(of_type(events, EventType.SECONDARY_CLICK)) == 1
    assert of_type(events, EventType.CLICK) == []


def test_drag_and_release():
    it = Interpreter(DEFAULT_PRESET, display=DisplayGeometry(1000, 1000))
    t = 0
    frames = []
    for _ in range(4):
        frames.append(hand(t, 0.02, 0.5, at=(0.5, 0.5))); t += 33
    # pull the pinched hand upwards; engaged smoothing is slow so go far
    for i in range(1, 15):
        frames.append(hand(t, 0.02, 0.5, at=(0.5, 0.5 - 0.03 * i))); t += 33
    frames += [hand(t, 0.5, 0.5, at=(0.5, 0.08)), hand(t + 33, 0.5, 0.5, at=(0.5, 0.08))]
    events = [e for evs in run(it, frames) for e in evs]

    assert len(of_type(events, EventType.DRAG_BEGIN)) == 1
    scrolls = of_type(events, EventType.SCROLL)
    assert scrolls
    # hand moving up scrolls with a positive delta
    assert all(s.scroll.dy >= 0 for s in scrolls)
    assert len(of_type(events, EventType.DRAG_END)) == 1
    assert of_type(events, EventType.CLICK) == []


def test_missing_frames_before_first_hand_are_silent():
    it = Interpreter(DEFAULT_PRESET)
    assert it.process(None, t_ms=0) == []
    assert it.process(None, t_ms=33) == []


def test_hand_lost_mid_pinch_releases():
    it = Interpreter(DEFAULT_PRESET)
    run(it, [hand(33 * i, 0.02, 0.5) for i in range(4)])
    assert it.machine.is_engaged
    assert of_type(it.process(None, t_ms=200), EventType.CLICK) == []
    out = it.process(None, t_ms=233)
    assert len(of_type(out, EventType.CLICK)) == 1
    assert not it.machine.is_engaged


@pytest.mark.parametrize("bad", [
    LandmarkFrame(t_ms=0, points=((0.5, 0.5),) * 5),
    LandmarkFrame(t_ms=0, points=((float("nan"), 0.5),) * 21),
    LandmarkFrame(t_ms=0, points=((0.5, float("inf")),) * 21),
])
def test_invalid_geometry_treated_as_missing(bad):
    it = Interpreter(DEFAULT_PRESET)
    run(it, [hand(33 * i, 0.02, 0.5) for i in range(4)])
    it.process(bad, t_ms=150)
    out = it.process(bad, t_ms=183)
    assert len(of_type(out, EventType.CLICK)) == 1
    assert it.stability.history[-2:] == (GestureSymbol.NONE, GestureSymbol.NONE)


def test_swipe_end_to_end():
    it = Interpreter(SLIDES_PRESET, display=DisplayGeometry(1000, 1000))
    # pointer-space x 0.10 -> 0.40 in 200 ms; camera x is mirrored
    frames = [
        hand(round(200 * i / 6), 0.3, 0.3, at=(0.90 - 0.05 * i, 0.5))
        for i in range(7)
    ]
    events = [e for evs in run(it, frames) for e in evs]
    swipes = of_type(events, EventType.SWIPE)
    assert len(swipes) == 1
    assert swipes[0].swipe.direction == SwipeDirection.RIGHT


def test_no_swipe_unless_enabled():
    it = Interpreter(DEFAULT_PRESET, display=DisplayGeometry(1000, 1000))
    frames = [
        hand(round(200 * i / 6), 0.3, 0.3, at=(0.90 - 0.05 * i, 0.5))
        for i in range(7)
    ]
    events = [e for evs in run(it, frames) for e in evs]
    assert of_type(events, EventType.SWIPE) == []


def test_pinch_mid_swipe_voids_window():
    it = Interpreter(SLIDES_PRESET, display=DisplayGeometry(1000, 1000))
    t = 0
    frames = []
    for i in range(3):
        frames.append(hand(t, 0.3, 0.3, at=(0.90 - 0.05 * i, 0.5))); t += 33
    for i in range(3, 7):
        frames.append(hand(t, 0.02, 0.5, at=(0.90 - 0.05 * i, 0.5))); t += 33
    events = [e for evs in run(it, frames) for e in evs]
    assert it.machine.is_engaged
    assert len(it.swipe) == 0
    assert of_type(events, EventType.SWIPE) == []


def test_stop_resets_everything_and_blocks_ticks():
    it = Interpreter(SLIDES_PRESET)
    run(it, [hand(33 * i, 0.02, 0.5) for i in range(4)])
    assert it.machine.is_engaged

    it.stop()
    it.stop()
    assert not it.machine.is_engaged
    assert it.machine.click_memory is None
    assert it.stability.history == ()
    assert len(it.swipe) == 0
    assert it.process(hand(200, 0.5, 0.5)) == []

    it.start()
    out = it.process(hand(233, 0.5, 0.5))
    assert [e.type for e in out] == [EventType.MOVE]


def test_reset_while_idle_is_quiet():
    it = Interpreter(DEFAULT_PRESET)
    it.reset()
    it.reset()
    assert it.machine.mode == Mode.IDLE
    assert it.stability.history == ()


def test_hover_observer_follows_pointer():
    calls = []
    hv = HoverTracker(lambda x, y: "button", lambda el, kind, x, y: calls.append(kind))
    it = Interpreter(DEFAULT_PRESET, hover=hv)
    run(it, [hand(33 * i, 0.02, 0.5) for i in range(4)])
    assert calls[0] == "enter"
    assert calls.count("move") == 4
    assert calls[-1] == "down"
    it.stop()
    assert hv.current is None


def test_missing_frame_timestamp_is_monotonic(monkeypatch):
    import pinchpoint.interpreter.pipeline as pipeline

    it = Interpreter(DEFAULT_PRESET)
    run(it, [hand(1000 + 33 * i, 0.02, 0.5) for i in range(4)])
    # wall clock jumps back a day; only the monotonic clock is read
    monkeypatch.setattr(pipeline.time, "time", lambda: 0.0)
    monkeypatch.setattr(pipeline.time, "monotonic", lambda: 1.2)
    it.process(None)
    out = it.process(None)
    clicks = of_type(out, EventType.CLICK)
    assert len(clicks) == 1
    assert clicks[0].t_ms == 1200
