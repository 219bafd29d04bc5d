from __future__ import annotations

from pinchpoint.core.types import INDEX_TIP, MIDDLE_TIP, THUMB_TIP, LandmarkFrame


def hand(t, d_index, d_middle, at=(0.5, 0.5)):
    """
    Synthetic hand: index tip at `at`, thumb `d_index` to its right,
    middle tip `d_middle` below the thumb. Other joints parked out of the way.
    """
    ix, iy = at
    thumb = (ix + d_index, iy)
    middle = (thumb[0], thumb[1] + d_middle)
    pts = [(0.5, 0.9)] * 21
    pts[THUMB_TIP] = thumb
    pts[INDEX_TIP] = (ix, iy)
    pts[MIDDLE_TIP] = middle
    return LandmarkFrame(t_ms=t, points=tuple(pts))


def of_type(events, type_):
    return [e for e in events if e.type == type_]
