import pytest

from pinchpoint.core.config import DEFAULT_PRESET
from pinchpoint.core.types import GestureSymbol
from pinchpoint.interpreter.classifier import GestureClassifier
from pinchpoint.interpreter.tests.hands import hand


@pytest.fixture
def clf():
    return GestureClassifier(DEFAULT_PRESET.pinch)


def test_index_pinch_is_primary(clf):
    assert clf.classify(hand(0, 0.02, 0.5)) == GestureSymbol.PRIMARY


def test_middle_pinch_is_secondary(clf):
    assert clf.classify(hand(0, 0.5, 0.02)) == GestureSymbol.SECONDARY


def test_open_hand_is_none(clf):
    assert clf.classify(hand(0, 0.3, 0.3)) == GestureSymbol.NONE


def test_distances_measured_from_thumb(clf):
    d_index, d_middle = clf.distances(hand(0, 0.03, 0.2))
    assert d_index == pytest.approx(0.03)
    assert d_middle == pytest.approx(0.2)


def test_other_finger_inside_exclusion_zone_rejects(clf):
    # middle is not pinching (0.05 > 0.04) but still too close (< 0.06)
    assert clf.classify_distances(0.02, 0.05) == GestureSymbol.NONE
    assert clf.classify_distances(0.05, 0.02) == GestureSymbol.NONE


def test_both_pinching_clear_winner(clf):
    assert clf.classify_distances(0.01, 0.035) == GestureSymbol.PRIMARY
    assert clf.classify_distances(0.035, 0.01) == GestureSymbol.SECONDARY


def test_both_pinching_too_close_to_call(clf):
    assert clf.classify_distances(0.02, 0.025) == GestureSymbol.NONE
    assert clf.classify_distances(0.03, 0.03) == GestureSymbol.NONE


@pytest.mark.parametrize("a,b", [
    (0.02, 0.5), (0.01, 0.035), (0.02, 0.025), (0.05, 0.02), (0.039, 0.061),
])
def test_symmetric_in_finger_naming(clf, a, b):
    swap = {
        GestureSymbol.PRIMARY: GestureSymbol.SECONDARY,
        GestureSymbol.SECONDARY: GestureSymbol.PRIMARY,
        GestureSymbol.NONE: GestureSymbol.NONE,
    }
    assert clf.classify_distances(b, a) == swap[clf.classify_distances(a, b)]


def test_pure_function_of_geometry(clf):
    f = hand(0, 0.021, 0.4, at=(0.3, 0.7))
    first = clf.classify(f)
    for _ in range(5):
        clf.classify(hand(0, 0.5, 0.02))
        assert clf.classify(f) == first
