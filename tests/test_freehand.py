import numpy as np
import perfect_freehand
import pytest

from paint_trail.freehand import get_stroke
from paint_trail.models import OutlineParams


@pytest.fixture
def curved_samples():
    return np.array(
        [
            [100, 100, 0.0],
            [95, 90, 0.3],
            [88, 80, 0.7],
            [80, 72, 0.7],
            [70, 65, 0.2],
            [60, 60, 0.0],
        ]
    )


def test_get_stroke_empty():
    assert get_stroke([], OutlineParams()).shape == (0, 2)
    assert get_stroke(np.zeros((0, 3)), OutlineParams()).shape == (0, 2)


def test_get_stroke_matches_perfect_freehand(curved_samples):
    params = OutlineParams()
    ours = get_stroke(curved_samples, params)
    theirs = np.asarray(
        perfect_freehand.get_stroke(
            curved_samples.tolist(),
            size=params.size,
            thinning=params.thinning,
            smoothing=params.smoothing,
            streamline=params.streamline,
            simulate_pressure=params.simulate_pressure,
            cap_start=params.cap_start,
            cap_end=params.cap_end,
            taper_start=params.taper_start,
            taper_end=params.taper_end,
        ),
        dtype=float,
    )
    assert ours.shape == theirs.shape
    assert ours == pytest.approx(theirs)


def test_get_stroke_forwards_outline_params(monkeypatch, straight_samples):
    calls = []

    def fake_get_stroke(points, **options):
        calls.append((points, options))
        return [[0, 0], [1, 0], [1, 1], [0, 1]]

    monkeypatch.setattr(perfect_freehand, "get_stroke", fake_get_stroke)
    params = OutlineParams(
        size=6, thinning=0.2, smoothing=0.3, streamline=0.4, taper_end=5, cap_start=False
    )
    outline = get_stroke(straight_samples, params)

    assert outline.shape == (4, 2)
    assert outline.dtype == float
    points, options = calls[0]
    # weights are passed through as pressure
    assert points == straight_samples.tolist()
    assert options == {
        "size": 6,
        "thinning": 0.2,
        "smoothing": 0.3,
        "streamline": 0.4,
        "simulate_pressure": False,
        "cap_start": False,
        "cap_end": True,
        "taper_start": 0,
        "taper_end": 5,
    }


def test_outline_surrounds_centerline(straight_samples):
    outline = get_stroke(straight_samples, OutlineParams(size=2, thinning=0))
    assert outline.ndim == 2 and outline.shape[1] == 2
    assert len(outline) >= 4
    # both sides of the stroke are present, no wider than the stroke
    assert outline[:, 1].max() > 0
    assert outline[:, 1].min() < 0
    assert np.abs(outline[:, 1]).max() <= 2.0 + 1e-6


def test_single_sample_gives_a_dot():
    outline = get_stroke([[5.0, 5.0, 0.5]], OutlineParams(size=4, thinning=0))
    assert len(outline) > 0
    assert np.hypot(outline[:, 0] - 5, outline[:, 1] - 5).max() <= 4.0 + 1e-6
