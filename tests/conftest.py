import numpy as np
import pytest

from paint_trail.models import (
    AnimationParams,
    FanParams,
    Paint,
    PaintParameters,
    SamplePoint,
    Vector,
    WaveParams,
)
from paint_trail.stroke_generation import generate_fan_points


@pytest.fixture
def rng():
    # fixed seed so generated strokes are reproducible
    return np.random.default_rng(42)


@pytest.fixture
def fan_stroke(rng):
    # 10-point fan from (0,0) to (50,50)
    return generate_fan_points(Vector(0, 0), Vector(50, 50), FanParams(steps=10), rng)


@pytest.fixture
def fan_paint(fan_stroke):
    return Paint(points=fan_stroke.points, color="#ff0000")


@pytest.fixture
def straight_samples():
    # four evenly spaced samples along the x-axis, constant weight
    return np.array(
        [[0.0, 0.0, 0.5], [10.0, 0.0, 0.5], [20.0, 0.0, 0.5], [30.0, 0.0, 0.5]]
    )


@pytest.fixture
def quiet_params():
    # no automatic generation within a test's lifetime
    return PaintParameters(seed=7, generate_interval=10.0)


@pytest.fixture
def fast_animation():
    return AnimationParams(grow_duration=0.2, fade_duration=0.2, stagger=0.2)


@pytest.fixture
def flat_wave():
    # no wave, no wisps: points lie exactly on the segment
    return WaveParams(size=10, amplitude=0, wisp_every=0)


@pytest.fixture
def weighted_points():
    return [
        SamplePoint(x=0, y=0, w=0.2),
        SamplePoint(x=10, y=0, w=0.5),
        SamplePoint(x=20, y=0, w=0.2),
    ]
