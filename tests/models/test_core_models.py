import math

import numpy as np
import pytest
from pydantic import ValidationError
from paint_trail.models import AngleUnit, Paint, SamplePoint, Vector, new_paint_id


@pytest.mark.parametrize("length", [0.5, 1.0, 3.0, 250.0])
@pytest.mark.parametrize("angle", [-170.0, -90.0, -30.0, 0.0, 45.0, 90.0, 135.0, 179.0])
def test_polar_round_trip_degrees(length, angle):
    v = Vector.from_polar(length, angle)
    assert v.length() == pytest.approx(length)
    assert v.angle() == pytest.approx(angle)


@pytest.mark.parametrize("angle", [-3.0, -1.0, 0.0, 0.5, 2.0, 3.1])
def test_polar_round_trip_radians(angle):
    v = Vector.from_polar(2.0, angle, AngleUnit.RADIANS)
    length, back = v.to_polar(AngleUnit.RADIANS)
    assert length == pytest.approx(2.0)
    assert back == pytest.approx(angle)


def test_zero_length_has_zero_angle():
    v = Vector.from_polar(0.0, 30.0)
    assert v.length() == 0.0
    assert v.angle() == 0.0
    assert Vector(0, 0).angle(AngleUnit.RADIANS) == 0.0


@pytest.mark.parametrize("x,y", [(3, 4), (-2, 0.5), (1e-6, 0), (0, -7)])
def test_normalize_has_unit_length(x, y):
    assert Vector(x, y).normalize().length() == pytest.approx(1.0)


def test_normalize_zero_vector_is_defined():
    n = Vector(0, 0).normalize()
    assert not math.isnan(n.x) and not math.isnan(n.y)
    assert n.length() == 0.0


def test_arithmetic(unit_x):
    a = Vector(1, 2)
    b = Vector(3, -4)
    assert a.add(b) == Vector(4, -2)
    assert a.subtract(b) == Vector(-2, 6)
    assert a.scale(2) == Vector(2, 4)
    assert a.hadamard(b) == Vector(3, -8)
    assert a.dot(b) == -5
    assert a.cross(b) == -10
    assert a + b == a.add(b)
    assert a - b == a.subtract(b)
    assert 2 * a == a * 2 == Vector(2, 4)
    assert -a == Vector(-1, -2)
    assert a / 2 == Vector(0.5, 1)


def test_rotate_quarter_turn(unit_x):
    r = unit_x.rotate(90)
    assert r.x == pytest.approx(0.0, abs=1e-12)
    assert r.y == pytest.approx(1.0)
    r = unit_x.rotate(math.pi, AngleUnit.RADIANS)
    assert r.x == pytest.approx(-1.0)


def test_mix_and_project():
    a = Vector(0, 0)
    b = Vector(10, 20)
    assert a.mix(b) == Vector(5, 10)
    assert a.mix(b, 0.25) == Vector(2.5, 5)
    p = Vector(2, 2).project(Vector(5, 0))
    assert p.x == pytest.approx(2.0)
    assert p.y == pytest.approx(0.0)
    assert Vector(2, 2).project(Vector(0, 0)) == Vector(0, 0)


def test_clamp_clip_and_length_helpers():
    v = Vector(3, 4)
    assert v.clamp(Vector(0, 0), Vector(2, 10)) == Vector(2, 4)
    assert v.clip(0, 2.5).length() == pytest.approx(2.5)
    assert v.with_length(10).to_array() == pytest.approx((6, 8))
    assert v.length_squared() == 25
    assert v.distance_to(Vector(0, 0)) == pytest.approx(5)


def test_conversions():
    v = Vector.from_object({"x": 1, "y": 2})
    assert v.equals(Vector.from_array([1, 2]))
    assert v.to_object() == {"x": 1, "y": 2}
    assert v.to_string() == "1,2"
    assert Vector(1, 2.5).to_string(separator=" ") == "1 2.500"
    assert Vector.from_object(SamplePoint(x=3, y=4)) == Vector(3, 4)


def test_vector_is_immutable():
    v = Vector(1, 2)
    with pytest.raises(ValidationError):
        v.x = 5


def test_sample_point_defaults(valid_sample_point):
    assert valid_sample_point.as_triple() == (1.0, 2.0, 0.5)
    assert valid_sample_point.position == Vector(1, 2)
    assert SamplePoint.at(Vector(3, 4)).w == 0.0


def test_sample_point_negative_weight_raises():
    with pytest.raises(ValidationError):
        SamplePoint(x=0, y=0, w=-1)


def test_paint_ids_are_unique():
    a = Paint(color="red")
    b = Paint(color="red")
    assert a.id != b.id
    assert a.points == []


def test_paint_ids_follow_the_random_source():
    first = [new_paint_id(np.random.default_rng(3)) for _ in range(2)]
    assert first[0] == first[1]
    assert len(first[0]) == 32

    rng = np.random.default_rng(3)
    assert new_paint_id(rng) != new_paint_id(rng)
