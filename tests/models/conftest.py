import pytest
from paint_trail.models import Vector, SamplePoint


@pytest.fixture
def unit_x():
    return Vector(1.0, 0.0)


@pytest.fixture
def valid_sample_point():
    return SamplePoint(x=1.0, y=2.0, w=0.5)
