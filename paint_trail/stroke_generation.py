"""
Stroke path generators.

Turns one gesture sample (the oldest and newest recent pointer positions)
into a ``GeneratedStroke``: zero-weight centerline points, the width they
grow to, and the offset each drifts by while fading. Two variants exist:

- fan: a curled, frayed tail fanning back from the newest position, with
  the length rate and curl drawn once per stroke so the curl stays coherent
- wave: evenly spaced samples displaced by a sine wave, with sparse
  wisp jitter interpolated between a few random draws

All randomness comes from the ``numpy.random.Generator`` passed in.
"""

import itertools
import math

import numpy as np

from paint_trail.errors import DegenerateGeometryError
from paint_trail.interpolation import ZERO, fill_sparse
from paint_trail.models import (
    TAU,
    ColorPolicy,
    FanParams,
    GeneratedStroke,
    PaintParameters,
    SamplePoint,
    StrokeVariant,
    Vector,
    WaveParams,
)


def turns_atan(x: float) -> float:
    """Arctangent measured in quarter turns, mapping [0, inf) onto [0, 1)."""
    return 4 * math.atan(x) / TAU


def generate_fan_points(
    start: Vector, end: Vector, params: FanParams, rng: np.random.Generator
) -> GeneratedStroke:
    """Generate a curled tail fanning from ``end`` back toward ``start``.

    Point ``k`` sits at ``end + from_polar(k * length_step, angle_start +
    k * angle_step)``; the list is then reversed so the first point is the
    one farthest along the tail and the last point sits exactly on ``end``.

    Args:
        start: Oldest recent pointer position.
        end: Newest recent pointer position.
        params: Fan generator parameters.
        rng: Source of the two per-stroke random draws.

    Returns:
        GeneratedStroke with ``params.steps`` zero-weight points, a peak of
        ``length * bulge`` and no drift.

    Raises:
        DegenerateGeometryError: If ``start`` and ``end`` coincide.
    """
    length_change = end.subtract(start).length()
    if length_change == 0:
        raise DegenerateGeometryError("Fan stroke has zero length")

    length_step = (length_change / params.steps) * rng.uniform(
        params.min_length_rate, params.max_length_rate
    )
    angle_change = rng.uniform(-params.curve, params.curve)
    angle_start = start.subtract(end).angle()
    angle_step = angle_change / params.steps

    positions = [
        end.add(Vector.from_polar(step * length_step, angle_start + step * angle_step))
        for step in range(params.steps)
    ]
    positions.reverse()

    return GeneratedStroke(
        points=[SamplePoint.at(p) for p in positions],
        peak=length_change * params.bulge,
        drift=[ZERO] * len(positions),
        length=length_change,
    )


def wave_distances(length: float, size: float) -> np.ndarray:
    """Sample distances ``0, size, 2*size, ...`` up to and including ``length``."""
    count = int(math.floor(length / size + 1e-9)) + 1
    return np.arange(count) * size


def sparse_wisps(
    count: int, params: WaveParams, rng: np.random.Generator
) -> list[Vector]:
    """Draw jitter for every ``wisp_every``-th sample and the last one, then fill the rest."""
    if params.wisp_every <= 0 or params.wisp_amount <= 0:
        return [ZERO] * count

    amount = params.wisp_amount
    sparse = []
    for index in range(count):
        if index % params.wisp_every == 0 or index == count - 1:
            dx, dy = rng.uniform(-amount, amount, size=2)
            sparse.append(Vector(float(dx), float(dy)))
        else:
            sparse.append(None)
    return fill_sparse(sparse)


def generate_wave_points(
    start: Vector, end: Vector, params: WaveParams, rng: np.random.Generator
) -> GeneratedStroke:
    """Generate a sine-displaced line of samples from ``start`` to ``end``.

    Args:
        start: Oldest recent pointer position.
        end: Newest recent pointer position.
        params: Wave generator parameters.
        rng: Source of the phase draw and the wisp jitter.

    Returns:
        GeneratedStroke whose points lie within ``params.amplitude`` of the
        straight segment, with wisp jitter as drift.

    Raises:
        DegenerateGeometryError: If ``start`` and ``end`` coincide.
    """
    delta = end.subtract(start)
    length = delta.length()
    if length == 0:
        raise DegenerateGeometryError("Wave stroke has zero length")

    direction = delta.normalize()
    normal = direction.rotate(90)
    phase = rng.uniform(0, 1)

    distances = wave_distances(length, params.size)
    displacements = params.amplitude * np.sin(
        TAU * (distances * params.frequency + phase)
    )

    points = [
        SamplePoint.at(
            start.add(direction.scale(float(d))).add(normal.scale(float(offset)))
        )
        for d, offset in zip(distances, displacements)
    ]

    return GeneratedStroke(
        points=points,
        peak=turns_atan(length / params.size / 10) * params.peak_scale,
        drift=sparse_wisps(len(points), params, rng),
        length=length,
    )


def generate_stroke(
    start: Vector, end: Vector, params: PaintParameters, rng: np.random.Generator
) -> GeneratedStroke:
    """Dispatch to the generator selected by ``params.variant``."""
    if params.variant == StrokeVariant.WAVE:
        return generate_wave_points(start, end, params.wave, rng)
    return generate_fan_points(start, end, params.fan, rng)


def stagger_delays(count: int, stagger: float) -> np.ndarray:
    """Start delay of each point so animation sweeps along the stroke.

    Args:
        count: Number of points.
        stagger: Total delay spread in seconds.

    Returns:
        Array where entry ``i`` is ``(i / count) * stagger``.
    """
    if count <= 0:
        return np.array([])
    return np.arange(count) / count * stagger


class ColorPicker:
    """Chooses each new stroke's color from a fixed palette.

    With ``ColorPolicy.RANDOM`` every pick is a uniform draw from ``rng``;
    with ``ColorPolicy.CYCLE`` colors are handed out round-robin starting
    from the first palette entry.
    """

    def __init__(
        self,
        palette: list[str],
        policy: ColorPolicy = ColorPolicy.RANDOM,
        rng: np.random.Generator | None = None,
    ):
        if not palette:
            raise ValueError("Palette must contain at least one color")
        self.palette = list(palette)
        self.policy = policy
        self.rng = rng if rng is not None else np.random.default_rng()
        self._cycle = itertools.cycle(self.palette)

    def pick(self) -> str:
        if self.policy == ColorPolicy.CYCLE:
            return next(self._cycle)
        return self.palette[int(self.rng.integers(len(self.palette)))]
