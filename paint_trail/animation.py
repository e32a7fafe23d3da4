"""
Width and drift animation for paint sample points.

Each sample point runs a small state machine:

    PENDING -> GROWING -> FADING -> DONE

GROWING tweens the weight from 0 to the stroke's peak, FADING tweens it
back to 0 while moving the point by its drift offset. The state is derived
from the elapsed time since the paint was scheduled, so a point can never
skip back or finish twice. A paint is finished once folding over its points
gives DONE for every one of them.
"""

import logging
from collections.abc import Callable
from enum import Enum

from paint_trail.interpolation import ZERO
from paint_trail.models import AnimationParams, GeneratedStroke, Paint, SamplePoint, Vector
from paint_trail.stroke_generation import stagger_delays

logger = logging.getLogger(__name__)

Easing = Callable[[float], float]


def linear(t: float) -> float:
    return t


def ease_out(t: float) -> float:
    return 1 - (1 - t) ** 2


def ease_in_out(t: float) -> float:
    if t < 0.5:
        return 2 * t * t
    return 1 - (-2 * t + 2) ** 2 / 2


EASINGS: dict[str, Easing] = {
    "linear": linear,
    "ease_out": ease_out,
    "ease_in_out": ease_in_out,
}


def get_easing(name: str) -> Easing:
    """Look up an easing function by name.

    Raises:
        ValueError: If the name is unknown.
    """
    try:
        return EASINGS[name]
    except KeyError:
        raise ValueError(
            f"Unknown easing '{name}'. Must be one of {list(EASINGS.keys())}"
        ) from None


class PointState(str, Enum):
    PENDING = "pending"
    GROWING = "growing"
    FADING = "fading"
    DONE = "done"


class PointAnimation:
    """Two-phase tween of one sample point's weight and position.

    Args:
        point: The sample point to write into.
        delay: Seconds before the grow phase starts.
        peak: Weight reached at the end of the grow phase.
        grow_duration: Length of the grow phase in seconds.
        fade_duration: Length of the fade phase in seconds.
        drift: Offset the point has moved by when the fade phase ends.
        easing: Easing applied to both phases.
    """

    def __init__(
        self,
        point: SamplePoint,
        delay: float,
        peak: float,
        grow_duration: float,
        fade_duration: float,
        drift: Vector = ZERO,
        easing: Easing = linear,
    ):
        self.point = point
        self.origin = point.position
        self.delay = delay
        self.peak = peak
        self.grow_duration = grow_duration
        self.fade_duration = fade_duration
        self.drift = drift
        self.easing = easing
        self.state = PointState.PENDING

    @property
    def end_time(self) -> float:
        return self.delay + self.grow_duration + self.fade_duration

    def update(self, elapsed: float) -> PointState:
        """Move the point to where it should be ``elapsed`` seconds in.

        Once DONE, further updates leave the point untouched.
        """
        if self.state == PointState.DONE:
            return self.state

        local = elapsed - self.delay
        if local < 0:
            self.state = PointState.PENDING
            self._write(0.0, 0.0)
        elif local < self.grow_duration:
            self.state = PointState.GROWING
            self._write(self.peak * self.easing(local / self.grow_duration), 0.0)
        elif local < self.grow_duration + self.fade_duration:
            self.state = PointState.FADING
            progress = self.easing((local - self.grow_duration) / self.fade_duration)
            self._write(self.peak * (1 - progress), progress)
        else:
            self.finish()
        return self.state

    def finish(self) -> None:
        """Jump straight to the final state."""
        self._write(0.0, 1.0)
        self.state = PointState.DONE

    def _write(self, weight: float, drift_progress: float) -> None:
        position = self.origin.add(self.drift.scale(drift_progress))
        self.point.w = max(0.0, weight)
        self.point.x = position.x
        self.point.y = position.y


class PaintTimeline:
    """The point animations of a single paint, advanced together."""

    def __init__(self, paint_id: str, animations: list[PointAnimation]):
        self.paint_id = paint_id
        self.animations = animations
        self.elapsed = 0.0

    @classmethod
    def for_stroke(
        cls, paint: Paint, stroke: GeneratedStroke, params: AnimationParams
    ) -> "PaintTimeline":
        """Build staggered animations for every point of a freshly generated paint.

        Point ``i`` of ``n`` starts ``(i / n) * params.stagger`` seconds in.
        """
        easing = get_easing(params.ease)
        delays = stagger_delays(len(paint.points), params.stagger)
        drift = stroke.drift or [ZERO] * len(paint.points)
        animations = [
            PointAnimation(
                point,
                delay=float(delay),
                peak=stroke.peak,
                grow_duration=params.grow_duration,
                fade_duration=params.fade_duration,
                drift=offset,
                easing=easing,
            )
            for point, delay, offset in zip(paint.points, delays, drift)
        ]
        return cls(paint.id, animations)

    @property
    def states(self) -> list[PointState]:
        return [animation.state for animation in self.animations]

    @property
    def finished(self) -> bool:
        return all(state == PointState.DONE for state in self.states)

    def advance(self, dt: float) -> bool:
        """Advance by ``dt`` seconds and report whether every point is done."""
        self.elapsed += dt
        for animation in self.animations:
            animation.update(self.elapsed)
        return self.finished


class AnimationDriver:
    """Owns the timelines of all live paints and advances them each tick.

    Finished timelines are dropped from the driver as soon as they are
    reported, so each paint id is reported at most once. After ``close``
    nothing is advanced or reported again.
    """

    def __init__(self):
        self._timelines: dict[str, PaintTimeline] = {}
        self.closed = False

    def __len__(self) -> int:
        return len(self._timelines)

    def __contains__(self, paint_id: str) -> bool:
        return paint_id in self._timelines

    def get(self, paint_id: str) -> PaintTimeline | None:
        return self._timelines.get(paint_id)

    def schedule(
        self, paint: Paint, stroke: GeneratedStroke, params: AnimationParams
    ) -> PaintTimeline:
        """Start animating a paint's points.

        Raises:
            RuntimeError: If the driver has been closed.
        """
        if self.closed:
            raise RuntimeError("Cannot schedule animations on a closed driver")
        timeline = PaintTimeline.for_stroke(paint, stroke, params)
        self._timelines[paint.id] = timeline
        return timeline

    def tick(self, dt: float) -> list[str]:
        """Advance every timeline by ``dt`` seconds.

        Returns:
            Ids of the paints that finished, in scheduling order.
        """
        if self.closed:
            return []
        finished = []
        for paint_id, timeline in list(self._timelines.items()):
            if timeline.advance(dt):
                finished.append(paint_id)
        for paint_id in finished:
            del self._timelines[paint_id]
        if finished:
            logger.debug(f"{len(finished)} paint animation(s) finished")
        return finished

    def cancel(self, paint_id: str) -> bool:
        """Stop animating a paint. Unknown ids are ignored."""
        return self._timelines.pop(paint_id, None) is not None

    def close(self) -> None:
        """Release every timeline; later ticks do nothing."""
        self._timelines.clear()
        self.closed = True
