"""Session state for a live paint trail.

A ``PaintSession`` owns everything one drawing surface needs: the rolling
pointer history, the registry of live paints, the animation driver, the
random source and the frame counter. The host feeds it pointer positions,
calls ``tick`` from its frame clock and draws whatever ``frame`` returns.
"""

import logging
import math
from collections import deque

import numpy as np

from paint_trail.animation import AnimationDriver
from paint_trail.freehand import Outliner, get_stroke
from paint_trail.models import Frame, Paint, PaintParameters, Vector
from paint_trail.pipeline import generate_paint, render_frame
from paint_trail.registry import PaintRegistry
from paint_trail.stroke_generation import ColorPicker

logger = logging.getLogger(__name__)

# absorbs float drift when summing frame durations against the interval
_INTERVAL_EPSILON = 1e-9


class PositionHistory:
    """The last ``limit`` pointer positions, oldest first."""

    def __init__(self, limit: int):
        self._positions: deque[Vector] = deque(maxlen=limit)

    def __len__(self) -> int:
        return len(self._positions)

    def push(self, position: Vector) -> None:
        self._positions.append(position)

    @property
    def earliest(self) -> Vector | None:
        return self._positions[0] if self._positions else None

    @property
    def latest(self) -> Vector | None:
        return self._positions[-1] if self._positions else None

    def clear(self) -> None:
        self._positions.clear()


class PaintSession:
    """Generates, animates and renders paints for one drawing surface.

    Each ``tick(dt)`` advances every paint's animation, removes the paints
    whose points are all done, then generates one new paint per elapsed
    ``generate_interval`` from the oldest and newest recent pointer
    positions. At most one frame duration's worth of paints is generated
    per tick, however long the tick. Use the session as a context manager,
    or call ``close``, to release all pending animations.

    Args:
        params: Session parameters, defaults if None.
        rng: Random source; seeded from ``params.seed`` if None.
        outliner: Variable-width outline function used when rendering.
    """

    def __init__(
        self,
        params: PaintParameters | None = None,
        rng: np.random.Generator | None = None,
        outliner: Outliner = get_stroke,
    ):
        self.params = params if params is not None else PaintParameters()
        self.rng = rng if rng is not None else np.random.default_rng(self.params.seed)
        self.outliner = outliner
        self.registry = PaintRegistry.create()
        self.driver = AnimationDriver()
        self.history = PositionHistory(self.params.history_length)
        self.colors = ColorPicker(
            self.params.render.palette, self.params.render.color_policy, self.rng
        )
        self.tick_count = 0
        self.closed = False
        self._since_generate = 0.0

    def __enter__(self) -> "PaintSession":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    @property
    def frame_duration(self) -> float:
        """Seconds per tick of the frame clock."""
        return 1.0 / self.params.render.fps

    @property
    def generation_budget(self) -> int:
        """Most paints one tick may generate: one frame duration's worth."""
        per_frame = self.frame_duration / self.params.generate_interval
        return max(1, math.ceil(per_frame - _INTERVAL_EPSILON))

    def move_to(self, x: float, y: float) -> None:
        """Record the pointer's position in canvas coordinates."""
        if self.closed:
            return
        self.history.push(Vector(x, y))

    def generate(self) -> Paint | None:
        """Generate one paint from the pointer history and start animating it.

        Returns:
            The new paint, or None if there was nothing to generate from.
        """
        if self.closed:
            return None
        result = generate_paint(
            self.history.earliest,
            self.history.latest,
            self.params,
            self.rng,
            self.colors,
        )
        if result is None:
            return None
        paint, stroke = result
        self.registry.insert(paint)
        self.driver.schedule(paint, stroke, self.params.animation)
        return paint

    def tick(self, dt: float | None = None) -> list[str]:
        """Advance the session by one frame.

        Args:
            dt: Elapsed seconds, one frame duration if None.

        Returns:
            Ids of the paints removed during this tick.
        """
        if self.closed:
            return []
        dt = self.frame_duration if dt is None else max(0.0, dt)

        finished = self.driver.tick(dt)
        removed = [paint_id for paint_id in finished if self.registry.remove(paint_id)]

        self._since_generate += dt
        interval = self.params.generate_interval
        budget = self.generation_budget
        generated = 0
        while (
            generated < budget
            and self._since_generate + _INTERVAL_EPSILON >= interval
        ):
            self._since_generate -= interval
            self.generate()
            generated += 1
        if generated == budget and self._since_generate + _INTERVAL_EPSILON >= interval:
            # a stalled host does not get a burst of strokes on resume
            logger.debug(f"Dropping {self._since_generate:.3f}s of generation backlog")
            self._since_generate %= interval

        self.tick_count += 1
        return removed

    def frame(self) -> Frame:
        """Render the live paints as they stand after the last tick."""
        if self.closed:
            return Frame(tick=self.tick_count, background=self.params.render.background)
        return render_frame(
            self.registry.snapshot(), self.tick_count, self.params, self.outliner
        )

    def close(self) -> None:
        """Cancel every pending animation and drop all paints."""
        if self.closed:
            return
        self.driver.close()
        self.registry.clear()
        self.history.clear()
        self.closed = True
        logger.debug("Paint session closed")
