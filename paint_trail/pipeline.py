"""
Pipeline processing functions for paint trails.

This module contains the core processing functions that take a gesture to
a live paint and a live paint to drawable path data, separating the
geometry from the session's clock and bookkeeping. Every function here
returns an empty result instead of raising, because a dropped stroke or a
blank frame is an acceptable outcome for a generative effect.
"""

import logging
from collections.abc import Iterable

import numpy as np

from paint_trail.errors import (
    DegenerateGeometryError,
    MissingInputError,
    PaintTrailError,
)
from paint_trail.freehand import Outliner, get_stroke
from paint_trail.models import (
    Frame,
    GeneratedStroke,
    OutlineParams,
    Paint,
    PaintParameters,
    RenderedPaint,
    Vector,
    new_paint_id,
)
from paint_trail.path_data import svg_path_from_stroke
from paint_trail.stroke_generation import ColorPicker, generate_stroke

__all__ = [
    "PaintTrailError",
    "DegenerateGeometryError",
    "MissingInputError",
    "generate_paint",
    "render_paint",
    "render_frame",
]

logger = logging.getLogger(__name__)


def generate_paint(
    start: Vector | None,
    end: Vector | None,
    params: PaintParameters,
    rng: np.random.Generator,
    colors: ColorPicker,
) -> tuple[Paint, GeneratedStroke] | None:
    """Generate a new paint from one gesture sample.

    Args:
        start: Oldest recent pointer position, None before any movement.
        end: Newest recent pointer position, None before any movement.
        params: Session parameters; ``params.variant`` selects the generator.
        rng: Random source for the generator.
        colors: Picks the paint's color.

    Returns:
        The new paint with the stroke it was built from, or None when the
        input is missing or the gesture is degenerate.
    """
    try:
        if start is None or end is None:
            raise MissingInputError("No pointer history yet")

        stroke = generate_stroke(start, end, params, rng)
        if not stroke.points:
            raise DegenerateGeometryError("Stroke generator produced no points")

        paint = Paint(
            id=new_paint_id(rng), points=stroke.points, color=colors.pick()
        )
        return paint, stroke
    except PaintTrailError as e:
        # pointer at rest or not yet seen; happens every tick, keep it quiet
        logger.debug(f"Skipping stroke generation: {str(e)}")
        return None


def render_paint(
    paint: Paint, params: OutlineParams, outliner: Outliner = get_stroke
) -> RenderedPaint:
    """Convert a paint's current point states into smooth path data.

    Args:
        paint: The paint to render.
        params: Outline and path data parameters.
        outliner: Variable-width outline function.

    Returns:
        RenderedPaint; ``path_data`` is empty when no outline could be made.
    """
    try:
        if not paint.points:
            raise DegenerateGeometryError("Paint has no points")

        samples = np.array([point.as_triple() for point in paint.points])
        outline = np.asarray(outliner(samples, params), dtype=float).reshape(-1, 2)
        path_data = svg_path_from_stroke(
            outline, closed=params.closed, precision=params.precision
        )
        return RenderedPaint(
            paint_id=paint.id, path_data=path_data, color=paint.color, outline=outline
        )
    except PaintTrailError as e:
        logger.debug(f"Nothing to draw for paint {paint.id}: {str(e)}")
        return RenderedPaint(paint_id=paint.id, color=paint.color)
    except Exception as e:
        logger.warning(f"Error outlining paint {paint.id}: {str(e)}")
        return RenderedPaint(paint_id=paint.id, color=paint.color)


def render_frame(
    paints: Iterable[Paint],
    tick: int,
    params: PaintParameters,
    outliner: Outliner = get_stroke,
) -> Frame:
    """Render every live paint for one tick, back to front.

    Args:
        paints: Live paints in draw order; pass a registry snapshot.
        tick: Frame counter to stamp on the frame.
        params: Session parameters.
        outliner: Variable-width outline function.

    Returns:
        Frame with one RenderedPaint per input paint.
    """
    return Frame(
        tick=tick,
        background=params.render.background,
        paints=[render_paint(paint, params.outline, outliner) for paint in paints],
    )
