"""Models for representing generation and render results.

This module contains Pydantic models that carry the result of each stage:
the ``GeneratedStroke`` a generator produces, and the drawable data the
live paints turn into, one ``RenderedPaint`` per paint and one ``Frame``
per tick of the frame clock.
"""

import numpy as np
from pydantic import BaseModel, Field

from paint_trail.models.core_models import SamplePoint, Vector


class GeneratedStroke(BaseModel):
    """Output of a stroke path generator, before animation starts.

    Attributes:
        points: Centerline samples, all at zero weight.
        peak: Width every point grows to.
        drift: Per-point offset travelled while fading, same length as points.
        length: Distance between the gesture's start and end.
    """

    points: list[SamplePoint] = Field(
        default_factory=list, description="Centerline samples"
    )
    peak: float = Field(0.0, ge=0.0, description="Peak width")
    drift: list[Vector] = Field(
        default_factory=list, description="Per-point fade offsets"
    )
    length: float = Field(0.0, ge=0.0, description="Gesture length")


class RenderedPaint(BaseModel):
    """A single paint converted to drawable form for one frame.

    Attributes:
        paint_id: Id of the paint this was rendered from.
        path_data: SVG path data of the smoothed outline, empty if degenerate.
        color: Fill color.
        outline: Outline polygon vertices, shape (N, 2).
    """

    paint_id: str = Field("", description="Source paint id")
    path_data: str = Field("", description="SVG path data")
    color: str = Field("", description="Fill color")
    outline: np.ndarray = Field(
        default_factory=lambda: np.zeros((0, 2)), description="Outline vertices"
    )

    class Config:
        arbitrary_types_allowed = True


class Frame(BaseModel):
    """Everything the host needs to draw one tick.

    Paints are ordered back to front (registry insertion order).

    Attributes:
        tick: Monotonically increasing frame counter, usable as a distortion seed.
        background: Canvas background color.
        paints: Rendered paints, back to front.
    """

    tick: int = Field(0, ge=0, description="Frame counter")
    background: str = Field("", description="Background color")
    paints: list[RenderedPaint] = Field(
        default_factory=list, description="Rendered paints, back to front"
    )

    class Config:
        arbitrary_types_allowed = True

    def pairs(self) -> list[tuple[str, str]]:
        """Return ``(path_data, color)`` pairs, skipping empty paths."""
        return [(p.path_data, p.color) for p in self.paints if p.path_data]
