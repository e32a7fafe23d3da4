"""Variable-width stroke outlines.

Adapts the perfect-freehand outline function to the library's
``(x, y, weight)`` samples and ``OutlineParams``. The renderer accepts any
callable with the signature of ``get_stroke`` in its place.
"""

from collections.abc import Callable

import numpy as np
import perfect_freehand

from paint_trail.models import OutlineParams

Outliner = Callable[[np.ndarray, OutlineParams], np.ndarray]


def get_stroke(points, params: OutlineParams) -> np.ndarray:
    """Outline polygon for weighted centerline samples.

    Args:
        points: Array-like of ``(x, y, weight)`` rows; weight acts as pressure.
        params: Outline parameters.

    Returns:
        Outline vertices, shape (M, 2); empty when there are no samples.
    """
    samples = np.asarray(points, dtype=float)
    if samples.size == 0:
        return np.zeros((0, 2))

    outline = perfect_freehand.get_stroke(
        np.atleast_2d(samples).tolist(),
        size=params.size,
        thinning=params.thinning,
        smoothing=params.smoothing,
        streamline=params.streamline,
        simulate_pressure=params.simulate_pressure,
        cap_start=params.cap_start,
        cap_end=params.cap_end,
        taper_start=params.taper_start,
        taper_end=params.taper_end,
    )
    return np.asarray(outline, dtype=float).reshape(-1, 2)
