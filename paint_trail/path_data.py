"""Conversion of outline polygons to compact smooth SVG path data."""

import numpy as np

MIN_VERTICES = 4


def midpoint(a, b) -> np.ndarray:
    """Average of two points."""
    return (np.asarray(a, dtype=float) + np.asarray(b, dtype=float)) / 2


def format_number(value: float, precision: int = 2) -> str:
    """Fixed-precision decimal text for one coordinate."""
    # negative zero prints as zero; small negatives keep their sign
    if value == 0:
        value = 0.0
    return f"{value:.{precision}f}"


def svg_path_from_stroke(stroke, closed: bool = True, precision: int = 2) -> str:
    """Smooth an outline polygon into quadratic SVG path data.

    Moves to vertex 0, draws a quadratic curve controlled by vertex 1 to the
    midpoint of vertices 1 and 2, then continues with smooth quadratic
    (``T``) segments to the midpoint of each following adjacent pair.

    Args:
        stroke: Outline vertices, array-like of shape (N, 2).
        closed: Append ``Z`` to close the path.
        precision: Decimal places for every emitted coordinate.

    Returns:
        Space-separated path data, or an empty string when there are fewer
        than four vertices.
    """
    vertices = np.asarray(stroke, dtype=float)
    if len(vertices) < MIN_VERTICES:
        return ""

    tokens: list = ["M", vertices[0], "Q", vertices[1], midpoint(vertices[1], vertices[2]), "T"]
    tokens.extend(
        midpoint(vertices[i], vertices[i + 1]) for i in range(2, len(vertices) - 1)
    )
    if closed:
        tokens.append("Z")

    parts = []
    for token in tokens:
        if isinstance(token, str):
            parts.append(token)
        else:
            parts.extend(format_number(float(v), precision) for v in token[:2])
    return " ".join(parts)
