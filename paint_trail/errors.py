"""Exceptions raised inside the paint trail pipeline.

None of these reach the host: the pipeline functions catch
``PaintTrailError``, log it and return an empty result, because a dropped
stroke or a blank frame is an acceptable outcome for a generative effect.
"""


class PaintTrailError(Exception):
    """Base exception for paint trail processing errors."""

    pass


class DegenerateGeometryError(PaintTrailError):
    """Exception raised for zero-length strokes or too few samples."""

    pass


class MissingInputError(PaintTrailError):
    """Exception raised when there is no pointer history to generate from."""

    pass
