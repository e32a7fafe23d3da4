"""
Visualization functions for paint trail frames.

This module draws rendered frames with matplotlib, for previews, debugging
and regression images. It is not the host's scene renderer: the crinkle
distortion filter is not applied.
"""

import colorsys
import re
from collections.abc import Sequence
from functools import lru_cache

import numpy as np
from matplotlib.backends.backend_agg import FigureCanvasAgg
from matplotlib.colors import to_rgb
from matplotlib.figure import Figure
from matplotlib.patches import Polygon

from paint_trail.models import Frame, RenderedPaint

_HSL_PATTERN = re.compile(
    r"hsla?\(\s*([-\d.]+)(?:deg)?\s*,?\s*([\d.]+)%\s*,?\s*([\d.]+)%"
)


@lru_cache(maxsize=32)
def css_color_to_rgb(color: str) -> tuple[float, float, float]:
    """Convert a CSS color string to an RGB triple in [0, 1].

    Handles ``hsl(h, s%, l%)`` itself and defers everything else (names,
    hex) to matplotlib.

    Raises:
        ValueError: If the color cannot be parsed.
    """
    match = _HSL_PATTERN.match(color.strip())
    if match:
        hue, saturation, lightness = (float(g) for g in match.groups())
        return colorsys.hls_to_rgb((hue % 360) / 360, lightness / 100, saturation / 100)
    return to_rgb(color)


def _draw_paints(ax, paints: Sequence[RenderedPaint]) -> int:
    drawn = 0
    for paint in paints:
        if len(paint.outline) < 3:
            continue
        ax.add_patch(
            Polygon(
                paint.outline,
                closed=True,
                facecolor=css_color_to_rgb(paint.color),
                edgecolor="none",
            )
        )
        drawn += 1
    return drawn


def create_frame_figure(
    frame: Frame,
    width: int = 640,
    height: int = 480,
    *,
    dpi: int = 100,
) -> Figure:
    """Draw every paint of a frame as a filled polygon.

    The canvas uses screen orientation: (0, 0) at the top-left, y growing
    downward, one unit per pixel.

    Args:
        frame: Frame to draw.
        width: Canvas width in canvas units.
        height: Canvas height in canvas units.
        dpi: Raster resolution; the figure is ``width x height`` pixels.

    Returns:
        Matplotlib Figure. A frame with nothing to draw gets a
        "No paint" message.
    """
    fig = Figure(figsize=(width / dpi, height / dpi), dpi=dpi)
    FigureCanvasAgg(fig)
    ax = fig.add_axes((0, 0, 1, 1))
    ax.set_xlim(0, width)
    ax.set_ylim(height, 0)
    ax.axis("off")

    background = css_color_to_rgb(frame.background) if frame.background else (1, 1, 1)
    fig.patch.set_facecolor(background)
    ax.set_facecolor(background)

    # ---------- empty case ----------
    if _draw_paints(ax, frame.paints) == 0:
        ax.text(
            0.5, 0.5, "No paint", ha="center", va="center", transform=ax.transAxes
        )
    return fig


def figure_to_array(fig: Figure) -> np.ndarray:
    """Rasterize a figure to an ``H x W x 3`` uint8 RGB array."""
    canvas = fig.canvas
    if not isinstance(canvas, FigureCanvasAgg):
        canvas = FigureCanvasAgg(fig)
    canvas.draw()
    return np.asarray(canvas.buffer_rgba())[..., :3].copy()


def create_frame_image(frame: Frame, width: int = 640, height: int = 480) -> np.ndarray:
    """Rasterize a frame straight to an RGB array."""
    return figure_to_array(create_frame_figure(frame, width, height))
