"""Animated hand-drawn paint trails.

This package generates short-lived paint strokes that trail a moving
pointer across a 2D canvas and renders them as smooth outline path data.
It includes vector math, procedural stroke generation, per-point width
animation and outline smoothing.

The per-frame loop consists of:
1. Recording pointer positions into a rolling history
2. Generating a fan/curl or wave stroke from the oldest and newest position
3. Advancing each paint's point animations and dropping finished paints
4. Outlining every live paint and smoothing the outline into SVG path data

Example:
    Driving a session from a host's frame clock:

    >>> from paint_trail.session import PaintSession
    >>> from paint_trail.models import PaintParameters
    >>>
    >>> session = PaintSession(PaintParameters(seed=1))
    >>> session.move_to(10, 10)
    >>> session.move_to(60, 40)
    >>> session.tick()
    >>> frame = session.frame()
    >>> for path_data, color in frame.pairs():
    ...     draw(path_data, color)
"""
