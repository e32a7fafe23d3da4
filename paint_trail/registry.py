"""Registry of the paints currently on screen.

The registry is an ordinary object owned by whoever runs the render loop.
Insertion order is draw order: later paints are drawn on top.
"""

import logging

from paint_trail.models import Paint

logger = logging.getLogger(__name__)


class PaintRegistry:
    """Insertion-ordered mapping of paint id to paint.

    Rendering iterates ``snapshot()``, a copy, so removing paints while a
    frame is being drawn never disturbs the iteration.
    """

    def __init__(self):
        self._paints: dict[str, Paint] = {}

    @classmethod
    def create(cls) -> "PaintRegistry":
        return cls()

    def __len__(self) -> int:
        return len(self._paints)

    def __contains__(self, paint_id: str) -> bool:
        return paint_id in self._paints

    def get(self, paint_id: str) -> Paint | None:
        return self._paints.get(paint_id)

    def insert(self, paint: Paint) -> str:
        """Add a paint on top of the others.

        Raises:
            ValueError: If a paint with the same id is already registered.
        """
        if paint.id in self._paints:
            raise ValueError(f"Paint '{paint.id}' is already registered")
        self._paints[paint.id] = paint
        return paint.id

    def remove(self, paint_id: str) -> bool:
        """Remove a paint by id.

        Returns:
            True if the paint was removed, False if it was not registered.
            Removing twice is a no-op.
        """
        paint = self._paints.pop(paint_id, None)
        if paint is None:
            logger.debug(f"Ignoring removal of unknown paint {paint_id}")
            return False
        return True

    def snapshot(self) -> list[Paint]:
        """Copy of the live paints, back to front."""
        return list(self._paints.values())

    def clear(self) -> None:
        self._paints.clear()
