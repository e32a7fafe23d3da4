"""Gap filling for sparsely populated offset lists.

Random jitter is only drawn for a few samples of a stroke; the samples in
between are filled by linear interpolation between their nearest populated
neighbours. A side with no populated neighbour counts as a zero offset.
"""

from collections.abc import Sequence
from typing import TypeVar

from paint_trail.models import Vector

Item = TypeVar("Item")

ZERO = Vector(0.0, 0.0)


def find_before(items: Sequence[Item | None], index: int) -> tuple[int, Item] | None:
    """Find the nearest populated slot strictly before ``index``.

    Args:
        items: Sequence where empty slots are None.
        index: Position to search back from.

    Returns:
        ``(position, item)`` of the match, or None if there is none.
    """
    for position in range(min(index, len(items)) - 1, -1, -1):
        item = items[position]
        if item is not None:
            return position, item
    return None


def find_after(items: Sequence[Item | None], index: int) -> tuple[int, Item] | None:
    """Find the nearest populated slot strictly after ``index``.

    Args:
        items: Sequence where empty slots are None.
        index: Position to search forward from.

    Returns:
        ``(position, item)`` of the match, or None if there is none.
    """
    for position in range(max(index + 1, 0), len(items)):
        item = items[position]
        if item is not None:
            return position, item
    return None


def fill_sparse(items: Sequence[Vector | None]) -> list[Vector]:
    """Fill every empty slot by interpolating its populated neighbours.

    For an empty slot at ``i`` with neighbours at ``b`` and ``a``, the value
    is ``before.mix(after, (i - b) / (a - b))``. A missing neighbour on
    either side is treated as a zero offset at the sequence boundary
    (index -1 before the start, ``len(items)`` after the end).

    Args:
        items: Offsets, None where no value was drawn.

    Returns:
        A list of the same length with no empty slots. Populated slots are
        returned unchanged.
    """
    filled = []
    for index, item in enumerate(items):
        if item is not None:
            filled.append(item)
            continue
        before = find_before(items, index) or (-1, ZERO)
        after = find_after(items, index) or (len(items), ZERO)
        ratio = (index - before[0]) / (after[0] - before[0])
        filled.append(before[1].mix(after[1], ratio))
    return filled
