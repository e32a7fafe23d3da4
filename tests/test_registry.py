import pytest

from paint_trail.models import Paint
from paint_trail.registry import PaintRegistry


def make_paints(n):
    return [Paint(color=f"c{i}") for i in range(n)]


def test_insert_keeps_draw_order():
    registry = PaintRegistry.create()
    paints = make_paints(3)
    for paint in paints:
        registry.insert(paint)
    assert [p.id for p in registry.snapshot()] == [p.id for p in paints]
    assert len(registry) == 3
    assert registry.get(paints[1].id) is paints[1]


def test_duplicate_id_raises():
    registry = PaintRegistry()
    paint = Paint(color="red")
    registry.insert(paint)
    with pytest.raises(ValueError):
        registry.insert(paint)


def test_remove_is_idempotent():
    registry = PaintRegistry()
    paint = Paint(color="red")
    registry.insert(paint)
    assert registry.remove(paint.id) is True
    assert registry.remove(paint.id) is False
    assert registry.remove("never-registered") is False
    assert paint.id not in registry


def test_removal_during_snapshot_iteration():
    registry = PaintRegistry()
    paints = make_paints(4)
    for paint in paints:
        registry.insert(paint)
    seen = []
    for paint in registry.snapshot():
        seen.append(paint.id)
        registry.remove(paint.id)
    assert seen == [p.id for p in paints]
    assert len(registry) == 0


def test_clear():
    registry = PaintRegistry()
    for paint in make_paints(2):
        registry.insert(paint)
    registry.clear()
    assert registry.snapshot() == []
