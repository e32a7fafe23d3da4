import random

import pytest

from paint_trail.animation import (
    AnimationDriver,
    PaintTimeline,
    PointAnimation,
    PointState,
    ease_in_out,
    ease_out,
    get_easing,
)
from paint_trail.models import Paint, SamplePoint, Vector
from paint_trail.registry import PaintRegistry


def test_point_animation_phases():
    point = SamplePoint(x=0, y=0)
    anim = PointAnimation(
        point, delay=0.1, peak=2.0, grow_duration=0.2, fade_duration=0.2,
        drift=Vector(4, 0),
    )
    assert anim.update(0.05) == PointState.PENDING
    assert point.w == 0

    assert anim.update(0.2) == PointState.GROWING
    assert point.w == pytest.approx(1.0)
    assert point.x == 0

    assert anim.update(0.4) == PointState.FADING
    assert point.w == pytest.approx(1.0)
    assert point.x == pytest.approx(2.0)

    assert anim.update(0.6) == PointState.DONE
    assert point.w == 0
    assert point.x == pytest.approx(4.0)


def test_done_is_final():
    point = SamplePoint(x=1, y=1)
    anim = PointAnimation(point, delay=0, peak=1, grow_duration=0.1, fade_duration=0.1)
    anim.finish()
    assert anim.update(0.05) == PointState.DONE
    assert point.w == 0
    assert anim.end_time == pytest.approx(0.2)


def test_easings():
    for ease in (ease_in_out, ease_out, get_easing("linear")):
        assert ease(0) == pytest.approx(0)
        assert ease(1) == pytest.approx(1)
    assert ease_in_out(0.5) == pytest.approx(0.5)
    assert ease_out(0.5) > 0.5


def test_unknown_easing_raises():
    with pytest.raises(ValueError):
        get_easing("bounce")


def test_timeline_staggers_points(fan_paint, fan_stroke, fast_animation):
    timeline = PaintTimeline.for_stroke(fan_paint, fan_stroke, fast_animation)
    delays = [a.delay for a in timeline.animations]
    assert delays == pytest.approx([i / 10 * 0.2 for i in range(10)])
    # first point grows while the last is still waiting
    timeline.advance(0.1)
    assert timeline.states[0] == PointState.GROWING
    assert timeline.states[-1] == PointState.PENDING
    assert fan_paint.points[0].w > 0
    assert not timeline.finished


def test_timeline_finishes_after_last_point(fan_paint, fan_stroke, fast_animation):
    timeline = PaintTimeline.for_stroke(fan_paint, fan_stroke, fast_animation)
    last_end = max(a.end_time for a in timeline.animations)
    assert not timeline.advance(last_end - 0.01)
    assert timeline.advance(0.02)
    assert all(p.w == 0 for p in fan_paint.points)


def test_driver_reports_finished_once(fan_paint, fan_stroke, fast_animation):
    driver = AnimationDriver()
    driver.schedule(fan_paint, fan_stroke, fast_animation)
    assert fan_paint.id in driver
    assert driver.tick(0.1) == []
    assert driver.tick(1.0) == [fan_paint.id]
    assert driver.tick(1.0) == []
    assert len(driver) == 0


@pytest.mark.parametrize("seed", [0, 1, 2])
def test_all_completions_in_any_order_remove_once(
    fan_paint, fan_stroke, fast_animation, seed
):
    registry = PaintRegistry.create()
    driver = AnimationDriver()
    registry.insert(fan_paint)
    timeline = driver.schedule(fan_paint, fan_stroke, fast_animation)

    order = list(timeline.animations)
    random.Random(seed).shuffle(order)

    removals = 0
    for anim in order[:-1]:
        anim.finish()
        for paint_id in driver.tick(0):
            removals += registry.remove(paint_id)
    # n-1 completions leave the paint in place
    assert fan_paint.id in registry
    assert removals == 0

    order[-1].finish()
    for _ in range(3):
        for paint_id in driver.tick(0):
            removals += registry.remove(paint_id)
    assert removals == 1
    assert fan_paint.id not in registry
    # a late duplicate completion is ignored
    assert registry.remove(fan_paint.id) is False


def test_cancel_and_close(fan_paint, fan_stroke, fast_animation):
    driver = AnimationDriver()
    driver.schedule(fan_paint, fan_stroke, fast_animation)
    assert driver.cancel(fan_paint.id)
    assert not driver.cancel(fan_paint.id)

    other = Paint(points=[SamplePoint(x=0, y=0)], color="red")
    driver.schedule(other, fan_stroke, fast_animation)
    driver.close()
    assert len(driver) == 0
    assert driver.tick(10.0) == []
    with pytest.raises(RuntimeError):
        driver.schedule(other, fan_stroke, fast_animation)
