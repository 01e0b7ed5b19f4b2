from __future__ import annotations

import pytest

from dronepath.core.animation import AnimationState, MarkerAnimation, PollingScheduler
from dronepath.core.geo import Coordinate

PATH = [(0.0, 0.0), (1.0, 1.0), (2.0, 2.0)]


def _make(fake_clock, step_s=0.9):
    scheduler = PollingScheduler(clock=fake_clock)
    return scheduler, MarkerAnimation(scheduler, step_s=step_s)


def test_new_animation_is_idle(fake_clock):
    _, anim = _make(fake_clock)
    assert anim.state == AnimationState.IDLE
    assert anim.position is None


def test_marker_walks_the_path_then_finishes(fake_clock):
    scheduler, anim = _make(fake_clock)
    anim.start(PATH)
    assert anim.state == AnimationState.ANIMATING
    assert anim.index == 0
    assert anim.position == Coordinate(0.0, 0.0)

    # not due yet
    fake_clock.advance(0.5)
    assert scheduler.run_pending() == 0
    assert anim.index == 0

    fake_clock.advance(0.5)
    scheduler.run_pending()
    assert anim.position == Coordinate(1.0, 1.0)

    fake_clock.advance(0.9)
    scheduler.run_pending()
    assert anim.position == Coordinate(2.0, 2.0)
    assert anim.state == AnimationState.ANIMATING

    fake_clock.advance(0.9)
    scheduler.run_pending()
    assert anim.state == AnimationState.DONE
    # marker stays on the last point
    assert anim.position == Coordinate(2.0, 2.0)
    assert scheduler.pending() == 0


def test_late_poll_catches_up_all_due_steps(fake_clock):
    scheduler, anim = _make(fake_clock, step_s=1.0)
    anim.start(PATH)
    fake_clock.advance(10.0)
    assert scheduler.run_pending() == 3
    assert anim.state == AnimationState.DONE


def test_restart_cancels_previous_animation(fake_clock):
    scheduler, anim = _make(fake_clock)
    anim.start(PATH)
    fake_clock.advance(0.9)
    scheduler.run_pending()
    assert anim.index == 1

    anim.start([(5.0, 5.0), (6.0, 6.0)])
    assert anim.index == 0
    assert anim.position == Coordinate(5.0, 5.0)
    assert scheduler.pending() == 1

    fake_clock.advance(0.9)
    scheduler.run_pending()
    assert anim.position == Coordinate(6.0, 6.0)


def test_stale_step_from_replaced_animation_is_ignored(fake_clock):
    _, anim = _make(fake_clock)
    anim.start(PATH)
    anim.start([(9.0, 9.0), (8.0, 8.0)])
    # simulate a callback that slipped past cancellation
    anim._step(generation=1)
    assert anim.index == 0


def test_cancel_returns_to_idle(fake_clock):
    scheduler, anim = _make(fake_clock)
    anim.start(PATH)
    anim.cancel()
    assert anim.state == AnimationState.IDLE
    assert anim.position is None
    fake_clock.advance(5)
    assert scheduler.run_pending() == 0


def test_empty_path_is_done_immediately(fake_clock):
    scheduler, anim = _make(fake_clock)
    anim.start([])
    assert anim.state == AnimationState.DONE
    assert anim.position is None
    assert scheduler.pending() == 0


def test_step_must_be_positive(fake_clock):
    with pytest.raises(ValueError):
        MarkerAnimation(PollingScheduler(clock=fake_clock), step_s=0)
