from __future__ import annotations

import pytest

from dronepath.core.animation import AnimationState, PollingScheduler
from dronepath.core.errors import InsufficientPointsError
from dronepath.core.geo import Coordinate
from dronepath.core.session import RouteSession


@pytest.fixture
def session(fake_clock):
    return RouteSession(scheduler=PollingScheduler(clock=fake_clock), step_s=0.9)


def test_new_session_is_empty(session):
    assert len(session.points) == 0
    assert session.last_recommendation is None
    assert session.top_algorithms() == ()
    assert session.animation.state == AnimationState.IDLE


def test_add_point_keeps_insertion_order(session):
    session.add_point(1, 2)
    session.add_point(3, 4)
    assert list(session.points) == [Coordinate(1.0, 2.0), Coordinate(3.0, 4.0)]
    assert len(session.path_segments()) == 1


def test_compute_with_one_point_leaves_state_untouched(session):
    session.add_point(20.6, 78.9)
    with pytest.raises(InsufficientPointsError):
        session.compute()
    assert session.last_recommendation is None
    assert session.animation.state == AnimationState.IDLE


def test_compute_stores_result_and_starts_animation(session, london_paris):
    for lat, lng in london_paris:
        session.add_point(lat, lng)
    rec = session.compute()

    assert session.last_recommendation is rec
    assert len(session.top_algorithms()) == 3
    assert session.top_algorithms()[0] == rec.best
    assert session.animation.state == AnimationState.ANIMATING
    assert session.animation.position == Coordinate(*london_paris[0])


def test_points_added_after_compute_do_not_change_stored_ranking(session, london_paris):
    for lat, lng in london_paris:
        session.add_point(lat, lng)
    rec = session.compute()
    session.add_point(40.4, -3.7)
    assert session.last_recommendation.statistics.count == 2
    assert len(rec.points) == 2


def test_reset_clears_everything(session, fake_clock, london_paris):
    for lat, lng in london_paris:
        session.add_point(lat, lng)
    session.compute()
    session.reset()

    assert len(session.points) == 0
    assert session.last_recommendation is None
    assert session.animation.state == AnimationState.IDLE
    fake_clock.advance(10)
    assert session.animation.scheduler.run_pending() == 0


def test_default_session_builds_its_own_scheduler():
    s = RouteSession()
    assert isinstance(s.animation.scheduler, PollingScheduler)
    assert s.animation.step_s == pytest.approx(0.9)
