# -*- coding: utf-8 -*-
"""
规划页：点击地图添加配送点 -> 计算路线 -> 推荐算法 + 无人机动画。

会话对象 RouteSession 存放在 st.session_state 中；动画由定时重跑的
fragment 轮询 PollingScheduler 推进。
"""

from __future__ import annotations

import logging

import streamlit as st

from dronepath.config.settings import Settings, load_settings
from dronepath.core.animation import AnimationState
from dronepath.core.errors import InsufficientPointsError
from dronepath.core.recommend import Recommendation
from dronepath.core.session import RouteSession
from dronepath.ui.components import build_ranking_chart, render_top_algorithms
from dronepath.ui.i18n import tr
from dronepath.ui.map_view import build_route_map, render_route_map

logger = logging.getLogger(__name__)

_SESSION_KEY = "route_session"


def get_route_session(settings: Settings) -> RouteSession:
    """在 session_state 中获取（必要时初始化）RouteSession。"""
    if _SESSION_KEY not in st.session_state:
        st.session_state[_SESSION_KEY] = RouteSession(step_s=settings.animation_step_s)
    return st.session_state[_SESSION_KEY]


def _render_map(session: RouteSession, settings: Settings) -> None:
    was_animating = session.animation.state == AnimationState.ANIMATING
    session.animation.scheduler.run_pending()

    rec = session.last_recommendation
    drone = session.animation.position
    m = build_route_map(
        session.points.snapshot(),
        settings,
        route=rec.points if rec is not None else (),
        drone_position=(drone.lat, drone.lng) if drone is not None else None,
    )
    click = render_route_map(m)
    if click is not None:
        session.add_point(click.lat, click.lng)
        st.rerun()

    # 动画结束后整页重跑一次，停止 fragment 轮询
    if was_animating and session.animation.state != AnimationState.ANIMATING:
        st.rerun()


def _render_results(rec: Recommendation) -> None:
    best = rec.best
    c1, c2, c3, c4, c5 = st.columns(5)
    c1.metric(tr("metric_best"), best.name)
    c2.metric(tr("metric_distance"), rec.distance_label)
    c3.metric(tr("metric_points"), rec.statistics.count)
    c4.metric(tr("metric_iterations"), rec.iterations)
    c5.metric(tr("metric_complexity"), best.descriptor.complexity_label)

    st.subheader(tr("top_algorithms"))
    render_top_algorithms(
        rec.ranking,
        time_label=tr("time_label"),
        confidence_label=tr("confidence"),
        badge_label=tr("ai_badge"),
    )

    st.subheader(tr("explanation"))
    st.caption(rec.selection_reason)
    st.write(rec.top_explanation)

    with st.expander(tr("ranking_chart"), expanded=False):
        st.altair_chart(build_ranking_chart(rec.ranking), use_container_width=True)
    st.caption(tr("heuristic_note"))


def render(settings: Settings | None = None) -> None:
    settings = settings or load_settings()
    session = get_route_session(settings)

    st.title(tr("app_title"))
    st.caption(tr("map_hint"))

    col_compute, col_reset, col_count = st.columns([1, 1, 2])
    if col_compute.button(tr("btn_compute"), type="primary", use_container_width=True):
        try:
            session.compute()
        except InsufficientPointsError as e:
            logger.info(f"[PLANNER] compute refused: {e}")
            st.warning(tr("need_two_points"))
    if col_reset.button(tr("btn_reset"), use_container_width=True):
        session.reset()
    col_count.caption(f"{tr('metric_points')}: {len(session.points)}")

    run_every = settings.animation_step_s if session.animation.state == AnimationState.ANIMATING else None
    st.fragment(run_every=run_every)(_render_map)(session, settings)

    if session.last_recommendation is not None:
        _render_results(session.last_recommendation)
