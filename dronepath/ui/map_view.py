"""
地图视图 - folium 底图 + 点击采集 + 路径折线 + 无人机标记

build_route_map 为纯构建函数（不依赖 Streamlit），便于单测；
render_route_map 负责 st_folium 渲染并返回新点击的坐标。
"""

from __future__ import annotations

from typing import Optional, Sequence, Tuple

import folium
import streamlit as st
from streamlit_folium import st_folium

from dronepath.config.settings import Settings
from dronepath.core.geo import Coordinate, format_distance_km, haversine_km, path_segments

DRONE_ICON_HTML = """
<div style="width:56px;height:56px;border-radius:50%;
            background:radial-gradient(circle, rgba(0,242,255,0.55) 0%, rgba(0,242,255,0) 70%);
            display:flex;align-items:center;justify-content:center;font-size:30px;">🚁</div>
"""

_LAST_CLICK_KEY = "__last_map_click__"


def build_route_map(
    points: Sequence[Tuple[float, float]],
    settings: Settings,
    route: Sequence[Tuple[float, float]] = (),
    drone_position: Optional[Tuple[float, float]] = None,
) -> folium.Map:
    """
    构建地图。

    Args:
        points: 已点击的点（每个点一个标记）
        settings: 地图中心、缩放、底图、折线样式
        route: 已计算路线的点（按相邻点对画折线），未计算时为空
        drone_position: 无人机当前位置，None 表示不显示
    """
    m = folium.Map(
        location=[settings.map_center_lat, settings.map_center_lon],
        zoom_start=settings.map_zoom,
        tiles=settings.tile_layer,
    )

    for idx, (lat, lng) in enumerate(points, start=1):
        folium.Marker(
            location=[lat, lng],
            tooltip=f"#{idx} ({lat:.4f}, {lng:.4f})",
        ).add_to(m)

    for a, b in path_segments(route):
        folium.PolyLine(
            [[a.lat, a.lng], [b.lat, b.lng]],
            color=settings.path_color,
            weight=settings.path_weight,
            tooltip=format_distance_km(haversine_km(a.lat, a.lng, b.lat, b.lng)),
        ).add_to(m)

    if drone_position is not None:
        folium.Marker(
            location=[drone_position[0], drone_position[1]],
            icon=folium.DivIcon(html=DRONE_ICON_HTML, icon_size=(56, 56), icon_anchor=(28, 28)),
        ).add_to(m)

    return m


def extract_click(map_state: Optional[dict]) -> Optional[Coordinate]:
    """从 st_folium 的返回值中取出 last_clicked。"""
    if not map_state:
        return None
    clicked = map_state.get("last_clicked")
    if not clicked or clicked.get("lat") is None or clicked.get("lng") is None:
        return None
    return Coordinate(float(clicked["lat"]), float(clicked["lng"]))


def render_route_map(m: folium.Map, key: str = "route_map", height: int = 520) -> Optional[Coordinate]:
    """
    渲染地图并返回"新的"点击坐标。

    st_folium 每次重跑都会返回最近一次点击，这里与上次处理过的点击比较去重。
    """
    map_state = st_folium(m, key=key, height=height, use_container_width=True, returned_objects=["last_clicked"])
    click = extract_click(map_state)
    if click is None or st.session_state.get(_LAST_CLICK_KEY) == click:
        return None
    st.session_state[_LAST_CLICK_KEY] = click
    return click
