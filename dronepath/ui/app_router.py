"""
应用路由器 - 统一管理页面导航
确保只有一个导航入口（侧边栏），URL ?page= 与 session_state 双向同步
"""

from __future__ import annotations

from typing import Callable, Dict

import streamlit as st

from .i18n import tr


# 页面键常量（也是 URL 参数值）
PAGE_PLANNER = "planner"
PAGE_ALGORITHMS = "algorithms"
PAGE_DIAGNOSTICS = "diagnostics"

# 所有页面列表（顺序即侧边栏顺序）
ALL_PAGES = [PAGE_PLANNER, PAGE_ALGORITHMS, PAGE_DIAGNOSTICS]

PAGE_LABEL_KEYS: Dict[str, str] = {
    PAGE_PLANNER: "nav_planner",
    PAGE_ALGORITHMS: "nav_algorithms",
    PAGE_DIAGNOSTICS: "nav_diagnostics",
}

# 页面渲染函数类型
PageRenderer = Callable[[], None]


def get_current_page() -> str:
    """query params 优先，其次 session_state，默认规划页。"""
    try:
        page_param = st.query_params.get("page")
    except Exception:
        page_param = None
    if page_param in ALL_PAGES:
        return page_param

    page = st.session_state.get("current_page")
    if page in ALL_PAGES:
        return page

    return PAGE_PLANNER


def set_current_page(page: str) -> None:
    if page not in ALL_PAGES:
        st.error(f"无效的页面: {page}")
        return

    st.session_state["current_page"] = page
    try:
        st.query_params["page"] = page
    except Exception:
        pass


def render_navigation() -> str:
    """渲染侧边栏导航，返回当前选中的页面键。"""
    current_page = get_current_page()

    selected_page = st.sidebar.radio(
        tr("nav_label"),
        options=ALL_PAGES,
        index=ALL_PAGES.index(current_page),
        format_func=lambda key: tr(PAGE_LABEL_KEYS[key]),
        key="page_navigation",
    )

    if selected_page != current_page:
        set_current_page(selected_page)

    return selected_page


class Router:
    """
    路由器类 - 管理页面注册和渲染
    """

    def __init__(self):
        self._pages: Dict[str, PageRenderer] = {}

    def register(self, page_name: str, renderer: PageRenderer) -> None:
        if page_name not in ALL_PAGES:
            raise ValueError(f"无效的页面名称: {page_name}")

        self._pages[page_name] = renderer

    def registered(self) -> list[str]:
        return [p for p in ALL_PAGES if p in self._pages]

    def render(self, page_name: str) -> None:
        if page_name not in self._pages:
            st.error(f"页面未注册: {page_name}")
            st.info(f"已注册的页面: {self.registered()}")
            return

        self._pages[page_name]()

    def run(self) -> str:
        """渲染导航和当前页面，返回当前页面键。"""
        current_page = render_navigation()
        self.render(current_page)
        return current_page
