from __future__ import annotations

from typing import Dict

import streamlit as st


SUPPORTED_LANGS = ("zh", "en")
DEFAULT_LANG = "en"


_STRINGS_ZH: Dict[str, str] = {
    "app_title": "DronePath 无人机配送路线演示",
    "nav_label": "页面导航",
    "nav_planner": "规划 / Planner",
    "nav_algorithms": "算法 / Algorithms",
    "nav_diagnostics": "诊断 / Diagnostics",
    "lang_label": "Language / 语言",
    "theme_label": "主题",
    "map_hint": "在地图上点击添加配送点，至少 2 个点后计算路线。",
    "btn_compute": "🚀 计算路线",
    "btn_reset": "🧹 重置",
    "need_two_points": "请至少添加 2 个点",
    "metric_best": "推荐算法",
    "metric_distance": "总距离",
    "metric_points": "点数",
    "metric_iterations": "迭代次数",
    "metric_complexity": "时间复杂度",
    "top_algorithms": "Top 3 算法",
    "time_label": "时间",
    "confidence": "置信分数",
    "ai_badge": "🤖 AI 推荐",
    "explanation": "推荐说明",
    "ranking_chart": "全部算法评分",
    "heuristic_note": "评分为演示用启发式规则，并未实际运行任何算法。",
    "catalog_title": "算法目录",
    "rules_title": "评分规则",
    "diagnostics_title": "运行日志",
    "no_logs": "暂无日志。",
    "page_error": "页面渲染出现异常：已自动记录到 {path}。",
    "page_error_detail": "查看简要错误信息",
}


_STRINGS_EN: Dict[str, str] = {
    "app_title": "DronePath Delivery Route Demo",
    "nav_label": "Navigation",
    "nav_planner": "Planner",
    "nav_algorithms": "Algorithms",
    "nav_diagnostics": "Diagnostics",
    "lang_label": "Language",
    "theme_label": "Theme",
    "map_hint": "Click the map to add delivery points, then compute the route (2 points minimum).",
    "btn_compute": "🚀 Compute route",
    "btn_reset": "🧹 Reset",
    "need_two_points": "Add at least 2 points",
    "metric_best": "Best algorithm",
    "metric_distance": "Distance",
    "metric_points": "Points",
    "metric_iterations": "Iterations",
    "metric_complexity": "Complexity",
    "top_algorithms": "Top 3 algorithms",
    "time_label": "Time",
    "confidence": "Confidence Score",
    "ai_badge": "🤖 AI Recommended",
    "explanation": "Explanation",
    "ranking_chart": "All algorithm scores",
    "heuristic_note": "Scores come from an illustrative heuristic; no algorithm is actually executed.",
    "catalog_title": "Algorithm catalog",
    "rules_title": "Scoring rules",
    "diagnostics_title": "Recent log output",
    "no_logs": "No log output yet.",
    "page_error": "The page raised an exception; details were written to {path}.",
    "page_error_detail": "Show error summary",
}


def tr(key: str, lang: str | None = None) -> str:
    """最小多语言字典查询。"""
    if lang is None:
        lang = st.session_state.get("lang", DEFAULT_LANG)
    if lang not in SUPPORTED_LANGS:
        lang = DEFAULT_LANG

    table = _STRINGS_ZH if lang == "zh" else _STRINGS_EN
    return table.get(key, key)


def render_lang_toggle(default: str = DEFAULT_LANG) -> str:
    """侧边栏语言切换，支持 ?lang= query param 同步。"""
    qp_lang = None
    try:
        qp_lang = st.query_params.get("lang")
    except Exception:
        qp_lang = None

    current = st.session_state.get("lang", default)
    if qp_lang in SUPPORTED_LANGS:
        current = qp_lang
    if current not in SUPPORTED_LANGS:
        current = DEFAULT_LANG

    choice = st.sidebar.radio(
        tr("lang_label", lang=current),
        options=list(SUPPORTED_LANGS),
        index=SUPPORTED_LANGS.index(current),
        format_func=lambda code: "中文" if code == "zh" else "English",
        horizontal=True,
        key="__lang_radio__",
    )
    st.session_state["lang"] = choice
    if choice != qp_lang:
        try:
            st.query_params["lang"] = choice
        except Exception:
            pass
    return choice
