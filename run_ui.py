from __future__ import annotations

import uuid

import streamlit as st

from dronepath.config.settings import load_settings
from dronepath.ui import planner
from dronepath.ui.app_router import PAGE_ALGORITHMS, PAGE_DIAGNOSTICS, PAGE_PLANNER, Router
from dronepath.ui.error_boundary import safe_render
from dronepath.ui.i18n import render_lang_toggle, tr
from dronepath.ui.pages import render_algorithms_page, render_diagnostics_page
from dronepath.ui.theme import ThemeStore, render_theme_toggle
from logging_config import get_logger, set_run_id

logger = get_logger(__name__)


def main() -> None:
    if not st.session_state.get("_dp_page_config_set"):
        st.set_page_config(
            page_title="DronePath",
            page_icon="🚁",
            layout="wide",
            initial_sidebar_state="expanded",
        )
        st.session_state["_dp_page_config_set"] = True

    if "run_id" not in st.session_state:
        st.session_state["run_id"] = uuid.uuid4().hex[:8]
        logger.info("new UI session")
    set_run_id(st.session_state["run_id"])

    settings = load_settings()
    reports_dir = settings.resolved_reports_dir()

    router = Router()
    router.register(PAGE_PLANNER, lambda: safe_render(PAGE_PLANNER, lambda: planner.render(settings), reports_dir))
    router.register(PAGE_ALGORITHMS, lambda: safe_render(PAGE_ALGORITHMS, render_algorithms_page, reports_dir))
    router.register(PAGE_DIAGNOSTICS, lambda: safe_render(PAGE_DIAGNOSTICS, render_diagnostics_page, reports_dir))

    with st.sidebar:
        st.title("DronePath")
    render_lang_toggle(default=settings.default_lang)
    render_theme_toggle(
        ThemeStore(settings.resolved_preferences_path(), default=settings.default_theme),
        label=tr("theme_label"),
    )
    router.run()


if __name__ == "__main__":
    main()
