"""算法目录页与诊断页。"""

from __future__ import annotations

import pandas as pd
import streamlit as st

from dronepath.config.catalog import ALGORITHM_CATALOG
from dronepath.core.scoring import SCORE_RULES
from dronepath.ui.i18n import tr
from logging_config import get_recent_output


def catalog_frame() -> pd.DataFrame:
    return pd.DataFrame(
        [
            {"algorithm": d.name, "complexity": d.complexity_label, "base_score": d.base_score}
            for d in ALGORITHM_CATALOG
        ]
    )


def rules_frame() -> pd.DataFrame:
    return pd.DataFrame(
        [
            {
                "rule": r.key,
                "condition": r.description,
                "applies_to": ", ".join(sorted(r.applies_to)),
                "delta": r.delta,
            }
            for r in SCORE_RULES
        ]
    )


def render_algorithms_page() -> None:
    st.header(tr("catalog_title"))
    st.dataframe(catalog_frame(), use_container_width=True, hide_index=True)
    st.header(tr("rules_title"))
    st.dataframe(rules_frame(), use_container_width=True, hide_index=True)
    st.caption(tr("heuristic_note"))


def render_diagnostics_page(limit: int = 200) -> None:
    st.header(tr("diagnostics_title"))
    lines = get_recent_output(limit)
    if lines:
        st.code("\n".join(lines))
    else:
        st.info(tr("no_logs"))
