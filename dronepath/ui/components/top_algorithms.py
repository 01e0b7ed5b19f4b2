"""
Top 3 算法卡片 - 排名、复杂度、置信分数，第一名带 AI 推荐徽章
"""

from __future__ import annotations

from html import escape
from typing import Sequence

import streamlit as st

from dronepath.core.scoring import ScoredAlgorithm


def top_algorithms_html(
    ranking: Sequence[ScoredAlgorithm],
    k: int = 3,
    time_label: str = "Time",
    confidence_label: str = "Confidence Score",
    badge_label: str = "🤖 AI Recommended",
) -> str:
    """生成前 k 名的卡片 HTML（纯函数，便于测试）。"""
    cards = []
    for i, item in enumerate(list(ranking)[: max(0, k)]):
        badge = f'<span class="ai-badge">{escape(badge_label)}</span>' if i == 0 else ""
        cards.append(
            f"""
<div class="top-algo-card">
    <h3>{i + 1}. {escape(item.name)}</h3>
    <p><b>{escape(time_label)}:</b> {escape(item.descriptor.complexity_label)}</p>
    <p class="confidence">{escape(confidence_label)}: {item.score}%</p>
    {badge}
</div>"""
        )
    return "".join(cards)


def render_top_algorithms(ranking: Sequence[ScoredAlgorithm], **labels: str) -> None:
    st.markdown(top_algorithms_html(ranking, **labels), unsafe_allow_html=True)
