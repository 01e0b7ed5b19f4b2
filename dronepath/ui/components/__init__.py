"""UI 组件模块"""

from .ranking_chart import build_ranking_chart
from .top_algorithms import render_top_algorithms, top_algorithms_html

__all__ = [
    "build_ranking_chart",
    "render_top_algorithms",
    "top_algorithms_html",
]
