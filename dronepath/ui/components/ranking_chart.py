"""Altair bar chart of the full algorithm ranking."""

from __future__ import annotations

from typing import Sequence

import altair as alt
import pandas as pd

from dronepath.core.recommend import ranking_to_frame
from dronepath.core.scoring import SCORE_MAX, ScoredAlgorithm


def build_ranking_chart(ranking: Sequence[ScoredAlgorithm], accent: str = "#00f2ff") -> alt.Chart:
    df: pd.DataFrame = ranking_to_frame(ranking)
    df["recommended"] = df["rank"] == 1
    return (
        alt.Chart(df)
        .mark_bar()
        .encode(
            x=alt.X("score:Q", scale=alt.Scale(domain=[0, SCORE_MAX]), title="score"),
            y=alt.Y("algorithm:N", sort=list(df["algorithm"]), title=None),
            color=alt.condition(
                alt.datum.recommended,
                alt.value(accent),
                alt.value("#64748b"),
            ),
            tooltip=["rank", "algorithm", "complexity", "base_score", "score", "adjustments"],
        )
        .properties(height=28 * len(df))
    )
