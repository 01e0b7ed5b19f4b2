"""Suitability scoring over the fixed algorithm catalog.

This is an illustrative, demo-grade heuristic. It looks only at point
count, spread and density and never runs any of the algorithms it ranks,
so the same ranking comes out regardless of real routing constraints.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, FrozenSet, List, Sequence, Tuple

from dronepath.config.catalog import ALGORITHM_CATALOG, AlgorithmDescriptor

from .statistics import GraphStatistics

SCORE_MIN = 0
SCORE_MAX = 100


@dataclass(frozen=True)
class ScoreRule:
    """One additive adjustment applied to the named catalog entries."""

    key: str
    description: str
    applies_to: FrozenSet[str]
    condition: Callable[[GraphStatistics], bool]
    delta: int

    def matches(self, descriptor: AlgorithmDescriptor, stats: GraphStatistics) -> bool:
        return descriptor.name in self.applies_to and self.condition(stats)


@dataclass(frozen=True)
class ScoredAlgorithm:
    descriptor: AlgorithmDescriptor
    score: int
    # keys of the rules that fired, in rule order
    adjustments: Tuple[str, ...] = ()

    @property
    def name(self) -> str:
        return self.descriptor.name


SCORE_RULES: Tuple[ScoreRule, ...] = (
    ScoreRule(
        key="small_graph",
        description="count <= 3",
        applies_to=frozenset({"BFS", "DFS"}),
        condition=lambda s: s.count <= 3,
        delta=20,
    ),
    ScoreRule(
        key="medium_weighted",
        description="4 <= count <= 7",
        applies_to=frozenset({"Dijkstra"}),
        condition=lambda s: 4 <= s.count <= 7,
        delta=25,
    ),
    # straight / sparse layouts give a heuristic an advantage
    ScoreRule(
        key="sparse_spread",
        description="spread > 0.3 and density < 10",
        applies_to=frozenset({"A*"}),
        condition=lambda s: s.spread > 0.3 and s.density < 10,
        delta=25,
    ),
    ScoreRule(
        key="large_graph",
        description="count > 7",
        applies_to=frozenset({"Bidirectional Dijkstra"}),
        condition=lambda s: s.count > 7,
        delta=20,
    ),
    ScoreRule(
        key="heavy_on_small",
        description="count < 5",
        applies_to=frozenset({"Floyd-Warshall"}),
        condition=lambda s: s.count < 5,
        delta=-30,
    ),
)


def clamp_score(score: int) -> int:
    return max(SCORE_MIN, min(SCORE_MAX, score))


def score_algorithm(
    descriptor: AlgorithmDescriptor,
    stats: GraphStatistics,
    rules: Sequence[ScoreRule] = SCORE_RULES,
) -> ScoredAlgorithm:
    """Sum every matching rule onto the base score, then clamp once."""
    score = descriptor.base_score
    fired: List[str] = []
    for rule in rules:
        if rule.matches(descriptor, stats):
            score += rule.delta
            fired.append(rule.key)
    return ScoredAlgorithm(descriptor=descriptor, score=clamp_score(score), adjustments=tuple(fired))


def rank_algorithms(
    stats: GraphStatistics,
    catalog: Sequence[AlgorithmDescriptor] = ALGORITHM_CATALOG,
    rules: Sequence[ScoreRule] = SCORE_RULES,
) -> Tuple[ScoredAlgorithm, ...]:
    """
    Score every catalog entry and rank them best first.

    ``sorted`` is stable (also with ``reverse=True``), so entries with equal
    scores keep their catalog order. No minimum point count is enforced
    here; callers that need one check it before scoring.
    """
    scored = [score_algorithm(d, stats, rules) for d in catalog]
    return tuple(sorted(scored, key=lambda s: s.score, reverse=True))
