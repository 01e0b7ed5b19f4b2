"""
推荐解释文本选择。

按首选算法名称精确匹配固定文本；表中没有的名称统一返回通用说明。
"""

from __future__ import annotations

from typing import Dict

SELECTION_REASON = "Algorithm selected based on structural analysis of the delivery network."

FALLBACK_EXPLANATION = (
    "This algorithm was selected based on its balance between performance, scalability, "
    "and suitability for the current network characteristics."
)

EXPLANATIONS: Dict[str, str] = {
    "Dijkstra": (
        "Dijkstra was selected because the delivery network is moderately sized and weighted. "
        "It guarantees the optimal shortest path while maintaining acceptable computational efficiency."
    ),
    "A*": (
        "A* was selected because the delivery points are spatially well-distributed, allowing "
        "heuristic guidance to reduce unnecessary exploration and speed up pathfinding."
    ),
    "BFS": (
        "BFS was selected due to the very small size of the delivery network, where a simple "
        "level-based traversal is sufficient and computationally efficient."
    ),
    "Bidirectional Dijkstra": (
        "Bidirectional Dijkstra was selected because the network is large, and searching from "
        "both the source and destination significantly reduces the search space."
    ),
    "Bellman-Ford": (
        "Bellman-Ford was selected due to its robustness and ability to handle complex edge conditions, "
        "despite higher computational cost."
    ),
}


def select_explanation(name: str) -> str:
    """返回首选算法的解释文本；未知名称返回 FALLBACK_EXPLANATION。"""
    return EXPLANATIONS.get(name, FALLBACK_EXPLANATION)


def has_bespoke_explanation(name: str) -> bool:
    return name in EXPLANATIONS
