"""
算法目录配置模块。

定义固定的 12 个教科书图算法条目，供评分器排序与 UI 展示使用。
条目顺序即目录顺序：同分时排序结果保持该顺序。

注意：这里的算法只是"标签"，本项目并不执行其中任何一个。
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple


@dataclass(frozen=True)
class AlgorithmDescriptor:
    """单个算法条目。

    Attributes:
        name: 算法名称（同时用作解释文本的查找键）
        complexity_label: 名义时间复杂度字符串（仅用于展示）
        base_score: 基础适配分数（0..100 的整数）
    """

    name: str
    complexity_label: str
    base_score: int

    def __str__(self) -> str:
        return f"{self.name} ({self.complexity_label})"


# ============================================================================
# 标准算法目录
# ============================================================================

ALGORITHM_CATALOG: Tuple[AlgorithmDescriptor, ...] = (
    AlgorithmDescriptor(name="Dijkstra", complexity_label="O(E log V)", base_score=90),
    AlgorithmDescriptor(name="A*", complexity_label="O(E log V)", base_score=88),
    AlgorithmDescriptor(name="BFS", complexity_label="O(V+E)", base_score=82),
    AlgorithmDescriptor(name="DFS", complexity_label="O(V+E)", base_score=65),
    AlgorithmDescriptor(name="Bellman-Ford", complexity_label="O(VE)", base_score=70),
    AlgorithmDescriptor(name="Floyd-Warshall", complexity_label="O(V³)", base_score=60),
    AlgorithmDescriptor(name="Prim", complexity_label="O(E log V)", base_score=78),
    AlgorithmDescriptor(name="Kruskal", complexity_label="O(E log E)", base_score=76),
    AlgorithmDescriptor(name="Bidirectional Dijkstra", complexity_label="O(E log V)", base_score=85),
    AlgorithmDescriptor(name="Johnson", complexity_label="O(V² log V)", base_score=72),
    AlgorithmDescriptor(name="Ant Colony Optimization", complexity_label="Iterative", base_score=68),
    AlgorithmDescriptor(name="Naive Greedy", complexity_label="O(V²)", base_score=55),
)


# ============================================================================
# 工具函数
# ============================================================================

def get_descriptor_by_name(name: str) -> Optional[AlgorithmDescriptor]:
    """
    按名称获取算法条目。

    Args:
        name: 算法名称（大小写敏感）

    Returns:
        AlgorithmDescriptor 对象，若不存在则返回 None
    """
    for descriptor in ALGORITHM_CATALOG:
        if descriptor.name == name:
            return descriptor
    return None


def list_algorithm_names() -> List[str]:
    """
    列出目录中所有算法名称（目录顺序）。

    Returns:
        算法名称列表
    """
    return [d.name for d in ALGORITHM_CATALOG]


def catalog_index() -> Dict[str, int]:
    """返回 {算法名称: 目录位置} 映射。"""
    return {d.name: idx for idx, d in enumerate(ALGORITHM_CATALOG)}
