"""
DronePath core module.

包含点集、几何统计、算法评分、解释文本、会话与无人机动画等核心功能。
"""

__all__ = ["geo", "points", "statistics", "scoring", "explain", "recommend", "session", "animation"]
