"""
DronePath 配置模块。

包含算法目录与应用设置等共享配置。
"""

from .catalog import (
    ALGORITHM_CATALOG,
    AlgorithmDescriptor,
    catalog_index,
    get_descriptor_by_name,
    list_algorithm_names,
)
from .settings import Settings, load_settings

__all__ = [
    "ALGORITHM_CATALOG",
    "AlgorithmDescriptor",
    "catalog_index",
    "get_descriptor_by_name",
    "list_algorithm_names",
    "Settings",
    "load_settings",
]
