"""
utils - 工具函数模块

包含:
- geometry: 数组规范化与几何计算工具
"""

from .geometry import as_points, as_times, reflect_point, is_strictly_increasing

__all__ = [
    "as_points",
    "as_times",
    "reflect_point",
    "is_strictly_increasing",
]
