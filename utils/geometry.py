"""
geometry - 几何计算工具函数

提供控制点/时间数组的规范化、点反射、单调性检查等基础操作。
"""

import numpy as np

from ..errors import DimensionError


def as_points(points, dim: int = 3) -> np.ndarray:
    """
    将控制点转换为只读的 (N, dim) float64 数组副本。

    Args:
        points: 控制点序列，每个元素为 dim 维向量
        dim: 点的维数，默认 3

    Returns:
        (N, dim) 数组，不与输入共享内存
    """
    arr = np.array(points, dtype=float)
    if arr.ndim != 2 or arr.shape[1] != dim:
        raise DimensionError(f"points must have shape (N, {dim}), got {arr.shape}")
    arr.setflags(write=False)
    return arr


def as_times(times) -> np.ndarray:
    """将时间序列转换为只读的 (N,) float64 数组副本。"""
    arr = np.array(times, dtype=float)
    if arr.ndim != 1:
        raise DimensionError(f"times must be one-dimensional, got shape {arr.shape}")
    arr.setflags(write=False)
    return arr


def reflect_point(point: np.ndarray, about: np.ndarray) -> np.ndarray:
    """
    关于 about 对 point 做点反射: about + (about - point)。

    用于在曲线两端合成虚拟控制点。

    Args:
        point: (3,) 被反射的点
        about: (3,) 反射中心

    Returns:
        (3,) 新的点
    """
    return about + (about - point)


def is_strictly_increasing(values: np.ndarray) -> bool:
    """检查一维数组是否有限且严格递增。"""
    values = np.asarray(values)
    if not np.all(np.isfinite(values)):
        return False
    return bool(np.all(np.diff(values) > 0))


if __name__ == "__main__":
    print("=== 几何工具测试 ===")

    p0 = np.array([0.0, 0.0, 0.0])
    p1 = np.array([1.0, 2.0, 0.0])
    print(f"反射点: {reflect_point(p1, p0)}")
    print(f"严格递增: {is_strictly_increasing(np.array([0.0, 0.5, 2.0]))}")
