"""
spline - 样条公共接口

实现:
1. 时间区间查找 find_time_interval (带提示索引，顺序查询摊还 O(1))
2. Spline 基类: 参数校验、区间提示缓存、批量评估

所有曲线类型 (BSplineCurve, CatmullRomSpline, LinearSpline) 共享
"用 times/points 构造，在 time 处 evaluate" 这一接口，可以互换使用。
"""

import logging
from abc import ABC, abstractmethod

import numpy as np

from ..errors import (
    InvalidLengthError,
    KnotError,
    LengthMismatchError,
    MissingArgumentError,
    TimeOutOfRangeError,
)
from ..utils.geometry import as_points, as_times, is_strictly_increasing

logger = logging.getLogger(__name__)


def find_time_interval(time: float, hint: int, times: np.ndarray) -> int:
    """
    查找索引 i，使得 times[i] <= time <= times[i + 1]。

    先检查提示索引及其相邻区间，命中失败时再二分查找。
    返回满足 times[i] <= time 且 i <= len(times) - 2 的最大 i。

    Args:
        time: 查询时间，须在 [times[0], times[-1]] 内
        hint: 上一次查询得到的区间索引，仅用于加速
        times: (N,) 严格递增的时间序列, N >= 2

    Returns:
        区间起点索引 i
    """
    n = len(times)
    start, end = times[0], times[n - 1]
    # NaN 也会落入此分支
    if not (start <= time <= end):
        raise TimeOutOfRangeError(time, float(start), float(end))

    last = n - 2
    hint = min(max(int(hint), 0), last)

    if time >= times[hint]:
        if time < times[hint + 1]:
            return hint
        # 时间向前推进到下一区间
        if hint + 2 < n and time < times[hint + 2]:
            return hint + 1
    elif hint >= 1 and time >= times[hint - 1]:
        return hint - 1

    i = int(np.searchsorted(times, time, side="right")) - 1
    return min(i, last)


class Spline(ABC):
    """
    时间参数化曲线的基类。

    Attributes:
        times: (N,) 只读时间序列
        points: (N, 3) 只读控制点
    """

    def __init__(self, times, points):
        """
        Args:
            times: (N,) 严格递增的时间序列
            points: (N, 3) 控制点，与 times 一一对应
        """
        if times is None:
            raise MissingArgumentError("times is required.")
        if points is None:
            raise MissingArgumentError("points is required.")

        # 空序列的形状为 (0,)，须先于形状检查报告长度错误
        if len(points) < 2:
            raise InvalidLengthError("points.length must be greater than or equal to 2.")

        points = as_points(points)
        times = as_times(times)

        if len(times) != len(points):
            raise LengthMismatchError("times.length must be equal to points.length.")
        if not is_strictly_increasing(times):
            raise KnotError("times must be finite and strictly increasing.")

        self.times = times
        self.points = points
        self._last_time_index = 0

        logger.debug(
            "%s: %d control points over [%g, %g]",
            type(self).__name__, len(points), times[0], times[-1],
        )

    @property
    def start_time(self) -> float:
        return float(self.times[0])

    @property
    def end_time(self) -> float:
        return float(self.times[-1])

    @property
    def num_points(self) -> int:
        return len(self.points)

    def __len__(self) -> int:
        return len(self.points)

    def find_time_interval(self, time: float) -> int:
        """查找 time 所在区间，并将结果保存为下次查询的提示。"""
        if time is None:
            raise MissingArgumentError("time is required.")
        i = find_time_interval(time, self._last_time_index, self.times)
        self._last_time_index = i
        return i

    def _local_parameter(self, time: float, i: int) -> float:
        """区间 i 内的局部参数 u ∈ [0, 1]。"""
        t0 = self.times[i]
        return (time - t0) / (self.times[i + 1] - t0)

    @abstractmethod
    def evaluate(self, time: float, out: np.ndarray | None = None) -> np.ndarray:
        """
        在给定时间评估曲线。

        Args:
            time: 查询时间
            out: 可选的 (3,) 输出数组

        Returns:
            (3,) 曲线上的点；若提供 out 则写入并返回 out
        """

    def evaluate_batch(self, times) -> np.ndarray:
        """
        批量评估。按顺序查询时，区间提示使每次查找摊还 O(1)。

        Args:
            times: (M,) 查询时间

        Returns:
            (M, 3) 点数组
        """
        times = np.atleast_1d(np.asarray(times, dtype=float))
        result = np.empty((len(times), 3))
        for k, t in enumerate(times):
            self.evaluate(float(t), out=result[k])
        return result

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(N={self.num_points}, "
            f"t=[{self.start_time:g}, {self.end_time:g}])"
        )
