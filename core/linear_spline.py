"""
linear_spline - 分段线性曲线
"""

import numpy as np

from .bspline import blend
from .spline import Spline


class LinearSpline(Spline):
    """在相邻控制点之间线性插值的曲线。"""

    def evaluate(self, time: float, out: np.ndarray | None = None) -> np.ndarray:
        """
        在时间 time 处评估曲线。

        Args:
            time: 查询时间，须在 [times[0], times[-1]] 内
            out: 可选的 (3,) 输出数组

        Returns:
            (3,) 曲线上的点，(1-u)*P[i] + u*P[i+1]
        """
        i = self.find_time_interval(time)
        u = self._local_parameter(time, i)
        weights = np.array([1.0 - u, u])
        return blend(weights, self.points[i : i + 2], out)
