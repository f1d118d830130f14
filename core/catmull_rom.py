"""
catmull_rom - Catmull-Rom 插值曲线

与 BSplineCurve 使用相同的四点控制窗口 (首末区间反射虚拟点)，
但用 Catmull-Rom 基矩阵混合，因此曲线经过每个控制点。
"""

import numpy as np

from .bspline import basis_weights, blend, control_window
from .spline import Spline

CATMULL_ROM_COEFFICIENT_MATRIX = np.array(
    [
        [-1.0, 2.0, -1.0, 0.0],
        [3.0, -5.0, 0.0, 2.0],
        [-3.0, 4.0, 1.0, 0.0],
        [1.0, -1.0, 0.0, 0.0],
    ]
) / 2.0
CATMULL_ROM_COEFFICIENT_MATRIX.setflags(write=False)


class CatmullRomSpline(Spline):
    """
    Catmull-Rom 样条。

    区间 [times[i], times[i+1]] 上 u=0 时取 P[i]，u=1 时取 P[i+1]。
    """

    def evaluate(self, time: float, out: np.ndarray | None = None) -> np.ndarray:
        """
        在时间 time 处评估曲线。

        Args:
            time: 查询时间，须在 [times[0], times[-1]] 内
            out: 可选的 (3,) 输出数组

        Returns:
            (3,) 曲线上的点
        """
        i = self.find_time_interval(time)
        u = self._local_parameter(time, i)
        weights = basis_weights(u, CATMULL_ROM_COEFFICIENT_MATRIX)
        return blend(weights, control_window(self.points, i), out)
