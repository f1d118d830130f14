"""
bspline - 均匀三次B样条曲线

实现:
1. 三次B样条基矩阵 (乘以 1/6)
2. 基函数权重计算 (单项式向量 × 基矩阵)
3. 四点控制窗口选取 (首末区间使用反射得到的虚拟控制点)
4. BSplineCurve: 在任意时间评估曲线位置

曲线在首末区间通过虚拟点外推，调用方只需提供真实的关键帧点，
曲线精确经过首末两个控制点。
"""

import numpy as np

from ..utils.geometry import reflect_point
from .spline import Spline

BSPLINE_COEFFICIENT_MATRIX = np.array(
    [
        [-1.0, 3.0, -3.0, 1.0],
        [3.0, -6.0, 0.0, 4.0],
        [-3.0, 3.0, 3.0, 1.0],
        [1.0, 0.0, 0.0, 0.0],
    ]
) / 6.0
BSPLINE_COEFFICIENT_MATRIX.setflags(write=False)


def monomials(u: float) -> np.ndarray:
    """单项式向量 (u³, u², u, 1)。"""
    u2 = u * u
    return np.array([u2 * u, u2, u, 1.0])


def basis_weights(u: float, matrix: np.ndarray = BSPLINE_COEFFICIENT_MATRIX) -> np.ndarray:
    """
    计算局部参数 u 处四个控制点的混合权重。

    Args:
        u: 局部参数 [0, 1]
        matrix: 4×4 基矩阵，默认三次B样条基

    Returns:
        (4,) 权重 (w0, w1, w2, w3)，B样条基下满足单位分解 (和为 1)
    """
    return matrix @ monomials(u)


def control_window(points: np.ndarray, i: int) -> np.ndarray:
    """
    选取区间 i 两侧的四个控制点。

    首末区间缺少的邻点由反射合成:
        首区间: p0 = P[0] + (P[0] - P[1])
        末区间: p3 = P[i+1] + (P[i+1] - P[i])
    只有两个点时首末区间重合，两端都使用虚拟点。

    Args:
        points: (N, 3) 控制点, N >= 2
        i: 区间索引 [0, N-2]

    Returns:
        (4, 3) 控制窗口
    """
    last = len(points) - 2
    is_first = i == 0
    is_last = i == last

    if is_first and is_last:
        p1, p2 = points[0], points[1]
        return np.stack([reflect_point(p2, p1), p1, p2, reflect_point(p1, p2)])
    if is_first:
        return np.stack([reflect_point(points[1], points[0]), points[0], points[1], points[2]])
    if is_last:
        return np.stack([points[i - 1], points[i], points[i + 1], reflect_point(points[i], points[i + 1])])
    return points[i - 1 : i + 3].copy()


def blend(weights: np.ndarray, window: np.ndarray, out: np.ndarray | None = None) -> np.ndarray:
    """加权求和 w0*p0 + w1*p1 + w2*p2 + w3*p3。"""
    result = weights @ window
    if out is None:
        return result
    out[...] = result
    return out


class BSplineCurve(Spline):
    """
    均匀三次B样条曲线。

    基于控制点和时间序列构造，在 [times[0], times[-1]] 内任意时间评估。
    上一次查询的区间索引作为查找提示缓存在实例上，只影响查找速度，不影响结果。

    Example:
        >>> curve = BSplineCurve(times=[0, 1, 2], points=[[0, 0, 0], [1, 1, 0], [2, 0, 0]])
        >>> curve.evaluate(0.5)
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
        weights = basis_weights(u)
        return blend(weights, control_window(self.points, i), out)


if __name__ == "__main__":
    from keyframe_spline.datasets import camera_orbit_keyframes

    times, points, settings = camera_orbit_keyframes()

    print("=== B样条曲线测试 ===")
    print(f"控制点数: {len(points)}")

    curve = BSplineCurve(times, points)
    print(curve)

    for u in np.linspace(0, 1, 5):
        w = basis_weights(u)
        print(f"u={u:.2f}: 权重={np.round(w, 4)}, 和={w.sum():.6f}")

    start_err = np.linalg.norm(curve.evaluate(times[0]) - points[0])
    end_err = np.linalg.norm(curve.evaluate(times[-1]) - points[-1])
    print(f"端点误差: start={start_err:.2e}, end={end_err:.2e}")

    frames = curve.evaluate_batch(np.linspace(times[0], times[-1], 100))
    print(f"采样点数: {len(frames)}")
