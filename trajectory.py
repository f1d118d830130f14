"""
trajectory - 关键帧轨迹

该模块实现 KeyframeTrajectory 类：根据关键帧时间和位置构造曲线，
按时间评估、批量评估或均匀采样，用于相机路径和动画。

支持的曲线类型:
    - "bspline": 均匀三次B样条 (逼近，经过首末点)
    - "catmull_rom": Catmull-Rom 样条 (经过所有关键帧)
    - "linear": 分段线性
"""

import logging
from typing import Literal

import numpy as np

from .core.bspline import BSplineCurve
from .core.catmull_rom import CatmullRomSpline
from .core.linear_spline import LinearSpline
from .core.spline import Spline
from .errors import LengthMismatchError, MissingArgumentError

logger = logging.getLogger(__name__)

SplineMethod = Literal["bspline", "catmull_rom", "linear"]

SPLINE_TYPES: dict[str, type[Spline]] = {
    "bspline": BSplineCurve,
    "catmull_rom": CatmullRomSpline,
    "linear": LinearSpline,
}


class KeyframeTrajectory:
    """
    关键帧轨迹。

    Attributes:
        method: 曲线类型名称
        spline: 底层曲线对象
        times: (N,) 关键帧时间
        points: (N, 3) 关键帧位置
    """

    def __init__(self, times, points, method: SplineMethod = "bspline"):
        """
        Args:
            times: (N,) 严格递增的关键帧时间
            points: (N, 3) 关键帧位置
            method: "bspline", "catmull_rom" 或 "linear"
        """
        if method not in SPLINE_TYPES:
            raise ValueError(f"Unknown method: {method}. Use 'bspline', 'catmull_rom', or 'linear'")

        self.method = method
        self.spline: Spline = SPLINE_TYPES[method](times, points)
        logger.debug("Trajectory built with %s over %.3fs", method, self.duration)

    @classmethod
    def from_durations(
        cls,
        points,
        durations,
        start_time: float = 0.0,
        method: SplineMethod = "bspline",
    ) -> "KeyframeTrajectory":
        """
        根据每段持续时间构造轨迹。

        Args:
            points: (N, 3) 关键帧位置
            durations: (N-1,) 每段持续时间，须为正
            start_time: 第一个关键帧的时间
            method: 曲线类型

        Returns:
            KeyframeTrajectory 对象
        """
        if points is None:
            raise MissingArgumentError("points is required.")
        if durations is None:
            raise MissingArgumentError("durations is required.")

        durations = np.asarray(durations, dtype=float)
        if durations.ndim != 1 or len(durations) != len(points) - 1:
            raise LengthMismatchError("durations.length must be equal to points.length - 1.")

        times = np.empty(len(durations) + 1)
        times[0] = start_time
        times[1:] = start_time + np.cumsum(durations)
        return cls(times, points, method=method)

    @property
    def times(self) -> np.ndarray:
        return self.spline.times

    @property
    def points(self) -> np.ndarray:
        return self.spline.points

    @property
    def duration(self) -> float:
        """轨迹总时长。"""
        return self.spline.end_time - self.spline.start_time

    def evaluate(self, time: float) -> np.ndarray:
        """
        在时间 time 处评估位置。

        Args:
            time: 查询时间

        Returns:
            (3,) 位置向量
        """
        return self.spline.evaluate(time)

    def evaluate_batch(self, times: np.ndarray) -> np.ndarray:
        """
        批量评估位置。

        Args:
            times: (M,) 时间数组

        Returns:
            (M, 3) 位置数组
        """
        return self.spline.evaluate_batch(times)

    def sample_uniform(self, num_points: int) -> tuple[np.ndarray, np.ndarray]:
        """
        沿时间均匀采样。

        Args:
            num_points: 采样点数

        Returns:
            times: (M,) 采样时间
            positions: (M, 3) 位置
        """
        if num_points < 2:
            raise ValueError(f"num_points must be at least 2, got {num_points}")
        times = np.linspace(self.spline.start_time, self.spline.end_time, num_points)
        # linspace 末端可能有舍入误差，强制落在范围内
        times[-1] = self.spline.end_time
        return times, self.evaluate_batch(times)

    def sample_at_rate(self, frame_rate: float) -> tuple[np.ndarray, np.ndarray]:
        """
        按帧率采样，包含起点和终点。

        Args:
            frame_rate: 每秒帧数

        Returns:
            times: (M,) 帧时间
            positions: (M, 3) 位置
        """
        if frame_rate <= 0:
            raise ValueError(f"frame_rate must be positive, got {frame_rate}")
        num_frames = int(np.floor(self.duration * frame_rate + 1e-9)) + 1
        end = self.spline.end_time
        times = self.spline.start_time + np.arange(num_frames) / frame_rate
        times = np.minimum(times, end)
        # 末帧离终点不足一帧的 1e-6 时直接对齐到终点，避免近似重复帧
        if end - times[-1] > 1e-6 / frame_rate or len(times) == 1:
            times = np.append(times, end)
        else:
            times[-1] = end
        return times, self.evaluate_batch(times)

    def __repr__(self) -> str:
        return (
            f"KeyframeTrajectory(N={self.spline.num_points}, "
            f"duration={self.duration:.2f}s, method={self.method!r})"
        )


if __name__ == "__main__":
    from keyframe_spline.datasets import camera_orbit_keyframes

    times, points, settings = camera_orbit_keyframes()

    print("=== 关键帧轨迹测试 ===")
    print(f"关键帧数: {len(points)}")

    for method in SPLINE_TYPES:
        trajectory = KeyframeTrajectory(times, points, method=method)
        frame_times, frames = trajectory.sample_at_rate(settings.frame_rate)
        print(f"{trajectory}: {len(frames)} 帧")

    trajectory = KeyframeTrajectory(times, points)
    t_mid = times[0] + trajectory.duration / 2
    print(f"\n在 t={t_mid:.2f}s 处: {trajectory.evaluate(t_mid)}")
