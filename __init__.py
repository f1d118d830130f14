"""
keyframe_spline - 关键帧时间样条库

在一组按时间索引的三维关键帧点上构造平滑曲线，并在任意时间评估位置，
用于相机路径、动画等需要平滑轨迹的场景。

核心是均匀三次B样条：区间查找、局部参数、四点控制窗口
(首末区间使用反射虚拟点) 以及固定基矩阵混合。
"""

from .core import BSplineCurve, CatmullRomSpline, LinearSpline, Spline, find_time_interval
from .errors import (
    DimensionError,
    InvalidLengthError,
    KnotError,
    LengthMismatchError,
    MissingArgumentError,
    SplineError,
    TimeOutOfRangeError,
)
from .trajectory import KeyframeTrajectory

__version__ = "0.1.0"
__all__ = [
    "BSplineCurve",
    "CatmullRomSpline",
    "LinearSpline",
    "Spline",
    "find_time_interval",
    "KeyframeTrajectory",
    "SplineError",
    "MissingArgumentError",
    "InvalidLengthError",
    "LengthMismatchError",
    "DimensionError",
    "KnotError",
    "TimeOutOfRangeError",
]
