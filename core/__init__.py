"""
core - 核心算法模块

包含:
- spline: 区间查找与样条公共接口
- bspline: 均匀三次B样条曲线
- catmull_rom: Catmull-Rom 插值曲线
- linear_spline: 分段线性曲线
"""

from .spline import Spline, find_time_interval
from .bspline import BSPLINE_COEFFICIENT_MATRIX, BSplineCurve, basis_weights, control_window
from .catmull_rom import CATMULL_ROM_COEFFICIENT_MATRIX, CatmullRomSpline
from .linear_spline import LinearSpline

__all__ = [
    "Spline",
    "find_time_interval",
    "BSPLINE_COEFFICIENT_MATRIX",
    "BSplineCurve",
    "basis_weights",
    "control_window",
    "CATMULL_ROM_COEFFICIENT_MATRIX",
    "CatmullRomSpline",
    "LinearSpline",
]
