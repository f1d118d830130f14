"""
camera_flight - 相机环绕飞行关键帧数据

数据说明:
相机绕原点做上升环绕飞行，关键帧在时间上均匀分布。
- times: 关键帧时间 (s)
- points: 相机位置 (m)，z 轴从 height 线性上升到 2 * height
"""

from dataclasses import dataclass

import numpy as np


@dataclass
class CameraFlightSettings:
    """相机飞行采样参数"""

    frame_rate: float = 30.0  # 输出帧率 (fps)
    duration_s: float = 8.0  # 总时长 (s)
    radius_m: float = 100.0  # 环绕半径 (m)
    height_m: float = 30.0  # 起始高度 (m)


def camera_orbit_keyframes(
    num_keyframes: int = 8,
    radius: float = 100.0,
    height: float = 30.0,
    duration_s: float = 8.0,
) -> tuple[np.ndarray, np.ndarray, CameraFlightSettings]:
    """
    生成环绕飞行的相机关键帧。

    Args:
        num_keyframes: 关键帧数量, >= 2
        radius: 环绕半径 (m)
        height: 起始高度 (m)
        duration_s: 总时长 (s)

    Returns:
        times: (N,) 关键帧时间
        points: (N, 3) 相机位置
        settings: CameraFlightSettings 采样参数
    """
    if num_keyframes < 2:
        raise ValueError(f"num_keyframes must be at least 2, got {num_keyframes}")

    times = np.linspace(0.0, duration_s, num_keyframes)
    # 绕行 3/4 圈，避免首末关键帧重合
    angles = np.linspace(0.0, 1.5 * np.pi, num_keyframes)
    points = np.column_stack([
        radius * np.cos(angles),
        radius * np.sin(angles),
        height * (1.0 + times / duration_s),
    ])

    settings = CameraFlightSettings(
        duration_s=duration_s,
        radius_m=radius,
        height_m=height,
    )
    return times, points, settings
