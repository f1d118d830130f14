"""
datasets - 测试数据集

包含:
- camera_flight: 相机环绕飞行关键帧
"""

from .camera_flight import camera_orbit_keyframes, CameraFlightSettings

__all__ = [
    "camera_orbit_keyframes",
    "CameraFlightSettings",
]
