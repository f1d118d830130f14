"""
bspline 模块单元测试
"""

import numpy as np
import pytest
from scipy.interpolate import BSpline

from keyframe_spline.core.bspline import (
    BSPLINE_COEFFICIENT_MATRIX,
    BSplineCurve,
    basis_weights,
    control_window,
)
from keyframe_spline.errors import TimeOutOfRangeError


class TestBasisWeights:
    """基函数权重测试"""

    def test_partition_of_unity(self):
        """测试权重和为 1"""
        for u in np.linspace(0, 1, 101):
            assert np.isclose(basis_weights(u).sum(), 1.0, atol=1e-14)

    def test_weights_non_negative(self):
        for u in np.linspace(0, 1, 101):
            assert np.all(basis_weights(u) >= -1e-15)

    def test_endpoint_weights(self):
        """测试 u=0 和 u=1 时的权重"""
        np.testing.assert_allclose(basis_weights(0.0), [1 / 6, 4 / 6, 1 / 6, 0], atol=1e-15)
        np.testing.assert_allclose(basis_weights(1.0), [0, 1 / 6, 4 / 6, 1 / 6], atol=1e-15)

    def test_matrix_read_only(self):
        assert BSPLINE_COEFFICIENT_MATRIX.shape == (4, 4)
        assert not BSPLINE_COEFFICIENT_MATRIX.flags.writeable


class TestControlWindow:
    """四点控制窗口测试"""

    @pytest.fixture
    def points(self):
        return np.array(
            [[0, 0, 0], [1, 2, 0], [3, 3, 1], [5, 2, 2], [6, 0, 1]],
            dtype=float,
        )

    def test_first_interval(self, points):
        """测试首区间使用反射虚拟点"""
        window = control_window(points, 0)
        np.testing.assert_allclose(window[0], 2 * points[0] - points[1])
        np.testing.assert_allclose(window[1:], points[:3])

    def test_last_interval(self, points):
        """测试末区间使用反射虚拟点"""
        window = control_window(points, 3)
        np.testing.assert_allclose(window[:3], points[2:5])
        np.testing.assert_allclose(window[3], 2 * points[4] - points[3])

    def test_interior_interval(self, points):
        window = control_window(points, 2)
        np.testing.assert_allclose(window, points[1:5])

    def test_interior_window_is_copy(self, points):
        window = control_window(points, 1)
        window[:] = -1
        assert points[0, 0] == 0

    def test_two_points(self):
        """测试两点时两端均为虚拟点"""
        points = np.array([[0, 0, 0], [1, 1, 0]], dtype=float)
        window = control_window(points, 0)
        np.testing.assert_allclose(window, [[-1, -1, 0], [0, 0, 0], [1, 1, 0], [2, 2, 0]])


class TestBSplineCurve:
    """B样条曲线评估测试"""

    @pytest.fixture
    def curve_data(self):
        times = np.array([0.0, 0.5, 1.7, 2.0, 3.5, 5.0])
        points = np.array(
            [
                [0, 0, 0],
                [1, 2, 0],
                [3, 3, 1],
                [5, 2, 2],
                [6, 0, 1],
                [7, -1, 0],
            ],
            dtype=float,
        )
        return times, points

    def test_evaluate_at_boundaries(self, curve_data):
        """测试首末时间处曲线经过首末控制点"""
        times, points = curve_data
        curve = BSplineCurve(times, points)

        start = curve.evaluate(times[0])
        end = curve.evaluate(times[-1])

        assert np.all(np.isfinite(start))
        assert np.all(np.isfinite(end))
        np.testing.assert_allclose(start, points[0], atol=1e-12)
        np.testing.assert_allclose(end, points[-1], atol=1e-12)

    def test_three_points_boundary(self):
        """测试三点曲线两端分别趋近 P0 和 P2"""
        points = np.array([[0, 0, 0], [1, 2, 0], [2, 0, 1]], dtype=float)
        curve = BSplineCurve([0, 1, 2], points)

        np.testing.assert_allclose(curve.evaluate(0.0), points[0], atol=1e-12)
        np.testing.assert_allclose(curve.evaluate(2.0), points[2], atol=1e-12)
        np.testing.assert_allclose(curve.evaluate(1e-9), points[0], atol=1e-6)
        np.testing.assert_allclose(curve.evaluate(2.0 - 1e-9), points[2], atol=1e-6)

    def test_interior_blend(self):
        """测试内部区间的单调混合"""
        times = [0, 1, 2, 3]
        points = [[0, 0, 0], [1, 0, 0], [2, 1, 0], [3, 1, 0]]
        curve = BSplineCurve(times, points)

        p = curve.evaluate(1.5)
        assert 1 < p[0] < 2
        assert 0 < p[1] < 1
        np.testing.assert_allclose(p, [1.5, 0.5, 0.0], atol=1e-12)

    def test_order_independence(self, curve_data):
        """测试区间提示不影响结果 (t1, t2, t1)"""
        times, points = curve_data
        curve = BSplineCurve(times, points)

        first = curve.evaluate(3.0)
        curve.evaluate(0.1)
        second = curve.evaluate(3.0)

        np.testing.assert_array_equal(first, second)

    def test_fresh_and_used_curves_agree(self, curve_data):
        """测试新曲线与已查询过的曲线结果逐位相同"""
        times, points = curve_data
        used = BSplineCurve(times, points)
        used.evaluate_batch(np.linspace(times[0], times[-1], 37)[::-1])

        for t in np.linspace(times[0], times[-1], 23):
            fresh = BSplineCurve(times, points)
            np.testing.assert_array_equal(fresh.evaluate(t), used.evaluate(t))

    def test_continuity_at_knots(self, curve_data):
        """测试节点处 C0 连续"""
        times, points = curve_data
        curve = BSplineCurve(times, points)

        for t in times[1:-1]:
            left = curve.evaluate(t - 1e-9)
            right = curve.evaluate(t + 1e-9)
            np.testing.assert_allclose(left, right, atol=1e-6)

    def test_two_points_is_linear(self):
        """测试两点曲线退化为线性插值"""
        p0 = np.array([1.0, 2.0, 3.0])
        p1 = np.array([4.0, 0.0, -1.0])
        curve = BSplineCurve([2.0, 6.0], [p0, p1])

        for t in np.linspace(2.0, 6.0, 11):
            u = (t - 2.0) / 4.0
            np.testing.assert_allclose(curve.evaluate(t), p0 + u * (p1 - p0), atol=1e-12)

    def test_out_of_range(self, curve_data):
        """测试超出时间范围时报错"""
        times, points = curve_data
        curve = BSplineCurve(times, points)

        with pytest.raises(TimeOutOfRangeError):
            curve.evaluate(times[-1] + 1)
        with pytest.raises(TimeOutOfRangeError):
            curve.evaluate(times[0] - 1e-6)

    def test_output_buffer(self, curve_data):
        """测试写入调用方提供的输出数组"""
        times, points = curve_data
        curve = BSplineCurve(times, points)

        out = np.zeros(3)
        result = curve.evaluate(2.2, out)

        assert result is out
        np.testing.assert_array_equal(out, curve.evaluate(2.2))

    def test_result_does_not_alias(self, curve_data):
        """测试返回值不与内部状态共享内存"""
        times, points = curve_data
        curve = BSplineCurve(times, points)

        end = curve.evaluate(times[-1])
        end[:] = 1e6
        np.testing.assert_allclose(curve.evaluate(times[-1]), points[-1], atol=1e-12)
        np.testing.assert_array_equal(curve.points, points)

    def test_evaluate_batch_shape(self, curve_data):
        times, points = curve_data
        curve = BSplineCurve(times, points)
        result = curve.evaluate_batch(np.linspace(times[0], times[-1], 50))
        assert result.shape == (50, 3)

    def test_scipy_comparison(self):
        """测试均匀节点下与 scipy BSpline 一致"""
        rng = np.random.default_rng(42)
        points = rng.uniform(-5, 5, (6, 3))
        times = np.arange(6, dtype=float)
        curve = BSplineCurve(times, points)

        # 两端加上反射虚拟点，节点 t_j = j - 3
        coeffs = np.vstack([2 * points[0] - points[1], points, 2 * points[-1] - points[-2]])
        knots = np.arange(len(coeffs) + 4, dtype=float) - 3
        reference = BSpline(knots, coeffs, 3)

        x = np.linspace(0, 5, 100, endpoint=False)
        np.testing.assert_allclose(curve.evaluate_batch(x), reference(x), atol=1e-12)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
