"""
errors - 样条异常类型

所有异常都继承自 SplineError (ValueError 子类)，调用方可以统一捕获。
"""


class SplineError(ValueError):
    """样条相关错误的基类。"""

    pass


class MissingArgumentError(SplineError):
    """必需参数缺失 (times / points / time 为 None)。"""

    pass


class InvalidLengthError(SplineError):
    """控制点数量不足 (少于 2 个)。"""

    pass


class LengthMismatchError(SplineError):
    """times 与 points 长度不一致。"""

    pass


class DimensionError(SplineError):
    """points 不是 (N, 3) 数组，或 times 不是一维数组。"""

    pass


class KnotError(SplineError):
    """时间序列非严格递增或含有非有限值。"""

    pass


class TimeOutOfRangeError(SplineError):
    """查询时间超出 [times[0], times[-1]]。"""

    def __init__(self, time: float, start: float, end: float):
        self.time = time
        self.start = start
        self.end = end
        super().__init__(f"time {time!r} must be in the range [{start}, {end}]")
