"""키프레임 기반 크기 보정 커브.

속도장 노드의 크기와 리본 폭을 t ∈ [0, 1] 에 대해 매핑한다.
각 구간은 키프레임의 in/out 탄젠트를 사용하는 큐빅 에르미트 보간이며,
키 범위 밖은 첫/마지막 키 값으로 클램프한다.
구간 탐색(np.searchsorted)과 에르미트 기저 계산은 t 배열 전체에 대해
한 번에 수행한다.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass

import numpy as np
import numpy.typing as npt

from bezier_velocity_field.domain.exceptions import MagnitudeCurveError


@dataclass(frozen=True)
class Keyframe:
    """커브 키프레임.

    Args:
        time: 키 시간.
        value: 키 값.
        in_tangent: 왼쪽 구간에서 들어오는 기울기.
        out_tangent: 오른쪽 구간으로 나가는 기울기.
    """

    time: float
    value: float
    in_tangent: float = 0.0
    out_tangent: float = 0.0


class MagnitudeCurve:
    """큐빅 에르미트 키프레임 커브.

    Usage:
        curve = MagnitudeCurve.ease_in_out(0.0, 0.8, 1.0, 1.0)
        mag = curve(0.5)
        mags = curve(np.linspace(0.0, 1.0, 24))

    Args:
        keys: 시간 순으로 정렬된 키프레임 목록.

    Raises:
        MagnitudeCurveError: 키 시간이 엄격히 증가하지 않을 때.
    """

    def __init__(self, keys: Sequence[Keyframe]) -> None:
        for i in range(1, len(keys)):
            if keys[i].time <= keys[i - 1].time:
                raise MagnitudeCurveError(
                    'Keyframe times must be strictly increasing, '
                    f'got {keys[i - 1].time} then {keys[i].time}'
                )
        self._keys = tuple(keys)
        self._times = np.array([k.time for k in self._keys], dtype=np.float64)
        self._values = np.array(
            [k.value for k in self._keys], dtype=np.float64
        )
        self._in_tangents = np.array(
            [k.in_tangent for k in self._keys], dtype=np.float64
        )
        self._out_tangents = np.array(
            [k.out_tangent for k in self._keys], dtype=np.float64
        )

    @property
    def keys(self) -> tuple[Keyframe, ...]:
        return self._keys

    def __call__(self, t):
        return self.evaluate(t)

    def __repr__(self) -> str:
        return f'MagnitudeCurve(keys={list(self._keys)!r})'

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MagnitudeCurve):
            return NotImplemented
        return self._keys == other._keys

    def __hash__(self) -> int:
        return hash(self._keys)

    def evaluate(self, t):
        """t 에서의 커브 값을 계산한다.

        스칼라 t 에는 float, 배열 t 에는 같은 모양의 배열을 반환한다.
        빈 커브는 0, 키가 하나면 해당 값을 반환한다.
        """
        if np.ndim(t) == 0:
            return float(self.evaluate_many([t])[0])
        return self.evaluate_many(t)

    def evaluate_many(self, ts: npt.ArrayLike) -> npt.NDArray[np.float64]:
        """t 배열 전체에 대한 커브 값을 계산한다."""
        t = np.asarray(ts, dtype=np.float64)
        n = len(self._keys)
        if n == 0:
            return np.zeros_like(t)
        if n == 1:
            return np.full_like(t, self._values[0])

        times = self._times
        values = self._values
        i = np.clip(np.searchsorted(times, t, side='right') - 1, 0, n - 2)

        t0 = times[i]
        v0 = values[i]
        dt = times[i + 1] - t0
        s = (t - t0) / dt
        s2 = s * s
        s3 = s2 * s

        h10 = s3 - 2.0 * s2 + s
        h01 = -2.0 * s3 + 3.0 * s2
        h11 = s3 - s2

        inner = (
            v0
            + h01 * (values[i + 1] - v0)
            + h10 * dt * self._out_tangents[i]
            + h11 * dt * self._in_tangents[i + 1]
        )
        out = np.where(t <= times[0], values[0], inner)
        return np.where(t >= times[-1], values[-1], out)

    # -- 팩토리 --

    @classmethod
    def constant(cls, value: float) -> MagnitudeCurve:
        return cls([Keyframe(0.0, value), Keyframe(1.0, value)])

    @classmethod
    def linear(
        cls, time_start: float, value_start: float,
        time_end: float, value_end: float,
    ) -> MagnitudeCurve:
        """두 점을 잇는 직선 커브를 만든다."""
        return cls.piecewise_linear(
            [(time_start, value_start), (time_end, value_end)]
        )

    @classmethod
    def ease_in_out(
        cls, time_start: float, value_start: float,
        time_end: float, value_end: float,
    ) -> MagnitudeCurve:
        """양 끝 기울기가 0 인 부드러운 S 커브를 만든다."""
        return cls.smooth([(time_start, value_start), (time_end, value_end)])

    @classmethod
    def piecewise_linear(
        cls, points: Iterable[tuple[float, float]],
    ) -> MagnitudeCurve:
        """(time, value) 점들을 직선으로 잇는 커브를 만든다.

        각 키의 탄젠트를 인접 구간의 기울기로 설정하므로
        에르미트 보간 결과가 선형 보간과 같다.
        """
        pts = [(float(t), float(v)) for t, v in points]
        slopes = []
        for (t0, v0), (t1, v1) in zip(pts, pts[1:]):
            if t1 <= t0:
                raise MagnitudeCurveError(
                    'Keyframe times must be strictly increasing, '
                    f'got {t0} then {t1}'
                )
            slopes.append((v1 - v0) / (t1 - t0))

        keys = []
        for i, (t, v) in enumerate(pts):
            in_tan = slopes[i - 1] if i > 0 else 0.0
            out_tan = slopes[i] if i < len(slopes) else 0.0
            keys.append(Keyframe(t, v, in_tan, out_tan))
        return cls(keys)

    @classmethod
    def smooth(cls, points: Iterable[tuple[float, float]]) -> MagnitudeCurve:
        """(time, value) 점들을 기울기 0 으로 부드럽게 잇는 커브를 만든다."""
        return cls([Keyframe(float(t), float(v)) for t, v in points])


def sample_curve(
    curve: Callable[[npt.NDArray[np.float64]], npt.ArrayLike],
    ts: npt.ArrayLike,
) -> npt.NDArray[np.float64]:
    """커브를 t 배열에 대해 샘플링해 같은 모양의 float64 배열로 반환한다.

    MagnitudeCurve 처럼 배열을 받는 커브는 한 번에 평가되고,
    상수를 반환하는 호출 가능 객체는 t 모양으로 브로드캐스트된다.
    """
    t = np.asarray(ts, dtype=np.float64)
    values = np.asarray(curve(t), dtype=np.float64)
    return np.broadcast_to(values, t.shape).copy()


DEFAULT_MAGNITUDE_CURVE = MagnitudeCurve.ease_in_out(0.0, 0.8, 1.0, 1.0)
