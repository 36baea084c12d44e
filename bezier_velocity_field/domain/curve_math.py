"""큐빅 베지어 커브 계산.

B(t) = u³·P0 + 3u²t·P0t + 3u·t²·P1t + t³·P1  (u = 1 - t)

탄젠트 핸들(P0t, P1t)은 방향 벡터가 아니라 제어 다각형의 실제 점이다.
파라미터 배열 전체에 대해 번스타인 가중치를 한 번에 계산한다.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np
import numpy.typing as npt

from bezier_velocity_field.domain.exceptions import InvalidResolutionError
from bezier_velocity_field.domain.value_objects.control_points import (
    ControlPoints,
)
from bezier_velocity_field.domain.value_objects.vector import Vector3
from bezier_velocity_field.domain.vector_math import norms


def bernstein_weights(ts: npt.ArrayLike) -> npt.NDArray[np.float64]:
    """(T,) 파라미터에 대한 (T, 4) 큐빅 번스타인 가중치."""
    t = np.asarray(ts, dtype=np.float64).reshape(-1)
    u = 1.0 - t
    tt = t * t
    uu = u * u
    return np.stack([uu * u, 3.0 * uu * t, 3.0 * u * tt, tt * t], axis=-1)


def evaluate_many(
    ts: npt.ArrayLike, control: npt.ArrayLike,
) -> npt.NDArray[np.float64]:
    """여러 파라미터에서 커브 위치를 계산한다.

    t 를 클램프하지 않으므로 [0, 1] 밖에서는 다항식을 그대로 외삽한다.

    Args:
        ts: 커브 파라미터 배열.
        control: (4, 3) 제어점 배열 (P0, P0t, P1t, P1 순서).

    Returns:
        (T, 3) 위치 배열.
    """
    return bernstein_weights(ts) @ np.asarray(control, dtype=np.float64)


def evaluate(
    t: float,
    p0: Vector3,
    p0_tangent: Vector3,
    p1_tangent: Vector3,
    p1: Vector3,
) -> Vector3:
    """파라미터 t 에서의 베지어 커브 위치를 계산한다.

    Args:
        t: 커브 파라미터 (클램프하지 않음).
        p0: 시작 앵커.
        p0_tangent: 시작 탄젠트 핸들.
        p1_tangent: 끝 탄젠트 핸들.
        p1: 끝 앵커.

    Returns:
        커브 위의 점.
    """
    control = np.stack([
        p0.as_array(), p0_tangent.as_array(),
        p1_tangent.as_array(), p1.as_array(),
    ])
    return Vector3.from_array(evaluate_many([t], control)[0])


def clamp01(value: float) -> float:
    return max(0.0, min(1.0, value))


@dataclass(frozen=True)
class CurvePolyline:
    """커브 미리보기용 폴리라인.

    Args:
        points: t = c / resolution (c = 0..resolution) 샘플.
        segment_lengths: 인접 샘플 간 거리.
    """

    points: tuple[Vector3, ...]
    segment_lengths: tuple[float, ...]


@dataclass(frozen=True)
class CurveEvaluator:
    """제어점을 보유한 베지어 커브 평가기.

    속도장 빌더와 리본 메시 생성기가 공용으로 사용한다.

    Args:
        control_points: 커브 제어점.
    """

    control_points: ControlPoints

    def evaluate(self, t: float) -> Vector3:
        """클램프 없이 t 에서의 위치를 계산한다."""
        return Vector3.from_array(self.evaluate_many([t])[0])

    def evaluate_many(self, ts: npt.ArrayLike) -> npt.NDArray[np.float64]:
        """클램프 없이 여러 t 에서의 위치를 (T, 3) 배열로 계산한다."""
        return evaluate_many(ts, self.control_points.as_array())

    def position_at(self, t: float) -> Vector3:
        """t 를 [0, 1] 로 클램프한 뒤 위치를 계산한다."""
        return self.evaluate(clamp01(t))

    def positions_at(self, ts: npt.ArrayLike) -> npt.NDArray[np.float64]:
        """t 배열을 [0, 1] 로 클램프한 뒤 위치를 계산한다."""
        clamped = np.clip(np.asarray(ts, dtype=np.float64), 0.0, 1.0)
        return self.evaluate_many(clamped)

    def sample_polyline(self, resolution: int) -> CurvePolyline:
        """커브를 resolution 개의 선분으로 나눈 폴리라인을 반환한다.

        Raises:
            InvalidResolutionError: resolution 이 1 미만일 때.
        """
        if resolution < 1:
            raise InvalidResolutionError(
                f'resolution must be >= 1, got {resolution}'
            )

        points = self.evaluate_many(np.arange(resolution + 1) / resolution)
        lengths = norms(np.diff(points, axis=0))
        return CurvePolyline(
            points=tuple(Vector3.from_array(p) for p in points),
            segment_lengths=tuple(float(d) for d in lengths),
        )

    def core_points_array(self, resolution: int) -> npt.NDArray[np.float64]:
        """양 끝점을 포함해 resolution 개의 점을 (N, 3) 배열로 샘플링한다.

        Raises:
            InvalidResolutionError: resolution 이 2 미만일 때.
        """
        if resolution < 2:
            raise InvalidResolutionError(
                f'resolution must be >= 2, got {resolution}'
            )
        return self.evaluate_many(np.arange(resolution) / (resolution - 1))

    def core_points(self, resolution: int) -> list[Vector3]:
        return [
            Vector3.from_array(p) for p in self.core_points_array(resolution)
        ]
