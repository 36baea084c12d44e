"""베지어 커브 제어점 값 객체."""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np
import numpy.typing as npt

from bezier_velocity_field.domain.value_objects.vector import Vector3


@dataclass(frozen=True)
class ControlPoints:
    """큐빅 베지어 커브의 4개 제어점.

    탄젠트 핸들은 방향 벡터가 아니라 실제 위치 점이다.

    Args:
        p0: 시작 앵커.
        p0_tangent: 시작 탄젠트 핸들 위치.
        p1_tangent: 끝 탄젠트 핸들 위치.
        p1: 끝 앵커.
    """

    p0: Vector3 = field(default_factory=lambda: Vector3(10.0, 0.0, 0.0))
    p0_tangent: Vector3 = field(
        default_factory=lambda: Vector3(10.0, 0.0, 10.0)
    )
    p1_tangent: Vector3 = field(
        default_factory=lambda: Vector3(-10.0, 0.0, -10.0)
    )
    p1: Vector3 = field(default_factory=lambda: Vector3(-10.0, 0.0, 0.0))

    def as_tuple(self) -> tuple[Vector3, Vector3, Vector3, Vector3]:
        """(p0, p0_tangent, p1_tangent, p1) 순서로 반환한다."""
        return (self.p0, self.p0_tangent, self.p1_tangent, self.p1)

    def as_array(self) -> npt.NDArray[np.float64]:
        """(4, 3) 제어점 배열."""
        return np.stack([p.as_array() for p in self.as_tuple()])
