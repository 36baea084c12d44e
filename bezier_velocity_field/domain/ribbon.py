"""베지어 커브를 따라 리본 메시를 압출한다."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
import logging

import numpy as np
import numpy.typing as npt

from bezier_velocity_field.domain.curve_math import CurveEvaluator
from bezier_velocity_field.domain.enums import RibbonOrientation
from bezier_velocity_field.domain.magnitude_curve import (
    MagnitudeCurve,
    sample_curve,
)
from bezier_velocity_field.domain.vector_math import normalize

logger = logging.getLogger(__name__)

WidthFn = Callable[[npt.NDArray[np.float64]], npt.ArrayLike]

# 정점 4개 (이전 R, 이전 L, 현재 R, 현재 L) 기준 삼각형 인덱스 오프셋
_FRONT_WINDING = (0, 1, 2, 1, 3, 2)
_BACK_WINDING = (0, 2, 1, 1, 2, 3)


@dataclass(frozen=True)
class RibbonSettings:
    """리본 압출 옵션.

    Args:
        resolution: 척추 점 개수 (2 이상).
        orientation: 업 벡터 기준 축.
        two_sided: 뒷면 삼각형도 생성할지 여부.
        flip_side: 앞/뒷면 와인딩을 뒤바꿀지 여부.
        flip_uv: UV 축을 뒤바꿀지 여부.
        width_multiplier_left: 왼쪽 폭 배율.
        width_multiplier_right: 오른쪽 폭 배율.
        width_curve_left: t → 왼쪽 폭 함수.
        width_curve_right: t → 오른쪽 폭 함수.
    """

    resolution: int = 24
    orientation: RibbonOrientation = RibbonOrientation.X
    two_sided: bool = True
    flip_side: bool = False
    flip_uv: bool = False
    width_multiplier_left: float = 1.0
    width_multiplier_right: float = 1.0
    width_curve_left: WidthFn = field(
        default_factory=lambda: MagnitudeCurve.constant(1.0)
    )
    width_curve_right: WidthFn = field(
        default_factory=lambda: MagnitudeCurve.constant(1.0)
    )


@dataclass(frozen=True)
class RibbonMesh:
    """압출된 리본 메시 데이터.

    Args:
        vertices: (2N, 3) 정점 배열. 각 척추 점마다 R, L 순서.
        uvs: (2N, 2) UV 배열.
        triangles: 길이가 3의 배수인 정점 인덱스 배열.
    """

    vertices: npt.NDArray[np.float64]
    uvs: npt.NDArray[np.float64]
    triangles: npt.NDArray[np.int32]

    @property
    def vertex_count(self) -> int:
        return int(self.vertices.shape[0])

    @property
    def triangle_count(self) -> int:
        return int(self.triangles.shape[0] // 3)


def _up_reference(
    spine: npt.NDArray[np.float64], orientation: RibbonOrientation,
) -> npt.NDArray[np.float64]:
    """척추 점의 기준 축 성분만 1 로 바꾼 업 기준점."""
    axis = {
        RibbonOrientation.X: 0,
        RibbonOrientation.Y: 1,
        RibbonOrientation.Z: 2,
    }[orientation]
    up = spine.copy()
    up[:, axis] = 1.0
    return up


class MeshRibbonExtruder:
    """CurveEvaluator 를 사용해 리본 메시를 만드는 생성기.

    Args:
        settings: 압출 옵션.
    """

    def __init__(self, settings: RibbonSettings | None = None) -> None:
        self.settings = settings or RibbonSettings()

    def extrude(self, evaluator: CurveEvaluator) -> RibbonMesh:
        """커브 척추를 따라 좌우로 폭을 준 리본을 생성한다.

        Raises:
            InvalidResolutionError: resolution 이 2 미만일 때.
        """
        s = self.settings
        spine = evaluator.core_points_array(s.resolution)
        count = spine.shape[0]
        ts = np.arange(count) / (count - 1)

        # 마지막 점은 직전 구간의 탄젠트를 그대로 쓴다
        segments = np.diff(spine, axis=0)
        tangents = normalize(np.vstack([segments, segments[-1:]]))

        to_up = _up_reference(spine, s.orientation) - spine
        cross_l = normalize(np.cross(tangents, to_up))

        width_r = s.width_multiplier_right * sample_curve(
            s.width_curve_right, ts
        )
        width_l = s.width_multiplier_left * sample_curve(
            s.width_curve_left, ts
        )

        vertices = np.empty((2 * count, 3), dtype=np.float64)
        vertices[0::2] = spine - cross_l * width_r[:, None]
        vertices[1::2] = spine + cross_l * width_l[:, None]

        uvs = np.empty((2 * count, 2), dtype=np.float64)
        if s.flip_uv:
            uvs[0::2] = np.column_stack([np.zeros(count), ts])
            uvs[1::2] = np.column_stack([np.ones(count), ts])
        else:
            uvs[0::2] = np.column_stack([ts, np.zeros(count)])
            uvs[1::2] = np.column_stack([ts, np.ones(count)])

        mesh = RibbonMesh(
            vertices=vertices,
            uvs=uvs,
            triangles=self._triangles(count - 1),
        )
        logger.debug(
            'Extruded ribbon: %d vertices, %d triangles',
            mesh.vertex_count, mesh.triangle_count,
        )
        return mesh

    def _triangles(self, quad_count: int) -> npt.NDArray[np.int32]:
        front, back = _FRONT_WINDING, _BACK_WINDING
        if self.settings.flip_side:
            front, back = back, front

        offsets = front + back if self.settings.two_sided else front
        starts = 2 * np.arange(quad_count)
        return (starts[:, None] + np.array(offsets)).ravel().astype(np.int32)
