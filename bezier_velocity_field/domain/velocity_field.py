"""베지어 커브 기반 속도장 생성.

커브를 고정 해상도로 순회하며 (위치, 진행 방향, 크기) 노드 시퀀스를 만든다.
노드 i 의 위치는 전진 전 샘플이며, 방향은 그 위치에서 다음 샘플을 향한다.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass, field, replace
from functools import cached_property
import logging

import numpy as np
import numpy.typing as npt

from bezier_velocity_field.domain.curve_math import CurveEvaluator
from bezier_velocity_field.domain.exceptions import (
    InvalidResolutionError,
    InvalidSearchRadiusError,
)
from bezier_velocity_field.domain.magnitude_curve import (
    DEFAULT_MAGNITUDE_CURVE,
    sample_curve,
)
from bezier_velocity_field.domain.value_objects.control_points import (
    ControlPoints,
)
from bezier_velocity_field.domain.value_objects.field_node import FieldNode
from bezier_velocity_field.domain.value_objects.vector import Vector3
from bezier_velocity_field.domain.vector_math import normalize

logger = logging.getLogger(__name__)

# 스칼라 t 와 t 배열을 모두 받는 크기 매핑 함수.
MagnitudeFn = Callable[[npt.NDArray[np.float64]], npt.ArrayLike]

DEFAULT_RESOLUTION = 24
DEFAULT_SEARCH_RADIUS = 5.0


@dataclass(frozen=True, eq=False)
class FieldArrays:
    """노드 시퀀스의 numpy 표현.

    Args:
        positions: (M, 3) 노드 위치.
        directions: (M, 3) 단위 진행 방향.
        magnitudes: (M,) 노드 크기.
    """

    positions: npt.NDArray[np.float64]
    directions: npt.NDArray[np.float64]
    magnitudes: npt.NDArray[np.float64]

    @classmethod
    def from_nodes(cls, nodes: tuple[FieldNode, ...]) -> FieldArrays:
        if not nodes:
            return cls(
                positions=np.empty((0, 3), dtype=np.float64),
                directions=np.empty((0, 3), dtype=np.float64),
                magnitudes=np.empty(0, dtype=np.float64),
            )
        return cls(
            positions=np.stack([n.position.as_array() for n in nodes]),
            directions=np.stack(
                [n.velocity_direction.as_array() for n in nodes]
            ),
            magnitudes=np.array(
                [n.magnitude for n in nodes], dtype=np.float64
            ),
        )


@dataclass(frozen=True)
class VelocityField:
    """속도장 스냅샷.

    재생성 시 기존 스냅샷을 수정하지 않고 새 스냅샷으로 통째로 교체한다.

    Args:
        nodes: 커브 진행 순서의 노드 목록.
        search_radius: 조향 시 노드 탐색 반경.
        resolution: 생성에 사용한 해상도 (미생성 시 0).
        version: 저장소가 부여한 버전 (미생성 시 0).
    """

    nodes: tuple[FieldNode, ...] = field(default_factory=tuple)
    search_radius: float = DEFAULT_SEARCH_RADIUS
    resolution: int = 0
    version: int = 0

    @classmethod
    def empty(cls, search_radius: float = DEFAULT_SEARCH_RADIUS) -> VelocityField:
        return cls(nodes=(), search_radius=search_radius)

    def __len__(self) -> int:
        return len(self.nodes)

    def __iter__(self) -> Iterator[FieldNode]:
        return iter(self.nodes)

    def __getitem__(self, index: int) -> FieldNode:
        return self.nodes[index]

    @property
    def is_empty(self) -> bool:
        return not self.nodes

    def with_version(self, version: int) -> VelocityField:
        return replace(self, version=version)

    @cached_property
    def arrays(self) -> FieldArrays:
        """조향 계산에 쓰는 배열 표현. 스냅샷마다 한 번만 만든다."""
        return FieldArrays.from_nodes(self.nodes)

    def magnitude_range(self) -> tuple[float, float] | None:
        """(최소, 최대) 크기. 빈 속도장이면 None."""
        if not self.nodes:
            return None
        mags = [n.magnitude for n in self.nodes]
        return min(mags), max(mags)

    def magnitude_shades(
        self, low: float = 0.05, high: float = 1.0,
    ) -> list[float]:
        """시각화용으로 노드 크기를 [low, high] 로 리매핑한다.

        모든 크기가 같으면 전부 high 로 매핑한다.
        """
        bounds = self.magnitude_range()
        if bounds is None:
            return []
        min_mag, max_mag = bounds
        if max_mag == min_mag:
            return [high] * len(self.nodes)
        return [
            remap(n.magnitude, min_mag, max_mag, low, high)
            for n in self.nodes
        ]


def remap(
    value: float, from1: float, to1: float, from2: float, to2: float,
) -> float:
    """[from1, to1] 구간 값을 [from2, to2] 구간으로 선형 매핑한다."""
    return (value - from1) / (to1 - from1) * (to2 - from2) + from2


def build_velocity_field(
    control_points: ControlPoints,
    resolution: int = DEFAULT_RESOLUTION,
    magnitude_curve: MagnitudeFn = DEFAULT_MAGNITUDE_CURVE,
    search_radius: float = DEFAULT_SEARCH_RADIUS,
) -> VelocityField:
    """커브를 따라 속도장을 생성한다.

    Args:
        control_points: 커브 제어점.
        resolution: 노드 개수 (2 이상, 실사용 5~100).
        magnitude_curve: t ∈ [0, 1] → 크기 매핑 함수.
        search_radius: 조향 탐색 반경.

    Returns:
        정확히 resolution 개의 노드를 가진 새 VelocityField.

    Raises:
        InvalidResolutionError: resolution 이 2 미만일 때.
        InvalidSearchRadiusError: search_radius 가 0 이하일 때.
    """
    if resolution < 2:
        raise InvalidResolutionError(
            f'resolution must be >= 2, got {resolution}'
        )
    if search_radius <= 0.0:
        raise InvalidSearchRadiusError(
            f'search_radius must be positive, got {search_radius}'
        )

    evaluator = CurveEvaluator(control_points)
    ts = np.arange(1, resolution + 1) / resolution
    samples = evaluator.evaluate_many(ts)
    previous = np.vstack([control_points.p0.as_array(), samples[:-1]])
    directions = normalize(samples - previous)
    magnitudes = sample_curve(magnitude_curve, ts)

    nodes = tuple(
        FieldNode(
            position=Vector3.from_array(pos),
            velocity_direction=Vector3.from_array(direction),
            magnitude=float(mag),
        )
        for pos, direction, mag in zip(previous, directions, magnitudes)
    )

    logger.debug(
        'Built velocity field: %d nodes, radius=%.3f',
        len(nodes), search_radius,
    )
    return VelocityField(
        nodes=nodes,
        search_radius=search_radius,
        resolution=resolution,
    )


class VelocityFieldBuilder:
    """해상도와 크기 커브를 보유한 속도장 빌더.

    build() 는 호출될 때마다 전체를 다시 계산한다.

    Args:
        resolution: 노드 개수.
        magnitude_curve: 크기 매핑 함수.
        search_radius: 조향 탐색 반경.
    """

    def __init__(
        self,
        resolution: int = DEFAULT_RESOLUTION,
        magnitude_curve: MagnitudeFn = DEFAULT_MAGNITUDE_CURVE,
        search_radius: float = DEFAULT_SEARCH_RADIUS,
    ) -> None:
        self.resolution = resolution
        self.magnitude_curve = magnitude_curve
        self.search_radius = search_radius

    def build(self, control_points: ControlPoints) -> VelocityField:
        return build_velocity_field(
            control_points,
            resolution=self.resolution,
            magnitude_curve=self.magnitude_curve,
            search_radius=self.search_radius,
        )
