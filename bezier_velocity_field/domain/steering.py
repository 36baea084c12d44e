"""속도장 기반 파티클 조향.

질의 위치에서 탐색 반경 안의 최근접 노드를 찾고,
그 노드의 진행 방향과 노드로 끌어당기는 힘을 합쳐 파티클을 이동시킨다.

탐색(nearest_node_indices)과 적분(integrate_positions)은 (N, 3) 배열 위의
numpy 연산 하나로 구현되어 있고, find_nearest()/step_particle() 은
N = 1 인 경우로 같은 코드를 호출한다.
"""

from __future__ import annotations

from collections.abc import Sequence
import logging

import numpy as np
import numpy.typing as npt

from bezier_velocity_field.domain.enums import NearestFallback
from bezier_velocity_field.domain.value_objects.field_node import (
    FieldNode,
    SteeringResult,
)
from bezier_velocity_field.domain.value_objects.vector import Vector3
from bezier_velocity_field.domain.vector_math import (
    as_points,
    norms,
    normalize,
)
from bezier_velocity_field.domain.velocity_field import (
    FieldArrays,
    VelocityField,
)

logger = logging.getLogger(__name__)

# 한 번에 거리 행렬을 만드는 파티클 수. 메모리는 chunk_size × 노드 수 × 3.
DEFAULT_CHUNK_SIZE = 4096


def nearest_node_indices(
    positions: npt.ArrayLike,
    node_positions: npt.ArrayLike,
    search_radius: float,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
) -> tuple[npt.NDArray[np.intp], npt.NDArray[np.bool_]]:
    """각 위치에 대해 반경 안 최근접 노드 인덱스를 찾는다.

    거리가 search_radius 이하인 노드만 후보이며, 거리가 같으면
    먼저 나온 노드를 선택한다. 파티클을 chunk_size 개씩 나누어
    (chunk, M) 거리 행렬만 만든다.

    Args:
        positions: (N, 3) 질의 위치.
        node_positions: (M, 3) 노드 위치.
        search_radius: 탐색 반경.
        chunk_size: 한 번에 처리할 위치 개수.

    Returns:
        (인덱스 배열, 발견 마스크) 튜플. 발견되지 않은 위치의 인덱스는 0.

    Raises:
        ValueError: chunk_size 가 1 미만일 때.
    """
    if chunk_size < 1:
        raise ValueError(f'chunk_size must be >= 1, got {chunk_size}')

    pos = as_points(positions)
    nodes = as_points(node_positions)
    count = pos.shape[0]
    indices = np.zeros(count, dtype=np.intp)
    found = np.zeros(count, dtype=bool)
    if count == 0 or nodes.shape[0] == 0:
        return indices, found

    for start in range(0, count, chunk_size):
        stop = min(start + chunk_size, count)
        dist = norms(pos[start:stop, None, :] - nodes[None, :, :])
        in_range = dist <= search_radius
        # argmin 은 동률일 때 첫 인덱스를 반환한다
        indices[start:stop] = np.argmin(
            np.where(in_range, dist, np.inf), axis=1
        )
        found[start:stop] = in_range.any(axis=1)
    return indices, found


def integrate_positions(
    positions: npt.ArrayLike,
    target_positions: npt.ArrayLike,
    target_directions: npt.ArrayLike,
    target_magnitudes: npt.ArrayLike,
    speed_scale: float,
    attraction_force: float,
    delta_time: float,
    velocity_scale: Vector3 | None = None,
) -> npt.NDArray[np.float64]:
    """목표 노드 정보로 (N, 3) 위치를 한 스텝 적분한다.

    v = dir · speed · mag + normalize(target - p) · force
    p' = p + (v ⊙ velocity_scale) · dt
    """
    pos = as_points(positions)
    magnitudes = np.asarray(target_magnitudes, dtype=np.float64)

    velocity = as_points(target_directions) * speed_scale
    velocity = velocity * magnitudes[:, None]
    velocity = velocity + normalize(
        as_points(target_positions) - pos
    ) * attraction_force

    if velocity_scale is not None:
        velocity = velocity * velocity_scale.as_array()

    return pos + velocity * delta_time


def _targets(
    arrays: FieldArrays,
    indices: npt.NDArray[np.intp],
    found: npt.NDArray[np.bool_],
    fallback: NearestFallback,
) -> tuple[
    npt.NDArray[np.float64],
    npt.NDArray[np.float64],
    npt.NDArray[np.float64],
    npt.NDArray[np.bool_],
]:
    target_pos = arrays.positions[indices]
    target_dir = arrays.directions[indices]
    target_mag = arrays.magnitudes[indices]

    if fallback == NearestFallback.LEGACY_ZERO_NODE:
        missing = ~found
        target_pos[missing] = 0.0
        target_dir[missing] = 0.0
        target_mag[missing] = 0.0
        found = np.ones_like(found)
    return target_pos, target_dir, target_mag, found


def find_nearest(
    nodes: VelocityField | Sequence[FieldNode],
    query_position: Vector3,
    search_radius: float,
    fallback: NearestFallback = NearestFallback.NOT_FOUND,
) -> SteeringResult | None:
    """반경 안에서 가장 가까운 노드를 찾는다.

    거리가 같은 노드가 여럿이면 먼저 나온 노드를 선택한다.

    Args:
        nodes: 속도장 또는 노드 시퀀스.
        query_position: 질의 위치.
        search_radius: 탐색 반경 (이 거리 이하의 노드만 후보).
        fallback: 반경 안에 노드가 없을 때의 동작.
            LEGACY_ZERO_NODE 이면 비어 있지 않은 속도장에 대해
            0 값 결과를 반환한다.

    Returns:
        최근접 노드의 SteeringResult, 없으면 None.
    """
    if isinstance(nodes, VelocityField):
        node_seq = nodes.nodes
        arrays = nodes.arrays
    else:
        node_seq = tuple(nodes)
        arrays = FieldArrays.from_nodes(node_seq)

    if not node_seq:
        return None

    indices, found = nearest_node_indices(
        query_position.as_array(), arrays.positions, search_radius,
    )
    if found[0]:
        index = int(indices[0])
        return SteeringResult.from_node(node_seq[index], index)
    if fallback == NearestFallback.LEGACY_ZERO_NODE:
        return SteeringResult.legacy_zero()
    return None


def step_particle(
    particle_position: Vector3,
    steering_result: SteeringResult | None,
    speed_scale: float,
    attraction_force: float,
    delta_time: float,
    velocity_scale: Vector3 | None = None,
) -> Vector3:
    """조향 결과로 파티클 위치를 한 스텝 적분한다.

    Args:
        particle_position: 현재 파티클 위치.
        steering_result: 최근접 노드 결과. None 이면 위치를 그대로 둔다.
        speed_scale: 커브 진행 속도 배율.
        attraction_force: 노드 위치로 끌어당기는 힘.
        delta_time: 스텝 시간 (초).
        velocity_scale: 속도에 성분별로 곱할 호스트 계층 스케일.

    Returns:
        새 파티클 위치.
    """
    if steering_result is None:
        return particle_position

    new_pos = integrate_positions(
        particle_position.as_array(),
        steering_result.target_position.as_array(),
        steering_result.target_velocity.as_array(),
        [steering_result.magnitude],
        speed_scale=speed_scale,
        attraction_force=attraction_force,
        delta_time=delta_time,
        velocity_scale=velocity_scale,
    )
    return Vector3.from_array(new_pos[0])


def steer_particle_batch(
    positions: npt.ArrayLike,
    field: VelocityField,
    speed_scale: float,
    attraction_force: float,
    delta_time: float,
    velocity_scale: Vector3 | None = None,
    fallback: NearestFallback = NearestFallback.NOT_FOUND,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
) -> tuple[npt.NDArray[np.float64], npt.NDArray[np.bool_]]:
    """(N, 3) 파티클 배열 전체를 한 스텝 조향한다.

    Args:
        positions: (N, 3) 파티클 위치.
        field: 속도장 스냅샷.
        speed_scale: 커브 진행 속도 배율.
        attraction_force: 노드 위치로 끌어당기는 힘.
        delta_time: 스텝 시간 (초).
        velocity_scale: 호스트 계층 스케일.
        fallback: 반경 밖 파티클 처리 방식.
        chunk_size: 최근접 탐색을 나누어 처리할 파티클 개수.

    Returns:
        (새 위치 배열, 조향된 파티클 마스크) 튜플.
    """
    pos = as_points(positions)
    count = pos.shape[0]

    if count == 0 or field.is_empty:
        return pos.copy(), np.zeros(count, dtype=bool)

    arrays = field.arrays
    indices, found = nearest_node_indices(
        pos, arrays.positions, field.search_radius, chunk_size=chunk_size,
    )
    target_pos, target_dir, target_mag, found = _targets(
        arrays, indices, found, fallback,
    )

    moved = integrate_positions(
        pos, target_pos, target_dir, target_mag,
        speed_scale=speed_scale,
        attraction_force=attraction_force,
        delta_time=delta_time,
        velocity_scale=velocity_scale,
    )
    new_pos = np.where(found[:, None], moved, pos)
    logger.debug(
        'Steered %d/%d particles', int(found.sum()), count,
    )
    return new_pos, found
