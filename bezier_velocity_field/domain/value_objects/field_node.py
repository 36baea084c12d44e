"""속도장 노드 및 조향 결과 값 객체."""

from __future__ import annotations

from dataclasses import dataclass

from bezier_velocity_field.domain.value_objects.vector import Vector3


@dataclass(frozen=True)
class FieldNode:
    """커브 위 한 샘플의 속도장 정보.

    Args:
        position: 노드 위치 (다음 샘플로 전진하기 전의 커브 점).
        velocity_direction: 다음 샘플을 향하는 단위 벡터 (퇴화 시 영벡터).
        magnitude: 크기 보정 커브로 계산한 속도 크기.
    """

    position: Vector3
    velocity_direction: Vector3
    magnitude: float


@dataclass(frozen=True)
class SteeringResult:
    """최근접 노드 탐색 결과.

    Args:
        target_position: 목표 위치.
        target_velocity: 목표 속도 방향.
        magnitude: 속도 크기.
        node_index: 속도장 내 노드 인덱스. 레거시 영 노드이면 -1.
    """

    target_position: Vector3
    target_velocity: Vector3
    magnitude: float
    node_index: int = -1

    @classmethod
    def from_node(cls, node: FieldNode, index: int) -> SteeringResult:
        return cls(
            target_position=node.position,
            target_velocity=node.velocity_direction,
            magnitude=node.magnitude,
            node_index=index,
        )

    @classmethod
    def legacy_zero(cls) -> SteeringResult:
        """반경 밖 폴백에서 사용하던 0 값 노드."""
        return cls(
            target_position=Vector3.zero(),
            target_velocity=Vector3.zero(),
            magnitude=0.0,
            node_index=-1,
        )
