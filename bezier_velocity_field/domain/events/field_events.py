"""속도장 도메인 이벤트 정의.

도메인 레이어에서 발생하는 이벤트를 정의한다.
시각화/호스트 어댑터가 이벤트를 구독하여 결과를 소비한다.
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime


@dataclass(frozen=True)
class DomainEvent:
    """도메인 이벤트 기본 클래스.

    Args:
        timestamp: 이벤트 발생 시각 (UTC).
    """

    timestamp: datetime = field(default_factory=lambda: datetime.now(UTC))


@dataclass(frozen=True)
class VelocityFieldRebuiltEvent(DomainEvent):
    """속도장 재생성 완료 이벤트.

    Args:
        version: 저장된 속도장 버전.
        node_count: 노드 개수.
        resolution: 사용한 해상도.
    """

    version: int = 0
    node_count: int = 0
    resolution: int = 0


@dataclass(frozen=True)
class ParticlesSteeredEvent(DomainEvent):
    """파티클 조향 스텝 완료 이벤트.

    Args:
        field_version: 조향에 사용한 속도장 버전.
        steered_count: 이동한 파티클 수.
        skipped_count: 반경 밖이라 건너뛴 파티클 수.
    """

    field_version: int = 0
    steered_count: int = 0
    skipped_count: int = 0


@dataclass(frozen=True)
class RibbonExtrudedEvent(DomainEvent):
    """리본 메시 생성 이벤트.

    Args:
        vertex_count: 정점 수.
        triangle_count: 삼각형 수.
    """

    vertex_count: int = 0
    triangle_count: int = 0


@dataclass(frozen=True)
class CollaboratorMissingEvent(DomainEvent):
    """필수 협력 객체가 없어 스텝을 건너뛴 이벤트.

    Args:
        collaborator: 누락된 협력 객체 이름.
        operation: 건너뛴 작업 이름.
    """

    collaborator: str = ""
    operation: str = ""
