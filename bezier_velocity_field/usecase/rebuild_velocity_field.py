"""속도장 재생성 유스케이스.

호스트가 제어점 변경 시점에 명시적으로 호출하여
속도장을 전체 재계산하고 저장소의 스냅샷을 교체한다.
"""

import logging

from bezier_velocity_field.domain.events.field_events import (
    CollaboratorMissingEvent,
    VelocityFieldRebuiltEvent,
)
from bezier_velocity_field.domain.value_objects.control_points import (
    ControlPoints,
)
from bezier_velocity_field.domain.velocity_field import (
    VelocityField,
    build_velocity_field,
)
from bezier_velocity_field.usecase.ports.config_port import FieldConfig
from bezier_velocity_field.usecase.ports.event_publisher import EventPublisher
from bezier_velocity_field.usecase.ports.field_repository import (
    FieldRepository,
)

logger = logging.getLogger(__name__)


class RebuildVelocityField:
    """속도장 재생성 유스케이스.

    제어점 수신 → 속도장 계산 → 저장소 교체 → 이벤트 발행.

    Args:
        field_repo: 속도장 저장소.
        event_publisher: 이벤트 발행자.
        config: 속도장 생성 설정.
    """

    def __init__(
        self,
        field_repo: FieldRepository,
        event_publisher: EventPublisher,
        config: FieldConfig,
    ) -> None:
        self._field_repo = field_repo
        self._event_publisher = event_publisher
        self._config = config

    def execute(
        self, control_points: ControlPoints | None,
    ) -> VelocityField | None:
        """속도장을 재생성한다.

        Args:
            control_points: 커브 제어점. None 이면 커브가 지정되지 않은 것으로
                보고 이번 스텝을 건너뛴다.

        Returns:
            저장된 새 속도장 또는 건너뛴 경우 None.
        """
        if control_points is None:
            logger.error("No curve assigned, skipping velocity field rebuild")
            self._event_publisher.publish(
                CollaboratorMissingEvent(
                    collaborator="curve", operation="rebuild_velocity_field",
                )
            )
            return None

        field = build_velocity_field(
            control_points,
            resolution=self._config.resolution,
            magnitude_curve=self._config.magnitude_curve,
            search_radius=self._config.search_radius,
        )
        saved = self._field_repo.save_field(field)

        logger.info(
            "Velocity field rebuilt: version=%d, nodes=%d",
            saved.version, len(saved),
        )
        self._event_publisher.publish(
            VelocityFieldRebuiltEvent(
                version=saved.version,
                node_count=len(saved),
                resolution=saved.resolution,
            )
        )
        return saved
