"""리본 메시 생성 유스케이스."""

import logging

from bezier_velocity_field.domain.curve_math import CurveEvaluator
from bezier_velocity_field.domain.events.field_events import (
    CollaboratorMissingEvent,
    RibbonExtrudedEvent,
)
from bezier_velocity_field.domain.ribbon import MeshRibbonExtruder, RibbonMesh
from bezier_velocity_field.domain.value_objects.control_points import (
    ControlPoints,
)
from bezier_velocity_field.usecase.ports.config_port import RibbonConfig
from bezier_velocity_field.usecase.ports.event_publisher import EventPublisher

logger = logging.getLogger(__name__)


class ExtrudeRibbon:
    """커브를 따라 리본 메시를 생성하는 유스케이스.

    Args:
        event_publisher: 이벤트 발행자.
        config: 리본 설정.
    """

    def __init__(
        self, event_publisher: EventPublisher, config: RibbonConfig,
    ) -> None:
        self._event_publisher = event_publisher
        self._config = config
        self._extruder = MeshRibbonExtruder(config.settings)

    def execute(self, control_points: ControlPoints | None) -> RibbonMesh | None:
        """리본 메시를 생성한다.

        리본이 비활성화되어 있거나 커브가 없으면 None 을 반환한다.
        """
        if not self._config.enabled:
            return None

        if control_points is None:
            logger.error("No curve assigned, skipping ribbon extrusion")
            self._event_publisher.publish(
                CollaboratorMissingEvent(
                    collaborator="curve", operation="extrude_ribbon",
                )
            )
            return None

        mesh = self._extruder.extrude(CurveEvaluator(control_points))
        logger.info(
            "Ribbon extruded: vertices=%d, triangles=%d",
            mesh.vertex_count, mesh.triangle_count,
        )
        self._event_publisher.publish(
            RibbonExtrudedEvent(
                vertex_count=mesh.vertex_count,
                triangle_count=mesh.triangle_count,
            )
        )
        return mesh
