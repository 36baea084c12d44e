"""파티클 조향 유스케이스.

저장소의 속도장 스냅샷 하나를 읽어 파티클 버퍼 전체를 한 스텝 이동시킨다.
"""

import logging

from bezier_velocity_field.domain.events.field_events import (
    CollaboratorMissingEvent,
    ParticlesSteeredEvent,
)
from bezier_velocity_field.domain.steering import steer_particle_batch
from bezier_velocity_field.usecase.ports.config_port import SteeringConfig
from bezier_velocity_field.usecase.ports.event_publisher import EventPublisher
from bezier_velocity_field.usecase.ports.field_repository import (
    FieldRepository,
)
from bezier_velocity_field.usecase.ports.particle_system import ParticleSystem

logger = logging.getLogger(__name__)


class SteerParticles:
    """파티클 조향 유스케이스.

    Args:
        field_repo: 속도장 저장소.
        event_publisher: 이벤트 발행자.
        config: 조향 설정.
    """

    def __init__(
        self,
        field_repo: FieldRepository,
        event_publisher: EventPublisher,
        config: SteeringConfig,
    ) -> None:
        self._field_repo = field_repo
        self._event_publisher = event_publisher
        self._config = config

    def step(
        self, particle_system: ParticleSystem | None, delta_time: float,
    ) -> int:
        """모든 살아있는 파티클을 delta_time 만큼 조향한다.

        Args:
            particle_system: 파티클 버퍼. None 이면 스텝을 건너뛴다.
            delta_time: 스텝 시간 (초).

        Returns:
            이동한 파티클 수.
        """
        if particle_system is None:
            logger.error("There is no particle system, skipping steering step")
            self._event_publisher.publish(
                CollaboratorMissingEvent(
                    collaborator="particle_system", operation="steer_particles",
                )
            )
            return 0

        field = self._field_repo.get_field()
        positions = particle_system.get_positions()
        count = len(positions)
        if count == 0:
            return 0

        new_positions, found = steer_particle_batch(
            positions,
            field,
            speed_scale=self._config.speed_on_curve,
            attraction_force=self._config.force_to_nearest_curve,
            delta_time=delta_time,
            velocity_scale=self._config.velocity_scale,
            fallback=self._config.fallback,
        )
        particle_system.set_positions(new_positions)

        steered = int(found.sum())
        logger.debug(
            "Steering step: field_version=%d, steered=%d, skipped=%d",
            field.version, steered, count - steered,
        )
        self._event_publisher.publish(
            ParticlesSteeredEvent(
                field_version=field.version,
                steered_count=steered,
                skipped_count=count - steered,
            )
        )
        return steered
