"""유스케이스 포트 인터페이스 (ABC).

infra 레이어에서 구현해야 하는 추상 인터페이스를 정의한다.
"""

from bezier_velocity_field.usecase.ports.config_port import (
    AppConfig,
    ConfigPort,
    CurveConfig,
    FieldConfig,
    RibbonConfig,
    SteeringConfig,
)
from bezier_velocity_field.usecase.ports.event_publisher import EventPublisher
from bezier_velocity_field.usecase.ports.field_repository import (
    FieldRepository,
)
from bezier_velocity_field.usecase.ports.particle_system import ParticleSystem

__all__ = [
    "AppConfig",
    "ConfigPort",
    "CurveConfig",
    "EventPublisher",
    "FieldConfig",
    "FieldRepository",
    "ParticleSystem",
    "RibbonConfig",
    "SteeringConfig",
]
