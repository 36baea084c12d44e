"""속도장 도메인 이벤트."""

from bezier_velocity_field.domain.events.field_events import (
    CollaboratorMissingEvent,
    DomainEvent,
    ParticlesSteeredEvent,
    RibbonExtrudedEvent,
    VelocityFieldRebuiltEvent,
)

__all__ = [
    "CollaboratorMissingEvent",
    "DomainEvent",
    "ParticlesSteeredEvent",
    "RibbonExtrudedEvent",
    "VelocityFieldRebuiltEvent",
]
