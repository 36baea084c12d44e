"""Bezier Velocity Field 유스케이스 레이어.

도메인 로직을 포트를 통해 조율하는 애플리케이션 서비스를 정의한다.
domain 레이어만 의존하며, infra 레이어 의존성은 없다.
"""

from bezier_velocity_field.usecase.extrude_ribbon import ExtrudeRibbon
from bezier_velocity_field.usecase.rebuild_velocity_field import (
    RebuildVelocityField,
)
from bezier_velocity_field.usecase.steer_particles import SteerParticles

__all__ = [
    "ExtrudeRibbon",
    "RebuildVelocityField",
    "SteerParticles",
]
