"""도메인 값 객체 (불변, 동등성 기반 비교)."""

from bezier_velocity_field.domain.value_objects.control_points import (
    ControlPoints,
)
from bezier_velocity_field.domain.value_objects.field_node import (
    FieldNode,
    SteeringResult,
)
from bezier_velocity_field.domain.value_objects.vector import Vector3

__all__ = [
    'ControlPoints',
    'FieldNode',
    'SteeringResult',
    'Vector3',
]
