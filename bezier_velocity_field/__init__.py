"""큐빅 베지어 커브 기반 속도장 및 파티클 조향 라이브러리."""

from bezier_velocity_field.domain.curve_math import CurveEvaluator, evaluate
from bezier_velocity_field.domain.magnitude_curve import MagnitudeCurve
from bezier_velocity_field.domain.steering import find_nearest, step_particle
from bezier_velocity_field.domain.value_objects import (
    ControlPoints,
    FieldNode,
    SteeringResult,
    Vector3,
)
from bezier_velocity_field.domain.velocity_field import (
    VelocityField,
    build_velocity_field,
)

__all__ = [
    "ControlPoints",
    "CurveEvaluator",
    "FieldNode",
    "MagnitudeCurve",
    "SteeringResult",
    "Vector3",
    "VelocityField",
    "build_velocity_field",
    "evaluate",
    "find_nearest",
    "step_particle",
]
