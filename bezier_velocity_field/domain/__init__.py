"""베지어 커브, 속도장, 조향 도메인 레이어.

외부 엔진이나 I/O 에 의존하지 않는 순수 계산만 포함한다.
"""

from bezier_velocity_field.domain.curve_math import (
    CurveEvaluator,
    CurvePolyline,
    evaluate,
)
from bezier_velocity_field.domain.magnitude_curve import (
    Keyframe,
    MagnitudeCurve,
)
from bezier_velocity_field.domain.ribbon import (
    MeshRibbonExtruder,
    RibbonMesh,
    RibbonSettings,
)
from bezier_velocity_field.domain.steering import (
    find_nearest,
    steer_particle_batch,
    step_particle,
)
from bezier_velocity_field.domain.velocity_field import (
    VelocityField,
    VelocityFieldBuilder,
    build_velocity_field,
    remap,
)

__all__ = [
    'CurveEvaluator',
    'CurvePolyline',
    'Keyframe',
    'MagnitudeCurve',
    'MeshRibbonExtruder',
    'RibbonMesh',
    'RibbonSettings',
    'VelocityField',
    'VelocityFieldBuilder',
    'build_velocity_field',
    'evaluate',
    'find_nearest',
    'remap',
    'steer_particle_batch',
    'step_particle',
]
