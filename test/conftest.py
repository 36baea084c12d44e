"""공통 테스트 fixture."""

import pytest

from bezier_velocity_field.domain.magnitude_curve import MagnitudeCurve
from bezier_velocity_field.domain.value_objects.control_points import (
    ControlPoints,
)
from bezier_velocity_field.domain.value_objects.field_node import FieldNode
from bezier_velocity_field.domain.value_objects.vector import Vector3
from bezier_velocity_field.domain.velocity_field import (
    VelocityField,
    build_velocity_field,
)
from bezier_velocity_field.usecase.ports.config_port import (
    AppConfig,
    FieldConfig,
    SteeringConfig,
)


@pytest.fixture
def sample_control_points():
    """P0=(10,0,0) → P1=(-10,0,0) 대칭 S 커브."""
    return ControlPoints(
        p0=Vector3(10.0, 0.0, 0.0),
        p0_tangent=Vector3(10.0, 0.0, 10.0),
        p1_tangent=Vector3(-10.0, 0.0, -10.0),
        p1=Vector3(-10.0, 0.0, 0.0),
    )


@pytest.fixture
def straight_control_points():
    """Z 축 위 (0,0,0) → (0,0,3) 등간격 직선."""
    return ControlPoints(
        p0=Vector3(0.0, 0.0, 0.0),
        p0_tangent=Vector3(0.0, 0.0, 1.0),
        p1_tangent=Vector3(0.0, 0.0, 2.0),
        p1=Vector3(0.0, 0.0, 3.0),
    )


@pytest.fixture
def unit_curve():
    return MagnitudeCurve.constant(1.0)


@pytest.fixture
def sample_field(sample_control_points):
    return build_velocity_field(
        sample_control_points,
        resolution=24,
        magnitude_curve=MagnitudeCurve.ease_in_out(0.0, 0.8, 1.0, 1.0),
        search_radius=5.0,
    )


@pytest.fixture
def three_node_field():
    """원점에서 거리 1, 2, 3 인 노드 3개."""
    return VelocityField(
        nodes=(
            FieldNode(Vector3(1.0, 0.0, 0.0), Vector3(1.0, 0.0, 0.0), 1.0),
            FieldNode(Vector3(0.0, 2.0, 0.0), Vector3(0.0, 1.0, 0.0), 2.0),
            FieldNode(Vector3(0.0, 0.0, 3.0), Vector3(0.0, 0.0, 1.0), 3.0),
        ),
        search_radius=2.5,
        resolution=3,
    )


@pytest.fixture
def sample_config():
    return AppConfig(
        velocity_field=FieldConfig(resolution=24, search_radius=5.0),
        steering=SteeringConfig(speed_on_curve=1.0, force_to_nearest_curve=0.0),
    )
