"""속도장/리본/파티클 결과의 YAML 직렬화.

도메인 값 객체 ↔ YAML 호환 dict 변환을 담당한다.
시각화 등 외부 소비자가 읽는 보고서 형식은 이 모듈에서만 정의한다.
"""

from __future__ import annotations

from typing import Any

import numpy as np
import numpy.typing as npt
import yaml

from bezier_velocity_field.domain.curve_math import CurvePolyline
from bezier_velocity_field.domain.ribbon import RibbonMesh
from bezier_velocity_field.domain.value_objects.control_points import (
    ControlPoints,
)
from bezier_velocity_field.domain.value_objects.field_node import FieldNode
from bezier_velocity_field.domain.value_objects.vector import Vector3
from bezier_velocity_field.domain.velocity_field import VelocityField


# -- 직렬화 (도메인 → dict) --

def _vector(value: Vector3) -> list[float]:
    return [float(value.x), float(value.y), float(value.z)]


def _array(values: npt.NDArray[Any]) -> list[Any]:
    """numpy 배열을 파이썬 기본 타입 리스트로 변환한다."""
    return np.asarray(values).tolist()


def serialize_control_points(control_points: ControlPoints) -> dict[str, Any]:
    return {
        'p0': _vector(control_points.p0),
        'p0_tangent': _vector(control_points.p0_tangent),
        'p1_tangent': _vector(control_points.p1_tangent),
        'p1': _vector(control_points.p1),
    }


def serialize_field(field: VelocityField) -> dict[str, Any]:
    """VelocityField를 dict로 변환한다. 노드별 시각화 음영을 포함한다."""
    shades = field.magnitude_shades()
    return {
        'version': field.version,
        'resolution': field.resolution,
        'search_radius': float(field.search_radius),
        'nodes': [
            {
                'position': _vector(node.position),
                'velocity_direction': _vector(node.velocity_direction),
                'magnitude': float(node.magnitude),
                'shade': float(shade),
            }
            for node, shade in zip(field.nodes, shades)
        ],
    }


def serialize_polyline(polyline: CurvePolyline) -> dict[str, Any]:
    return {
        'points': [_vector(p) for p in polyline.points],
        'segment_lengths': [float(d) for d in polyline.segment_lengths],
    }


def serialize_ribbon(mesh: RibbonMesh) -> dict[str, Any]:
    return {
        'vertices': _array(mesh.vertices),
        'uvs': _array(mesh.uvs),
        'triangles': _array(mesh.triangles),
    }


def serialize_particles(positions: npt.NDArray[np.float64]) -> list[list[float]]:
    return _array(np.asarray(positions, dtype=np.float64).reshape(-1, 3))


def dump_report(report: dict[str, Any]) -> str:
    """보고서 dict를 YAML 문자열로 직렬화한다."""
    return yaml.safe_dump(report, sort_keys=False, default_flow_style=None)


# -- 역직렬화 (dict → 도메인) --

def _parse_node(data: dict[str, Any]) -> FieldNode:
    return FieldNode(
        position=Vector3.from_iterable(data['position']),
        velocity_direction=Vector3.from_iterable(data['velocity_direction']),
        magnitude=float(data['magnitude']),
    )


def deserialize_field(data: dict[str, Any]) -> VelocityField:
    """serialize_field() 결과를 VelocityField로 복원한다."""
    return VelocityField(
        nodes=tuple(_parse_node(n) for n in data.get('nodes', [])),
        search_radius=float(data.get('search_radius', 5.0)),
        resolution=int(data.get('resolution', 0)),
        version=int(data.get('version', 0)),
    )


def load_report(payload: str) -> dict[str, Any]:
    """YAML 보고서 문자열을 dict로 읽는다."""
    data = yaml.safe_load(payload)
    return data if isinstance(data, dict) else {}
