"""결과 보고서 직렬화 인프라."""

from bezier_velocity_field.infra.serialization.field_serializer import (
    deserialize_field,
    dump_report,
    load_report,
    serialize_control_points,
    serialize_field,
    serialize_particles,
    serialize_polyline,
    serialize_ribbon,
)

__all__ = [
    "deserialize_field",
    "dump_report",
    "load_report",
    "serialize_control_points",
    "serialize_field",
    "serialize_particles",
    "serialize_polyline",
    "serialize_ribbon",
]
