"""속도장 저장소 인프라 (FieldRepository 구현)."""

from bezier_velocity_field.infra.repository.in_memory_field_repository import (
    InMemoryFieldRepository,
)

__all__ = ["InMemoryFieldRepository"]
