"""인메모리 속도장 저장소 구현체."""

import threading

from bezier_velocity_field.domain.velocity_field import VelocityField
from bezier_velocity_field.usecase.ports.field_repository import (
    FieldRepository,
)


class InMemoryFieldRepository(FieldRepository):
    """FieldRepository의 인메모리 구현체.

    불변 스냅샷을 Lock 으로 교체하므로 조향 중인 스레드는
    재생성 도중의 불완전한 속도장을 보지 않는다.

    Args:
        search_radius: 첫 생성 전 빈 속도장의 탐색 반경.
    """

    def __init__(self, search_radius: float = 5.0) -> None:
        self._lock = threading.Lock()
        self._field = VelocityField.empty(search_radius)

    def get_field(self) -> VelocityField:
        with self._lock:
            return self._field

    def save_field(self, field: VelocityField) -> VelocityField:
        with self._lock:
            self._field = field.with_version(self._field.version + 1)
            return self._field

    @property
    def version(self) -> int:
        with self._lock:
            return self._field.version
