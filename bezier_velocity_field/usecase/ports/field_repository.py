"""속도장 저장소 포트 인터페이스.

현재 속도장 스냅샷의 저장/조회를 추상화한다.
저장은 스냅샷 전체 교체이며, 조회자는 항상 완성된 스냅샷을 받는다.
"""

from abc import ABC, abstractmethod

from bezier_velocity_field.domain.velocity_field import VelocityField


class FieldRepository(ABC):
    """속도장 스냅샷 저장소 인터페이스."""

    @abstractmethod
    def get_field(self) -> VelocityField:
        """현재 속도장 스냅샷을 조회한다.

        Returns:
            최신 VelocityField. 첫 생성 전이면 빈 속도장.
        """

    @abstractmethod
    def save_field(self, field: VelocityField) -> VelocityField:
        """속도장을 새 버전으로 저장한다.

        Args:
            field: 저장할 속도장.

        Returns:
            버전이 부여된 저장된 속도장.
        """

    @property
    @abstractmethod
    def version(self) -> int:
        """현재 저장된 속도장 버전 (미생성 시 0)."""
