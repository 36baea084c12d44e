"""이벤트 발행 포트 인터페이스.

유스케이스가 속도장 재생성, 조향 결과, 협력 객체 누락을
호스트(시각화, 로깅 등)에 알리는 통로이다.
"""

from abc import ABC, abstractmethod
from collections.abc import Callable

from bezier_velocity_field.domain.events.field_events import DomainEvent


class EventPublisher(ABC):
    """도메인 이벤트 발행자 인터페이스."""

    @abstractmethod
    def publish(self, event: DomainEvent) -> None:
        """이벤트를 구독자에게 전달한다."""

    @abstractmethod
    def subscribe(
        self,
        event_type: type[DomainEvent],
        handler: Callable[[DomainEvent], None],
    ) -> None:
        """event_type 과 그 하위 타입 이벤트를 받을 핸들러를 등록한다."""

    @abstractmethod
    def unsubscribe(
        self,
        event_type: type[DomainEvent],
        handler: Callable[[DomainEvent], None],
    ) -> bool:
        """등록된 핸들러를 제거하고 제거 여부를 반환한다."""
