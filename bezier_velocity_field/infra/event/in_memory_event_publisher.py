"""인메모리 도메인 이벤트 발행자 구현체."""

from collections import defaultdict
from collections.abc import Callable
import logging
import threading

from bezier_velocity_field.domain.events.field_events import DomainEvent
from bezier_velocity_field.usecase.ports.event_publisher import EventPublisher

logger = logging.getLogger(__name__)

EventHandler = Callable[[DomainEvent], None]


class InMemoryEventPublisher(EventPublisher):
    """EventPublisher의 인메모리 구현체.

    동기 방식으로 이벤트를 핸들러에 전달한다.
    상위 이벤트 타입(예: DomainEvent)에 등록한 핸들러도
    하위 타입 이벤트를 함께 받는다.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._handlers: dict[
            type[DomainEvent], list[EventHandler]
        ] = defaultdict(list)

    def publish(self, event: DomainEvent) -> None:
        """도메인 이벤트를 발행한다.

        구체 타입 핸들러부터 상위 타입 순서로 호출한다.
        개별 핸들러의 예외는 로깅 후 다음 핸들러로 진행한다.
        """
        event_type = type(event)
        with self._lock:
            handlers = [
                handler
                for cls in event_type.__mro__
                if cls in self._handlers
                for handler in self._handlers[cls]
            ]

        logger.debug(
            "Publishing event: %s (handlers=%d)",
            event_type.__name__, len(handlers),
        )

        for handler in handlers:
            try:
                handler(event)
            except Exception:
                logger.exception(
                    "Error in event handler for %s", event_type.__name__
                )

    def subscribe(
        self,
        event_type: type[DomainEvent],
        handler: EventHandler,
    ) -> None:
        with self._lock:
            self._handlers[event_type].append(handler)
        logger.debug("Subscribed to event: %s", event_type.__name__)

    def unsubscribe(
        self,
        event_type: type[DomainEvent],
        handler: EventHandler,
    ) -> bool:
        """등록된 핸들러를 제거한다.

        Returns:
            제거했으면 True, 등록되어 있지 않았으면 False.
        """
        with self._lock:
            handlers = self._handlers.get(event_type)
            if not handlers or handler not in handlers:
                return False
            handlers.remove(handler)
            if not handlers:
                del self._handlers[event_type]
        return True
