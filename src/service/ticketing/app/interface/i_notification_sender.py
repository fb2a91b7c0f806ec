from abc import ABC, abstractmethod

from src.service.ticketing.domain.domain_event.order_events import OrderDomainEvent


class INotificationSender(ABC):
    """Delivers customer-facing notifications for committed order changes."""

    @abstractmethod
    async def send(self, *, event: OrderDomainEvent) -> None:
        pass
