"""Domain Events"""

from src.service.ticketing.domain.domain_event.order_events import (
    OrderCancelledEvent,
    OrderConfirmedEvent,
    OrderCreatedEvent,
    OrderDomainEvent,
    OrderPaidEvent,
    TicketScannedEvent,
)

__all__ = [
    'OrderCancelledEvent',
    'OrderConfirmedEvent',
    'OrderCreatedEvent',
    'OrderDomainEvent',
    'OrderPaidEvent',
    'TicketScannedEvent',
]
