"""
Order and ticket domain events

Recorded by use cases and handed to the notification sender only after the
transaction that produced them has committed.
"""

from datetime import datetime
from decimal import Decimal
from typing import Optional, Union

import attrs

from src.service.ticketing.domain.entity.order_entity import Order
from src.service.ticketing.domain.entity.ticket_entity import Ticket


@attrs.define
class OrderCreatedEvent:
    order_id: int
    order_number: Optional[str]
    customer_id: int
    customer_email: str
    total_amount: Decimal
    ticket_ids: list[int]

    @classmethod
    def from_order(cls, *, order: Order, tickets: list[Ticket]) -> 'OrderCreatedEvent':
        return cls(
            order_id=order.id,  # type: ignore[arg-type]
            order_number=order.order_number,
            customer_id=order.customer_id,
            customer_email=order.customer.email,
            total_amount=order.total_amount,
            ticket_ids=[t.id for t in tickets if t.id is not None],
        )


@attrs.define
class OrderConfirmedEvent:
    order_id: int
    customer_email: str


@attrs.define
class OrderPaidEvent:
    order_id: int
    customer_email: str
    total_amount: Decimal


@attrs.define
class OrderCancelledEvent:
    order_id: int
    customer_email: str
    released: dict[int, int]  # ticket_type_id -> count


@attrs.define
class TicketScannedEvent:
    ticket_id: int
    order_id: int
    scanned_at: datetime


OrderDomainEvent = Union[
    OrderCreatedEvent,
    OrderConfirmedEvent,
    OrderPaidEvent,
    OrderCancelledEvent,
    TicketScannedEvent,
]
