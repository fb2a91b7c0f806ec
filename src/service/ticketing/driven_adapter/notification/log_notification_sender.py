"""Notification sender that writes customer emails to the log instead of delivering them."""

from datetime import datetime, timezone
from functools import singledispatchmethod
from typing import Any, List

from src.platform.logging.loguru_io import Logger
from src.service.ticketing.app.interface.i_notification_sender import INotificationSender
from src.service.ticketing.domain.domain_event.order_events import (
    OrderCancelledEvent,
    OrderConfirmedEvent,
    OrderCreatedEvent,
    OrderDomainEvent,
    OrderPaidEvent,
    TicketScannedEvent,
)


class LogNotificationSender(INotificationSender):
    def __init__(self) -> None:
        self.sent: List[dict[str, Any]] = []  # kept for inspection in tests

    @Logger.io
    async def send(self, *, event: OrderDomainEvent) -> None:
        message = self._render(event)
        if message is None:
            return
        to, subject, body = message
        self.sent.append(
            {'to': to, 'subject': subject, 'body': body, 'sent_at': datetime.now(timezone.utc)}
        )
        Logger.base.info(f'📧 [Notification] to={to} subject="{subject}"')

    @singledispatchmethod
    def _render(self, event: Any) -> tuple[str, str, str] | None:
        return None

    @_render.register
    def _(self, event: OrderCreatedEvent) -> tuple[str, str, str]:
        return (
            event.customer_email,
            f'Order Received - {event.order_number}',
            f'We reserved {len(event.ticket_ids)} ticket(s) for you. Total: {event.total_amount}.',
        )

    @_render.register
    def _(self, event: OrderConfirmedEvent) -> tuple[str, str, str]:
        return (
            event.customer_email,
            f'Order Confirmed - TIX-{event.order_id:06d}',
            'Your order is confirmed.',
        )

    @_render.register
    def _(self, event: OrderPaidEvent) -> tuple[str, str, str]:
        return (
            event.customer_email,
            f'Payment Received - TIX-{event.order_id:06d}',
            f'We received your payment of {event.total_amount}. Your tickets are attached.',
        )

    @_render.register
    def _(self, event: OrderCancelledEvent) -> tuple[str, str, str]:
        released = sum(event.released.values())
        return (
            event.customer_email,
            f'Order Cancelled - TIX-{event.order_id:06d}',
            f'Your order was cancelled and {released} ticket(s) were released.',
        )

    @_render.register
    def _(self, event: TicketScannedEvent) -> None:
        # Scans are not customer-facing
        return None
