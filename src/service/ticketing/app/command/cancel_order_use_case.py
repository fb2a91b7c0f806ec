from collections import Counter
from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends
from opentelemetry import trace

from src.platform.config.di import Container
from src.platform.database.unit_of_work import AbstractUnitOfWork
from src.platform.exception.exceptions import NotFoundError, StateConflictError
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.ticketing_metrics import metrics
from src.platform.types.result import as_result
from src.service.ticketing.app.command.post_commit import dispatch_after_commit
from src.service.ticketing.app.dto.order_details import OrderDetails
from src.service.ticketing.app.interface.i_notification_sender import INotificationSender
from src.service.ticketing.domain.domain_event.order_events import OrderCancelledEvent
from src.service.ticketing.domain.entity.order_entity import CANCELLABLE_STATUSES, OrderStatus


class CancelOrderUseCase:
    """
    Cancel a pending or confirmed order and give its stock back, all in one transaction.

    The order row is switched first with a conditional update, so of two
    concurrent cancellations only one gets past it; the loser rolls back
    before any stock is released twice.
    """

    def __init__(
        self, *, uow: AbstractUnitOfWork, notification_sender: INotificationSender
    ) -> None:
        self.uow = uow
        self.notification_sender = notification_sender
        self.tracer = trace.get_tracer(__name__)

    @classmethod
    @inject
    def depends(
        cls,
        uow: AbstractUnitOfWork = Depends(Provide[Container.unit_of_work]),
        notification_sender: INotificationSender = Depends(
            Provide[Container.notification_sender]
        ),
    ) -> Self:
        return cls(uow=uow, notification_sender=notification_sender)

    @as_result
    @Logger.io
    async def cancel_order(self, *, order_id: int) -> OrderDetails:
        with self.tracer.start_as_current_span(
            'use_case.cancel_order', attributes={'order.id': order_id}
        ):
            async with self.uow:
                order = await self.uow.orders.get_by_id(order_id=order_id)
                if order is None:
                    raise NotFoundError(f'Order {order_id} not found')
                order.ensure_can_transition_to(OrderStatus.CANCELLED)

                cancelled = await self.uow.orders.transition_status(
                    order_id=order_id,
                    from_statuses=CANCELLABLE_STATUSES,
                    to_status=OrderStatus.CANCELLED,
                )
                if cancelled is None:
                    raise StateConflictError(f'Order {order_id} was changed concurrently')

                tickets = await self.uow.tickets.list_by_order(order_id=order_id)
                released = Counter(t.ticket_type_id for t in tickets if not t.cancelled)
                # Fixed lock order across concurrent cancellations
                for ticket_type_id in sorted(released):
                    await self.uow.inventory_ledger.release(
                        ticket_type_id=ticket_type_id, count=released[ticket_type_id]
                    )

                await self.uow.tickets.cancel_by_order(order_id=order_id)
                tickets = await self.uow.tickets.list_by_order(order_id=order_id)
                await self.uow.commit()

        metrics.record_order_cancelled(released_count=sum(released.values()))
        Logger.base.info(
            f'🚫 [CancelOrder] Order {cancelled.order_number} cancelled, released {dict(released)}'
        )
        await dispatch_after_commit(
            self.notification_sender,
            OrderCancelledEvent(
                order_id=order_id,
                customer_email=cancelled.customer.email,
                released=dict(released),
            ),
        )
        return OrderDetails(order=cancelled, tickets=tickets)
