from typing import Collection, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.database.unit_of_work import AbstractUnitOfWork
from src.platform.exception.exceptions import NotFoundError, StateConflictError
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.ticketing_metrics import metrics
from src.platform.types.result import as_result
from src.service.ticketing.app.command.post_commit import dispatch_after_commit
from src.service.ticketing.app.interface.i_notification_sender import INotificationSender
from src.service.ticketing.domain.domain_event.order_events import (
    OrderConfirmedEvent,
    OrderPaidEvent,
)
from src.service.ticketing.domain.entity.order_entity import (
    CONFIRMABLE_STATUSES,
    PAYABLE_STATUSES,
    Order,
    OrderStatus,
)


class ChangeOrderStatusUseCase:
    """Confirm (pending -> confirmed) and pay (pending|confirmed -> paid) orders."""

    def __init__(
        self, *, uow: AbstractUnitOfWork, notification_sender: INotificationSender
    ) -> None:
        self.uow = uow
        self.notification_sender = notification_sender

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
    async def confirm_order(self, *, order_id: int) -> Order:
        order = await self._transition(
            order_id=order_id, from_statuses=CONFIRMABLE_STATUSES, to_status=OrderStatus.CONFIRMED
        )
        await dispatch_after_commit(
            self.notification_sender,
            OrderConfirmedEvent(order_id=order_id, customer_email=order.customer.email),
        )
        return order

    @as_result
    @Logger.io
    async def pay_order(self, *, order_id: int) -> Order:
        order = await self._transition(
            order_id=order_id, from_statuses=PAYABLE_STATUSES, to_status=OrderStatus.PAID
        )
        await dispatch_after_commit(
            self.notification_sender,
            OrderPaidEvent(
                order_id=order_id,
                customer_email=order.customer.email,
                total_amount=order.total_amount,
            ),
        )
        return order

    async def _transition(
        self, *, order_id: int, from_statuses: Collection[OrderStatus], to_status: OrderStatus
    ) -> Order:
        async with self.uow:
            order = await self.uow.orders.transition_status(
                order_id=order_id, from_statuses=from_statuses, to_status=to_status
            )
            if order is None:
                current = await self.uow.orders.get_by_id(order_id=order_id)
                metrics.record_transition(to_status=to_status.value, success=False)
                if current is None:
                    raise NotFoundError(f'Order {order_id} not found')
                raise StateConflictError(
                    f'Cannot move order from {current.status} to {to_status}'
                )
            await self.uow.commit()

        metrics.record_transition(to_status=to_status.value, success=True)
        return order
