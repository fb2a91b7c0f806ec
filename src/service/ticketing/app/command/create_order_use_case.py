import time
from typing import List, Optional, Self, Sequence

from dependency_injector.wiring import Provide, inject
from fastapi import Depends
from opentelemetry import trace

from src.platform.config.core_setting import settings
from src.platform.config.di import Container
from src.platform.database.unit_of_work import AbstractUnitOfWork
from src.platform.exception.exceptions import (
    CapacityError,
    IntegrityConflictError,
    ValidationError,
)
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.ticketing_metrics import metrics
from src.platform.types.result import as_result
from src.service.ticketing.app.command.post_commit import dispatch_after_commit
from src.service.ticketing.app.dto.order_details import OrderDetails
from src.service.ticketing.app.interface.i_notification_sender import INotificationSender
from src.service.ticketing.domain.domain_event.order_events import OrderCreatedEvent
from src.service.ticketing.domain.entity.order_entity import Order, compute_total
from src.service.ticketing.domain.entity.ticket_entity import Ticket
from src.service.ticketing.domain.entity.ticket_type_entity import TicketType
from src.service.ticketing.domain.qr_code import generate_qr_code
from src.service.ticketing.domain.value_object.customer_info import CustomerInfo
from src.service.ticketing.domain.value_object.line_item import LineItem, merge_line_items


class CreateOrderUseCase:
    """
    Turn a purchase request into one pending order plus one ticket per unit, or change nothing.

    Flow (single transaction):
    1. Validate customer and line items (repeated ticket types are merged)
    2. Load ticket types and fail fast when any line cannot be fulfilled
    3. Compute the exact decimal total and insert the order
    4. Per line, by ascending ticket type id: conditional stock decrement, then insert `quantity` tickets
    5. Commit; notifications go out only after the commit

    A qr_code collision aborts the attempt with IntegrityConflictError; the whole
    purchase is retried with fresh codes up to ORDER_CREATE_MAX_ATTEMPTS times.
    """

    def __init__(
        self,
        *,
        uow: AbstractUnitOfWork,
        notification_sender: INotificationSender,
        max_attempts: Optional[int] = None,
    ) -> None:
        self.uow = uow
        self.notification_sender = notification_sender
        self.max_attempts = max_attempts or settings.ORDER_CREATE_MAX_ATTEMPTS
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
    async def create_order(
        self, *, customer: CustomerInfo, line_items: Sequence[LineItem]
    ) -> OrderDetails:
        started = time.perf_counter()
        customer = customer.normalized()
        items = merge_line_items(
            line_items,
            max_items=settings.MAX_LINE_ITEMS_PER_ORDER,
            max_quantity=settings.MAX_QUANTITY_PER_LINE_ITEM,
        )

        with self.tracer.start_as_current_span(
            'use_case.create_order',
            attributes={
                'order.customer_id': customer.customer_id,
                'order.line_items': len(items),
            },
        ):
            for attempt in range(1, self.max_attempts + 1):
                try:
                    details = await self._place_order(customer=customer, items=items)
                    break
                except IntegrityConflictError:
                    if attempt == self.max_attempts:
                        raise
                    metrics.order_create_retries.inc()
                    Logger.base.warning(
                        f'🔁 [CreateOrder] Integrity conflict on attempt {attempt}, retrying'
                    )
                except CapacityError as e:
                    metrics.record_capacity_rejection(ticket_type_id=e.ticket_type_id)
                    raise

        metrics.record_order_created(
            ticket_count=len(details.tickets), duration=time.perf_counter() - started
        )
        Logger.base.info(
            f'🎫 [CreateOrder] Order {details.order.order_number} placed with {len(details.tickets)} tickets'
        )
        await dispatch_after_commit(
            self.notification_sender,
            OrderCreatedEvent.from_order(order=details.order, tickets=details.tickets),
        )
        return details

    async def _place_order(self, *, customer: CustomerInfo, items: List[LineItem]) -> OrderDetails:
        async with self.uow:
            if not await self.uow.orders.customer_exists(customer_id=customer.customer_id):
                raise ValidationError(f'Customer {customer.customer_id} not found')

            ticket_types = await self.uow.ticket_types.get_many(
                ticket_type_ids=[item.ticket_type_id for item in items]
            )
            self._check_availability(items=items, ticket_types=ticket_types)

            total = compute_total(
                (ticket_types[item.ticket_type_id].price, item.quantity) for item in items
            )
            order = await self.uow.orders.create(
                order=Order.create(customer=customer, total_amount=total)
            )

            tickets: List[Ticket] = []
            # Ascending ticket_type_id, the same lock order cancel_order releases in
            for item in sorted(items, key=lambda i: i.ticket_type_id):
                # Authoritative check: fails with CapacityError if stock moved since the read above
                await self.uow.inventory_ledger.reserve(
                    ticket_type_id=item.ticket_type_id, count=item.quantity
                )
                tickets.extend(
                    await self.uow.tickets.create_many(
                        tickets=[
                            Ticket.issue(
                                order_id=order.id,  # type: ignore[arg-type]
                                ticket_type_id=item.ticket_type_id,
                                qr_code=generate_qr_code(),
                            )
                            for _ in range(item.quantity)
                        ]
                    )
                )

            await self.uow.commit()

        return OrderDetails(order=order, tickets=tickets)

    @staticmethod
    def _check_availability(
        *, items: List[LineItem], ticket_types: dict[int, TicketType]
    ) -> None:
        for item in items:
            if item.ticket_type_id not in ticket_types:
                raise ValidationError(f'Ticket type {item.ticket_type_id} not found')
        for item in items:
            ticket_type = ticket_types[item.ticket_type_id]
            if not ticket_type.can_fulfill(item.quantity):
                raise CapacityError(
                    ticket_type_id=ticket_type.id,  # type: ignore[arg-type]
                    ticket_type_name=ticket_type.name,
                    requested=item.quantity,
                )
