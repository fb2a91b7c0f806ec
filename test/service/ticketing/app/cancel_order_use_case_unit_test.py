from unittest.mock import AsyncMock, call

import pytest

from src.platform.exception.exceptions import NotFoundError, StateConflictError
from src.platform.types.result import Failure, Success
from src.service.ticketing.app.command.cancel_order_use_case import CancelOrderUseCase
from src.service.ticketing.domain.domain_event.order_events import OrderCancelledEvent
from src.service.ticketing.domain.entity.order_entity import OrderStatus
from src.service.ticketing.domain.enum.ticket_status import TicketStatus
from ticketing_fakes import FakeUnitOfWork, make_order, make_ticket


@pytest.mark.unit
class TestCancelOrderUseCase:
    @pytest.mark.asyncio
    async def test_cancel_releases_stock_per_ticket_type_in_id_order(
        self, uow: FakeUnitOfWork, notification_sender: AsyncMock
    ) -> None:
        """
        Given: A pending order holding two type-5 tickets and one type-3 ticket
        When: Cancelling it
        Then: Type 3 is released before type 5, tickets are cancelled and one commit happens
        """
        tickets = [
            make_ticket(id=1, ticket_type_id=5),
            make_ticket(id=2, ticket_type_id=3),
            make_ticket(id=3, ticket_type_id=5),
        ]
        uow.orders.get_by_id.return_value = make_order(id=9)
        uow.orders.transition_status.return_value = make_order(id=9, status=OrderStatus.CANCELLED)
        uow.tickets.list_by_order.side_effect = [
            tickets,
            [make_ticket(id=t.id, ticket_type_id=t.ticket_type_id, status=TicketStatus.CANCELLED) for t in tickets],
        ]

        result = await CancelOrderUseCase(
            uow=uow, notification_sender=notification_sender
        ).cancel_order(order_id=9)

        assert isinstance(result, Success)
        assert result.value.order.status == OrderStatus.CANCELLED
        assert all(t.cancelled for t in result.value.tickets)
        assert uow.inventory_ledger.release.await_args_list == [
            call(ticket_type_id=3, count=1),
            call(ticket_type_id=5, count=2),
        ]
        uow.tickets.cancel_by_order.assert_awaited_once_with(order_id=9)
        assert uow.committed == 1

        event = notification_sender.send.await_args.kwargs['event']
        assert isinstance(event, OrderCancelledEvent)
        assert event.released == {5: 2, 3: 1}

    @pytest.mark.asyncio
    async def test_missing_order_is_not_found(
        self, uow: FakeUnitOfWork, notification_sender: AsyncMock
    ) -> None:
        uow.orders.get_by_id.return_value = None

        result = await CancelOrderUseCase(
            uow=uow, notification_sender=notification_sender
        ).cancel_order(order_id=404)

        assert isinstance(result, Failure)
        assert isinstance(result.error, NotFoundError)
        assert result.error.message == 'Order 404 not found'

    @pytest.mark.asyncio
    @pytest.mark.parametrize('status', [OrderStatus.PAID, OrderStatus.CANCELLED])
    async def test_non_cancellable_order_is_a_state_conflict(
        self, uow: FakeUnitOfWork, notification_sender: AsyncMock, status: OrderStatus
    ) -> None:
        uow.orders.get_by_id.return_value = make_order(id=1, status=status)

        result = await CancelOrderUseCase(
            uow=uow, notification_sender=notification_sender
        ).cancel_order(order_id=1)

        assert isinstance(result, Failure)
        assert isinstance(result.error, StateConflictError)
        uow.orders.transition_status.assert_not_awaited()
        uow.inventory_ledger.release.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_losing_a_concurrent_cancel_releases_nothing(
        self, uow: FakeUnitOfWork, notification_sender: AsyncMock
    ) -> None:
        """
        Given: The order was pending when read but cancelled by someone else before the update
        When: The conditional status update matches no row
        Then: StateConflictError and no stock is released
        """
        uow.orders.get_by_id.return_value = make_order(id=1)
        uow.orders.transition_status.return_value = None

        result = await CancelOrderUseCase(
            uow=uow, notification_sender=notification_sender
        ).cancel_order(order_id=1)

        assert isinstance(result, Failure)
        assert isinstance(result.error, StateConflictError)
        uow.inventory_ledger.release.assert_not_awaited()
        assert uow.committed == 0
