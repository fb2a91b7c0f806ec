from unittest.mock import AsyncMock

import pytest

from src.platform.exception.exceptions import NotFoundError, StateConflictError
from src.platform.types.result import Failure, Success
from src.service.ticketing.app.command.change_order_status_use_case import (
    ChangeOrderStatusUseCase,
)
from src.service.ticketing.domain.domain_event.order_events import (
    OrderConfirmedEvent,
    OrderPaidEvent,
)
from src.service.ticketing.domain.entity.order_entity import (
    CONFIRMABLE_STATUSES,
    PAYABLE_STATUSES,
    OrderStatus,
)
from ticketing_fakes import FakeUnitOfWork, make_order


@pytest.mark.unit
class TestChangeOrderStatusUseCase:
    @pytest.mark.asyncio
    async def test_confirm_pending_order(
        self, uow: FakeUnitOfWork, notification_sender: AsyncMock
    ) -> None:
        uow.orders.transition_status.return_value = make_order(id=3, status=OrderStatus.CONFIRMED)

        result = await ChangeOrderStatusUseCase(
            uow=uow, notification_sender=notification_sender
        ).confirm_order(order_id=3)

        assert isinstance(result, Success)
        assert result.value.status == OrderStatus.CONFIRMED
        uow.orders.transition_status.assert_awaited_once_with(
            order_id=3, from_statuses=CONFIRMABLE_STATUSES, to_status=OrderStatus.CONFIRMED
        )
        assert uow.committed == 1
        assert isinstance(notification_sender.send.await_args.kwargs['event'], OrderConfirmedEvent)

    @pytest.mark.asyncio
    async def test_pay_confirmed_order(
        self, uow: FakeUnitOfWork, notification_sender: AsyncMock
    ) -> None:
        uow.orders.transition_status.return_value = make_order(id=3, status=OrderStatus.PAID)

        result = await ChangeOrderStatusUseCase(
            uow=uow, notification_sender=notification_sender
        ).pay_order(order_id=3)

        assert isinstance(result, Success)
        uow.orders.transition_status.assert_awaited_once_with(
            order_id=3, from_statuses=PAYABLE_STATUSES, to_status=OrderStatus.PAID
        )
        assert isinstance(notification_sender.send.await_args.kwargs['event'], OrderPaidEvent)

    @pytest.mark.asyncio
    async def test_paying_cancelled_order_is_a_state_conflict(
        self, uow: FakeUnitOfWork, notification_sender: AsyncMock
    ) -> None:
        """
        Given: A cancelled order
        When: Paying it
        Then: StateConflictError names both statuses and no event is sent
        """
        uow.orders.transition_status.return_value = None
        uow.orders.get_by_id.return_value = make_order(id=3, status=OrderStatus.CANCELLED)

        result = await ChangeOrderStatusUseCase(
            uow=uow, notification_sender=notification_sender
        ).pay_order(order_id=3)

        assert isinstance(result, Failure)
        assert isinstance(result.error, StateConflictError)
        assert result.error.message == 'Cannot move order from cancelled to paid'
        assert uow.committed == 0
        notification_sender.send.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_confirming_missing_order_is_not_found(
        self, uow: FakeUnitOfWork, notification_sender: AsyncMock
    ) -> None:
        uow.orders.transition_status.return_value = None
        uow.orders.get_by_id.return_value = None

        result = await ChangeOrderStatusUseCase(
            uow=uow, notification_sender=notification_sender
        ).confirm_order(order_id=3)

        assert isinstance(result, Failure)
        assert isinstance(result.error, NotFoundError)
