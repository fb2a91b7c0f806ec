import pytest

from src.platform.exception.exceptions import CapacityError, NotFoundError, ValidationError
from src.service.ticketing.driven_adapter.repo.ticket_type_repo_impl import TicketTypeRepoImpl


async def _available(session_maker, ticket_type_id: int) -> int:
    ticket_type = await TicketTypeRepoImpl(session_factory=session_maker).get_by_id(
        ticket_type_id=ticket_type_id
    )
    assert ticket_type is not None
    return ticket_type.available


@pytest.mark.integration
class TestInventoryLedger:
    @pytest.mark.asyncio
    async def test_reserve_decrements_available(self, uow_factory, session_maker, make_ticket_type) -> None:
        ticket_type = await make_ticket_type(capacity=10)

        async with uow_factory() as uow:
            reserved = await uow.inventory_ledger.reserve(ticket_type_id=ticket_type.id, count=4)
            await uow.commit()

        assert reserved.available == 6
        assert await _available(session_maker, ticket_type.id) == 6

    @pytest.mark.asyncio
    async def test_reserve_beyond_stock_changes_nothing(
        self, uow_factory, session_maker, make_ticket_type
    ) -> None:
        """
        Given: A ticket type with 3 units available
        When: Reserving 4
        Then: CapacityError and available is still 3
        """
        ticket_type = await make_ticket_type(name='VIP', capacity=3)

        with pytest.raises(CapacityError) as exc_info:
            async with uow_factory() as uow:
                await uow.inventory_ledger.reserve(ticket_type_id=ticket_type.id, count=4)
                await uow.commit()

        assert exc_info.value.ticket_type_id == ticket_type.id
        assert exc_info.value.message == 'Not enough tickets available for VIP'
        assert await _available(session_maker, ticket_type.id) == 3

    @pytest.mark.asyncio
    async def test_reserve_unknown_ticket_type_is_not_found(self, uow_factory, seeded) -> None:
        with pytest.raises(NotFoundError):
            async with uow_factory() as uow:
                await uow.inventory_ledger.reserve(ticket_type_id=999, count=1)

    @pytest.mark.asyncio
    async def test_non_positive_count_is_rejected(self, uow_factory, make_ticket_type) -> None:
        ticket_type = await make_ticket_type()

        with pytest.raises(ValidationError):
            async with uow_factory() as uow:
                await uow.inventory_ledger.reserve(ticket_type_id=ticket_type.id, count=0)

    @pytest.mark.asyncio
    async def test_release_is_clamped_at_capacity(
        self, uow_factory, session_maker, make_ticket_type
    ) -> None:
        """
        Given: A ticket type with capacity 10 and nothing sold
        When: Releasing 5 twice
        Then: available stays at 10
        """
        ticket_type = await make_ticket_type(capacity=10)

        for _ in range(2):
            async with uow_factory() as uow:
                released = await uow.inventory_ledger.release(ticket_type_id=ticket_type.id, count=5)
                await uow.commit()
            assert released.available == 10

        assert await _available(session_maker, ticket_type.id) == 10

    @pytest.mark.asyncio
    async def test_release_restores_reserved_units(
        self, uow_factory, session_maker, make_ticket_type
    ) -> None:
        ticket_type = await make_ticket_type(capacity=10)

        async with uow_factory() as uow:
            await uow.inventory_ledger.reserve(ticket_type_id=ticket_type.id, count=7)
            await uow.inventory_ledger.release(ticket_type_id=ticket_type.id, count=2)
            await uow.commit()

        assert await _available(session_maker, ticket_type.id) == 5

    @pytest.mark.asyncio
    async def test_uncommitted_reserve_is_rolled_back(
        self, uow_factory, session_maker, make_ticket_type
    ) -> None:
        ticket_type = await make_ticket_type(capacity=10)

        async with uow_factory() as uow:
            await uow.inventory_ledger.reserve(ticket_type_id=ticket_type.id, count=7)

        assert await _available(session_maker, ticket_type.id) == 10
