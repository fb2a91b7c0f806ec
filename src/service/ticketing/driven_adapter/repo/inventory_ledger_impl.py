"""
Inventory ledger on the ticket_type table.

Each operation is one conditional UPDATE ... RETURNING, so the stock check and
the write happen in the same statement and concurrent purchasers of the last
unit cannot both succeed.
"""

from sqlalchemy import case, select, update

from src.platform.exception.exceptions import CapacityError, NotFoundError, ValidationError
from src.platform.logging.loguru_io import Logger
from src.service.ticketing.app.interface.i_inventory_ledger import IInventoryLedger
from src.service.ticketing.domain.entity.ticket_type_entity import TicketType
from src.service.ticketing.driven_adapter.repo.session_scoped_repo import SessionScopedRepo
from src.service.ticketing.driven_adapter.repo.ticket_type_repo_impl import (
    ticket_type_table,
    to_ticket_type,
)


class InventoryLedgerImpl(SessionScopedRepo, IInventoryLedger):
    @Logger.io
    async def reserve(self, *, ticket_type_id: int, count: int) -> TicketType:
        if count <= 0:
            raise ValidationError('reserve count must be greater than 0')

        t = ticket_type_table
        stmt = (
            update(t)
            .where(t.c.id == ticket_type_id, t.c.deleted_at.is_(None), t.c.available >= count)
            .values(available=t.c.available - count)
            .returning(*t.c)
        )
        async with self._get_session() as session:
            row = (await session.execute(stmt)).first()
            if row is not None:
                return to_ticket_type(row)

            # Nothing matched: tell a missing ticket type apart from a sold-out one
            existing = (
                await session.execute(
                    select(t.c.id, t.c.name).where(t.c.id == ticket_type_id, t.c.deleted_at.is_(None))
                )
            ).first()

        if existing is None:
            raise NotFoundError(f'Ticket type {ticket_type_id} not found')
        raise CapacityError(
            ticket_type_id=ticket_type_id, ticket_type_name=existing.name, requested=count
        )

    @Logger.io
    async def release(self, *, ticket_type_id: int, count: int) -> TicketType:
        if count <= 0:
            raise ValidationError('release count must be greater than 0')

        t = ticket_type_table
        restored = t.c.available + count
        stmt = (
            update(t)
            .where(t.c.id == ticket_type_id)
            .values(available=case((restored > t.c.capacity, t.c.capacity), else_=restored))
            .returning(*t.c)
        )
        async with self._get_session() as session:
            row = (await session.execute(stmt)).first()

        if row is None:
            raise NotFoundError(f'Ticket type {ticket_type_id} not found')
        return to_ticket_type(row)
