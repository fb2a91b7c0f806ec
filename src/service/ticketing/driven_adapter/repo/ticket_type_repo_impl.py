from typing import Any, Iterable, List, Optional

from sqlalchemy import insert, select, update
from sqlalchemy.sql import func

from src.platform.database.soft_delete import only_active, with_deleted
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.ticketing.app.interface.i_ticket_type_repo import ITicketTypeRepo
from src.service.ticketing.domain.entity.ticket_type_entity import TicketType
from src.service.ticketing.domain.value_object.tracking import Tracking
from src.service.ticketing.driven_adapter.model.event_model import EventModel
from src.service.ticketing.driven_adapter.model.ticket_type_model import TicketTypeModel
from src.service.ticketing.driven_adapter.repo.session_scoped_repo import SessionScopedRepo


ticket_type_table = TicketTypeModel.__table__


def to_ticket_type(row: Any) -> TicketType:
    """Build the entity from an ORM instance or a RETURNING row."""
    return TicketType(
        id=row.id,
        event_id=row.event_id,
        name=row.name,
        description=row.description,
        price=row.price,
        capacity=row.capacity,
        available=row.available,
        tracking=Tracking(
            created_at=row.created_at, updated_at=row.updated_at, deleted_at=row.deleted_at
        ),
    )


class TicketTypeRepoImpl(SessionScopedRepo, ITicketTypeRepo):
    @Logger.io
    async def get_by_id(
        self, *, ticket_type_id: int, include_deleted: bool = False
    ) -> Optional[TicketType]:
        stmt = select(TicketTypeModel).where(TicketTypeModel.id == ticket_type_id)
        stmt = (with_deleted if include_deleted else only_active)(stmt, TicketTypeModel)
        async with self._get_session() as session:
            result = await session.execute(stmt.execution_options(populate_existing=True))
            model = result.scalar_one_or_none()
            return to_ticket_type(model) if model else None

    @Logger.io
    async def get_many(self, *, ticket_type_ids: Iterable[int]) -> dict[int, TicketType]:
        ids = list(ticket_type_ids)
        if not ids:
            return {}
        stmt = only_active(
            select(TicketTypeModel).where(TicketTypeModel.id.in_(ids)), TicketTypeModel
        )
        async with self._get_session() as session:
            result = await session.execute(stmt.execution_options(populate_existing=True))
            return {model.id: to_ticket_type(model) for model in result.scalars()}

    @Logger.io
    async def list_by_event(self, *, event_id: int) -> List[TicketType]:
        stmt = only_active(
            select(TicketTypeModel)
            .where(TicketTypeModel.event_id == event_id)
            .order_by(TicketTypeModel.price, TicketTypeModel.id),
            TicketTypeModel,
        )
        async with self._get_session() as session:
            result = await session.execute(stmt.execution_options(populate_existing=True))
            return [to_ticket_type(model) for model in result.scalars()]

    @Logger.io
    async def create(self, *, ticket_type: TicketType) -> TicketType:
        stmt = (
            insert(ticket_type_table)
            .values(
                event_id=ticket_type.event_id,
                name=ticket_type.name,
                description=ticket_type.description,
                price=ticket_type.price,
                capacity=ticket_type.capacity,
                available=ticket_type.available,
            )
            .returning(*ticket_type_table.c)
        )
        async with self._get_session() as session:
            row = (await session.execute(stmt)).one()
            return to_ticket_type(row)

    @Logger.io
    async def update_details(self, *, ticket_type: TicketType) -> TicketType:
        stmt = (
            update(ticket_type_table)
            .where(
                ticket_type_table.c.id == ticket_type.id,
                ticket_type_table.c.deleted_at.is_(None),
            )
            .values(
                name=ticket_type.name,
                description=ticket_type.description,
                price=ticket_type.price,
            )
            .returning(*ticket_type_table.c)
        )
        async with self._get_session() as session:
            row = (await session.execute(stmt)).first()
            if row is None:
                raise NotFoundError(f'Ticket type {ticket_type.id} not found')
            return to_ticket_type(row)

    @Logger.io
    async def soft_delete(self, *, ticket_type_id: int) -> bool:
        stmt = (
            update(ticket_type_table)
            .where(
                ticket_type_table.c.id == ticket_type_id,
                ticket_type_table.c.deleted_at.is_(None),
            )
            .values(deleted_at=func.now())
            .returning(ticket_type_table.c.id)
        )
        async with self._get_session() as session:
            return (await session.execute(stmt)).first() is not None

    @Logger.io
    async def event_exists(self, *, event_id: int) -> bool:
        stmt = only_active(select(EventModel.id).where(EventModel.id == event_id), EventModel)
        async with self._get_session() as session:
            return (await session.execute(stmt)).first() is not None
