from datetime import datetime
from typing import Any, List, Optional

from sqlalchemy import func, insert, select, update

from src.platform.database.soft_delete import only_active
from src.platform.logging.loguru_io import Logger
from src.service.ticketing.app.interface.i_ticket_repo import ITicketRepo
from src.service.ticketing.domain.entity.ticket_entity import Ticket
from src.service.ticketing.domain.enum.ticket_status import TicketStatus
from src.service.ticketing.domain.value_object.tracking import Tracking
from src.service.ticketing.driven_adapter.model.ticket_model import TicketModel
from src.service.ticketing.driven_adapter.model.ticket_type_model import TicketTypeModel
from src.service.ticketing.driven_adapter.repo.session_scoped_repo import SessionScopedRepo


ticket_table = TicketModel.__table__


class TicketRepoImpl(SessionScopedRepo, ITicketRepo):
    @staticmethod
    def _to_entity(row: Any) -> Ticket:
        return Ticket(
            id=row.id,
            order_id=row.order_id,
            ticket_type_id=row.ticket_type_id,
            qr_code=row.qr_code,
            status=TicketStatus(row.status),
            scanned_at=row.scanned_at,
            tracking=Tracking(
                created_at=row.created_at, updated_at=row.updated_at, deleted_at=row.deleted_at
            ),
        )

    @Logger.io
    async def create_many(self, *, tickets: List[Ticket]) -> List[Ticket]:
        if not tickets:
            return []
        stmt = insert(ticket_table).returning(*ticket_table.c, sort_by_parameter_order=True)
        params = [
            {
                'order_id': ticket.order_id,
                'ticket_type_id': ticket.ticket_type_id,
                'qr_code': ticket.qr_code,
                'status': ticket.status.value,
            }
            for ticket in tickets
        ]
        async with self._get_session() as session:
            result = await session.execute(stmt, params)
            return [self._to_entity(row) for row in result]

    @Logger.io
    async def list_by_order(self, *, order_id: int) -> List[Ticket]:
        stmt = only_active(
            select(TicketModel).where(TicketModel.order_id == order_id).order_by(TicketModel.id),
            TicketModel,
        )
        async with self._get_session() as session:
            result = await session.execute(stmt.execution_options(populate_existing=True))
            return [self._to_entity(model) for model in result.scalars()]

    @Logger.io
    async def cancel_by_order(self, *, order_id: int) -> int:
        stmt = (
            update(ticket_table)
            .where(
                ticket_table.c.order_id == order_id,
                ticket_table.c.status != TicketStatus.CANCELLED.value,
                ticket_table.c.deleted_at.is_(None),
            )
            .values(status=TicketStatus.CANCELLED.value)
            .returning(ticket_table.c.id)
        )
        async with self._get_session() as session:
            return len((await session.execute(stmt)).all())

    @Logger.io
    async def get_by_qr_code(self, *, qr_code: str) -> Optional[Ticket]:
        stmt = only_active(select(TicketModel).where(TicketModel.qr_code == qr_code), TicketModel)
        async with self._get_session() as session:
            result = await session.execute(stmt.execution_options(populate_existing=True))
            model = result.scalar_one_or_none()
            return self._to_entity(model) if model else None

    @Logger.io
    async def mark_used(self, *, qr_code: str, scanned_at: datetime) -> Optional[Ticket]:
        stmt = (
            update(ticket_table)
            .where(
                ticket_table.c.qr_code == qr_code,
                ticket_table.c.status == TicketStatus.ACTIVE.value,
                ticket_table.c.deleted_at.is_(None),
            )
            .values(status=TicketStatus.USED.value, scanned_at=scanned_at)
            .returning(*ticket_table.c)
        )
        async with self._get_session() as session:
            row = (await session.execute(stmt)).first()
            return self._to_entity(row) if row else None

    @Logger.io
    async def count_by_status(self, *, event_id: Optional[int] = None) -> dict[TicketStatus, int]:
        stmt = select(TicketModel.status, func.count(TicketModel.id)).group_by(TicketModel.status)
        if event_id is not None:
            stmt = stmt.join(
                TicketTypeModel, TicketTypeModel.id == TicketModel.ticket_type_id
            ).where(TicketTypeModel.event_id == event_id)
        stmt = only_active(stmt, TicketModel)
        async with self._get_session() as session:
            rows = (await session.execute(stmt)).all()
        counts = {status: 0 for status in TicketStatus}
        for status, count in rows:
            counts[TicketStatus(status)] = count
        return counts
