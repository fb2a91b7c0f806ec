from typing import Any, Optional, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.database.unit_of_work import AbstractUnitOfWork
from src.platform.exception.exceptions import NotFoundError, ValidationError
from src.platform.logging.loguru_io import Logger
from src.platform.types.result import as_result
from src.service.ticketing.domain.entity.ticket_type_entity import TicketType


class ManageTicketTypeUseCase:
    """
    Organizer-side ticket type maintenance.

    None of these paths writes `available`: stock is set once at creation
    (available = capacity) and afterwards only the inventory ledger moves it.
    """

    def __init__(self, *, uow: AbstractUnitOfWork) -> None:
        self.uow = uow

    @classmethod
    @inject
    def depends(
        cls, uow: AbstractUnitOfWork = Depends(Provide[Container.unit_of_work])
    ) -> Self:
        return cls(uow=uow)

    @as_result
    @Logger.io
    async def create_ticket_type(
        self,
        *,
        event_id: int,
        name: str,
        price: Any,
        capacity: int,
        description: Optional[str] = None,
    ) -> TicketType:
        ticket_type = TicketType.create(
            event_id=event_id, name=name, price=price, capacity=capacity, description=description
        )
        async with self.uow:
            if not await self.uow.ticket_types.event_exists(event_id=event_id):
                raise ValidationError(f'Event {event_id} not found')
            created = await self.uow.ticket_types.create(ticket_type=ticket_type)
            await self.uow.commit()
        return created

    @as_result
    @Logger.io
    async def update_ticket_type_details(
        self,
        *,
        ticket_type_id: int,
        name: Optional[str] = None,
        description: Optional[str] = None,
        price: Any = None,
    ) -> TicketType:
        async with self.uow:
            current = await self.uow.ticket_types.get_by_id(ticket_type_id=ticket_type_id)
            if current is None:
                raise NotFoundError(f'Ticket type {ticket_type_id} not found')
            updated = await self.uow.ticket_types.update_details(
                ticket_type=current.with_details(name=name, description=description, price=price)
            )
            await self.uow.commit()
        return updated

    @as_result
    @Logger.io
    async def delete_ticket_type(self, *, ticket_type_id: int) -> int:
        """Soft delete; the row stays for audit and existing tickets keep their reference."""
        async with self.uow:
            if not await self.uow.ticket_types.soft_delete(ticket_type_id=ticket_type_id):
                raise NotFoundError(f'Ticket type {ticket_type_id} not found')
            await self.uow.commit()
        return ticket_type_id
