from typing import List, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.platform.types.result import as_result
from src.service.ticketing.app.interface.i_ticket_type_repo import ITicketTypeRepo
from src.service.ticketing.domain.entity.ticket_type_entity import TicketType


class GetTicketTypeUseCase:
    def __init__(self, *, ticket_type_repo: ITicketTypeRepo) -> None:
        self.ticket_type_repo = ticket_type_repo

    @classmethod
    @inject
    def depends(
        cls,
        ticket_type_repo: ITicketTypeRepo = Depends(Provide[Container.ticket_type_query_repo]),
    ) -> Self:
        return cls(ticket_type_repo=ticket_type_repo)

    @as_result
    @Logger.io
    async def get_ticket_type(self, *, ticket_type_id: int) -> TicketType:
        ticket_type = await self.ticket_type_repo.get_by_id(ticket_type_id=ticket_type_id)
        if ticket_type is None:
            raise NotFoundError(f'Ticket type {ticket_type_id} not found')
        return ticket_type

    @as_result
    @Logger.io
    async def list_ticket_types(self, *, event_id: int) -> List[TicketType]:
        """What an event still sells: active ticket types ordered by price, with live stock."""
        return await self.ticket_type_repo.list_by_event(event_id=event_id)
