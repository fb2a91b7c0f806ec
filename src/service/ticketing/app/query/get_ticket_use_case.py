from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import NotFoundError, ValidationError
from src.platform.logging.loguru_io import Logger
from src.platform.types.result import as_result
from src.service.ticketing.app.interface.i_ticket_repo import ITicketRepo
from src.service.ticketing.domain.entity.ticket_entity import Ticket


class GetTicketUseCase:
    def __init__(self, *, ticket_repo: ITicketRepo) -> None:
        self.ticket_repo = ticket_repo

    @classmethod
    @inject
    def depends(
        cls, ticket_repo: ITicketRepo = Depends(Provide[Container.ticket_query_repo])
    ) -> Self:
        return cls(ticket_repo=ticket_repo)

    @as_result
    @Logger.io
    async def get_ticket_by_qr_code(self, *, qr_code: str) -> Ticket:
        """Look a ticket up at the gate without admitting it."""
        code = (qr_code or '').strip()
        if not code:
            raise ValidationError('qr_code is required')
        ticket = await self.ticket_repo.get_by_qr_code(qr_code=code)
        if ticket is None:
            raise NotFoundError('Ticket not found')
        return ticket
