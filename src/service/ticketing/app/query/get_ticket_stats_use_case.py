from typing import Optional, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.platform.types.result import as_result
from src.service.ticketing.app.dto.order_details import TicketStats
from src.service.ticketing.app.interface.i_ticket_repo import ITicketRepo


class GetTicketStatsUseCase:
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
    async def get_ticket_stats(self, *, event_id: Optional[int] = None) -> TicketStats:
        """Ticket counts per status, across all events or for one event."""
        counts = await self.ticket_repo.count_by_status(event_id=event_id)
        return TicketStats.from_counts(counts)
