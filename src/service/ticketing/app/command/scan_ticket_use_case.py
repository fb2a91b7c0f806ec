from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.database.unit_of_work import AbstractUnitOfWork
from src.platform.exception.exceptions import NotFoundError, StateConflictError, ValidationError
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.ticketing_metrics import metrics
from src.platform.types.result import as_result
from src.service.ticketing.app.command.post_commit import dispatch_after_commit
from src.service.ticketing.app.interface.i_notification_sender import INotificationSender
from src.service.ticketing.domain.domain_event.order_events import TicketScannedEvent
from src.service.ticketing.domain.entity.ticket_entity import Ticket
from src.service.ticketing.domain.value_object.tracking import utc_now


class ScanTicketUseCase:
    def __init__(
        self, *, uow: AbstractUnitOfWork, notification_sender: INotificationSender
    ) -> None:
        self.uow = uow
        self.notification_sender = notification_sender

    @classmethod
    @inject
    def depends(
        cls,
        uow: AbstractUnitOfWork = Depends(Provide[Container.unit_of_work]),
        notification_sender: INotificationSender = Depends(
            Provide[Container.notification_sender]
        ),
    ) -> Self:
        return cls(uow=uow, notification_sender=notification_sender)

    @as_result
    @Logger.io
    async def scan_ticket_by_code(self, *, qr_code: str) -> Ticket:
        """Admit the holder of `qr_code` once: active -> used, stamping scanned_at."""
        if not qr_code or not qr_code.strip():
            raise ValidationError('qr_code is required')

        async with self.uow:
            ticket = await self.uow.tickets.mark_used(qr_code=qr_code.strip(), scanned_at=utc_now())
            if ticket is None:
                existing = await self.uow.tickets.get_by_qr_code(qr_code=qr_code.strip())
                if existing is None:
                    metrics.record_scan(result='not_found')
                    raise NotFoundError('Ticket not found')
                metrics.record_scan(result='rejected')
                raise StateConflictError(f'Ticket is {existing.status} and cannot be scanned')
            await self.uow.commit()

        metrics.record_scan(result='admitted')
        await dispatch_after_commit(
            self.notification_sender,
            TicketScannedEvent(
                ticket_id=ticket.id,  # type: ignore[arg-type]
                order_id=ticket.order_id,
                scanned_at=ticket.scanned_at,  # type: ignore[arg-type]
            ),
        )
        return ticket
