from typing import Optional

from fastapi import APIRouter, Depends

from src.platform.logging.loguru_io import Logger
from src.service.ticketing.app.command.scan_ticket_use_case import ScanTicketUseCase
from src.service.ticketing.app.query.get_ticket_stats_use_case import GetTicketStatsUseCase
from src.service.ticketing.app.query.get_ticket_use_case import GetTicketUseCase
from src.service.ticketing.driving_adapter.http_controller.schema.ticket_schema import (
    TicketResponse,
    TicketScanRequest,
    TicketStatsResponse,
)


router = APIRouter()


@router.post('/scan')
@Logger.io
async def scan_ticket(
    request: TicketScanRequest,
    use_case: ScanTicketUseCase = Depends(ScanTicketUseCase.depends),
) -> TicketResponse:
    result = await use_case.scan_ticket_by_code(qr_code=request.qr_code)
    return TicketResponse.from_entity(result.unwrap())


# qr_code travels in the body, never in the URL
@router.post('/lookup')
@Logger.io
async def lookup_ticket(
    request: TicketScanRequest,
    use_case: GetTicketUseCase = Depends(GetTicketUseCase.depends),
) -> TicketResponse:
    result = await use_case.get_ticket_by_qr_code(qr_code=request.qr_code)
    return TicketResponse.from_entity(result.unwrap())


@router.get('/stats')
@Logger.io
async def get_ticket_stats(
    event_id: Optional[int] = None,
    use_case: GetTicketStatsUseCase = Depends(GetTicketStatsUseCase.depends),
) -> TicketStatsResponse:
    result = await use_case.get_ticket_stats(event_id=event_id)
    stats = result.unwrap()
    return TicketStatsResponse(
        total=stats.total,
        active=stats.active,
        used=stats.used,
        cancelled=stats.cancelled,
        refunded=stats.refunded,
    )
