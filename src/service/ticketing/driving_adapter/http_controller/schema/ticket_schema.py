from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from src.service.ticketing.domain.entity.ticket_entity import Ticket


class TicketScanRequest(BaseModel):
    qr_code: str

    class Config:
        json_schema_extra = {'example': {'qr_code': 'Xk3vQ9mB2pLw7RtY1cZa'}}


class TicketResponse(BaseModel):
    id: int
    ticket_number: Optional[str]
    order_id: int
    ticket_type_id: int
    qr_code: str
    status: str
    scanned_at: Optional[datetime] = None

    @classmethod
    def from_entity(cls, ticket: Ticket) -> 'TicketResponse':
        return cls(
            id=ticket.id,  # type: ignore[arg-type]
            ticket_number=ticket.ticket_number,
            order_id=ticket.order_id,
            ticket_type_id=ticket.ticket_type_id,
            qr_code=ticket.qr_code,
            status=ticket.status.value,
            scanned_at=ticket.scanned_at,
        )


class TicketStatsResponse(BaseModel):
    total: int
    active: int
    used: int
    cancelled: int
    refunded: int
