from datetime import datetime
from typing import Optional

import attrs

from src.service.ticketing.domain.enum.ticket_status import TicketStatus
from src.service.ticketing.domain.value_object.tracking import Tracking


QR_CODE_MIN_LENGTH = 10
QR_CODE_MAX_LENGTH = 255


@attrs.define
class Ticket:
    order_id: int
    ticket_type_id: int
    qr_code: str = attrs.field(repr=False)
    status: TicketStatus = TicketStatus.ACTIVE
    scanned_at: Optional[datetime] = None
    id: Optional[int] = None
    tracking: Tracking = attrs.field(factory=Tracking)

    @qr_code.validator
    def _check_qr_code(self, attribute: 'attrs.Attribute[str]', value: str) -> None:
        if not QR_CODE_MIN_LENGTH <= len(value) <= QR_CODE_MAX_LENGTH:
            raise ValueError(
                f'qr_code must be between {QR_CODE_MIN_LENGTH} and {QR_CODE_MAX_LENGTH} characters'
            )

    @classmethod
    def issue(cls, *, order_id: int, ticket_type_id: int, qr_code: str) -> 'Ticket':
        return cls(
            order_id=order_id,
            ticket_type_id=ticket_type_id,
            qr_code=qr_code,
            status=TicketStatus.ACTIVE,
            tracking=Tracking.new(),
        )

    @property
    def scannable(self) -> bool:
        return self.status == TicketStatus.ACTIVE

    @property
    def used(self) -> bool:
        return self.status == TicketStatus.USED

    @property
    def cancelled(self) -> bool:
        return self.status == TicketStatus.CANCELLED

    @property
    def ticket_number(self) -> Optional[str]:
        if self.id is None:
            return None
        return f'T{self.id:08d}'
