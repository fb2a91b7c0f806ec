"""Order read model DTOs."""

from typing import List

import attrs

from src.service.ticketing.domain.entity.order_entity import Order
from src.service.ticketing.domain.entity.ticket_entity import Ticket
from src.service.ticketing.domain.enum.ticket_status import TicketStatus


@attrs.define(frozen=True)
class OrderDetails:
    order: Order
    tickets: List[Ticket]


@attrs.define(frozen=True)
class TicketStats:
    total: int
    active: int
    used: int
    cancelled: int
    refunded: int

    @classmethod
    def from_counts(cls, counts: dict[TicketStatus, int]) -> 'TicketStats':
        return cls(
            total=sum(counts.values()),
            active=counts.get(TicketStatus.ACTIVE, 0),
            used=counts.get(TicketStatus.USED, 0),
            cancelled=counts.get(TicketStatus.CANCELLED, 0),
            refunded=counts.get(TicketStatus.REFUNDED, 0),
        )
