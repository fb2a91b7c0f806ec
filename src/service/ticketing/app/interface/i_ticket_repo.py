from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional

from src.service.ticketing.domain.entity.ticket_entity import Ticket
from src.service.ticketing.domain.enum.ticket_status import TicketStatus


class ITicketRepo(ABC):
    @abstractmethod
    async def create_many(self, *, tickets: List[Ticket]) -> List[Ticket]:
        pass

    @abstractmethod
    async def list_by_order(self, *, order_id: int) -> List[Ticket]:
        pass

    @abstractmethod
    async def cancel_by_order(self, *, order_id: int) -> int:
        """
        Mark every not-yet-cancelled ticket of the order cancelled; returns rows changed.

        Soft-deleted tickets are skipped, matching `list_by_order`, so the rows cancelled
        are exactly the rows whose stock the caller released.
        """
        pass

    @abstractmethod
    async def get_by_qr_code(self, *, qr_code: str) -> Optional[Ticket]:
        pass

    @abstractmethod
    async def mark_used(self, *, qr_code: str, scanned_at: datetime) -> Optional[Ticket]:
        """
        Move an active ticket to used and stamp `scanned_at`.

        Returns None when no active ticket carries `qr_code`; nothing is written then.
        """
        pass

    @abstractmethod
    async def count_by_status(self, *, event_id: Optional[int] = None) -> dict[TicketStatus, int]:
        pass
