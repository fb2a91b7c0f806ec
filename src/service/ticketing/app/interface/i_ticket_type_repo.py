from abc import ABC, abstractmethod
from typing import Iterable, List, Optional

from src.service.ticketing.domain.entity.ticket_type_entity import TicketType


class ITicketTypeRepo(ABC):
    @abstractmethod
    async def get_by_id(
        self, *, ticket_type_id: int, include_deleted: bool = False
    ) -> Optional[TicketType]:
        pass

    @abstractmethod
    async def get_many(self, *, ticket_type_ids: Iterable[int]) -> dict[int, TicketType]:
        """Active ticket types keyed by id; unknown or deleted ids are absent."""
        pass

    @abstractmethod
    async def create(self, *, ticket_type: TicketType) -> TicketType:
        pass

    @abstractmethod
    async def update_details(self, *, ticket_type: TicketType) -> TicketType:
        """Persist name, description and price. Stock columns are never written."""
        pass

    @abstractmethod
    async def soft_delete(self, *, ticket_type_id: int) -> bool:
        pass

    @abstractmethod
    async def event_exists(self, *, event_id: int) -> bool:
        pass

    @abstractmethod
    async def list_by_event(self, *, event_id: int) -> List[TicketType]:
        """Active ticket types of an event, cheapest first."""
        pass
