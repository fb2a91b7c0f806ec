"""
Inventory Ledger Interface

Owns the `available` counter of every ticket type. Both operations are single
conditional statements against the store; callers never read-modify-write stock.
"""

from abc import ABC, abstractmethod

from src.service.ticketing.domain.entity.ticket_type_entity import TicketType


class IInventoryLedger(ABC):
    @abstractmethod
    async def reserve(self, *, ticket_type_id: int, count: int) -> TicketType:
        """
        Decrement `available` by `count` if at least `count` units remain.

        Returns:
            The ticket type after the decrement

        Raises:
            ValidationError: count is not positive
            CapacityError: fewer than `count` units available (nothing changed)
            NotFoundError: ticket type missing or soft-deleted
        """
        pass

    @abstractmethod
    async def release(self, *, ticket_type_id: int, count: int) -> TicketType:
        """
        Increment `available` by `count`, clamped at `capacity`.

        Raises:
            ValidationError: count is not positive
            NotFoundError: ticket type missing
        """
        pass
