from abc import ABC, abstractmethod
from typing import Collection, List, Optional

from src.service.ticketing.domain.entity.order_entity import Order, OrderStatus


class IOrderRepo(ABC):
    @abstractmethod
    async def create(self, *, order: Order) -> Order:
        pass

    @abstractmethod
    async def get_by_id(self, *, order_id: int) -> Optional[Order]:
        pass

    @abstractmethod
    async def list_by_customer(self, *, customer_id: int) -> List[Order]:
        """Newest first."""
        pass

    @abstractmethod
    async def transition_status(
        self,
        *,
        order_id: int,
        from_statuses: Collection[OrderStatus],
        to_status: OrderStatus,
    ) -> Optional[Order]:
        """
        Conditionally move an order to `to_status`.

        Returns None when the order is not currently in one of `from_statuses`,
        in which case nothing was written.
        """
        pass

    @abstractmethod
    async def customer_exists(self, *, customer_id: int) -> bool:
        pass
