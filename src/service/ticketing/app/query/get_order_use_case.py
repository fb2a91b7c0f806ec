from typing import List, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.platform.types.result import as_result
from src.service.ticketing.app.dto.order_details import OrderDetails
from src.service.ticketing.app.interface.i_order_repo import IOrderRepo
from src.service.ticketing.app.interface.i_ticket_repo import ITicketRepo
from src.service.ticketing.domain.entity.order_entity import Order


class GetOrderUseCase:
    def __init__(self, *, order_repo: IOrderRepo, ticket_repo: ITicketRepo) -> None:
        self.order_repo = order_repo
        self.ticket_repo = ticket_repo

    @classmethod
    @inject
    def depends(
        cls,
        order_repo: IOrderRepo = Depends(Provide[Container.order_query_repo]),
        ticket_repo: ITicketRepo = Depends(Provide[Container.ticket_query_repo]),
    ) -> Self:
        return cls(order_repo=order_repo, ticket_repo=ticket_repo)

    @as_result
    @Logger.io
    async def get_order(self, *, order_id: int) -> OrderDetails:
        order = await self.order_repo.get_by_id(order_id=order_id)
        if order is None:
            raise NotFoundError(f'Order {order_id} not found')
        tickets = await self.ticket_repo.list_by_order(order_id=order_id)
        return OrderDetails(order=order, tickets=tickets)

    @as_result
    @Logger.io
    async def list_customer_orders(self, *, customer_id: int) -> List[Order]:
        return await self.order_repo.list_by_customer(customer_id=customer_id)
