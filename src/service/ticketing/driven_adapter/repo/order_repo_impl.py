from typing import Any, Collection, List, Optional

from sqlalchemy import insert, select, update

from src.platform.database.soft_delete import only_active
from src.platform.logging.loguru_io import Logger
from src.service.ticketing.app.interface.i_order_repo import IOrderRepo
from src.service.ticketing.domain.entity.order_entity import Order, OrderStatus
from src.service.ticketing.domain.value_object.customer_info import CustomerInfo
from src.service.ticketing.domain.value_object.tracking import Tracking
from src.service.ticketing.driven_adapter.model.customer_model import CustomerModel
from src.service.ticketing.driven_adapter.model.order_model import OrderModel
from src.service.ticketing.driven_adapter.repo.session_scoped_repo import SessionScopedRepo


order_table = OrderModel.__table__


class OrderRepoImpl(SessionScopedRepo, IOrderRepo):
    @staticmethod
    def _to_entity(row: Any) -> Order:
        return Order(
            id=row.id,
            customer=CustomerInfo(
                customer_id=row.customer_id,
                email=row.customer_email,
                first_name=row.customer_first_name,
                last_name=row.customer_last_name,
                phone=row.customer_phone,
            ),
            total_amount=row.total_amount,
            status=OrderStatus(row.status),
            tracking=Tracking(
                created_at=row.created_at, updated_at=row.updated_at, deleted_at=row.deleted_at
            ),
        )

    @Logger.io
    async def create(self, *, order: Order) -> Order:
        stmt = (
            insert(order_table)
            .values(
                customer_id=order.customer.customer_id,
                total_amount=order.total_amount,
                status=order.status.value,
                customer_email=order.customer.email,
                customer_first_name=order.customer.first_name,
                customer_last_name=order.customer.last_name,
                customer_phone=order.customer.phone,
            )
            .returning(*order_table.c)
        )
        async with self._get_session() as session:
            return self._to_entity((await session.execute(stmt)).one())

    @Logger.io
    async def get_by_id(self, *, order_id: int) -> Optional[Order]:
        stmt = only_active(select(OrderModel).where(OrderModel.id == order_id), OrderModel)
        async with self._get_session() as session:
            result = await session.execute(stmt.execution_options(populate_existing=True))
            model = result.scalar_one_or_none()
            return self._to_entity(model) if model else None

    @Logger.io
    async def list_by_customer(self, *, customer_id: int) -> List[Order]:
        stmt = only_active(
            select(OrderModel)
            .where(OrderModel.customer_id == customer_id)
            .order_by(OrderModel.created_at.desc(), OrderModel.id.desc()),
            OrderModel,
        )
        async with self._get_session() as session:
            result = await session.execute(stmt.execution_options(populate_existing=True))
            return [self._to_entity(model) for model in result.scalars()]

    @Logger.io
    async def transition_status(
        self,
        *,
        order_id: int,
        from_statuses: Collection[OrderStatus],
        to_status: OrderStatus,
    ) -> Optional[Order]:
        stmt = (
            update(order_table)
            .where(
                order_table.c.id == order_id,
                order_table.c.deleted_at.is_(None),
                order_table.c.status.in_([s.value for s in from_statuses]),
            )
            .values(status=to_status.value)
            .returning(*order_table.c)
        )
        async with self._get_session() as session:
            row = (await session.execute(stmt)).first()
            return self._to_entity(row) if row else None

    @Logger.io
    async def customer_exists(self, *, customer_id: int) -> bool:
        stmt = only_active(
            select(CustomerModel.id).where(CustomerModel.id == customer_id), CustomerModel
        )
        async with self._get_session() as session:
            return (await session.execute(stmt)).first() is not None
