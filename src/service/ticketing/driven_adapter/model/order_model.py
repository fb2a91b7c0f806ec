from datetime import datetime
from decimal import Decimal
from typing import Optional

from sqlalchemy import CheckConstraint, ForeignKey, Integer, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column

from src.platform.database.orm_db_setting import Base
from src.platform.database.tracked_columns import (
    created_at_column,
    deleted_at_column,
    updated_at_column,
)


class OrderModel(Base):
    __tablename__ = 'orders'
    __table_args__ = (CheckConstraint('total_amount > 0', name='ck_orders_total_positive'),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    customer_id: Mapped[Optional[int]] = mapped_column(
        Integer, ForeignKey('customer.id'), nullable=True, index=True
    )
    total_amount: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False)
    status: Mapped[str] = mapped_column(String(20), default='pending', nullable=False, index=True)
    # Contact details as captured at purchase time
    customer_email: Mapped[str] = mapped_column(String(255), nullable=False)
    customer_first_name: Mapped[str] = mapped_column(String(50), nullable=False)
    customer_last_name: Mapped[str] = mapped_column(String(50), nullable=False)
    customer_phone: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    created_at: Mapped[datetime] = created_at_column()
    updated_at: Mapped[datetime] = updated_at_column()
    deleted_at: Mapped[Optional[datetime]] = deleted_at_column()
