from decimal import Decimal
from enum import StrEnum
from typing import Iterable, Optional

import attrs

from src.platform.exception.exceptions import StateConflictError, ValidationError
from src.service.ticketing.domain.value_object.customer_info import CustomerInfo
from src.service.ticketing.domain.value_object.tracking import Tracking


class OrderStatus(StrEnum):
    PENDING = 'pending'
    CONFIRMED = 'confirmed'
    PAID = 'paid'
    CANCELLED = 'cancelled'
    REFUNDED = 'refunded'


CANCELLABLE_STATUSES = frozenset({OrderStatus.PENDING, OrderStatus.CONFIRMED})
CONFIRMABLE_STATUSES = frozenset({OrderStatus.PENDING})
PAYABLE_STATUSES = frozenset({OrderStatus.PENDING, OrderStatus.CONFIRMED})


def compute_total(priced_quantities: Iterable[tuple[Decimal, int]]) -> Decimal:
    total = sum((price * quantity for price, quantity in priced_quantities), Decimal('0'))
    if total <= 0:
        raise ValidationError('order total must be greater than 0')
    return total


@attrs.define
class Order:
    customer: CustomerInfo
    total_amount: Decimal
    status: OrderStatus = OrderStatus.PENDING
    id: Optional[int] = None
    tracking: Tracking = attrs.field(factory=Tracking)

    @classmethod
    def create(cls, *, customer: CustomerInfo, total_amount: Decimal) -> 'Order':
        if total_amount <= 0:
            raise ValidationError('order total must be greater than 0')
        return cls(
            customer=customer,
            total_amount=total_amount,
            status=OrderStatus.PENDING,
            tracking=Tracking.new(),
        )

    @property
    def customer_id(self) -> int:
        return self.customer.customer_id

    @property
    def customer_full_name(self) -> str:
        return self.customer.full_name

    @property
    def order_number(self) -> Optional[str]:
        if self.id is None:
            return None
        return f'TIX-{self.id:06d}'

    @property
    def cancellable(self) -> bool:
        return self.status in CANCELLABLE_STATUSES

    @property
    def completed(self) -> bool:
        return self.status == OrderStatus.PAID

    def ensure_can_transition_to(self, target: OrderStatus) -> None:
        allowed = {
            OrderStatus.CONFIRMED: CONFIRMABLE_STATUSES,
            OrderStatus.PAID: PAYABLE_STATUSES,
            OrderStatus.CANCELLED: CANCELLABLE_STATUSES,
        }.get(target, frozenset())
        if self.status not in allowed:
            raise StateConflictError(f'Cannot move order from {self.status} to {target}')
