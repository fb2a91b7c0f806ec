from decimal import Decimal, InvalidOperation
from typing import Any, Optional

import attrs

from src.platform.exception.exceptions import DomainError, ValidationError
from src.service.ticketing.domain.value_object.tracking import Tracking, touch


NAME_MAX_LENGTH = 100
PRICE_SCALE = Decimal('0.01')
# Numeric(12, 2) column: at most 10 integer digits
PRICE_LIMIT = Decimal('1E10')


def to_price(value: Any) -> Decimal:
    try:
        price = value if isinstance(value, Decimal) else Decimal(str(value))
    except (InvalidOperation, ValueError):
        raise ValidationError(f'price must be a decimal number, got {value!r}')
    if not price.is_finite():
        raise ValidationError('price must be a finite number')
    return price


def _validate_name(name: Optional[str]) -> str:
    if not name or not name.strip():
        raise ValidationError('ticket type name is required')
    if len(name) > NAME_MAX_LENGTH:
        raise ValidationError(f'ticket type name must be at most {NAME_MAX_LENGTH} characters')
    return name.strip()


def _validate_price(price: Any) -> Decimal:
    value = to_price(price)
    if value < 0:
        raise ValidationError('price must be greater than or equal to 0')
    if value >= PRICE_LIMIT:
        raise ValidationError('price must be less than 10,000,000,000')
    if value != value.quantize(PRICE_SCALE):
        raise ValidationError('price must have at most 2 decimal places')
    return value


@attrs.define
class TicketType:
    """
    A priced admission category of an event with its own stock.

    `available` only moves through the inventory ledger; `with_details` is the
    general update path and never touches stock.
    """

    event_id: int
    name: str
    price: Decimal
    capacity: int
    available: int
    description: Optional[str] = None
    id: Optional[int] = None
    tracking: Tracking = attrs.field(factory=Tracking)

    def __attrs_post_init__(self) -> None:
        if self.available < 0:
            raise DomainError('available cannot be negative')
        if self.available > self.capacity:
            raise DomainError('available cannot exceed capacity')

    @classmethod
    def create(
        cls,
        *,
        event_id: int,
        name: str,
        price: Any,
        capacity: int,
        description: Optional[str] = None,
    ) -> 'TicketType':
        if capacity is None or capacity <= 0:
            raise ValidationError('capacity must be greater than 0')
        return cls(
            event_id=event_id,
            name=_validate_name(name),
            description=description,
            price=_validate_price(price),
            capacity=capacity,
            available=capacity,
            tracking=Tracking.new(),
        )

    def with_details(
        self,
        *,
        name: Optional[str] = None,
        description: Optional[str] = None,
        price: Any = None,
    ) -> 'TicketType':
        changes: dict[str, Any] = {}
        if name is not None:
            changes['name'] = _validate_name(name)
        if description is not None:
            changes['description'] = description
        if price is not None:
            changes['price'] = _validate_price(price)
        return touch(attrs.evolve(self, **changes))

    @property
    def sold_count(self) -> int:
        return self.capacity - self.available

    @property
    def is_available(self) -> bool:
        return self.available > 0

    def can_fulfill(self, quantity: int) -> bool:
        return self.available >= quantity
