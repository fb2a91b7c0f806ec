import re
from typing import Optional

import attrs

from src.platform.exception.exceptions import ValidationError


EMAIL_PATTERN = re.compile(r'^[^\s]+@[^\s]+\.[^\s]+$')
NAME_MIN_LENGTH = 2
NAME_MAX_LENGTH = 50


@attrs.frozen
class CustomerInfo:
    """Customer contact details copied onto an order at purchase time."""

    customer_id: int
    email: str
    first_name: str
    last_name: str
    phone: Optional[str] = None

    def normalized(self) -> 'CustomerInfo':
        """Validated copy with surrounding whitespace removed."""
        if self.customer_id is None:
            raise ValidationError('customer_id is required')

        email = (self.email or '').strip()
        if not EMAIL_PATTERN.match(email):
            raise ValidationError('customer email has invalid format')

        first_name = (self.first_name or '').strip()
        last_name = (self.last_name or '').strip()
        for label, value in (('first_name', first_name), ('last_name', last_name)):
            if not NAME_MIN_LENGTH <= len(value) <= NAME_MAX_LENGTH:
                raise ValidationError(
                    f'customer {label} must be between {NAME_MIN_LENGTH} and {NAME_MAX_LENGTH} characters'
                )

        return attrs.evolve(
            self,
            email=email,
            first_name=first_name,
            last_name=last_name,
            phone=(self.phone or '').strip() or None,
        )

    @property
    def full_name(self) -> str:
        return f'{self.first_name} {self.last_name}'
