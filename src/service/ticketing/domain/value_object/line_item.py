from typing import Iterable

import attrs

from src.platform.exception.exceptions import ValidationError


@attrs.frozen
class LineItem:
    ticket_type_id: int
    quantity: int


def merge_line_items(
    items: Iterable[LineItem], *, max_items: int, max_quantity: int
) -> list[LineItem]:
    """
    Validate a purchase request and collapse repeated ticket types into one line.

    Quantities of the same ticket type are summed; the first occurrence decides
    the position in the result.
    """
    merged: dict[int, int] = {}
    for item in items:
        if item.quantity <= 0:
            raise ValidationError('quantity must be greater than 0')
        merged[item.ticket_type_id] = merged.get(item.ticket_type_id, 0) + item.quantity

    if not merged:
        raise ValidationError('order must contain at least one line item')
    if len(merged) > max_items:
        raise ValidationError(f'order may contain at most {max_items} ticket types')

    result = [LineItem(ticket_type_id=tid, quantity=qty) for tid, qty in merged.items()]
    for item in result:
        if item.quantity > max_quantity:
            raise ValidationError(
                f'quantity for ticket type {item.ticket_type_id} exceeds the limit of {max_quantity}'
            )
    return result
