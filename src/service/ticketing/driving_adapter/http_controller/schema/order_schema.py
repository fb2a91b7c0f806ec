from datetime import datetime
from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel

from src.service.ticketing.app.dto.order_details import OrderDetails
from src.service.ticketing.domain.entity.order_entity import Order
from src.service.ticketing.driving_adapter.http_controller.schema.ticket_schema import (
    TicketResponse,
)


class LineItemRequest(BaseModel):
    ticket_type_id: int
    quantity: int


class OrderCreateRequest(BaseModel):
    model_config = {
        'json_schema_extra': {
            'example': {
                'customer_id': 1,
                'customer_email': 'ada@example.com',
                'customer_first_name': 'Ada',
                'customer_last_name': 'Lovelace',
                'customer_phone': None,
                'line_items': [
                    {'ticket_type_id': 1, 'quantity': 2},
                    {'ticket_type_id': 2, 'quantity': 1},
                ],
            }
        },
    }

    customer_id: int
    customer_email: str
    customer_first_name: str
    customer_last_name: str
    customer_phone: Optional[str] = None
    line_items: List[LineItemRequest]


class OrderResponse(BaseModel):
    id: int
    order_number: Optional[str]
    status: str
    total_amount: Decimal
    customer_id: int
    customer_email: str
    customer_full_name: str
    customer_phone: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_entity(cls, order: Order) -> 'OrderResponse':
        return cls(
            id=order.id,  # type: ignore[arg-type]
            order_number=order.order_number,
            status=order.status.value,
            total_amount=order.total_amount,
            customer_id=order.customer_id,
            customer_email=order.customer.email,
            customer_full_name=order.customer_full_name,
            customer_phone=order.customer.phone,
            created_at=order.tracking.created_at,
            updated_at=order.tracking.updated_at,
        )


class OrderDetailResponse(OrderResponse):
    tickets: List[TicketResponse]

    @classmethod
    def from_details(cls, details: OrderDetails) -> 'OrderDetailResponse':
        return cls(
            **OrderResponse.from_entity(details.order).model_dump(),
            tickets=[TicketResponse.from_entity(t) for t in details.tickets],
        )
