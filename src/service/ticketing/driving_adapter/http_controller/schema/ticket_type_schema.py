from decimal import Decimal
from typing import Optional

from pydantic import BaseModel

from src.service.ticketing.domain.entity.ticket_type_entity import TicketType


class TicketTypeCreateRequest(BaseModel):
    event_id: int
    name: str
    description: Optional[str] = None
    price: Decimal
    capacity: int

    class Config:
        json_schema_extra = {
            'example': {
                'event_id': 1,
                'name': 'General',
                'description': 'Standing area',
                'price': '25.00',
                'capacity': 500,
            }
        }


class TicketTypeUpdateRequest(BaseModel):
    name: Optional[str] = None
    description: Optional[str] = None
    price: Optional[Decimal] = None


class TicketTypeResponse(BaseModel):
    id: int
    event_id: int
    name: str
    description: Optional[str] = None
    price: Decimal
    capacity: int
    available: int
    sold_count: int
    is_available: bool

    @classmethod
    def from_entity(cls, ticket_type: TicketType) -> 'TicketTypeResponse':
        return cls(
            id=ticket_type.id,  # type: ignore[arg-type]
            event_id=ticket_type.event_id,
            name=ticket_type.name,
            description=ticket_type.description,
            price=ticket_type.price,
            capacity=ticket_type.capacity,
            available=ticket_type.available,
            sold_count=ticket_type.sold_count,
            is_available=ticket_type.is_available,
        )
