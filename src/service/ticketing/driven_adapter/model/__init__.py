"""
Database Models

Import all models here to ensure they are registered with SQLAlchemy
"""

from src.service.ticketing.driven_adapter.model.customer_model import CustomerModel
from src.service.ticketing.driven_adapter.model.event_model import EventModel
from src.service.ticketing.driven_adapter.model.order_model import OrderModel
from src.service.ticketing.driven_adapter.model.tenant_model import TenantModel
from src.service.ticketing.driven_adapter.model.ticket_model import TicketModel
from src.service.ticketing.driven_adapter.model.ticket_type_model import TicketTypeModel

__all__ = [
    'CustomerModel',
    'EventModel',
    'OrderModel',
    'TenantModel',
    'TicketModel',
    'TicketTypeModel',
]
