"""Application layer interfaces (Ports)"""

from src.service.ticketing.app.interface.i_inventory_ledger import IInventoryLedger
from src.service.ticketing.app.interface.i_notification_sender import INotificationSender
from src.service.ticketing.app.interface.i_order_repo import IOrderRepo
from src.service.ticketing.app.interface.i_ticket_repo import ITicketRepo
from src.service.ticketing.app.interface.i_ticket_type_repo import ITicketTypeRepo

__all__ = [
    'IInventoryLedger',
    'INotificationSender',
    'IOrderRepo',
    'ITicketRepo',
    'ITicketTypeRepo',
]
