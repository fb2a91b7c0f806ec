"""Ticketing Domain Value Objects"""

from src.service.ticketing.domain.value_object.customer_info import CustomerInfo
from src.service.ticketing.domain.value_object.line_item import LineItem
from src.service.ticketing.domain.value_object.tracking import Tracking

__all__ = ['CustomerInfo', 'LineItem', 'Tracking']
