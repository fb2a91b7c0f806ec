"""
Wire Modules Configuration

Modules whose `Provide[...]` markers the container resolves.
Shared between production and test environments.
"""

from types import ModuleType

from src.service.ticketing.app.command import (
    cancel_order_use_case,
    change_order_status_use_case,
    create_order_use_case,
    manage_ticket_type_use_case,
    scan_ticket_use_case,
)
from src.service.ticketing.app.query import (
    get_order_use_case,
    get_ticket_stats_use_case,
    get_ticket_type_use_case,
    get_ticket_use_case,
)


WIRE_MODULES: list[ModuleType] = [
    create_order_use_case,
    cancel_order_use_case,
    change_order_status_use_case,
    scan_ticket_use_case,
    manage_ticket_type_use_case,
    get_order_use_case,
    get_ticket_type_use_case,
    get_ticket_stats_use_case,
    get_ticket_use_case,
]
