"""
Wire Modules Configuration

Defines the modules that need dependency injection wiring.
Shared between production and test environments.
"""

from types import ModuleType

from src.service.desk_booking.app.command import book_desk_use_case, create_desk_use_case
from src.service.desk_booking.app.query import (
    list_available_desks_use_case,
    list_desk_bookings_use_case,
)


WIRE_MODULES: list[ModuleType] = [
    book_desk_use_case,
    create_desk_use_case,
    list_available_desks_use_case,
    list_desk_bookings_use_case,
]
