"""Desk Booking Application Interfaces"""

from src.service.desk_booking.app.interface.i_desk_booking_command_repo import (
    IDeskBookingCommandRepo,
)
from src.service.desk_booking.app.interface.i_desk_booking_query_repo import (
    IDeskBookingQueryRepo,
)
from src.service.desk_booking.app.interface.i_desk_command_repo import IDeskCommandRepo
from src.service.desk_booking.app.interface.i_desk_query_repo import IDeskQueryRepo

__all__ = [
    'IDeskBookingCommandRepo',
    'IDeskBookingQueryRepo',
    'IDeskCommandRepo',
    'IDeskQueryRepo',
]
