"""Desk Booking Domain Enums"""

from src.service.desk_booking.domain.enum.desk_booking_result_code import DeskBookingResultCode

__all__ = ['DeskBookingResultCode']
