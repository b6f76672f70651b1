"""
Desk Booking Command Repository Interface

Booking persistence used by the booking flow.
"""

from abc import ABC, abstractmethod

from src.service.desk_booking.domain.entity.desk_booking_entity import DeskBooking


class IDeskBookingCommandRepo(ABC):
    @abstractmethod
    async def save(self, *, desk_booking: DeskBooking) -> DeskBooking:
        """
        Persist a desk booking

        Args:
            desk_booking: Booking without id

        Returns:
            The same booking carrying the id assigned by storage
        """
        pass
