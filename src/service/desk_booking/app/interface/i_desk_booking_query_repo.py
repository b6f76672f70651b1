from abc import ABC, abstractmethod
from typing import List

from src.service.desk_booking.domain.entity.desk_booking_entity import DeskBooking


class IDeskBookingQueryRepo(ABC):
    @abstractmethod
    async def list_all(self) -> List[DeskBooking]:
        """All bookings ordered by date, then id"""
        pass
