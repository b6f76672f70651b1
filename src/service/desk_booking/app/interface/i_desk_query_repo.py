"""
Desk Query Repository Interface

Desk inventory lookup used by the booking flow.
"""

from abc import ABC, abstractmethod
from datetime import date
from typing import List

from src.service.desk_booking.domain.entity.desk_entity import Desk


class IDeskQueryRepo(ABC):
    @abstractmethod
    async def get_available_desks(self, *, date: date) -> List[Desk]:
        """
        Get desks that have no booking on the given date

        Args:
            date: Day to check

        Returns:
            Available desks ordered by desk id (first one is booked first)
        """
        pass
