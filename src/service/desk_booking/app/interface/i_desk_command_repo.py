from abc import ABC, abstractmethod

from src.service.desk_booking.domain.entity.desk_entity import Desk


class IDeskCommandRepo(ABC):
    @abstractmethod
    async def create(self, *, desk: Desk) -> Desk:
        """Persist a new desk and return it with its assigned id"""
        pass
