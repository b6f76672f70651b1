from typing import List, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.desk_booking.app.interface.i_desk_booking_query_repo import (
    IDeskBookingQueryRepo,
)
from src.service.desk_booking.domain.entity.desk_booking_entity import DeskBooking


class ListDeskBookingsUseCase:
    def __init__(self, *, desk_booking_query_repo: IDeskBookingQueryRepo) -> None:
        self.desk_booking_query_repo = desk_booking_query_repo

    @classmethod
    @inject
    def depends(
        cls,
        desk_booking_query_repo: IDeskBookingQueryRepo = Depends(
            Provide[Container.desk_booking_query_repo]
        ),
    ) -> Self:
        return cls(desk_booking_query_repo=desk_booking_query_repo)

    @Logger.io
    async def list_desk_bookings(self) -> List[DeskBooking]:
        return await self.desk_booking_query_repo.list_all()
