from typing import AsyncContextManager, Callable, List

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.logging.loguru_io import Logger
from src.service.desk_booking.app.interface.i_desk_booking_query_repo import (
    IDeskBookingQueryRepo,
)
from src.service.desk_booking.domain.entity.desk_booking_entity import DeskBooking
from src.service.desk_booking.driven_adapter.model.desk_booking_model import DeskBookingModel


class DeskBookingQueryRepoImpl(IDeskBookingQueryRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]):
        self.session_factory = session_factory

    @staticmethod
    def _to_entity(db_booking: DeskBookingModel) -> DeskBooking:
        return DeskBooking(
            id=db_booking.id,
            desk_id=db_booking.desk_id,
            first_name=db_booking.first_name,
            last_name=db_booking.last_name,
            email=db_booking.email,
            date=db_booking.date,
            created_at=db_booking.created_at,
        )

    @Logger.io
    async def list_all(self) -> List[DeskBooking]:
        async with self.session_factory() as session:
            result = await session.execute(
                select(DeskBookingModel).order_by(DeskBookingModel.date, DeskBookingModel.id)
            )
            return [self._to_entity(db_booking) for db_booking in result.scalars().all()]
