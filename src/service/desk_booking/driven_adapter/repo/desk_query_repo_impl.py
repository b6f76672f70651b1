from datetime import date
from typing import AsyncContextManager, Callable, List

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.logging.loguru_io import Logger
from src.service.desk_booking.app.interface.i_desk_query_repo import IDeskQueryRepo
from src.service.desk_booking.domain.entity.desk_entity import Desk
from src.service.desk_booking.driven_adapter.model.desk_booking_model import DeskBookingModel
from src.service.desk_booking.driven_adapter.model.desk_model import DeskModel


class DeskQueryRepoImpl(IDeskQueryRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]):
        self.session_factory = session_factory

    @staticmethod
    def _to_entity(db_desk: DeskModel) -> Desk:
        return Desk(id=db_desk.id, description=db_desk.description)

    @Logger.io
    async def get_available_desks(self, *, date: date) -> List[Desk]:
        booked_on_date = (
            select(DeskBookingModel.id)
            .where(DeskBookingModel.desk_id == DeskModel.id, DeskBookingModel.date == date)
            .exists()
        )
        async with self.session_factory() as session:
            result = await session.execute(
                select(DeskModel).where(~booked_on_date).order_by(DeskModel.id)
            )
            return [self._to_entity(db_desk) for db_desk in result.scalars().all()]
