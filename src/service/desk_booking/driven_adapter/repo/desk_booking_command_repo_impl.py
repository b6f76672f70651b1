from typing import AsyncContextManager, Callable

import attrs
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.exception.exceptions import DomainError
from src.platform.logging.loguru_io import Logger
from src.service.desk_booking.app.interface.i_desk_booking_command_repo import (
    IDeskBookingCommandRepo,
)
from src.service.desk_booking.domain.entity.desk_booking_entity import DeskBooking
from src.service.desk_booking.driven_adapter.model.desk_booking_model import DeskBookingModel


class DeskBookingCommandRepoImpl(IDeskBookingCommandRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]):
        self.session_factory = session_factory

    @Logger.io
    async def save(self, *, desk_booking: DeskBooking) -> DeskBooking:
        async with self.session_factory() as session:
            booking_model = DeskBookingModel(
                desk_id=desk_booking.desk_id,
                first_name=desk_booking.first_name,
                last_name=desk_booking.last_name,
                email=desk_booking.email,
                date=desk_booking.date,
            )

            session.add(booking_model)
            try:
                await session.commit()
            except IntegrityError as e:
                await session.rollback()
                # uq_desk_booking_desk_id_date: another request took the desk first
                raise DomainError(
                    f'Desk {desk_booking.desk_id} is already booked on {desk_booking.date}', 409
                ) from e
            await session.refresh(booking_model)

            return attrs.evolve(
                desk_booking, id=booking_model.id, created_at=booking_model.created_at
            )
