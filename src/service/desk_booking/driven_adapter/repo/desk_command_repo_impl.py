from typing import AsyncContextManager, Callable

from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.logging.loguru_io import Logger
from src.service.desk_booking.app.interface.i_desk_command_repo import IDeskCommandRepo
from src.service.desk_booking.domain.entity.desk_entity import Desk
from src.service.desk_booking.driven_adapter.model.desk_model import DeskModel


class DeskCommandRepoImpl(IDeskCommandRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]):
        self.session_factory = session_factory

    @Logger.io
    async def create(self, *, desk: Desk) -> Desk:
        async with self.session_factory() as session:
            desk_model = DeskModel(description=desk.description)

            session.add(desk_model)
            await session.commit()
            await session.refresh(desk_model)

            return Desk(id=desk_model.id, description=desk_model.description)
