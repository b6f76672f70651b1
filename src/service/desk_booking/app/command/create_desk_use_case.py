from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.desk_booking.app.interface.i_desk_command_repo import IDeskCommandRepo
from src.service.desk_booking.domain.entity.desk_entity import Desk


class CreateDeskUseCase:
    def __init__(self, *, desk_command_repo: IDeskCommandRepo) -> None:
        self.desk_command_repo = desk_command_repo

    @classmethod
    @inject
    def depends(
        cls,
        desk_command_repo: IDeskCommandRepo = Depends(Provide[Container.desk_command_repo]),
    ) -> Self:
        return cls(desk_command_repo=desk_command_repo)

    @Logger.io
    async def create_desk(self, *, description: str) -> Desk:
        desk = Desk.create(description=description)
        created_desk = await self.desk_command_repo.create(desk=desk)
        Logger.base.info(f'🪑 [CREATE-DESK] Desk {created_desk.id} added: {created_desk.description}')
        return created_desk
