from datetime import date
from typing import List, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.desk_booking.app.interface.i_desk_query_repo import IDeskQueryRepo
from src.service.desk_booking.domain.entity.desk_entity import Desk


class ListAvailableDesksUseCase:
    def __init__(self, *, desk_query_repo: IDeskQueryRepo) -> None:
        self.desk_query_repo = desk_query_repo

    @classmethod
    @inject
    def depends(
        cls,
        desk_query_repo: IDeskQueryRepo = Depends(Provide[Container.desk_query_repo]),
    ) -> Self:
        return cls(desk_query_repo=desk_query_repo)

    @Logger.io
    async def list_available_desks(self, *, date: date) -> List[Desk]:
        return await self.desk_query_repo.get_available_desks(date=date)
