from datetime import date
from typing import List

from fastapi import APIRouter, Depends, status

from src.platform.logging.loguru_io import Logger
from src.service.desk_booking.app.command.create_desk_use_case import CreateDeskUseCase
from src.service.desk_booking.app.query.list_available_desks_use_case import (
    ListAvailableDesksUseCase,
)
from src.service.desk_booking.driving_adapter.http_controller.schema.desk_schema import (
    DeskCreateRequest,
    DeskResponse,
)


router = APIRouter()


@router.post('', status_code=status.HTTP_201_CREATED)
@Logger.io
async def create_desk(
    request: DeskCreateRequest,
    use_case: CreateDeskUseCase = Depends(CreateDeskUseCase.depends),
) -> DeskResponse:
    desk = await use_case.create_desk(description=request.description)
    return DeskResponse(id=desk.id or 0, description=desk.description)


@router.get('/available', response_model=List[DeskResponse])
@Logger.io
async def list_available_desks(
    date: date,
    use_case: ListAvailableDesksUseCase = Depends(ListAvailableDesksUseCase.depends),
) -> List[DeskResponse]:
    desks = await use_case.list_available_desks(date=date)
    return [DeskResponse(id=desk.id or 0, description=desk.description) for desk in desks]
