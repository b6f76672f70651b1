from typing import List

from fastapi import APIRouter, Depends, status
from opentelemetry import trace

from src.platform.logging.loguru_io import Logger
from src.service.desk_booking.app.command.book_desk_use_case import BookDeskUseCase
from src.service.desk_booking.app.query.list_desk_bookings_use_case import (
    ListDeskBookingsUseCase,
)
from src.service.desk_booking.domain.entity.desk_booking_entity import DeskBookingRequest
from src.service.desk_booking.driving_adapter.http_controller.schema.desk_booking_schema import (
    DeskBookingCreateRequest,
    DeskBookingResponse,
    DeskBookingResultResponse,
)


router = APIRouter()
tracer = trace.get_tracer(__name__)


@router.post('', status_code=status.HTTP_200_OK)
@Logger.io
async def book_desk(
    request: DeskBookingCreateRequest,
    use_case: BookDeskUseCase = Depends(BookDeskUseCase.depends),
) -> DeskBookingResultResponse:
    with tracer.start_as_current_span('controller.book_desk') as span:
        span.set_attribute('date', request.date.isoformat())

        result = await use_case.book_desk(
            request=DeskBookingRequest(
                first_name=request.first_name,
                last_name=request.last_name,
                email=str(request.email),
                date=request.date,
            )
        )

        return DeskBookingResultResponse(
            first_name=result.first_name,
            last_name=result.last_name,
            email=result.email,
            date=result.date,
            code=result.code.value,
            desk_booking_id=result.desk_booking_id,
        )


@router.get('', response_model=List[DeskBookingResponse])
@Logger.io
async def list_desk_bookings(
    use_case: ListDeskBookingsUseCase = Depends(ListDeskBookingsUseCase.depends),
) -> List[DeskBookingResponse]:
    desk_bookings = await use_case.list_desk_bookings()
    return [
        DeskBookingResponse(
            id=desk_booking.id or 0,
            desk_id=desk_booking.desk_id,
            first_name=desk_booking.first_name,
            last_name=desk_booking.last_name,
            email=desk_booking.email,
            date=desk_booking.date,
            created_at=desk_booking.created_at,
        )
        for desk_booking in desk_bookings
    ]
