import time
from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends
from opentelemetry import trace

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.desk_booking_metrics import metrics
from src.service.desk_booking.app.interface.i_desk_booking_command_repo import (
    IDeskBookingCommandRepo,
)
from src.service.desk_booking.app.interface.i_desk_query_repo import IDeskQueryRepo
from src.service.desk_booking.domain.entity.desk_booking_entity import (
    DeskBooking,
    DeskBookingRequest,
    DeskBookingResult,
)
from src.service.desk_booking.domain.enum.desk_booking_result_code import DeskBookingResultCode


class BookDeskUseCase:
    """
    Book a desk for a person on a given date

    Flow:
    1. Look up desks available on the requested date
    2. Book the first one and persist the booking
    3. Report SUCCESS with the booking id, or NO_DESK_AVAILABLE

    Dependencies:
    - desk_query_repo: desk inventory lookup
    - desk_booking_command_repo: booking persistence
    """

    def __init__(
        self,
        *,
        desk_query_repo: IDeskQueryRepo,
        desk_booking_command_repo: IDeskBookingCommandRepo,
    ) -> None:
        self.desk_query_repo = desk_query_repo
        self.desk_booking_command_repo = desk_booking_command_repo
        self.tracer = trace.get_tracer(__name__)

    @classmethod
    @inject
    def depends(
        cls,
        desk_query_repo: IDeskQueryRepo = Depends(Provide[Container.desk_query_repo]),
        desk_booking_command_repo: IDeskBookingCommandRepo = Depends(
            Provide[Container.desk_booking_command_repo]
        ),
    ) -> Self:
        return cls(
            desk_query_repo=desk_query_repo,
            desk_booking_command_repo=desk_booking_command_repo,
        )

    @Logger.io
    async def book_desk(self, *, request: DeskBookingRequest | None) -> DeskBookingResult:
        """
        Args:
            request: Person and date to book for

        Returns:
            Result echoing the request, with the outcome code and, on success,
            the id of the stored booking

        Raises:
            ValueError: If request is None
        """
        if request is None:
            raise ValueError('request must not be None')

        started_at = time.perf_counter()
        with self.tracer.start_as_current_span(
            'use_case.book_desk',
            attributes={'desk_booking.date': request.date.isoformat()},
        ) as span:
            available_desks = await self.desk_query_repo.get_available_desks(date=request.date)

            if available_desks:
                desk = available_desks[0]
                desk_booking = DeskBooking.from_request(request, desk_id=desk.id)
                saved_booking = await self.desk_booking_command_repo.save(
                    desk_booking=desk_booking
                )
                result = DeskBookingResult.from_request(
                    request,
                    code=DeskBookingResultCode.SUCCESS,
                    desk_booking_id=saved_booking.id,
                )
                Logger.base.info(
                    f'🪑 [BOOK-DESK] Desk {desk.id} booked for {request.date} '
                    f'(booking {saved_booking.id})'
                )
            else:
                result = DeskBookingResult.from_request(
                    request, code=DeskBookingResultCode.NO_DESK_AVAILABLE
                )
                Logger.base.info(f'🚫 [BOOK-DESK] No desk available for {request.date}')

            span.set_attribute('desk_booking.result', result.code.value)
            metrics.record_desk_booking(
                result=result.code.value, duration=time.perf_counter() - started_at
            )
            return result
