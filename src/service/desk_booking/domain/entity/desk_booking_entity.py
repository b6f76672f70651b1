from datetime import date as date_type, datetime
from typing import Any, Optional, Self

import attrs

from src.service.desk_booking.domain.enum.desk_booking_result_code import DeskBookingResultCode


@attrs.define
class DeskBookingBase:
    """Person and date shared by the request, the stored booking and the result."""

    first_name: str
    last_name: str
    email: str
    date: date_type

    @classmethod
    def from_request(cls, request: 'DeskBookingBase', **fields: Any) -> Self:
        """Copy the person and date of `request` into a new instance of `cls`."""
        return cls(
            first_name=request.first_name,
            last_name=request.last_name,
            email=request.email,
            date=request.date,
            **fields,
        )


@attrs.define
class DeskBookingRequest(DeskBookingBase):
    pass


@attrs.define
class DeskBooking(DeskBookingBase):
    desk_id: int
    id: Optional[int] = None
    created_at: Optional[datetime] = None


@attrs.define
class DeskBookingResult(DeskBookingBase):
    code: DeskBookingResultCode
    desk_booking_id: Optional[int] = None

    @property
    def is_success(self) -> bool:
        return self.code == DeskBookingResultCode.SUCCESS
