import pytest

from src.platform.exception.exceptions import DomainError
from src.service.desk_booking.domain.entity.desk_booking_entity import (
    DeskBooking,
    DeskBookingRequest,
    DeskBookingResult,
)
from src.service.desk_booking.domain.entity.desk_entity import Desk
from src.service.desk_booking.domain.enum.desk_booking_result_code import DeskBookingResultCode
from test.util_constant import TEST_BOOKING_DATE, TEST_EMAIL, TEST_FIRST_NAME, TEST_LAST_NAME


@pytest.fixture
def desk_booking_request() -> DeskBookingRequest:
    return DeskBookingRequest(
        first_name=TEST_FIRST_NAME,
        last_name=TEST_LAST_NAME,
        email=TEST_EMAIL,
        date=TEST_BOOKING_DATE,
    )


@pytest.mark.unit
class TestDeskBookingFromRequest:
    def test_desk_booking__copies_person_and_date(
        self, desk_booking_request: DeskBookingRequest
    ) -> None:
        desk_booking = DeskBooking.from_request(desk_booking_request, desk_id=4)

        assert desk_booking.first_name == TEST_FIRST_NAME
        assert desk_booking.last_name == TEST_LAST_NAME
        assert desk_booking.email == TEST_EMAIL
        assert desk_booking.date == TEST_BOOKING_DATE
        assert desk_booking.desk_id == 4
        assert desk_booking.id is None

    def test_desk_booking_result__defaults_to_no_booking_id(
        self, desk_booking_request: DeskBookingRequest
    ) -> None:
        result = DeskBookingResult.from_request(
            desk_booking_request, code=DeskBookingResultCode.NO_DESK_AVAILABLE
        )

        assert result.desk_booking_id is None
        assert result.is_success is False
        assert result.date == TEST_BOOKING_DATE


@pytest.mark.unit
class TestDeskCreate:
    def test_create__strips_description(self) -> None:
        desk = Desk.create(description=' Desk 1 ')

        assert desk.description == 'Desk 1'
        assert desk.id is None

    @pytest.mark.parametrize('description', ['', '   ', 'x' * 101])
    def test_create__rejects_invalid_description(self, description: str) -> None:
        with pytest.raises(DomainError):
            Desk.create(description=description)

    def test_create__accepts_max_length_description(self) -> None:
        assert Desk.create(description='x' * 100).description == 'x' * 100
