"""
Unit tests for BookDeskUseCase

Covers the booking flow:
1. Reject a missing request
2. Look up available desks for the requested date
3. Persist a booking on the first available desk
4. Report SUCCESS with the booking id, or NO_DESK_AVAILABLE
"""

from typing import Optional
from unittest.mock import AsyncMock

import attrs
from prometheus_client import REGISTRY
import pytest

from src.service.desk_booking.app.command.book_desk_use_case import BookDeskUseCase
from src.service.desk_booking.domain.entity.desk_booking_entity import (
    DeskBooking,
    DeskBookingRequest,
)
from src.service.desk_booking.domain.entity.desk_entity import Desk
from src.service.desk_booking.domain.enum.desk_booking_result_code import DeskBookingResultCode
from test.util_constant import TEST_BOOKING_DATE, TEST_EMAIL, TEST_FIRST_NAME, TEST_LAST_NAME


@pytest.fixture
def request_() -> DeskBookingRequest:
    return DeskBookingRequest(
        first_name=TEST_FIRST_NAME,
        last_name=TEST_LAST_NAME,
        email=TEST_EMAIL,
        date=TEST_BOOKING_DATE,
    )


@pytest.fixture
def available_desks() -> list[Desk]:
    return [Desk(id=7, description='Desk 7')]


@pytest.fixture
def mock_desk_query_repo(available_desks: list[Desk]) -> AsyncMock:
    repo = AsyncMock()
    repo.get_available_desks = AsyncMock(return_value=available_desks)
    return repo


@pytest.fixture
def mock_desk_booking_command_repo() -> AsyncMock:
    """Storage stub assigning id 1 to whatever it saves"""
    repo = AsyncMock()
    repo.save = AsyncMock(side_effect=lambda *, desk_booking: attrs.evolve(desk_booking, id=1))
    return repo


@pytest.fixture
def book_desk_use_case(
    mock_desk_query_repo: AsyncMock,
    mock_desk_booking_command_repo: AsyncMock,
) -> BookDeskUseCase:
    return BookDeskUseCase(
        desk_query_repo=mock_desk_query_repo,
        desk_booking_command_repo=mock_desk_booking_command_repo,
    )


def _booking_request_count(result: DeskBookingResultCode) -> float:
    return (
        REGISTRY.get_sample_value('desk_booking_requests_total', {'result': result.value}) or 0.0
    )


@pytest.mark.unit
class TestBookDeskUseCase:
    @pytest.mark.asyncio
    async def test_book_desk__returns_result_with_request_values(
        self,
        book_desk_use_case: BookDeskUseCase,
        request_: DeskBookingRequest,
    ) -> None:
        result = await book_desk_use_case.book_desk(request=request_)

        assert result is not None
        assert result.first_name == request_.first_name
        assert result.last_name == request_.last_name
        assert result.email == request_.email
        assert result.date == request_.date

    @pytest.mark.asyncio
    async def test_book_desk__raises_if_request_is_none(
        self,
        book_desk_use_case: BookDeskUseCase,
        mock_desk_query_repo: AsyncMock,
        mock_desk_booking_command_repo: AsyncMock,
    ) -> None:
        with pytest.raises(ValueError) as exc_info:
            await book_desk_use_case.book_desk(request=None)

        assert 'request' in str(exc_info.value)
        mock_desk_query_repo.get_available_desks.assert_not_awaited()
        mock_desk_booking_command_repo.save.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_book_desk__looks_up_desks_for_requested_date(
        self,
        book_desk_use_case: BookDeskUseCase,
        mock_desk_query_repo: AsyncMock,
        request_: DeskBookingRequest,
    ) -> None:
        await book_desk_use_case.book_desk(request=request_)

        mock_desk_query_repo.get_available_desks.assert_awaited_once_with(date=request_.date)

    @pytest.mark.asyncio
    async def test_book_desk__saves_desk_booking(
        self,
        book_desk_use_case: BookDeskUseCase,
        mock_desk_booking_command_repo: AsyncMock,
        available_desks: list[Desk],
        request_: DeskBookingRequest,
    ) -> None:
        await book_desk_use_case.book_desk(request=request_)

        mock_desk_booking_command_repo.save.assert_awaited_once()
        saved_desk_booking: DeskBooking = mock_desk_booking_command_repo.save.call_args.kwargs[
            'desk_booking'
        ]
        assert saved_desk_booking.first_name == request_.first_name
        assert saved_desk_booking.last_name == request_.last_name
        assert saved_desk_booking.email == request_.email
        assert saved_desk_booking.date == request_.date
        assert saved_desk_booking.desk_id == available_desks[0].id

    @pytest.mark.asyncio
    async def test_book_desk__picks_first_of_several_available_desks(
        self,
        book_desk_use_case: BookDeskUseCase,
        mock_desk_booking_command_repo: AsyncMock,
        available_desks: list[Desk],
        request_: DeskBookingRequest,
    ) -> None:
        available_desks.extend([Desk(id=3, description='Desk 3'), Desk(id=9, description='Desk 9')])

        await book_desk_use_case.book_desk(request=request_)

        saved_desk_booking = mock_desk_booking_command_repo.save.call_args.kwargs['desk_booking']
        assert saved_desk_booking.desk_id == 7

    @pytest.mark.asyncio
    async def test_book_desk__does_not_save_if_no_desk_is_available(
        self,
        book_desk_use_case: BookDeskUseCase,
        mock_desk_booking_command_repo: AsyncMock,
        available_desks: list[Desk],
        request_: DeskBookingRequest,
    ) -> None:
        available_desks.clear()

        await book_desk_use_case.book_desk(request=request_)

        mock_desk_booking_command_repo.save.assert_not_awaited()

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        'expected_result_code,is_desk_available',
        [
            (DeskBookingResultCode.SUCCESS, True),
            (DeskBookingResultCode.NO_DESK_AVAILABLE, False),
        ],
    )
    async def test_book_desk__returns_expected_result_code(
        self,
        book_desk_use_case: BookDeskUseCase,
        available_desks: list[Desk],
        request_: DeskBookingRequest,
        expected_result_code: DeskBookingResultCode,
        is_desk_available: bool,
    ) -> None:
        if not is_desk_available:
            available_desks.clear()

        result = await book_desk_use_case.book_desk(request=request_)

        assert result.code == expected_result_code
        assert result.is_success is is_desk_available

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        'expected_desk_booking_id,is_desk_available',
        [
            (5, True),
            (None, False),
        ],
    )
    async def test_book_desk__returns_expected_desk_booking_id(
        self,
        book_desk_use_case: BookDeskUseCase,
        mock_desk_booking_command_repo: AsyncMock,
        available_desks: list[Desk],
        request_: DeskBookingRequest,
        expected_desk_booking_id: Optional[int],
        is_desk_available: bool,
    ) -> None:
        if not is_desk_available:
            available_desks.clear()
        else:
            mock_desk_booking_command_repo.save.side_effect = lambda *, desk_booking: (
                attrs.evolve(desk_booking, id=expected_desk_booking_id)
            )

        result = await book_desk_use_case.book_desk(request=request_)

        assert result.desk_booking_id == expected_desk_booking_id

    @pytest.mark.asyncio
    async def test_book_desk__records_result_metric(
        self,
        book_desk_use_case: BookDeskUseCase,
        available_desks: list[Desk],
        request_: DeskBookingRequest,
    ) -> None:
        success_before = _booking_request_count(DeskBookingResultCode.SUCCESS)
        no_desk_before = _booking_request_count(DeskBookingResultCode.NO_DESK_AVAILABLE)

        await book_desk_use_case.book_desk(request=request_)
        available_desks.clear()
        await book_desk_use_case.book_desk(request=request_)

        assert _booking_request_count(DeskBookingResultCode.SUCCESS) == success_before + 1
        assert _booking_request_count(DeskBookingResultCode.NO_DESK_AVAILABLE) == no_desk_before + 1
