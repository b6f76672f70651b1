from enum import StrEnum


class DeskBookingResultCode(StrEnum):
    SUCCESS = 'success'
    NO_DESK_AVAILABLE = 'no_desk_available'
