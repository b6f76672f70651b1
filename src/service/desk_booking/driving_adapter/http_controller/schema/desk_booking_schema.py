from datetime import date as date_type, datetime
from typing import Optional

from pydantic import BaseModel, EmailStr, Field, field_validator


MAX_EMAIL_LENGTH = 100


class DeskBookingCreateRequest(BaseModel):
    first_name: str = Field(min_length=1, max_length=50)
    last_name: str = Field(min_length=1, max_length=50)
    email: EmailStr
    date: date_type

    @field_validator('email')
    @classmethod
    def check_email_length(cls, v: str) -> str:
        if len(v) > MAX_EMAIL_LENGTH:
            raise ValueError(f'email must be at most {MAX_EMAIL_LENGTH} characters')
        return v

    class Config:
        json_schema_extra = {
            'example': {
                'first_name': 'Pinky',
                'last_name': 'Baring',
                'email': 'pinky.baring@customer.com',
                'date': '2026-01-15',
            }
        }


class DeskBookingResultResponse(BaseModel):
    model_config = {
        'json_schema_extra': {
            'examples': [
                {
                    'first_name': 'Pinky',
                    'last_name': 'Baring',
                    'email': 'pinky.baring@customer.com',
                    'date': '2026-01-15',
                    'code': 'success',
                    'desk_booking_id': 7,
                },
                {
                    'first_name': 'Pinky',
                    'last_name': 'Baring',
                    'email': 'pinky.baring@customer.com',
                    'date': '2026-01-15',
                    'code': 'no_desk_available',
                    'desk_booking_id': None,
                },
            ]
        },
    }

    first_name: str
    last_name: str
    email: str
    date: date_type
    code: str
    desk_booking_id: Optional[int] = None


class DeskBookingResponse(BaseModel):
    id: int
    desk_id: int
    first_name: str
    last_name: str
    email: str
    date: date_type
    created_at: Optional[datetime] = None
