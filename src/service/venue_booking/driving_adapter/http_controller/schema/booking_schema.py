import datetime as dt
from typing import Any, List, Optional

from pydantic import BaseModel, Field, field_validator

from src.platform.types.uuid7_utils_types import UtilsUUID7
from src.service.venue_booking.domain.value_object.booking_slot import (
    INVALID_TIME_MESSAGE,
    TIME_PATTERN,
)


class BookingCreateRequest(BaseModel):
    venue_id: int
    date: dt.date
    time: str
    number_of_people: int = Field(..., ge=1)

    @field_validator('date', mode='before')
    @classmethod
    def strip_time_part(cls, value: Any) -> Any:
        # Clients may send a full ISO timestamp; only the calendar date is kept
        if isinstance(value, str) and 'T' in value:
            return value.split('T', 1)[0]
        return value

    @field_validator('time')
    @classmethod
    def validate_time(cls, value: str) -> str:
        if not TIME_PATTERN.fullmatch(value):
            raise ValueError(INVALID_TIME_MESSAGE)
        return value

    model_config = {
        'json_schema_extra': {
            'example': {
                'venue_id': 1,
                'date': '2030-06-01',
                'time': '18:30',
                'number_of_people': 4,
            }
        }
    }


class BookingResponse(BaseModel):
    model_config = {
        'json_schema_extra': {
            'example': {
                'id': '01936d8f-5e73-7c4e-a9c5-123456789abc',  # UUID7
                'user_id': 2,
                'venue_id': 1,
                'date': '2030-06-01',
                'time': '18:30',
                'number_of_people': 4,
                'status': 'pending',
                'created_at': '2025-01-10T10:30:00+00:00',
                'updated_at': '2025-01-10T10:30:00+00:00',
            }
        },
    }

    id: UtilsUUID7
    user_id: int
    venue_id: int
    date: dt.date
    time: str
    number_of_people: int
    status: str
    created_at: Optional[dt.datetime] = None
    updated_at: Optional[dt.datetime] = None


class BookingCreateResponse(BaseModel):
    message: str
    booking: BookingResponse


class BookingUserSummary(BaseModel):
    id: Optional[int] = None
    username: Optional[str] = None
    email: Optional[str] = None


class BookingVenueSummary(BaseModel):
    id: Optional[int] = None
    name: Optional[str] = None
    location: Optional[str] = None


class BookingWithDetailsResponse(BaseModel):
    id: str
    user: Optional[BookingUserSummary] = None
    venue: Optional[BookingVenueSummary] = None
    date: str
    time: str
    number_of_people: int
    status: str
    created_at: Optional[dt.datetime] = None
    updated_at: Optional[dt.datetime] = None


class AdminBookingListResponse(BaseModel):
    items: List[BookingWithDetailsResponse]
    total_count: int
    limit: int
    page: int
    total_pages: int
