from datetime import date, datetime, timezone
from enum import StrEnum
from typing import Optional

import attrs
from uuid_utils import UUID

from src.platform.exception.exceptions import InvalidTimeError, ValidationError
from src.platform.logging.loguru_io import Logger
from src.service.venue_booking.domain.value_object.booking_slot import BookingSlot


PAST_BOOKING_MESSAGE = 'Booking cannot be in the past. Please select a future date.'
SLOT_TAKEN_MESSAGE = 'There is already a booking for this venue at the selected time.'


class BookingStatus(StrEnum):
    PENDING = 'pending'
    APPROVED = 'approved'
    REJECTED = 'rejected'


@attrs.define
class Booking:
    id: UUID
    user_id: int
    venue_id: int
    date: date
    time: str
    number_of_people: int
    status: BookingStatus = BookingStatus.PENDING
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @property
    def slot(self) -> BookingSlot:
        return BookingSlot(venue_id=self.venue_id, date=self.date, time=self.time)

    @classmethod
    @Logger.io
    def create(
        cls,
        *,
        id: UUID,
        user_id: int,
        slot: BookingSlot,
        number_of_people: int,
        now: datetime | None = None,
    ) -> 'Booking':
        """
        New pending booking for a slot.

        Raises:
            InvalidTimeError: slot start is not strictly after ``now``
            ValidationError: party size below one
        """
        now = now or datetime.now(timezone.utc)
        if not slot.is_in_future(now):
            raise InvalidTimeError(PAST_BOOKING_MESSAGE)
        if number_of_people < 1:
            raise ValidationError('Number of people must be at least 1.')

        return cls(
            id=id,
            user_id=user_id,
            venue_id=slot.venue_id,
            date=slot.date,
            time=slot.time,
            number_of_people=number_of_people,
            status=BookingStatus.PENDING,
            created_at=now,
            updated_at=now,
        )

    def is_owned_by(self, user_id: int | None) -> bool:
        return user_id is not None and self.user_id == user_id
