from datetime import date, datetime, time, timezone
import re

import attrs

from src.platform.exception.exceptions import ValidationError


TIME_PATTERN = re.compile(r'^([01]\d|2[0-3]):([0-5]\d)$')
INVALID_TIME_MESSAGE = "Invalid time format, must be in 'HH:mm' format."


def _validate_time(instance: 'BookingSlot', attribute: attrs.Attribute, value: str) -> None:
    if not isinstance(value, str) or not TIME_PATTERN.fullmatch(value):
        raise ValidationError(INVALID_TIME_MESSAGE)


@attrs.define(frozen=True)
class BookingSlot:
    """
    The unit of booking conflict: one venue, one calendar date, one HH:mm start.

    Two bookings collide only when all three parts are equal; there is no
    duration or capacity overlap.
    """

    venue_id: int
    date: date
    time: str = attrs.field(validator=_validate_time)

    @property
    def starts_at(self) -> datetime:
        """Slot start as an aware UTC timestamp"""
        hours, minutes = (int(part) for part in self.time.split(':'))
        return datetime.combine(self.date, time(hours, minutes), tzinfo=timezone.utc)

    def is_in_future(self, now: datetime | None = None) -> bool:
        now = now or datetime.now(timezone.utc)
        return self.starts_at > now
