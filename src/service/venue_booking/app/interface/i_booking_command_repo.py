from abc import ABC, abstractmethod

from uuid_utils import UUID

from src.service.venue_booking.domain.entity.booking_entity import Booking


class IBookingCommandRepo(ABC):
    @abstractmethod
    async def create(self, booking: Booking) -> Booking:
        """
        Insert a booking.

        Raises:
            SlotConflictError: the (venue, date, time) slot is already taken
        """
        pass

    @abstractmethod
    async def delete(self, booking_id: UUID) -> bool:
        pass
