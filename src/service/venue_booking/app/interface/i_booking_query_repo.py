from abc import ABC, abstractmethod
from typing import Any, List, Optional, Tuple

from uuid_utils import UUID

from src.service.venue_booking.domain.entity.booking_entity import Booking
from src.service.venue_booking.domain.value_object.booking_slot import BookingSlot


class IBookingQueryRepo(ABC):
    @abstractmethod
    async def get_by_id(self, booking_id: UUID) -> Optional[Booking]:
        pass

    @abstractmethod
    async def find_by_slot(self, slot: BookingSlot) -> Optional[Booking]:
        pass

    @abstractmethod
    async def list_by_user_with_details(self, user_id: int) -> List[dict[str, Any]]:
        """Bookings of one user, each with ``user`` and ``venue`` summaries"""
        pass

    @abstractmethod
    async def list_with_details(
        self, *, page: int, limit: int, search_text: str | None = None
    ) -> Tuple[List[dict[str, Any]], int]:
        """Newest-first page of all bookings plus total count matching ``search_text``"""
        pass
