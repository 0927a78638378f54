from abc import ABC, abstractmethod
from typing import List, Optional, Tuple

from src.service.venue_booking.domain.entity.venue_entity import VenueEntity


class IVenueQueryRepo(ABC):
    @abstractmethod
    async def get_by_id(self, venue_id: int) -> Optional[VenueEntity]:
        pass

    @abstractmethod
    async def slug_taken(self, slug: str, *, exclude_venue_id: int | None = None) -> bool:
        pass

    @abstractmethod
    async def list_venues(
        self, *, page: int, limit: int, location: str | None = None
    ) -> Tuple[List[VenueEntity], int]:
        """One page of venues plus the total count matching the location filter"""
        pass
