from abc import ABC, abstractmethod

from src.service.venue_booking.domain.entity.venue_entity import VenueEntity


class IVenueCommandRepo(ABC):
    @abstractmethod
    async def create(self, venue: VenueEntity) -> VenueEntity:
        pass

    @abstractmethod
    async def update(self, venue: VenueEntity) -> VenueEntity:
        pass

    @abstractmethod
    async def delete(self, venue_id: int) -> bool:
        """Return False when no venue had that id"""
        pass
