from abc import ABC, abstractmethod

from src.service.venue_booking.domain.entity.user_entity import UserEntity


class IUserCommandRepo(ABC):
    """User Command Repository Abstract Interface - Handles write operations"""

    @abstractmethod
    async def create(self, user_entity: UserEntity) -> UserEntity:
        """Persist a new user; raises ConflictError on duplicate username or email"""
        pass

    @abstractmethod
    async def update(self, user_entity: UserEntity) -> UserEntity:
        """Write back verification, reset-token and password fields"""
        pass

    @abstractmethod
    async def append_booking(self, *, user_id: int, booking_id: str) -> None:
        pass

    @abstractmethod
    async def remove_booking(self, *, user_id: int, booking_id: str) -> None:
        pass
