from abc import ABC, abstractmethod
from typing import Optional

from src.service.venue_booking.domain.entity.user_entity import UserEntity


class IUserQueryRepo(ABC):
    """User Query Repository Abstract Interface - Handles read operations"""

    @abstractmethod
    async def get_by_id(self, user_id: int) -> Optional[UserEntity]:
        pass

    @abstractmethod
    async def get_by_email(self, email: str) -> Optional[UserEntity]:
        pass

    @abstractmethod
    async def exists_by_username_or_email(self, *, username: str, email: str) -> bool:
        pass

    @abstractmethod
    async def get_by_verification_token(self, token: str) -> Optional[UserEntity]:
        pass

    @abstractmethod
    async def get_by_password_reset_token(self, token: str) -> Optional[UserEntity]:
        pass
