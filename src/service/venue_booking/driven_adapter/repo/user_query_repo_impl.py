from typing import AsyncContextManager, Callable, Optional

from sqlalchemy import or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.logging.loguru_io import Logger
from src.service.venue_booking.app.interface.i_user_query_repo import IUserQueryRepo
from src.service.venue_booking.domain.entity.user_entity import UserEntity
from src.service.venue_booking.driven_adapter.model.user_model import UserModel
from src.service.venue_booking.driven_adapter.repo.model_mapper import user_model_to_entity


class UserQueryRepoImpl(IUserQueryRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]) -> None:
        self.session_factory = session_factory

    async def _get_one(self, *criteria) -> Optional[UserEntity]:
        async with self.session_factory() as session:
            result = await session.execute(select(UserModel).where(*criteria))
            user_model = result.scalar_one_or_none()
            return user_model_to_entity(user_model) if user_model else None

    @Logger.io
    async def get_by_id(self, user_id: int) -> Optional[UserEntity]:
        return await self._get_one(UserModel.id == user_id)

    @Logger.io
    async def get_by_email(self, email: str) -> Optional[UserEntity]:
        return await self._get_one(UserModel.email == email)

    @Logger.io
    async def exists_by_username_or_email(self, *, username: str, email: str) -> bool:
        async with self.session_factory() as session:
            result = await session.execute(
                select(UserModel.id)
                .where(or_(UserModel.username == username, UserModel.email == email))
                .limit(1)
            )
            return result.scalar_one_or_none() is not None

    @Logger.io
    async def get_by_verification_token(self, token: str) -> Optional[UserEntity]:
        return await self._get_one(UserModel.email_verification_token == token)

    @Logger.io
    async def get_by_password_reset_token(self, token: str) -> Optional[UserEntity]:
        return await self._get_one(UserModel.password_reset_token == token)
