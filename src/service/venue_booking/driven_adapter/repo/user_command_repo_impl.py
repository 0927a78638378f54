from typing import AsyncContextManager, Callable

from sqlalchemy import func, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.exception.exceptions import ConflictError, NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.venue_booking.app.interface.i_user_command_repo import IUserCommandRepo
from src.service.venue_booking.domain.entity.user_entity import UserEntity
from src.service.venue_booking.driven_adapter.model.user_model import UserModel
from src.service.venue_booking.driven_adapter.repo.model_mapper import user_model_to_entity


class UserCommandRepoImpl(IUserCommandRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]):
        self.session_factory = session_factory

    @Logger.io
    async def create(self, user_entity: UserEntity) -> UserEntity:
        async with self.session_factory() as session:
            user_model = UserModel(
                username=user_entity.username,
                email=user_entity.email,
                hashed_password=user_entity.hashed_password,
                role=user_entity.role.value,
                is_active=user_entity.is_active,
                is_verified=user_entity.is_verified,
                email_verification_token=user_entity.email_verification_token,
                email_verification_expires=user_entity.email_verification_expires,
                booking_ids=[],
            )

            session.add(user_model)
            try:
                await session.commit()
            except IntegrityError as e:
                await session.rollback()
                raise ConflictError('User already exists') from e
            await session.refresh(user_model)

            return user_model_to_entity(user_model)

    @Logger.io
    async def update(self, user_entity: UserEntity) -> UserEntity:
        async with self.session_factory() as session:
            user_model = await session.get(UserModel, user_entity.id)
            if user_model is None:
                raise NotFoundError('User not found.')

            user_model.hashed_password = user_entity.hashed_password
            user_model.is_active = user_entity.is_active
            user_model.is_verified = user_entity.is_verified
            user_model.email_verification_token = user_entity.email_verification_token
            user_model.email_verification_expires = user_entity.email_verification_expires
            user_model.password_reset_token = user_entity.password_reset_token
            user_model.password_reset_expires = user_entity.password_reset_expires

            await session.commit()
            await session.refresh(user_model)
            return user_model_to_entity(user_model)

    @Logger.io
    async def append_booking(self, *, user_id: int, booking_id: str) -> None:
        # Single-row atomic update, no read-modify-write
        async with self.session_factory() as session:
            await session.execute(
                update(UserModel)
                .where(UserModel.id == user_id)
                .values(booking_ids=func.array_append(UserModel.booking_ids, booking_id))
            )
            await session.commit()

    @Logger.io
    async def remove_booking(self, *, user_id: int, booking_id: str) -> None:
        async with self.session_factory() as session:
            await session.execute(
                update(UserModel)
                .where(UserModel.id == user_id)
                .values(booking_ids=func.array_remove(UserModel.booking_ids, booking_id))
            )
            await session.commit()
