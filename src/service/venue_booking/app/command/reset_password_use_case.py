from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import DomainError
from src.platform.logging.loguru_io import Logger
from src.service.venue_booking.app.interface.i_password_hasher import IPasswordHasher
from src.service.venue_booking.app.interface.i_user_command_repo import IUserCommandRepo
from src.service.venue_booking.app.interface.i_user_query_repo import IUserQueryRepo


class ResetPasswordUseCase:
    def __init__(
        self,
        *,
        user_command_repo: IUserCommandRepo,
        user_query_repo: IUserQueryRepo,
        password_hasher: IPasswordHasher,
    ) -> None:
        self.user_command_repo = user_command_repo
        self.user_query_repo = user_query_repo
        self.password_hasher = password_hasher

    @classmethod
    @inject
    def depends(
        cls,
        user_command_repo: IUserCommandRepo = Depends(Provide[Container.user_command_repo]),
        user_query_repo: IUserQueryRepo = Depends(Provide[Container.user_query_repo]),
        password_hasher: IPasswordHasher = Depends(Provide[Container.password_hasher]),
    ) -> Self:
        return cls(
            user_command_repo=user_command_repo,
            user_query_repo=user_query_repo,
            password_hasher=password_hasher,
        )

    @Logger.io
    async def reset(self, *, token: str, new_password: str) -> None:
        user_entity = await self.user_query_repo.get_by_password_reset_token(token)
        if not user_entity:
            raise DomainError('Invalid or expired token.')

        user_entity.reset_password(new_password, self.password_hasher)
        await self.user_command_repo.update(user_entity)
        Logger.base.info(f'🔑 [RESET-PASSWORD] Password replaced for user {user_entity.id}')
