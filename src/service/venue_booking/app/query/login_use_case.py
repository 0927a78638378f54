from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.venue_booking.app.interface.i_password_hasher import IPasswordHasher
from src.service.venue_booking.app.interface.i_user_query_repo import IUserQueryRepo
from src.service.venue_booking.domain.entity.user_entity import UserEntity


class LoginUseCase:
    def __init__(
        self, *, user_query_repo: IUserQueryRepo, password_hasher: IPasswordHasher
    ) -> None:
        self.user_query_repo = user_query_repo
        self.password_hasher = password_hasher

    @classmethod
    @inject
    def depends(
        cls,
        user_query_repo: IUserQueryRepo = Depends(Provide[Container.user_query_repo]),
        password_hasher: IPasswordHasher = Depends(Provide[Container.password_hasher]),
    ) -> Self:
        return cls(user_query_repo=user_query_repo, password_hasher=password_hasher)

    @Logger.io
    async def authenticate(self, *, email: str, password: str) -> UserEntity:
        """
        Raises:
            NotFoundError: no account for email
            LoginError: wrong password
            ForbiddenError: unverified or inactive account
        """
        user_entity = UserEntity.validate_user_exists(
            await self.user_query_repo.get_by_email(email)
        )
        user_entity.validate_can_login(password, self.password_hasher)
        return user_entity
