from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import DomainError
from src.platform.logging.loguru_io import Logger
from src.service.venue_booking.app.interface.i_user_command_repo import IUserCommandRepo
from src.service.venue_booking.app.interface.i_user_query_repo import IUserQueryRepo
from src.service.venue_booking.domain.entity.user_entity import UserEntity


class VerifyEmailUseCase:
    def __init__(
        self, *, user_command_repo: IUserCommandRepo, user_query_repo: IUserQueryRepo
    ) -> None:
        self.user_command_repo = user_command_repo
        self.user_query_repo = user_query_repo

    @classmethod
    @inject
    def depends(
        cls,
        user_command_repo: IUserCommandRepo = Depends(Provide[Container.user_command_repo]),
        user_query_repo: IUserQueryRepo = Depends(Provide[Container.user_query_repo]),
    ) -> Self:
        return cls(user_command_repo=user_command_repo, user_query_repo=user_query_repo)

    @Logger.io
    async def verify(self, *, token: str) -> UserEntity:
        user_entity = await self.user_query_repo.get_by_verification_token(token)
        if not user_entity:
            raise DomainError('Invalid token.')

        user_entity.verify_email()
        verified = await self.user_command_repo.update(user_entity)
        Logger.base.info(f'✅ [VERIFY-EMAIL] User {verified.id} verified')
        return verified
