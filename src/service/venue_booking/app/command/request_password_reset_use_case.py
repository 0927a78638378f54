from datetime import timedelta
from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.core_setting import settings
from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.venue_booking.app.interface.i_email_notifier import IEmailNotifier
from src.service.venue_booking.app.interface.i_user_command_repo import IUserCommandRepo
from src.service.venue_booking.app.interface.i_user_query_repo import IUserQueryRepo
from src.service.venue_booking.domain.entity.user_entity import UserEntity


class RequestPasswordResetUseCase:
    def __init__(
        self,
        *,
        user_command_repo: IUserCommandRepo,
        user_query_repo: IUserQueryRepo,
        email_notifier: IEmailNotifier,
    ) -> None:
        self.user_command_repo = user_command_repo
        self.user_query_repo = user_query_repo
        self.email_notifier = email_notifier

    @classmethod
    @inject
    def depends(
        cls,
        user_command_repo: IUserCommandRepo = Depends(Provide[Container.user_command_repo]),
        user_query_repo: IUserQueryRepo = Depends(Provide[Container.user_query_repo]),
        email_notifier: IEmailNotifier = Depends(Provide[Container.email_notifier]),
    ) -> Self:
        return cls(
            user_command_repo=user_command_repo,
            user_query_repo=user_query_repo,
            email_notifier=email_notifier,
        )

    @Logger.io
    async def request_reset(self, *, email: str) -> None:
        user_entity = UserEntity.validate_user_exists(
            await self.user_query_repo.get_by_email(email)
        )

        token = user_entity.issue_password_reset_token(
            ttl=timedelta(minutes=settings.RESET_PASSWORD_TOKEN_EXPIRE_MINUTES)
        )
        await self.user_command_repo.update(user_entity)

        reset_link = f'{settings.CLIENT_URL}/reset-password?token={token}'
        await self.email_notifier.notify(
            to=user_entity.email,
            subject='Password Reset',
            body=(
                f'Dear {user_entity.username}, you can reset your password using '
                f'the following link: {reset_link}. The link expires in '
                f'{settings.RESET_PASSWORD_TOKEN_EXPIRE_MINUTES} minutes.'
            ),
            kind='password_reset',
        )
