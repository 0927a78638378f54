from datetime import timedelta
from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.core_setting import settings
from src.platform.config.di import Container
from src.platform.exception.exceptions import ConflictError
from src.platform.logging.loguru_io import Logger
from src.service.venue_booking.app.interface.i_email_notifier import IEmailNotifier
from src.service.venue_booking.app.interface.i_password_hasher import IPasswordHasher
from src.service.venue_booking.app.interface.i_user_command_repo import IUserCommandRepo
from src.service.venue_booking.app.interface.i_user_query_repo import IUserQueryRepo
from src.service.venue_booking.domain.entity.user_entity import UserEntity, UserRole


USER_EXISTS_MESSAGE = 'User already exists'


class RegisterUserUseCase:
    def __init__(
        self,
        *,
        user_command_repo: IUserCommandRepo,
        user_query_repo: IUserQueryRepo,
        password_hasher: IPasswordHasher,
        email_notifier: IEmailNotifier,
    ) -> None:
        self.user_command_repo = user_command_repo
        self.user_query_repo = user_query_repo
        self.password_hasher = password_hasher
        self.email_notifier = email_notifier

    @classmethod
    @inject
    def depends(
        cls,
        user_command_repo: IUserCommandRepo = Depends(Provide[Container.user_command_repo]),
        user_query_repo: IUserQueryRepo = Depends(Provide[Container.user_query_repo]),
        password_hasher: IPasswordHasher = Depends(Provide[Container.password_hasher]),
        email_notifier: IEmailNotifier = Depends(Provide[Container.email_notifier]),
    ) -> Self:
        return cls(
            user_command_repo=user_command_repo,
            user_query_repo=user_query_repo,
            password_hasher=password_hasher,
            email_notifier=email_notifier,
        )

    @Logger.io
    async def register(self, *, username: str, email: str, password: str) -> UserEntity:
        """
        Create an unverified account and mail the verification link.

        Raises:
            ConflictError: username or email already registered
        """
        if await self.user_query_repo.exists_by_username_or_email(
            username=username, email=email
        ):
            raise ConflictError(USER_EXISTS_MESSAGE)

        user_entity = UserEntity(username=username, email=email, role=UserRole.USER)
        user_entity.set_password(password, self.password_hasher)
        token = user_entity.issue_verification_token(
            ttl=timedelta(minutes=settings.VERIFICATION_TOKEN_EXPIRE_MINUTES)
        )

        # Unique indexes still catch a concurrent registration of the same name
        created = await self.user_command_repo.create(user_entity)
        Logger.base.info(f'👤 [REGISTER] Created user {created.id} ({created.username})')

        verify_link = f'{settings.CLIENT_URL}/verify-email?token={token}'
        await self.email_notifier.notify(
            to=created.email,
            subject='Verify your email',
            body=(
                f'Dear {created.username}, please verify your email by opening '
                f'the following link: {verify_link}'
            ),
            kind='verification',
        )
        return created
