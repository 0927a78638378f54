from unittest.mock import AsyncMock, Mock

import pytest

from src.platform.exception.exceptions import ConflictError
from src.service.venue_booking.app.command.register_user_use_case import (
    USER_EXISTS_MESSAGE,
    RegisterUserUseCase,
)
from src.service.venue_booking.domain.entity.user_entity import UserRole
from src.service.venue_booking.driven_adapter.security.bcrypt_password_hasher import (
    BcryptPasswordHasher,
)


@pytest.fixture
def mock_user_query_repo() -> Mock:
    repo = AsyncMock()
    repo.exists_by_username_or_email.return_value = False
    return repo


@pytest.fixture
def mock_user_command_repo() -> Mock:
    repo = AsyncMock()

    async def _create(user_entity):
        user_entity.id = 1
        return user_entity

    repo.create.side_effect = _create
    return repo


@pytest.fixture
def mock_email_notifier() -> Mock:
    return AsyncMock()


@pytest.fixture
def register_user_use_case(
    mock_user_command_repo: Mock, mock_user_query_repo: Mock, mock_email_notifier: Mock
) -> RegisterUserUseCase:
    return RegisterUserUseCase(
        user_command_repo=mock_user_command_repo,
        user_query_repo=mock_user_query_repo,
        password_hasher=BcryptPasswordHasher(rounds=4),
        email_notifier=mock_email_notifier,
    )


@pytest.mark.unit
class TestRegisterUserUseCase:
    @pytest.mark.asyncio
    async def test_register_creates_unverified_user(
        self, register_user_use_case: RegisterUserUseCase, mock_email_notifier: Mock
    ) -> None:
        # Act
        user_entity = await register_user_use_case.register(
            username='alice', email='alice@test.com', password='P4ssw0rd'
        )

        # Assert
        assert user_entity.id == 1
        assert user_entity.role == UserRole.USER
        assert not user_entity.is_verified
        assert user_entity.hashed_password.startswith('$2')
        token = user_entity.email_verification_token
        notify_kwargs = mock_email_notifier.notify.await_args.kwargs
        assert notify_kwargs['kind'] == 'verification'
        assert f'/verify-email?token={token}' in notify_kwargs['body']

    @pytest.mark.asyncio
    async def test_existing_user_conflicts(
        self,
        register_user_use_case: RegisterUserUseCase,
        mock_user_query_repo: Mock,
        mock_user_command_repo: Mock,
        mock_email_notifier: Mock,
    ) -> None:
        mock_user_query_repo.exists_by_username_or_email.return_value = True

        with pytest.raises(ConflictError) as exc_info:
            await register_user_use_case.register(
                username='alice', email='alice@test.com', password='P4ssw0rd'
            )

        assert exc_info.value.message == USER_EXISTS_MESSAGE
        mock_user_command_repo.create.assert_not_awaited()
        mock_email_notifier.notify.assert_not_awaited()
