"""
Test Configuration and Fixtures

This module provides:
- Environment setup before application modules read Settings
- In-memory repositories / cache wired into the DI container for API tests
- User seeding and login helpers

Architecture:
- Unit tests (test/**/unit/): build use cases directly with AsyncMock collaborators
- Integration tests (test/**/integration/): drive the FastAPI app through TestClient
"""

# =============================================================================
# CRITICAL: Environment setup MUST happen before any other imports
# Settings and the loguru sinks are configured at import time
# =============================================================================
import os
from pathlib import Path


def _early_setup_test_environment() -> None:
    test_log_dir = Path(__file__).parent / 'test_log'
    test_log_dir.mkdir(exist_ok=True)
    os.environ['TEST_LOG_DIR'] = str(test_log_dir)
    os.environ['ENVIRONMENT'] = 'test'
    os.environ['POSTGRES_DB'] = 'venue_booking_test_db'
    os.environ.setdefault('CLIENT_URL', 'http://localhost:3000')


_early_setup_test_environment()

from collections.abc import AsyncIterator, Callable, Generator  # noqa: E402
from contextlib import ExitStack, asynccontextmanager  # noqa: E402

from dependency_injector import providers  # noqa: E402
from fastapi import FastAPI  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
import pytest  # noqa: E402

from src.platform.app_factory import create_app  # noqa: E402
from src.platform.config.di import container  # noqa: E402
from src.platform.config.wire_modules import WIRE_MODULES  # noqa: E402
from src.service.venue_booking.domain.entity.user_entity import UserEntity, UserRole  # noqa: E402
from src.service.venue_booking.driven_adapter.email.email_notifier_impl import (  # noqa: E402
    EmailNotifierImpl,
)
from src.service.venue_booking.driven_adapter.email.logging_email_sender import (  # noqa: E402
    LoggingEmailSender,
)
from src.service.venue_booking.driven_adapter.security.bcrypt_password_hasher import (  # noqa: E402
    BcryptPasswordHasher,
)
from test.in_memory_adapters import (  # noqa: E402
    InMemoryBookingRepo,
    InMemoryUserRepo,
    InMemoryVenueListCache,
    InMemoryVenueRepo,
)
from test.util_constant import (  # noqa: E402
    ANOTHER_USER_EMAIL,
    ANOTHER_USER_NAME,
    DEFAULT_PASSWORD,
    TEST_ADMIN_EMAIL,
    TEST_ADMIN_NAME,
    TEST_USER_EMAIL,
    TEST_USER_NAME,
)


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        path = str(item.fspath)
        if '/unit/' in path:
            item.add_marker(pytest.mark.unit)
        elif '/integration/' in path:
            item.add_marker(pytest.mark.integration)


# =============================================================================
# In-memory adapters
# =============================================================================
@pytest.fixture
def password_hasher() -> BcryptPasswordHasher:
    # Minimum cost keeps the suite fast
    return BcryptPasswordHasher(rounds=4)


@pytest.fixture
def user_repo() -> InMemoryUserRepo:
    return InMemoryUserRepo()


@pytest.fixture
def venue_repo() -> InMemoryVenueRepo:
    return InMemoryVenueRepo()


@pytest.fixture
def booking_repo(
    user_repo: InMemoryUserRepo, venue_repo: InMemoryVenueRepo
) -> InMemoryBookingRepo:
    return InMemoryBookingRepo(user_repo=user_repo, venue_repo=venue_repo)


@pytest.fixture
def venue_list_cache() -> InMemoryVenueListCache:
    return InMemoryVenueListCache()


@pytest.fixture
def email_sender() -> LoggingEmailSender:
    return LoggingEmailSender()


# =============================================================================
# Application
# =============================================================================
@asynccontextmanager
async def _test_lifespan(app: FastAPI) -> AsyncIterator[None]:
    container.wire(modules=WIRE_MODULES)
    yield
    container.unwire()


@pytest.fixture
def client(
    user_repo: InMemoryUserRepo,
    venue_repo: InMemoryVenueRepo,
    booking_repo: InMemoryBookingRepo,
    venue_list_cache: InMemoryVenueListCache,
    email_sender: LoggingEmailSender,
    password_hasher: BcryptPasswordHasher,
) -> Generator[TestClient, None, None]:
    # No task group: confirmation mails are delivered inline so tests can assert on them
    email_notifier = EmailNotifierImpl(email_sender=email_sender, task_group_provider=lambda: None)
    overrides = {
        container.user_command_repo: user_repo,
        container.user_query_repo: user_repo,
        container.venue_command_repo: venue_repo,
        container.venue_query_repo: venue_repo,
        container.booking_command_repo: booking_repo,
        container.booking_query_repo: booking_repo,
        container.venue_list_cache: venue_list_cache,
        container.password_hasher: password_hasher,
        container.email_notifier: email_notifier,
    }

    app = create_app(lifespan=_test_lifespan, title_suffix=' (Test)')
    with ExitStack() as stack:
        for provider, fake in overrides.items():
            stack.enter_context(provider.override(providers.Object(fake)))
        with TestClient(app) as test_client:
            yield test_client


# =============================================================================
# Users
# =============================================================================
@pytest.fixture
def create_user(
    user_repo: InMemoryUserRepo, password_hasher: BcryptPasswordHasher
) -> Callable[..., UserEntity]:
    def _create_user(
        *,
        username: str,
        email: str,
        password: str = DEFAULT_PASSWORD,
        role: UserRole = UserRole.USER,
        is_verified: bool = True,
        is_active: bool = True,
    ) -> UserEntity:
        user_entity = UserEntity(
            username=username,
            email=email,
            role=role,
            is_verified=is_verified,
            is_active=is_active,
        )
        user_entity.set_password(password, password_hasher)
        return user_repo.add(user_entity)

    return _create_user


@pytest.fixture
def login_headers(client: TestClient) -> Callable[..., dict[str, str]]:
    """Log in and return a Bearer header; the cookie jar is cleared so users do not mix"""

    def _login_headers(email: str, password: str = DEFAULT_PASSWORD) -> dict[str, str]:
        response = client.post('/api/auth/login', json={'email': email, 'password': password})
        assert response.status_code == 200, response.text
        client.cookies.clear()
        return {'Authorization': f'Bearer {response.json()["access_token"]}'}

    return _login_headers


@pytest.fixture
def test_user(create_user: Callable[..., UserEntity]) -> UserEntity:
    return create_user(username=TEST_USER_NAME, email=TEST_USER_EMAIL)


@pytest.fixture
def another_user(create_user: Callable[..., UserEntity]) -> UserEntity:
    return create_user(username=ANOTHER_USER_NAME, email=ANOTHER_USER_EMAIL)


@pytest.fixture
def test_admin(create_user: Callable[..., UserEntity]) -> UserEntity:
    return create_user(username=TEST_ADMIN_NAME, email=TEST_ADMIN_EMAIL, role=UserRole.ADMIN)


@pytest.fixture
def user_headers(
    test_user: UserEntity, login_headers: Callable[..., dict[str, str]]
) -> dict[str, str]:
    return login_headers(test_user.email)


@pytest.fixture
def another_user_headers(
    another_user: UserEntity, login_headers: Callable[..., dict[str, str]]
) -> dict[str, str]:
    return login_headers(another_user.email)


@pytest.fixture
def admin_headers(
    test_admin: UserEntity, login_headers: Callable[..., dict[str, str]]
) -> dict[str, str]:
    return login_headers(test_admin.email)
