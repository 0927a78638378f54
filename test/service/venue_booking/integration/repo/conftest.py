"""
Postgres fixtures for repository tests

The test database (POSTGRES_DB is forced to the test name in test/conftest.py)
is created when missing, its public schema is rebuilt through alembic once per
session, and every table is truncated after each test.
"""

import asyncio
from collections.abc import AsyncGenerator, Awaitable, Callable, Generator
from pathlib import Path

from alembic import command
from alembic.config import Config
import pytest
from sqlalchemy import text
from sqlalchemy.ext.asyncio import create_async_engine

from src.platform.config.core_setting import settings
from src.platform.database.orm_db_setting import Database
from src.service.venue_booking.domain.entity.user_entity import UserEntity
from src.service.venue_booking.domain.entity.venue_entity import VenueEntity
from src.service.venue_booking.driven_adapter.repo.booking_command_repo_impl import (
    BookingCommandRepoImpl,
)
from src.service.venue_booking.driven_adapter.repo.booking_query_repo_impl import (
    BookingQueryRepoImpl,
)
from src.service.venue_booking.driven_adapter.repo.user_command_repo_impl import (
    UserCommandRepoImpl,
)
from src.service.venue_booking.driven_adapter.repo.user_query_repo_impl import UserQueryRepoImpl
from src.service.venue_booking.driven_adapter.repo.venue_command_repo_impl import (
    VenueCommandRepoImpl,
)
from src.service.venue_booking.driven_adapter.repo.venue_query_repo_impl import (
    VenueQueryRepoImpl,
)


ALEMBIC_INI = Path(__file__).resolve().parents[5] / 'alembic.ini'
TABLES = ('booking', 'venue', 'user')


# =============================================================================
# Database Setup and Cleanup
# =============================================================================
async def _reset_test_database() -> None:
    db_url = settings.DATABASE_URL_ASYNC
    test_db = settings.POSTGRES_DB

    # Create database if not exists
    postgres_url = db_url.replace(f'/{test_db}', '/postgres')
    engine = create_async_engine(postgres_url, isolation_level='AUTOCOMMIT')
    async with engine.begin() as conn:
        result = await conn.execute(
            text('SELECT 1 FROM pg_database WHERE datname = :name'), {'name': test_db}
        )
        if not result.fetchone():
            await conn.execute(text(f'CREATE DATABASE "{test_db}"'))
    await engine.dispose()

    reset_engine = create_async_engine(db_url)
    async with reset_engine.begin() as conn:
        await conn.execute(text('DROP SCHEMA public CASCADE'))
        await conn.execute(text('CREATE SCHEMA public'))
    await reset_engine.dispose()


async def _clean_all_tables(database: Database) -> None:
    quoted = ', '.join(f'"{t}"' for t in TABLES)
    async with database.engine.begin() as conn:
        await conn.execute(text(f'TRUNCATE {quoted} RESTART IDENTITY CASCADE'))


@pytest.fixture(scope='session')
def migrated_database() -> Generator[str, None, None]:
    if not settings.POSTGRES_DB.endswith('_test_db'):
        pytest.fail(f'Refusing to reset non-test database {settings.POSTGRES_DB!r}')

    try:
        asyncio.run(_reset_test_database())
    except OSError as e:
        pytest.skip(f'PostgreSQL is not reachable at {settings.POSTGRES_SERVER}: {e}')

    # env.py runs its own event loop, so the upgrade stays outside asyncio.run
    alembic_cfg = Config(str(ALEMBIC_INI))
    alembic_cfg.set_main_option('sqlalchemy.url', settings.DATABASE_URL_ASYNC.replace('%', '%%'))
    command.upgrade(alembic_cfg, 'head')
    yield settings.DATABASE_URL_ASYNC


@pytest.fixture
async def database(migrated_database: str) -> AsyncGenerator[Database, None]:
    database = Database(url=migrated_database)
    yield database
    await _clean_all_tables(database)
    await database.close()


# =============================================================================
# Repositories
# =============================================================================
@pytest.fixture
def user_command_repo(database: Database) -> UserCommandRepoImpl:
    return UserCommandRepoImpl(session_factory=database.session)


@pytest.fixture
def user_query_repo(database: Database) -> UserQueryRepoImpl:
    return UserQueryRepoImpl(session_factory=database.session)


@pytest.fixture
def venue_command_repo(database: Database) -> VenueCommandRepoImpl:
    return VenueCommandRepoImpl(session_factory=database.session)


@pytest.fixture
def venue_query_repo(database: Database) -> VenueQueryRepoImpl:
    return VenueQueryRepoImpl(session_factory=database.session)


@pytest.fixture
def booking_command_repo(database: Database) -> BookingCommandRepoImpl:
    return BookingCommandRepoImpl(session_factory=database.session)


@pytest.fixture
def booking_query_repo(database: Database) -> BookingQueryRepoImpl:
    return BookingQueryRepoImpl(session_factory=database.session)


# =============================================================================
# Seed helpers
# =============================================================================
@pytest.fixture
def seed_user(
    user_command_repo: UserCommandRepoImpl,
) -> Callable[..., Awaitable[UserEntity]]:
    async def _seed_user(username: str, email: str) -> UserEntity:
        return await user_command_repo.create(
            UserEntity(username=username, email=email, hashed_password='not-a-real-hash')
        )

    return _seed_user


@pytest.fixture
def seed_venue(
    venue_command_repo: VenueCommandRepoImpl,
) -> Callable[..., Awaitable[VenueEntity]]:
    async def _seed_venue(
        name: str, *, location: str = 'Taipei', slug: str | None = None, created_by: int = 1
    ) -> VenueEntity:
        return await venue_command_repo.create(
            VenueEntity.create(
                name=name,
                location=location,
                capacity=50,
                description='A venue seeded for repository tests.',
                created_by=created_by,
                slug=slug or name.lower().replace(' ', '-'),
            )
        )

    return _seed_venue
