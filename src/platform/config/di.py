"""
https://python-dependency-injector.ets-labs.org/index.html
https://python-dependency-injector.ets-labs.org/examples/fastapi-sqlalchemy.html
"""

from dependency_injector import containers, providers

from src.platform.config.core_setting import settings
from src.platform.database.orm_db_setting import Database
from src.platform.state.redis_client import redis_client
from src.service.venue_booking.driven_adapter.email.email_notifier_impl import EmailNotifierImpl
from src.service.venue_booking.driven_adapter.email.logging_email_sender import (
    LoggingEmailSender,
)
from src.service.venue_booking.driven_adapter.email.smtp_email_sender import SmtpEmailSender
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
from src.service.venue_booking.driven_adapter.security.bcrypt_password_hasher import (
    BcryptPasswordHasher,
)
from src.service.venue_booking.driven_adapter.state.venue_list_cache_impl import (
    VenueListCacheImpl,
)
from src.service.venue_booking.driving_adapter.http_controller.auth.jwt_auth import JwtAuth


def _email_backend() -> str:
    return 'smtp' if settings.SMTP_HOST else 'log'


class Container(containers.DeclarativeContainer):
    # Infrastructure (engine and pool are opened/closed by the app lifespan)
    database = providers.Singleton(Database)
    redis = providers.Object(redis_client)

    # Background task group (set by main.py lifespan)
    # Used for fire-and-forget work like confirmation emails
    task_group = providers.Object(None)

    # Repositories (stateless - use session_factory per call)
    user_command_repo = providers.Singleton(
        UserCommandRepoImpl, session_factory=database.provided.session
    )
    user_query_repo = providers.Singleton(
        UserQueryRepoImpl, session_factory=database.provided.session
    )
    venue_command_repo = providers.Singleton(
        VenueCommandRepoImpl, session_factory=database.provided.session
    )
    venue_query_repo = providers.Singleton(
        VenueQueryRepoImpl, session_factory=database.provided.session
    )
    booking_command_repo = providers.Singleton(
        BookingCommandRepoImpl, session_factory=database.provided.session
    )
    booking_query_repo = providers.Singleton(
        BookingQueryRepoImpl, session_factory=database.provided.session
    )

    # Venue listing cache (Redis)
    venue_list_cache = providers.Singleton(
        VenueListCacheImpl, redis_client_factory=redis.provided.get_client
    )

    # Security
    password_hasher = providers.Singleton(BcryptPasswordHasher)
    jwt_auth = providers.Singleton(JwtAuth)

    # Email
    email_sender = providers.Selector(
        providers.Callable(_email_backend),
        smtp=providers.Singleton(SmtpEmailSender),
        log=providers.Singleton(LoggingEmailSender),
    )
    email_notifier = providers.Singleton(
        EmailNotifierImpl,
        email_sender=email_sender,
        task_group_provider=task_group.provider,
    )


container = Container()
