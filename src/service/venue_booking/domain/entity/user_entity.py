from datetime import datetime, timedelta, timezone
from enum import Enum
from typing import TYPE_CHECKING, List, Optional
import uuid

import attrs
from pydantic import SecretStr

from src.platform.exception.exceptions import (
    DomainError,
    ForbiddenError,
    LoginError,
    NotFoundError,
)

if TYPE_CHECKING:
    from src.service.venue_booking.app.interface.i_password_hasher import IPasswordHasher


class UserRole(str, Enum):
    USER = 'user'
    ADMIN = 'admin'


@attrs.define
class UserEntity:
    username: str = ''
    email: str = ''
    hashed_password: str = attrs.field(default='', repr=False)  # Hide from repr for security
    id: Optional[int] = None
    role: UserRole = UserRole.USER
    is_active: bool = True
    is_verified: bool = False
    email_verification_token: Optional[str] = attrs.field(default=None, repr=False)
    email_verification_expires: Optional[datetime] = None
    password_reset_token: Optional[str] = attrs.field(default=None, repr=False)
    password_reset_expires: Optional[datetime] = None
    booking_ids: List[str] = attrs.field(factory=list)
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN

    @staticmethod
    def validate_user_exists(user_entity: Optional['UserEntity']) -> 'UserEntity':
        if not user_entity:
            raise NotFoundError('User not found.')
        return user_entity

    def set_password(self, plain_password: str, password_hasher: 'IPasswordHasher') -> None:
        """Hash and store the password; plain text never leaves this call"""
        from src.service.venue_booking.app.interface.i_password_hasher import IPasswordHasher

        if not isinstance(password_hasher, IPasswordHasher):
            raise TypeError('password_hasher must implement IPasswordHasher interface')

        self.hashed_password = password_hasher.hash_password(
            plain_password=SecretStr(plain_password)
        )

    def validate_can_login(self, plain_password: str, password_hasher: 'IPasswordHasher') -> None:
        """Raises LoginError on bad credentials, ForbiddenError if unverified or inactive"""
        if not self.hashed_password or not password_hasher.verify_password(
            plain_password=SecretStr(plain_password), hashed_password=self.hashed_password
        ):
            raise LoginError('Incorrect email or password.')

        if not self.is_verified:
            raise ForbiddenError(
                'Account not verified. Please verify your account before logging in.'
            )

        if not self.is_active:
            raise ForbiddenError('Your account is not active.')

    def issue_verification_token(self, *, ttl: timedelta, now: datetime | None = None) -> str:
        now = now or datetime.now(timezone.utc)
        self.email_verification_token = str(uuid.uuid4())
        self.email_verification_expires = now + ttl
        return self.email_verification_token

    def verify_email(self, now: datetime | None = None) -> None:
        now = now or datetime.now(timezone.utc)
        if self.is_verified:
            raise DomainError('Email already verified.')
        if self.email_verification_expires and self.email_verification_expires < now:
            raise DomainError('Verification token has expired.')

        self.is_verified = True
        self.email_verification_token = None
        self.email_verification_expires = None

    def issue_password_reset_token(self, *, ttl: timedelta, now: datetime | None = None) -> str:
        now = now or datetime.now(timezone.utc)
        self.password_reset_token = str(uuid.uuid4())
        self.password_reset_expires = now + ttl
        return self.password_reset_token

    def reset_password(
        self,
        new_password: str,
        password_hasher: 'IPasswordHasher',
        now: datetime | None = None,
    ) -> None:
        now = now or datetime.now(timezone.utc)
        if not self.password_reset_expires or self.password_reset_expires < now:
            raise DomainError('Invalid or expired token.')

        self.set_password(new_password, password_hasher)
        self.password_reset_token = None
        self.password_reset_expires = None
