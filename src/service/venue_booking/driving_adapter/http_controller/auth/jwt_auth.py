"""
JWT issuing and decoding for cookie / bearer authentication
"""

from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

import jwt

from src.platform.config.core_setting import settings
from src.platform.exception.exceptions import AuthenticationError
from src.service.venue_booking.domain.entity.user_entity import UserEntity, UserRole


ACCESS_TOKEN_TYPE = 'access'
REFRESH_TOKEN_TYPE = 'refresh'


class JwtAuth:
    def __init__(self) -> None:
        self.secret = settings.SECRET_KEY.get_secret_value()
        self.refresh_secret = settings.REFRESH_SECRET_KEY.get_secret_value()
        self.algorithm = settings.ALGORITHM
        self.access_token_ttl = timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
        self.refresh_token_ttl = timedelta(days=settings.REFRESH_TOKEN_EXPIRE_DAYS)

    def create_access_token(self, user_entity: UserEntity) -> str:
        now = datetime.now(timezone.utc)
        payload = {
            'sub': str(user_entity.id),
            'type': ACCESS_TOKEN_TYPE,
            'exp': now + self.access_token_ttl,
            'iat': now,
            'user_id': user_entity.id,
            'username': user_entity.username,
            'email': user_entity.email,
            'role': user_entity.role.value,
            'is_active': user_entity.is_active,
        }
        return jwt.encode(payload, self.secret, algorithm=self.algorithm)

    def create_refresh_token(self, user_entity: UserEntity) -> str:
        now = datetime.now(timezone.utc)
        payload = {
            'sub': str(user_entity.id),
            'type': REFRESH_TOKEN_TYPE,
            'exp': now + self.refresh_token_ttl,
            'iat': now,
        }
        return jwt.encode(payload, self.refresh_secret, algorithm=self.algorithm)

    def _decode(self, token: str, *, secret: str, token_type: str) -> Dict[str, Any]:
        try:
            payload = jwt.decode(token, secret, algorithms=[self.algorithm])
        except jwt.ExpiredSignatureError as e:
            raise AuthenticationError('Token has expired') from e
        except jwt.PyJWTError as e:
            raise AuthenticationError('Invalid token') from e

        if payload.get('type') != token_type:
            raise AuthenticationError('Invalid token')
        return payload

    def decode_access_token(self, token: str) -> Dict[str, Any]:
        return self._decode(token, secret=self.secret, token_type=ACCESS_TOKEN_TYPE)

    def decode_refresh_token(self, token: str) -> int:
        """Return the user id carried by a valid refresh token"""
        payload = self._decode(token, secret=self.refresh_secret, token_type=REFRESH_TOKEN_TYPE)
        try:
            return int(payload['sub'])
        except (KeyError, ValueError) as e:
            raise AuthenticationError('Invalid token') from e

    def get_current_user_info_from_jwt(self, token: Optional[str]) -> UserEntity:
        if not token:
            raise AuthenticationError('Not authenticated')

        payload = self.decode_access_token(token)

        user_id = payload.get('user_id')
        email = payload.get('email')
        username = payload.get('username')
        role = payload.get('role')
        is_active = payload.get('is_active')

        if not user_id or not email or not username or not role or is_active is None:
            raise AuthenticationError('Invalid token')

        try:
            user_role = UserRole(role)
        except ValueError as e:
            raise AuthenticationError('Invalid token') from e

        # Identity rebuilt from claims (no DB query)
        return UserEntity(
            id=user_id,
            username=username,
            email=email,
            role=user_role,
            is_active=is_active,
            is_verified=True,
        )
