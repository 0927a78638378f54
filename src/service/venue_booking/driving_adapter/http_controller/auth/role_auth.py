from typing import Optional

from dependency_injector.wiring import Provide, inject
from fastapi import Cookie, Depends, Header
from opentelemetry import trace

from src.platform.config.di import Container
from src.platform.constant.route_constant import ACCESS_TOKEN_COOKIE
from src.platform.exception.exceptions import ForbiddenError
from src.service.venue_booking.domain.entity.user_entity import UserEntity, UserRole
from src.service.venue_booking.driving_adapter.http_controller.auth.jwt_auth import JwtAuth


FORBIDDEN_MESSAGE = "Forbidden: You don't have the required permissions."


class RoleAuthStrategy:
    @staticmethod
    def is_admin(user: UserEntity) -> bool:
        return user.role == UserRole.ADMIN


def _bearer_token(authorization: Optional[str]) -> Optional[str]:
    if not authorization:
        return None
    scheme, _, token = authorization.partition(' ')
    return token.strip() if scheme.lower() == 'bearer' and token.strip() else None


@inject
async def get_current_user(
    jwt_auth: JwtAuth = Depends(Provide[Container.jwt_auth]),
    access_token: Optional[str] = Cookie(None, alias=ACCESS_TOKEN_COOKIE),
    authorization: Optional[str] = Header(None),
) -> UserEntity:
    """Resolve the caller from the access cookie, falling back to a Bearer header"""
    return jwt_auth.get_current_user_info_from_jwt(access_token or _bearer_token(authorization))


async def require_admin(current_user: UserEntity = Depends(get_current_user)) -> UserEntity:
    tracer = trace.get_tracer(__name__)
    with tracer.start_as_current_span(
        'auth.require_admin',
        attributes={
            'user.id': current_user.id or 0,
            'user.role': current_user.role.value,
        },
    ):
        if not RoleAuthStrategy.is_admin(current_user):
            raise ForbiddenError(FORBIDDEN_MESSAGE)
        return current_user
