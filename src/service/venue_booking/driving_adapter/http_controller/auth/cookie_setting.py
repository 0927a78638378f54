from fastapi import Response

from src.platform.config.core_setting import settings
from src.platform.constant.route_constant import ACCESS_TOKEN_COOKIE, REFRESH_TOKEN_COOKIE


def _cookie_flags() -> dict:
    # SameSite=None is only accepted together with Secure
    return {
        'httponly': True,
        'secure': settings.IS_PRODUCTION,
        'samesite': 'none' if settings.IS_PRODUCTION else 'lax',
    }


def set_access_cookie(response: Response, access_token: str) -> None:
    response.set_cookie(
        key=ACCESS_TOKEN_COOKIE,
        value=access_token,
        max_age=settings.ACCESS_TOKEN_EXPIRE_MINUTES * 60,
        **_cookie_flags(),
    )


def set_auth_cookies(response: Response, *, access_token: str, refresh_token: str) -> None:
    set_access_cookie(response, access_token)
    response.set_cookie(
        key=REFRESH_TOKEN_COOKIE,
        value=refresh_token,
        max_age=settings.REFRESH_TOKEN_EXPIRE_DAYS * 24 * 60 * 60,
        **_cookie_flags(),
    )


def clear_auth_cookies(response: Response) -> None:
    for key in (ACCESS_TOKEN_COOKIE, REFRESH_TOKEN_COOKIE):
        response.delete_cookie(key=key, **_cookie_flags())
