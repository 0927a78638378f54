from typing import Optional

from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Cookie, Depends, Query, Response, status

from src.platform.config.di import Container
from src.platform.constant.route_constant import REFRESH_TOKEN_COOKIE
from src.platform.exception.exceptions import AuthenticationError, NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.venue_booking.app.command.register_user_use_case import RegisterUserUseCase
from src.service.venue_booking.app.command.request_password_reset_use_case import (
    RequestPasswordResetUseCase,
)
from src.service.venue_booking.app.command.reset_password_use_case import ResetPasswordUseCase
from src.service.venue_booking.app.command.verify_email_use_case import VerifyEmailUseCase
from src.service.venue_booking.app.query.login_use_case import LoginUseCase
from src.service.venue_booking.app.query.user_query_use_case import UserUseCase
from src.service.venue_booking.domain.entity.user_entity import UserEntity
from src.service.venue_booking.driving_adapter.http_controller.auth.cookie_setting import (
    clear_auth_cookies,
    set_access_cookie,
    set_auth_cookies,
)
from src.service.venue_booking.driving_adapter.http_controller.auth.jwt_auth import JwtAuth
from src.service.venue_booking.driving_adapter.http_controller.auth.role_auth import (
    get_current_user,
)
from src.service.venue_booking.driving_adapter.http_controller.schema.user_schema import (
    ForgotPasswordRequest,
    LoginRequest,
    LoginResponse,
    MessageResponse,
    RegisterRequest,
    RegisterResponse,
    ResetPasswordRequest,
    UserResponse,
)


# === API Routers ===

auth_router = APIRouter()
router = APIRouter()


def _issue_tokens(
    response: Response, jwt_auth: JwtAuth, user_entity: UserEntity
) -> tuple[str, str]:
    access_token = jwt_auth.create_access_token(user_entity)
    refresh_token = jwt_auth.create_refresh_token(user_entity)
    set_auth_cookies(response, access_token=access_token, refresh_token=refresh_token)
    return access_token, refresh_token


@auth_router.post(
    '/register', response_model=RegisterResponse, status_code=status.HTTP_201_CREATED
)
@Logger.io
async def register(
    request: RegisterRequest,
    use_case: RegisterUserUseCase = Depends(RegisterUserUseCase.depends),
) -> RegisterResponse:
    user_entity = await use_case.register(
        username=request.username,
        email=request.email,
        password=request.password.get_secret_value(),
    )
    return RegisterResponse(
        message='User created successfully', user=UserResponse.model_validate(user_entity)
    )


@auth_router.get('/verify-email', response_model=MessageResponse)
@Logger.io
@inject
async def verify_email(
    response: Response,
    token: str = Query(..., min_length=1),
    use_case: VerifyEmailUseCase = Depends(VerifyEmailUseCase.depends),
    jwt_auth: JwtAuth = Depends(Provide[Container.jwt_auth]),
) -> MessageResponse:
    user_entity = await use_case.verify(token=token)
    _issue_tokens(response, jwt_auth, user_entity)
    return MessageResponse(message='Email verified successfully.')


@auth_router.post('/login', response_model=LoginResponse)
@Logger.io
@inject
async def login(
    response: Response,
    request: LoginRequest,
    use_case: LoginUseCase = Depends(LoginUseCase.depends),
    jwt_auth: JwtAuth = Depends(Provide[Container.jwt_auth]),
) -> LoginResponse:
    user_entity = await use_case.authenticate(
        email=request.email, password=request.password.get_secret_value()
    )
    access_token, refresh_token = _issue_tokens(response, jwt_auth, user_entity)
    return LoginResponse(
        message='Login successful',
        user=UserResponse.model_validate(user_entity),
        access_token=access_token,
        refresh_token=refresh_token,
    )


@auth_router.post('/logout', response_model=MessageResponse)
@Logger.io
async def logout(response: Response) -> MessageResponse:
    clear_auth_cookies(response)
    return MessageResponse(message='Logged out successfully.')


@auth_router.post('/refresh', response_model=MessageResponse)
@Logger.io
@inject
async def refresh(
    response: Response,
    refresh_token: Optional[str] = Cookie(None, alias=REFRESH_TOKEN_COOKIE),
    use_case: UserUseCase = Depends(UserUseCase.depends),
    jwt_auth: JwtAuth = Depends(Provide[Container.jwt_auth]),
) -> MessageResponse:
    if not refresh_token:
        raise AuthenticationError('Refresh token not found')

    user_id = jwt_auth.decode_refresh_token(refresh_token)
    try:
        user_entity = await use_case.get_user(user_id)
    except NotFoundError as e:
        # Token outlived its account
        raise AuthenticationError('Invalid token') from e
    if not user_entity.is_active:
        raise AuthenticationError('Your account is not active.')

    set_access_cookie(response, jwt_auth.create_access_token(user_entity))
    return MessageResponse(message='Token refreshed successfully.')


@auth_router.post('/forgot-password', response_model=MessageResponse)
@Logger.io
async def forgot_password(
    request: ForgotPasswordRequest,
    use_case: RequestPasswordResetUseCase = Depends(RequestPasswordResetUseCase.depends),
) -> MessageResponse:
    await use_case.request_reset(email=request.email)
    return MessageResponse(message='Password reset link sent to your email.')


@auth_router.post('/reset-password', response_model=MessageResponse)
@Logger.io
async def reset_password(
    request: ResetPasswordRequest,
    token: str = Query(..., min_length=1),
    use_case: ResetPasswordUseCase = Depends(ResetPasswordUseCase.depends),
) -> MessageResponse:
    await use_case.reset(token=token, new_password=request.password.get_secret_value())
    return MessageResponse(message='Password has been reset successfully.')


@router.get('/current-user', response_model=UserResponse)
@Logger.io
async def get_current_user_profile(
    current_user: UserEntity = Depends(get_current_user),
    use_case: UserUseCase = Depends(UserUseCase.depends),
) -> UserResponse:
    # Token claims may outlive the account; reload from the store
    user_entity = await use_case.get_user(current_user.id or 0)
    return UserResponse.model_validate(user_entity)
