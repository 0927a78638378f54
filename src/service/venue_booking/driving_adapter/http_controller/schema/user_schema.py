"""
Account API Schemas - Pydantic models for request/response
"""

import re
from typing import List

from pydantic import BaseModel, EmailStr, Field, SecretStr, field_validator

from src.service.venue_booking.domain.entity.user_entity import UserRole


PASSWORD_PATTERN = re.compile(r'^(?=.*[A-Za-z])(?=.*\d)[A-Za-z\d@$!%*?&]{8,30}$')
PASSWORD_POLICY_MESSAGE = (
    'Password must be at least 8 characters long and include at least one letter and one number.'
)


def _check_password_policy(password: SecretStr) -> SecretStr:
    if not PASSWORD_PATTERN.match(password.get_secret_value()):
        raise ValueError(PASSWORD_POLICY_MESSAGE)
    return password


class RegisterRequest(BaseModel):
    """Register user request schema"""

    username: str = Field(..., min_length=3, max_length=20)
    email: EmailStr
    password: SecretStr = Field(..., description='8-30 characters, letters and digits')

    @field_validator('password')
    @classmethod
    def validate_password(cls, value: SecretStr) -> SecretStr:
        return _check_password_policy(value)

    model_config = {
        'json_schema_extra': {
            'example': {
                'username': 'alice',
                'email': 'alice@example.com',
                'password': 'P4ssw0rd',
            }
        }
    }


class LoginRequest(BaseModel):
    email: EmailStr
    password: SecretStr = Field(..., min_length=1, max_length=72)

    model_config = {
        'json_schema_extra': {'example': {'email': 'alice@example.com', 'password': 'P4ssw0rd'}}
    }


class ForgotPasswordRequest(BaseModel):
    email: EmailStr

    model_config = {'json_schema_extra': {'example': {'email': 'alice@example.com'}}}


class ResetPasswordRequest(BaseModel):
    password: SecretStr

    @field_validator('password')
    @classmethod
    def validate_password(cls, value: SecretStr) -> SecretStr:
        return _check_password_policy(value)

    model_config = {'json_schema_extra': {'example': {'password': 'N3wP4ssw0rd'}}}


class UserResponse(BaseModel):
    """User response schema; never carries the password hash"""

    id: int
    username: str
    email: str
    role: UserRole
    is_active: bool
    is_verified: bool
    booking_ids: List[str] = []

    model_config = {
        'from_attributes': True,
        'json_schema_extra': {
            'example': {
                'id': 1,
                'username': 'alice',
                'email': 'alice@example.com',
                'role': 'user',
                'is_active': True,
                'is_verified': True,
                'booking_ids': ['01936d8f-5e73-7c4e-a9c5-123456789abc'],
            }
        },
    }


class MessageResponse(BaseModel):
    message: str


class RegisterResponse(MessageResponse):
    user: UserResponse


class LoginResponse(MessageResponse):
    user: UserResponse
    access_token: str
    refresh_token: str
