"""Authentication use cases."""

from .get_current_user import (
    GetCurrentUserRequest,
    GetCurrentUserResponse,
    GetCurrentUserUseCase,
)
from .login import LoginRequest, LoginResponse, LoginUseCase
from .sign_up import SignUpRequest, SignUpResponse, SignUpUseCase

__all__ = [
    "GetCurrentUserRequest",
    "GetCurrentUserResponse",
    "GetCurrentUserUseCase",
    "LoginRequest",
    "LoginResponse",
    "LoginUseCase",
    "SignUpRequest",
    "SignUpResponse",
    "SignUpUseCase",
]
