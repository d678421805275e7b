"""Authentication use cases."""

from .get_current_identity import GetCurrentIdentityRequest, GetCurrentIdentityUseCase
from .login import LoginRequest, LoginResponse, LoginUseCase
from .principal import IdentityPrincipal

__all__ = [
    "GetCurrentIdentityRequest",
    "GetCurrentIdentityUseCase",
    "IdentityPrincipal",
    "LoginRequest",
    "LoginResponse",
    "LoginUseCase",
]
