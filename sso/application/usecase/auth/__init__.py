"""Authentication use cases."""

from .complete_login import CompleteLoginUseCase
from .get_current_user import GetCurrentUserUseCase
from .logout import LogoutUseCase
from .start_login import StartLoginUseCase

__all__ = [
    "CompleteLoginUseCase",
    "GetCurrentUserUseCase",
    "LogoutUseCase",
    "StartLoginUseCase",
]
