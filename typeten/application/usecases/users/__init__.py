"""User use cases (package exports)."""

from .get_user import GetUserUseCase
from .register_user import RegisterUserInput, RegisterUserUseCase
from .user_results import UserError, UserErrorCode, UserResult

__all__ = [
    "RegisterUserInput",
    "RegisterUserUseCase",
    "GetUserUseCase",
    "UserResult",
    "UserError",
    "UserErrorCode",
]
