"""
USE CASE: Get User

Devuelve el usuario por id; NOT_FOUND si no existe.
"""

from __future__ import annotations

from ....domain.repositories import UserRepository
from .user_results import UserError, UserErrorCode, UserResult


class GetUserUseCase:
    def __init__(self, user_repository: UserRepository) -> None:
        self._users = user_repository

    def execute(self, user_id: str) -> UserResult:
        user = self._users.get_user(user_id)
        if user is None:
            return UserResult(
                error=UserError(code=UserErrorCode.NOT_FOUND, message="User not found.")
            )
        return UserResult(user=user)
