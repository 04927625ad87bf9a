"""
===============================================================================
USE CASE: Register User
===============================================================================

Business Goal:
    Dar de alta un usuario que luego sube textos y practica.

-------------------------------------------------------------------------------
CRC CARD (Class-Responsibility-Collaborator)
-------------------------------------------------------------------------------
Class:
    RegisterUserUseCase

Responsibilities:
    - Verificar unicidad del email (trimmed).
    - Construir User (valida email/username) y persistirlo.

Collaborators:
    - UserRepository: get_user_by_email, create_user
    - user_results: UserResult / UserError / UserErrorCode

Error Mapping:
    - VALIDATION_ERROR: email/username inválidos
    - CONFLICT: email ya registrado / id duplicado
===============================================================================
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Callable

from ....crosscutting.logger import logger
from ....domain.entities import User
from ....domain.errors import EntityAlreadyExistsError, InvalidUserError
from ....domain.repositories import UserRepository
from ...clock import new_id, utc_now
from .user_results import UserError, UserErrorCode, UserResult


@dataclass(frozen=True)
class RegisterUserInput:
    email: str
    username: str


class RegisterUserUseCase:
    def __init__(
        self,
        user_repository: UserRepository,
        *,
        clock: Callable[[], datetime] = utc_now,
        id_factory: Callable[[], str] = new_id,
    ) -> None:
        self._users = user_repository
        self._clock = clock
        self._new_id = id_factory

    def execute(self, input_data: RegisterUserInput) -> UserResult:
        email = (input_data.email or "").strip()
        if email and self._users.get_user_by_email(email) is not None:
            return self._error(UserErrorCode.CONFLICT, "Email already registered.")

        try:
            user = User(
                id=self._new_id(),
                email=email,
                username=input_data.username,
                created_at=self._clock(),
            )
        except InvalidUserError as exc:
            return self._error(UserErrorCode.VALIDATION_ERROR, str(exc))

        try:
            self._users.create_user(user)
        except EntityAlreadyExistsError as exc:
            return self._error(UserErrorCode.CONFLICT, str(exc))

        logger.info("user registered", extra={"new_user_id": user.id})
        return UserResult(user=user)

    @staticmethod
    def _error(code: UserErrorCode, message: str) -> UserResult:
        return UserResult(error=UserError(code=code, message=message))
