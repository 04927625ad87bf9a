"""
===============================================================================
USE CASE: Create Session
===============================================================================

Business Goal:
    Iniciar una sesión de práctica sobre un texto del usuario.

-------------------------------------------------------------------------------
CRC CARD (Class-Responsibility-Collaborator)
-------------------------------------------------------------------------------
Class:
    CreateSessionUseCase

Responsibilities:
    - Verificar que el actor exista como usuario.
    - Verificar que el texto exista y que el actor pueda practicarlo.
    - Crear la sesión (Active, cursor y stats en cero) y persistirla.

Collaborators:
    - UserRepository, TextRepository, SessionRepository
    - texts.text_access: resolve_actor_user, resolve_text_for_read

Error Mapping:
    - FORBIDDEN: actor ausente / texto ajeno
    - NOT_FOUND: usuario o texto inexistente
    - CONFLICT: id de sesión duplicado
===============================================================================
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Callable

from ....crosscutting.logger import logger
from ....crosscutting.metrics import record_session_created
from ....domain.entities import Session
from ....domain.errors import EntityAlreadyExistsError
from ....domain.practice_policy import PracticeActor
from ....domain.repositories import (
    SessionRepository,
    TextRepository,
    UserRepository,
)
from ...clock import new_id, utc_now
from ..texts.text_access import resolve_actor_user, resolve_text_for_read
from .session_access import from_text_error
from .session_results import SessionError, SessionErrorCode, SessionResult


@dataclass(frozen=True)
class CreateSessionInput:
    text_id: str
    actor: PracticeActor | None = None


class CreateSessionUseCase:
    def __init__(
        self,
        user_repository: UserRepository,
        text_repository: TextRepository,
        session_repository: SessionRepository,
        *,
        clock: Callable[[], datetime] = utc_now,
        id_factory: Callable[[], str] = new_id,
    ) -> None:
        self._users = user_repository
        self._texts = text_repository
        self._sessions = session_repository
        self._clock = clock
        self._new_id = id_factory

    def execute(self, input_data: CreateSessionInput) -> SessionResult:
        user, user_error = resolve_actor_user(
            actor=input_data.actor, user_repository=self._users
        )
        if user_error is not None:
            return SessionResult(error=from_text_error(user_error))

        text, text_error = resolve_text_for_read(
            text_id=input_data.text_id,
            actor=input_data.actor,
            text_repository=self._texts,
        )
        if text_error is not None:
            return SessionResult(error=from_text_error(text_error))

        session = Session.create(
            id=self._new_id(), user_id=user.id, text_id=text.id, now=self._clock()
        )

        try:
            self._sessions.create_session(session)
        except EntityAlreadyExistsError as exc:
            return SessionResult(
                error=SessionError(code=SessionErrorCode.CONFLICT, message=str(exc))
            )

        record_session_created()
        logger.info(
            "session created", extra={"session_id": session.id, "text_id": text.id}
        )
        return SessionResult(session=session)
