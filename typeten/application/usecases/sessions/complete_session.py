"""
===============================================================================
USE CASE: Complete Session
===============================================================================

Business Goal:
    Cerrar una sesión de práctica (Active -> Completed). No hay reapertura.
    La transición se aplica con SessionRepository.mutate_session (atómica).

Error Mapping:
    - NOT_FOUND: sesión inexistente
    - FORBIDDEN: actor ausente o no dueño
    - CONFLICT: sesión ya completada
===============================================================================
"""

from __future__ import annotations

from datetime import datetime
from typing import Callable

from ....crosscutting.logger import logger
from ....crosscutting.metrics import (
    record_session_completed,
    record_session_op_rejected,
)
from ....domain.entities import mark_completed
from ....domain.errors import EntityNotFoundError, InvalidSessionOpError
from ....domain.practice_policy import PracticeActor
from ....domain.repositories import SessionRepository
from ...clock import utc_now
from .session_access import resolve_session
from .session_results import SessionError, SessionErrorCode, SessionResult


class CompleteSessionUseCase:
    def __init__(
        self,
        session_repository: SessionRepository,
        *,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._sessions = session_repository
        self._clock = clock

    def execute(self, session_id: str, actor: PracticeActor | None) -> SessionResult:
        session, error = resolve_session(
            session_id=session_id, actor=actor, session_repository=self._sessions
        )
        if error is not None:
            return SessionResult(error=error)

        now = self._clock()

        try:
            session = self._sessions.mutate_session(
                session.id, lambda current: mark_completed(current, now)
            )
        except InvalidSessionOpError as exc:
            record_session_op_rejected("completed")
            return SessionResult(
                error=SessionError(code=SessionErrorCode.CONFLICT, message=str(exc))
            )
        except EntityNotFoundError as exc:
            return SessionResult(
                error=SessionError(code=SessionErrorCode.NOT_FOUND, message=str(exc))
            )

        record_session_completed()
        logger.info(
            "session completed",
            extra={
                "session_id": session.id,
                "completed_lines": session.completed_lines,
                "average_wpm": round(session.average_wpm, 2),
            },
        )
        return SessionResult(session=session)
