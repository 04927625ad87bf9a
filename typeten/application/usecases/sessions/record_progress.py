"""
===============================================================================
USE CASE: Record Progress
===============================================================================

Business Goal:
    Registrar una línea tipeada (accuracy + wpm) y actualizar los promedios
    móviles de la sesión.

-------------------------------------------------------------------------------
CRC CARD (Class-Responsibility-Collaborator)
-------------------------------------------------------------------------------
Class:
    RecordProgressUseCase

Responsibilities:
    - Resolver la sesión (dueño).
    - Rechazar sesiones completadas (CONFLICT).
    - Aplicar record_line_completed dentro de SessionRepository.mutate_session
      (lectura-modificación-escritura atómica: un complete concurrente no se
      pierde ni se revierte).
    - Persistir solo si la operación de dominio tuvo éxito.

Collaborators:
    - SessionRepository: get_session, mutate_session
    - domain.entities.record_line_completed

Error Mapping:
    - NOT_FOUND: sesión inexistente
    - FORBIDDEN: actor ausente o no dueño
    - CONFLICT: sesión ya completada
    - VALIDATION_ERROR: accuracy fuera de [0, 100] o wpm negativo
===============================================================================
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Callable

from ....crosscutting.logger import logger
from ....crosscutting.metrics import record_line_recorded, record_session_op_rejected
from ....domain.entities import Session, record_line_completed
from ....domain.errors import (
    EntityNotFoundError,
    InvalidSessionOpError,
    SessionCompletedError,
)
from ....domain.practice_policy import PracticeActor
from ....domain.repositories import SessionRepository
from ...clock import utc_now
from .session_access import resolve_session
from .session_results import SessionError, SessionErrorCode, SessionResult


@dataclass(frozen=True)
class RecordProgressInput:
    session_id: str
    accuracy_percent: float
    wpm: float
    actor: PracticeActor | None = None


class RecordProgressUseCase:
    def __init__(
        self,
        session_repository: SessionRepository,
        *,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._sessions = session_repository
        self._clock = clock

    def execute(self, input_data: RecordProgressInput) -> SessionResult:
        session, error = resolve_session(
            session_id=input_data.session_id,
            actor=input_data.actor,
            session_repository=self._sessions,
        )
        if error is not None:
            return SessionResult(error=error)

        if session.is_completed:
            record_session_op_rejected("completed")
            return self._error(
                SessionErrorCode.CONFLICT, "Session is already completed."
            )

        # El reloj se lee fuera del lock del repositorio.
        now = self._clock()

        def apply(current: Session) -> None:
            record_line_completed(
                current, input_data.accuracy_percent, input_data.wpm, now
            )

        try:
            session = self._sessions.mutate_session(session.id, apply)
        except SessionCompletedError as exc:
            record_session_op_rejected("completed")
            return self._error(SessionErrorCode.CONFLICT, str(exc))
        except InvalidSessionOpError as exc:
            record_session_op_rejected("out_of_range")
            return self._error(SessionErrorCode.VALIDATION_ERROR, str(exc))
        except EntityNotFoundError as exc:
            return self._error(SessionErrorCode.NOT_FOUND, str(exc))

        record_line_recorded()
        logger.info(
            "line recorded",
            extra={
                "session_id": session.id,
                "completed_lines": session.completed_lines,
            },
        )
        return SessionResult(session=session)

    @staticmethod
    def _error(code: SessionErrorCode, message: str) -> SessionResult:
        return SessionResult(error=SessionError(code=code, message=message))
