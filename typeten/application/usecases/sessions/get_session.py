"""
USE CASE: Get Session

Devuelve una sesión si el actor es su dueño (NOT_FOUND / FORBIDDEN si no).
"""

from __future__ import annotations

from ....domain.practice_policy import PracticeActor
from ....domain.repositories import SessionRepository
from .session_access import resolve_session
from .session_results import SessionResult


class GetSessionUseCase:
    def __init__(self, session_repository: SessionRepository) -> None:
        self._sessions = session_repository

    def execute(self, session_id: str, actor: PracticeActor | None) -> SessionResult:
        session, error = resolve_session(
            session_id=session_id, actor=actor, session_repository=self._sessions
        )
        if error is not None:
            return SessionResult(error=error)
        return SessionResult(session=session)
