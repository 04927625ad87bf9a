"""
USE CASE: List Sessions

Lista las sesiones del actor, más recientes primero.
"""

from __future__ import annotations

from ....domain.practice_policy import PracticeActor
from ....domain.repositories import SessionRepository, UserRepository
from ..texts.text_access import resolve_actor_user
from .session_access import from_text_error
from .session_results import SessionListResult


class ListSessionsUseCase:
    def __init__(
        self, user_repository: UserRepository, session_repository: SessionRepository
    ) -> None:
        self._users = user_repository
        self._sessions = session_repository

    def execute(
        self, actor: PracticeActor | None, *, text_id: str | None = None
    ) -> SessionListResult:
        user, error = resolve_actor_user(actor=actor, user_repository=self._users)
        if error is not None:
            return SessionListResult(sessions=[], error=from_text_error(error))

        sessions = self._sessions.list_sessions_by_user(user.id)
        if text_id is not None:
            sessions = [s for s in sessions if s.text_id == text_id]

        sessions.sort(key=lambda s: (s.created_at, s.id), reverse=True)
        return SessionListResult(sessions=sessions)
