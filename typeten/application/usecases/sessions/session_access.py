"""
===============================================================================
SESSION ACCESS HELPERS
===============================================================================

Responsibilities:
    - Resolver una sesión aplicando practice_policy (solo el dueño).
    - Traducir errores de texto/usuario al contrato de sesiones.

Collaborators:
    - SessionRepository
    - domain.practice_policy.can_access_session
    - texts.text_results.TextError (para reusar resoluciones de texto)
===============================================================================
"""

from __future__ import annotations

from typing import Final, Tuple

from ....domain.entities import Session
from ....domain.practice_policy import PracticeActor, can_access_session
from ....domain.repositories import SessionRepository
from ..texts.text_results import TextError
from .session_results import SessionError, SessionErrorCode

_MSG_NOT_FOUND: Final[str] = "Session not found."
_MSG_FORBIDDEN: Final[str] = "Access denied."


def resolve_session(
    *,
    session_id: str,
    actor: PracticeActor | None,
    session_repository: SessionRepository,
) -> Tuple[Session | None, SessionError | None]:
    """
    Retorna una copia de la sesión (el repo nunca entrega su estado interno).

      - (session, None) si existe y el actor es dueño
      - (None, NOT_FOUND / FORBIDDEN) en caso contrario
    """
    session = session_repository.get_session(session_id)
    if session is None:
        return None, SessionError(SessionErrorCode.NOT_FOUND, _MSG_NOT_FOUND, "Session")

    if not can_access_session(session, actor):
        return None, SessionError(SessionErrorCode.FORBIDDEN, _MSG_FORBIDDEN, "Session")

    return session, None


def from_text_error(error: TextError) -> SessionError:
    return SessionError(
        code=SessionErrorCode(error.code.value),
        message=error.message,
        resource=error.resource,
    )
