"""
============================================================
TARJETA CRC — infrastructure/repositories/in_memory/session.py
============================================================
Class: InMemorySessionRepository

Responsibilities:
  - Almacenar sesiones de práctica en memoria.
  - Reemplazar el estado guardado en update (no merge parcial).
  - mutate_session: leer-modificar-escribir bajo el mismo Lock, para que dos
    transiciones concurrentes sobre una sesión no se pisen.

Collaborators:
  - domain.entities.Session
  - domain.repositories.SessionRepository (contrato a implementar)

Constraints / Notes:
  - Thread-safe: acceso protegido por Lock.
  - Session es mutable: se copia al entrar y al salir, así que mutar lo
    devuelto no altera el repo hasta llamar update_session / mutate_session.
============================================================
"""

from __future__ import annotations

from dataclasses import replace
from threading import Lock
from typing import Callable, Dict, List, Optional

from ....domain.entities import Session
from ....domain.errors import EntityAlreadyExistsError, EntityNotFoundError
from ....domain.repositories import SessionRepository


class InMemorySessionRepository(SessionRepository):
    """Repositorio in-memory, thread-safe, para sesiones."""

    def __init__(self) -> None:
        self._lock = Lock()
        self._sessions: Dict[str, Session] = {}

    def create_session(self, session: Session) -> None:
        stored = replace(session)
        with self._lock:
            if session.id in self._sessions:
                raise EntityAlreadyExistsError("session", session.id)
            self._sessions[session.id] = stored

    def get_session(self, session_id: str) -> Optional[Session]:
        with self._lock:
            current = self._sessions.get(session_id)
        return replace(current) if current is not None else None

    def update_session(self, session: Session) -> None:
        stored = replace(session)
        with self._lock:
            if session.id not in self._sessions:
                raise EntityNotFoundError("session", session.id)
            self._sessions[session.id] = stored

    def mutate_session(
        self, session_id: str, mutate: Callable[[Session], None]
    ) -> Session:
        with self._lock:
            current = self._sessions.get(session_id)
            if current is None:
                raise EntityNotFoundError("session", session_id)
            # Si mutate falla, la copia se descarta y el estado queda intacto.
            working = replace(current)
            mutate(working)
            self._sessions[session_id] = working
            return replace(working)

    def list_sessions_by_user(self, user_id: str) -> List[Session]:
        with self._lock:
            values = [s for s in self._sessions.values() if s.user_id == user_id]
        return [replace(s) for s in values]
