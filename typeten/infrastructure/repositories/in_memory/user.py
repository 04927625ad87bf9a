"""
============================================================
TARJETA CRC — infrastructure/repositories/in_memory/user.py
============================================================
Class: InMemoryUserRepository

Responsibilities:
  - Almacenar usuarios en memoria (tests / local dev).
  - Búsqueda por id y por email (checks de unicidad).

Collaborators:
  - domain.entities.User
  - domain.repositories.UserRepository (contrato a implementar)

Constraints / Notes:
  - Thread-safe: acceso protegido por Lock.
  - User es mutable: se guarda y se entrega una copia, nunca la instancia interna.
============================================================
"""

from __future__ import annotations

from dataclasses import replace
from threading import Lock
from typing import Dict, Optional

from ....domain.entities import User
from ....domain.errors import EntityAlreadyExistsError
from ....domain.repositories import UserRepository


class InMemoryUserRepository(UserRepository):
    """Repositorio in-memory, thread-safe, para usuarios."""

    def __init__(self) -> None:
        self._lock = Lock()
        self._users: Dict[str, User] = {}

    def create_user(self, user: User) -> None:
        stored = replace(user)
        with self._lock:
            if user.id in self._users:
                raise EntityAlreadyExistsError("user", user.id)
            self._users[user.id] = stored

    def get_user(self, user_id: str) -> Optional[User]:
        with self._lock:
            current = self._users.get(user_id)
        return replace(current) if current is not None else None

    def get_user_by_email(self, email: str) -> Optional[User]:
        wanted = (email or "").strip()
        with self._lock:
            for u in self._users.values():
                if u.email == wanted:
                    return replace(u)
        return None
