"""
===============================================================================
TARJETA CRC — domain/practice_policy.py
===============================================================================

Módulo:
    Política de acceso a textos y sesiones de práctica

Responsabilidades:
    - Reglas puras de ownership (sin DB, sin FastAPI).
    - Separar "policy" de "repos": los repos traen datos, la policy decide.

Colaboradores:
    - domain.entities.TextInfo, Session
    - application.usecases: texts/*, sessions/*

Reglas:
    - No existe usuario implícito: el actor siempre lo provee el caller.
    - Un texto solo lo lee su dueño.
    - Una sesión solo la lee/modifica su dueño.
===============================================================================
"""

from __future__ import annotations

from dataclasses import dataclass

from .entities import Session, TextInfo


@dataclass(frozen=True, slots=True)
class PracticeActor:
    """Identidad explícita de quien ejecuta la operación."""

    user_id: str


def _has_identity(actor: PracticeActor | None) -> bool:
    return actor is not None and bool((actor.user_id or "").strip())


def can_read_text(text: TextInfo, actor: PracticeActor | None) -> bool:
    if not _has_identity(actor):
        return False
    return text.user_id == actor.user_id


def can_practice_text(text: TextInfo, actor: PracticeActor | None) -> bool:
    """Crear una sesión sobre un texto requiere poder leerlo."""
    return can_read_text(text, actor)


def can_access_session(session: Session, actor: PracticeActor | None) -> bool:
    if not _has_identity(actor):
        return False
    return session.user_id == actor.user_id
