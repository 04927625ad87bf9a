"""
===============================================================================
TARJETA CRC — domain/entities.py
===============================================================================

Módulo:
    Entidades del Dominio (User, TextInfo, TextFragment, Session)

Responsabilidades:
    - Definir estructuras centrales del negocio (sin infraestructura).
    - Validar invariantes al construir (fail-fast en __post_init__).
    - Implementar la máquina de estados de Session (Active -> Completed).

Colaboradores:
    - domain.errors: taxonomía de errores de validación.
    - domain.repositories: persisten/recuperan estas entidades.
    - application/usecases: construyen/consumen estas entidades.

Principios:
    - Sin dependencias a DB/FastAPI.
    - El tiempo (`now`) siempre lo pasa el caller: el dominio no lee el reloj.
===============================================================================
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass, field
from datetime import datetime

from .errors import (
    FragmentIDError,
    InvalidFragmentError,
    InvalidSessionOpError,
    InvalidTextInfoError,
    InvalidUserError,
    SessionCompletedError,
    SessionIDError,
    TextInfoIDError,
    UserIDError,
    validate_id,
)

# Patrón mínimo: local no vacío, @, dominio no vacío con al menos un punto.
_EMAIL_RX = re.compile(r"^[^@]+@[^@]+\.[^@]+$")


# ---------------------------------------------------------------------------
# User
# ---------------------------------------------------------------------------


@dataclass
class User:
    """Cuenta de usuario. Email y username se guardan sin espacios extremos."""

    id: str
    email: str
    username: str
    created_at: datetime

    def __post_init__(self) -> None:
        validate_id(self.id, UserIDError, "user id")

        self.email = (self.email or "").strip()
        self.username = (self.username or "").strip()

        if not self.email or not _EMAIL_RX.match(self.email):
            raise InvalidUserError(f"invalid email: {self.email!r}")
        if not self.username:
            raise InvalidUserError("username is required")


# ---------------------------------------------------------------------------
# Text
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class TextInfo:
    """
    Metadata de un texto subido por un usuario.

    Invariantes:
      - title no vacío (se guarda con strip)
      - total_lines, fragment_size, fragment_count > 0
      - fragment_count == ceil(total_lines / fragment_size)
    """

    id: str
    user_id: str
    title: str
    total_lines: int
    fragment_size: int
    fragment_count: int
    created_at: datetime

    def __post_init__(self) -> None:
        validate_id(self.id, TextInfoIDError, "text id")
        validate_id(self.user_id, TextInfoIDError, "user id")

        title = (self.title or "").strip()
        if not title:
            raise InvalidTextInfoError("title is required")
        object.__setattr__(self, "title", title)

        if self.total_lines <= 0:
            raise InvalidTextInfoError("total_lines must be > 0")
        if self.fragment_size <= 0:
            raise InvalidTextInfoError("fragment_size must be > 0")
        if self.fragment_count <= 0:
            raise InvalidTextInfoError("fragment_count must be > 0")

        expected = math.ceil(self.total_lines / self.fragment_size)
        if self.fragment_count != expected:
            raise InvalidTextInfoError(
                f"fragment_count ({self.fragment_count}) does not match "
                f"ceil(total_lines / fragment_size) ({expected})"
            )


@dataclass(frozen=True)
class TextFragment:
    """
    Grupo contiguo de líneas de un texto.

    Inmutable: `lines` se copia a una tupla al construir, así que ni el
    iterable de entrada ni quien lea `lines` pueden alterar el fragmento.
    """

    id: str
    text_id: str
    fragment_idx: int
    lines: tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        validate_id(self.id, FragmentIDError, "fragment id")
        validate_id(self.text_id, FragmentIDError, "text id")

        if self.fragment_idx < 0:
            raise InvalidFragmentError("fragment_idx must be >= 0")

        lines = tuple(self.lines or ())
        if not lines:
            raise InvalidFragmentError("fragment must have at least one line")
        object.__setattr__(self, "lines", lines)

    @property
    def line_count(self) -> int:
        return len(self.lines)


# ---------------------------------------------------------------------------
# Session
# ---------------------------------------------------------------------------


@dataclass
class Session:
    """
    Un usuario tipeando un texto.

    Estados:
      - Active (inicial): is_completed == False
      - Completed (terminal): is_completed == True

    Nota:
      - current_fragment_idx / current_line_idx son informativos; el dominio
        no los avanza (es responsabilidad del caller).
      - Las estadísticas son promedios móviles: solo se guarda el promedio
        previo y la cantidad de líneas (memoria O(1)).
    """

    id: str
    user_id: str
    text_id: str
    created_at: datetime
    updated_at: datetime
    current_fragment_idx: int = 0
    current_line_idx: int = 0
    completed_lines: int = 0
    total_accuracy_percent: float = 0.0
    average_wpm: float = 0.0
    is_completed: bool = False

    def __post_init__(self) -> None:
        validate_id(self.id, SessionIDError, "session id")
        validate_id(self.user_id, SessionIDError, "user id")
        validate_id(self.text_id, SessionIDError, "text id")

    @classmethod
    def create(cls, id: str, user_id: str, text_id: str, now: datetime) -> Session:
        """Crea una sesión nueva: cursor y stats en cero, no completada."""
        return cls(
            id=id,
            user_id=user_id,
            text_id=text_id,
            created_at=now,
            updated_at=now,
        )

    def record_line_completed(
        self, accuracy_percent: float, wpm: float, now: datetime
    ) -> None:
        """
        Registra una línea completada y actualiza los promedios móviles.

        new_avg = (old_avg * n + value) / (n + 1), con n = completed_lines previo.

        Raises:
            SessionCompletedError: la sesión ya está completada.
            InvalidSessionOpError: accuracy fuera de [0, 100] o wpm negativo.
            En ambos casos no se modifica nada.
        """
        if self.is_completed:
            raise SessionCompletedError(f"session '{self.id}' is already completed")
        if accuracy_percent < 0 or accuracy_percent > 100:
            raise InvalidSessionOpError(
                f"accuracy_percent must be within [0, 100], got {accuracy_percent}"
            )
        if wpm < 0:
            raise InvalidSessionOpError(f"wpm must be >= 0, got {wpm}")

        n = float(self.completed_lines)
        self.total_accuracy_percent = (
            self.total_accuracy_percent * n + accuracy_percent
        ) / (n + 1)
        self.average_wpm = (self.average_wpm * n + wpm) / (n + 1)
        self.completed_lines += 1
        self.updated_at = now

    def mark_completed(self, now: datetime) -> None:
        """Pasa la sesión a Completed. No hay transición de salida."""
        if self.is_completed:
            raise SessionCompletedError(f"session '{self.id}' is already completed")
        self.is_completed = True
        self.updated_at = now


def record_line_completed(
    session: Session | None, accuracy_percent: float, wpm: float, now: datetime
) -> None:
    """Variante funcional: una sesión ausente (None) es una operación inválida."""
    if session is None:
        raise InvalidSessionOpError("session is required")
    session.record_line_completed(accuracy_percent, wpm, now)


def mark_completed(session: Session | None, now: datetime) -> None:
    if session is None:
        raise InvalidSessionOpError("session is required")
    session.mark_completed(now)
