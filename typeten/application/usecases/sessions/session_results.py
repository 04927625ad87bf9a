"""
===============================================================================
SESSION USE CASE RESULTS (Shared Result / Error Models)
===============================================================================

Responsibilities:
    - Definir SessionErrorCode / SessionError.
    - Representar SessionResult y SessionListResult.

Collaborators:
    - domain.entities.Session
===============================================================================
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List

from ....domain.entities import Session


class SessionErrorCode(str, Enum):
    """
    Códigos:
      - VALIDATION_ERROR: accuracy fuera de [0, 100], wpm negativo.
      - FORBIDDEN: actor ausente o no dueño.
      - NOT_FOUND: sesión / texto / usuario inexistente.
      - CONFLICT: operación sobre una sesión ya completada.
    """

    VALIDATION_ERROR = "VALIDATION_ERROR"
    FORBIDDEN = "FORBIDDEN"
    NOT_FOUND = "NOT_FOUND"
    CONFLICT = "CONFLICT"


@dataclass(frozen=True)
class SessionError:
    code: SessionErrorCode
    message: str
    resource: str | None = None


@dataclass
class SessionResult:
    session: Session | None = None
    error: SessionError | None = None


@dataclass
class SessionListResult:
    sessions: List[Session]
    error: SessionError | None = None
