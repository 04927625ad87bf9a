"""
===============================================================================
USER USE CASE RESULTS (Shared Result / Error Models)
===============================================================================

Responsibilities:
    - Definir UserErrorCode / UserError como contrato de error.
    - Representar UserResult (single user).

Collaborators:
    - domain.entities.User
===============================================================================
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from ....domain.entities import User


class UserErrorCode(str, Enum):
    """
    Códigos:
      - VALIDATION_ERROR: email/username inválidos.
      - NOT_FOUND: usuario inexistente.
      - CONFLICT: email ya registrado.
    """

    VALIDATION_ERROR = "VALIDATION_ERROR"
    NOT_FOUND = "NOT_FOUND"
    CONFLICT = "CONFLICT"


@dataclass(frozen=True)
class UserError:
    code: UserErrorCode
    message: str


@dataclass
class UserResult:
    """Si error is None => user presente (éxito)."""

    user: User | None = None
    error: UserError | None = None
