"""
===============================================================================
TEXT USE CASE RESULTS (Shared Result / Error Models)
===============================================================================

Responsibilities:
    - Definir TextErrorCode / TextError como contrato de error.
    - Representar resultados:
        * TextResult (metadata + fragmentos opcionales)
        * TextListResult
        * TextFragmentsResult

Collaborators:
    - domain.entities.TextInfo, TextFragment
===============================================================================
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List

from ....domain.entities import TextFragment, TextInfo


class TextErrorCode(str, Enum):
    """
    Códigos:
      - VALIDATION_ERROR: título vacío, texto sin líneas, límites.
      - FORBIDDEN: actor ausente o no dueño del texto.
      - NOT_FOUND: texto o usuario inexistente.
      - CONFLICT: id duplicado al persistir.
    """

    VALIDATION_ERROR = "VALIDATION_ERROR"
    FORBIDDEN = "FORBIDDEN"
    NOT_FOUND = "NOT_FOUND"
    CONFLICT = "CONFLICT"


@dataclass(frozen=True)
class TextError:
    code: TextErrorCode
    message: str
    resource: str | None = None


@dataclass
class TextResult:
    """
    Resultado para casos de uso que retornan un único texto.

    fragments solo se completa en la creación (el resto lo deja vacío).
    """

    text: TextInfo | None = None
    fragments: List[TextFragment] = field(default_factory=list)
    error: TextError | None = None


@dataclass
class TextListResult:
    texts: List[TextInfo]
    error: TextError | None = None


@dataclass
class TextFragmentsResult:
    """Fragmentos ordenados por fragment_idx."""

    fragments: List[TextFragment]
    text: TextInfo | None = None
    error: TextError | None = None
