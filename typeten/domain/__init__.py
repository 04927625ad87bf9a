"""
===============================================================================
TARJETA CRC — domain/__init__.py
===============================================================================

Módulo:
    Exportaciones de la Capa de Dominio (API pública del dominio)

Responsabilidades:
    - Centralizar exports para imports limpios en application/interfaces.
    - Mantener estable el "surface area" del dominio.

Colaboradores:
    - domain.entities: User, TextInfo, TextFragment, Session
    - domain.errors: taxonomía de errores
    - domain.repositories: puertos de persistencia
    - domain.services: puertos de servicios
    - domain.practice_policy: reglas de acceso

Reglas:
    - Solo re-exporta contratos/entidades del dominio.
    - No importar infraestructura aquí.
===============================================================================
"""

from .entities import (
    Session,
    TextFragment,
    TextInfo,
    User,
    mark_completed,
    record_line_completed,
)
from .errors import (
    DomainError,
    EntityAlreadyExistsError,
    EntityNotFoundError,
    InvalidFragmentError,
    InvalidIDError,
    InvalidSessionError,
    InvalidSessionOpError,
    InvalidTextInfoError,
    InvalidUserError,
    RepositoryError,
    SessionCompletedError,
)
from .practice_policy import PracticeActor
from .repositories import SessionRepository, TextRepository, UserRepository
from .services import TextProcessorService

__all__ = [
    # Entities
    "User",
    "TextInfo",
    "TextFragment",
    "Session",
    "record_line_completed",
    "mark_completed",
    # Errors
    "DomainError",
    "InvalidIDError",
    "InvalidUserError",
    "InvalidTextInfoError",
    "InvalidFragmentError",
    "InvalidSessionError",
    "InvalidSessionOpError",
    "SessionCompletedError",
    "RepositoryError",
    "EntityAlreadyExistsError",
    "EntityNotFoundError",
    # Policy
    "PracticeActor",
    # Repository Interfaces (Ports)
    "UserRepository",
    "TextRepository",
    "SessionRepository",
    # Service Interfaces (Ports)
    "TextProcessorService",
]
