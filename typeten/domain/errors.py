"""
===============================================================================
TARJETA CRC — domain/errors.py
===============================================================================

Módulo:
    Taxonomía de errores del dominio

Responsabilidades:
    - Definir errores de validación locales (síncronos, no reintentables).
    - Permitir que el caller capture la causa general (InvalidIDError) o la
      específica de la entidad (InvalidSessionError, etc.).
    - Definir errores del contrato de repositorios (AlreadyExists / NotFound).

Colaboradores:
    - domain.entities: levanta estos errores al construir/mutar entidades.
    - infrastructure.repositories: levanta errores de repositorio.
    - application.usecases: los traduce a resultados tipados.

Notas:
    - Un id inválido dentro de una entidad levanta una clase que hereda de
      ambos (p.ej. SessionIDError <- InvalidSessionError + InvalidIDError).
===============================================================================
"""

from __future__ import annotations


class DomainError(Exception):
    """Base de todos los errores de validación del dominio."""


class InvalidIDError(DomainError):
    """Identificador vacío luego de strip()."""


class InvalidUserError(DomainError):
    """Usuario inválido (email/username/id)."""


class InvalidTextInfoError(DomainError):
    """Metadata de texto inválida."""


class InvalidFragmentError(DomainError):
    """Fragmento de texto inválido."""


class InvalidSessionError(DomainError):
    """Sesión inválida al construirla."""


class InvalidSessionOpError(DomainError):
    """Operación no permitida sobre la sesión (estado o valores)."""


class SessionCompletedError(InvalidSessionOpError):
    """La sesión ya está en Completed (estado terminal)."""


# -----------------------------------------------------------------------------
# Ids inválidos envueltos por entidad
# -----------------------------------------------------------------------------


class UserIDError(InvalidUserError, InvalidIDError):
    pass


class TextInfoIDError(InvalidTextInfoError, InvalidIDError):
    pass


class FragmentIDError(InvalidFragmentError, InvalidIDError):
    pass


class SessionIDError(InvalidSessionError, InvalidIDError):
    pass


# -----------------------------------------------------------------------------
# Contrato de repositorios
# -----------------------------------------------------------------------------


class RepositoryError(Exception):
    """Base para errores de persistencia."""


class EntityAlreadyExistsError(RepositoryError):
    def __init__(self, entity: str, entity_id: str):
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"{entity} '{entity_id}' already exists")


class EntityNotFoundError(RepositoryError):
    def __init__(self, entity: str, entity_id: str):
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"{entity} '{entity_id}' not found")


def validate_id(value: str | None, error_cls: type[InvalidIDError], field: str) -> str:
    """
    Valida un identificador: inválido si queda vacío luego de strip().

    Devuelve el valor original (no se normaliza el id, solo se valida).
    """
    if value is None or not str(value).strip():
        raise error_cls(f"{field} is required")
    return value
