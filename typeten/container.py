"""
===============================================================================
TARJETA CRC — typeten/container.py (Composition Root / DI manual)
===============================================================================

Responsabilidades:
  - Componer dependencias (repositorios, procesador de texto, use cases).
  - Exponer factories para FastAPI (Depends).
  - Mantener singletons con caching (lru_cache) para los stores en memoria.

Colaboradores:
  - typeten.crosscutting.config.get_settings
  - typeten.domain.repositories.* / services.* (puertos)
  - typeten.infrastructure.* (implementaciones)
  - typeten.application.usecases.* (casos de uso)

Notas:
  - Este archivo NO contiene lógica de negocio.
  - Este archivo NO depende de FastAPI.
  - reset_container() limpia los singletons (tests).
===============================================================================
"""

from __future__ import annotations

from functools import lru_cache

from .application.usecases import (
    CompleteSessionUseCase,
    CreateSessionUseCase,
    CreateTextUseCase,
    GetSessionUseCase,
    GetTextFragmentsUseCase,
    GetTextUseCase,
    GetUserUseCase,
    ListSessionsUseCase,
    ListTextsUseCase,
    RecordProgressUseCase,
    RegisterUserUseCase,
)
from .crosscutting.config import get_settings
from .domain.repositories import SessionRepository, TextRepository, UserRepository
from .domain.services import TextProcessorService
from .infrastructure.repositories import (
    InMemorySessionRepository,
    InMemoryTextRepository,
    InMemoryUserRepository,
)
from .infrastructure.text import LineTextProcessor

# =============================================================================
# Repositorios (singletons)
# =============================================================================


@lru_cache(maxsize=1)
def get_user_repository() -> UserRepository:
    return InMemoryUserRepository()


@lru_cache(maxsize=1)
def get_text_repository() -> TextRepository:
    return InMemoryTextRepository()


@lru_cache(maxsize=1)
def get_session_repository() -> SessionRepository:
    return InMemorySessionRepository()


# =============================================================================
# Servicios
# =============================================================================


@lru_cache(maxsize=1)
def get_text_processor() -> TextProcessorService:
    """Procesador por líneas con el tamaño de fragmento de Settings."""
    return LineTextProcessor(fragment_size=get_settings().fragment_size)


# =============================================================================
# Use cases (factories: baratas, sin estado propio)
# =============================================================================


def get_register_user_use_case() -> RegisterUserUseCase:
    return RegisterUserUseCase(get_user_repository())


def get_get_user_use_case() -> GetUserUseCase:
    return GetUserUseCase(get_user_repository())


def get_create_text_use_case() -> CreateTextUseCase:
    return CreateTextUseCase(
        get_user_repository(), get_text_repository(), get_text_processor()
    )


def get_list_texts_use_case() -> ListTextsUseCase:
    return ListTextsUseCase(get_user_repository(), get_text_repository())


def get_get_text_use_case() -> GetTextUseCase:
    return GetTextUseCase(get_text_repository())


def get_get_text_fragments_use_case() -> GetTextFragmentsUseCase:
    return GetTextFragmentsUseCase(get_text_repository())


def get_create_session_use_case() -> CreateSessionUseCase:
    return CreateSessionUseCase(
        get_user_repository(), get_text_repository(), get_session_repository()
    )


def get_get_session_use_case() -> GetSessionUseCase:
    return GetSessionUseCase(get_session_repository())


def get_list_sessions_use_case() -> ListSessionsUseCase:
    return ListSessionsUseCase(get_user_repository(), get_session_repository())


def get_record_progress_use_case() -> RecordProgressUseCase:
    return RecordProgressUseCase(get_session_repository())


def get_complete_session_use_case() -> CompleteSessionUseCase:
    return CompleteSessionUseCase(get_session_repository())


def reset_container() -> None:
    """Descarta singletons (stores en memoria y procesador)."""
    get_user_repository.cache_clear()
    get_text_repository.cache_clear()
    get_session_repository.cache_clear()
    get_text_processor.cache_clear()
