"""
===============================================================================
TARJETA CRC — router.py (Router raíz / Composición)
===============================================================================

Responsabilidades:
  - Definir el APIRouter raíz que se incluye en FastAPI con prefix="/v1".
  - Centralizar responses RFC7807 para OpenAPI.
  - Componer routers por bounded context (users/texts/sessions).

Colaboradores:
  - crosscutting.error_responses.OPENAPI_ERROR_RESPONSES
  - routers.* (sub-routers por feature)
===============================================================================
"""

from __future__ import annotations

from fastapi import APIRouter

from typeten.crosscutting.error_responses import OPENAPI_ERROR_RESPONSES

from .routers import sessions_router, texts_router, users_router


def build_router() -> APIRouter:
    """Construye el router raíz v1 (sin side effects al importar)."""
    api_router = APIRouter(responses=OPENAPI_ERROR_RESPONSES)

    api_router.include_router(users_router)
    api_router.include_router(texts_router)
    api_router.include_router(sessions_router)

    return api_router


router = build_router()

__all__ = ["router", "build_router"]
