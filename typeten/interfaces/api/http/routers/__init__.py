"""
===============================================================================
TARJETA CRC — typeten/interfaces/api/http/routers/__init__.py
===============================================================================

Responsibilities:
    - Re-exportar routers por bounded context (users/texts/sessions).

Notas:
    - Este archivo NO define endpoints.
===============================================================================
"""

from .sessions import router as sessions_router
from .texts import router as texts_router
from .users import router as users_router

__all__ = [
    "sessions_router",
    "texts_router",
    "users_router",
]
