"""
===============================================================================
TARJETA CRC — typeten/api/exception_handlers.py (Manejo Centralizado)
===============================================================================

Responsabilidades:
  - Traducir excepciones a respuestas HTTP RFC7807.
  - Convertir errores de validación de FastAPI (422) al mismo formato.
  - Evitar filtrar detalles internos en errores no controlados.

Colaboradores:
  - crosscutting.error_responses: AppHTTPException, app_exception_handler
  - crosscutting.config.get_settings (nivel de detalle)
  - domain.errors: DomainError (validación que escapó de un use case)
===============================================================================
"""

from __future__ import annotations

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from ..crosscutting.config import get_settings
from ..crosscutting.error_responses import (
    AppHTTPException,
    ErrorCode,
    app_exception_handler,
    validation_error,
)
from ..crosscutting.logger import logger
from ..domain.errors import DomainError


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Body/params inválidos -> 422 VALIDATION_ERROR con detalle por campo."""
    errors = [
        {
            "field": ".".join(str(p) for p in err.get("loc", ())),
            "msg": err.get("msg", ""),
        }
        for err in exc.errors()
    ]
    return await app_exception_handler(
        request, validation_error("Request validation failed", errors)
    )


async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    logger.warning(
        "Domain validation error", extra={"error_type": type(exc).__name__}
    )
    return await app_exception_handler(request, validation_error(str(exc)))


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Handler para excepciones no tipadas.

    - Log completo (stacktrace).
    - Respuesta genérica en producción.
    """
    request_id = getattr(getattr(request, "state", None), "request_id", None)

    logger.error(
        "Unhandled exception",
        exc_info=True,
        extra={"error": str(exc)},
    )

    detail = str(exc) if not get_settings().is_production() else "Internal error."
    app_exc = AppHTTPException(
        status_code=500,
        code=ErrorCode.INTERNAL_ERROR,
        detail=detail,
        errors=[{"request_id": request_id}] if request_id else None,
    )
    return await app_exception_handler(request, app_exc)


def register_exception_handlers(app) -> None:
    """
    Registra handlers en la app FastAPI.

    Importante:
      - Exception genérica se registra al final como fallback.
    """
    app.add_exception_handler(AppHTTPException, app_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(DomainError, domain_error_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)


__all__ = ["register_exception_handlers"]
