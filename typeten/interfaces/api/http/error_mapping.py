"""
===============================================================================
TARJETA CRC — error_mapping.py (UseCase Error -> HTTP RFC7807)
===============================================================================

Responsabilidades:
  - Traducir códigos de error de casos de uso a HTTP Exceptions RFC7807.
  - Centralizar el mapeo para evitar duplicación en routers.

Reglas:
  - Los use cases devuelven errores tipados (code + message [+ resource]).
  - La API traduce a RFC7807 (crosscutting.error_responses).

Colaboradores:
  - application.usecases.* (UserError, TextError, SessionError)
  - crosscutting.error_responses
===============================================================================
"""

from __future__ import annotations

from typing import NoReturn

from typeten.application.usecases.sessions import SessionError
from typeten.application.usecases.texts import TextError
from typeten.application.usecases.users import UserError
from typeten.crosscutting.error_responses import (
    conflict,
    forbidden,
    internal_error,
    not_found,
    validation_error,
)


def raise_use_case_error(error: UserError | TextError | SessionError) -> NoReturn:
    """
    Traduce cualquier error de caso de uso a HTTP.

    Los tres enums comparten valores (VALIDATION_ERROR, FORBIDDEN, NOT_FOUND,
    CONFLICT), así que se mapea por valor.
    """
    code = error.code.value
    if code == "VALIDATION_ERROR":
        raise validation_error(error.message)
    if code == "FORBIDDEN":
        raise forbidden(error.message)
    if code == "NOT_FOUND":
        raise not_found(error.message)
    if code == "CONFLICT":
        raise conflict(error.message)

    # Código sin mapeo
    raise internal_error(error.message)
