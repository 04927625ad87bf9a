"""
===============================================================================
TARJETA CRC — dependencies.py (Dependencias comunes de routers)
===============================================================================

Responsabilidades:
  - Resolver el actor de práctica desde el header X-User-Id.
  - Propagar user_id al contexto de logging.

Colaboradores:
  - domain.practice_policy.PracticeActor
  - crosscutting.error_responses.unauthorized
  - typeten.context.set_user_context
===============================================================================
"""

from __future__ import annotations

from fastapi import Header

from typeten.context import set_user_context
from typeten.crosscutting.error_responses import unauthorized
from typeten.domain.practice_policy import PracticeActor

USER_ID_HEADER = "X-User-Id"


def require_actor(
    x_user_id: str | None = Header(default=None, alias=USER_ID_HEADER),
) -> PracticeActor:
    """401 si falta el header o viene vacío."""
    user_id = (x_user_id or "").strip()
    if not user_id:
        raise unauthorized(f"{USER_ID_HEADER} header is required")

    set_user_context(user_id)
    return PracticeActor(user_id=user_id)
