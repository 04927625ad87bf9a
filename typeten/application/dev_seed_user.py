"""
===============================================================================
TASK: Dev Seed User
===============================================================================

Qué es:
    Asegura que exista un usuario de práctica para desarrollo local cuando
    está configurado (DEV_SEED_USER=true), para poder subir textos sin
    registrarse.

Seguridad:
    - Nunca corre en app_env == "production".

Patrones:
    - Task orchestration (seed)
    - Dependency Injection (repo + clock)
    - Idempotencia (ensure-create)

CRC:
    Component: ensure_dev_user
    Responsibilities:
      - Validar guard de ambiente
      - Crear el usuario si no existe (por id o por email)
    Collaborators:
      - UserRepository
      - Settings
===============================================================================
"""

from __future__ import annotations

from datetime import datetime
from typing import Callable

from ..crosscutting.config import Settings
from ..crosscutting.logger import logger
from ..domain.entities import User
from ..domain.repositories import UserRepository
from .clock import utc_now


def ensure_dev_user(
    settings: Settings,
    *,
    user_repo: UserRepository,
    clock: Callable[[], datetime] = utc_now,
) -> User | None:
    """
    Ensure a development user exists if configured.

    Behavior:
      - If disabled: no-op (returns None)
      - If enabled: create user if missing, otherwise return the existing one

    Raises:
      - RuntimeError: enabled in production
      - InvalidUserError: seed email/username are invalid
    """
    if not settings.dev_seed_user:
        return None

    if settings.is_production():
        raise RuntimeError(
            "FATAL: DEV_SEED_USER is enabled but APP_ENV is 'production'."
        )

    existing = user_repo.get_user(settings.dev_seed_user_id)
    if existing is None:
        existing = user_repo.get_user_by_email(settings.dev_seed_user_email)
    if existing is not None:
        logger.info(
            "Dev seed user: user exists; skipping",
            extra={"seed_user_id": existing.id},
        )
        return existing

    user = User(
        id=settings.dev_seed_user_id,
        email=settings.dev_seed_user_email,
        username=settings.dev_seed_user_username,
        created_at=clock(),
    )
    user_repo.create_user(user)
    logger.info(
        "Dev seed user: user created",
        extra={"seed_user_id": user.id, "email": user.email},
    )
    return user
