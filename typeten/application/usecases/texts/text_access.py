"""
===============================================================================
TEXT ACCESS HELPERS
===============================================================================

Responsibilities:
    - Resolver el actor (debe existir como usuario).
    - Resolver un texto para lectura/práctica aplicando practice_policy.

Collaborators:
    - UserRepository, TextRepository
    - domain.practice_policy
    - text_results: TextError / TextErrorCode
===============================================================================
"""

from __future__ import annotations

from typing import Final, Tuple

from ....domain.entities import TextInfo, User
from ....domain.practice_policy import PracticeActor, can_read_text
from ....domain.repositories import TextRepository, UserRepository
from .text_results import TextError, TextErrorCode

_MSG_ACTOR_REQUIRED: Final[str] = "Actor is required."
_MSG_USER_NOT_FOUND: Final[str] = "User not found."
_MSG_TEXT_NOT_FOUND: Final[str] = "Text not found."
_MSG_FORBIDDEN: Final[str] = "Access denied."


def resolve_actor_user(
    *,
    actor: PracticeActor | None,
    user_repository: UserRepository,
) -> Tuple[User | None, TextError | None]:
    """
    Retorna:
      - (user, None) si el actor existe
      - (None, FORBIDDEN) si no hay actor
      - (None, NOT_FOUND) si el usuario no existe
    """
    if actor is None or not (actor.user_id or "").strip():
        return None, TextError(TextErrorCode.FORBIDDEN, _MSG_ACTOR_REQUIRED)

    user = user_repository.get_user(actor.user_id)
    if user is None:
        return None, TextError(TextErrorCode.NOT_FOUND, _MSG_USER_NOT_FOUND, "User")
    return user, None


def resolve_text_for_read(
    *,
    text_id: str,
    actor: PracticeActor | None,
    text_repository: TextRepository,
) -> Tuple[TextInfo | None, TextError | None]:
    """
    Reglas:
      - El texto debe existir (NOT_FOUND).
      - Solo el dueño puede leerlo (FORBIDDEN).
    """
    text = text_repository.get_text_info(text_id)
    if text is None:
        return None, TextError(TextErrorCode.NOT_FOUND, _MSG_TEXT_NOT_FOUND, "Text")

    if not can_read_text(text, actor):
        return None, TextError(TextErrorCode.FORBIDDEN, _MSG_FORBIDDEN, "Text")

    return text, None
