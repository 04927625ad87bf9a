"""
USE CASE: List Texts

Lista los textos del actor (el usuario debe existir).
"""

from __future__ import annotations

from ....domain.practice_policy import PracticeActor
from ....domain.repositories import TextRepository, UserRepository
from .text_access import resolve_actor_user
from .text_results import TextListResult


class ListTextsUseCase:
    def __init__(
        self, user_repository: UserRepository, text_repository: TextRepository
    ) -> None:
        self._users = user_repository
        self._texts = text_repository

    def execute(self, actor: PracticeActor | None) -> TextListResult:
        user, error = resolve_actor_user(actor=actor, user_repository=self._users)
        if error is not None:
            return TextListResult(texts=[], error=error)

        # Orden estable para clientes: más nuevos primero.
        texts = sorted(
            self._texts.list_texts_by_user(user.id),
            key=lambda t: (t.created_at, t.id),
            reverse=True,
        )
        return TextListResult(texts=texts)
