"""
USE CASE: Get Text

Devuelve la metadata de un texto si el actor es su dueño.

Error Mapping:
    - NOT_FOUND: texto inexistente
    - FORBIDDEN: actor ausente o no dueño
"""

from __future__ import annotations

from ....domain.practice_policy import PracticeActor
from ....domain.repositories import TextRepository
from .text_access import resolve_text_for_read
from .text_results import TextResult


class GetTextUseCase:
    def __init__(self, text_repository: TextRepository) -> None:
        self._texts = text_repository

    def execute(self, text_id: str, actor: PracticeActor | None) -> TextResult:
        text, error = resolve_text_for_read(
            text_id=text_id, actor=actor, text_repository=self._texts
        )
        if error is not None:
            return TextResult(error=error)
        return TextResult(text=text)
