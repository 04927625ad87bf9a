"""
===============================================================================
USE CASE: Get Text Fragments
===============================================================================

Business Goal:
    Entregar los fragmentos de un texto en orden de práctica.

Responsibilities:
    - Resolver el texto con la regla de lectura (dueño).
    - Ordenar por fragment_idx (el repositorio no garantiza orden).

Error Mapping:
    - NOT_FOUND: texto inexistente
    - FORBIDDEN: actor ausente o no dueño
===============================================================================
"""

from __future__ import annotations

from ....domain.practice_policy import PracticeActor
from ....domain.repositories import TextRepository
from .text_access import resolve_text_for_read
from .text_results import TextFragmentsResult


class GetTextFragmentsUseCase:
    def __init__(self, text_repository: TextRepository) -> None:
        self._texts = text_repository

    def execute(
        self, text_id: str, actor: PracticeActor | None
    ) -> TextFragmentsResult:
        text, error = resolve_text_for_read(
            text_id=text_id, actor=actor, text_repository=self._texts
        )
        if error is not None:
            return TextFragmentsResult(fragments=[], error=error)

        fragments = sorted(
            self._texts.list_fragments_by_text(text.id),
            key=lambda f: f.fragment_idx,
        )
        return TextFragmentsResult(fragments=fragments, text=text)
