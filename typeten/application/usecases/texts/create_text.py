"""
===============================================================================
USE CASE: Create Text
===============================================================================

Business Goal:
    Convertir un texto subido por el usuario en metadata (TextInfo) y
    fragmentos de líneas listos para practicar.

-------------------------------------------------------------------------------
CRC CARD (Class-Responsibility-Collaborator)
-------------------------------------------------------------------------------
Class:
    CreateTextUseCase

Responsibilities:
    - Verificar que el actor exista como usuario.
    - Procesar el contenido con TextProcessorService.
    - Rechazar contenido sin líneas (texto vacío tras strip).
    - Construir TextInfo y fragmentos con ids "{text_id}_frag_{idx}".
    - Persistir metadata y fragmentos en una sola escritura (todo o nada).

Collaborators:
    - UserRepository: get_user
    - TextRepository: create_text
    - TextProcessorService: process(text) -> (total_lines, fragments)

Error Mapping:
    - FORBIDDEN: actor ausente
    - NOT_FOUND: usuario inexistente
    - VALIDATION_ERROR: título vacío / texto sin líneas
    - CONFLICT: id de texto o fragmento duplicado
===============================================================================
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Callable

from ....crosscutting.logger import logger
from ....crosscutting.metrics import record_text_created
from ....domain.entities import TextFragment, TextInfo
from ....domain.errors import DomainError, EntityAlreadyExistsError
from ....domain.practice_policy import PracticeActor
from ....domain.repositories import TextRepository, UserRepository
from ....domain.services import TextProcessorService
from ...clock import new_id, utc_now
from .text_access import resolve_actor_user
from .text_results import TextError, TextErrorCode, TextResult


def fragment_id_for(text_id: str, fragment_idx: int) -> str:
    return f"{text_id}_frag_{fragment_idx}"


@dataclass(frozen=True)
class CreateTextInput:
    title: str
    content: str
    actor: PracticeActor | None = None


class CreateTextUseCase:
    """Use Case (Command): procesa y persiste un texto nuevo."""

    def __init__(
        self,
        user_repository: UserRepository,
        text_repository: TextRepository,
        processor: TextProcessorService,
        *,
        clock: Callable[[], datetime] = utc_now,
        id_factory: Callable[[], str] = new_id,
    ) -> None:
        self._users = user_repository
        self._texts = text_repository
        self._processor = processor
        self._clock = clock
        self._new_id = id_factory

    def execute(self, input_data: CreateTextInput) -> TextResult:
        # 1) Actor
        user, error = resolve_actor_user(
            actor=input_data.actor, user_repository=self._users
        )
        if error is not None:
            return TextResult(error=error)

        # 2) Procesar contenido
        total_lines, groups = self._processor.process(input_data.content)
        if total_lines == 0:
            return self._validation_error("Text has no content.")

        # 3) Construir entidades (validan invariantes)
        text_id = self._new_id()
        try:
            info = TextInfo(
                id=text_id,
                user_id=user.id,
                title=input_data.title,
                total_lines=total_lines,
                fragment_size=self._processor.fragment_size,
                fragment_count=len(groups),
                created_at=self._clock(),
            )
            fragments = [
                TextFragment(
                    id=fragment_id_for(text_id, idx),
                    text_id=text_id,
                    fragment_idx=idx,
                    lines=lines,
                )
                for idx, lines in enumerate(groups)
            ]
        except DomainError as exc:
            return self._validation_error(str(exc))

        # 4) Persistir
        try:
            self._texts.create_text(info, fragments)
        except EntityAlreadyExistsError as exc:
            return TextResult(
                error=TextError(code=TextErrorCode.CONFLICT, message=str(exc))
            )

        record_text_created(len(fragments))
        logger.info(
            "text created",
            extra={
                "text_id": text_id,
                "total_lines": total_lines,
                "fragment_count": len(fragments),
            },
        )
        return TextResult(text=info, fragments=fragments)

    @staticmethod
    def _validation_error(message: str) -> TextResult:
        return TextResult(
            error=TextError(code=TextErrorCode.VALIDATION_ERROR, message=message)
        )
