"""
===============================================================================
TARJETA CRC — interfaces/api/http/routers/texts.py
===============================================================================

Responsibilities:
    - Exponer endpoints HTTP para subir, listar y leer textos de práctica.
    - Convertir requests HTTP -> inputs de casos de uso.
    - Traducir TextError -> RFC7807.

Collaborators:
    - application.usecases.texts
    - container (factories DI)
    - schemas.texts (DTOs Pydantic)

Patterns:
    - Controller / Router
    - Adapter (HTTP -> UseCase)
===============================================================================
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from typeten.application.usecases import (
    CreateTextInput,
    CreateTextUseCase,
    GetTextFragmentsUseCase,
    GetTextUseCase,
    ListTextsUseCase,
)
from typeten.container import (
    get_create_text_use_case,
    get_get_text_fragments_use_case,
    get_get_text_use_case,
    get_list_texts_use_case,
)
from typeten.domain.entities import TextFragment, TextInfo
from typeten.domain.practice_policy import PracticeActor

from ..dependencies import require_actor
from ..error_mapping import raise_use_case_error
from ..schemas.texts import (
    CreateTextReq,
    FragmentRes,
    TextFragmentsRes,
    TextRes,
    TextsListRes,
)

router = APIRouter()


def _to_text_res(text: TextInfo) -> TextRes:
    return TextRes(
        id=text.id,
        user_id=text.user_id,
        title=text.title,
        total_lines=text.total_lines,
        fragment_size=text.fragment_size,
        fragment_count=text.fragment_count,
        created_at=text.created_at,
    )


def _to_fragment_res(fragment: TextFragment) -> FragmentRes:
    return FragmentRes(
        id=fragment.id,
        text_id=fragment.text_id,
        fragment_idx=fragment.fragment_idx,
        lines=list(fragment.lines),
    )


@router.post("/texts", response_model=TextRes, status_code=201, tags=["texts"])
def create_text(
    req: CreateTextReq,
    actor: PracticeActor = Depends(require_actor),
    use_case: CreateTextUseCase = Depends(get_create_text_use_case),
):
    result = use_case.execute(
        CreateTextInput(title=req.title, content=req.content, actor=actor)
    )
    if result.error is not None:
        raise_use_case_error(result.error)
    return _to_text_res(result.text)


@router.get("/texts", response_model=TextsListRes, tags=["texts"])
def list_texts(
    actor: PracticeActor = Depends(require_actor),
    use_case: ListTextsUseCase = Depends(get_list_texts_use_case),
):
    result = use_case.execute(actor)
    if result.error is not None:
        raise_use_case_error(result.error)
    return TextsListRes(texts=[_to_text_res(t) for t in result.texts])


@router.get("/texts/{text_id}", response_model=TextRes, tags=["texts"])
def get_text(
    text_id: str,
    actor: PracticeActor = Depends(require_actor),
    use_case: GetTextUseCase = Depends(get_get_text_use_case),
):
    result = use_case.execute(text_id, actor)
    if result.error is not None:
        raise_use_case_error(result.error)
    return _to_text_res(result.text)


@router.get(
    "/texts/{text_id}/fragments", response_model=TextFragmentsRes, tags=["texts"]
)
def get_text_fragments(
    text_id: str,
    actor: PracticeActor = Depends(require_actor),
    use_case: GetTextFragmentsUseCase = Depends(get_get_text_fragments_use_case),
):
    result = use_case.execute(text_id, actor)
    if result.error is not None:
        raise_use_case_error(result.error)
    return TextFragmentsRes(
        text_id=text_id,
        fragments=[_to_fragment_res(f) for f in result.fragments],
    )
