"""
===============================================================================
TARJETA CRC — interfaces/api/http/routers/sessions.py
===============================================================================

Responsibilities:
    - Exponer endpoints HTTP para sesiones de práctica (crear, leer, listar,
      registrar progreso, completar).
    - Traducir SessionError -> RFC7807.

Collaborators:
    - application.usecases.sessions
    - container (factories DI)
    - schemas.sessions
===============================================================================
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query

from typeten.application.usecases import (
    CompleteSessionUseCase,
    CreateSessionInput,
    CreateSessionUseCase,
    GetSessionUseCase,
    ListSessionsUseCase,
    RecordProgressInput,
    RecordProgressUseCase,
)
from typeten.container import (
    get_complete_session_use_case,
    get_create_session_use_case,
    get_get_session_use_case,
    get_list_sessions_use_case,
    get_record_progress_use_case,
)
from typeten.domain.entities import Session
from typeten.domain.practice_policy import PracticeActor

from ..dependencies import require_actor
from ..error_mapping import raise_use_case_error
from ..schemas.sessions import (
    CreateSessionReq,
    RecordProgressReq,
    SessionRes,
    SessionsListRes,
)

router = APIRouter()


def _to_session_res(session: Session) -> SessionRes:
    return SessionRes(
        id=session.id,
        user_id=session.user_id,
        text_id=session.text_id,
        current_fragment_idx=session.current_fragment_idx,
        current_line_idx=session.current_line_idx,
        completed_lines=session.completed_lines,
        total_accuracy_percent=session.total_accuracy_percent,
        average_wpm=session.average_wpm,
        is_completed=session.is_completed,
        created_at=session.created_at,
        updated_at=session.updated_at,
    )


@router.post(
    "/sessions", response_model=SessionRes, status_code=201, tags=["sessions"]
)
def create_session(
    req: CreateSessionReq,
    actor: PracticeActor = Depends(require_actor),
    use_case: CreateSessionUseCase = Depends(get_create_session_use_case),
):
    result = use_case.execute(CreateSessionInput(text_id=req.text_id, actor=actor))
    if result.error is not None:
        raise_use_case_error(result.error)
    return _to_session_res(result.session)


@router.get("/sessions", response_model=SessionsListRes, tags=["sessions"])
def list_sessions(
    text_id: str | None = Query(None, description="Filtrar por texto"),
    actor: PracticeActor = Depends(require_actor),
    use_case: ListSessionsUseCase = Depends(get_list_sessions_use_case),
):
    result = use_case.execute(actor, text_id=text_id)
    if result.error is not None:
        raise_use_case_error(result.error)
    return SessionsListRes(sessions=[_to_session_res(s) for s in result.sessions])


@router.get("/sessions/{session_id}", response_model=SessionRes, tags=["sessions"])
def get_session(
    session_id: str,
    actor: PracticeActor = Depends(require_actor),
    use_case: GetSessionUseCase = Depends(get_get_session_use_case),
):
    result = use_case.execute(session_id, actor)
    if result.error is not None:
        raise_use_case_error(result.error)
    return _to_session_res(result.session)


@router.post(
    "/sessions/{session_id}/progress", response_model=SessionRes, tags=["sessions"]
)
def record_progress(
    session_id: str,
    req: RecordProgressReq,
    actor: PracticeActor = Depends(require_actor),
    use_case: RecordProgressUseCase = Depends(get_record_progress_use_case),
):
    result = use_case.execute(
        RecordProgressInput(
            session_id=session_id,
            accuracy_percent=req.accuracy_percent,
            wpm=req.wpm,
            actor=actor,
        )
    )
    if result.error is not None:
        raise_use_case_error(result.error)
    return _to_session_res(result.session)


@router.post(
    "/sessions/{session_id}/complete", response_model=SessionRes, tags=["sessions"]
)
def complete_session(
    session_id: str,
    actor: PracticeActor = Depends(require_actor),
    use_case: CompleteSessionUseCase = Depends(get_complete_session_use_case),
):
    result = use_case.execute(session_id, actor)
    if result.error is not None:
        raise_use_case_error(result.error)
    return _to_session_res(result.session)
