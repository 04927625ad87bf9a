"""
===============================================================================
TARJETA CRC — interfaces/api/http/routers/users.py
===============================================================================

Responsibilities:
    - POST /users: registro (no requiere X-User-Id).
    - GET /users/me: usuario del actor actual.

Collaborators:
    - application.usecases.users
    - container (factories DI)
    - schemas.users
===============================================================================
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from typeten.application.usecases import (
    GetUserUseCase,
    RegisterUserInput,
    RegisterUserUseCase,
)
from typeten.container import get_get_user_use_case, get_register_user_use_case
from typeten.domain.entities import User
from typeten.domain.practice_policy import PracticeActor

from ..dependencies import require_actor
from ..error_mapping import raise_use_case_error
from ..schemas.users import RegisterUserReq, UserRes

router = APIRouter()


def _to_user_res(user: User) -> UserRes:
    return UserRes(
        id=user.id,
        email=user.email,
        username=user.username,
        created_at=user.created_at,
    )


@router.post("/users", response_model=UserRes, status_code=201, tags=["users"])
def register_user(
    req: RegisterUserReq,
    use_case: RegisterUserUseCase = Depends(get_register_user_use_case),
):
    result = use_case.execute(RegisterUserInput(email=req.email, username=req.username))
    if result.error is not None:
        raise_use_case_error(result.error)
    return _to_user_res(result.user)


@router.get("/users/me", response_model=UserRes, tags=["users"])
def get_current_user(
    actor: PracticeActor = Depends(require_actor),
    use_case: GetUserUseCase = Depends(get_get_user_use_case),
):
    result = use_case.execute(actor.user_id)
    if result.error is not None:
        raise_use_case_error(result.error)
    return _to_user_res(result.user)
