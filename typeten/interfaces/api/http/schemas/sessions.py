"""
===============================================================================
TARJETA CRC — schemas/sessions.py
===============================================================================

Módulo:
    Schemas HTTP para sesiones de práctica

Responsabilidades:
    - DTOs de creación, progreso y respuesta de sesiones.
    - Rechazar NaN / infinito en accuracy y wpm (los rangos los valida el
      dominio, que responde VALIDATION_ERROR).
===============================================================================
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field, field_validator


class CreateSessionReq(BaseModel):
    text_id: str = Field(..., min_length=1, max_length=128)

    @field_validator("text_id")
    @classmethod
    def strip_text_id(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("text_id must not be blank")
        return v


class RecordProgressReq(BaseModel):
    accuracy_percent: float = Field(
        ..., allow_inf_nan=False, description="Precisión de la línea [0, 100]"
    )
    wpm: float = Field(
        ..., allow_inf_nan=False, description="Palabras por minuto (>= 0)"
    )


class SessionRes(BaseModel):
    id: str
    user_id: str
    text_id: str
    current_fragment_idx: int
    current_line_idx: int
    completed_lines: int
    total_accuracy_percent: float
    average_wpm: float
    is_completed: bool
    created_at: datetime
    updated_at: datetime


class SessionsListRes(BaseModel):
    sessions: list[SessionRes]
