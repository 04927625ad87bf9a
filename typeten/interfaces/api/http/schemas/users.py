"""
===============================================================================
TARJETA CRC — schemas/users.py
===============================================================================

Responsabilidades:
    - DTOs de request/response para registro y consulta de usuarios.
    - Normalizar espacios extremos; el formato de email lo valida el dominio.
===============================================================================
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field, field_validator


class RegisterUserReq(BaseModel):
    email: str = Field(..., min_length=3, max_length=320)
    username: str = Field(..., min_length=1, max_length=100)

    @field_validator("email", "username")
    @classmethod
    def strip_value(cls, v: str) -> str:
        return v.strip()


class UserRes(BaseModel):
    id: str
    email: str
    username: str
    created_at: datetime
