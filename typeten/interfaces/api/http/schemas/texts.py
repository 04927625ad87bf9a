"""
===============================================================================
TARJETA CRC — schemas/texts.py
===============================================================================

Módulo:
    Schemas HTTP para textos y fragmentos

Responsabilidades:
    - Validar título y contenido con límites desde settings.
    - Exponer metadata y fragmentos (líneas en orden).

Colaboradores:
    - crosscutting.config.get_settings (límites)
===============================================================================
"""

from __future__ import annotations

from datetime import datetime
from typing import Annotated

from pydantic import BaseModel, Field, field_validator

from typeten.crosscutting.config import get_settings

_settings = get_settings()


class CreateTextReq(BaseModel):
    """Request para subir un texto de práctica."""

    title: Annotated[
        str,
        Field(
            ...,
            min_length=1,
            max_length=_settings.max_title_chars,
            description="Título del texto",
        ),
    ]
    content: Annotated[
        str,
        Field(
            ...,
            min_length=1,
            max_length=_settings.max_text_chars,
            description="Texto crudo; se divide por líneas",
        ),
    ]

    @field_validator("title")
    @classmethod
    def strip_title(cls, v: str) -> str:
        return v.strip()


class TextRes(BaseModel):
    id: str
    user_id: str
    title: str
    total_lines: int
    fragment_size: int
    fragment_count: int
    created_at: datetime


class TextsListRes(BaseModel):
    texts: list[TextRes]


class FragmentRes(BaseModel):
    id: str
    text_id: str
    fragment_idx: int
    lines: list[str]


class TextFragmentsRes(BaseModel):
    text_id: str
    fragments: list[FragmentRes]
