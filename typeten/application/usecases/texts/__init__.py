"""
===============================================================================
TEXT USE CASES PACKAGE (Public API / Exports)
===============================================================================
"""

from __future__ import annotations

from .create_text import CreateTextInput, CreateTextUseCase, fragment_id_for
from .get_text import GetTextUseCase
from .get_text_fragments import GetTextFragmentsUseCase
from .list_texts import ListTextsUseCase
from .text_access import resolve_actor_user, resolve_text_for_read
from .text_results import (
    TextError,
    TextErrorCode,
    TextFragmentsResult,
    TextListResult,
    TextResult,
)

__all__ = [
    # Use Cases
    "CreateTextInput",
    "CreateTextUseCase",
    "ListTextsUseCase",
    "GetTextUseCase",
    "GetTextFragmentsUseCase",
    # Helpers
    "fragment_id_for",
    "resolve_actor_user",
    "resolve_text_for_read",
    # DTOs / Result models
    "TextResult",
    "TextListResult",
    "TextFragmentsResult",
    "TextError",
    "TextErrorCode",
]
