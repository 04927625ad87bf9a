"""
===============================================================================
SESSION USE CASES PACKAGE (Public API / Exports)
===============================================================================
"""

from __future__ import annotations

from .complete_session import CompleteSessionUseCase
from .create_session import CreateSessionInput, CreateSessionUseCase
from .get_session import GetSessionUseCase
from .list_sessions import ListSessionsUseCase
from .record_progress import RecordProgressInput, RecordProgressUseCase
from .session_access import resolve_session
from .session_results import (
    SessionError,
    SessionErrorCode,
    SessionListResult,
    SessionResult,
)

__all__ = [
    # Use Cases
    "CreateSessionInput",
    "CreateSessionUseCase",
    "GetSessionUseCase",
    "ListSessionsUseCase",
    "RecordProgressInput",
    "RecordProgressUseCase",
    "CompleteSessionUseCase",
    # Helpers
    "resolve_session",
    # DTOs / Result models
    "SessionResult",
    "SessionListResult",
    "SessionError",
    "SessionErrorCode",
]
