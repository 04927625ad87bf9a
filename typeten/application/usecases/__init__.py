"""
===============================================================================
USE CASES PACKAGE (Public API / Exports)
===============================================================================

Re-exporta los casos de uso de users / texts / sessions para que container.py
y las rutas importen desde un único lugar.
===============================================================================
"""

from .sessions import (
    CompleteSessionUseCase,
    CreateSessionInput,
    CreateSessionUseCase,
    GetSessionUseCase,
    ListSessionsUseCase,
    RecordProgressInput,
    RecordProgressUseCase,
    SessionErrorCode,
)
from .texts import (
    CreateTextInput,
    CreateTextUseCase,
    GetTextFragmentsUseCase,
    GetTextUseCase,
    ListTextsUseCase,
    TextErrorCode,
)
from .users import (
    GetUserUseCase,
    RegisterUserInput,
    RegisterUserUseCase,
    UserErrorCode,
)

__all__ = [
    # Users
    "RegisterUserInput",
    "RegisterUserUseCase",
    "GetUserUseCase",
    "UserErrorCode",
    # Texts
    "CreateTextInput",
    "CreateTextUseCase",
    "ListTextsUseCase",
    "GetTextUseCase",
    "GetTextFragmentsUseCase",
    "TextErrorCode",
    # Sessions
    "CreateSessionInput",
    "CreateSessionUseCase",
    "GetSessionUseCase",
    "ListSessionsUseCase",
    "RecordProgressInput",
    "RecordProgressUseCase",
    "CompleteSessionUseCase",
    "SessionErrorCode",
]
