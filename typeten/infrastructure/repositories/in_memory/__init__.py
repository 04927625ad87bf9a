"""
In-Memory Repository Implementations.

Default storage for the service and for tests.
Data is lost on process restart.
"""

from .session import InMemorySessionRepository
from .text import InMemoryTextRepository
from .user import InMemoryUserRepository

__all__ = [
    "InMemoryUserRepository",
    "InMemoryTextRepository",
    "InMemorySessionRepository",
]
