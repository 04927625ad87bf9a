"""
============================================================
TARJETA CRC
============================================================
Class: typeten.infrastructure.repositories (Package exports)

Responsibilities:
- Exponer implementaciones concretas de repositorios en un único punto de
  importación.
- Mantener una API estable para la capa de aplicación (use cases).

Collaborators:
- Repositorios InMemory (lock + copias)
============================================================
"""

from .in_memory import (
    InMemorySessionRepository,
    InMemoryTextRepository,
    InMemoryUserRepository,
)

__all__ = [
    "InMemoryUserRepository",
    "InMemoryTextRepository",
    "InMemorySessionRepository",
]
