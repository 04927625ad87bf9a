"""
Fuentes únicas de tiempo e identificadores para los casos de uso.

Los use cases aceptan `clock` / `id_factory` inyectables; estos son los
defaults de runtime (UTC + uuid4 en texto).
"""

from __future__ import annotations

from datetime import datetime, timezone
from uuid import uuid4


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def new_id() -> str:
    return str(uuid4())
