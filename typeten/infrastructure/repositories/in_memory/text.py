"""
============================================================
TARJETA CRC — infrastructure/repositories/in_memory/text.py
============================================================
Class: InMemoryTextRepository

Responsibilities:
  - Almacenar metadata de textos y sus fragmentos en memoria.
  - Listar textos por usuario y fragmentos por texto.
  - create_text: alta atómica de metadata + fragmentos (todo o nada).

Collaborators:
  - domain.entities.TextInfo, TextFragment
  - domain.repositories.TextRepository (contrato a implementar)

Constraints / Notes:
  - Thread-safe: un único Lock cubre ambas "tablas".
  - TextInfo y TextFragment son inmutables (frozen + lines en tupla), así que
    compartir la instancia no expone estado mutable.
  - Los listados devuelven listas nuevas; el orden no es parte del contrato.
============================================================
"""

from __future__ import annotations

from threading import Lock
from typing import Dict, List, Optional, Sequence

from ....domain.entities import TextFragment, TextInfo
from ....domain.errors import EntityAlreadyExistsError
from ....domain.repositories import TextRepository


class InMemoryTextRepository(TextRepository):
    """
    Repositorio in-memory, thread-safe, para textos.

    Modelo mental:
    - _texts: text_id -> TextInfo
    - _fragments: fragment_id -> TextFragment
    """

    def __init__(self) -> None:
        self._lock = Lock()
        self._texts: Dict[str, TextInfo] = {}
        self._fragments: Dict[str, TextFragment] = {}

    # =========================================================
    # TextInfo
    # =========================================================
    def create_text_info(self, info: TextInfo) -> None:
        with self._lock:
            if info.id in self._texts:
                raise EntityAlreadyExistsError("text", info.id)
            self._texts[info.id] = info

    def get_text_info(self, text_id: str) -> Optional[TextInfo]:
        with self._lock:
            return self._texts.get(text_id)

    def list_texts_by_user(self, user_id: str) -> List[TextInfo]:
        with self._lock:
            return [t for t in self._texts.values() if t.user_id == user_id]

    # =========================================================
    # Fragments
    # =========================================================
    def create_fragment(self, fragment: TextFragment) -> None:
        with self._lock:
            if fragment.id in self._fragments:
                raise EntityAlreadyExistsError("fragment", fragment.id)
            self._fragments[fragment.id] = fragment

    def get_fragment(self, fragment_id: str) -> Optional[TextFragment]:
        with self._lock:
            return self._fragments.get(fragment_id)

    def list_fragments_by_text(self, text_id: str) -> List[TextFragment]:
        with self._lock:
            return [f for f in self._fragments.values() if f.text_id == text_id]

    # =========================================================
    # Texto completo
    # =========================================================
    def create_text(self, info: TextInfo, fragments: Sequence[TextFragment]) -> None:
        with self._lock:
            if info.id in self._texts:
                raise EntityAlreadyExistsError("text", info.id)

            seen: set[str] = set()
            for fragment in fragments:
                if fragment.id in self._fragments or fragment.id in seen:
                    raise EntityAlreadyExistsError("fragment", fragment.id)
                seen.add(fragment.id)

            self._texts[info.id] = info
            for fragment in fragments:
                self._fragments[fragment.id] = fragment
