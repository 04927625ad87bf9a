"""
===============================================================================
CRC CARD — infrastructure/text/processor.py
===============================================================================

Componente:
  Fragmentación de texto por líneas

Responsabilidades:
  - Convertir texto crudo en (total_lines, fragments).
  - Agrupar líneas consecutivas en bloques de a lo sumo `fragment_size`.
  - Exponer:
      * process_text(...) -> tuple[int, list[list[str]]] (función pura)
      * LineTextProcessor (servicio, cumple TextProcessorService)

Colaboradores:
  - domain.services.TextProcessorService (puerto)
  - application.usecases.texts.create_text (consumidor)

Reglas:
  - Se recorta el texto completo (strip); texto vacío => (0, []), no es error.
  - Se divide por "\\n"; las líneas en blanco interiores se conservan.
  - fragment_size <= 0 se reemplaza por DEFAULT_FRAGMENT_SIZE.
  - La concatenación de fragmentos en orden == secuencia de líneas.
===============================================================================
"""

from __future__ import annotations

from typing import Final

DEFAULT_FRAGMENT_SIZE: Final[int] = 10


def _effective_size(fragment_size: int | None) -> int:
    if fragment_size is None or fragment_size <= 0:
        return DEFAULT_FRAGMENT_SIZE
    return fragment_size


def process_text(
    text: str, fragment_size: int = DEFAULT_FRAGMENT_SIZE
) -> tuple[int, list[list[str]]]:
    """
    Parte el texto en grupos de líneas.

    Devuelve:
      - total_lines: cantidad de líneas del texto recortado.
      - fragments: listas nuevas (el caller puede mutarlas sin efectos).
    """
    raw = (text or "").strip()
    if not raw:
        return 0, []

    size = _effective_size(fragment_size)
    lines = raw.split("\n")

    fragments = [lines[start : start + size] for start in range(0, len(lines), size)]
    return len(lines), fragments


class LineTextProcessor:
    """
    Servicio de fragmentación por líneas.

    Diseño:
      - El tamaño efectivo se resuelve al construir (coerción incluida).
      - `process()` delega a `process_text`.
    """

    def __init__(self, fragment_size: int = DEFAULT_FRAGMENT_SIZE):
        self.fragment_size = _effective_size(fragment_size)

    def process(self, text: str) -> tuple[int, list[list[str]]]:
        return process_text(text, self.fragment_size)
