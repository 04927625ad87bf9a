"""Utilidades de texto (fragmentación por líneas)."""

from .processor import DEFAULT_FRAGMENT_SIZE, LineTextProcessor, process_text

__all__ = [
    "process_text",
    "LineTextProcessor",
    "DEFAULT_FRAGMENT_SIZE",
]
