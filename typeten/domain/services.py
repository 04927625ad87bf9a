"""
Name: Domain Service Interfaces (Ports)

Responsibilities:
  - Define contracts for pure domain services used by use cases
  - Keep application layer decoupled from concrete implementations

Collaborators:
  - infrastructure.text.processor: LineTextProcessor implements TextProcessorService
  - application.usecases.texts.create_text: consumes TextProcessorService
"""

from typing import Protocol


class TextProcessorService(Protocol):
    """R: Splits raw text into ordered, bounded line groups."""

    fragment_size: int

    def process(self, text: str) -> tuple[int, list[list[str]]]:
        """R: Return (total_lines, fragments)."""
        ...
