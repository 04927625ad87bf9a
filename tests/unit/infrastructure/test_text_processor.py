"""
Name: Text Processor Unit Tests

Responsibilities:
  - Validate line splitting, grouping and size coercion
  - Verify the reconstruction and fragment-count guarantees
"""

import math

import pytest

from typeten.domain.services import TextProcessorService
from typeten.infrastructure.text import (
    DEFAULT_FRAGMENT_SIZE,
    LineTextProcessor,
    process_text,
)

pytestmark = pytest.mark.unit


def _lines(n: int) -> str:
    return "\n".join(f"line {i}" for i in range(n))


class TestProcessText:
    def test_empty_text_returns_no_content(self):
        assert process_text("", 10) == (0, [])

    def test_whitespace_only_returns_no_content(self):
        assert process_text("  \n\t\n  ", 10) == (0, [])

    def test_none_is_treated_as_empty(self):
        assert process_text(None, 10) == (0, [])

    def test_single_line(self):
        assert process_text("hello world", 10) == (1, [["hello world"]])

    def test_exact_multiple_of_fragment_size(self):
        total, fragments = process_text(_lines(20), 10)

        assert total == 20
        assert [len(f) for f in fragments] == [10, 10]

    def test_last_fragment_may_be_shorter(self):
        total, fragments = process_text(_lines(25), 10)

        assert total == 25
        assert [len(f) for f in fragments] == [10, 10, 5]
        assert fragments[2][-1] == "line 24"

    def test_small_fragments(self):
        assert process_text("a\nb\nc\nd\ne", 2) == (5, [["a", "b"], ["c", "d"], ["e"]])

    def test_outer_whitespace_is_trimmed(self):
        total, fragments = process_text("\n\n  first\nsecond  \n\n", 10)

        assert total == 2
        assert fragments == [["first", "second"]]

    def test_blank_interior_lines_are_preserved(self):
        total, fragments = process_text("a\n\nb\n   \nc", 10)

        assert total == 5
        assert fragments == [["a", "", "b", "   ", "c"]]

    def test_carriage_returns_are_kept_inside_lines(self):
        total, fragments = process_text("a\r\nb", 10)

        assert total == 2
        assert fragments == [["a\r", "b"]]

    @pytest.mark.parametrize("size", [0, -1, -50])
    def test_non_positive_size_uses_default(self, size):
        total, fragments = process_text(_lines(25), size)

        assert total == 25
        assert [len(f) for f in fragments] == [DEFAULT_FRAGMENT_SIZE] * 2 + [5]

    def test_fragment_size_one(self):
        total, fragments = process_text("a\nb\nc", 1)

        assert total == 3
        assert fragments == [["a"], ["b"], ["c"]]

    def test_fragment_size_larger_than_text(self):
        assert process_text("a\nb", 100) == (2, [["a", "b"]])

    @pytest.mark.parametrize("n,size", [(1, 1), (7, 3), (10, 10), (11, 10), (99, 7)])
    def test_reconstruction_and_count(self, n, size):
        text = _lines(n)

        total, fragments = process_text(text, size)

        flattened = [line for fragment in fragments for line in fragment]
        assert total == n
        assert flattened == text.split("\n")
        assert len(fragments) == math.ceil(total / size)
        assert all(1 <= len(f) <= size for f in fragments)

    def test_fragments_are_independent_lists(self):
        _, fragments = process_text("a\nb\nc", 2)

        fragments[0].append("mutated")
        _, again = process_text("a\nb\nc", 2)

        assert again[0] == ["a", "b"]


class TestLineTextProcessor:
    def test_exposes_effective_size(self):
        assert LineTextProcessor(4).fragment_size == 4

    def test_coerces_non_positive_size(self):
        assert LineTextProcessor(0).fragment_size == DEFAULT_FRAGMENT_SIZE

    def test_default_size(self):
        assert LineTextProcessor().fragment_size == 10

    def test_process_delegates(self):
        processor = LineTextProcessor(2)

        assert processor.process("a\nb\nc") == (3, [["a", "b"], ["c"]])

    def test_satisfies_port(self):
        processor: TextProcessorService = LineTextProcessor(3)

        assert processor.process("x") == (1, [["x"]])
