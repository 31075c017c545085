"""Unit tests for separating contact header lines from an untitled summary."""

import pytest

from tailorkit.contexts.segmentation.chunk_data_structure import ChunkType, Line
from tailorkit.contexts.segmentation.header_separator import (
    is_header_content,
    is_summary_opener,
    separate_preamble,
)


def _lines(*texts):
    return [Line(index=i, text=text) for i, text in enumerate(texts)]


@pytest.mark.unit
@pytest.mark.parametrize(
    "line",
    [
        "jane.doe@example.com",
        "555-123-4567",
        "42 Harbor Way",
        "https://janedoe.dev",
        "Baltimore, MD",
        "Senior Data Engineer",
        "Jane Doe",
    ],
)
def test_is_header_content(line):
    assert is_header_content(line)


@pytest.mark.unit
def test_prose_is_not_header_content():
    assert not is_header_content("Builds reliable data platforms for analytics teams")


@pytest.mark.unit
def test_is_summary_opener():
    assert is_summary_opener("Passionate about building reliable data systems")
    assert not is_summary_opener("Builds reliable data systems")


@pytest.mark.unit
def test_separate_preamble_header_then_summary():
    lines = _lines(
        "Jane Doe",
        "jane.doe@example.com | 555-123-4567",
        "Passionate about building reliable data systems",
        "Shipped streaming platforms used by millions of customers every day.",
    )
    sections = separate_preamble(lines)

    assert [s.type for s in sections] == [ChunkType.HEADER, ChunkType.SUMMARY]
    assert [line.index for line in sections[0].lines] == [0, 1]
    assert [line.index for line in sections[1].lines] == [2, 3]


@pytest.mark.unit
def test_separate_preamble_keeps_relative_order():
    """Test that interleaved header and summary lines keep their order."""
    lines = _lines(
        "Jane Doe",
        "I turn messy data into dependable products for analysts.",
        "Baltimore, MD",
        "jane.doe@example.com",
        "Comfortable owning systems end to end",
    )
    header, summary = separate_preamble(lines)

    assert [line.index for line in header.lines] == [0, 2, 3]
    assert [line.index for line in summary.lines] == [1, 4]


@pytest.mark.unit
def test_short_early_line_is_treated_as_header():
    """
    Known false positive: a short opening summary sentence that is not a
    recognized opener is routed to the header.
    """
    lines = _lines("Jane Doe", "Builds reliable data platforms at scale")
    sections = separate_preamble(lines)

    assert [s.type for s in sections] == [ChunkType.HEADER]
    assert [line.index for line in sections[0].lines] == [0, 1]


@pytest.mark.unit
def test_short_line_after_early_window_is_summary():
    lines = _lines(
        "Jane Doe",
        "jane.doe@example.com",
        "555-123-4567",
        "Baltimore, MD",
        "Loves hard problems",
    )
    header, summary = separate_preamble(lines)

    assert [line.index for line in header.lines] == [0, 1, 2, 3]
    assert [line.index for line in summary.lines] == [4]


@pytest.mark.unit
def test_separate_preamble_empty():
    assert separate_preamble([]) == []
