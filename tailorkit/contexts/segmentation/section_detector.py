"""
Section detection for resume text.

Splits a document into lines, classifies each line as a section header or
ordinary content, and groups content into Section records. Content that
appears before the first header is handed to the header/summary separator.

The detector never fails on malformed content. Callers are responsible for
rejecting empty input (see segmenter.segment_document).
"""

from typing import Optional

from tailorkit.contexts.segmentation.chunk_data_structure import ChunkType, Line, Section
from tailorkit.contexts.segmentation.header_separator import separate_preamble
from tailorkit.contexts.segmentation.patterns import (
    SECTION_HEADER_PATTERNS,
    HeaderHeuristicPatterns,
)


def split_lines(text: str) -> list[Line]:
    """
    Split text into trimmed, non-empty lines with dense 0-based indices.

    Args:
        text: Raw document text

    Returns:
        Lines in original order; empty and whitespace-only lines are dropped
    """
    stripped = (raw.strip() for raw in text.splitlines())
    return [Line(index=i, text=line) for i, line in enumerate(line for line in stripped if line)]


def detect_section_header(line: str) -> Optional[ChunkType]:
    """
    Classify a line as a section header.

    Tries the header phrase table first (whole line, optional colon), then the
    short-line heuristic: under 50 characters, ending in a colon or written in
    title case, with no period or comma, classified by keyword.

    Args:
        line: Trimmed line text

    Returns:
        Chunk type the header opens, or None for ordinary content
    """
    text = line.strip()
    if not text:
        return None

    for chunk_type, patterns in SECTION_HEADER_PATTERNS.items():
        if any(pattern.match(text) for pattern in patterns):
            return chunk_type

    return _classify_short_header(text)


def _classify_short_header(text: str) -> Optional[ChunkType]:
    if len(text) >= HeaderHeuristicPatterns.MAX_LENGTH:
        return None
    if "." in text or "," in text:
        return None
    if not (text.endswith(":") or HeaderHeuristicPatterns.TITLE_CASE_WORDS.match(text)):
        return None

    # Plain containment: "Coursework:" counts as well as "Work History"
    lowered = text.lower()
    for keyword, chunk_type in HeaderHeuristicPatterns.KEYWORD_RULES:
        if keyword in lowered:
            return chunk_type
    return None


def detect_sections(lines: list[Line]) -> list[Section]:
    """
    Group lines into sections in document order.

    Two states: outside any section (lines buffer into the pre-header run)
    and inside a section (lines append to the open section). A header line
    flushes the pre-header run or closes the open section, then opens a new
    section whose heading is that line.

    Every line ends up in exactly one returned section. The pre-header run is
    split by separate_preamble() into at most a header and a summary section.

    Args:
        lines: Output of split_lines()

    Returns:
        Sections in document order
    """
    sections: list[Section] = []
    preamble: list[Line] = []
    current: Optional[Section] = None

    for line in lines:
        header_type = detect_section_header(line.text)

        if header_type is not None:
            if current is None:
                sections.extend(separate_preamble(preamble))
                preamble = []
            else:
                sections.append(current)
            current = Section(type=header_type, heading=line)
        elif current is None:
            preamble.append(line)
        else:
            current.lines.append(line)

    if current is None:
        sections.extend(separate_preamble(preamble))
    else:
        sections.append(current)

    return sections
