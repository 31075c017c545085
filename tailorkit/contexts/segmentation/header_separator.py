"""
Header/summary separation for content that precedes the first section header.

Resumes usually open with identity and contact lines (name, email, phone,
location, profile links) and often a short untitled summary. This module
routes each of those lines to either a header section or a summary section.
"""

from tailorkit.contexts.segmentation.chunk_data_structure import ChunkType, Line, Section
from tailorkit.contexts.segmentation.patterns import (
    HEADER_CONTENT_PATTERNS,
    ContactPatterns,
    PreambleBiasRules,
)


def is_header_content(line: str) -> bool:
    """
    Check whether a line describes document metadata rather than prose.

    True for lines with an email, phone number, street address, profile URL,
    "City, ST" or postal code; for job-title lines under 80 characters; and
    for lines shaped like a personal name (2-4 capitalized words, no digits,
    under 50 characters).
    """
    text = line.strip()

    if any(pattern.search(text) for pattern in HEADER_CONTENT_PATTERNS):
        return True

    if (
        len(text) < ContactPatterns.JOB_TITLE_MAX_LENGTH
        and ContactPatterns.JOB_TITLE_KEYWORD.search(text)
    ):
        return True

    return _looks_like_name(text)


def _looks_like_name(text: str) -> bool:
    if len(text) >= ContactPatterns.PERSONAL_NAME_MAX_LENGTH:
        return False
    if any(c.isdigit() for c in text):
        return False
    return bool(ContactPatterns.PERSONAL_NAME.match(text))


def is_summary_opener(line: str) -> bool:
    """Check whether a line reads like the start of a summary paragraph."""
    return bool(PreambleBiasRules.SUMMARY_OPENER.match(line.strip()))


def _is_early_short_line(position: int, text: str) -> bool:
    # Short lines near the top are treated as header content even without a
    # pattern match. A short first summary sentence lands here too.
    return (
        position < PreambleBiasRules.EARLY_LINE_COUNT
        and len(text) < PreambleBiasRules.SHORT_LINE_LENGTH
        and not is_summary_opener(text)
    )


def separate_preamble(lines: list[Line]) -> list[Section]:
    """
    Split the pre-header run into a header section and a summary section.

    Lines keep their relative order within each section. The header section
    is emitted first; a section is only emitted when it has lines.

    Args:
        lines: Lines preceding the first detected section header

    Returns:
        Zero, one or two sections (header first, then summary)
    """
    header_lines: list[Line] = []
    summary_lines: list[Line] = []

    for position, line in enumerate(lines):
        if is_header_content(line.text) or _is_early_short_line(position, line.text):
            header_lines.append(line)
        else:
            summary_lines.append(line)

    sections = []
    if header_lines:
        sections.append(Section(type=ChunkType.HEADER, lines=header_lines))
    if summary_lines:
        sections.append(Section(type=ChunkType.SUMMARY, lines=summary_lines))
    return sections
