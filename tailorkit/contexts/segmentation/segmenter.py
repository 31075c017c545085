"""
Segmentation orchestration.

Entry points that run the full rule-based pipeline over a document's text:

- segment_document(): resume text -> lines -> sections -> chunks
- segment_cover_letter(): cover letter text -> paragraphs -> chunks

Both return a SegmentationResult and never raise. Empty input is reported as
an unsuccessful result; any unexpected error is logged and reported the
same way so callers can fall back to another parser or manual entry.
"""

from typing import Optional

from tailorkit.contexts.segmentation.chunk_data_structure import (
    ChunkType,
    Line,
    Section,
    SegmentationResult,
)
from tailorkit.contexts.segmentation.converter import convert_sections
from tailorkit.contexts.segmentation.logger import (
    _log_debug,
    _log_error,
    log_sections,
    log_segmentation_result,
)
from tailorkit.contexts.segmentation.metadata_extractor import (
    document_statistics,
    extract_cover_letter_metadata,
)
from tailorkit.contexts.segmentation.patterns import CoverLetterPatterns
from tailorkit.contexts.segmentation.section_detector import detect_sections, split_lines

EMPTY_INPUT_ERROR = "No text content provided"


def _is_blank(text: Optional[str]) -> bool:
    return not text or not text.strip()


def segment_document(text: str) -> SegmentationResult:
    """
    Segment resume text into typed, ordered chunks.

    Args:
        text: Plain text extracted from a resume

    Returns:
        SegmentationResult with chunks numbered 1..n on success, or
        success=False with an error message
    """
    if _is_blank(text):
        _log_debug("Rejected empty resume text")
        return SegmentationResult(success=False, error=EMPTY_INPUT_ERROR)

    try:
        lines = split_lines(text)
        sections = detect_sections(lines)
        log_sections(sections)
        chunks = convert_sections(sections)
    except Exception as e:
        _log_error(f"Resume segmentation error: {e}")
        return SegmentationResult(success=False, error=f"Segmentation error: {e}")

    result = SegmentationResult(
        chunks=chunks,
        success=True,
        sections=sections,
        metadata=document_statistics(text),
    )
    log_segmentation_result("resume", result)
    return result


# =============================================================================
# COVER LETTERS
# =============================================================================


def split_paragraphs(text: str) -> list[list[Line]]:
    """
    Split text into blank-line separated paragraphs of trimmed lines.

    Line indices match split_lines() for the same text.
    """
    paragraphs: list[list[Line]] = []
    current: list[Line] = []
    index = 0

    for raw in text.splitlines():
        stripped = raw.strip()
        if not stripped:
            if current:
                paragraphs.append(current)
                current = []
            continue
        current.append(Line(index=index, text=stripped))
        index += 1

    if current:
        paragraphs.append(current)
    return paragraphs


def _letter_sections(paragraphs: list[list[Line]]) -> list[Section]:
    """
    Assign sections to cover letter paragraphs.

    Paragraphs before the salutation form the letterhead (header). The
    salutation line and everything from the sign-off onwards are dropped.
    Remaining paragraphs become intro, body... and closing.
    """
    salutation_at = next(
        (
            i
            for i, paragraph in enumerate(paragraphs)
            if CoverLetterPatterns.SALUTATION.match(paragraph[0].text)
        ),
        None,
    )

    sections = []
    if salutation_at is not None:
        letterhead = [line for paragraph in paragraphs[:salutation_at] for line in paragraph]
        if letterhead:
            sections.append(Section(type=ChunkType.HEADER, lines=letterhead))
        remaining = [paragraphs[salutation_at][1:]] + paragraphs[salutation_at + 1 :]
    else:
        remaining = paragraphs

    body: list[list[Line]] = []
    for paragraph in remaining:
        signed_off = False
        kept = []
        for line in paragraph:
            if CoverLetterPatterns.SIGN_OFF.match(line.text):
                signed_off = True
                break
            kept.append(line)
        if kept:
            body.append(kept)
        if signed_off:
            break

    for position, paragraph in enumerate(body):
        if position == 0:
            chunk_type = ChunkType.COVER_LETTER_INTRO
        elif position == len(body) - 1:
            chunk_type = ChunkType.COVER_LETTER_CLOSING
        else:
            chunk_type = ChunkType.COVER_LETTER_BODY
        sections.append(Section(type=chunk_type, lines=paragraph))

    return sections


def segment_cover_letter(text: str) -> SegmentationResult:
    """
    Segment cover letter text into intro, body and closing chunks.

    One paragraph becomes an intro; two become intro and closing; more add
    body chunks in between. Metadata carries word/line counts and, when
    found, the detected company and role.

    Args:
        text: Plain text extracted from a cover letter

    Returns:
        SegmentationResult (success=False only for empty input or internal errors)
    """
    if _is_blank(text):
        _log_debug("Rejected empty cover letter text")
        return SegmentationResult(success=False, error=EMPTY_INPUT_ERROR)

    try:
        sections = _letter_sections(split_paragraphs(text))
        log_sections(sections)
        chunks = convert_sections(sections)
        metadata = extract_cover_letter_metadata(text)
    except Exception as e:
        _log_error(f"Cover letter segmentation error: {e}")
        return SegmentationResult(success=False, error=f"Segmentation error: {e}")

    result = SegmentationResult(
        chunks=chunks, success=True, sections=sections, metadata=metadata
    )
    log_segmentation_result("cover_letter", result)
    return result


def summarize_result(result: SegmentationResult) -> str:
    """
    One-line human-readable summary of a segmentation result.

    Example:
        "Parsed 12 chunks from 180 words, Company: Acme, Role: Data Engineer"
    """
    if not result.success:
        return f"Segmentation failed: {result.error}"

    summary = f"Parsed {len(result.chunks)} chunks"
    if "word_count" in result.metadata:
        summary += f" from {result.metadata['word_count']} words"
    if result.metadata.get("detected_company"):
        summary += f", Company: {result.metadata['detected_company']}"
    if result.metadata.get("detected_role"):
        summary += f", Role: {result.metadata['detected_role']}"
    return summary
