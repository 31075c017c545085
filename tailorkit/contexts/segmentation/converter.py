"""
Section-to-chunk conversion.

Turns detected sections into ordered, tagged chunks. Each sub-converter
receives a section and the next order number and returns the chunks it
produced; convert_sections() folds over all sections so order numbers run
contiguously across the whole document.
"""

from typing import Callable

from tailorkit.contexts.segmentation.chunk_data_structure import Chunk, ChunkType, Section
from tailorkit.contexts.segmentation.patterns import ExperiencePatterns, SkillsPatterns
from tailorkit.contexts.segmentation.tagger import extract_tags, skill_tag

SectionConverter = Callable[[Section, int], list[Chunk]]

# Types always merged into a single chunk, whatever their lines contain
MONOLITHIC_TYPES = frozenset(
    {ChunkType.HEADER, ChunkType.SUMMARY}
    | {chunk_type for chunk_type in ChunkType if chunk_type.is_cover_letter_type}
)


def make_chunk(chunk_type: ChunkType, text: str, order: int, extra_tags=()) -> Chunk:
    """Build a rule-based chunk tagged by extract_tags() plus any extra tags."""
    tags = extract_tags(text, chunk_type) | frozenset(extra_tags)
    return Chunk(type=chunk_type, text=text, tags=tags, order=order)


# =============================================================================
# SUB-CONVERTERS
# =============================================================================


def convert_merged(section: Section, next_order: int) -> list[Chunk]:
    """Merge all section content into one chunk of the section's type."""
    text = " ".join(line.text for line in section.lines if line.text.strip())
    if not text:
        return []
    return [make_chunk(section.type, text, next_order)]


def split_skills(text: str) -> list[str]:
    """
    Split skills text on commas, semicolons, bullet glyphs and newlines.

    Returns:
        Trimmed fragments shorter than 100 characters, in order
    """
    fragments = []
    for raw in SkillsPatterns.SEPARATORS.split(text):
        fragment = SkillsPatterns.LEADING_GLYPH.sub("", raw.strip()).strip()
        if 0 < len(fragment) < SkillsPatterns.MAX_FRAGMENT_LENGTH:
            fragments.append(fragment)
    return fragments


def convert_skills(section: Section, next_order: int) -> list[Chunk]:
    """
    One chunk per skill when the section splits into several skills,
    otherwise a single chunk for the whole block.
    """
    fragments = split_skills(section.text)
    if len(fragments) <= 1:
        return convert_merged(section, next_order)

    return [
        make_chunk(ChunkType.SKILLS, fragment, next_order + offset, extra_tags=[skill_tag(fragment)])
        for offset, fragment in enumerate(fragments)
    ]


def is_job_header_line(text: str) -> bool:
    """
    Check whether an experience line introduces a job rather than an achievement.

    True for lines with a date range, lines opening with a title-cased job
    title, and lines combining a role keyword with a company indicator.
    """
    if ExperiencePatterns.DATE_RANGE.search(text):
        return True
    if ExperiencePatterns.JOB_TITLE.match(text):
        return True
    return bool(
        ExperiencePatterns.ROLE_KEYWORD.search(text)
        and ExperiencePatterns.COMPANY_INDICATOR.search(text)
    )


def classify_experience_line(text: str) -> tuple[ChunkType, str]:
    """
    Classify one experience line.

    A leading bullet glyph marks an explicit bullet (glyph stripped). Other
    lines are job headers when is_job_header_line() says so, and implicit
    bullets otherwise.

    Returns:
        (chunk type, cleaned text)
    """
    glyph = ExperiencePatterns.BULLET_GLYPH.match(text)
    if glyph:
        return ChunkType.EXPERIENCE_BULLET, text[glyph.end() :].strip()
    if is_job_header_line(text):
        return ChunkType.EXPERIENCE_SECTION, text
    return ChunkType.EXPERIENCE_BULLET, text


def convert_experience(section: Section, next_order: int) -> list[Chunk]:
    """Emit one chunk per experience line, job headers and bullets alike."""
    chunks = []
    for line in section.lines:
        chunk_type, text = classify_experience_line(line.text.strip())
        if not text:
            continue
        chunks.append(make_chunk(chunk_type, text, next_order + len(chunks)))
    return chunks


# =============================================================================
# DISPATCH
# =============================================================================

# Every chunk type must have an entry
SECTION_CONVERTERS: dict[ChunkType, SectionConverter] = {
    ChunkType.HEADER: convert_merged,
    ChunkType.SUMMARY: convert_merged,
    ChunkType.SKILLS: convert_skills,
    ChunkType.EXPERIENCE_SECTION: convert_experience,
    ChunkType.EXPERIENCE_BULLET: convert_experience,
    ChunkType.MISSION_FIT: convert_merged,
    ChunkType.COVER_LETTER_INTRO: convert_merged,
    ChunkType.COVER_LETTER_BODY: convert_merged,
    ChunkType.COVER_LETTER_CLOSING: convert_merged,
    ChunkType.COMPANY_RESEARCH: convert_merged,
    ChunkType.SKILL_DEMONSTRATION: convert_merged,
    ChunkType.ACHIEVEMENT_CLAIM: convert_merged,
    ChunkType.MOTIVATION_STATEMENT: convert_merged,
    ChunkType.EXPERIENCE_MAPPING: convert_merged,
}


def _has_date_range(section: Section) -> bool:
    return any(ExperiencePatterns.DATE_RANGE.search(line.text) for line in section.lines)


def convert_section(section: Section, next_order: int) -> list[Chunk]:
    """
    Convert one section into chunks numbered from next_order.

    Sections with no content produce no chunks. Sections other than
    header, summary, skills and cover letter paragraphs are processed line
    by line when any of their lines carries a date range.
    """
    if section.is_empty():
        return []

    if (
        section.type not in MONOLITHIC_TYPES
        and section.type is not ChunkType.SKILLS
        and _has_date_range(section)
    ):
        return convert_experience(section, next_order)

    return SECTION_CONVERTERS[section.type](section, next_order)


def convert_sections(sections: list[Section], start_order: int = 1) -> list[Chunk]:
    """
    Convert sections into chunks with contiguous order numbers.

    Args:
        sections: Sections in document order
        start_order: Order number of the first chunk

    Returns:
        Chunks in document order
    """
    chunks: list[Chunk] = []
    next_order = start_order
    for section in sections:
        section_chunks = convert_section(section, next_order)
        chunks.extend(section_chunks)
        next_order += len(section_chunks)
    return chunks
