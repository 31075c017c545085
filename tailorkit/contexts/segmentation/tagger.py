"""
Keyword tagging for chunks.

Assigns a small set of lowercase tags to a chunk from fixed vocabularies:
technology terms for every chunk, soft skills for summary and skills
chunks, contact tags for header chunks and action tags for experience
bullets.
"""

from tailorkit.contexts.segmentation.chunk_data_structure import ChunkType
from tailorkit.contexts.segmentation.patterns import (
    ACTION_TAGS,
    SOFT_SKILL_KEYWORDS,
    TECHNOLOGY_KEYWORDS,
    HeaderTagPatterns,
)

SOFT_SKILL_TYPES = frozenset({ChunkType.SUMMARY, ChunkType.SKILLS})


def find_terms(text: str, vocabulary: tuple) -> list[str]:
    """
    Find vocabulary terms contained in text.

    Args:
        text: Text to scan (lowercased internally)
        vocabulary: Lowercase terms

    Returns:
        Matching terms in vocabulary order
    """
    lowered = text.lower()
    return [term for term in vocabulary if term in lowered]


def extract_tags(text: str, chunk_type: ChunkType) -> frozenset[str]:
    """
    Extract keyword tags for a chunk.

    Deterministic: identical (text, chunk_type) always yields the same set.

    Args:
        text: Chunk text
        chunk_type: Chunk type (selects which vocabularies apply)

    Returns:
        Deduplicated lowercase tags
    """
    tags = set(find_terms(text, TECHNOLOGY_KEYWORDS))

    if chunk_type in SOFT_SKILL_TYPES:
        tags.update(find_terms(text, SOFT_SKILL_KEYWORDS))

    if chunk_type is ChunkType.HEADER:
        tags.update(tag for tag, pattern in HeaderTagPatterns.RULES if pattern.search(text))

    if chunk_type is ChunkType.EXPERIENCE_BULLET:
        lowered = text.lower()
        tags.update(tag for needle, tag in ACTION_TAGS.items() if needle in lowered)

    return frozenset(tags)


def skill_tag(fragment: str) -> str:
    """Tag form of a skill phrase: lowercase, spaces replaced with hyphens."""
    return "-".join(fragment.lower().split())
