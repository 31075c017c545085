"""
Segmentation Context

Responsibilities:
- Splits extracted resume and cover letter text into lines and sections
- Separates contact/identity lines from untitled summaries
- Converts sections into typed, ordered, tagged chunks
- Defines the chunk contract shared by every chunk producer

Owns: Pattern library, section detection, chunk construction, keyword tagging
Never: Stores chunks, decodes binary documents, or calls language models
"""

from tailorkit.contexts.segmentation.chunk_data_structure import (
    Chunk,
    ChunkType,
    Line,
    Provenance,
    Section,
    SegmentationResult,
)
from tailorkit.contexts.segmentation.parsers import (
    ChunkParser,
    RuleBasedChunkParser,
    parse_with_fallback,
)
from tailorkit.contexts.segmentation.segmenter import (
    segment_cover_letter,
    segment_document,
    summarize_result,
)
from tailorkit.contexts.segmentation.tagger import extract_tags

__all__ = [
    # Orchestrators
    "segment_document",
    "segment_cover_letter",
    "summarize_result",
    "extract_tags",
    # Parser strategies
    "ChunkParser",
    "RuleBasedChunkParser",
    "parse_with_fallback",
    # Data structures
    "Chunk",
    "ChunkType",
    "Line",
    "Provenance",
    "Section",
    "SegmentationResult",
]
