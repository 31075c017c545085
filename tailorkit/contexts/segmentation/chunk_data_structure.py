"""
Chunk data structures for the Segmentation context.

Defines the closed set of chunk types, the intermediate Line and Section
records that only live inside a single parse call, and the durable Chunk
record handed to the storage layer.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional


class ChunkType(Enum):
    """Document role of a chunk. Values are the labels stored with each chunk."""

    # Resume types
    HEADER = "cv_header"
    SUMMARY = "cv_summary"
    SKILLS = "cv_skills"
    EXPERIENCE_SECTION = "cv_experience_section"
    EXPERIENCE_BULLET = "cv_experience_bullet"
    MISSION_FIT = "cv_mission_fit"

    # Cover letter types
    COVER_LETTER_INTRO = "cl_intro"
    COVER_LETTER_BODY = "cl_body"
    COVER_LETTER_CLOSING = "cl_closing"
    COMPANY_RESEARCH = "cl_company_research"
    SKILL_DEMONSTRATION = "cl_skill_demonstration"
    ACHIEVEMENT_CLAIM = "cl_achievement_claim"
    MOTIVATION_STATEMENT = "cl_motivation_statement"
    EXPERIENCE_MAPPING = "cl_experience_mapping"

    @property
    def is_resume_type(self) -> bool:
        return self.value.startswith("cv_")

    @property
    def is_cover_letter_type(self) -> bool:
        return self.value.startswith("cl_")


class Provenance(Enum):
    """Mechanism that produced a chunk."""

    RULE_BASED = "rule_based"
    MODEL_BASED = "model_based"
    MANUAL = "manual"


@dataclass(frozen=True)
class Line:
    """A trimmed, non-empty document line with its dense 0-based index."""

    index: int
    text: str


@dataclass
class Section:
    """
    Contiguous run of lines sharing one tentative chunk type.

    The heading line (when the section was opened by a detected header) is
    covered by the section but is not part of its content. Sections built by
    the header/summary separator have no heading and may skip indices that
    were routed to their sibling section.
    """

    type: ChunkType
    lines: list[Line] = field(default_factory=list)
    heading: Optional[Line] = None

    @property
    def start_line(self) -> Optional[int]:
        """First covered index, or None for a section with no heading and no lines."""
        return min(self.covered_indices(), default=None)

    @property
    def end_line(self) -> Optional[int]:
        return max(self.covered_indices(), default=None)

    @property
    def text(self) -> str:
        """Section content joined with newlines (heading excluded)."""
        return "\n".join(line.text for line in self.lines)

    def covered_indices(self) -> list[int]:
        indices = [line.index for line in self.lines]
        if self.heading is not None:
            indices.insert(0, self.heading.index)
        return indices

    def is_empty(self) -> bool:
        return not any(line.text.strip() for line in self.lines)


@dataclass(frozen=True)
class Chunk:
    """
    Durable output unit of segmentation.

    chunk_id and source_doc_id belong to the storage layer: segmentation
    never sets them, but chunks read back from storage carry them through
    scoring untouched.
    """

    type: ChunkType
    text: str
    tags: frozenset[str] = frozenset()
    order: int = 0
    provenance: Provenance = Provenance.RULE_BASED
    chunk_id: Optional[str] = None
    source_doc_id: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a plain dict (tags sorted for stable output)."""
        data = {
            "type": self.type.value,
            "text": self.text,
            "tags": sorted(self.tags),
            "order": self.order,
            "provenance": self.provenance.value,
        }
        if self.chunk_id is not None:
            data["id"] = self.chunk_id
        if self.source_doc_id is not None:
            data["sourceDocId"] = self.source_doc_id
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Chunk":
        """
        Build a Chunk from a stored record.

        Accepts the storage layer's field names (id, sourceDocId). Missing tags
        become an empty set; missing provenance is treated as rule-based.

        Raises:
            ValueError: If type or provenance is not a known label
        """
        return cls(
            type=ChunkType(data["type"]),
            text=data.get("text", ""),
            tags=frozenset(tag.lower() for tag in (data.get("tags") or [])),
            order=int(data.get("order", 0)),
            provenance=Provenance(data.get("provenance") or Provenance.RULE_BASED.value),
            chunk_id=data.get("id"),
            source_doc_id=data.get("sourceDocId"),
        )


@dataclass
class SegmentationResult:
    """Result from segment_document() or segment_cover_letter()."""

    chunks: list[Chunk] = field(default_factory=list)
    success: bool = False
    error: Optional[str] = None
    sections: list[Section] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)
