"""
Chunk parser strategies.

A chunk parser turns document text into a SegmentationResult. The rule-based
parser in this package is one implementation; a language-model parser (or
any other producer) lives outside this package and plugs in by subclassing
ChunkParser. Downstream code never needs to know which strategy produced a
chunk beyond its provenance label.
"""

from abc import ABC, abstractmethod
from typing import Optional

from tailorkit.contexts.segmentation.chunk_data_structure import Provenance, SegmentationResult
from tailorkit.contexts.segmentation.logger import _log_info, _log_warning
from tailorkit.contexts.segmentation.segmenter import segment_cover_letter, segment_document

DOCUMENT_KINDS = ("resume", "cover_letter")


class ChunkParser(ABC):
    """
    Abstract base for chunk producers.

    Subclasses must:
    - Set the provenance class attribute
    - Implement parse() returning chunks that follow the Chunk contract
      (typed, tagged, order numbered 1..n)
    """

    provenance: Provenance
    name: str = "parser"

    @abstractmethod
    def parse(self, text: str) -> SegmentationResult:
        """Segment text into chunks. Should report failures in the result."""
        pass


class RuleBasedChunkParser(ChunkParser):
    """Deterministic heuristic parser (no external services)."""

    provenance = Provenance.RULE_BASED
    name = "rule_based"

    def __init__(self, document_kind: str = "resume"):
        if document_kind not in DOCUMENT_KINDS:
            raise ValueError(
                f"Unknown document kind '{document_kind}'. Expected one of: {DOCUMENT_KINDS}"
            )
        self.document_kind = document_kind

    def parse(self, text: str) -> SegmentationResult:
        if self.document_kind == "cover_letter":
            return segment_cover_letter(text)
        return segment_document(text)


def parse_with_fallback(
    text: str, primary: ChunkParser, fallback: Optional[ChunkParser] = None
) -> SegmentationResult:
    """
    Run the primary parser and fall back when it fails.

    The fallback runs when the primary returns an unsuccessful result or
    raises. Defaults to the rule-based resume parser.

    Args:
        text: Document text
        primary: Preferred parser (e.g., a language-model parser)
        fallback: Parser used when the primary fails

    Returns:
        The primary's result when successful, otherwise the fallback's
    """
    if fallback is None:
        fallback = RuleBasedChunkParser()

    try:
        result = primary.parse(text)
    except Exception as e:
        _log_warning(f"{primary.name} parser raised {type(e).__name__}: {e}")
    else:
        if result.success:
            return result
        _log_warning(f"{primary.name} parser failed: {result.error}")

    _log_info(f"Falling back to {fallback.name} parser")
    return fallback.parse(text)
