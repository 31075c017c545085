"""
Targeting Context

Responsibilities:
- Scores stored chunks against a job's keywords and required/preferred skills
- Provides resume-only and cover-letter (with resume context) retrieval views
- Matches whole documents to jobs and suggests document pairings

Owns: Relevance formula, scoring weights, job keyword/skill view
Never: Segments documents, stores chunks, or extracts keywords from postings for storage
"""

from tailorkit.contexts.targeting.document_matcher import (
    DocumentMatch,
    DocumentText,
    DocumentWeights,
    PairingSuggestion,
    content_similarity,
    extract_keywords_from_text,
    match_document,
    rank_documents,
    suggest_document_pairings,
)
from tailorkit.contexts.targeting.exceptions import ScoringConfigError
from tailorkit.contexts.targeting.job_profile import JobDescriptionView
from tailorkit.contexts.targeting.relevance import (
    ChunkMatch,
    find_relevant_chunks,
    find_relevant_cover_letter_chunks,
    find_relevant_resume_chunks,
    score_chunk,
)
from tailorkit.contexts.targeting.scoring_config import (
    ScoringWeights,
    load_scoring_weights,
    weights_from_dict,
)

__all__ = [
    # Chunk relevance
    "ChunkMatch",
    "score_chunk",
    "find_relevant_chunks",
    "find_relevant_resume_chunks",
    "find_relevant_cover_letter_chunks",
    # Document matching
    "DocumentMatch",
    "DocumentText",
    "DocumentWeights",
    "PairingSuggestion",
    "content_similarity",
    "extract_keywords_from_text",
    "match_document",
    "rank_documents",
    "suggest_document_pairings",
    # Configuration
    "JobDescriptionView",
    "ScoringWeights",
    "ScoringConfigError",
    "load_scoring_weights",
    "weights_from_dict",
]
