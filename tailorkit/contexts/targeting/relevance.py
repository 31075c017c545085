"""
Chunk relevance scoring.

Ranks stored chunks against a job posting's keywords and required/preferred
skills so generation flows can pick supporting content. Every call scores
the pool it is given from scratch; nothing is cached between calls.

Views:
- find_relevant_chunks(): every chunk type
- find_relevant_resume_chunks(): resume chunk types only
- find_relevant_cover_letter_chunks(): cover letter chunks first, backfilled
  with a few resume chunks for context
"""

from dataclasses import dataclass, field
from typing import Any, Iterable, Optional, Union

from tailorkit.contexts.segmentation.chunk_data_structure import Chunk, ChunkType
from tailorkit.contexts.targeting.job_profile import JobDescriptionView
from tailorkit.contexts.targeting.logger import _log_debug, log_match_summary
from tailorkit.contexts.targeting.scoring_config import ScoringWeights

DEFAULT_MIN_SCORE = 0.1
DEFAULT_MAX_RESULTS = 20
DEFAULT_VIEW_MAX_RESULTS = 15

RESUME_TYPES = frozenset(t for t in ChunkType if t.is_resume_type)
COVER_LETTER_TYPES = frozenset(t for t in ChunkType if t.is_cover_letter_type)

# Resume chunks worth showing alongside cover letter chunks
COVER_LETTER_CONTEXT_TYPES = frozenset(
    {
        ChunkType.SUMMARY,
        ChunkType.SKILLS,
        ChunkType.EXPERIENCE_BULLET,
        ChunkType.MISSION_FIT,
    }
)
MIN_CONTEXT_CHUNKS = 5

JobLike = Union[JobDescriptionView, dict[str, Any], None]


@dataclass
class ChunkMatch:
    """Scoring result for one chunk. Recomputed on every query."""

    chunk: Chunk
    score: float
    matched_keywords: list[str] = field(default_factory=list)
    skill_matches: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "chunk": self.chunk.to_dict(),
            "score": self.score,
            "matchedKeywords": list(self.matched_keywords),
            "skillMatches": list(self.skill_matches),
        }


def _as_job_view(job: JobLike) -> JobDescriptionView:
    if isinstance(job, JobDescriptionView):
        return job
    return JobDescriptionView.from_dict(job)


def _term_found(term: str, text: str, tags: frozenset[str]) -> bool:
    return term in text or term in tags


def score_chunk(
    job: JobDescriptionView, chunk: Chunk, weights: Optional[ScoringWeights] = None
) -> ChunkMatch:
    """
    Score one chunk against a job.

    A keyword or skill counts when it is a substring of the lowercased chunk
    text or equals one of the chunk's tags.

    Args:
        job: Job keywords and skills
        chunk: Chunk to score
        weights: Formula weights (defaults to the fixed constants)

    Returns:
        ChunkMatch with score in [0, 1]
    """
    if weights is None:
        weights = ScoringWeights()

    text = chunk.text.lower()
    tags = frozenset(tag.lower() for tag in chunk.tags)

    matched_keywords = [k for k in job.keywords if _term_found(k, text, tags)]
    skill_matches = [s for s in job.all_skills if _term_found(s, text, tags)]
    required_hits = [s for s in skill_matches if s in job.required_skills]
    preferred_hits = [s for s in skill_matches if s in job.preferred_skills]

    raw_score = (
        min(weights.keyword_weight * len(matched_keywords), weights.keyword_cap)
        + min(weights.required_skill_weight * len(required_hits), weights.required_skill_cap)
        + min(weights.preferred_skill_weight * len(preferred_hits), weights.preferred_skill_cap)
        + weights.boost_for(chunk.type)
    )
    score = max(0.0, min(raw_score / weights.normalizer, 1.0))

    return ChunkMatch(
        chunk=chunk,
        score=score,
        matched_keywords=matched_keywords,
        skill_matches=skill_matches,
    )


def _rank(matches: Iterable[ChunkMatch], max_results: int) -> list[ChunkMatch]:
    # sorted() is stable, so ties keep pool order
    ranked = sorted(matches, key=lambda m: m.score, reverse=True)
    return ranked[: max(max_results, 0)]


def _score_pool(
    job: JobLike,
    pool: Optional[Iterable[Chunk]],
    min_score: float,
    max_results: int,
    weights: Optional[ScoringWeights],
) -> list[ChunkMatch]:
    view = _as_job_view(job)
    chunks = list(pool or ())

    if not chunks or not view.has_terms():
        _log_debug(f"Nothing to score (pool={len(chunks)}, job has terms={view.has_terms()})")
        return []

    matches = (score_chunk(view, chunk, weights) for chunk in chunks)
    return _rank((m for m in matches if m.score >= min_score), max_results)


def find_relevant_chunks(
    job: JobLike,
    pool: Optional[Iterable[Chunk]],
    min_score: float = DEFAULT_MIN_SCORE,
    max_results: int = DEFAULT_MAX_RESULTS,
    weights: Optional[ScoringWeights] = None,
) -> list[ChunkMatch]:
    """
    Rank chunks of any type against a job.

    Args:
        job: JobDescriptionView or job record dict (missing arrays are empty)
        pool: Stored chunks, fetched by the caller
        min_score: Minimum score to keep
        max_results: Maximum number of matches returned
        weights: Formula weights (defaults to the fixed constants)

    Returns:
        Matches sorted by descending score (ties keep pool order). Empty when
        the pool is empty or the job has no keywords or skills.
    """
    chunks = list(pool or ())
    matches = _score_pool(job, chunks, min_score, max_results, weights)
    log_match_summary("all", len(chunks), matches)
    return matches


def find_relevant_resume_chunks(
    job: JobLike,
    pool: Optional[Iterable[Chunk]],
    min_score: float = DEFAULT_MIN_SCORE,
    max_results: int = DEFAULT_VIEW_MAX_RESULTS,
    weights: Optional[ScoringWeights] = None,
) -> list[ChunkMatch]:
    """
    Rank resume chunks only.

    Scores with twice the result budget, then keeps resume chunk types.
    """
    chunks = list(pool or ())
    candidates = _score_pool(job, chunks, min_score, max_results * 2, weights)
    matches = [m for m in candidates if m.chunk.type in RESUME_TYPES][: max(max_results, 0)]
    log_match_summary("resume", len(chunks), matches)
    return matches


def find_relevant_cover_letter_chunks(
    job: JobLike,
    pool: Optional[Iterable[Chunk]],
    min_score: float = DEFAULT_MIN_SCORE,
    max_results: int = DEFAULT_VIEW_MAX_RESULTS,
    weights: Optional[ScoringWeights] = None,
) -> list[ChunkMatch]:
    """
    Rank cover letter chunks, backfilled with resume chunks for context.

    Scores with twice the result budget, keeps all cover letter chunks, adds
    up to max(5, max_results - cover letter matches) resume context chunks
    (summary, skills, experience bullets, mission fit), then re-sorts the
    combined list and truncates to max_results.
    """
    chunks = list(pool or ())
    candidates = _score_pool(job, chunks, min_score, max_results * 2, weights)

    cover_letter_matches = [m for m in candidates if m.chunk.type in COVER_LETTER_TYPES]
    context_budget = max(MIN_CONTEXT_CHUNKS, max_results - len(cover_letter_matches))
    context_matches = [m for m in candidates if m.chunk.type in COVER_LETTER_CONTEXT_TYPES][
        :context_budget
    ]

    matches = _rank(cover_letter_matches + context_matches, max_results)
    log_match_summary("cover-letter", len(chunks), matches)
    return matches
