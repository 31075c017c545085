"""
Whole-document matching.

Scores complete resumes and cover letters (their extracted text) against job
postings, and suggests which stored documents pair with which jobs. Works on
raw text, so it needs no segmentation.

Score = 0.4 * keyword ratio + 0.3 * required skill ratio
      + 0.2 * preferred skill ratio + 0.1 * content similarity
"""

import re
from collections import Counter
from dataclasses import dataclass, field
from typing import Any, Iterable, Optional

from tailorkit.contexts.targeting.job_profile import JobDescriptionView
from tailorkit.contexts.targeting.logger import _log_debug

DOCUMENT_TYPES = ("resume", "cover_letter")
DEFAULT_PAIRING_THRESHOLD = 0.15

_NON_WORD = re.compile(r"[^\w]", re.ASCII)
_DIGITS_ONLY = re.compile(r"^\d+$")

STOP_WORDS = frozenset(
    """
    the be to of and a in that have i it for not on with he as you do at this
    but his by from they we say her she or an will my one all would there their
    what so up out if about who get which go me when make can like time no just
    him know take people into year your good some could them see other than then
    now look only come its over think also back after use two how our work first
    well way even new want because any these give day most us
    """.split()
)


@dataclass(frozen=True)
class DocumentWeights:
    """Weights of the whole-document match score."""

    keyword: float = 0.4
    required_skill: float = 0.3
    preferred_skill: float = 0.2
    similarity: float = 0.1


@dataclass(frozen=True)
class DocumentText:
    """A stored resume or cover letter reduced to its extracted text."""

    document_id: str
    name: str
    document_type: str
    text: str = ""

    def __post_init__(self):
        if self.document_type not in DOCUMENT_TYPES:
            raise ValueError(
                f"Unknown document type '{self.document_type}'. Expected one of: {DOCUMENT_TYPES}"
            )


@dataclass
class DocumentMatch:
    document_id: str
    document_name: str
    document_type: str
    match_score: float
    matched_keywords: list[str] = field(default_factory=list)
    skill_matches: list[str] = field(default_factory=list)
    content_similarity: float = 0.0

    def to_dict(self) -> dict[str, Any]:
        return {
            "documentId": self.document_id,
            "documentName": self.document_name,
            "documentType": self.document_type,
            "matchScore": self.match_score,
            "matchedKeywords": list(self.matched_keywords),
            "skillMatches": list(self.skill_matches),
            "contentSimilarity": self.content_similarity,
        }


@dataclass
class PairingSuggestion:
    job_id: Optional[str]
    job_title: Optional[str]
    company: Optional[str]
    matches: list[DocumentMatch] = field(default_factory=list)


def _clean_words(text: str) -> list[str]:
    return [_NON_WORD.sub("", word) for word in text.split()]


def extract_keywords_from_text(text: str, max_keywords: int = 15) -> list[str]:
    """
    Pick the most frequent meaningful words of a text.

    Words are lowercased and stripped of punctuation; stop words, words of
    two characters or fewer, and pure numbers are dropped. Ties keep first
    appearance order.

    Args:
        text: Free text (e.g., a job posting)
        max_keywords: Maximum number of keywords

    Returns:
        Keywords by descending frequency
    """
    counts = Counter(
        word
        for word in _clean_words((text or "").lower())
        if len(word) > 2 and word not in STOP_WORDS and not _DIGITS_ONLY.match(word)
    )
    return [word for word, _ in counts.most_common(max(max_keywords, 0))]


def _word_set(text: str) -> set[str]:
    # Length filter runs before punctuation is stripped
    return {
        cleaned
        for word in text.split()
        if len(word) > 3
        for cleaned in [_NON_WORD.sub("", word)]
        if cleaned
    }


def content_similarity(text_a: str, text_b: str) -> float:
    """Jaccard similarity over the words longer than three characters of two texts."""
    words_a = _word_set((text_a or "").lower())
    words_b = _word_set((text_b or "").lower())
    if not words_a or not words_b:
        return 0.0
    return len(words_a & words_b) / len(words_a | words_b)


def match_document(
    job: JobDescriptionView,
    document: DocumentText,
    weights: Optional[DocumentWeights] = None,
) -> DocumentMatch:
    """
    Score one document against a job.

    Args:
        job: Job keywords, skills and raw text
        document: Document text
        weights: Score weights (defaults to 0.4/0.3/0.2/0.1)

    Returns:
        DocumentMatch (score 0 when nothing overlaps)
    """
    if weights is None:
        weights = DocumentWeights()

    text = (document.text or "").lower()

    matched_keywords = [k for k in job.keywords if k in text]
    required_hits = [s for s in job.required_skills if s in text]
    preferred_hits = [s for s in job.preferred_skills if s in text]
    skill_matches = [s for s in job.all_skills if s in text]

    similarity = content_similarity(job.raw_text, text)
    score = (
        weights.keyword * len(matched_keywords) / max(len(job.keywords), 1)
        + weights.required_skill * len(required_hits) / max(len(job.required_skills), 1)
        + weights.preferred_skill * len(preferred_hits) / max(len(job.preferred_skills), 1)
        + weights.similarity * similarity
    )

    return DocumentMatch(
        document_id=document.document_id,
        document_name=document.name,
        document_type=document.document_type,
        match_score=score,
        matched_keywords=matched_keywords,
        skill_matches=skill_matches,
        content_similarity=similarity,
    )


def rank_documents(
    job: JobDescriptionView,
    documents: Iterable[DocumentText],
    weights: Optional[DocumentWeights] = None,
) -> list[DocumentMatch]:
    """
    Score documents against a job, keeping those with a positive score.

    Returns:
        Matches by descending score (ties keep input order)
    """
    matches = [match_document(job, document, weights) for document in documents]
    matches = [m for m in matches if m.match_score > 0]
    return sorted(matches, key=lambda m: m.match_score, reverse=True)


def suggest_document_pairings(
    jobs: Iterable[JobDescriptionView],
    documents: Iterable[DocumentText],
    min_match_threshold: float = DEFAULT_PAIRING_THRESHOLD,
    weights: Optional[DocumentWeights] = None,
) -> list[PairingSuggestion]:
    """
    Suggest which documents suit which jobs.

    Args:
        jobs: Job postings
        documents: Stored resumes and cover letters
        min_match_threshold: Minimum document score to suggest
        weights: Score weights

    Returns:
        One suggestion per job with at least one document at or above the
        threshold, in job order
    """
    documents = list(documents)
    suggestions = []

    for job in jobs:
        matches = [
            m for m in rank_documents(job, documents, weights) if m.match_score >= min_match_threshold
        ]
        _log_debug(f"Job {job.job_id or job.title or '?'}: {len(matches)} document(s) suggested")
        if matches:
            suggestions.append(
                PairingSuggestion(
                    job_id=job.job_id,
                    job_title=job.title,
                    company=job.company,
                    matches=matches,
                )
            )

    return suggestions
