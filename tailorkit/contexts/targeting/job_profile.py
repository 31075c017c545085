"""
Job posting view for the Targeting context.

Provides JobDescriptionView, the read-only slice of a job posting that
relevance scoring needs: keywords plus required and preferred skills.
Keyword/skill extraction itself happens upstream; this module only
normalizes what it is given.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Iterable, Optional

from omegaconf import OmegaConf


def normalize_terms(terms: Optional[Iterable[str]]) -> tuple[str, ...]:
    """
    Lowercase and trim terms, dropping blanks and duplicates (first occurrence wins).

    Args:
        terms: Raw terms, or None

    Returns:
        Normalized terms in original order
    """
    seen = {}
    for term in terms or ():
        if term is None:
            continue
        normalized = str(term).strip().lower()
        if normalized:
            seen.setdefault(normalized, None)
    return tuple(seen)


@dataclass
class JobDescriptionView:
    """
    Keywords and skills of a job posting, matched case-insensitively.

    Factory methods:
        from_dict(data) - Application record (camelCase) or snake_case mapping
        from_yaml(path) - YAML file with the same shape
    """

    keywords: tuple[str, ...] = ()
    required_skills: tuple[str, ...] = ()
    preferred_skills: tuple[str, ...] = ()

    # Optional context (document matching, pairing suggestions, display)
    raw_text: str = ""
    title: Optional[str] = None
    company: Optional[str] = None
    job_id: Optional[str] = None
    metadata: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        self.keywords = normalize_terms(self.keywords)
        self.required_skills = normalize_terms(self.required_skills)
        self.preferred_skills = normalize_terms(self.preferred_skills)
        self.raw_text = self.raw_text or ""

    @property
    def all_skills(self) -> tuple[str, ...]:
        """Required skills followed by preferred skills not already listed."""
        return normalize_terms(self.required_skills + self.preferred_skills)

    def has_terms(self) -> bool:
        """True when there is at least one keyword or skill to match."""
        return bool(self.keywords or self.required_skills or self.preferred_skills)

    # =========================================================================
    # FACTORY METHODS
    # =========================================================================

    @classmethod
    def from_dict(cls, data: Optional[dict[str, Any]]) -> "JobDescriptionView":
        """
        Build a view from a job record.

        Accepts the application's record shape:
            {"keywords": [...], "extractedInfo": {"requiredSkills": [...],
             "preferredSkills": [...]}, "rawText": ..., "title": ..., "company": ...}
        as well as flat snake_case keys (keywords, required_skills,
        preferred_skills, raw_text, title, company, id). Missing or null
        arrays are treated as empty.
        """
        data = data or {}
        extracted = data.get("extractedInfo") or data.get("extracted_info") or {}

        required = extracted.get("requiredSkills") or data.get("required_skills")
        preferred = extracted.get("preferredSkills") or data.get("preferred_skills")

        return cls(
            keywords=data.get("keywords") or (),
            required_skills=required or (),
            preferred_skills=preferred or (),
            raw_text=data.get("rawText") or data.get("raw_text") or "",
            title=data.get("title"),
            company=data.get("company"),
            job_id=data.get("id") or data.get("job_id"),
        )

    @classmethod
    def from_yaml(cls, yaml_path: Path) -> "JobDescriptionView":
        """Load a view from a YAML file (same shapes as from_dict)."""
        data = OmegaConf.to_container(OmegaConf.load(Path(yaml_path)), resolve=True)
        view = cls.from_dict(data if isinstance(data, dict) else {})
        view.metadata["source_path"] = str(yaml_path)
        return view
