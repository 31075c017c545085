"""
Heuristic metadata extraction from resume and cover letter text.

Provides word/line statistics for any document and best-effort detection of
the target company and role from a cover letter's prose. This module has
no LLM dependencies.
"""

import re
from typing import Optional

from tailorkit.contexts.segmentation.patterns import CoverLetterPatterns


def document_statistics(text: str) -> dict[str, int]:
    """
    Count words and non-empty lines.

    Args:
        text: Raw document text

    Returns:
        Dict with word_count and line_count
    """
    return {
        "word_count": len(text.split()),
        "line_count": sum(1 for line in text.splitlines() if line.strip()),
    }


def _collapse_whitespace(text: str) -> str:
    return re.sub(r"\s+", " ", text).strip()


def detect_company(text: str) -> Optional[str]:
    """
    Detect the company a cover letter addresses.

    Tries salutation and phrase patterns in order ("Dear Acme Team",
    "joining Acme", "opportunity at Acme", "Acme's mission", "working at
    Acme") and returns the first plausible name.
    """
    collapsed = _collapse_whitespace(text)
    for pattern in CoverLetterPatterns.COMPANY:
        match = pattern.search(collapsed)
        if not match:
            continue
        company = match.group(1).strip()
        if 2 < len(company) < 50 and company not in CoverLetterPatterns.COMPANY_FALSE_POSITIVES:
            return company
    return None


def detect_role(text: str) -> Optional[str]:
    """
    Detect the role a cover letter applies for.

    Tries phrase patterns in order ("applying for the X position", "interest
    in the X role", "X position at", "for the X opening").
    """
    collapsed = _collapse_whitespace(text)
    for pattern in CoverLetterPatterns.ROLE:
        match = pattern.search(collapsed)
        if not match:
            continue
        role = match.group(1).strip()
        if 5 < len(role) < 80 and role.lower() not in CoverLetterPatterns.ROLE_FALSE_POSITIVES:
            return role
    return None


def extract_cover_letter_metadata(text: str) -> dict:
    """
    Statistics plus detected company and role (only fields with values).
    """
    metadata = dict(document_statistics(text))

    company = detect_company(text)
    if company:
        metadata["detected_company"] = company

    role = detect_role(text)
    if role:
        metadata["detected_role"] = role

    return metadata
