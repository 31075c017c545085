"""
Pattern library for resume and cover letter segmentation.

This module provides the regex patterns and keyword vocabularies consulted by
every segmentation stage (section detection, header/summary separation,
chunk conversion and tagging). It holds data only, no behavior.

Pattern classes follow the same convention throughout:
- Dataclasses with frozen=True for immutability
- Class-level constants for compiled patterns
- Module-level read-only tables for iteration
"""

import re
from dataclasses import dataclass
from types import MappingProxyType

from tailorkit.contexts.segmentation.chunk_data_structure import ChunkType

# =============================================================================
# SECTION HEADER PATTERNS
# =============================================================================


@dataclass(frozen=True)
class SectionHeaderPhrases:
    """
    Section header phrases grouped by the chunk type they open.

    Each phrase is matched against the whole trimmed line, case-insensitively,
    with an optional trailing colon. Education, projects and certifications
    have no chunk type of their own and open experience sections.
    """

    SUMMARY: tuple = (
        r"(?:professional |career |executive )?summary",
        r"(?:professional |personal |career )?profile",
        r"(?:career |professional |job )?objective",
        r"about me",
        r"summary of qualifications",
    )

    SKILLS: tuple = (
        r"(?:technical |core |key |professional |relevant )?skills"
        r"(?: (?:&|and) (?:abilities|competencies|tools|technologies|expertise))?",
        r"(?:core |key )?competencies",
        r"technologies",
        r"tech(?:nical)? stack",
        r"tools(?: (?:&|and) technologies)?",
        r"areas of expertise",
    )

    EXPERIENCE: tuple = (
        r"(?:professional |work |relevant |employment )?experience",
        r"employment(?: history)?",
        r"(?:work|career) history",
        r"professional background",
        r"education(?: (?:&|and) (?:training|certifications?))?",
        r"(?:selected |personal |key |academic )?projects",
        r"certifications?(?: (?:&|and) licenses)?",
        r"volunteer(?: experience| work)?",
    )


def _compile_header_phrases(phrases: tuple) -> tuple:
    return tuple(re.compile(rf"^(?:{phrase})\s*:?$", re.IGNORECASE) for phrase in phrases)


# Single source of truth for header classification, keyed by chunk type
SECTION_HEADER_PATTERNS = MappingProxyType(
    {
        ChunkType.SUMMARY: _compile_header_phrases(SectionHeaderPhrases.SUMMARY),
        ChunkType.SKILLS: _compile_header_phrases(SectionHeaderPhrases.SKILLS),
        ChunkType.EXPERIENCE_SECTION: _compile_header_phrases(SectionHeaderPhrases.EXPERIENCE),
    }
)


@dataclass(frozen=True)
class HeaderHeuristicPatterns:
    """
    Fallback rules for short lines that look like headers but are not in
    the phrase table (e.g., "Languages & Frameworks:", "Selected Work").
    """

    MAX_LENGTH: int = 50

    # Capitalized words with a few lowercase connectors
    TITLE_CASE_WORDS: re.Pattern = re.compile(
        r"^[A-Z][A-Za-z'&/-]*(?:\s+(?:[A-Z][A-Za-z'&/-]*|&|and|of|for))*$"
    )

    # Ordered keyword -> chunk type rules, first containment wins
    KEYWORD_RULES: tuple = (
        ("skill", ChunkType.SKILLS),
        ("experience", ChunkType.EXPERIENCE_SECTION),
        ("work", ChunkType.EXPERIENCE_SECTION),
        ("education", ChunkType.EXPERIENCE_SECTION),
        ("project", ChunkType.EXPERIENCE_SECTION),
    )


# =============================================================================
# CONTACT / HEADER CONTENT PATTERNS
# =============================================================================

_JOB_TITLE_WORDS = (
    r"engineer|developer|programmer|manager|designer|analyst|scientist|consultant|"
    r"architect|administrator|specialist|director|coordinator|intern|officer|lead"
)


@dataclass(frozen=True)
class ContactPatterns:
    """
    Patterns identifying document metadata lines (name, contact details,
    location, professional title) at the top of a resume.
    """

    EMAIL: re.Pattern = re.compile(r"[\w.+-]+@[\w-]+\.[\w.-]+")

    # 555-123-4567, (555) 123-4567, +1 555.123.4567
    PHONE: re.Pattern = re.compile(r"(?:\+?\d{1,2}[\s.-]?)?\(?\d{3}\)?[\s.-]?\d{3}[\s.-]?\d{4}\b")

    # House number followed by a street keyword - e.g., "123 Main St"
    STREET_ADDRESS: re.Pattern = re.compile(
        r"\b\d{1,6}\s+(?:[A-Za-z0-9.'-]+\s+){0,4}"
        r"(?:street|st|avenue|ave|road|rd|boulevard|blvd|drive|dr|lane|ln|way|court|ct|"
        r"place|pl|suite|apt)\b",
        re.IGNORECASE,
    )

    SOCIAL_URL: re.Pattern = re.compile(
        r"(?:https?://|www\.)\S+"
        r"|\b(?:linkedin|github|gitlab|behance|dribbble|medium)\.com\S*"
        r"|\bportfolio\b",
        re.IGNORECASE,
    )

    # City, ST (two-letter state code) - e.g., "Baltimore, MD"
    CITY_STATE: re.Pattern = re.compile(r"\b([A-Z][a-z]+(?: [A-Z][a-z]+)*),\s*([A-Z]{2})\b")

    POSTAL_CODE: re.Pattern = re.compile(r"\b\d{5}(?:-\d{4})?\b")

    JOB_TITLE_KEYWORD: re.Pattern = re.compile(rf"\b(?:{_JOB_TITLE_WORDS})\b", re.IGNORECASE)
    JOB_TITLE_MAX_LENGTH: int = 80

    # 2-4 capitalized words, no digits - e.g., "Jane Q. Doe"
    PERSONAL_NAME: re.Pattern = re.compile(r"^[A-Z][a-zA-Z'.-]*(?:\s+[A-Z][a-zA-Z'.-]*){1,3}$")
    PERSONAL_NAME_MAX_LENGTH: int = 50


# Patterns that mark a pre-header line as contact/identity content
HEADER_CONTENT_PATTERNS = (
    ContactPatterns.EMAIL,
    ContactPatterns.PHONE,
    ContactPatterns.STREET_ADDRESS,
    ContactPatterns.SOCIAL_URL,
    ContactPatterns.CITY_STATE,
    ContactPatterns.POSTAL_CODE,
)


@dataclass(frozen=True)
class PreambleBiasRules:
    """
    Early-line bias for the pre-header run: short lines near the top of a
    resume are header content unless they open a summary.
    """

    EARLY_LINE_COUNT: int = 4
    SHORT_LINE_LENGTH: int = 60

    SUMMARY_OPENER: re.Pattern = re.compile(
        r"^(?:i\b|i'm\b|i am\b|my\b|as an?\b|with\b|over\b|experienced\b|"
        r"results[- ]driven\b|results[- ]oriented\b|passionate\b|dedicated\b|motivated\b|"
        r"seasoned\b|highly\b|proven\b|detail[- ]oriented\b|accomplished\b|dynamic\b|"
        r"innovative\b|creative\b|skilled\b|versatile\b)",
        re.IGNORECASE,
    )


# =============================================================================
# EXPERIENCE PATTERNS
# =============================================================================

_MONTH = (
    r"(?:jan(?:uary)?|feb(?:ruary)?|mar(?:ch)?|apr(?:il)?|may|june?|july?|aug(?:ust)?|"
    r"sep(?:t(?:ember)?)?|oct(?:ober)?|nov(?:ember)?|dec(?:ember)?)\.?"
)
_DATE = rf"(?:{_MONTH}\s+|\d{{1,2}}/)?(?:19|20)\d{{2}}"


@dataclass(frozen=True)
class ExperiencePatterns:
    """
    Patterns separating job-header lines from achievement bullets inside
    experience sections.
    """

    # 2019-2022, Jan 2019 - Present, 03/2018 to 06/2020
    DATE_RANGE: re.Pattern = re.compile(
        rf"\b{_DATE}\s*(?:-|–|—|to)\s*(?:{_DATE}|present|current|now|today)\b",
        re.IGNORECASE,
    )

    # Title-cased role at the start of a line - e.g., "Senior Data Engineer"
    JOB_TITLE: re.Pattern = re.compile(
        r"^(?:(?:Senior|Sr\.?|Junior|Jr\.?|Lead|Principal|Staff|Chief|Head|Associate|Assistant)\s+)?"
        r"(?:[A-Z][A-Za-z/&+#.-]*\s+){0,3}"
        r"(?:Engineer|Developer|Programmer|Manager|Designer|Analyst|Scientist|Consultant|"
        r"Architect|Administrator|Specialist|Director|Coordinator|Intern|Officer|Lead)\b"
    )

    ROLE_KEYWORD: re.Pattern = re.compile(rf"\b(?:{_JOB_TITLE_WORDS})s?\b", re.IGNORECASE)

    COMPANY_INDICATOR: re.Pattern = re.compile(
        r"\b(?:at|inc|llc|ltd|corp|corporation|company|co|technologies|solutions|group|"
        r"labs|university|agency|partners)\b",
        re.IGNORECASE,
    )

    BULLET_GLYPH: re.Pattern = re.compile(r"^[•·*+-]\s*")


# =============================================================================
# SKILLS PATTERNS
# =============================================================================


@dataclass(frozen=True)
class SkillsPatterns:
    """Separators for splitting a skills section into individual skills."""

    SEPARATORS: re.Pattern = re.compile(r"[,;•·\n]")
    LEADING_GLYPH: re.Pattern = re.compile(r"^[*+-]\s*")
    MAX_FRAGMENT_LENGTH: int = 100


# =============================================================================
# TAG VOCABULARIES
# =============================================================================

TECHNOLOGY_KEYWORDS = (
    "python",
    "java",
    "javascript",
    "typescript",
    "c++",
    "c#",
    "golang",
    "kotlin",
    "ruby",
    "php",
    "sql",
    "nosql",
    "postgresql",
    "mysql",
    "mongodb",
    "redis",
    "react",
    "angular",
    "vue",
    "node.js",
    "django",
    "flask",
    "fastapi",
    "spring",
    "rails",
    "graphql",
    "rest api",
    "html",
    "css",
    "aws",
    "azure",
    "gcp",
    "docker",
    "kubernetes",
    "terraform",
    "ansible",
    "jenkins",
    "github",
    "gitlab",
    "ci/cd",
    "linux",
    "kafka",
    "spark",
    "hadoop",
    "airflow",
    "tensorflow",
    "pytorch",
    "pandas",
    "numpy",
    "machine learning",
    "data analysis",
    "tableau",
    "figma",
    "jira",
    "agile",
    "scrum",
)

SOFT_SKILL_KEYWORDS = (
    "leadership",
    "communication",
    "teamwork",
    "collaboration",
    "problem solving",
    "problem-solving",
    "critical thinking",
    "mentoring",
    "adaptability",
    "time management",
    "creativity",
    "attention to detail",
    "stakeholder management",
    "analytical",
)

# Substring -> tag, applied to experience bullets
ACTION_TAGS = MappingProxyType(
    {
        "led": "leadership",
        "developed": "development",
        "managed": "management",
    }
)


@dataclass(frozen=True)
class HeaderTagPatterns:
    """Fixed tags assigned to header chunks by pattern."""

    RULES: tuple = (
        ("email", ContactPatterns.EMAIL),
        ("phone", ContactPatterns.PHONE),
        ("social", ContactPatterns.SOCIAL_URL),
        ("location", ContactPatterns.CITY_STATE),
    )


# =============================================================================
# COVER LETTER PATTERNS
# =============================================================================


@dataclass(frozen=True)
class CoverLetterPatterns:
    """
    Patterns for cover letter structure (salutation, sign-off) and for
    detecting the target company and role from the letter's prose.
    """

    SALUTATION: re.Pattern = re.compile(
        r"^(?:dear|to whom it may concern|hello|hi|greetings)\b", re.IGNORECASE
    )

    # Sign-off on a line of its own - e.g., "Sincerely,"
    SIGN_OFF: re.Pattern = re.compile(
        r"^(?:sincerely|best regards|kind regards|warm regards|warmest regards|regards|"
        r"respectfully|best|thanks|thank you|cheers|yours (?:truly|sincerely|faithfully))"
        r"[\s,.!]*$",
        re.IGNORECASE,
    )

    COMPANY: tuple = (
        # "Dear Acme Team" / "Dear Acme Hiring Manager"
        re.compile(r"dear\s+([A-Z][a-zA-Z\s&.,'-]+?)\s+(?:team|hiring\s+manager|recruiter)", re.I),
        re.compile(r"joining\s+([A-Z][a-zA-Z\s&.,'-]+?)[\s.,]", re.I),
        re.compile(r"opportunity\s+at\s+([A-Z][a-zA-Z\s&.,'-]+?)[\s.,]", re.I),
        # "Acme's mission"
        re.compile(r"([A-Z][a-zA-Z\s&.,'-]+?)['’]s\s+(?:mission|values|culture|team)", re.I),
        re.compile(r"working\s+at\s+([A-Z][a-zA-Z\s&.,'-]+?)[\s.,]", re.I),
    )

    ROLE: tuple = (
        re.compile(r"applying\s+for\s+the\s+([a-zA-Z\s-]+?)\s+position", re.I),
        re.compile(r"interest\s+in\s+the\s+([a-zA-Z\s-]+?)\s+role", re.I),
        re.compile(r"([a-zA-Z\s-]+?)\s+position\s+at", re.I),
        re.compile(r"for\s+the\s+([a-zA-Z\s-]+?)\s+opening", re.I),
    )

    COMPANY_FALSE_POSITIVES: frozenset = frozenset({"Dear", "The", "Your", "This", "That"})
    ROLE_FALSE_POSITIVES: frozenset = frozenset({"position", "opportunity", "opening", "role"})
