"""Unit tests for the segmentation pattern library."""

import pytest

from tailorkit.contexts.segmentation.chunk_data_structure import ChunkType
from tailorkit.contexts.segmentation.patterns import (
    SECTION_HEADER_PATTERNS,
    ContactPatterns,
    CoverLetterPatterns,
    ExperiencePatterns,
    PreambleBiasRules,
)


def _header_type(text):
    for chunk_type, patterns in SECTION_HEADER_PATTERNS.items():
        if any(p.match(text) for p in patterns):
            return chunk_type
    return None


@pytest.mark.unit
@pytest.mark.parametrize(
    "text,expected",
    [
        ("Professional Summary", ChunkType.SUMMARY),
        ("PROFILE", ChunkType.SUMMARY),
        ("Technical Skills:", ChunkType.SKILLS),
        ("Skills & Technologies", ChunkType.SKILLS),
        ("Core Competencies", ChunkType.SKILLS),
        ("Work Experience", ChunkType.EXPERIENCE_SECTION),
        ("Employment History", ChunkType.EXPERIENCE_SECTION),
        ("Education", ChunkType.EXPERIENCE_SECTION),
        ("Selected Projects:", ChunkType.EXPERIENCE_SECTION),
    ],
)
def test_section_header_phrases(text, expected):
    """Test that common section headers map to their chunk type."""
    assert _header_type(text) == expected


@pytest.mark.unit
def test_section_header_requires_whole_line():
    """Test that a header phrase inside a sentence is not a header."""
    assert _header_type("My skills include Python") is None
    assert _header_type("Experience with distributed systems") is None


@pytest.mark.unit
@pytest.mark.parametrize(
    "text",
    ["Jan 2019 - Present", "2015–2018", "03/2018 to 06/2020", "Sept. 2020 - current"],
)
def test_date_range_matches(text):
    assert ExperiencePatterns.DATE_RANGE.search(text)


@pytest.mark.unit
def test_date_range_ignores_single_year():
    assert ExperiencePatterns.DATE_RANGE.search("Graduated in 2014") is None


@pytest.mark.unit
def test_contact_patterns():
    """Test contact detail patterns on typical header lines."""
    assert ContactPatterns.EMAIL.search("jane.doe@example.com")
    assert ContactPatterns.PHONE.search("(555) 123-4567")
    assert ContactPatterns.PHONE.search("+1 555.123.4567")
    assert ContactPatterns.STREET_ADDRESS.search("123 Main St")
    assert ContactPatterns.SOCIAL_URL.search("github.com/janedoe")
    assert ContactPatterns.CITY_STATE.search("San Francisco, CA")
    assert ContactPatterns.POSTAL_CODE.search("21201")
    assert ContactPatterns.PERSONAL_NAME.match("Jane Q. Doe")
    assert not ContactPatterns.PERSONAL_NAME.match("jane doe")


@pytest.mark.unit
def test_summary_opener():
    assert PreambleBiasRules.SUMMARY_OPENER.match("Results-driven engineer")
    assert PreambleBiasRules.SUMMARY_OPENER.match("I build data platforms")
    assert not PreambleBiasRules.SUMMARY_OPENER.match("Ideas into products")


@pytest.mark.unit
def test_cover_letter_structure_patterns():
    assert CoverLetterPatterns.SALUTATION.match("Dear Hiring Manager,")
    assert CoverLetterPatterns.SALUTATION.match("To whom it may concern:")
    assert CoverLetterPatterns.SIGN_OFF.match("Sincerely,")
    assert CoverLetterPatterns.SIGN_OFF.match("Best regards")
    assert not CoverLetterPatterns.SIGN_OFF.match("Thank you for your consideration.")
