"""Unit tests for document statistics and cover letter company/role detection."""

import pytest

from tailorkit.contexts.segmentation.metadata_extractor import (
    detect_company,
    detect_role,
    document_statistics,
    extract_cover_letter_metadata,
)


@pytest.mark.unit
def test_document_statistics():
    assert document_statistics("one two\n\n  three  ") == {"word_count": 3, "line_count": 2}
    assert document_statistics("") == {"word_count": 0, "line_count": 0}


@pytest.mark.unit
@pytest.mark.parametrize(
    "text,expected",
    [
        ("Dear Initech Hiring Manager,", "Initech"),
        ("Dear Globex Recruiter, hello", "Globex"),
        ("I look forward to joining Initech.", "Initech"),
        ("the opportunity at Globex, which builds", "Globex"),
    ],
)
def test_detect_company(text, expected):
    assert detect_company(text) == expected


@pytest.mark.unit
def test_detect_company_spans_line_breaks():
    assert detect_company("Dear Acme\nTeam,") == "Acme"


@pytest.mark.unit
def test_detect_company_rejects_short_names():
    assert detect_company("Dear Al Team,") is None
    assert detect_company("No company mentioned here") is None


@pytest.mark.unit
@pytest.mark.parametrize(
    "text,expected",
    [
        ("I am applying for the Data Engineer position.", "Data Engineer"),
        ("my interest in the Platform Engineer role", "Platform Engineer"),
        ("excited for the Staff Analyst opening", "Staff Analyst"),
    ],
)
def test_detect_role(text, expected):
    assert detect_role(text) == expected


@pytest.mark.unit
def test_detect_role_rejects_short_roles():
    assert detect_role("I am applying for the QA position.") is None


@pytest.mark.unit
def test_cover_letter_metadata_omits_missing_fields():
    metadata = extract_cover_letter_metadata("Thanks for reading.")

    assert metadata == {"word_count": 3, "line_count": 1}
