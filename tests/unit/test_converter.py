"""Unit tests for section-to-chunk conversion."""

import pytest

from tailorkit.contexts.segmentation.chunk_data_structure import (
    ChunkType,
    Line,
    Provenance,
    Section,
)
from tailorkit.contexts.segmentation.converter import (
    SECTION_CONVERTERS,
    classify_experience_line,
    convert_section,
    convert_sections,
    is_job_header_line,
    split_skills,
)


def _section(chunk_type, *texts, start=0):
    return Section(
        type=chunk_type,
        lines=[Line(index=start + i, text=text) for i, text in enumerate(texts)],
    )


@pytest.mark.unit
def test_every_chunk_type_has_a_converter():
    assert set(SECTION_CONVERTERS) == set(ChunkType)


# =============================================================================
# SKILLS
# =============================================================================


@pytest.mark.unit
def test_split_skills_on_mixed_separators():
    assert split_skills("Python, Java; React") == ["Python", "Java", "React"]
    assert split_skills("• SQL\n• dbt · Looker") == ["SQL", "dbt", "Looker"]
    assert split_skills("- Docker\n+ Terraform") == ["Docker", "Terraform"]


@pytest.mark.unit
def test_split_skills_drops_long_fragments():
    long_fragment = "x" * 100
    assert split_skills(f"Python, {long_fragment}") == ["Python"]


@pytest.mark.unit
def test_skills_section_one_chunk_per_skill():
    chunks = convert_section(_section(ChunkType.SKILLS, "Python, Java; React"), next_order=3)

    assert [c.text for c in chunks] == ["Python", "Java", "React"]
    assert [c.order for c in chunks] == [3, 4, 5]
    assert all(c.type is ChunkType.SKILLS for c in chunks)
    assert chunks[0].tags == frozenset({"python"})
    assert chunks[1].tags == frozenset({"java"})
    assert chunks[2].tags == frozenset({"react"})


@pytest.mark.unit
def test_skill_phrase_gets_hyphenated_tag():
    chunks = convert_section(
        _section(ChunkType.SKILLS, "Machine Learning, Stakeholder Management"), next_order=1
    )

    assert "machine-learning" in chunks[0].tags
    assert "machine learning" in chunks[0].tags
    assert "stakeholder-management" in chunks[1].tags
    assert "stakeholder management" in chunks[1].tags


@pytest.mark.unit
def test_single_skill_block_stays_whole():
    chunks = convert_section(_section(ChunkType.SKILLS, "Python"), next_order=1)

    assert len(chunks) == 1
    assert chunks[0].text == "Python"
    assert chunks[0].type is ChunkType.SKILLS


# =============================================================================
# EXPERIENCE
# =============================================================================


@pytest.mark.unit
@pytest.mark.parametrize(
    "line",
    [
        "Software Engineer at Acme Corp, 2019-2022",
        "Senior Data Engineer",
        "Worked as analyst at Initech",
        "Jan 2018 - Dec 2019",
    ],
)
def test_is_job_header_line(line):
    assert is_job_header_line(line)


@pytest.mark.unit
@pytest.mark.parametrize(
    "line",
    ["Cut cloud costs by 30%", "Built APIs in Python", "Mentored new hires"],
)
def test_achievement_is_not_job_header(line):
    assert not is_job_header_line(line)


@pytest.mark.unit
def test_classify_experience_line_strips_bullet_glyph():
    assert classify_experience_line("• Built APIs in Python") == (
        ChunkType.EXPERIENCE_BULLET,
        "Built APIs in Python",
    )
    assert classify_experience_line("* Mentored new hires") == (
        ChunkType.EXPERIENCE_BULLET,
        "Mentored new hires",
    )


@pytest.mark.unit
def test_bullet_glyph_wins_over_header_rules():
    """Test that a glyph-led line with role words is still a bullet."""
    chunk_type, text = classify_experience_line("- Managed developers at scale")

    assert chunk_type is ChunkType.EXPERIENCE_BULLET
    assert text == "Managed developers at scale"


@pytest.mark.unit
def test_experience_section_header_and_bullet():
    section = _section(
        ChunkType.EXPERIENCE_SECTION,
        "Software Engineer at Acme Corp, 2019-2022",
        "• Built APIs in Python",
    )
    chunks = convert_section(section, next_order=1)

    assert [(c.type, c.text) for c in chunks] == [
        (ChunkType.EXPERIENCE_SECTION, "Software Engineer at Acme Corp, 2019-2022"),
        (ChunkType.EXPERIENCE_BULLET, "Built APIs in Python"),
    ]
    assert [c.order for c in chunks] == [1, 2]
    assert chunks[1].tags == frozenset({"python"})


@pytest.mark.unit
def test_job_line_with_dash_bullets():
    section = _section(
        ChunkType.EXPERIENCE_SECTION,
        "Senior Engineer at Acme Corp 2019-2022",
        "- Led migration to cloud",
        "- Reduced latency by 40%",
    )
    chunks = convert_section(section, next_order=1)

    assert [(c.type, c.text) for c in chunks] == [
        (ChunkType.EXPERIENCE_SECTION, "Senior Engineer at Acme Corp 2019-2022"),
        (ChunkType.EXPERIENCE_BULLET, "Led migration to cloud"),
        (ChunkType.EXPERIENCE_BULLET, "Reduced latency by 40%"),
    ]
    assert [c.order for c in chunks] == [1, 2, 3]


@pytest.mark.unit
def test_implicit_bullet_gets_action_tags():
    chunks = convert_section(
        _section(ChunkType.EXPERIENCE_SECTION, "Managed a team of four and led hiring"),
        next_order=1,
    )

    assert chunks[0].type is ChunkType.EXPERIENCE_BULLET
    assert chunks[0].tags == frozenset({"management", "leadership"})


@pytest.mark.unit
def test_glyph_only_line_is_skipped():
    chunks = convert_section(
        _section(ChunkType.EXPERIENCE_SECTION, "•", "Cut cloud costs by 30%"), next_order=1
    )
    assert [c.text for c in chunks] == ["Cut cloud costs by 30%"]
    assert chunks[0].order == 1


# =============================================================================
# DISPATCH
# =============================================================================


@pytest.mark.unit
def test_header_and_summary_are_merged():
    header = convert_section(
        _section(ChunkType.HEADER, "Jane Doe", "jane@example.com", "Baltimore, MD"), next_order=1
    )

    assert len(header) == 1
    assert header[0].text == "Jane Doe jane@example.com Baltimore, MD"
    assert header[0].tags == frozenset({"email", "location"})
    assert header[0].provenance is Provenance.RULE_BASED


@pytest.mark.unit
def test_dated_section_is_processed_line_by_line():
    section = _section(
        ChunkType.MISSION_FIT,
        "Volunteer Lead, Code Club, 2018 - 2020",
        "Taught Python to 30 students",
    )
    chunks = convert_section(section, next_order=1)

    assert [c.type for c in chunks] == [ChunkType.EXPERIENCE_SECTION, ChunkType.EXPERIENCE_BULLET]


@pytest.mark.unit
def test_mission_fit_without_dates_is_merged():
    chunks = convert_section(
        _section(ChunkType.MISSION_FIT, "Open data matters to me.", "I volunteer weekly."),
        next_order=1,
    )
    assert [(c.type, c.text) for c in chunks] == [
        (ChunkType.MISSION_FIT, "Open data matters to me. I volunteer weekly.")
    ]


@pytest.mark.unit
def test_cover_letter_paragraph_with_dates_stays_whole():
    chunks = convert_section(
        _section(ChunkType.COVER_LETTER_BODY, "From 2019 - 2022 I led the data platform team."),
        next_order=1,
    )
    assert len(chunks) == 1
    assert chunks[0].type is ChunkType.COVER_LETTER_BODY


@pytest.mark.unit
def test_empty_section_produces_no_chunks():
    assert convert_section(Section(type=ChunkType.SKILLS), next_order=1) == []
    assert convert_section(_section(ChunkType.SUMMARY, "   "), next_order=1) == []


@pytest.mark.unit
def test_convert_sections_numbers_contiguously():
    sections = [
        _section(ChunkType.HEADER, "Jane Doe"),
        Section(type=ChunkType.SUMMARY),
        _section(ChunkType.SKILLS, "Python, SQL, Docker", start=1),
        _section(ChunkType.EXPERIENCE_SECTION, "Data Engineer, 2019 - 2022", "- Built APIs", start=2),
    ]
    chunks = convert_sections(sections)

    assert [c.order for c in chunks] == list(range(1, 7))
    assert [c.type for c in chunks] == [
        ChunkType.HEADER,
        ChunkType.SKILLS,
        ChunkType.SKILLS,
        ChunkType.SKILLS,
        ChunkType.EXPERIENCE_SECTION,
        ChunkType.EXPERIENCE_BULLET,
    ]


@pytest.mark.unit
def test_convert_sections_custom_start_order():
    chunks = convert_sections([_section(ChunkType.SUMMARY, "Hello")], start_order=10)
    assert chunks[0].order == 10
