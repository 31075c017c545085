"""Unit tests for the job keyword/skill view."""

from pathlib import Path

import pytest

from tailorkit.contexts.targeting.job_profile import JobDescriptionView, normalize_terms

FIXTURES_PATH = Path(__file__).parent.parent / "fixtures"


@pytest.mark.unit
def test_normalize_terms():
    assert normalize_terms([" Python", "python", "", None, "SQL "]) == ("python", "sql")
    assert normalize_terms(None) == ()


@pytest.mark.unit
def test_view_normalizes_terms():
    view = JobDescriptionView(keywords=["AWS", "aws"], required_skills=["Python"])

    assert view.keywords == ("aws",)
    assert view.required_skills == ("python",)
    assert view.has_terms()
    assert not JobDescriptionView().has_terms()


@pytest.mark.unit
def test_all_skills_required_first_without_duplicates():
    view = JobDescriptionView(required_skills=["Python", "SQL"], preferred_skills=["sql", "Kafka"])
    assert view.all_skills == ("python", "sql", "kafka")


@pytest.mark.unit
def test_from_application_record():
    view = JobDescriptionView.from_dict(
        {
            "id": "job-1",
            "title": "Data Engineer",
            "company": "Initech",
            "keywords": ["ETL"],
            "extractedInfo": {"requiredSkills": ["Python"], "preferredSkills": None},
            "rawText": "We need ETL help.",
        }
    )

    assert view.job_id == "job-1"
    assert view.keywords == ("etl",)
    assert view.required_skills == ("python",)
    assert view.preferred_skills == ()
    assert view.raw_text == "We need ETL help."


@pytest.mark.unit
def test_from_snake_case_mapping():
    view = JobDescriptionView.from_dict(
        {"required_skills": ["Go"], "preferred_skills": ["Rust"], "raw_text": "Systems role"}
    )

    assert view.required_skills == ("go",)
    assert view.preferred_skills == ("rust",)
    assert view.raw_text == "Systems role"


@pytest.mark.unit
def test_from_empty_record():
    view = JobDescriptionView.from_dict(None)

    assert view.keywords == ()
    assert view.raw_text == ""
    assert not view.has_terms()


@pytest.mark.unit
def test_from_yaml():
    path = FIXTURES_PATH / "sample_job.yaml"
    view = JobDescriptionView.from_yaml(path)

    assert view.title == "Senior Data Engineer"
    assert view.keywords == ("airflow", "aws", "pipelines")
    assert view.required_skills == ("python", "sql")
    assert view.preferred_skills == ("kafka", "kubernetes")
    assert view.raw_text.startswith("Acme Corp is hiring")
    assert view.metadata["source_path"] == str(path)
