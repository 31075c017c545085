"""
Integration test for the segment_document command-line script.

Tests: the script segments a fixture file, prints its summary, and the
session log records the segmentation outcome exactly once.
"""

import importlib.util
from pathlib import Path

import pytest
from loguru import logger
from typer.testing import CliRunner

PROJECT_ROOT = Path(__file__).parent.parent.parent
FIXTURES_PATH = PROJECT_ROOT / "tests" / "fixtures"

runner = CliRunner()


def _load_script(name):
    spec = importlib.util.spec_from_file_location(name, PROJECT_ROOT / "scripts" / f"{name}.py")
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


@pytest.mark.integration
def test_segment_document_logs_outcome_once(tmp_path):
    script = _load_script("segment_document")
    log_dir = tmp_path / "logs"

    result = runner.invoke(
        script.app, [str(FIXTURES_PATH / "sample_resume.txt"), "--log-dir", str(log_dir)]
    )
    logger.remove()

    assert result.exit_code == 0
    assert "Parsed 12 chunks" in result.stdout

    content = (log_dir / "segment.log").read_text()
    assert content.count("resume segmented into 12 chunks") == 1
