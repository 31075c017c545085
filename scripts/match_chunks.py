#!/usr/bin/env python3
"""
Rank stored chunks against a job posting.

The chunk pool is a JSON array of chunk records (as written by
segment_document.py --json, optionally with id/sourceDocId fields).

Usage:
    python scripts/match_chunks.py job.yaml chunks.json
    python scripts/match_chunks.py job.yaml chunks.json --mode resume --max-results 10
    python scripts/match_chunks.py job.yaml chunks.json --weights experiments/weights.yaml
"""

import json
import os
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv

from tailorkit.contexts.segmentation import Chunk
from tailorkit.contexts.targeting import (
    JobDescriptionView,
    ScoringConfigError,
    find_relevant_chunks,
    find_relevant_cover_letter_chunks,
    find_relevant_resume_chunks,
    load_scoring_weights,
)
from tailorkit.contexts.targeting.logger import setup_targeting_logger

load_dotenv()
LOGS_PATH = Path(os.getenv("LOGS_PATH", "outs/logs"))

app = typer.Typer(help="Rank stored chunks by relevance to a job posting.")


class RetrievalMode(str, Enum):
    ALL = "all"
    RESUME = "resume"
    COVER_LETTER = "cover-letter"


RETRIEVAL_VIEWS = {
    RetrievalMode.ALL: (find_relevant_chunks, 20),
    RetrievalMode.RESUME: (find_relevant_resume_chunks, 15),
    RetrievalMode.COVER_LETTER: (find_relevant_cover_letter_chunks, 15),
}


def load_chunk_pool(pool_file: Path) -> list[Chunk]:
    """
    Load chunk records from a JSON file.

    Raises:
        ValueError: If the file is not a JSON array or a record has an unknown type
    """
    records = json.loads(pool_file.read_text(encoding="utf-8"))
    if not isinstance(records, list):
        raise ValueError("Chunk pool must be a JSON array of chunk records")
    return [Chunk.from_dict(record) for record in records]


@app.command()
def main(
    job_file: Path = typer.Argument(..., help="Job YAML (keywords, required/preferred skills)"),
    pool_file: Path = typer.Argument(..., help="JSON array of chunk records"),
    mode: RetrievalMode = typer.Option(RetrievalMode.ALL, "--mode", help="Retrieval view"),
    min_score: float = typer.Option(0.1, "--min-score", help="Minimum relevance score"),
    max_results: Optional[int] = typer.Option(
        None, "--max-results", help="Maximum matches (default: 20 for all, 15 otherwise)"
    ),
    weights_file: Optional[Path] = typer.Option(
        None, "--weights", help="Scoring weights YAML (default: SCORING_WEIGHTS_PATH)"
    ),
    as_json: bool = typer.Option(False, "--json", help="Print matches as JSON on stdout"),
):
    """Score a chunk pool against a job and display the ranked matches."""
    for path in (job_file, pool_file):
        if not path.exists():
            typer.secho(f"Error: File not found: {path}", fg=typer.colors.RED, err=True)
            raise typer.Exit(1)

    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    setup_targeting_logger(LOGS_PATH / f"target_{timestamp}", mode=mode.value)

    try:
        weights = load_scoring_weights(weights_file)
        job = JobDescriptionView.from_yaml(job_file)
        pool = load_chunk_pool(pool_file)
    except ScoringConfigError as e:
        typer.secho(f"Error: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(1)
    except (ValueError, KeyError) as e:
        typer.secho(f"Error: Invalid input: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(1)

    find_matches, default_max = RETRIEVAL_VIEWS[mode]
    matches = find_matches(
        job,
        pool,
        min_score=min_score,
        max_results=max_results if max_results is not None else default_max,
        weights=weights,
    )

    if as_json:
        typer.echo(json.dumps([match.to_dict() for match in matches], indent=2))
        return

    title = job.title or job_file.stem
    typer.echo(f"Job: {title}" + (f" @ {job.company}" if job.company else ""))
    typer.echo(f"Pool: {len(pool)} chunks, mode: {mode.value}")

    if not matches:
        typer.secho("\nNo relevant chunks found", fg=typer.colors.YELLOW)
        return

    typer.echo(f"\n=== Matches ({len(matches)}) ===")
    for rank, match in enumerate(matches, 1):
        preview = match.chunk.text.replace("\n", " | ")
        if len(preview) > 60:
            preview = preview[:57] + "..."
        typer.echo(f"  {rank:>3}. {match.score:.3f} [{match.chunk.type.value}] {preview}")
        matched = sorted(set(match.matched_keywords) | set(match.skill_matches))
        if matched:
            typer.echo(f"       matched: {', '.join(matched)}")


if __name__ == "__main__":
    app()
