#!/usr/bin/env python3
"""
Segment a plain-text resume or cover letter into chunks.

Usage:
    python scripts/segment_document.py resume.txt
    python scripts/segment_document.py letter.txt --cover-letter
    python scripts/segment_document.py resume.txt --json > chunks.json
"""

import json
import os
from datetime import datetime
from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv

from tailorkit.contexts.segmentation import RuleBasedChunkParser, summarize_result
from tailorkit.contexts.segmentation.logger import setup_segmentation_logger

load_dotenv()
LOGS_PATH = Path(os.getenv("LOGS_PATH", "outs/logs"))

app = typer.Typer(help="Segment resume and cover letter text into typed chunks.")


@app.command()
def main(
    text_file: Path = typer.Argument(..., help="Plain-text document to segment"),
    cover_letter: bool = typer.Option(
        False, "--cover-letter", help="Treat the document as a cover letter"
    ),
    as_json: bool = typer.Option(False, "--json", help="Print chunks as JSON on stdout"),
    log_dir: Optional[Path] = typer.Option(
        None, "--log-dir", help="Log directory (default: LOGS_PATH/segment_TIMESTAMP)"
    ),
):
    """Segment a document and display its chunks."""
    if not text_file.exists():
        typer.secho(f"Error: File not found: {text_file}", fg=typer.colors.RED, err=True)
        raise typer.Exit(1)

    document_kind = "cover_letter" if cover_letter else "resume"

    if log_dir is None:
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        log_dir = LOGS_PATH / f"segment_{timestamp}"
    setup_segmentation_logger(log_dir, document_kind=document_kind)

    text = text_file.read_text(encoding="utf-8")
    result = RuleBasedChunkParser(document_kind).parse(text)

    if not result.success:
        typer.secho(summarize_result(result), fg=typer.colors.RED, err=True)
        raise typer.Exit(1)

    if as_json:
        typer.echo(json.dumps([chunk.to_dict() for chunk in result.chunks], indent=2))
        return

    typer.echo(f"Loading {text_file.name} ({document_kind})")
    typer.echo(f"\n=== Chunks ({len(result.chunks)}) ===")
    for chunk in result.chunks:
        preview = chunk.text.replace("\n", " | ")
        if len(preview) > 70:
            preview = preview[:67] + "..."
        tags = ", ".join(sorted(chunk.tags)) or "-"
        typer.echo(f"  {chunk.order:>3}. [{chunk.type.value}] {preview}")
        typer.echo(f"       tags: {tags}")

    if result.metadata:
        typer.echo("\n=== Metadata ===")
        for key, value in result.metadata.items():
            typer.echo(f"  {key}: {value}")

    typer.secho(f"\n✓ {summarize_result(result)}", fg=typer.colors.GREEN)


if __name__ == "__main__":
    app()
