"""
Session logging for tailorkit runs.

Each run (a segmentation or a retrieval) gets its own log directory holding
one <context>.log file that opens with a provenance block: which tailorkit
version ran, how it was invoked and with which context-specific inputs.

The segmentation and targeting engines only emit records through the
context wrappers in contexts/{context}/logger.py. Sinks are attached here,
by whoever drives the engines (CLI scripts, notebooks, the host app).
"""

import sys
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from loguru import logger

from tailorkit import __version__

load_dotenv()

FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <7} | {message}"
CONSOLE_FORMAT = "{time:HH:mm:ss} | <level>{level: <7}</level> | <level>{message}</level>"

LEVEL_COLORS = {
    "WARNING": "<yellow>",
    "ERROR": "<red>",
    "CRITICAL": "<bold><red>",
}


def setup_logger(
    context_name: str,
    log_dir: Path,
    extra_provenance: Optional[dict] = None,
    level_colors: Optional[dict] = None,
    console: bool = True,
) -> Path:
    """
    Start a logging session for one context.

    Replaces any existing sinks with a DEBUG file sink at
    log_dir/<context_name>.log and, when console is set, an INFO sink on
    stderr. stdout is left alone so `--json` output can be piped.

    Args:
        context_name: Log file stem, "segment" or "target"
        log_dir: Session directory, created if missing
        extra_provenance: Context inputs for the provenance block
            (e.g., {"Document kind": "resume"})
        level_colors: Console color overrides per level
        console: Mirror INFO and above to stderr

    Returns:
        Path to the session log file

    Example:
        log_file = setup_logger(
            "target",
            Path("outs/logs/match_20260301_091500"),
            extra_provenance={"Retrieval mode": "cover-letter"},
        )
    """
    log_dir.mkdir(exist_ok=True, parents=True)
    log_file = log_dir / f"{context_name}.log"

    logger.remove()

    for level_name, color in {**LEVEL_COLORS, **(level_colors or {})}.items():
        logger.level(level_name, color=color)

    logger.add(log_file, format=FILE_FORMAT, level="DEBUG")
    if console:
        logger.add(sys.stderr, format=CONSOLE_FORMAT, level="INFO", colorize=True)

    log_provenance({"Log file": log_file, **(extra_provenance or {})})

    return log_file


def log_provenance(extra_context: Optional[dict] = None) -> None:
    """
    Write the provenance block for the current session.

    Args:
        extra_context: Context inputs appended after the invocation details
    """
    fields = {
        "tailorkit": __version__,
        "Command": " ".join(sys.argv),
        "Working directory": Path.cwd(),
        "Python": sys.version.split()[0],
        **(extra_context or {}),
    }

    logger.info("=" * 80)
    for key, value in fields.items():
        logger.info(f"{key}: {value}")
    logger.info("=" * 80)
