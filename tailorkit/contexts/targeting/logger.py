"""
Targeting context logger.

Provides logging interface for targeting context with automatic [target] prefix.
All targeting modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path

from loguru import logger

from tailorkit.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[target]"


def setup_targeting_logger(log_dir: Path, mode: str = "all") -> Path:
    """
    Setup logger for targeting context.

    Args:
        log_dir: Directory for this matching session
        mode: Retrieval mode ("all", "resume" or "cover-letter"), recorded in provenance

    Returns:
        Path to log file
    """
    return _setup_logger(
        context_name="target",
        log_dir=log_dir,
        extra_provenance={"Retrieval mode": mode},
    )


# Wrapper functions with automatic [target] prefix


def _log_info(message: str) -> None:
    """Log info message with [target] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [target] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [target] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level targeting-specific logging helpers


def log_match_summary(view_name: str, pool_size: int, matches) -> None:
    """
    Log how many chunks survived scoring and the best score.

    Args:
        view_name: Retrieval view ("all", "resume", "cover-letter")
        pool_size: Number of chunks scored
        matches: Ranked ChunkMatch list returned to the caller
    """
    if not matches:
        _log_info(f"{view_name}: no relevant chunks among {pool_size}")
        return
    _log_info(
        f"{view_name}: {len(matches)} of {pool_size} chunks selected "
        f"(top score {matches[0].score:.3f})"
    )
