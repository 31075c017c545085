"""
Segmentation context logger.

Provides logging interface for segmentation context with automatic [segment] prefix.
All segmentation modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path

from loguru import logger

from tailorkit.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[segment]"


def setup_segmentation_logger(log_dir: Path, document_kind: str = "resume") -> Path:
    """
    Setup logger for segmentation context.

    Args:
        log_dir: Directory for this segmentation session
        document_kind: "resume" or "cover_letter", recorded in provenance

    Returns:
        Path to log file
    """
    return _setup_logger(
        context_name="segment",
        log_dir=log_dir,
        extra_provenance={"Document kind": document_kind},
    )


# Wrapper functions with automatic [segment] prefix


def _log_info(message: str) -> None:
    """Log info message with [segment] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [segment] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [segment] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [segment] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [segment] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level segmentation-specific logging helpers


def log_sections(sections) -> None:
    """Log detected sections at debug level, one line each."""
    for section in sections:
        _log_debug(
            f"  {section.type.value}: lines {section.start_line}-{section.end_line} "
            f"({len(section.lines)} content lines)"
        )


def log_segmentation_result(document_kind: str, result) -> None:
    """
    Log segmentation outcome.

    Args:
        document_kind: "resume" or "cover_letter"
        result: SegmentationResult from segment_document() or segment_cover_letter()
    """
    if not result.success:
        _log_warning(f"{document_kind} segmentation failed: {result.error}")
        return

    counts: dict[str, int] = {}
    for chunk in result.chunks:
        counts[chunk.type.value] = counts.get(chunk.type.value, 0) + 1
    breakdown = ", ".join(f"{name}={count}" for name, count in counts.items())
    _log_info(
        f"{document_kind} segmented into {len(result.chunks)} chunks "
        f"from {len(result.sections)} sections ({breakdown})"
    )
