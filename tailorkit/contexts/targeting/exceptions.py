"""Custom exceptions for the targeting context."""

from pathlib import Path
from typing import Optional


class ScoringConfigError(ValueError):
    """
    Exception raised when a scoring weights file is invalid.

    Attributes:
        message: Error description
        config_path: Path to the offending config file, when loaded from disk
    """

    def __init__(self, message: str, config_path: Optional[Path] = None):
        self.message = message
        self.config_path = config_path

        parts = [message]
        if config_path is not None:
            parts.append(f"Config file: {config_path}")

        super().__init__("\n".join(parts))
