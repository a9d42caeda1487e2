"""Custom exceptions for intake context."""

from pathlib import Path
from typing import List, Optional


class ResumeLoadError(Exception):
    """Raised when a resume file is missing or is not valid JSON."""

    def __init__(self, message: str, path: Optional[Path] = None):
        self.message = message
        self.path = path
        super().__init__(message)


class ResumeValidationError(ValueError):
    """
    Raised when a resume document does not match the JSON Resume schema.

    Attributes:
        path: File the document was loaded from (if any)
        errors: Formatted schema errors ("path: message")
    """

    def __init__(self, errors: List[str], path: Optional[Path] = None):
        self.errors = errors
        self.path = path

        source = f" in {path}" if path else ""
        parts = [f"Resume failed schema validation{source} ({len(errors)} errors)"]
        parts.extend(f"  - {error}" for error in errors)

        super().__init__("\n".join(parts))
