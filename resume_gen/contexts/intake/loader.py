"""
Load and validate JSON Resume files.

The loaded document is returned as the raw dict: templates read the JSON Resume
keys (camelCase) directly, the schema models are only used for validation.
"""

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List

from resume_gen.contexts.intake.exceptions import ResumeLoadError, ResumeValidationError
from resume_gen.contexts.intake.schema import schema_errors


@dataclass
class SchemaReport:
    """
    Result of validating a resume document.

    Attributes:
        errors: Formatted schema errors ("path: message")
    """

    errors: List[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors


def validate_resume_data(data: Any) -> SchemaReport:
    """
    Validate parsed resume data against the JSON Resume schema.

    Args:
        data: Parsed JSON value

    Returns:
        SchemaReport (never raises for bad data)
    """
    return SchemaReport(errors=schema_errors(data))


def read_resume_json(path: Path) -> Any:
    """
    Read and parse a JSON file without schema validation.

    Raises:
        ResumeLoadError: If the file is missing or not valid JSON
    """
    path = Path(path)
    if not path.is_file():
        raise ResumeLoadError(f"Resume file not found: {path}", path=path)

    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ResumeLoadError(
            f"Invalid JSON in {path} at line {e.lineno}, column {e.colno}: {e.msg}", path=path
        ) from e


def load_resume(path: Path) -> Dict[str, Any]:
    """
    Load a JSON Resume file and validate it.

    Args:
        path: Path to the .json resume

    Returns:
        Parsed resume document

    Raises:
        ResumeLoadError: If the file is missing or not valid JSON
        ResumeValidationError: If the document does not match the schema
    """
    path = Path(path)
    data = read_resume_json(path)

    report = validate_resume_data(data)
    if not report.is_valid:
        raise ResumeValidationError(report.errors, path=path)

    return data
