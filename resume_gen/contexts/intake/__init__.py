"""
Intake Context

Responsibilities:
- Reads JSON Resume files
- Validates documents against the JSON Resume schema
- Reports schema problems as readable "path: message" strings

Owns: Resume input files, schema validation
Never: Renders or formats resume content
"""

from resume_gen.contexts.intake.exceptions import ResumeLoadError, ResumeValidationError
from resume_gen.contexts.intake.loader import SchemaReport, load_resume, validate_resume_data

__all__ = [
    "load_resume",
    "validate_resume_data",
    "SchemaReport",
    "ResumeLoadError",
    "ResumeValidationError",
]
