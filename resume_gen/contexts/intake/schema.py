"""
JSON Resume schema models.

Pydantic models for the parts of the JSON Resume standard that the templates
read. Every field is optional and unknown keys are kept, so any document that
follows the standard validates; only values of the wrong shape are rejected
(malformed dates, e-mail addresses, non-list highlights, ...).
"""

from typing import Any, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError

# YYYY, YYYY-MM or YYYY-MM-DD (same pattern as the JSON Resume schema)
ISO8601_DATE = r"^([1-2][0-9]{3}-[0-1][0-9]-[0-3][0-9]|[1-2][0-9]{3}-[0-1][0-9]|[1-2][0-9]{3})$"
EMAIL = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"


class ResumeModel(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)


class Location(ResumeModel):
    address: Optional[str] = None
    postal_code: Optional[str] = Field(None, alias="postalCode")
    city: Optional[str] = None
    country_code: Optional[str] = Field(None, alias="countryCode")
    region: Optional[str] = None


class Basics(ResumeModel):
    name: Optional[str] = None
    label: Optional[str] = None
    email: Optional[str] = Field(None, pattern=EMAIL)
    phone: Optional[str] = None
    url: Optional[str] = None
    summary: Optional[str] = None
    location: Optional[Location] = None


class WorkEntry(ResumeModel):
    name: Optional[str] = None
    position: Optional[str] = None
    url: Optional[str] = None
    location: Optional[str] = None
    start_date: Optional[str] = Field(None, alias="startDate", pattern=ISO8601_DATE)
    end_date: Optional[str] = Field(None, alias="endDate", pattern=ISO8601_DATE)
    summary: Optional[str] = None
    highlights: Optional[List[str]] = None


class EducationEntry(ResumeModel):
    institution: Optional[str] = None
    url: Optional[str] = None
    area: Optional[str] = None
    study_type: Optional[str] = Field(None, alias="studyType")
    start_date: Optional[str] = Field(None, alias="startDate", pattern=ISO8601_DATE)
    end_date: Optional[str] = Field(None, alias="endDate", pattern=ISO8601_DATE)
    gpa: Optional[Union[str, float]] = None


class ProjectEntry(ResumeModel):
    name: Optional[str] = None
    description: Optional[str] = None
    url: Optional[str] = None
    start_date: Optional[str] = Field(None, alias="startDate", pattern=ISO8601_DATE)
    end_date: Optional[str] = Field(None, alias="endDate", pattern=ISO8601_DATE)
    highlights: Optional[List[str]] = None


class SkillEntry(ResumeModel):
    name: Optional[str] = None
    level: Optional[str] = None
    keywords: Optional[List[str]] = None


class ResumeSchema(ResumeModel):
    """Top-level JSON Resume document."""

    basics: Optional[Basics] = None
    work: Optional[List[WorkEntry]] = None
    education: Optional[List[EducationEntry]] = None
    projects: Optional[List[ProjectEntry]] = None
    skills: Optional[List[SkillEntry]] = None


def format_error_path(loc: tuple) -> str:
    """
    Render a pydantic error location as a readable path.

    Example:
        >>> format_error_path(("work", 0, "startDate"))
        'work[0].startDate'
    """
    path = ""
    for part in loc:
        if isinstance(part, int):
            path += f"[{part}]"
        else:
            path += f".{part}" if path else str(part)
    return path or "(root)"


def _format_error(error: dict) -> str:
    if error["type"] == "string_pattern_mismatch":
        message = f"invalid value {error['input']!r}"
    else:
        message = error["msg"]
    return f"{format_error_path(error['loc'])}: {message}"


def schema_errors(data: Any) -> List[str]:
    """
    Validate `data` against the resume schema.

    Returns:
        Formatted error strings ("path: message"), empty when valid
    """
    try:
        ResumeSchema.model_validate(data)
    except ValidationError as e:
        return [_format_error(error) for error in e.errors()]
    return []
