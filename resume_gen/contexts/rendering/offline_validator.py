"""
Offline compatibility checks for rendered resume HTML.

A resume must display without network access, both as HTML and once printed to
PDF. This module scans the final HTML text and reports:

Blocking issues (make `is_offline_compatible` False):
- <script src="http(s)://...">
- <link rel="stylesheet" href="http(s)://...">
- @import of a remote stylesheet
- CSS url(http(s)://...)
- any other src=/href= pointing at an http(s) URL

Advisory warnings (never affect the flag):
- emoji / pictographic symbol glyphs that not every PDF font can draw
- @font-face declarations
- inline <script> blocks

Each offending URL is reported once, under the most specific label that matches.
"""

import re
import unicodedata
from dataclasses import dataclass, field
from typing import List, Set

from resume_gen.utils.text_processing import truncate_display, unique_in_order

MAX_URL_DISPLAY = 120

_URL = r"(https?://[^\"'\s>)]+)"

SCRIPT_SRC_PATTERN = re.compile(r"<script\b[^>]*?\bsrc\s*=\s*[\"']?" + _URL, re.IGNORECASE)
LINK_TAG_PATTERN = re.compile(r"<link\b[^>]*>", re.IGNORECASE)
STYLESHEET_REL_PATTERN = re.compile(r"\brel\s*=\s*[\"']?[^\"'>]*\bstylesheet\b", re.IGNORECASE)
HREF_PATTERN = re.compile(r"\bhref\s*=\s*[\"']?" + _URL, re.IGNORECASE)
IMPORT_PATTERN = re.compile(r"@import\s+(?:url\(\s*)?[\"']?" + _URL, re.IGNORECASE)
CSS_URL_PATTERN = re.compile(r"\burl\(\s*[\"']?" + _URL, re.IGNORECASE)
ATTRIBUTE_URL_PATTERN = re.compile(r"\b(src|href)\s*=\s*[\"']?" + _URL, re.IGNORECASE)

FONT_FACE_PATTERN = re.compile(r"@font-face\b", re.IGNORECASE)
INLINE_SCRIPT_PATTERN = re.compile(r"<script\b(?![^>]*\bsrc\s*=)[^>]*>", re.IGNORECASE)


@dataclass
class ValidationResult:
    """
    Result of an offline compatibility scan.

    Attributes:
        issues: Blocking problems (remote resources that fail without network)
        warnings: Advisory findings that may affect rendering fidelity
    """

    issues: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    @property
    def is_offline_compatible(self) -> bool:
        """True when no blocking issues were found."""
        return not self.issues


def _describe(label: str, url: str) -> str:
    return f"{label}: {truncate_display(url, MAX_URL_DISPLAY)}"


def _find_issues(html: str) -> List[str]:
    issues = []
    reported: Set[str] = set()

    def report(label: str, url: str) -> None:
        if url not in reported:
            reported.add(url)
            issues.append(_describe(label, url))

    for match in SCRIPT_SRC_PATTERN.finditer(html):
        report("External script", match.group(1))

    for tag in LINK_TAG_PATTERN.findall(html):
        if STYLESHEET_REL_PATTERN.search(tag):
            href = HREF_PATTERN.search(tag)
            if href:
                report("External stylesheet", href.group(1))

    for match in IMPORT_PATTERN.finditer(html):
        report("Remote stylesheet import (@import)", match.group(1))

    for match in CSS_URL_PATTERN.finditer(html):
        report("Remote CSS resource url()", match.group(1))

    for match in ATTRIBUTE_URL_PATTERN.finditer(html):
        report(f"External resource in {match.group(1).lower()}= attribute", match.group(2))

    return issues


def _symbol_glyphs(html: str) -> List[str]:
    """Non-ASCII pictographic symbols (category So), in first-seen order."""
    return unique_in_order(
        char for char in html if ord(char) > 127 and unicodedata.category(char) == "So"
    )


def _find_warnings(html: str) -> List[str]:
    warnings = []

    glyphs = _symbol_glyphs(html)
    if glyphs:
        warnings.append(
            f"Emoji/symbol glyphs may not render in every PDF engine: {' '.join(glyphs)}"
        )

    font_faces = len(FONT_FACE_PATTERN.findall(html))
    if font_faces:
        warnings.append(
            f"{font_faces} @font-face declaration(s) found; web fonts can render differently across engines"
        )

    inline_scripts = len(INLINE_SCRIPT_PATTERN.findall(html))
    if inline_scripts:
        warnings.append(
            f"{inline_scripts} inline <script> block(s) found; scripts are not needed in a static resume"
        )

    return warnings


def validate_offline_compatibility(html: str) -> ValidationResult:
    """
    Scan rendered HTML for content that needs network access or may render inconsistently.

    Args:
        html: Final HTML document text

    Returns:
        ValidationResult with blocking issues and advisory warnings
    """
    return ValidationResult(issues=_find_issues(html), warnings=_find_warnings(html))
