"""PDF inspection helpers for generated resumes."""

from pathlib import Path
from typing import Optional

from PyPDF2 import PdfReader
from PyPDF2.errors import PdfReadError


def page_count(pdf_path: Path) -> Optional[int]:
    """Get page count from PDF, or None if missing or unreadable."""
    if not pdf_path.exists():
        return None
    try:
        reader = PdfReader(str(pdf_path))
        return len(reader.pages)
    except (PdfReadError, OSError):
        return None
