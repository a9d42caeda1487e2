"""
Integration tests for PDF generation - launches headless Chromium via Playwright.
"""

import shutil
from pathlib import Path

import pytest
from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import sync_playwright

from resume_gen.contexts.rendering.pdf_generator import PDFOptions, generate_resume_pdf, render_pdf

FIXTURES_PATH = Path(__file__).parent.parent / "fixtures"


def _chromium_available() -> bool:
    try:
        with sync_playwright() as p:
            return Path(p.chromium.executable_path).exists()
    except PlaywrightError:
        return False


skip_if_no_chromium = pytest.mark.skipif(
    not _chromium_available(),
    reason="Chromium not installed - run `playwright install chromium`",
)


@pytest.fixture
def resume_copy(tmp_path):
    target = tmp_path / "resume.json"
    shutil.copy2(FIXTURES_PATH / "full_resume.json", target)
    return target


@pytest.mark.integration
@pytest.mark.pdf
@skip_if_no_chromium
@pytest.mark.parametrize(
    "options",
    [
        PDFOptions(),
        PDFOptions(template="professional"),
        PDFOptions(ats_mode=True),
    ],
)
def test_generate_resume_pdf(resume_copy, options):
    result = generate_resume_pdf(resume_copy, options)

    assert result.success, f"PDF generation failed with errors: {result.errors}"
    assert result.pdf_path == resume_copy.with_suffix(".pdf")
    assert result.pdf_path.read_bytes().startswith(b"%PDF")
    assert result.page_count is not None and result.page_count >= 1
    assert result.validation.is_offline_compatible


@pytest.mark.integration
@pytest.mark.pdf
@skip_if_no_chromium
def test_force_overwrites_existing_pdf(resume_copy):
    existing = resume_copy.with_suffix(".pdf")
    existing.write_bytes(b"old")

    result = generate_resume_pdf(resume_copy, PDFOptions(force=True))

    assert result.success, f"PDF generation failed with errors: {result.errors}"
    assert existing.read_bytes().startswith(b"%PDF")


@pytest.mark.integration
@pytest.mark.pdf
@skip_if_no_chromium
def test_explicit_output_directory_is_created(resume_copy, tmp_path):
    output = tmp_path / "nested" / "out" / "ada"

    result = generate_resume_pdf(resume_copy, PDFOptions(output=output))

    assert result.success, f"PDF generation failed with errors: {result.errors}"
    assert result.pdf_path == output.with_name("ada.pdf")
    assert result.pdf_path.exists()


@pytest.mark.integration
@pytest.mark.pdf
@skip_if_no_chromium
def test_render_pdf_from_html_string(tmp_path):
    pdf_path = tmp_path / "plain.pdf"

    result = render_pdf("<!DOCTYPE html><html><body><h1>Plain</h1></body></html>", pdf_path)

    assert result.success
    assert result.page_count == 1
