"""
PDF Generation Module

Prints rendered resume HTML to PDF with headless Chromium (Playwright) and
manages output paths.
"""

import os
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

from dotenv import load_dotenv
from omegaconf import DictConfig, OmegaConf
from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import sync_playwright

from resume_gen.contexts.intake import ResumeLoadError, ResumeValidationError, load_resume
from resume_gen.contexts.rendering.logger import _log_debug, _log_error, log_pdf_result, log_pdf_start
from resume_gen.contexts.rendering.offline_validator import (
    ValidationResult,
    validate_offline_compatibility,
)
from resume_gen.contexts.templating import RenderOptions, generate_html
from resume_gen.contexts.templating.exceptions import TemplateRenderError
from resume_gen.contexts.templating.template_registry import DEFAULT_TEMPLATE, select_template_key
from resume_gen.utils.pdf_processing import page_count
from resume_gen.utils.timestamp import now

load_dotenv()

DEFAULT_PDF_SETTINGS_PATH = Path(__file__).parent / "pdf_settings.yaml"
PDF_SETTINGS_PATH = os.getenv("PDF_SETTINGS_PATH")


@dataclass
class PDFOptions:
    """
    Options for a resume -> PDF run.

    Attributes:
        output: Explicit output path (default: next to the input file)
        template: Requested template name
        ats_mode: Use the ultra-ats template with no icons
        timestamp: Append a timestamp to the output file name
        force: Overwrite an existing output file
    """

    output: Optional[Path] = None
    template: str = DEFAULT_TEMPLATE
    ats_mode: bool = False
    timestamp: bool = False
    force: bool = False

    def render_options(self) -> RenderOptions:
        return RenderOptions(ats_mode=self.ats_mode, template=self.template)


@dataclass
class PDFResult:
    """
    Result of PDF generation.

    Attributes:
        success: Whether a PDF was written
        pdf_path: Path to generated PDF (None if failed)
        errors: Human-readable error messages
        page_count: Number of pages in generated PDF (None if not available)
        validation: Offline compatibility findings for the rendered HTML
    """

    success: bool
    pdf_path: Optional[Path] = None
    errors: List[str] = field(default_factory=list)
    page_count: Optional[int] = None
    validation: Optional[ValidationResult] = None


def load_pdf_settings(config_path: Path = None) -> DictConfig:
    """
    Load page and browser settings for PDF printing.

    Args:
        config_path: Optional YAML path (defaults to PDF_SETTINGS_PATH from the
            environment, then the packaged pdf_settings.yaml)

    Returns:
        OmegaConf config with `page` and `browser` sections
    """
    if config_path is None:
        config_path = Path(PDF_SETTINGS_PATH) if PDF_SETTINGS_PATH else DEFAULT_PDF_SETTINGS_PATH

    # User files only need to set the values they change
    defaults = OmegaConf.load(DEFAULT_PDF_SETTINGS_PATH)
    if Path(config_path).resolve() == DEFAULT_PDF_SETTINGS_PATH.resolve():
        return defaults
    return OmegaConf.merge(defaults, OmegaConf.load(config_path))


def resolve_output_path(input_file: Path, options: PDFOptions) -> Path:
    """
    Work out where the PDF should be written.

    Uses `options.output` when given, otherwise `<input stem>.pdf` beside the
    input. With `options.timestamp` the stem gets a `_YYYYMMDD_HHMMSS` suffix.
    The result always ends in `.pdf`.
    """
    input_file = Path(input_file)
    output = Path(options.output) if options.output else input_file.with_suffix(".pdf")

    if output.suffix.lower() != ".pdf":
        output = output.with_name(f"{output.name}.pdf")

    if options.timestamp:
        output = output.with_name(f"{output.stem}_{now()}{output.suffix}")

    return output


def _page_pdf_kwargs(settings: DictConfig) -> Dict[str, Any]:
    page = OmegaConf.to_container(settings.page, resolve=True)
    return {
        "format": page["format"],
        "print_background": page["print_background"],
        "prefer_css_page_size": page["prefer_css_page_size"],
        "margin": page["margin"],
    }


def render_pdf(html: str, pdf_path: Path, settings: DictConfig = None) -> PDFResult:
    """
    Print an HTML document to PDF with headless Chromium.

    Pure rendering function: assumes the output directory exists and overwrite
    checks have been made. Browser failures are returned as errors.

    Args:
        html: Complete HTML document
        pdf_path: Destination PDF path
        settings: Page/browser settings (default: load_pdf_settings())

    Returns:
        PDFResult with success status
    """
    settings = settings if settings is not None else load_pdf_settings()
    pdf_path = Path(pdf_path)

    try:
        with sync_playwright() as p:
            browser = p.chromium.launch()
            try:
                page = browser.new_page()
                page.set_content(
                    html,
                    wait_until=settings.browser.wait_until,
                    timeout=settings.browser.timeout_ms,
                )
                page.pdf(path=str(pdf_path), **_page_pdf_kwargs(settings))
            finally:
                browser.close()
    except PlaywrightError as e:
        return PDFResult(success=False, errors=[f"PDF rendering failed: {e}"])

    if not pdf_path.exists():
        return PDFResult(success=False, errors=["PDF file was not generated"])

    return PDFResult(success=True, pdf_path=pdf_path, page_count=page_count(pdf_path))


def generate_resume_pdf(
    input_file: Path,
    options: Optional[PDFOptions] = None,
    settings: DictConfig = None,
) -> PDFResult:
    """
    Turn a JSON Resume file into a PDF.

    Orchestration function: load and validate the JSON, resolve the output
    path, render HTML, check offline compatibility, print to PDF and log the
    outcome. Expected failures (missing file, schema errors, existing output,
    browser errors) come back as a failed PDFResult.

    Args:
        input_file: Path to the JSON resume
        options: Output and template options
        settings: Page/browser settings (default: load_pdf_settings())

    Returns:
        PDFResult with success status and diagnostic information
    """
    options = options or PDFOptions()
    input_file = Path(input_file)

    try:
        resume_data = load_resume(input_file)
    except ResumeValidationError as e:
        _log_error(f"Schema validation failed for {input_file}")
        return PDFResult(success=False, errors=list(e.errors))
    except ResumeLoadError as e:
        _log_error(e.message)
        return PDFResult(success=False, errors=[e.message])

    pdf_path = resolve_output_path(input_file, options)
    if pdf_path.exists() and not options.force:
        return PDFResult(
            success=False,
            errors=[f"Output file already exists: {pdf_path}. Use --force to overwrite."],
        )

    template_key = select_template_key(options.render_options())
    log_pdf_start(input_file, pdf_path, template_key)
    start_time = time.time()

    try:
        html = generate_html(resume_data, options.render_options())
    except TemplateRenderError as e:
        result = PDFResult(success=False, errors=[str(e)])
        log_pdf_result(result, time.time() - start_time)
        return result

    validation = validate_offline_compatibility(html)

    pdf_path.parent.mkdir(parents=True, exist_ok=True)
    _log_debug(f"Printing {len(html)} characters of HTML to PDF")
    result = render_pdf(html, pdf_path, settings)
    result.validation = validation

    log_pdf_result(result, time.time() - start_time)
    return result
