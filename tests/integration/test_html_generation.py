"""
Integration tests for HTML generation - template selection, caching, rendering
and offline validation together.
"""

import json
from pathlib import Path

import pytest
from loguru import logger

from resume_gen.contexts.rendering.offline_validator import (
    ValidationResult,
    validate_offline_compatibility,
)
from resume_gen.contexts.templating import RenderOptions, generate_html, html_generator, template_cache
from resume_gen.contexts.templating.exceptions import InvalidResumeDataError
from resume_gen.contexts.templating.template_registry import load_template_source

FIXTURES_PATH = Path(__file__).parent.parent / "fixtures"

ALL_TEMPLATE_OPTIONS = [
    RenderOptions(ats_mode=True),
    RenderOptions(template="ats-optimized"),
    RenderOptions(template="professional"),
]


@pytest.fixture
def full_resume():
    return json.loads((FIXTURES_PATH / "full_resume.json").read_text(encoding="utf-8"))


@pytest.fixture
def log_messages():
    """Collect loguru messages emitted during a test."""
    messages = []
    handler_id = logger.add(messages.append, level="DEBUG", format="{level} {message}")
    yield messages
    logger.remove(handler_id)


@pytest.mark.integration
def test_end_to_end_ats_optimized():
    resume = {
        "basics": {"name": "Ada Lovelace", "email": "ada@example.com"},
        "work": [{"name": "Engine Co", "position": "Analyst", "startDate": "1843-01-01"}],
    }

    html = generate_html(resume, RenderOptions(template="ats-optimized"))

    assert "Ada Lovelace" in html
    assert "ada@example.com" in html
    assert "Analyst" in html
    assert "Engine Co" in html
    assert "January 1843 - Present" in html


@pytest.mark.integration
@pytest.mark.parametrize("options", ALL_TEMPLATE_OPTIONS)
def test_name_only_resume_has_no_sections(options):
    html = generate_html({"basics": {"name": "Grace Hopper"}}, options)

    assert html.startswith("<!DOCTYPE html>")
    assert html.rstrip().endswith("</html>")
    assert "<title>Grace Hopper - Resume</title>" in html
    assert "<h1>Grace Hopper</h1>" in html
    assert "<section" not in html
    for heading in ("Work Experience", "Education", "Projects", "Skills"):
        assert f"<h2>{heading}</h2>" not in html
    # No optional contact lines either
    assert "@" not in html.split("<body>")[1]


@pytest.mark.integration
@pytest.mark.parametrize("options", ALL_TEMPLATE_OPTIONS)
def test_empty_document_renders(options):
    html = generate_html({}, options)

    assert "<title> - Resume</title>" in html
    assert "<header>" not in html
    assert "<section" not in html


@pytest.mark.integration
@pytest.mark.parametrize("options", ALL_TEMPLATE_OPTIONS)
def test_full_resume_sections(full_resume, options):
    html = generate_html(full_resume, options)

    assert "<h2>Work Experience</h2>" in html
    assert "<h2>Education</h2>" in html
    assert "<h2>Skills</h2>" in html

    # Labels are HTML-escaped
    assert "Analyst &amp; Mathematician" in html
    assert "London, England" in html

    assert "January 1843 - Present" in html
    assert "June 1835 - December 1842" in html

    # Highlights keep document order
    assert html.index("Wrote Note G") < html.index("Described loops for Bernoulli numbers")

    assert "Studies in Mathematics" in html
    assert "January 1832 - May 1835" in html
    assert "GPA: 4.0" in html

    assert "Calculus, Number theory" in html


@pytest.mark.integration
def test_projects_omitted_only_in_ultra_ats(full_resume):
    ultra = generate_html(full_resume, RenderOptions(ats_mode=True))
    ats = generate_html(full_resume, RenderOptions())
    pro = generate_html(full_resume, RenderOptions(template="professional"))

    assert "Analytical Engine Notes" not in ultra
    assert "<h2>Projects</h2>" in ats
    assert "<h2>Projects</h2>" in pro
    assert "Notes A to G on the Analytical Engine." in pro
    assert "September 1842 - August 1843" in pro


@pytest.mark.integration
def test_optional_entry_fields_are_omitted():
    resume = {
        "work": [{"name": "Engine Co", "position": "Analyst", "highlights": []}],
        "education": [{"institution": "Home", "studyType": "Studies"}],
        "skills": [{"name": "Writing"}],
    }

    html = generate_html(resume, RenderOptions())

    assert 'class="highlights"' not in html.split("</style>")[1]
    assert "Studies</h3>" in html
    assert " in " not in html.split("<h3>Studies")[1].split("</h3>")[0]
    assert "GPA" not in html
    assert '<span class="keywords"></span>' in html


@pytest.mark.integration
def test_icons_follow_template_and_ats_flag(full_resume):
    ats = generate_html(full_resume, RenderOptions())
    ultra = generate_html(full_resume, RenderOptions(ats_mode=True))

    assert "📧 ada@example.com" in ats
    assert "📧" not in ultra

    # Icons are also suppressed when a normally-iconed template renders in ATS mode
    template = template_cache.get_template("ats-optimized", load_template_source("ats-optimized"))
    html = template.render({**full_resume, "atsMode": True, "templateName": "ats-optimized"})
    assert "📧" not in html
    assert "ada@example.com" in html


@pytest.mark.integration
def test_unrecognized_template_uses_default(full_resume):
    default = generate_html(full_resume, RenderOptions())
    unknown = generate_html(full_resume, RenderOptions(template="fancy"))

    assert unknown == default


@pytest.mark.integration
@pytest.mark.parametrize("options", ALL_TEMPLATE_OPTIONS)
def test_rendering_is_deterministic(full_resume, options):
    first = generate_html(full_resume, options)
    template_cache.clear_cache()
    second = generate_html(full_resume, options)
    third = generate_html(full_resume, options)

    assert first == second == third


@pytest.mark.integration
def test_input_is_not_mutated(full_resume):
    snapshot = json.dumps(full_resume, sort_keys=True)
    generate_html(full_resume, RenderOptions(template="professional"))

    assert json.dumps(full_resume, sort_keys=True) == snapshot
    assert "atsMode" not in full_resume


@pytest.mark.integration
@pytest.mark.parametrize("data", [None, [], "resume", 42])
def test_non_mapping_data_is_rejected(data):
    with pytest.raises(InvalidResumeDataError):
        generate_html(data)


@pytest.mark.integration
@pytest.mark.parametrize("options", ALL_TEMPLATE_OPTIONS)
def test_rendered_templates_are_offline_compatible(full_resume, options):
    result = validate_offline_compatibility(generate_html(full_resume, options))

    assert result.is_offline_compatible
    assert result.issues == []


@pytest.mark.integration
def test_development_mode_logs_offline_findings(monkeypatch, full_resume, log_messages):
    monkeypatch.setenv("RESUME_GEN_ENV", "development")

    generate_html(full_resume, RenderOptions())

    assert any("Offline compatibility warnings" in message for message in log_messages)


@pytest.mark.integration
def test_blocking_issues_are_logged_not_raised(monkeypatch, full_resume, log_messages):
    monkeypatch.setenv("RESUME_GEN_ENV", "production")
    expected = generate_html(full_resume, RenderOptions())

    monkeypatch.setenv("RESUME_GEN_ENV", "development")
    monkeypatch.setattr(
        html_generator,
        "validate_offline_compatibility",
        lambda html: ValidationResult(issues=["External resource in src= attribute: https://example.com/x.png"]),
    )
    html = generate_html(full_resume, RenderOptions())

    assert html == expected
    assert any(
        message.startswith("WARNING") and "Offline compatibility issues detected" in message
        for message in log_messages
    )
    assert any("https://example.com/x.png" in message for message in log_messages)


@pytest.mark.integration
def test_markup_in_resume_text_is_escaped(monkeypatch, log_messages):
    monkeypatch.setenv("RESUME_GEN_ENV", "development")

    html = generate_html({"basics": {"name": '<img src="https://example.com/x.png">'}})

    assert "&lt;img" in html
    assert "<img" not in html
    assert validate_offline_compatibility(html).is_offline_compatible
    assert not any("Offline compatibility issues" in message for message in log_messages)


@pytest.mark.integration
def test_production_mode_skips_validation(monkeypatch, full_resume, log_messages):
    monkeypatch.setenv("RESUME_GEN_ENV", "production")

    html = generate_html(full_resume, RenderOptions())

    assert "📧" in html
    assert not any("Offline compatibility" in message for message in log_messages)
