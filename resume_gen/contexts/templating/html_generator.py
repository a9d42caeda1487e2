"""
HTML generation for resumes.

Renders a JSON Resume document into a self-contained HTML document using one of
the three fixed templates. Outside production mode the output is also scanned
for offline compatibility problems, which are logged and never raised.
"""

from collections.abc import Mapping
from typing import Any, Dict, Optional

from jinja2 import TemplateError

from resume_gen.contexts.rendering.offline_validator import validate_offline_compatibility
from resume_gen.contexts.templating.exceptions import InvalidResumeDataError, TemplateRenderError
from resume_gen.contexts.templating.logger import _log_debug, log_offline_findings
from resume_gen.contexts.templating.registries import template_cache
from resume_gen.contexts.templating.template_registry import (
    DEFAULT_TEMPLATE,
    RenderOptions,
    select_template,
)
from resume_gen.utils.environment import is_production


def build_render_context(resume_data: Mapping, options: RenderOptions) -> Dict[str, Any]:
    """
    Merge resume data with render-time flags into a single template context.

    The flags are named ``atsMode`` and ``templateName`` to sit alongside the
    camelCase JSON Resume keys.
    """
    return {
        **resume_data,
        "atsMode": bool(options.ats_mode),
        "templateName": options.template or DEFAULT_TEMPLATE,
    }


def generate_html(resume_data: Mapping, options: Optional[RenderOptions] = None) -> str:
    """
    Render resume data to a complete HTML document.

    Same inputs always produce byte-identical output; the template cache only
    saves compile time.

    Args:
        resume_data: Parsed JSON Resume document (a mapping)
        options: Template selection flags (default: ats-optimized, no ATS mode)

    Returns:
        HTML document string

    Raises:
        InvalidResumeDataError: If resume_data is not a mapping
        TemplateRenderError: If Jinja2 fails while rendering

    Example:
        html = generate_html(
            {"basics": {"name": "Ada Lovelace"}},
            RenderOptions(template="professional"),
        )
    """
    if not isinstance(resume_data, Mapping):
        raise InvalidResumeDataError(
            f"Resume data must be a JSON object, got {type(resume_data).__name__}"
        )

    options = options or RenderOptions()
    key, source = select_template(options)
    template = template_cache.get_template(key, source)

    _log_debug(f"Rendering template '{key}' (requested: '{options.template}', ATS mode: {options.ats_mode})")

    try:
        html = template.render(build_render_context(resume_data, options))
    except TemplateError as e:
        raise TemplateRenderError("Failed to render resume HTML", template_key=key, original_error=e) from e

    if not is_production():
        validation = validate_offline_compatibility(html)
        log_offline_findings(validation.issues, validation.warnings)

    return html
