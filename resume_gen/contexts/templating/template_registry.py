"""
Template Registry

The three fixed HTML resume templates and the rules for choosing between them.

Templates live in resume_gen/contexts/templating/templates/{key}.html.jinja and are
complete standalone HTML documents with inline CSS (no external stylesheets,
fonts or scripts):
- ultra-ats: minimal styling, no icons, no projects section
- ats-optimized: default; borders, colour accents and contact icons
- professional: richer styling, same sections and rules as ats-optimized
"""

from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Tuple

TEMPLATES_PATH = Path(__file__).parent / "templates"

ULTRA_ATS = "ultra-ats"
ATS_OPTIMIZED = "ats-optimized"
PROFESSIONAL = "professional"

TEMPLATE_KEYS = (ULTRA_ATS, ATS_OPTIMIZED, PROFESSIONAL)
DEFAULT_TEMPLATE = ATS_OPTIMIZED


@dataclass(frozen=True)
class RenderOptions:
    """
    Per-call rendering options.

    Attributes:
        ats_mode: Force the ultra-ats template and suppress contact icons
        template: Requested template name; unknown names fall back to the default
    """

    ats_mode: bool = False
    template: str = DEFAULT_TEMPLATE


def get_template_path(key: str) -> Path:
    """
    Get the file path for a template key.

    Args:
        key: Template key (e.g., 'professional')

    Returns:
        Path to template file
    """
    return TEMPLATES_PATH / f"{key}.html.jinja"


@lru_cache(maxsize=None)
def load_template_source(key: str) -> str:
    """
    Read the source of one of the fixed templates.

    Args:
        key: One of TEMPLATE_KEYS

    Returns:
        Template source text

    Raises:
        ValueError: If key is not a known template key
    """
    if key not in TEMPLATE_KEYS:
        raise ValueError(f"Unknown template key '{key}'. Expected one of: {', '.join(TEMPLATE_KEYS)}")
    return get_template_path(key).read_text(encoding="utf-8")


def select_template_key(options: RenderOptions) -> str:
    """
    Choose the template key for a render call.

    ATS mode wins over everything, then an explicit 'professional' request,
    then the default. Unrecognised template names are not an error.
    """
    if options.ats_mode:
        return ULTRA_ATS
    if options.template == PROFESSIONAL:
        return PROFESSIONAL
    return DEFAULT_TEMPLATE


def select_template(options: RenderOptions) -> Tuple[str, str]:
    """Return ``(key, source)`` of the template selected by `options`."""
    key = select_template_key(options)
    return key, load_template_source(key)
