"""
Templating Context

Responsibilities:
- Owns the three fixed HTML resume templates and the rules for choosing one
- Compiles and caches templates for the lifetime of the process
- Provides template helpers (dates, list joining, contact icons)
- Renders resume data into a self-contained HTML document

Owns: Template sources, template cache, resume -> HTML rendering
Never: Writes files or talks to the PDF engine
"""

from resume_gen.contexts.templating.helpers import contact_icon, format_date, join
from resume_gen.contexts.templating.html_generator import generate_html
from resume_gen.contexts.templating.registries import TemplateCache, template_cache
from resume_gen.contexts.templating.template_registry import (
    TEMPLATE_KEYS,
    RenderOptions,
    select_template,
)

__all__ = [
    # Rendering
    "generate_html",
    "RenderOptions",
    # Template selection and caching
    "select_template",
    "TEMPLATE_KEYS",
    "TemplateCache",
    "template_cache",
    # Helpers
    "format_date",
    "join",
    "contact_icon",
]
