"""
Templating Registries

Compiles and caches the HTML resume templates for the lifetime of the process.
"""

import threading
from typing import Dict

from jinja2 import ChainableUndefined, Environment, Template, select_autoescape

from resume_gen.contexts.templating.helpers import install_helpers


def create_environment() -> Environment:
    """
    Build the Jinja2 environment used for every resume template.

    Absent resume fields (e.g. ``basics.location.city`` with no ``basics``)
    render as empty and test falsy instead of raising.
    """
    env = Environment(
        autoescape=select_autoescape(default_for_string=True, default=True),
        undefined=ChainableUndefined,
        lstrip_blocks=True,
        keep_trailing_newline=True,
    )
    return install_helpers(env)


class TemplateCache:
    """
    Cache of compiled resume templates keyed by template key.

    The key space is the three fixed templates ('ultra-ats', 'ats-optimized',
    'professional'), so entries are never evicted. The source passed to
    `get_template` is only read on a cache miss.
    """

    def __init__(self, env: Environment = None):
        """
        Initialize the template cache.

        Args:
            env: Jinja2 environment to compile with. Defaults to `create_environment()`
        """
        self.env = env if env is not None else create_environment()
        self._cache: Dict[str, Template] = {}
        self._lock = threading.Lock()

    def get_template(self, key: str, source: str) -> Template:
        """
        Get a compiled template by key, compiling `source` on first use.

        Args:
            key: Template key (e.g., 'professional')
            source: Template source, consulted only when `key` is not cached

        Returns:
            Jinja2 Template object

        Raises:
            TemplateSyntaxError: If source has Jinja2 syntax errors
        """
        template = self._cache.get(key)
        if template is not None:
            return template

        with self._lock:
            # Another thread may have compiled it while we waited
            if key not in self._cache:
                self._cache[key] = self.env.from_string(source)
            return self._cache[key]

    def clear_cache(self):
        """Clear the template cache."""
        with self._lock:
            self._cache.clear()

    def is_cached(self, key: str) -> bool:
        """
        Check if a template is in the cache.

        Args:
            key: Template key

        Returns:
            True if cached, False otherwise
        """
        return key in self._cache


# Process-wide cache shared by the HTML generator
template_cache = TemplateCache()
