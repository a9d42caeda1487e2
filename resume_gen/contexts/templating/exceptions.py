"""Custom exceptions for templating context with template references."""

from typing import Optional


class TemplateRenderError(Exception):
    """
    Exception raised when template rendering fails.

    Attributes:
        message: Error description
        template_key: Key of the template being rendered (e.g., 'professional')
        original_error: The original Jinja2 error
    """

    def __init__(
        self,
        message: str,
        template_key: Optional[str] = None,
        original_error: Optional[Exception] = None,
    ):
        self.message = message
        self.template_key = template_key
        self.original_error = original_error

        parts = [message]

        if template_key:
            parts.append(f"Template: {template_key}")

        if original_error:
            parts.append(f"Original error: {original_error}")

        super().__init__("\n".join(parts))


class InvalidResumeDataError(TypeError):
    """
    Exception raised when resume data handed to the HTML generator is not a mapping.

    Absent or empty fields are never an error; this only covers input that is
    not a JSON object at all (a list, a string, None, ...).
    """

    pass
