"""Custom exceptions for templating context with template references."""

from pathlib import Path
from typing import Optional


class TemplateRenderError(Exception):
    """
    Exception raised when template rendering fails.

    Attributes:
        message: Error description
        template_id: Catalog id of the template being rendered (e.g., 'v1')
        template_path: Path to the template file
        original_error: The original Jinja2 error
    """

    def __init__(
        self,
        message: str,
        template_id: Optional[str] = None,
        template_path: Optional[Path] = None,
        original_error: Optional[Exception] = None,
    ):
        self.message = message
        self.template_id = template_id
        self.template_path = template_path
        self.original_error = original_error

        parts = [message]

        if template_id and template_path:
            parts.append(f"\nTemplate: {template_path}")
            parts.append(f"Template id: {template_id}")

        if original_error:
            parts.append(f"\nOriginal error: {str(original_error)}")

        super().__init__("\n".join(parts))


class UnknownTemplateError(ValueError):
    """
    Exception raised when a template id or language is not in the catalog.

    Attributes:
        kind: "template" or "language"
        value: The rejected value
        available: Values the catalog does know
    """

    def __init__(self, kind: str, value: str, available: list):
        self.kind = kind
        self.value = value
        self.available = list(available)

        super().__init__(
            f"Unknown {kind} '{value}'. Available: {', '.join(self.available) or '(none)'}"
        )
