"""
Templating Context

Responsibilities:
- Keeps the catalog of HTML resume templates and their per-language labels
- Loads Jinja2 templates (cvpress/contexts/templating/template/)
- Populates templates with parsed resume data and inlines their stylesheets

Owns: HTML template system, template catalog
Never: Interprets markdown (delegates to the parsing context) or writes files
"""

from cvpress.contexts.templating.exceptions import TemplateRenderError, UnknownTemplateError
from cvpress.contexts.templating.html_generator import (
    GenerationResult,
    generate_html,
    generate_html_from_file,
)
from cvpress.contexts.templating.registries import TemplateCatalog, TemplateRegistry

__all__ = [
    # Generation
    "generate_html",
    "generate_html_from_file",
    "GenerationResult",
    # Registries
    "TemplateRegistry",
    "TemplateCatalog",
    # Errors
    "TemplateRenderError",
    "UnknownTemplateError",
]
