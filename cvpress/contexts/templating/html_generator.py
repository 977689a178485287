"""
HTML Generation Module

Renders a parsed resume through a catalog template into a single,
self-contained HTML document (stylesheet inlined) for a print-to-PDF step.
"""

import re
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from jinja2 import TemplateError

from cvpress.contexts.parsing import calculate_experience, parse_resume
from cvpress.contexts.templating.exceptions import TemplateRenderError, UnknownTemplateError
from cvpress.contexts.templating.logger import (
    _log_warning,
    log_generation_result,
    log_generation_start,
)
from cvpress.contexts.templating.registries import TemplateCatalog, TemplateRegistry

DEFAULT_TEMPLATE = "v1"
DEFAULT_LANGUAGE = "en"

# <link rel="stylesheet" href="resume.css"> as written in the templates
STYLESHEET_LINK = re.compile(r'<link\s+rel="stylesheet"\s+href="resume\.css"\s*/?>')


@dataclass
class GenerationResult:
    """
    Result of HTML generation.

    Attributes:
        success: Whether rendering succeeded
        html: Rendered document (None if failed)
        error: Error message (None if succeeded)
    """

    success: bool
    html: Optional[str] = None
    error: Optional[str] = None


def inline_stylesheet(html: str, stylesheet_path: Path) -> str:
    """
    Replace the template's stylesheet link with an inline <style> block.

    A missing stylesheet produces an empty block so the document still renders.
    """
    if stylesheet_path.exists():
        css = stylesheet_path.read_text(encoding="utf-8")
    else:
        _log_warning(f"Stylesheet not found, inlining empty styles: {stylesheet_path}")
        css = ""

    # Function replacement so backslashes in CSS are not read as group references
    return STYLESHEET_LINK.sub(lambda _: f"<style>\n{css}\n</style>", html, count=1)


def render_resume_html(
    md_content: str,
    template: str,
    language: str,
    registry: TemplateRegistry,
    catalog: TemplateCatalog,
) -> str:
    """
    Parse markdown and render it with a catalog template.

    Raises:
        UnknownTemplateError: If template or language is not in the catalog
        TemplateNotFound: If the template file is missing
        TemplateRenderError: If Jinja2 fails while rendering
    """
    catalog.validate(template, language)
    labels = catalog.get_labels(language)

    record = parse_resume(md_content)
    experience = calculate_experience(record.jobs)

    jinja_template = registry.get_template(template)

    try:
        return jinja_template.render(
            data=record.to_dict(),
            experience=experience,
            labels=labels,
            language=language,
        )
    except TemplateError as e:
        raise TemplateRenderError(
            "Failed to render resume",
            template_id=template,
            template_path=registry.get_template_path(template),
            original_error=e,
        ) from e


def generate_html(
    md_content: str,
    template: str = DEFAULT_TEMPLATE,
    language: str = DEFAULT_LANGUAGE,
    inline_css: bool = True,
    registry: Optional[TemplateRegistry] = None,
    catalog: Optional[TemplateCatalog] = None,
) -> GenerationResult:
    """
    Generate HTML from markdown resume content.

    Never raises for template or rendering problems; they are reported in the
    returned GenerationResult.

    Args:
        md_content: Markdown resume text
        template: Catalog template id (default: v1)
        language: Label language (default: en)
        inline_css: Replace the stylesheet link with the stylesheet contents
        registry: Template registry (default: registry over CVPRESS_TEMPLATES_PATH)
        catalog: Template catalog (default: catalog over CVPRESS_TEMPLATES_PATH)

    Returns:
        GenerationResult with html on success, error message on failure
    """
    registry = registry or TemplateRegistry()
    catalog = catalog or TemplateCatalog(registry.templates_path)

    log_generation_start(template, language, len(md_content))
    start_time = time.time()

    try:
        html = render_resume_html(md_content, template, language, registry, catalog)
        if inline_css:
            html = inline_stylesheet(html, registry.get_stylesheet_path(template))
        result = GenerationResult(success=True, html=html)
    except (UnknownTemplateError, TemplateError, TemplateRenderError, OSError) as e:
        result = GenerationResult(success=False, error=str(e))

    log_generation_result(template, result, time.time() - start_time)
    return result


def generate_html_from_file(md_file_path: Path, **options) -> GenerationResult:
    """
    Generate HTML from a markdown resume file.

    Args:
        md_file_path: Path to the markdown file
        **options: Passed through to generate_html()

    Returns:
        GenerationResult; unreadable files give success=False
    """
    try:
        md_content = Path(md_file_path).read_text(encoding="utf-8")
    except OSError as e:
        return GenerationResult(success=False, error=f"Failed to read file: {e}")

    return generate_html(md_content, **options)
