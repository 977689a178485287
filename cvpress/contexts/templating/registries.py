"""
Templating Registries

Centralized registries for loading and caching HTML templates and the
template catalog.
"""

import os
from pathlib import Path
from typing import Any, Dict, List

from dotenv import load_dotenv
from jinja2 import Environment, FileSystemLoader, StrictUndefined, Template, TemplateNotFound
from omegaconf import OmegaConf

from cvpress.contexts.templating.exceptions import UnknownTemplateError

load_dotenv()
DEFAULT_TEMPLATES_PATH = Path(__file__).parent / "template"
TEMPLATES_PATH = Path(os.getenv("CVPRESS_TEMPLATES_PATH", str(DEFAULT_TEMPLATES_PATH)))

TEMPLATE_FILENAME = "resume.html.jinja"
STYLESHEET_FILENAME = "resume.css"
CATALOG_FILENAME = "catalog.yaml"


class TemplateRegistry:
    """
    Registry for loading and caching Jinja2 templates for HTML generation.

    Templates are stored in {templates_path}/{template_id}/resume.html.jinja,
    next to the stylesheet resume.css that the generator inlines.
    """

    def __init__(self, templates_path: Path = None):
        """
        Initialize the template registry.

        Args:
            templates_path: Base path for template directories. Defaults to
                            CVPRESS_TEMPLATES_PATH from environment
        """
        if templates_path is None:
            templates_path = TEMPLATES_PATH

        self.templates_path = templates_path
        self._cache: Dict[str, Template] = {}

        self.env = Environment(
            loader=FileSystemLoader(str(templates_path)),
            # Catches silent failures
            undefined=StrictUndefined,
            autoescape=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )

    def get_template(self, template_id: str) -> Template:
        """
        Get a template by id, loading and caching it if necessary.

        Args:
            template_id: Catalog template id (e.g., 'v1')

        Returns:
            Jinja2 Template object

        Raises:
            TemplateNotFound: If template file doesn't exist
            TemplateSyntaxError: If template has Jinja2 syntax errors
        """
        if template_id in self._cache:
            return self._cache[template_id]

        template_path = f"{template_id}/{TEMPLATE_FILENAME}"

        try:
            template = self.env.get_template(template_path)
        except TemplateNotFound as e:
            raise TemplateNotFound(
                f"Template not found for '{template_id}' at {self.templates_path / template_path}"
            ) from e

        self._cache[template_id] = template
        return template

    def get_template_path(self, template_id: str) -> Path:
        """Get the file path for a template."""
        return self.templates_path / template_id / TEMPLATE_FILENAME

    def get_stylesheet_path(self, template_id: str) -> Path:
        """Get the file path for a template's stylesheet."""
        return self.templates_path / template_id / STYLESHEET_FILENAME

    def clear_cache(self):
        """Clear the template cache."""
        self._cache.clear()

    def is_cached(self, template_id: str) -> bool:
        """
        Check if a template is in the cache.

        Args:
            template_id: Catalog template id

        Returns:
            True if cached, False otherwise
        """
        return template_id in self._cache


class TemplateCatalog:
    """
    Catalog of available templates and per-language section labels.

    Loaded from {templates_path}/catalog.yaml:

        templates:
          v1:
            name: Standard
            description: ...
        languages:
          en:
            skills: Skills
            ...
    """

    def __init__(self, templates_path: Path = None):
        if templates_path is None:
            templates_path = TEMPLATES_PATH

        self.templates_path = templates_path
        self._catalog: Dict[str, Any] = None

    @property
    def catalog_path(self) -> Path:
        return self.templates_path / CATALOG_FILENAME

    def _load(self) -> Dict[str, Any]:
        """
        Load and cache the catalog.

        Raises:
            FileNotFoundError: If catalog.yaml doesn't exist
        """
        if self._catalog is not None:
            return self._catalog

        if not self.catalog_path.exists():
            raise FileNotFoundError(f"Template catalog not found at {self.catalog_path}")

        config = OmegaConf.load(self.catalog_path)
        self._catalog = OmegaConf.to_container(config, resolve=True)
        return self._catalog

    def list_templates(self) -> Dict[str, Dict[str, str]]:
        """Template id -> {name, description}."""
        return dict(self._load().get("templates", {}))

    def languages(self) -> List[str]:
        """Languages that have a label set."""
        return list(self._load().get("languages", {}))

    def get_labels(self, language: str) -> Dict[str, str]:
        """
        Get section labels for a language.

        Raises:
            UnknownTemplateError: If the language is not in the catalog
        """
        labels = self._load().get("languages", {})
        if language not in labels:
            raise UnknownTemplateError("language", language, list(labels))
        return dict(labels[language])

    def validate(self, template_id: str, language: str) -> None:
        """
        Check a template/language pair against the catalog.

        Raises:
            UnknownTemplateError: If either value is unknown
        """
        templates = self.list_templates()
        if template_id not in templates:
            raise UnknownTemplateError("template", template_id, list(templates))

        self.get_labels(language)
