"""
Integration tests for templating context - parse markdown and render real templates.
"""

import shutil
from datetime import date
from pathlib import Path

import pytest

from cvpress.contexts.templating import (
    GenerationResult,
    TemplateCatalog,
    TemplateRegistry,
    generate_html,
    generate_html_from_file,
)
from cvpress.contexts.templating.registries import DEFAULT_TEMPLATES_PATH

FIXTURE_RESUME = Path(__file__).resolve().parents[1] / "fixtures" / "resume_en.md"
FIXTURE_EXPERIENCE = date.today().year - 2018


@pytest.fixture
def md_content():
    return FIXTURE_RESUME.read_text(encoding="utf-8")


@pytest.fixture
def templates_copy(tmp_path):
    """Writable copy of the bundled templates."""
    templates_path = tmp_path / "templates"
    shutil.copytree(DEFAULT_TEMPLATES_PATH, templates_path)
    return templates_path


def _generate(md_content, templates_path, **options):
    return generate_html(
        md_content,
        registry=TemplateRegistry(templates_path),
        catalog=TemplateCatalog(templates_path),
        **options,
    )


@pytest.mark.integration
@pytest.mark.parametrize("template_id", ["v1", "v2"])
def test_generate_fixture_resume(md_content, template_id):
    """Test that every bundled template renders the fixture resume."""
    result = generate_html(md_content, template=template_id)

    assert isinstance(result, GenerationResult)
    assert result.success, result.error
    assert result.error is None

    html = result.html
    assert html.startswith("<!DOCTYPE html>")
    assert "Jane Doe" in html
    assert "Senior Full-Stack Developer" in html
    assert "jane.doe@example.com" in html
    assert "@jane_doe" in html
    assert "Acme Corp" in html
    assert "Globex" in html
    assert "Moscow State University" in html
    assert "Vue, Vuex, Sass" in html


@pytest.mark.integration
def test_achievement_emphasis_is_not_escaped(md_content):
    """Test that <strong> produced by the parser survives autoescaping."""
    result = generate_html(md_content)

    assert result.success, result.error
    assert "Cut CI build time by <strong>40%</strong> with remote caching" in result.html
    assert "&lt;strong&gt;" not in result.html


@pytest.mark.integration
def test_stylesheet_is_inlined(md_content):
    """Test that the stylesheet link is replaced by an inline <style> block."""
    result = generate_html(md_content, template="v1")
    css = (DEFAULT_TEMPLATES_PATH / "v1" / "resume.css").read_text(encoding="utf-8")

    assert result.success, result.error
    assert '<link rel="stylesheet"' not in result.html
    assert "<style>" in result.html
    assert css.strip() in result.html


@pytest.mark.integration
def test_inline_css_disabled_keeps_link(md_content):
    """Test that inline_css=False leaves the stylesheet link in place."""
    result = generate_html(md_content, inline_css=False)

    assert result.success, result.error
    assert '<link rel="stylesheet" href="resume.css">' in result.html
    assert "<style>" not in result.html


@pytest.mark.integration
def test_experience_badge(md_content):
    """Test that v1 shows the years-of-experience badge."""
    result = generate_html(md_content, template="v1", language="en")

    assert result.success, result.error
    assert f"{FIXTURE_EXPERIENCE}+" in result.html
    assert "years of experience" in result.html


@pytest.mark.integration
def test_russian_labels(md_content):
    """Test that the language switches section labels only."""
    result = generate_html(md_content, template="v2", language="ru")

    assert result.success, result.error
    assert '<html lang="ru">' in result.html
    assert "Опыт работы" in result.html
    assert "Образование" in result.html
    assert f"({FIXTURE_EXPERIENCE} лет опыта)" in result.html
    # Content stays as written
    assert "Moscow State University" in result.html


@pytest.mark.integration
def test_empty_markdown_renders():
    """Test that an empty document still renders with defaults."""
    result = generate_html("")

    assert result.success, result.error
    assert 'class="experience-badge"' not in result.html


@pytest.mark.integration
def test_unknown_template(md_content):
    """Test that an unknown template id is reported, not raised."""
    result = generate_html(md_content, template="v9")

    assert not result.success
    assert result.html is None
    assert "Unknown template 'v9'" in result.error


@pytest.mark.integration
def test_unknown_language(md_content):
    """Test that an unknown language is reported, not raised."""
    result = generate_html(md_content, language="fr")

    assert not result.success
    assert "Unknown language 'fr'" in result.error


@pytest.mark.integration
def test_generate_from_file():
    """Test generating straight from a markdown file."""
    result = generate_html_from_file(FIXTURE_RESUME, template="v2")

    assert result.success, result.error
    assert "Jane Doe" in result.html


@pytest.mark.integration
def test_generate_from_missing_file(tmp_path):
    """Test that unreadable files give a failed result."""
    result = generate_html_from_file(tmp_path / "missing.md")

    assert not result.success
    assert result.error.startswith("Failed to read file:")


@pytest.mark.integration
def test_missing_template_file(md_content, templates_copy):
    """Test that a catalog entry without a template file fails cleanly."""
    (templates_copy / "v2" / "resume.html.jinja").unlink()

    result = _generate(md_content, templates_copy, template="v2")

    assert not result.success
    assert "Template not found for 'v2'" in result.error


@pytest.mark.integration
def test_render_error_is_reported(md_content, templates_copy):
    """Test that undefined template variables become a failed result."""
    (templates_copy / "v1" / "resume.html.jinja").write_text(
        "<p>{{ data.nickname }}</p>", encoding="utf-8"
    )

    result = _generate(md_content, templates_copy, template="v1")

    assert not result.success
    assert "Failed to render resume" in result.error
    assert "Template id: v1" in result.error


@pytest.mark.integration
def test_missing_stylesheet_inlines_empty_block(md_content, templates_copy):
    """Test that a missing stylesheet does not fail generation."""
    (templates_copy / "v1" / "resume.css").unlink()

    result = _generate(md_content, templates_copy, template="v1")

    assert result.success, result.error
    assert "<style>\n\n</style>" in result.html


@pytest.mark.integration
def test_stylesheet_backslashes_are_kept(md_content, templates_copy):
    """Test that CSS escapes are inlined verbatim."""
    (templates_copy / "v1" / "resume.css").write_text(
        '.bullet::before { content: "\\2022"; }', encoding="utf-8"
    )

    result = _generate(md_content, templates_copy, template="v1")

    assert result.success, result.error
    assert '.bullet::before { content: "\\2022"; }' in result.html
