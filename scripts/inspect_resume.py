#!/usr/bin/env python3
"""
Markdown Resume Inspection CLI

Parses a markdown resume and shows what the parser extracted, or renders it
through an HTML template. Output goes to stdout; nothing is written to disk
unless --log is given.

Commands:
    parse     - Show the extracted resume structure
    html      - Render the resume with a catalog template
    templates - List available templates and languages

Examples:\n

    inspect_resume.py parse cv.md                       # Human-readable summary

    inspect_resume.py parse cv.md --json                # Full record as JSON

    inspect_resume.py html cv.md -t v2 -l ru > cv.html  # Render Classic, Russian labels

    inspect_resume.py templates                         # List templates
"""

import json
import os
from datetime import datetime
from pathlib import Path

import typer
from dotenv import load_dotenv
from typing_extensions import Annotated

from cvpress.contexts.parsing import calculate_experience, parse_resume_file
from cvpress.contexts.templating import TemplateCatalog, generate_html_from_file
from cvpress.contexts.templating.logger import setup_templating_logger

load_dotenv()
LOGS_PATH = Path(os.getenv("LOGS_PATH", "outs/logs"))


app = typer.Typer(
    help="Inspect markdown resume parsing and HTML rendering",
    add_completion=False,
    invoke_without_command=True,
)


@app.callback()
def main(ctx: typer.Context):
    """Show help by default when no command is provided."""
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


@app.command("parse")
def parse_command(
    resume_file: Annotated[
        Path,
        typer.Argument(help="Path to the markdown resume", exists=True, dir_okay=False),
    ],
    as_json: Annotated[
        bool,
        typer.Option("--json", help="Print the full record as JSON"),
    ] = False,
):
    """
    Parse a markdown resume and display the extracted structure.

    Examples:\n

        $ inspect_resume.py parse cv.md

        $ inspect_resume.py parse cv.md --json
    """
    record = parse_resume_file(resume_file)
    experience = calculate_experience(record.jobs)

    if as_json:
        payload = {**record.to_dict(), "experience": experience}
        typer.echo(json.dumps(payload, indent=2, ensure_ascii=False))
        raise typer.Exit()

    typer.echo("\n=== Header ===")
    typer.echo(f"  name: {record.name}")
    typer.echo(f"  title: {record.title}")
    typer.echo(f"  email: {record.email}")
    typer.echo(f"  telegram: {record.telegram}")

    typer.echo("\n=== Skills ===")
    typer.echo(f"  frontend: {record.skills.frontend}")
    typer.echo(f"  backend: {record.skills.backend}")

    typer.echo(f"\n=== Jobs ({len(record.jobs)}) ===")
    for job in record.jobs:
        duration = f" | {job.duration}" if job.duration else ""
        typer.echo(f"  {job.title} @ {job.company or '?'} ({job.period}{duration})")
        typer.echo(f"    achievements: {len(job.achievements)}")
        typer.echo(f"    technologies: {job.technologies}")

    typer.echo("\n=== Education ===")
    typer.echo(f"  period: {record.education.period}")
    typer.echo(f"  university: {record.education.university}")
    typer.echo(f"  faculty: {record.education.faculty}")

    typer.echo("\n=== Languages ===")
    typer.echo(f"  english: {record.languages.english}")
    typer.echo(f"  russian: {record.languages.russian}")

    typer.echo(f"\nYears of experience: {experience}")

    warnings = []
    if not record.name:
        warnings.append("No '# Name' heading found")
    if not record.jobs:
        warnings.append("No '#### Job' headings found")
    for job in record.jobs:
        if not job.period:
            warnings.append(f"Job header did not match 'Title (Period) - Company': {job.title}")

    if warnings:
        typer.echo("\n=== Warnings ===")
        for w in warnings:
            typer.echo(f"  ! {w}")


@app.command("html")
def html_command(
    resume_file: Annotated[
        Path,
        typer.Argument(help="Path to the markdown resume"),
    ],
    template: Annotated[
        str,
        typer.Option("--template", "-t", help="Catalog template id"),
    ] = "v1",
    language: Annotated[
        str,
        typer.Option("--language", "-l", help="Label language (en, ru)"),
    ] = "en",
    no_inline_css: Annotated[
        bool,
        typer.Option("--no-inline-css", help="Keep the <link> to resume.css instead of inlining"),
    ] = False,
    log: Annotated[
        bool,
        typer.Option("--log", help="Write a session log under LOGS_PATH"),
    ] = False,
):
    """
    Render a markdown resume to HTML and print it.

    Examples:\n

        $ inspect_resume.py html cv.md > cv.html

        $ inspect_resume.py html cv.md --template v2 --language ru
    """
    if log:
        log_dir = LOGS_PATH / f"html_{datetime.now().strftime('%Y%m%d_%H%M%S')}"
        log_file = setup_templating_logger(log_dir, template_id=template, language=language)
        typer.secho(f"Log: {log_file}", fg=typer.colors.BLUE, err=True)

    result = generate_html_from_file(
        resume_file,
        template=template,
        language=language,
        inline_css=not no_inline_css,
    )

    if not result.success:
        typer.secho(f"Error: {result.error}\n", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    typer.echo(result.html)


@app.command("templates")
def templates_command():
    """List templates and languages from the template catalog."""
    catalog = TemplateCatalog()

    typer.secho("\nTemplates:", bold=True)
    for template_id, info in catalog.list_templates().items():
        typer.echo(f"  {template_id}: {info['name']} - {info['description']}")

    typer.secho("\nLanguages:", bold=True)
    typer.echo(f"  {', '.join(catalog.languages())}")
    typer.echo("")


if __name__ == "__main__":
    app()
