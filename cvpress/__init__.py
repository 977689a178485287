"""
cvpress - Markdown resume to print-ready document conversion

Turns a loosely formatted Markdown resume into structured data and renders
it through HTML templates that a print-to-PDF step can consume.

Architecture:
- Parsing Context: Markdown resume parsing and derived figures
- Templating Context: Template catalog, Jinja2 templates and HTML generation
"""

__version__ = "0.1.0"
