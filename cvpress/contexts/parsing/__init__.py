"""
Parsing Context

Responsibilities:
- Parses Markdown resumes into an immutable ResumeRecord
- Derives years of experience from job periods

Owns: Markdown line heuristics, resume record structure
Never: Performs I/O beyond the parse_resume_file() convenience, logs, or renders
"""

from cvpress.contexts.parsing.experience import calculate_experience
from cvpress.contexts.parsing.resume_data_structure import (
    Education,
    JobEntry,
    JobHeader,
    Languages,
    ResumeRecord,
    Skills,
)
from cvpress.contexts.parsing.resume_parser import (
    markdown_bold_to_html,
    parse_job_header,
    parse_resume,
    parse_resume_file,
)

__all__ = [
    # Parsing
    "parse_resume",
    "parse_resume_file",
    "parse_job_header",
    "markdown_bold_to_html",
    # Derived values
    "calculate_experience",
    # Data structure classes
    "ResumeRecord",
    "JobEntry",
    "JobHeader",
    "Skills",
    "Education",
    "Languages",
]
