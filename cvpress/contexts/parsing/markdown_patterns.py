"""
Pattern matching for Markdown resume parsing.

This module provides the markers, regex patterns and keyword sets the resume
parser uses to classify each line, plus helpers built on them.

Pattern classes follow one convention:
- Dataclasses with frozen=True for immutability
- Class-level constants for patterns
- Helper functions that use these patterns

The heuristics here are order-sensitive. resume_parser.parse_resume() tests
them in a fixed priority (name, title, contacts, section, job, body) and
the keyword sets are matched as plain substrings.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional

# =============================================================================
# LINE PATTERNS
# =============================================================================


@dataclass(frozen=True)
class LinePatterns:
    """Characters trimmed from both ends of every line besides whitespace."""

    # Leading U+FEFF from files saved with a UTF-8 signature
    BYTE_ORDER_MARK: str = "\ufeff"


# =============================================================================
# HEADING PATTERNS
# =============================================================================


@dataclass(frozen=True)
class HeadingPatterns:
    """
    Markers for the four heading levels a resume uses.

    - # Name
    - ## Title
    - ### Section (Skills, Work Experience, Education, Languages)
    - #### Job header
    """

    NAME_MARKER: str = "# "
    TITLE_MARKER: str = "## "
    SECTION_MARKER: str = "### "
    JOB_MARKER: str = "#### "

    NAME_PREFIX: re.Pattern = re.compile(r"^#\s*")
    TITLE_PREFIX: re.Pattern = re.compile(r"^##\s*")
    SECTION_PREFIX: re.Pattern = re.compile(r"^###\s*")
    JOB_PREFIX: re.Pattern = re.compile(r"^####\s*")


# =============================================================================
# CONTACT PATTERNS
# =============================================================================


@dataclass(frozen=True)
class ContactPatterns:
    """
    Heuristics for contact lines.

    A line is an email line if it starts with one of EMAIL_LABELS (compared
    lowercase) or contains EMAIL_HINT anywhere (case-sensitive, so "Email:"
    and "gmail.com" both qualify). Otherwise it is a telegram line if it
    starts with TELEGRAM_LABEL or contains an "@".
    """

    EMAIL_LABELS: tuple = ("contacts:", "email:")
    EMAIL_HINT: str = "mail"
    TELEGRAM_LABEL: str = "telegram:"
    HANDLE_MARKER: str = "@"

    # local@domain.tld
    EMAIL: re.Pattern = re.compile(r"[\w.-]+@[\w.-]+\.\w+", re.ASCII)

    # @handle
    TELEGRAM_HANDLE: re.Pattern = re.compile(r"@\w+", re.ASCII)


# =============================================================================
# SECTION PATTERNS
# =============================================================================


class SectionMode(Enum):
    """Parser state selecting how body lines are interpreted."""

    NONE = "none"
    SKILLS = "skills"
    EXPERIENCE = "experience"
    EDUCATION = "education"
    LANGUAGES = "languages"


@dataclass(frozen=True)
class SectionKeywords:
    """
    Case-folded substrings that select a section mode from a ### heading.

    Checked in declaration order; the first mode with a matching keyword wins.
    """

    SKILLS: tuple = ("skills",)
    EXPERIENCE: tuple = ("experience", "work")
    EDUCATION: tuple = ("education",)
    LANGUAGES: tuple = ("languages", "language")


_SECTION_KEYWORD_TABLE = (
    (SectionMode.SKILLS, SectionKeywords.SKILLS),
    (SectionMode.EXPERIENCE, SectionKeywords.EXPERIENCE),
    (SectionMode.EDUCATION, SectionKeywords.EDUCATION),
    (SectionMode.LANGUAGES, SectionKeywords.LANGUAGES),
)


# =============================================================================
# BODY PATTERNS
# =============================================================================


@dataclass(frozen=True)
class SkillPatterns:
    """Bold labels inside the skills section."""

    FRONTEND_PREFIXES: tuple = ("**Frontend:**", "**Frontend:")
    BACKEND_PREFIXES: tuple = ("**Backend:**", "**Backend:")

    FRONTEND_LABEL: re.Pattern = re.compile(r"^\*\*Frontend:\*\*\s*")
    BACKEND_LABEL: re.Pattern = re.compile(r"^\*\*Backend:\*\*\s*")


@dataclass(frozen=True)
class JobPatterns:
    """
    Patterns for job headers and the lines beneath them.

    Header shape: Title (Period | Duration) - Company
    The "| Duration" clause is optional.
    """

    HEADER: re.Pattern = re.compile(r"^(.+?)\s*\((.+?)(?:\s*\|\s*(.+?))?\)\s*-\s*(.+)$")

    BOLD_MARKER: str = "**"
    TECHNOLOGY_HINT: str = "technolog"
    TECHNOLOGY_LINE_HINT: str = "**technolog"

    # Stripped in order; the colon sits outside the bold
    TECHNOLOGIES_LABEL: re.Pattern = re.compile(r"^\*\*Technologies\*\*:\s*", re.IGNORECASE)
    TECH_LABEL: re.Pattern = re.compile(r"^\*\*Tech\*\*:\s*", re.IGNORECASE)

    BULLET_MARKER: str = "- "
    BULLET_PREFIX: re.Pattern = re.compile(r"^-\s*")

    LEADING_BOLD: re.Pattern = re.compile(r"^\*\*")
    TRAILING_BOLD: re.Pattern = re.compile(r"\*\*$")


@dataclass(frozen=True)
class InlinePatterns:
    """Inline Markdown emphasis."""

    BOLD_SPAN: re.Pattern = re.compile(r"\*\*(.+?)\*\*")
    STRONG_REPLACEMENT: str = r"<strong>\1</strong>"


@dataclass(frozen=True)
class EducationPatterns:
    """Education lines: **period**, institution line, faculty line."""

    BOLD_MARKER: str = "**"
    LEADING_BOLD: re.Pattern = re.compile(r"^\*\*")
    CLOSING_BOLD_AND_REST: re.Pattern = re.compile(r"\*\*.*$")

    UNIVERSITY_HINTS: tuple = ("university", "college", "institute")
    FACULTY_HINTS: tuple = ("faculty", "department", "degree")


@dataclass(frozen=True)
class LanguagePatterns:
    """Language lines, one per language."""

    RUSSIAN_HINT: str = "russian"
    ENGLISH_HINT: str = "english"


@dataclass(frozen=True)
class ExperiencePatterns:
    """Years inside free-text job periods."""

    # Standalone 20xx year
    YEAR: re.Pattern = re.compile(r"\b(20\d{2})\b", re.ASCII)


# =============================================================================
# HELPER FUNCTIONS
# =============================================================================


def is_email_line(line: str) -> bool:
    """Check if a trimmed line should be treated as an email contact line."""
    lowered = line.lower()
    return lowered.startswith(ContactPatterns.EMAIL_LABELS) or ContactPatterns.EMAIL_HINT in line


def is_telegram_line(line: str) -> bool:
    """
    Check if a trimmed line should be treated as a telegram contact line.

    Only meaningful after is_email_line() returned False.
    """
    return (
        line.lower().startswith(ContactPatterns.TELEGRAM_LABEL)
        or ContactPatterns.HANDLE_MARKER in line
    )


def match_section_mode(heading: str) -> Optional[SectionMode]:
    """
    Match a ### heading text to a section mode.

    Args:
        heading: Heading text without the ### marker

    Returns:
        SectionMode, or None if no keyword matches
    """
    folded = heading.casefold()

    for mode, keywords in _SECTION_KEYWORD_TABLE:
        if any(keyword in folded for keyword in keywords):
            return mode

    return None


def contains_any(line: str, hints: tuple) -> bool:
    """Case-insensitive substring check against a set of hints."""
    lowered = line.lower()
    return any(hint in lowered for hint in hints)
