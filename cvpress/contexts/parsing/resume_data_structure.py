"""
Resume data structures for the Parsing context.

Provides the immutable record returned by resume_parser.parse_resume() and
its components. Every string field defaults to "" and every sequence to an
empty tuple, so consumers never have to check for missing fields.

Pattern: parser produces data, data structure holds it, templates consume
the plain-dict form from ResumeRecord.to_dict().
"""

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, Tuple


@dataclass(frozen=True)
class Skills:
    """Skill summary lines from the skills section."""

    frontend: str = ""
    backend: str = ""


@dataclass(frozen=True)
class Education:
    """Single education record (last-seen-wins per field)."""

    period: str = ""
    university: str = ""
    faculty: str = ""


@dataclass(frozen=True)
class Languages:
    """Language proficiency lines, stored verbatim."""

    russian: str = ""
    english: str = ""


@dataclass(frozen=True)
class JobHeader:
    """
    Fields parsed from a #### job heading.

    Attributes:
        title: Position title (whole heading text if the header pattern failed)
        period: Free-text date range, e.g. "May 2025 - Present"
        duration: Optional free-text duration, e.g. "2y"
        company: Company name after the dash separator
    """

    title: str = ""
    period: str = ""
    duration: str = ""
    company: str = ""


@dataclass(frozen=True)
class JobEntry:
    """
    One position in the employment history.

    Achievements are stored with inline bold already converted to
    <strong> markup.
    """

    title: str = ""
    period: str = ""
    duration: str = ""
    company: str = ""
    description: str = ""
    achievements: Tuple[str, ...] = ()
    technologies: str = ""

    def to_dict(self) -> Dict[str, Any]:
        payload = asdict(self)
        payload["achievements"] = list(self.achievements)
        return payload


@dataclass(frozen=True)
class ResumeRecord:
    """
    Structured resume extracted from Markdown.

    Built fresh by each parse_resume() call; jobs are in document order.
    """

    name: str = ""
    title: str = ""
    email: str = ""
    telegram: str = ""
    skills: Skills = field(default_factory=Skills)
    jobs: Tuple[JobEntry, ...] = ()
    education: Education = field(default_factory=Education)
    languages: Languages = field(default_factory=Languages)

    def to_dict(self) -> Dict[str, Any]:
        """Plain dict/list/str form with the record's field names."""
        return {
            "name": self.name,
            "title": self.title,
            "email": self.email,
            "telegram": self.telegram,
            "skills": asdict(self.skills),
            "jobs": [job.to_dict() for job in self.jobs],
            "education": asdict(self.education),
            "languages": asdict(self.languages),
        }


__all__ = [
    "Skills",
    "Education",
    "Languages",
    "JobHeader",
    "JobEntry",
    "ResumeRecord",
]
