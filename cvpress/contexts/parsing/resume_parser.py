"""
Markdown resume parsing for the Parsing context.

Turns a loosely formatted Markdown resume into a ResumeRecord in a single
forward pass over its lines. The pass keeps a small amount of state, all
local to one call:

- the current section mode (skills, experience, education, languages)
- the job currently being accumulated, if any
- whether bullet lines are currently read as achievements

Expected document shape:

    # Jane Doe
    ## Senior Frontend Developer
    Email: jane@example.com
    Telegram: @janedoe

    ### Skills
    **Frontend:** React, TypeScript
    **Backend:** Node.js, PostgreSQL

    ### Work Experience
    #### Senior Developer (May 2021 - Present | 3y) - Acme Corp
    **Led the web platform team**
    - Cut build time by **40%**
    **Technologies**: React, Vite

    ### Education
    **2012 - 2016**
    State University
    Faculty of Computer Science

    ### Languages
    English - C1
    Russian - native

Malformed input never raises: anything the heuristics don't recognise is
skipped and the corresponding fields keep their defaults.
"""

from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import List, Optional

from cvpress.contexts.parsing.markdown_patterns import (
    ContactPatterns,
    EducationPatterns,
    HeadingPatterns,
    InlinePatterns,
    JobPatterns,
    LanguagePatterns,
    LinePatterns,
    SectionMode,
    SkillPatterns,
    contains_any,
    is_email_line,
    is_telegram_line,
    match_section_mode,
)
from cvpress.contexts.parsing.resume_data_structure import (
    Education,
    JobEntry,
    JobHeader,
    Languages,
    ResumeRecord,
    Skills,
)


@dataclass
class _JobDraft:
    """Mutable job being accumulated until the next heading or end of input."""

    header: JobHeader
    description: str = ""
    achievements: List[str] = field(default_factory=list)
    technologies: str = ""

    def freeze(self) -> JobEntry:
        return JobEntry(
            title=self.header.title,
            period=self.header.period,
            duration=self.header.duration,
            company=self.header.company,
            description=self.description,
            achievements=tuple(self.achievements),
            technologies=self.technologies,
        )


@dataclass
class _ParseState:
    """Accumulator threaded through one parse_resume() call."""

    mode: SectionMode = SectionMode.NONE
    current_job: Optional[_JobDraft] = None
    in_achievements: bool = False

    name: str = ""
    title: str = ""
    email: str = ""
    telegram: str = ""
    skills: Skills = field(default_factory=Skills)
    jobs: List[JobEntry] = field(default_factory=list)
    education: Education = field(default_factory=Education)
    languages: Languages = field(default_factory=Languages)

    def close_job(self) -> None:
        """Append the open job, if any, and clear the slot."""
        if self.current_job is not None:
            self.jobs.append(self.current_job.freeze())
            self.current_job = None

    def to_record(self) -> ResumeRecord:
        return ResumeRecord(
            name=self.name,
            title=self.title,
            email=self.email,
            telegram=self.telegram,
            skills=self.skills,
            jobs=tuple(self.jobs),
            education=self.education,
            languages=self.languages,
        )


# =============================================================================
# LINE HELPERS
# =============================================================================


def parse_job_header(line: str) -> JobHeader:
    """
    Parse a job header line.

    Args:
        line: Header line like "#### Senior Developer (May 2025 - Present | 1y) - Company"

    Returns:
        JobHeader. If the line doesn't follow "Title (Period[ | Duration]) - Company",
        the whole heading text becomes the title and the other fields are empty.
    """
    content = HeadingPatterns.JOB_PREFIX.sub("", line, count=1)

    match = JobPatterns.HEADER.match(content)
    if match is None:
        return JobHeader(title=content)

    title, period, duration, company = match.groups()
    return JobHeader(
        title=title.strip(),
        period=period.strip(),
        duration=(duration or "").strip(),
        company=company.strip(),
    )


def _trim_line(raw_line: str) -> str:
    """Strip surrounding whitespace, counting a byte order mark as whitespace."""
    return raw_line.strip().strip(LinePatterns.BYTE_ORDER_MARK).strip()


def markdown_bold_to_html(text: str) -> str:
    """Convert **bold** spans to <strong> tags."""
    return InlinePatterns.BOLD_SPAN.sub(InlinePatterns.STRONG_REPLACEMENT, text)


def _strip_technology_label(line: str) -> str:
    line = JobPatterns.TECHNOLOGIES_LABEL.sub("", line, count=1)
    return JobPatterns.TECH_LABEL.sub("", line, count=1)


# =============================================================================
# SECTION BODY HANDLERS
# =============================================================================


def _handle_skills_line(state: _ParseState, line: str) -> None:
    if line.startswith(SkillPatterns.FRONTEND_PREFIXES):
        frontend = SkillPatterns.FRONTEND_LABEL.sub("", line, count=1)
        state.skills = replace(state.skills, frontend=frontend)
    elif line.startswith(SkillPatterns.BACKEND_PREFIXES):
        backend = SkillPatterns.BACKEND_LABEL.sub("", line, count=1)
        state.skills = replace(state.skills, backend=backend)


def _handle_experience_line(state: _ParseState, line: str) -> None:
    job = state.current_job
    if job is None:
        return

    lowered = line.lower()

    if line.startswith(JobPatterns.BOLD_MARKER) and JobPatterns.TECHNOLOGY_HINT not in lowered:
        description = JobPatterns.LEADING_BOLD.sub("", line, count=1)
        job.description = JobPatterns.TRAILING_BOLD.sub("", description, count=1)
        state.in_achievements = True
    elif JobPatterns.TECHNOLOGY_LINE_HINT in lowered:
        job.technologies = _strip_technology_label(line)
        state.in_achievements = False
    elif line.startswith(JobPatterns.BULLET_MARKER) and state.in_achievements:
        achievement = JobPatterns.BULLET_PREFIX.sub("", line, count=1)
        job.achievements.append(markdown_bold_to_html(achievement))


def _handle_education_line(state: _ParseState, line: str) -> None:
    if line.startswith(EducationPatterns.BOLD_MARKER):
        period = EducationPatterns.LEADING_BOLD.sub("", line, count=1)
        period = EducationPatterns.CLOSING_BOLD_AND_REST.sub("", period, count=1)
        state.education = replace(state.education, period=period)
    elif contains_any(line, EducationPatterns.UNIVERSITY_HINTS):
        state.education = replace(state.education, university=line)
    elif contains_any(line, EducationPatterns.FACULTY_HINTS):
        state.education = replace(state.education, faculty=line)


def _handle_languages_line(state: _ParseState, line: str) -> None:
    lowered = line.lower()
    if LanguagePatterns.RUSSIAN_HINT in lowered:
        state.languages = replace(state.languages, russian=line)
    elif LanguagePatterns.ENGLISH_HINT in lowered:
        state.languages = replace(state.languages, english=line)


_BODY_HANDLERS = {
    SectionMode.SKILLS: _handle_skills_line,
    SectionMode.EXPERIENCE: _handle_experience_line,
    SectionMode.EDUCATION: _handle_education_line,
    SectionMode.LANGUAGES: _handle_languages_line,
}


# =============================================================================
# HEADING AND CONTACT HANDLERS
# =============================================================================


def _handle_heading_or_contact(state: _ParseState, line: str) -> bool:
    """
    Apply the heading and contact rules in priority order.

    Returns:
        True if the line was consumed, False if it is section body content
    """
    if line.startswith(HeadingPatterns.NAME_MARKER):
        state.name = HeadingPatterns.NAME_PREFIX.sub("", line, count=1)
        return True

    if line.startswith(HeadingPatterns.TITLE_MARKER):
        state.title = HeadingPatterns.TITLE_PREFIX.sub("", line, count=1)
        return True

    # Contact lines are consumed even when no address or handle is found
    if is_email_line(line):
        email_match = ContactPatterns.EMAIL.search(line)
        if email_match:
            state.email = email_match.group(0)
        return True

    if is_telegram_line(line):
        handle_match = ContactPatterns.TELEGRAM_HANDLE.search(line)
        if handle_match:
            state.telegram = handle_match.group(0)
        return True

    if line.startswith(HeadingPatterns.SECTION_MARKER):
        state.close_job()
        section_name = HeadingPatterns.SECTION_PREFIX.sub("", line, count=1)
        mode = match_section_mode(section_name)
        if mode is not None:
            state.mode = mode
        return True

    if line.startswith(HeadingPatterns.JOB_MARKER):
        state.close_job()
        state.current_job = _JobDraft(header=parse_job_header(line))
        state.in_achievements = False
        return True

    return False


# =============================================================================
# PUBLIC API
# =============================================================================


def parse_resume(text: str) -> ResumeRecord:
    """
    Parse Markdown resume text into a ResumeRecord.

    Args:
        text: Markdown resume, "\\n"-delimited

    Returns:
        ResumeRecord with every field populated (defaults for anything missing)
    """
    state = _ParseState()

    for raw_line in text.split("\n"):
        line = _trim_line(raw_line)
        if not line:
            continue

        if _handle_heading_or_contact(state, line):
            continue

        handler = _BODY_HANDLERS.get(state.mode)
        if handler is not None:
            handler(state, line)

    state.close_job()
    return state.to_record()


def parse_resume_file(file_path: Path) -> ResumeRecord:
    """
    Parse a Markdown resume from file.

    Args:
        file_path: Path to a UTF-8 Markdown file

    Returns:
        ResumeRecord

    Raises:
        OSError: If the file can't be read
    """
    text = Path(file_path).read_text(encoding="utf-8")
    return parse_resume(text)
