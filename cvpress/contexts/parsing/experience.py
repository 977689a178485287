"""Years-of-experience computation from parsed job periods."""

from datetime import date
from typing import Iterable, Optional

from cvpress.contexts.parsing.markdown_patterns import ExperiencePatterns
from cvpress.contexts.parsing.resume_data_structure import JobEntry


def calculate_experience(jobs: Iterable[JobEntry], current_year: Optional[int] = None) -> int:
    """
    Calculate total years of experience from the earliest job.

    Scans each job's period for a standalone 20xx year and subtracts the
    earliest one found from the current year. Jobs without a year are ignored;
    if no job has one, the current year stands in, giving 0. The result is not
    clamped: periods that only mention future years give a negative number.

    Args:
        jobs: Parsed jobs
        current_year: Year to measure against (default: today's year)

    Returns:
        Whole years between the earliest job year and current_year
    """
    if current_year is None:
        current_year = date.today().year

    years = []
    for job in jobs:
        year_match = ExperiencePatterns.YEAR.search(job.period)
        if year_match:
            years.append(int(year_match.group(1)))

    earliest_year = min(years, default=current_year)
    return current_year - earliest_year
