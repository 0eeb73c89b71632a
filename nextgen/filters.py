"""Job listing helpers: open/closed status, filter options and filtering."""
from __future__ import annotations

from typing import Sequence

from nextgen.models import JobRecord

_CLOSED_STATUSES = ("closed", "inactive")


def is_open(job: JobRecord) -> bool:
    return job.status.lower() not in _CLOSED_STATUSES


def status_label(job: JobRecord) -> str:
    if not is_open(job):
        return "Closed"
    return job.status or "Active"


def _fmt_years(value: int | float) -> str:
    return str(int(value)) if float(value).is_integer() else str(value)


def experience_label(job: JobRecord) -> str:
    if job.min_exp is None or job.max_exp is None:
        return ""
    return f"{_fmt_years(job.min_exp)}-{_fmt_years(job.max_exp)} yrs exp"


def filter_options(jobs: Sequence[JobRecord]) -> tuple[list[str], list[str]]:
    """Sorted distinct locations and job types, blanks dropped."""
    locations = sorted({j.location for j in jobs if j.location})
    job_types = sorted({j.job_type for j in jobs if j.job_type})
    return locations, job_types


def filter_jobs(
    jobs: Sequence[JobRecord],
    query: str = "",
    location: str = "",
    job_type: str = "",
) -> list[JobRecord]:
    q = query.strip().lower()

    def _keep(job: JobRecord) -> bool:
        if q and not (
            q in job.job_title.lower()
            or q in job.company_name.lower()
            or q in job.description.lower()
        ):
            return False
        if location and job.location != location:
            return False
        if job_type and job.job_type != job_type:
            return False
        return True

    return [j for j in jobs if _keep(j)]
