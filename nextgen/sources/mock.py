"""Mock job catalog used when the workbook is unavailable and mocks are enabled."""
from __future__ import annotations

from nextgen.log import get_logger
from nextgen.models import JobRecord
from nextgen.sources.base import JobCatalogBase

log = get_logger(__name__)

SAMPLE_JOBS: tuple[JobRecord, ...] = (
    JobRecord(
        job_id="JOB-001",
        employer_user_id="EMP-001",
        company_name="NextGen Analytics",
        job_title="Junior Data Analyst",
        job_type="Full-time",
        location="Remote",
        min_exp=0,
        max_exp=2,
        skills_required="Python, SQL, Excel, Communication",
        description="Analyze data sets and support dashboard creation.",
        required_edu="Bachelor's in any STEM field",
        created_at="2025-01-01",
        status="Active",
    ),
)


class MockJobSource(JobCatalogBase):
    def load(self) -> list[JobRecord]:
        log.info("MockJobSource serving %d sample job(s)", len(SAMPLE_JOBS))
        return list(SAMPLE_JOBS)
