"""Shared fixtures: sample jobs and students, no log files during tests."""
import os
import sys
from pathlib import Path

os.environ.setdefault("NGM_LOG_TO_FILE", "0")

ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import pytest

from nextgen.models import JobRecord, StudentProfile


def make_job(job_id: str, skills: str = "", **kw) -> JobRecord:
    kw.setdefault("job_title", f"Role {job_id}")
    kw.setdefault("company_name", "Acme")
    return JobRecord(job_id=job_id, skills_required=skills, **kw)


@pytest.fixture
def jobs():
    return [
        make_job("J1", "Python, SQL, Excel", job_title="Data Analyst", location="Remote", job_type="Full-time"),
        make_job("J2", "", job_title="Office Manager", location="Pune", job_type="Full-time"),
        make_job("J3", "python, sql", job_title="Backend Intern", location="Remote", job_type="Internship",
                 status="Closed"),
        make_job("J4", "git, linux", job_title="DevOps Trainee", location="Bangalore", job_type="Internship",
                 description="CI pipelines and cloud"),
    ]


@pytest.fixture
def student():
    return StudentProfile(
        user_id="STU-1",
        first_name="asha",
        last_name="Rao",
        email="asha@example.com",
        skills="Python, SQL",
        preferred_role="Data Analyst",
    )
