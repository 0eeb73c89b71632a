import pandas as pd
import pytest

from nextgen.models import JOB_COLUMNS
from nextgen.sources import CatalogError, ExcelJobSource, MockJobSource, fetch_jobs


def _write_workbook(path, rows):
    pd.DataFrame(rows).to_excel(path, index=False, engine="openpyxl")
    return path


def test_excel_source_reads_all_columns(tmp_path):
    row = {
        "job_id": "JOB-7", "employer_user_id": "EMP-2", "company_name": "DataWorks",
        "job_title": "BI Developer", "job_type": "Full-time", "location": "Pune",
        "min_exp": 1, "max_exp": 3, "skills_required": "Power BI, SQL",
        "description": "Dashboards", "required_edu": "B.Tech",
        "created_at": "2025-02-01", "status": "Active",
    }
    path = _write_workbook(tmp_path / "jobs.xlsx", [row])

    jobs = ExcelJobSource(path).load()

    assert len(jobs) == 1
    job = jobs[0]
    assert job.job_id == "JOB-7"
    assert job.skills_required == "Power BI, SQL"
    assert job.min_exp == 1 and job.max_exp == 3
    assert job.status == "Active"


def test_excel_source_defaults_missing_columns_and_blanks(tmp_path):
    rows = [
        {"job_id": "A", "job_title": "Analyst", "skills_required": "excel", "min_exp": None},
        {"job_id": "B", "job_title": "Clerk", "skills_required": None, "min_exp": 2},
    ]
    path = _write_workbook(tmp_path / "jobs.xlsx", rows)

    jobs = ExcelJobSource(path).load()

    assert [j.job_id for j in jobs] == ["A", "B"]
    assert jobs[0].company_name == ""
    assert jobs[0].min_exp is None
    assert jobs[1].skills_required == ""
    assert jobs[1].min_exp == 2
    assert jobs[1].max_exp is None


def test_excel_source_keeps_row_order(tmp_path):
    rows = [{"job_id": f"J{i}", "skills_required": "git"} for i in range(5)]
    path = _write_workbook(tmp_path / "jobs.xlsx", rows)
    assert [j.job_id for j in ExcelJobSource(path).load()] == [f"J{i}" for i in range(5)]


def test_missing_workbook_raises_catalog_error(tmp_path):
    with pytest.raises(CatalogError, match="Could not load Excel file"):
        ExcelJobSource(tmp_path / "nope.xlsx").load()


def test_corrupt_workbook_raises_catalog_error(tmp_path):
    path = tmp_path / "broken.xlsx"
    path.write_text("not a workbook", encoding="utf-8")
    with pytest.raises(CatalogError):
        ExcelJobSource(path).load()


def test_fetch_jobs_propagates_failure_without_mocks(tmp_path):
    settings = {"jobs_path": tmp_path / "nope.xlsx", "use_mock_jobs": False}
    with pytest.raises(CatalogError):
        fetch_jobs(settings)


def test_fetch_jobs_falls_back_to_mock(tmp_path):
    settings = {"jobs_path": tmp_path / "nope.xlsx", "use_mock_jobs": True}
    jobs = fetch_jobs(settings)
    assert [j.job_id for j in jobs] == ["JOB-001"]
    assert jobs == MockJobSource().load()


def test_mock_job_has_every_column():
    job = MockJobSource().load()[0]
    for name in JOB_COLUMNS:
        assert hasattr(job, name)
    assert job.skills_required == "Python, SQL, Excel, Communication"
