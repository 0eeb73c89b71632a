from .base import CatalogError, JobCatalogBase
from .excel import ExcelJobSource
from .mock import MockJobSource

from nextgen.log import get_logger
from nextgen.models import JobRecord

log = get_logger(__name__)

__all__ = [
    "CatalogError", "JobCatalogBase", "ExcelJobSource", "MockJobSource",
    "get_source", "fetch_jobs",
]


def get_source(settings: dict) -> JobCatalogBase:
    return ExcelJobSource(settings["jobs_path"])


def fetch_jobs(settings: dict) -> list[JobRecord]:
    """Load the whole catalog; a failed load is all-or-nothing."""
    try:
        return get_source(settings).load()
    except CatalogError as exc:
        log.error("Error loading jobs: %s", exc)
        if settings.get("use_mock_jobs"):
            log.info("Falling back to MockJobSource")
            return MockJobSource().load()
        raise
