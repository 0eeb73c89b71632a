"""Score jobs against a student's skills, rank them and collect skill gaps."""
from __future__ import annotations

from typing import Iterable, Sequence

from nextgen.log import get_logger
from nextgen.models import JobRecord, MatchResult, SkillSet
from nextgen.skills import normalize

log = get_logger(__name__)


def _percent(part: int, whole: int) -> int:
    """Round-half-up of 100 * part / whole, in integers (1/8 -> 13)."""
    return (200 * part + whole) // (2 * whole)


def compute_match(student_skills: SkillSet, job: JobRecord) -> MatchResult | None:
    """Match one job, or None when the job lists no required skills.

    None means "excluded": such a job is neither ranked nor counted towards
    the skills gap, which is different from a 0% match.
    """
    job_skills = normalize(job.skills_required)
    if not job_skills:
        return None

    matched = job_skills & student_skills
    missing = job_skills - student_skills
    return MatchResult(
        job=job,
        match_percent=_percent(len(matched), len(job_skills)),
        matched=frozenset(matched),
        missing=frozenset(missing),
    )


def rank(student_skills: SkillSet, jobs: Sequence[JobRecord]) -> list[MatchResult]:
    """All matchable jobs, best first; equal scores keep catalog order."""
    results: list[MatchResult] = []
    for job in jobs:
        result = compute_match(student_skills, job)
        if result is not None:
            results.append(result)

    # sorted() is stable, so ties stay in input order and top-N is reproducible
    ranked = sorted(results, key=lambda r: -r.match_percent)
    log.debug(
        "Ranked %d of %d jobs (%d without required skills)",
        len(ranked), len(jobs), len(jobs) - len(ranked),
    )
    return ranked


def top_matches(results: Sequence[MatchResult], n: int = 3) -> list[MatchResult]:
    return list(results[:n])


def aggregate_gaps(results: Iterable[MatchResult]) -> frozenset[str]:
    """Union of missing skills across every match below 100%."""
    gaps: set[str] = set()
    for result in results:
        if result.match_percent < 100:
            gaps.update(result.missing)
    return frozenset(gaps)
