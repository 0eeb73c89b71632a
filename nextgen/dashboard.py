"""Build the student performance view and its markdown report."""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Sequence

from nextgen.config import REPORTS_DIR
from nextgen.log import get_logger
from nextgen.matcher import aggregate_gaps, rank, top_matches
from nextgen.models import JobRecord, MatchResult, StudentProfile
from nextgen.skills import display_skills, normalize

log = get_logger(__name__)

MSG_QUALIFIED = "Excellent! You fully meet the skill requirements for at least one job."
MSG_UPSKILL = (
    "You need to upskill — focus on the skills listed under "
    "'Skills You Need to Achieve'."
)


@dataclass
class Performance:
    name: str
    initial: str
    preferred_role: str
    current_skills: list[str]
    ranked: list[MatchResult]
    top: list[MatchResult]
    gap_skills: frozenset[str] = field(default_factory=frozenset)

    @property
    def total_skills(self) -> int:
        return len(self.current_skills)

    @property
    def best_match(self) -> int:
        return self.top[0].match_percent if self.top else 0

    @property
    def fully_qualified(self) -> bool:
        return self.best_match == 100

    @property
    def message(self) -> str:
        return MSG_QUALIFIED if self.fully_qualified else MSG_UPSKILL

    @property
    def gaps_for_display(self) -> list[str]:
        return display_skills(self.gap_skills)


def build_performance(
    profile: StudentProfile, jobs: Sequence[JobRecord], top_n: int = 3
) -> Performance:
    student_skills = normalize(profile.skills)
    ranked = rank(student_skills, jobs)
    perf = Performance(
        name=profile.full_name,
        initial=profile.initial,
        preferred_role=profile.preferred_role or "-",
        current_skills=display_skills(student_skills),
        ranked=ranked,
        top=top_matches(ranked, top_n),
        gap_skills=aggregate_gaps(ranked),
    )
    log.info(
        "Performance for %s: %d ranked, best %d%%, %d gap skill(s)",
        perf.name or profile.email, len(ranked), perf.best_match, len(perf.gap_skills),
    )
    return perf


def build_performance_report(perf: Performance) -> str:
    date = datetime.now(timezone.utc).strftime("%Y-%m-%d")
    lines: list[str] = [f"# Performance Report — {date}", ""]

    lines.append(f"- **Student:** {perf.name or '-'}")
    lines.append(f"- **Preferred Role:** {perf.preferred_role}")
    lines.append(f"- **Total Skills Provided:** {perf.total_skills}")
    lines.append(f"- **Best Match Across Jobs:** {perf.best_match}%")
    lines.append("")

    if perf.top:
        lines.append("## Top Matches")
        lines.append("")
        lines.append("| # | Role | Company | Match | Missing |")
        lines.append("|--:|------|---------|------:|---------|")
        for i, r in enumerate(perf.top, 1):
            missing = ", ".join(display_skills(r.missing)) or "—"
            lines.append(
                f"| {i} | {r.job.job_title} | {r.job.company_name} | {r.match_percent}% | {missing} |"
            )
        lines.append("")
    else:
        lines.append("_No jobs with listed skill requirements to match against._")
        lines.append("")

    lines.append("## Your Current Skills")
    lines.append("")
    lines.extend(f"- {s}" for s in perf.current_skills)
    if not perf.current_skills:
        lines.append("_None listed in your profile._")
    lines.append("")

    lines.append("## Skills You Need to Achieve")
    lines.append("")
    lines.extend(f"- {s}" for s in perf.gaps_for_display)
    if not perf.gap_skills:
        lines.append("_No gaps across the current jobs._")
    lines.append("")

    lines.append(f"> {perf.message}")
    lines.append("")
    return "\n".join(lines)


def write_performance_report(content: str, reports_dir: Path | None = None) -> Path:
    reports_dir = reports_dir or REPORTS_DIR
    reports_dir.mkdir(parents=True, exist_ok=True)
    date = datetime.now(timezone.utc).strftime("%Y-%m-%d")
    path = reports_dir / f"performance_{date}.md"
    path.write_text(content, encoding="utf-8")
    log.info("Report written → %s", path)
    return path
