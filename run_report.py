#!/usr/bin/env python3
"""Entry point: match the logged-in student against the job catalog and write a report."""
from __future__ import annotations

import argparse
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent))

from nextgen.config import load_settings, resolve_path
from nextgen.dashboard import (
    build_performance,
    build_performance_report,
    write_performance_report,
)
from nextgen.log import get_logger
from nextgen.session import SessionStore
from nextgen.sources import CatalogError, fetch_jobs

log = get_logger(__name__)


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    ap = argparse.ArgumentParser(description=__doc__)
    ap.add_argument("--top", type=int, default=None, help="number of top matches to show")
    ap.add_argument("--jobs", default=None, help="path to the jobs workbook")
    ap.add_argument("--no-write", action="store_true", help="log the report without saving it")
    return ap.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    settings = load_settings()
    if args.jobs:
        settings["jobs_path"] = resolve_path(args.jobs)
    top_n = args.top if args.top and args.top > 0 else settings["top_n"]

    profile = SessionStore(settings["session_path"]).load()
    if profile is None:
        log.error("No student is logged in. Login through the dashboard first: streamlit run app.py")
        return 1

    try:
        jobs = fetch_jobs(settings)
    except CatalogError as exc:
        log.error("Could not analyze performance because jobs could not be loaded: %s", exc)
        return 1

    perf = build_performance(profile, jobs, top_n=top_n)
    report = build_performance_report(perf)

    log.info("Student: %s", perf.name or profile.email)
    log.info("  Jobs ranked: %d", len(perf.ranked))
    log.info("  Best match: %d%%", perf.best_match)
    log.info("  Skills to learn: %s", ", ".join(perf.gaps_for_display) or "none")
    log.info("  %s", perf.message)

    if args.no_write:
        print(report)
    else:
        path = write_performance_report(report)
        log.info("  Report: %s", path)
    return 0


if __name__ == "__main__":
    sys.exit(main())
