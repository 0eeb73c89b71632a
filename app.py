"""Streamlit UI for the NextGen Minds job-matching dashboard."""
from __future__ import annotations

import sys
from pathlib import Path

import pandas as pd
import streamlit as st

ROOT = Path(__file__).resolve().parent
sys.path.insert(0, str(ROOT))

from nextgen.backend import (
    BackendError,
    REGISTER_FIELDS,
    login_student,
    register_student,
    save_contact,
)
from nextgen.charts import match_chart, skills_chart
from nextgen.config import load_settings
from nextgen.dashboard import build_performance
from nextgen.filters import (
    experience_label,
    filter_jobs,
    filter_options,
    is_open,
    status_label,
)
from nextgen.log import get_logger
from nextgen.matcher import compute_match
from nextgen.models import ContactMessage, JobRecord, StudentProfile
from nextgen.recommend import recommend_courses, upskill_note
from nextgen.session import SessionStore
from nextgen.skills import normalize
from nextgen.sources import CatalogError, fetch_jobs

log = get_logger(__name__)

# ── Constants ────────────────────────────────────────────────────────────

EDUCATION_LEVELS: list[str] = [
    "High School", "Diploma", "Bachelor's", "Master's", "PhD", "Other",
]

_CSS = """
<style>
[data-testid="stAppViewContainer"] {
    background: linear-gradient(135deg, #e8eaf6 0%, #f3e5f5 40%, #e0f2f1 100%);
}
[data-testid="stMetric"] {
    background: rgba(255,255,255,0.6);
    padding: 0.75rem 1rem;
    border-radius: 12px;
    border: 1px solid rgba(255,255,255,0.4);
}
.job-card {
    padding: 1rem 1.25rem;
    margin-bottom: 0.5rem;
    background: rgba(255,255,255,0.65);
    border: 1px solid rgba(74,144,217,0.25);
    border-radius: 12px;
}
.job-status { font-weight: 600; color: #27ae60; }
.job-status.closed { color: #e74c3c; }
.avatar {
    width: 3rem; height: 3rem; border-radius: 50%;
    background: #4a90d9; color: #fff; font-size: 1.5rem;
    display: flex; align-items: center; justify-content: center;
}
</style>
"""

# ── Helpers ──────────────────────────────────────────────────────────────


def _settings() -> dict:
    if "_settings" not in st.session_state:
        st.session_state["_settings"] = load_settings()
    return st.session_state["_settings"]


def _store() -> SessionStore:
    return SessionStore(_settings()["session_path"])


def _current_user() -> StudentProfile | None:
    return _store().load()


@st.cache_data(show_spinner="Loading jobs…")
def _load_jobs(jobs_path: str, use_mock: bool) -> list[JobRecord]:
    return fetch_jobs({"jobs_path": Path(jobs_path), "use_mock_jobs": use_mock})


def _jobs() -> list[JobRecord]:
    s = _settings()
    return _load_jobs(str(s["jobs_path"]), s["use_mock_jobs"])


# ── Sidebar: auth ────────────────────────────────────────────────────────


def _login_form() -> None:
    # widget keys can only be seeded before the widgets are created
    for key, value in st.session_state.pop("_login_prefill", {}).items():
        st.session_state[key] = value

    with st.form("login_form"):
        st.markdown("**Login**")
        email = st.text_input("Email", key="login_email")
        first = st.text_input("First name", key="login_first_name")
        last = st.text_input("Last name", key="login_last_name")
        submitted = st.form_submit_button("Login", type="primary", use_container_width=True)

    if submitted:
        with st.spinner("Checking credentials…"):
            try:
                student = login_student(email, first, last, _settings()["student_api_url"])
            except BackendError as exc:
                st.error(str(exc) or "Login failed. Please check your details.")
                return
        _store().save(student)
        st.success("Login successful.")
        st.rerun()


def _register_form() -> None:
    with st.form("register_form", clear_on_submit=False):
        st.markdown("**Register**")
        values = {
            "first_name": st.text_input("First name", key="reg_first_name"),
            "last_name": st.text_input("Last name", key="reg_last_name"),
            "mobile": st.text_input("Mobile"),
            "email": st.text_input("Email", key="reg_email"),
            "city": st.text_input("City"),
            "education_level": st.selectbox("Education level", EDUCATION_LEVELS),
            "experience_years": str(st.number_input("Experience (years)", 0, 50, 0)),
            "skills": st.text_area("Skills (comma-separated)", placeholder="Python, SQL, Excel"),
            "preferred_role": st.text_input("Preferred role"),
        }
        submitted = st.form_submit_button("Register", use_container_width=True)

    if submitted:
        with st.spinner("Registering…"):
            try:
                register_student(
                    {k: values.get(k, "") for k in REGISTER_FIELDS},
                    _settings()["student_api_url"],
                )
            except BackendError as exc:
                st.error(str(exc) or "Could not register student.")
                return
        st.session_state["_login_prefill"] = {
            "login_email": values["email"],
            "login_first_name": values["first_name"],
            "login_last_name": values["last_name"],
        }
        st.session_state["_registered"] = True
        st.rerun()

    if st.session_state.pop("_registered", False):
        st.success("Registered successfully! Please login now.")


def _sidebar_auth() -> None:
    with st.sidebar:
        user = _current_user()
        if user:
            st.markdown(f"### Hi, {user.first_name or 'Student'}")
            if st.button("Logout", use_container_width=True):
                _store().clear()
                st.rerun()
            return

        tab_login, tab_register = st.tabs(["Login", "Register"])
        with tab_login:
            _login_form()
        with tab_register:
            _register_form()


# ── Page: Jobs ───────────────────────────────────────────────────────────


def _job_card(index: int, job: JobRecord, user: StudentProfile | None, student_skills: frozenset[str]) -> None:
    main, actions = st.columns([4, 1])
    with main:
        st.markdown(f"#### {job.job_title or 'Untitled Role'}")
        st.caption(f"{job.company_name} • {job.location}")
        meta = [m for m in (job.job_type, experience_label(job), job.required_edu) if m]
        if meta:
            st.markdown(" · ".join(meta))
        st.markdown(f"**Skills Required:** {job.skills_required or '-'}")

    with actions:
        open_ = is_open(job)
        css = "job-status" if open_ else "job-status closed"
        st.markdown(f'<span class="{css}">{status_label(job)}</span>', unsafe_allow_html=True)

        if student_skills:
            result = compute_match(student_skills, job)
            if result is not None:
                st.markdown(f"Match: **{result.match_percent}%**")

        # position in the filtered list; cached jobs are new objects on every rerun
        key = f"apply_{index}_{job.job_id}"
        if user is None:
            if st.button("Apply", key=key, type="primary"):
                st.error("Please login as a student to apply.")
        elif not open_:
            st.button("Closed", key=key, disabled=True)
        elif st.button("Apply", key=key, type="primary"):
            log.info("Apply clicked: %s by %s", job.job_id, user.user_id)
            st.success(f"Application submitted for {job.job_title}!")
    st.divider()


def page_jobs() -> None:
    st.header("Open Jobs")

    try:
        jobs = _jobs()
    except CatalogError as exc:
        st.error(str(exc) or "Could not load jobs from Excel.")
        return

    if not jobs:
        st.info("No jobs found in Excel file.")
        return

    locations, job_types = filter_options(jobs)
    c1, c2, c3 = st.columns([2, 1, 1])
    with c1:
        query = st.text_input("Search title, company or description")
    with c2:
        location = st.selectbox("Location", ["", *locations], format_func=lambda v: v or "Location (All)")
    with c3:
        job_type = st.selectbox("Role type", ["", *job_types], format_func=lambda v: v or "Role Type (All)")

    shown = filter_jobs(jobs, query=query, location=location, job_type=job_type)
    st.caption(f"Showing {len(shown)} of {len(jobs)} jobs")
    if not shown:
        st.info("No jobs match these filters.")
        return

    user = _current_user()
    student_skills = normalize(user.skills) if user else frozenset()
    for i, job in enumerate(shown):
        _job_card(i, job, user, student_skills)


# ── Page: Performance ────────────────────────────────────────────────────


def page_performance() -> None:
    st.header("Performance")

    user = _current_user()
    if user is None:
        st.subheader("Login to see your performance analytics.")
        st.caption("Please login as a registered student to view your matches and skill gaps.")
        return

    try:
        jobs = _jobs()
    except CatalogError as exc:
        st.error(str(exc) or "Could not analyze performance because jobs could not be loaded.")
        return

    perf = build_performance(user, jobs, top_n=_settings()["top_n"])

    h1, h2 = st.columns([1, 8])
    with h1:
        st.markdown(f'<div class="avatar">{perf.initial}</div>', unsafe_allow_html=True)
    with h2:
        st.subheader(f"Welcome, {perf.name}.")
        st.caption("Here’s how your skills align with live job openings in NEXTGEN MINDS.")

    c1, c2, c3 = st.columns(3)
    c1.metric("Preferred Role", perf.preferred_role)
    c2.metric("Total Skills Provided", perf.total_skills)
    c3.metric("Best Match Across Jobs", f"{perf.best_match}%")

    if perf.fully_qualified:
        st.success(perf.message)
    else:
        st.error(perf.message)

    st.divider()
    left, right = st.columns(2)
    with left:
        st.subheader("Top Matches")
        if perf.top:
            df = pd.DataFrame([
                {
                    "Role": f"{r.job.job_title} @ {r.job.company_name}",
                    "Match": r.match_percent,
                }
                for r in perf.top
            ])
            st.dataframe(
                df,
                use_container_width=True,
                column_config={
                    "Match": st.column_config.ProgressColumn("Match", min_value=0, max_value=100, format="%d%%"),
                },
                hide_index=True,
            )
        else:
            st.info("No jobs with listed skills to match against.")
        st.plotly_chart(match_chart(perf.top), use_container_width=True)

    with right:
        s1, s2 = st.columns(2)
        with s1:
            st.subheader("Your Skills")
            st.markdown("\n".join(f"- {s}" for s in perf.current_skills) or "_None listed_")
        with s2:
            st.subheader("Skills You Need to Achieve")
            st.markdown("\n".join(f"- {s}" for s in perf.gaps_for_display) or "_No gaps_")
        fig = skills_chart(perf.total_skills, len(perf.gap_skills))
        if fig is not None:
            st.plotly_chart(fig, use_container_width=True)


# ── Page: Upskill ────────────────────────────────────────────────────────


def page_upskill() -> None:
    st.header("Upskill")

    user = _current_user()
    gap_skills: frozenset[str] = frozenset()
    if user is not None:
        try:
            gap_skills = build_performance(user, _jobs()).gap_skills
        except CatalogError as exc:
            log.warning("Upskill page without gap data: %s", exc)

    st.caption(upskill_note(user is not None))

    courses = recommend_courses(gap_skills)
    cols = st.columns(2)
    for i, course in enumerate(courses):
        with cols[i % 2]:
            with st.container(border=True):
                st.markdown(f"### {course.title}")
                st.write(course.description)
                st.markdown(f"**Skills covered:** {', '.join(course.skills)}")
                st.caption(f"{course.learners}+ learners • Avg completion {course.completion}%")
                st.progress(course.completion / 100)


# ── Page: Contact ────────────────────────────────────────────────────────


def page_contact() -> None:
    st.header("Contact Us")

    with st.form("contact_form", clear_on_submit=True):
        name = st.text_input("Name")
        email = st.text_input("Email")
        subject = st.text_input("Subject")
        message = st.text_area("Message", height=150)
        submitted = st.form_submit_button("Send", type="primary", use_container_width=True)

    if submitted:
        with st.spinner("Sending…"):
            try:
                save_contact(
                    ContactMessage(name=name, email=email, subject=subject, message=message),
                    _settings()["student_api_url"],
                )
            except BackendError as exc:
                st.error(str(exc) or "Could not send message.")
                return
        st.success("Thank you! We received your message.")


# ── Main ─────────────────────────────────────────────────────────────────


def _wrap(page):
    def _run() -> None:
        st.markdown(_CSS, unsafe_allow_html=True)
        _sidebar_auth()
        page()

    _run.__name__ = page.__name__
    return _run


pages = [
    st.Page(_wrap(page_jobs), title="Jobs", icon="💼", url_path="jobs", default=True),
    st.Page(_wrap(page_performance), title="Performance", icon="📊", url_path="performance"),
    st.Page(_wrap(page_upskill), title="Upskill", icon="🎓", url_path="upskill"),
    st.Page(_wrap(page_contact), title="Contact", icon="✉️", url_path="contact"),
]

nav = st.navigation(pages)
nav.run()
