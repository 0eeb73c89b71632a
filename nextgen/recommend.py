"""Upskilling course suggestions, personalised by the student's skills gap."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from nextgen.skills import display_skills


@dataclass(frozen=True)
class Course:
    title: str
    description: str
    skills: tuple[str, ...]
    learners: int
    completion: int


BASE_COURSES: tuple[Course, ...] = (
    Course(
        title="Foundations of Data Analytics",
        description="Learn Excel, SQL and visualization basics.",
        skills=("Excel", "SQL", "Power BI"),
        learners=420,
        completion=78,
    ),
    Course(
        title="Modern Web Development",
        description="HTML, CSS, JavaScript and frontend fundamentals.",
        skills=("HTML", "CSS", "JavaScript"),
        learners=310,
        completion=71,
    ),
    Course(
        title="Cloud & DevOps Starter",
        description="Intro to Linux, cloud concepts and CI/CD.",
        skills=("Linux", "Git", "Cloud Basics"),
        learners=190,
        completion=65,
    ),
    Course(
        title="Soft Skills for Tech Careers",
        description="Communication, teamwork and interview prep.",
        skills=("Communication", "Collaboration"),
        learners=530,
        completion=82,
    ),
)

GAP_COURSE_TITLE = "Close Your Skill Gap"


def recommend_courses(gap_skills: Iterable[str] = ()) -> list[Course]:
    """Base catalogue, led by a custom gap course when there is a gap."""
    gaps = display_skills(gap_skills)
    if not gaps:
        return list(BASE_COURSES)
    custom = Course(
        title=GAP_COURSE_TITLE,
        description="Custom set of modules based on the jobs you want.",
        skills=tuple(gaps),
        learners=120,
        completion=60,
    )
    return [custom, *BASE_COURSES]


def upskill_note(logged_in: bool) -> str:
    if not logged_in:
        return "Login to see personalized upskilling recommendations based on your profile."
    return "These recommendations are aligned with your skill gaps for the current jobs."
