"""Data models for jobs, students and match results."""
from __future__ import annotations

import math
from dataclasses import asdict, dataclass, field, fields
from typing import Any, Mapping

SkillSet = frozenset[str]

JOB_COLUMNS: tuple[str, ...] = (
    "job_id", "employer_user_id", "company_name", "job_title", "job_type",
    "location", "min_exp", "max_exp", "skills_required", "description",
    "required_edu", "created_at", "status",
)


def _text(value: Any) -> str:
    """Spreadsheet cell -> string; blanks and NaN become ""."""
    if value is None:
        return ""
    if isinstance(value, float):
        if math.isnan(value):
            return ""
        if value.is_integer():
            return str(int(value))
    return str(value).strip()


def _number(value: Any) -> int | float | None:
    """Spreadsheet cell -> number, or None when blank or not numeric."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        if isinstance(value, float) and math.isnan(value):
            return None
        num = float(value)
    else:
        text = str(value).strip()
        if not text:
            return None
        try:
            num = float(text)
        except ValueError:
            return None
    return int(num) if num.is_integer() else num


@dataclass(frozen=True)
class JobRecord:
    job_id: str = ""
    employer_user_id: str = ""
    company_name: str = ""
    job_title: str = ""
    job_type: str = ""
    location: str = ""
    min_exp: int | float | None = None
    max_exp: int | float | None = None
    skills_required: str = ""
    description: str = ""
    required_edu: str = ""
    created_at: str = ""
    status: str = ""

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> JobRecord:
        """Build from one catalog row; missing columns default to blank."""
        values: dict[str, Any] = {}
        for name in JOB_COLUMNS:
            raw = row.get(name, "")
            values[name] = _number(raw) if name in ("min_exp", "max_exp") else _text(raw)
        return cls(**values)


@dataclass
class StudentProfile:
    user_id: str = ""
    role: str = "student"
    first_name: str = ""
    last_name: str = ""
    mobile: str = ""
    email: str = ""
    city: str = ""
    education_level: str = ""
    experience_years: str = ""
    skills: str = ""
    preferred_role: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> StudentProfile:
        """Backend rows may carry extra columns and numeric cells."""
        known = {f.name for f in fields(cls)}
        values = {k: _text(v) for k, v in data.items() if k in known}
        if not values.get("role"):
            values["role"] = "student"
        return cls(**values)

    def to_dict(self) -> dict[str, str]:
        return asdict(self)

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()

    @property
    def initial(self) -> str:
        source = self.first_name or self.last_name or "S"
        return source[0].upper()


@dataclass(frozen=True)
class MatchResult:
    job: JobRecord
    match_percent: int
    matched: frozenset[str] = field(default_factory=frozenset)
    missing: frozenset[str] = field(default_factory=frozenset)


@dataclass
class ContactMessage:
    name: str
    email: str
    subject: str
    message: str
