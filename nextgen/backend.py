"""Client for the spreadsheet-backed student/contact web app.

Every call POSTs a single form field ``data`` holding a JSON payload with an
``action`` name. The web app answers with JSON carrying ``ok`` and, on
failure, a human-readable ``message``.
"""
from __future__ import annotations

import json
import time
from typing import Any, Mapping

import requests

from nextgen.log import get_logger
from nextgen.models import ContactMessage, StudentProfile

log = get_logger(__name__)

_TIMEOUT = 20

REGISTER_FIELDS: tuple[str, ...] = (
    "first_name", "last_name", "mobile", "email", "city",
    "education_level", "experience_years", "skills", "preferred_role",
)


class BackendError(RuntimeError):
    """Remote call failed; str(exc) is safe to show to the user."""


def call_backend(payload: dict[str, Any], url: str) -> dict[str, Any]:
    if not url or url.startswith("PASTE_"):
        log.warning("Backend URL not set. Update student_api_url in config/settings.yaml")
        raise BackendError("Backend URL not configured")

    try:
        r = requests.post(url, data={"data": json.dumps(payload)}, timeout=_TIMEOUT)
    except requests.RequestException as exc:
        log.error("Backend %s request failed: %s", payload.get("action"), exc)
        raise BackendError("Could not reach the student service") from exc

    text = r.text
    try:
        data = json.loads(text)
    except ValueError as exc:
        log.error("Raw backend response: %s", text[:500])
        raise BackendError("Invalid JSON from backend") from exc

    if not data or not isinstance(data, dict) or data.get("ok") is False:
        message = data.get("message") if isinstance(data, dict) else None
        raise BackendError(message or "Unknown backend error")
    return data


def _new_student_id() -> str:
    return f"STU-{int(time.time() * 1000)}"


def register_student(fields: Mapping[str, Any], url: str) -> str:
    """Register a student and return the id they were stored under."""
    student = {
        "user_id": _new_student_id(),
        "role": "student",
        **{k: fields.get(k, "") for k in REGISTER_FIELDS},
    }
    data = call_backend({"action": "registerStudent", "student": student}, url)
    student_id = str(data.get("studentId") or student["user_id"])
    log.info("Registered student %s", student_id)
    return student_id


def login_student(email: str, first_name: str, last_name: str, url: str) -> StudentProfile:
    payload = {
        "action": "loginStudent",
        "email": email,
        "first_name": first_name,
        "last_name": last_name,
    }
    data = call_backend(payload, url)
    row = data.get("student")
    if not isinstance(row, dict):
        raise BackendError("Login response did not include a student record")
    profile = StudentProfile.from_dict(row)
    log.info("Logged in %s", profile.user_id or profile.email)
    return profile


def save_contact(message: ContactMessage, url: str) -> None:
    payload = {
        "action": "saveContact",
        "contact": {
            "name": message.name,
            "email": message.email,
            "subject": message.subject,
            "message": message.message,
        },
    }
    call_backend(payload, url)
    log.info("Contact message from %s saved", message.email)
