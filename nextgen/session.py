"""Persist the currently logged-in student between runs (one profile at a time)."""
from __future__ import annotations

import json
from pathlib import Path

from nextgen.log import get_logger
from nextgen.models import StudentProfile

log = get_logger(__name__)


class SessionStore:
    def __init__(self, path: Path) -> None:
        self.path = Path(path)

    def save(self, profile: StudentProfile) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(profile.to_dict(), indent=2), encoding="utf-8")
        log.debug("Session saved for %s", profile.user_id or profile.email)

    def load(self) -> StudentProfile | None:
        """Cached profile, or None when absent or unreadable."""
        if not self.path.exists():
            return None
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            log.warning("Discarding unreadable session file %s: %s", self.path.name, exc)
            return None
        if not isinstance(data, dict):
            return None
        return StudentProfile.from_dict(data)

    def clear(self) -> None:
        self.path.unlink(missing_ok=True)
        log.debug("Session cleared")
