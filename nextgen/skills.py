"""Turn free-text, comma-separated skill strings into comparable tokens."""
from __future__ import annotations

from typing import Any, Iterable

from nextgen.models import SkillSet


def normalize(raw: Any) -> SkillSet:
    """Split on commas, trim, lowercase and drop blanks.

    Never fails: None and empty input give the empty set, and non-string
    spreadsheet cells are stringified first.
    """
    if raw is None:
        return frozenset()
    text = raw if isinstance(raw, str) else str(raw)
    if not text:
        return frozenset()
    tokens = (piece.strip().lower() for piece in text.split(","))
    return frozenset(t for t in tokens if t)


def display_skills(skills: Iterable[str]) -> list[str]:
    return sorted(skills)
