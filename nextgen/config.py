"""Load dashboard settings from config/settings.yaml, .env and the environment."""
from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv

from nextgen.log import get_logger

log = get_logger(__name__)

load_dotenv()

PROJECT_ROOT: Path = Path(__file__).resolve().parent.parent
CONFIG_DIR: Path = PROJECT_ROOT / "config"
SETTINGS_PATH: Path = CONFIG_DIR / "settings.yaml"
REPORTS_DIR: Path = PROJECT_ROOT / "reports"

DEFAULT_SETTINGS: dict[str, Any] = {
    "student_api_url": "",
    "jobs_path": "excel/synthetic_jobs.xlsx",
    "use_mock_jobs": False,
    "top_n": 3,
    "session_path": "data/current_user.json",
}

# Environment variable -> settings key
_ENV_OVERRIDES: dict[str, str] = {
    "NGM_STUDENT_API_URL": "student_api_url",
    "NGM_JOBS_PATH": "jobs_path",
    "NGM_USE_MOCK_JOBS": "use_mock_jobs",
    "NGM_SESSION_PATH": "session_path",
}

_TRUTHY = ("1", "true", "yes", "on")


def get_env(key: str, default: str = "") -> str:
    return os.environ.get(key, default).strip()


def _as_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in _TRUTHY


def resolve_path(value: str | Path) -> Path:
    """Resolve relative paths against the project root."""
    p = Path(value).expanduser()
    return p if p.is_absolute() else PROJECT_ROOT / p


def load_settings(path: Path | None = None) -> dict[str, Any]:
    settings = dict(DEFAULT_SETTINGS)
    path = path or SETTINGS_PATH

    if path.exists():
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
        if not isinstance(data, dict):
            log.warning("Ignoring %s: expected a mapping, got %s", path.name, type(data).__name__)
            data = {}
        settings.update({k: v for k, v in data.items() if v is not None})
    else:
        log.debug("No settings file at %s, using defaults", path)

    for env_key, setting in _ENV_OVERRIDES.items():
        value = get_env(env_key)
        if value:
            settings[setting] = value

    settings["use_mock_jobs"] = _as_bool(settings["use_mock_jobs"])
    try:
        settings["top_n"] = max(int(settings["top_n"]), 1)
    except (TypeError, ValueError):
        log.warning("Invalid top_n %r, falling back to %d", settings["top_n"], DEFAULT_SETTINGS["top_n"])
        settings["top_n"] = DEFAULT_SETTINGS["top_n"]
    settings["jobs_path"] = resolve_path(settings["jobs_path"])
    settings["session_path"] = resolve_path(settings["session_path"])
    return settings

