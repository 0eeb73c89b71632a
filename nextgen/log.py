"""Logging setup shared by the Streamlit app, the report CLI and the tests.

Everything logs through ``get_logger(__name__)``. The first call installs a
stdout handler and, unless ``NGM_LOG_TO_FILE=0``, a daily file under
``logs/``. ``LOG_LEVEL`` picks the console level; the file always gets DEBUG.
"""
from __future__ import annotations

import logging
import os
import sys
from datetime import date
from pathlib import Path

LOG_DIR = Path(__file__).resolve().parent.parent / "logs"
LOG_FORMAT = "%(asctime)s  %(levelname)-8s  %(name)s  %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Marks handlers we installed so Streamlit reruns don't add duplicates.
_HANDLER_TAG = "_nextgen_handler"


def _env_level() -> int:
    name = os.environ.get("LOG_LEVEL", "INFO").strip().upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.INFO


def _env_to_file() -> bool:
    return os.environ.get("NGM_LOG_TO_FILE", "1").strip().lower() not in ("0", "false", "no")


def _tagged(handler: logging.Handler, level: int) -> logging.Handler:
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    setattr(handler, _HANDLER_TAG, True)
    return handler


def log_file_path(log_dir: Path | None = None) -> Path:
    return (log_dir or LOG_DIR) / f"nextgen_{date.today():%Y-%m-%d}.log"


def configure_logging(
    level: int | None = None,
    *,
    to_file: bool | None = None,
    log_dir: Path | None = None,
) -> None:
    """Install the console (and file) handlers once; later calls only adjust levels."""
    level = _env_level() if level is None else level
    to_file = _env_to_file() if to_file is None else to_file

    root = logging.getLogger()
    ours = [h for h in root.handlers if getattr(h, _HANDLER_TAG, False)]
    root.setLevel(min(level, logging.DEBUG) if to_file else level)

    if ours:
        for h in ours:
            if isinstance(h, logging.StreamHandler) and not isinstance(h, logging.FileHandler):
                h.setLevel(level)
        return

    root.addHandler(_tagged(logging.StreamHandler(sys.stdout), level))
    if not to_file:
        return

    path = log_file_path(log_dir)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        root.addHandler(_tagged(logging.FileHandler(path, encoding="utf-8"), logging.DEBUG))
    except OSError as exc:
        root.warning("Cannot write %s (%s); logging to stdout only", path, exc)


def get_logger(name: str) -> logging.Logger:
    if not any(getattr(h, _HANDLER_TAG, False) for h in logging.getLogger().handlers):
        configure_logging()
    return logging.getLogger(name)
