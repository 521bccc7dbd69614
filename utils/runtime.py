"""
utils/runtime.py
----------------
Environment-driven settings used by the app, screen and headless runner.
"""

from __future__ import annotations
import os
from datetime import datetime, timezone
from pathlib import Path

from utils.constants import ARTIFACTS_DIR, DEFAULT_ENCODING, RESOURCE_NAME

APP_DIR = Path(__file__).resolve().parent.parent


def env_flag(name: str) -> bool:
    """Return True iff the environment variable is exactly '1' (trimmed)."""
    return os.environ.get(name, "").strip() == "1"


def import_only() -> bool:
    return env_flag("CODE_VIEWER_APP_IMPORT_ONLY")


def resource_path() -> Path:
    """
    Path of the text resource to load.
    CODE_VIEWER_RESOURCE wins; otherwise code.txt next to app.py.
    """
    override = os.environ.get("CODE_VIEWER_RESOURCE", "").strip()
    if override:
        return Path(override).expanduser()
    return APP_DIR / RESOURCE_NAME


def encoding() -> str:
    return os.environ.get("CODE_VIEWER_ENCODING", "").strip() or DEFAULT_ENCODING


def artifacts_dir() -> Path:
    return Path(os.environ.get("CODE_VIEWER_ARTIFACTS_DIR", "").strip() or ARTIFACTS_DIR)


def now_utc_iso() -> str:
    """UTC timestamp in ISO-8601 without microseconds, with 'Z' suffix."""
    return datetime.now(timezone.utc).replace(microsecond=0).isoformat().replace("+00:00", "Z")
