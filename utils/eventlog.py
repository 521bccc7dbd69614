# utils/eventlog.py
"""
Event log + diagnostic channel for the code viewer.

- log_event(): append one record to <artifacts>/code_viewer_log.jsonl.
- report_error(): write a one-line diagnostic to stderr and log `load_failed`.
"""

from __future__ import annotations
from pathlib import Path
from typing import Any, Dict, Optional
import sys

from utils.constants import EVENT_LOG_NAME
from utils.runtime import artifacts_dir, now_utc_iso
from utils.uilog import write_event_jsonl


def event_log_path() -> Path:
    return artifacts_dir() / EVENT_LOG_NAME


def log_event(event: str, **fields: Any) -> Dict[str, Any]:
    """Stamp and append an event record. Returns the record that was written."""
    record: Dict[str, Any] = {"ts_utc": now_utc_iso(), "event": event}
    record.update({k: v for k, v in fields.items() if v is not None})
    write_event_jsonl(event_log_path(), record)
    return record


def describe_error(error: BaseException) -> str:
    return f"{type(error).__name__}: {error}"


def report_error(error: BaseException, *, source: Optional[str] = None) -> str:
    """
    Diagnostic channel for load failures. Returns the message that was printed.
    """
    message = describe_error(error)
    line = f"[{source}] {message}" if source else message
    print(line, file=sys.stderr)
    log_event(
        "load_failed",
        source=source,
        error_type=type(error).__name__,
        error=str(error),
    )
    return line
