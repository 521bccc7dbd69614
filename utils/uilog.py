# utils/uilog.py
"""
Append-only JSONL writer shared by the event log and the headless runner.

    write_event_jsonl(path, event) -> bool
    read_jsonl(path) -> iterator of dicts

- One JSON object per line; parent directories created on demand.
- Short retry on PermissionError (Windows file locks).
- Never raises: a lost log line must not break loading or saving.
"""

from __future__ import annotations

import io
import json
import time
from pathlib import Path
from typing import Any, Dict, Iterator, Union

_RETRIES = 3
_RETRY_DELAY_SEC = 0.05


def _to_line(event: Dict[str, Any]) -> str:
    return json.dumps(event, ensure_ascii=False, separators=(",", ":"), default=str) + "\n"


def write_event_jsonl(path: Union[str, Path], event: Dict[str, Any]) -> bool:
    """
    Append `event` as one line to `path`.

    Returns True when the line was written, False otherwise.
    """
    try:
        p = Path(path)
        p.parent.mkdir(parents=True, exist_ok=True)
        line = _to_line(event)
        for attempt in range(_RETRIES):
            try:
                with io.open(p, "a", encoding="utf-8", newline="\n") as f:
                    f.write(line)
                return True
            except PermissionError:
                if attempt == _RETRIES - 1:
                    return False
                time.sleep(_RETRY_DELAY_SEC)
    except Exception:
        # best-effort logging
        return False
    return False


def read_jsonl(path: Union[str, Path]) -> Iterator[Dict[str, Any]]:
    """Yield decoded records; malformed lines and a missing file are skipped."""
    try:
        with io.open(path, "r", encoding="utf-8") as f:
            for raw in f:
                raw = raw.strip()
                if not raw:
                    continue
                try:
                    yield json.loads(raw)
                except ValueError:
                    continue
    except OSError:
        return
