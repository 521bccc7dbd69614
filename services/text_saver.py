"""
services/text_saver.py
----------------------
Persist a LineSequence under a suggested title.

- encode_lines: every line followed by the line ending ("" for no lines)
- suggested_filename: "<title>.<extension>"
- save_lines: atomic write into a directory (temp file + os.replace)
- download_payload: kwargs for st.download_button

Write errors are not caught here; they surface to the caller.
"""

from __future__ import annotations
from pathlib import Path
from typing import Any, Dict, Iterable, Union
import os
import tempfile

from utils.constants import DEFAULT_ENCODING, LINE_ENDING, SAVE_EXTENSION, SAVE_MIME
from utils.eventlog import log_event


def encode_lines(lines: Iterable[str], line_ending: str = LINE_ENDING) -> str:
    return "".join(f"{line}{line_ending}" for line in lines)


def suggested_filename(title: str, extension: str = SAVE_EXTENSION) -> str:
    ext = (extension or "").lstrip(".")
    return f"{title}.{ext}" if ext else title


def atomic_write_text(path: Path, text: str, encoding: str = DEFAULT_ENCODING) -> int:
    path.parent.mkdir(parents=True, exist_ok=True)
    # newline="" so the caller's line endings are written untouched
    tmp = tempfile.NamedTemporaryFile(
        "w", dir=str(path.parent), delete=False, encoding=encoding, newline=""
    )
    tmp_path = Path(tmp.name)
    try:
        with tmp:
            tmp.write(text)
        os.replace(tmp_path, path)
    except Exception:
        tmp_path.unlink(missing_ok=True)
        raise
    return path.stat().st_size


def save_lines(
    lines: Iterable[str],
    title: str,
    directory: Union[str, Path],
    *,
    extension: str = SAVE_EXTENSION,
    line_ending: str = LINE_ENDING,
    encoding: str = DEFAULT_ENCODING,
) -> Path:
    """Write `lines` to <directory>/<title>.<extension> and return the path."""
    out = Path(directory) / suggested_filename(title, extension)
    size = atomic_write_text(out, encode_lines(lines, line_ending), encoding=encoding)
    log_event("save_written", path=str(out), bytes=size)
    return out


def download_payload(
    lines: Iterable[str],
    title: str,
    *,
    extension: str = SAVE_EXTENSION,
    line_ending: str = LINE_ENDING,
    encoding: str = DEFAULT_ENCODING,
) -> Dict[str, Any]:
    """{"data", "file_name", "mime"} for st.download_button."""
    return {
        "data": encode_lines(lines, line_ending).encode(encoding),
        "file_name": suggested_filename(title, extension),
        "mime": SAVE_MIME,
    }
