"""
services/text_loader.py
=======================
Read a text resource as an ordered, immutable LineSequence.

The asynchronous entry point returns a single `concurrent.futures.Future` that
resolves exactly once with either `Loaded(lines)` or `LoadFailed(error)`. The
future never raises; failures are carried in the result.

Public API:
- split_lines, read_lines          (sync)
- load_lines                       (sync, returns LoadResult)
- request_lines                    (async, returns Future[LoadResult])
"""

from __future__ import annotations
from concurrent.futures import Executor, Future, ThreadPoolExecutor
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple, Union

from utils.constants import DEFAULT_ENCODING

__all__ = [
    "LineSequence",
    "Loaded",
    "LoadFailed",
    "LoadResult",
    "split_lines",
    "read_lines",
    "load_lines",
    "request_lines",
]

LineSequence = Tuple[str, ...]


@dataclass(frozen=True)
class Loaded:
    lines: LineSequence
    source: Optional[str] = None


@dataclass(frozen=True)
class LoadFailed:
    error: BaseException
    source: Optional[str] = None


LoadResult = Union[Loaded, LoadFailed]


def split_lines(text: str) -> LineSequence:
    """
    Split on \\r\\n, \\r or \\n. A single trailing terminator does not add an
    empty line; interior empty lines are kept. "" -> ().
    """
    if not text:
        return ()
    normalized = text.replace("\r\n", "\n").replace("\r", "\n")
    if normalized.endswith("\n"):
        normalized = normalized[:-1]
    return tuple(normalized.split("\n"))


def read_lines(path: Union[str, Path], encoding: str = DEFAULT_ENCODING) -> LineSequence:
    """Read `path` and split it. OSError, LookupError and ValueError propagate."""
    # newline="" keeps \r so split_lines sees the raw terminators
    with open(Path(path), "r", encoding=encoding, newline="") as f:
        return split_lines(f.read())


def load_lines(path: Union[str, Path], encoding: str = DEFAULT_ENCODING) -> LoadResult:
    source = str(path)
    try:
        return Loaded(lines=read_lines(path, encoding=encoding), source=source)
    except (OSError, LookupError, ValueError) as e:
        # unreadable path, unknown codec, undecodable bytes, NUL in path
        return LoadFailed(error=e, source=source)


def request_lines(
    path: Union[str, Path],
    encoding: str = DEFAULT_ENCODING,
    executor: Optional[Executor] = None,
) -> "Future[LoadResult]":
    """
    Start one background read of `path`.

    Without an executor, a private single-worker pool is used and shut down
    once the read has been submitted (the pending read still completes).
    """
    if executor is not None:
        return executor.submit(load_lines, path, encoding)
    pool = ThreadPoolExecutor(max_workers=1, thread_name_prefix="code-viewer-load")
    try:
        return pool.submit(load_lines, path, encoding)
    finally:
        pool.shutdown(wait=False)
