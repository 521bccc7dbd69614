"""
state.py

Session-owned presenter for the code viewer. Non-UI: the screen reads
`display_text` / `save_visible` and calls `save()`; nothing here imports Streamlit.

    Uninitialized -> request() -> Loading -> on_success() -> Loaded
                                          -> on_failure() -> Failed

Only Loaded can save. A result is applied at most once.
"""

from __future__ import annotations

from concurrent.futures import Future, TimeoutError as LoadTimeout
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Callable, Iterable, Optional, Union

from services.text_loader import LineSequence, LoadFailed, Loaded, LoadResult, request_lines
from utils.constants import DEFAULT_ENCODING, SAVE_TITLE
from utils.eventlog import log_event, report_error

Reporter = Callable[..., object]
Requester = Callable[[Union[str, Path], str], "Future[LoadResult]"]


class Phase(str, Enum):
    UNINITIALIZED = "uninitialized"
    LOADING = "loading"
    LOADED = "loaded"
    FAILED = "failed"


class SaveUnavailableError(RuntimeError):
    """Save was invoked before a successful load."""


@dataclass(frozen=True)
class SaveRequest:
    lines: LineSequence
    title: str = SAVE_TITLE


class CodePresenter:
    def __init__(self, *, report: Reporter = report_error, title: str = SAVE_TITLE) -> None:
        self.phase = Phase.UNINITIALIZED
        self.display_text: Optional[str] = None
        self.save_visible = False
        self.error: Optional[BaseException] = None
        self.source: Optional[str] = None
        self.title = title
        self._lines: Optional[LineSequence] = None
        self._pending: Optional["Future[LoadResult]"] = None
        self._report = report

    # ---------- load ----------

    def request(
        self,
        path: Union[str, Path],
        encoding: str = DEFAULT_ENCODING,
        *,
        requester: Requester = request_lines,
    ) -> "Future[LoadResult]":
        """Issue the one and only load. A second call raises RuntimeError."""
        if self.phase is not Phase.UNINITIALIZED:
            raise RuntimeError(f"load already requested (phase={self.phase.value})")
        self.source = str(path)
        self.phase = Phase.LOADING
        log_event("load_requested", path=self.source, encoding=encoding)
        self._pending = requester(path, encoding)
        return self._pending

    @property
    def pending(self) -> Optional["Future[LoadResult]"]:
        return self._pending if self.phase is Phase.LOADING else None

    def wait(self, timeout: Optional[float] = None) -> LoadResult:
        """Block on the in-flight load and apply its result."""
        if self._pending is None or self.phase is not Phase.LOADING:
            raise RuntimeError(f"no load in flight (phase={self.phase.value})")
        try:
            result = self._pending.result(timeout=timeout)
        except LoadTimeout:
            raise
        except Exception as e:
            # a requester that raised instead of returning LoadFailed
            result = LoadFailed(error=e, source=self.source)
        self.apply(result)
        return result

    def apply(self, result: LoadResult) -> None:
        if isinstance(result, Loaded):
            self.on_success(result.lines)
        elif isinstance(result, LoadFailed):
            self.on_failure(result.error)
        else:
            raise TypeError(f"unexpected load result: {result!r}")

    def on_success(self, lines: Iterable[str]) -> None:
        self._expect_loading()
        self._lines = tuple(lines)
        self.display_text = "\n".join(self._lines)
        self.save_visible = True
        self.phase = Phase.LOADED
        log_event("load_succeeded", path=self.source, lines=len(self._lines))

    def on_failure(self, error: BaseException) -> None:
        # display_text / save_visible stay as they were
        self._expect_loading()
        self.error = error
        self.phase = Phase.FAILED
        self._report(error, source=self.source)

    def _expect_loading(self) -> None:
        if self.phase is not Phase.LOADING:
            raise RuntimeError(f"load result delivered in phase {self.phase.value}")

    # ---------- save ----------

    @property
    def lines(self) -> Optional[LineSequence]:
        return self._lines

    @property
    def can_save(self) -> bool:
        return self.phase is Phase.LOADED

    def save(self) -> SaveRequest:
        """Return the stored lines (not the joined text) with the save title."""
        if not self.can_save or self._lines is None:
            raise SaveUnavailableError(f"nothing to save (phase={self.phase.value})")
        return SaveRequest(lines=self._lines, title=self.title)
