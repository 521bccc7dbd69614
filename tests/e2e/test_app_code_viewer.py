"""
tests/e2e/test_app_code_viewer.py
Scripts app.py with Streamlit's AppTest: load -> display -> save control.
"""

from pathlib import Path

import pytest
from streamlit.testing.v1 import AppTest

from state import Phase
from utils.constants import PRESENTER_KEY
from utils.eventlog import event_log_path
from utils.uilog import read_jsonl

APP = str(Path(__file__).resolve().parents[2] / "app.py")

pytestmark = pytest.mark.e2e


def _app(monkeypatch, resource: Path) -> AppTest:
    monkeypatch.setenv("CODE_VIEWER_RESOURCE", str(resource))
    return AppTest.from_file(APP, default_timeout=15)


def test_loaded_code_is_shown_with_save_control(monkeypatch, tmp_path):
    src = tmp_path / "code.txt"
    src.write_text("a\nb\nc\n", encoding="utf-8")
    at = _app(monkeypatch, src).run()

    assert not at.exception
    assert not at.error
    assert [c.value for c in at.code] == ["a\nb\nc"]
    assert len(at.get("download_button")) == 1
    assert at.session_state[PRESENTER_KEY].phase is Phase.LOADED


def test_empty_file_still_offers_save(monkeypatch, tmp_path):
    src = tmp_path / "code.txt"
    src.write_text("", encoding="utf-8")
    at = _app(monkeypatch, src).run()

    assert not at.exception
    assert [c.value for c in at.code] == [""]
    assert len(at.get("download_button")) == 1


def test_missing_file_shows_error_and_no_save(monkeypatch, tmp_path):
    at = _app(monkeypatch, tmp_path / "missing.txt").run()

    assert not at.exception
    assert len(at.error) == 1
    assert "FileNotFoundError" in at.error[0].value
    assert len(at.code) == 0
    assert len(at.get("download_button")) == 0


def test_rerun_does_not_reload(monkeypatch, tmp_path):
    src = tmp_path / "code.txt"
    src.write_text("first\n", encoding="utf-8")
    at = _app(monkeypatch, src).run()
    src.write_text("second\n", encoding="utf-8")
    at.run()

    assert [c.value for c in at.code] == ["first"]
    requested = [e for e in read_jsonl(event_log_path()) if e["event"] == "load_requested"]
    assert len(requested) == 1


def test_failed_load_is_not_retried(monkeypatch, tmp_path):
    src = tmp_path / "code.txt"
    at = _app(monkeypatch, src).run()
    src.write_text("late\n", encoding="utf-8")
    at.run()

    assert len(at.code) == 0
    assert len(at.error) == 1
    assert at.session_state[PRESENTER_KEY].phase is Phase.FAILED


def test_save_control_receives_original_lines(monkeypatch, tmp_path):
    import screens.code_viewer as screen

    captured = []

    def fake_save_control(payload, *args, **kwargs):
        captured.append(payload)
        return False

    monkeypatch.setattr(screen, "save_control", fake_save_control)
    src = tmp_path / "code.txt"
    src.write_text("a\nb\nc\n", encoding="utf-8")
    at = _app(monkeypatch, src).run()

    assert not at.exception
    assert captured == [
        {
            "data": b"a\nb\nc\n",
            "file_name": "COVID-19 Machine Learning Detection.txt",
            "mime": "text/plain",
        }
    ]
