# Ensures the project root is on sys.path so imports like `from services...` work,
# and keeps every test's event log under its own tmp dir.
import sys
from pathlib import Path

import pytest

# tests/ -> repo root
PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))


@pytest.fixture(autouse=True)
def isolated_artifacts(monkeypatch, tmp_path):
    art = tmp_path / "artifacts"
    monkeypatch.setenv("CODE_VIEWER_ARTIFACTS_DIR", str(art))
    monkeypatch.delenv("CODE_VIEWER_RESOURCE", raising=False)
    monkeypatch.delenv("CODE_VIEWER_ENCODING", raising=False)
    monkeypatch.delenv("CODE_VIEWER_APP_IMPORT_ONLY", raising=False)
    return art
