"""Pytest configuration for the `tests/` suite.

Adds the repository root to `sys.path` so the suite runs from a plain
checkout as well as from an editable install, and keeps the caller's
environment (UNI_* variables, PATH lookups) from leaking into tests.
"""

from __future__ import annotations

import sys
from pathlib import Path
from unittest.mock import patch

import pytest

_REPO_ROOT = Path(__file__).resolve().parents[1]

if str(_REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(_REPO_ROOT))


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for var in ("UNI_PKG", "UNI_HTTP_TIMEOUT", "UNI_SEARCH_LIMIT", "UNI_FALLBACK_MANAGER"):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def project_dir(tmp_path, monkeypatch):
    """An empty working directory."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def mock_which():
    """shutil.which that finds nothing unless told otherwise."""
    with patch("shutil.which") as mock:
        mock.return_value = None
        yield mock


@pytest.fixture
def all_found(mock_which):
    """shutil.which that finds every executable."""
    mock_which.side_effect = lambda name: f"/usr/bin/{name}"
    return mock_which


@pytest.fixture
def mock_run():
    with patch("subprocess.run") as mock:
        mock.return_value.returncode = 0
        yield mock
