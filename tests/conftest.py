"""
Pytest configuration and shared fixtures.
"""

import json
from pathlib import Path
from typing import Any, Dict

import pytest

from campusmatch.logger import reset_logger


@pytest.fixture
def isolated_env(monkeypatch, tmp_path):
    """Keep CLI logs out of the repo and start each test with a fresh logger."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("CAMPUSMATCH_LOG_DIR", "")
    monkeypatch.delenv("CAMPUSMATCH_CASE_SENSITIVE", raising=False)
    monkeypatch.delenv("CAMPUSMATCH_LOG_LEVEL", raising=False)
    reset_logger()
    yield
    reset_logger()


@pytest.fixture
def valid_pair() -> Dict[str, Any]:
    """Two users' skill tags."""
    return {
        "a": ["Python", "Go"],
        "b": ["python", "rust"],
    }


@pytest.fixture
def invalid_pair() -> Dict[str, Any]:
    """Payload with a missing side and a non-string label."""
    return {
        "a": ["Python", 3],
    }


@pytest.fixture
def pair_file(tmp_path, valid_pair) -> Path:
    path = tmp_path / "pair.json"
    path.write_text(json.dumps(valid_pair), encoding="utf-8")
    return path
