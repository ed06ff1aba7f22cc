"""Pytest configuration and fixtures for mjson tests."""

import sys
from pathlib import Path

import pytest

# Ensure src directory is in Python path before any imports
src_path = Path(__file__).resolve().parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

GREEN = "\x1b[32m"
RESET = "\x1b[0m"


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep user-level MJSON_* settings out of the tests."""
    for name in ("MJSON_INDENT", "MJSON_ENCODING", "MJSON_STRING_COLOR", "MJSON_DEBUG"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def jsonc_text():
    """JSON with comments and loose whitespace."""
    return """
    // settings
    {
        "name": "mjson", /* inline */
        "tags": ["cli", "json"],
        "nested": {"url": "http://example.com/a//b", "n": 3}
    }
    """


@pytest.fixture
def source_file(tmp_path, jsonc_text):
    path = tmp_path / "source.jsonc"
    path.write_text(jsonc_text, encoding="utf-8")
    return path
