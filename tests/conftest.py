"""
Shared fixtures for fast-cc-hooks tests.
"""

import pytest

from fastcc.commit import Validator
from fastcc.config import Config


@pytest.fixture
def make_validator():
    """Build a Validator from Config keyword overrides."""
    def _make(**overrides) -> Validator:
        return Validator(Config(**overrides))
    return _make


@pytest.fixture
def isolated_cwd(tmp_path, monkeypatch):
    """Run in an empty directory with no FASTCC_* overrides."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("FASTCC_CONFIG", raising=False)
    monkeypatch.delenv("FASTCC_LOG_LEVEL", raising=False)
    monkeypatch.delenv("FASTCC_LOG_FORMAT", raising=False)
    return tmp_path
