"""Pytest configuration for repository test runs."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

LEDGER_ENV_KEYS = (
    "LEDGER_DATA_ROOT",
    "LEDGER_ADMIN",
    "LEDGER_REGISTRATION_FEE",
    "LEDGER_MAX_DATASETS",
)


def pytest_sessionstart() -> None:
    """Add src directory to sys.path for test imports."""
    project_root = Path(__file__).resolve().parent.parent
    src_path = project_root / "src"
    if str(src_path) not in sys.path:
        sys.path.insert(0, str(src_path))


@pytest.fixture(autouse=True)
def isolated_ledger_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep host LEDGER_* variables out of config-dependent tests."""
    for key in LEDGER_ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
