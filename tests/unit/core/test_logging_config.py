"""Unit tests for structlog setup."""

from __future__ import annotations

import pytest

from core import logging_config


def test_get_logger_configures_structlog_once(monkeypatch: pytest.MonkeyPatch) -> None:
    """Repeated logger lookups should install the processor chain once."""
    calls: list[dict[str, object]] = []
    monkeypatch.setattr(logging_config, "_CONFIGURED", False)
    monkeypatch.setattr(
        logging_config.structlog, "configure", lambda **kwargs: calls.append(kwargs)
    )

    logging_config.get_logger("ledger.first")
    logging_config.get_logger("ledger.second")

    assert len(calls) == 1
    assert calls[0]["cache_logger_on_first_use"] is True
