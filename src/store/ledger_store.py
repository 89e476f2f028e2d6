"""Ledger state persistence.

This module saves and loads the whole ledger state as one JSON
document under the configured data root.
"""

from __future__ import annotations

import json
from pathlib import Path

from core.config import LedgerConfig
from core.constants import LEDGER_DIR_NAME, STATE_FILE_NAME, STATE_FORMAT_VERSION
from core.errors import LedgerStoreError
from core.logging_config import get_logger
from registry.ledger_state import LedgerState
from store.state_payload import state_from_payload, state_to_payload

_LOGGER = get_logger(__name__)


class LedgerStore:
    """Filesystem-backed ledger state store."""

    def __init__(self, config: LedgerConfig) -> None:
        """Initialize store from config.

        Args:
            config: Runtime configuration.
        """
        self._config = config
        self._ledger_root = config.data_root / LEDGER_DIR_NAME
        self._ledger_root.mkdir(parents=True, exist_ok=True)

    @property
    def state_path(self) -> Path:
        return self._ledger_root / STATE_FILE_NAME

    def load(self) -> LedgerState:
        """Load persisted state, or a fresh state when none exists.

        Returns:
            Ledger state aggregate.

        Raises:
            LedgerStoreError: If the state file is unreadable or invalid.
        """
        state_path = self.state_path
        if not state_path.exists():
            return LedgerState.from_config(self._config)
        try:
            payload = json.loads(state_path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as error:
            raise LedgerStoreError(
                f"Failed to parse ledger state at {state_path}: {error.msg}. "
                "Restore the state file from a backup."
            ) from error
        except OSError as error:
            raise LedgerStoreError(f"Failed to read ledger state {state_path}: {error}.") from error
        if not isinstance(payload, dict):
            raise LedgerStoreError(
                f"Failed to parse ledger state at {state_path}: "
                "expected JSON object at top level."
            )
        if payload.get("format_version") != STATE_FORMAT_VERSION:
            raise LedgerStoreError(
                f"Unsupported ledger state format at {state_path}: "
                f"expected version {STATE_FORMAT_VERSION}, got {payload.get('format_version')!r}."
            )
        try:
            state = state_from_payload(payload)
        except (KeyError, TypeError, ValueError) as error:
            raise LedgerStoreError(f"Invalid ledger state at {state_path}: {error}.") from error
        _LOGGER.info("ledger_state_loaded", state_path=str(state_path), dataset_count=state.next_id)
        return state

    def save(self, state: LedgerState) -> None:
        """Write the full state to disk.

        Args:
            state: Ledger state to persist.

        Raises:
            LedgerStoreError: If the state file cannot be written.
        """
        with state.lock:
            payload = state_to_payload(state)
        state_path = self.state_path
        try:
            state_path.write_text(json.dumps(payload, indent=2) + "\n", encoding="utf-8")
        except OSError as error:
            raise LedgerStoreError(
                f"Failed to write ledger state {state_path}: {error}."
            ) from error
        _LOGGER.info(
            "ledger_state_saved",
            state_path=str(state_path),
            dataset_count=payload["next_id"],
        )
