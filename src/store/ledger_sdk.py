"""Python SDK for ledger operations.

This module wires the ledger state, registry, admin settings, and store
into one client. Successful mutations are persisted before returning. When
the write fails the in-memory state is rolled back to its value before the
operation; a registration fee already handed to the value-transfer
collaborator is not refunded.
"""

from __future__ import annotations

from typing import Sequence

from core.config import LedgerConfig
from core.errors import LedgerStoreError
from core.logging_config import get_logger
from core.types import Dataset, DatasetUpdate, LedgerResult
from registry.admin_config import AdminConfig
from registry.collaborators import SequenceSource, ValueTransfer
from registry.dataset_registry import DatasetRegistry
from registry.ledger_state import LedgerState
from store.ledger_store import LedgerStore

_LOGGER = get_logger(__name__)


class LedgerClient:
    """Primary SDK entry point for dataset registration workflows."""

    def __init__(
        self,
        sequence: SequenceSource,
        transfer: ValueTransfer,
        config: LedgerConfig | None = None,
    ) -> None:
        """Create SDK client and load persisted state.

        Args:
            sequence: Block height source for timestamps.
            transfer: Value-transfer primitive used for registration fees.
            config: Optional runtime configuration.

        Raises:
            LedgerStoreError: If persisted state cannot be loaded.
        """
        self._config = config or LedgerConfig.from_env()
        self._store = LedgerStore(self._config)
        self._state = self._store.load()
        self._registry = DatasetRegistry(self._state, sequence, transfer)
        self._admin = AdminConfig(self._state)

    @property
    def admin(self) -> str:
        return self._admin.admin

    @property
    def registration_fee(self) -> int:
        return self._admin.registration_fee

    def register(
        self,
        caller: str,
        content_hash: bytes,
        title: str,
        description: str,
        co_authors: Sequence[str],
        category: str,
        tags: Sequence[str],
        license: str,
        metadata: bytes | None = None,
    ) -> LedgerResult[int]:
        """Register a dataset and persist the ledger on success.

        Returns:
            Result holding the new dataset id, or the rejection reason.

        Raises:
            LedgerStoreError: If the updated state cannot be written. The
                ledger is rolled back; the fee transfer is not.
        """
        with self._state.lock:
            snapshot = self._state.snapshot()
            result = self._registry.register(
                caller,
                content_hash,
                title,
                description,
                co_authors,
                category,
                tags,
                license,
                metadata,
            )
            return self._persist_if_applied(result, snapshot)

    def update(
        self,
        caller: str,
        content_hash: bytes,
        new_title: str,
        new_description: str,
    ) -> LedgerResult[bool]:
        """Update title and description of an owned dataset."""
        with self._state.lock:
            snapshot = self._state.snapshot()
            result = self._registry.update(caller, content_hash, new_title, new_description)
            return self._persist_if_applied(result, snapshot)

    def deactivate(self, caller: str, content_hash: bytes) -> LedgerResult[bool]:
        """Deactivate an owned dataset."""
        with self._state.lock:
            snapshot = self._state.snapshot()
            result = self._registry.deactivate(caller, content_hash)
            return self._persist_if_applied(result, snapshot)

    def set_admin(self, caller: str, new_admin: str) -> LedgerResult[bool]:
        with self._state.lock:
            snapshot = self._state.snapshot()
            result = self._admin.set_admin(caller, new_admin)
            return self._persist_if_applied(result, snapshot)

    def set_fee(self, caller: str, new_fee: int) -> LedgerResult[bool]:
        with self._state.lock:
            snapshot = self._state.snapshot()
            result = self._admin.set_fee(caller, new_fee)
            return self._persist_if_applied(result, snapshot)

    def get_by_hash(self, content_hash: bytes) -> Dataset | None:
        return self._registry.get_by_hash(content_hash)

    def get_by_id(self, dataset_id: int) -> Dataset | None:
        return self._registry.get_by_id(dataset_id)

    def get_update(self, dataset_id: int) -> DatasetUpdate | None:
        return self._registry.get_update(dataset_id)

    def count(self) -> int:
        return self._registry.count()

    def _persist_if_applied(
        self,
        result: LedgerResult,
        snapshot: LedgerState,
    ) -> LedgerResult:
        if not result.ok:
            return result
        try:
            self._store.save(self._state)
        except LedgerStoreError:
            self._state.restore(snapshot)
            _LOGGER.warning("ledger_state_rolled_back", next_id=snapshot.next_id)
            raise
        return result
